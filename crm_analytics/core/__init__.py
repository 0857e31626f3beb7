"""Core modules of the CRM analytics service."""
