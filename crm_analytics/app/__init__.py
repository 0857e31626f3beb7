"""HTTP application for the CRM analytics service."""
