"""CRM analytics: statistics and adaptive axis engine for dashboard charts."""

from crm_analytics.settings import AnalyticsSettings, get_settings

__all__ = ["get_settings", "AnalyticsSettings"]
