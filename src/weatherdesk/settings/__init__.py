"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
"""

from weatherdesk.settings.user import API_KEY_PLACEHOLDER, UserSettings

__all__ = ["API_KEY_PLACEHOLDER", "UserSettings"]
