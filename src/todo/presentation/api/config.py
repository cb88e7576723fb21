"""API configuration adapter.

Bridges the centralized todo_config settings with the API layer.
"""

from todo_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Get settings from centralized configuration.

    Kept as its own dependency so tests can override it per app instance.
    """
    return get_settings()
