"""Configuration package.

Import from ``catalog_admin.config.settings`` directly where needed so that
settings are only built when first used.
"""

__all__: list[str] = []
