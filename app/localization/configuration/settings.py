"""Runtime configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from localization.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Translation runtime configuration settings - main aggregator.

    Environment Variables:
        APP_NAME: Application name attached to log entries
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name ("production" enables JSON logs)

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()

        if settings.is_production:
            # Production-specific logic...

        default_locale = settings.i18n.default_locale
        ```
    """

    APP_NAME: str = "localization"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the runtime is deployed in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get process-scoped settings.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment should call ``get_settings.cache_clear()``.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
