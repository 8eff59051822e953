"""Application configuration for formrules."""

from enum import Enum

from formrules.application.ports import SettingsSource


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "console")


class Config:
    """Application configuration loaded from a settings source."""

    def __init__(self, settings: SettingsSource):
        """Initialize configuration with a settings source."""
        self.settings = settings
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration values."""
        self.ENVIRONMENT = Environment(self.settings.get("ENVIRONMENT", "development").lower())

        # Logging
        self.LOG_LEVEL = self.settings.get("LOG_LEVEL", "INFO").upper()
        self.LOG_FORMAT = self.settings.get("LOG_FORMAT", "json").lower()

        # Multi-column fields: key = column + separator + position
        self.COMPOSITE_KEY_SEPARATOR = self.settings.get("COMPOSITE_KEY_SEPARATOR", "")

        self.STOP_ON_FIRST_FAILURE = self.settings.get("STOP_ON_FIRST_FAILURE", "false") == "true"

    @property
    def json_logs(self) -> bool:
        return self.LOG_FORMAT == "json"

    def validate(self) -> None:
        """Validate configuration values."""
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL {self.LOG_LEVEL} is not one of {', '.join(LOG_LEVELS)}")

        if self.LOG_FORMAT not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT {self.LOG_FORMAT} is not one of {', '.join(LOG_FORMATS)}")

        if self.ENVIRONMENT == Environment.PRODUCTION and self.LOG_LEVEL == "DEBUG":
            raise ValueError("DEBUG logging not allowed in production")


def get_config(settings: SettingsSource) -> Config:
    """
    Get validated application configuration.

    Args:
        settings: Settings source implementation

    Returns:
        Validated configuration instance
    """
    config = Config(settings)
    config.validate()
    return config
