"""
Application bootstrap and dependency wiring.
This is the composition root where configuration, logging and the
validator engine are put together.
"""

from typing import Any, Optional

from formrules.application.config import Config, get_config
from formrules.application.form_field import FormField
from formrules.application.ports import PresenceVerifier, SettingsSource, ValidatorFactory
from formrules.domain.rules.engine import validator_factory
from formrules.infrastructure.settings import EnvironmentSettings
from formrules.shared.logging import configure_logging


def bootstrap_config(settings: Optional[SettingsSource] = None) -> Config:
    """
    Load configuration and configure logging from it.

    Args:
        settings: Settings source; environment variables when omitted

    Returns:
        Configured Config instance
    """
    config = get_config(settings or EnvironmentSettings())
    configure_logging(log_level=config.LOG_LEVEL, json_logs=config.json_logs)
    return config


def build_validator_factory(
    config: Config,
    presence_verifier: Optional[PresenceVerifier] = None,
) -> ValidatorFactory:
    """Validator factory honoring the configured failure policy."""
    return validator_factory(
        presence_verifier=presence_verifier,
        stop_on_first_failure=config.STOP_ON_FIRST_FAILURE,
    )


def make_field(config: Config, column: Any, label: Optional[str] = None, form: Any = None) -> FormField:
    """Field using the configured composite key separator."""
    return FormField(
        column,
        label,
        form=form,
        composite_key_separator=config.COMPOSITE_KEY_SEPARATOR,
    )
