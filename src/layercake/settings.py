from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from layercake.configuration import Environment
from layercake.registry import ExtendedRegistry, Registry


class LayercakeSettings(BaseSettings):
    """Select which fixed registry an application builds.

    Read from ``LAYERCAKE_ENVIRONMENT`` and ``LAYERCAKE_EXTENDED`` when not
    passed explicitly. Components never see these settings; they only choose
    the composition root.
    """

    model_config = SettingsConfigDict(env_prefix="LAYERCAKE_", frozen=True)

    environment: Environment = Environment.PRODUCTION
    extended: bool = False


def registry_from_settings(settings: LayercakeSettings | None = None) -> Registry:
    """Build the registry described by ``settings``.

    Args:
        settings: Settings to use. Defaults to ``LayercakeSettings()`` read from
            the process environment.

    Returns:
        An ``ExtendedRegistry`` when ``settings.extended`` is set, otherwise a
        ``Registry``, bound to ``settings.environment``.

    """
    if settings is None:
        settings = LayercakeSettings()
    registry_type = ExtendedRegistry if settings.extended else Registry
    return registry_type.for_environment(settings.environment)
