"""Configuration variants that every component is wired against."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from layercake.exceptions import LayercakeUnknownEnvironmentError


class Environment(str, Enum):
    """Names of the environments a registry can be bound to."""

    PRODUCTION = "production"
    TEST = "test"


class ConfigurationProvider:
    """Supply the environment name that components derive their values from."""

    value: str


@dataclass(frozen=True)
class DefaultConfiguration(ConfigurationProvider):
    """Configuration bound by the production registry."""

    value: str = field(default=Environment.PRODUCTION.value, init=False)


@dataclass(frozen=True)
class TestingConfiguration(ConfigurationProvider):
    """Configuration bound by the testing registry."""

    value: str = field(default=Environment.TEST.value, init=False)


_VARIANTS: dict[Environment, type[ConfigurationProvider]] = {
    Environment.PRODUCTION: DefaultConfiguration,
    Environment.TEST: TestingConfiguration,
}


def configuration_for(environment: Environment | str) -> ConfigurationProvider:
    """Build the configuration variant for an environment.

    Args:
        environment: An ``Environment`` member or its string value.

    Returns:
        A new ``DefaultConfiguration`` or ``TestingConfiguration``.

    Raises:
        LayercakeUnknownEnvironmentError: If the name matches no variant.

    """
    try:
        selected = Environment(environment)
    except ValueError as error:
        known = ", ".join(repr(member.value) for member in Environment)
        msg = f"Unknown environment {environment!r}; expected one of {known}."
        raise LayercakeUnknownEnvironmentError(msg) from error
    return _VARIANTS[selected]()
