"""Components of the basic example: ``A`` depends on configuration, ``B`` on both."""

from __future__ import annotations

from dataclasses import dataclass, field

from layercake.configuration import ConfigurationProvider
from layercake.validators import validate_dependency


class ProvidesA:
    """Capability of the ``a`` slot in a registry."""

    value: str


class ProvidesB:
    """Capability of the ``b`` slot in a registry."""

    value: str


@dataclass(frozen=True)
class ComponentA(ProvidesA):
    """Derive ``"a-<environment>"`` from the bound configuration."""

    configuration: ConfigurationProvider
    value: str = field(init=False)

    def __post_init__(self) -> None:
        validate_dependency(self, "configuration", self.configuration, ConfigurationProvider)
        object.__setattr__(self, "value", f"a-{self.configuration.value}")


@dataclass(frozen=True)
class ComponentB(ProvidesB):
    """Combine ``A``'s value with the configuration: ``"<a>-b-<environment>"``."""

    configuration: ConfigurationProvider
    a: ProvidesA
    value: str = field(init=False)

    def __post_init__(self) -> None:
        validate_dependency(self, "configuration", self.configuration, ConfigurationProvider)
        validate_dependency(self, "a", self.a, ProvidesA)
        object.__setattr__(self, "value", f"{self.a.value}-b-{self.configuration.value}")
