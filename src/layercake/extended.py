"""Components of the extended example.

``ComponentC`` is transient: it is never held by a registry. Each consumer
that needs one builds its own at construction time, so two consumers wired
against the same configuration see different ``C`` values.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass, field

from layercake.components import ProvidesA, ProvidesB
from layercake.configuration import ConfigurationProvider
from layercake.validators import validate_dependency

TokenFactory = Callable[[], uuid.UUID]
"""Callable returning the random identifier a ``ComponentC`` salts its value with."""

_TOKEN_SLICE = slice(1, 5)


@dataclass(frozen=True)
class ComponentC:
    """Derive ``"c-<environment>-<token>"`` with a fresh random 4-character token.

    The token is characters 1 through 4 of the canonical string form of
    ``token_factory()``. Collisions between instances are possible but
    improbable; nothing enforces uniqueness.
    """

    configuration: ConfigurationProvider
    token_factory: TokenFactory = field(default=uuid.uuid4, repr=False, compare=False)
    token: str = field(init=False)
    value: str = field(init=False)

    def __post_init__(self) -> None:
        validate_dependency(self, "configuration", self.configuration, ConfigurationProvider)
        token = str(self.token_factory())[_TOKEN_SLICE]
        object.__setattr__(self, "token", token)
        object.__setattr__(self, "value", f"c-{self.configuration.value}-{token}")


@dataclass(frozen=True)
class ExtendedComponentA(ProvidesA):
    """``A`` salted with a private ``C``: ``"a-<environment>-<c>"``."""

    configuration: ConfigurationProvider
    c: ComponentC = field(init=False)
    value: str = field(init=False)

    def __post_init__(self) -> None:
        validate_dependency(self, "configuration", self.configuration, ConfigurationProvider)
        c = ComponentC(self.configuration)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "value", f"a-{self.configuration.value}-{c.value}")


@dataclass(frozen=True)
class ExtendedComponentB(ProvidesB):
    """``B`` salted with its own private ``C``: ``"<a>-b-<environment>-<c>"``."""

    configuration: ConfigurationProvider
    a: ProvidesA
    c: ComponentC = field(init=False)
    value: str = field(init=False)

    def __post_init__(self) -> None:
        validate_dependency(self, "configuration", self.configuration, ConfigurationProvider)
        validate_dependency(self, "a", self.a, ProvidesA)
        c = ComponentC(self.configuration)
        object.__setattr__(self, "c", c)
        object.__setattr__(
            self,
            "value",
            f"{self.a.value}-b-{self.configuration.value}-{c.value}",
        )
