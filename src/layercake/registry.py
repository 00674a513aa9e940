"""Composition roots that wire the example components together."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import ClassVar, TypeVar

from typing_extensions import Self

from layercake.components import ComponentA, ComponentB, ProvidesA, ProvidesB
from layercake.configuration import (
    ConfigurationProvider,
    DefaultConfiguration,
    Environment,
    TestingConfiguration,
    configuration_for,
)
from layercake.extended import ExtendedComponentA, ExtendedComponentB
from layercake.lifetime import Lifetime
from layercake.validators import validate_dependency

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Registry:
    """Bind one configuration variant and own the singletons built from it.

    Construction is the whole lifecycle: the configuration is bound first, then
    ``a`` is built from it, then ``b`` from both. Each is built exactly once and
    the accessors return the same instances for the registry's lifetime.
    Registries never share components, so building a testing registry leaves
    a production registry's values untouched.

    Use ``Registry.production()`` and ``Registry.testing()`` for the two defined
    roots, or ``Registry.for_environment(...)`` to pick one by name.
    """

    __slots__ = ("_a", "_b", "_configuration")

    lifetimes: ClassVar[Mapping[str, Lifetime]] = MappingProxyType(
        {
            "configuration": Lifetime.SINGLETON,
            "a": Lifetime.SINGLETON,
            "b": Lifetime.SINGLETON,
        },
    )
    """Lifetime of every part this registry wires, keyed by accessor name."""

    def __init__(self, configuration: ConfigurationProvider) -> None:
        """Wire the registry's components against ``configuration``.

        Args:
            configuration: The configuration variant every component sees.

        Raises:
            LayercakeMissingDependencyError: If ``configuration`` is ``None``.
            LayercakeInvalidDependencyError: If ``configuration`` is not a
                ``ConfigurationProvider``.

        """
        validate_dependency(self, "configuration", configuration, ConfigurationProvider)
        logger.debug(
            "Wiring %s for environment %r",
            type(self).__qualname__,
            configuration.value,
        )
        self._configuration = self._wired("configuration", configuration)
        self._a = self._wired("a", self._build_a(configuration))
        self._b = self._wired("b", self._build_b(configuration, self._a))

    @classmethod
    def production(cls) -> Self:
        """Return a registry bound to ``DefaultConfiguration``."""
        return cls(DefaultConfiguration())

    @classmethod
    def testing(cls) -> Self:
        """Return a registry bound to ``TestingConfiguration``."""
        return cls(TestingConfiguration())

    @classmethod
    def for_environment(cls, environment: Environment | str) -> Self:
        """Return a registry bound to the configuration variant for ``environment``."""
        return cls(configuration_for(environment))

    @property
    def configuration(self) -> ConfigurationProvider:
        """Return the bound configuration variant."""
        return self._configuration

    @property
    def a(self) -> ProvidesA:
        """Return the registry's singleton ``a``."""
        return self._a

    @property
    def b(self) -> ProvidesB:
        """Return the registry's singleton ``b``, built from ``a``."""
        return self._b

    def _build_a(self, configuration: ConfigurationProvider) -> ProvidesA:
        return ComponentA(configuration)

    def _build_b(self, configuration: ConfigurationProvider, a: ProvidesA) -> ProvidesB:
        return ComponentB(configuration, a)

    def _wired(self, name: str, component: T) -> T:
        logger.debug(
            "Wired %s.%s as %s (lifetime=%s)",
            type(self).__qualname__,
            name,
            type(component).__qualname__,
            self.lifetimes[name].value,
        )
        return component

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(configuration={self._configuration!r})"


class ExtendedRegistry(Registry):
    """Registry for the extended example, where ``a`` and ``b`` each own a fresh ``C``.

    ``C`` is transient and deliberately absent from the accessors: the
    registry caches ``a`` and ``b`` only, and each of them built its own ``C``.
    """

    __slots__ = ()

    lifetimes: ClassVar[Mapping[str, Lifetime]] = MappingProxyType(
        {**Registry.lifetimes, "c": Lifetime.TRANSIENT},
    )

    def _build_a(self, configuration: ConfigurationProvider) -> ProvidesA:
        return ExtendedComponentA(configuration)

    def _build_b(self, configuration: ConfigurationProvider, a: ProvidesA) -> ProvidesB:
        return ExtendedComponentB(configuration, a)
