from layercake.components import ComponentA, ComponentB, ProvidesA, ProvidesB
from layercake.configuration import (
    ConfigurationProvider,
    DefaultConfiguration,
    Environment,
    TestingConfiguration,
    configuration_for,
)
from layercake.exceptions import (
    LayercakeError,
    LayercakeInvalidDependencyError,
    LayercakeMissingDependencyError,
    LayercakeUnknownEnvironmentError,
)
from layercake.extended import ComponentC, ExtendedComponentA, ExtendedComponentB
from layercake.lifetime import Lifetime
from layercake.registry import ExtendedRegistry, Registry
from layercake.settings import LayercakeSettings, registry_from_settings

__all__ = [
    "ComponentA",
    "ComponentB",
    "ComponentC",
    "ConfigurationProvider",
    "DefaultConfiguration",
    "Environment",
    "ExtendedComponentA",
    "ExtendedComponentB",
    "ExtendedRegistry",
    "LayercakeError",
    "LayercakeInvalidDependencyError",
    "LayercakeMissingDependencyError",
    "LayercakeSettings",
    "LayercakeUnknownEnvironmentError",
    "Lifetime",
    "ProvidesA",
    "ProvidesB",
    "Registry",
    "TestingConfiguration",
    "configuration_for",
    "registry_from_settings",
]
