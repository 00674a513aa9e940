"""Shared pytest fixtures for layercake tests."""

import uuid

import pytest

from layercake.configuration import DefaultConfiguration, TestingConfiguration
from layercake.registry import ExtendedRegistry, Registry


@pytest.fixture()
def production_registry() -> Registry:
    """Registry bound to the production configuration."""
    return Registry.production()


@pytest.fixture()
def testing_registry() -> Registry:
    """Registry bound to the testing configuration."""
    return Registry.testing()


@pytest.fixture()
def extended_registry() -> ExtendedRegistry:
    """Extended registry bound to the testing configuration."""
    return ExtendedRegistry.testing()


@pytest.fixture()
def production_configuration() -> DefaultConfiguration:
    return DefaultConfiguration()


@pytest.fixture()
def testing_configuration() -> TestingConfiguration:
    return TestingConfiguration()


@pytest.fixture()
def fixed_uuid() -> uuid.UUID:
    """UUID with a recognisable canonical form for token slicing checks."""
    return uuid.UUID("12345678-9abc-4def-8123-456789abcdef")


@pytest.fixture(autouse=True)
def _clear_layercake_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LAYERCAKE_ENVIRONMENT", raising=False)
    monkeypatch.delenv("LAYERCAKE_EXTENDED", raising=False)
