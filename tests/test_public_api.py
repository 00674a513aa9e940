"""Tests for the public package surface and exception hierarchy."""

import pytest

import layercake
from layercake.exceptions import (
    LayercakeError,
    LayercakeInvalidDependencyError,
    LayercakeMissingDependencyError,
    LayercakeUnknownEnvironmentError,
)


def test_all_names_are_importable() -> None:
    for name in layercake.__all__:
        assert hasattr(layercake, name), name


def test_all_is_sorted() -> None:
    assert layercake.__all__ == sorted(layercake.__all__)


@pytest.mark.parametrize(
    "error_type",
    [
        LayercakeInvalidDependencyError,
        LayercakeMissingDependencyError,
        LayercakeUnknownEnvironmentError,
    ],
)
def test_errors_derive_from_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, LayercakeError)


def test_public_errors_have_docstrings() -> None:
    for error_type in (
        LayercakeError,
        LayercakeInvalidDependencyError,
        LayercakeMissingDependencyError,
        LayercakeUnknownEnvironmentError,
    ):
        assert error_type.__doc__
