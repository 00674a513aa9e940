"""Choosing a registry from settings.

``LayercakeSettings`` reads ``LAYERCAKE_ENVIRONMENT`` and ``LAYERCAKE_EXTENDED``
from the environment; explicit values win over the environment.
"""

from __future__ import annotations

from layercake import Environment, LayercakeSettings, registry_from_settings


def main() -> None:
    settings = LayercakeSettings(environment=Environment.TEST, extended=False)
    registry = registry_from_settings(settings)

    print(f"registry={type(registry).__name__}")  # => registry=Registry
    print(f"b={registry.b.value}")  # => b=a-test-b-test

    extended = registry_from_settings(LayercakeSettings(environment="production", extended=True))
    print(f"registry={type(extended).__name__}")  # => registry=ExtendedRegistry
    a_prefix = "a-production-c-production-"
    print(f"a_prefix={extended.a.value.startswith(a_prefix)}")  # => a_prefix=True


if __name__ == "__main__":
    main()
