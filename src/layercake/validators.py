from __future__ import annotations

from layercake.exceptions import LayercakeInvalidDependencyError, LayercakeMissingDependencyError


def validate_dependency(owner: object, name: str, value: object, capability: type) -> None:
    """Check that a constructor dependency is present and has the right capability.

    A capability is satisfied by an instance of ``capability`` that carries a
    string ``value``; a bare capability base has none.
    """
    owner_name = type(owner).__qualname__
    if value is None:
        msg = f"{owner_name} is missing required dependency '{name}' ({capability.__qualname__})."
        raise LayercakeMissingDependencyError(msg)

    if not isinstance(value, capability):
        msg = (
            f"{owner_name} requires '{name}' to provide {capability.__qualname__}, "
            f"got {type(value).__qualname__}."
        )
        raise LayercakeInvalidDependencyError(msg)

    if not isinstance(getattr(value, "value", None), str):
        msg = (
            f"{owner_name} requires '{name}' to carry a string 'value', "
            f"got {type(value).__qualname__} without one."
        )
        raise LayercakeInvalidDependencyError(msg)
