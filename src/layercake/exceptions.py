class LayercakeError(Exception):
    """Represent a base class for all layercake-specific failures.

    Catch this type when you want to handle any wiring error without matching
    each concrete exception class individually.
    """


class LayercakeMissingDependencyError(LayercakeError):
    """Signal that a component was built without one of its dependencies.

    Raised by component constructors when a required dependency is ``None``.

    Typical fix is wiring the component through a ``Registry`` or passing every
    declared dependency explicitly.
    """


class LayercakeInvalidDependencyError(LayercakeError):
    """Signal that a dependency does not provide the declared capability.

    Raised by component constructors, for example when ``ComponentB`` receives
    a configuration object where it expects a ``ProvidesA``.

    Typical fix is passing an object that subclasses the capability named in
    the error message.
    """


class LayercakeUnknownEnvironmentError(LayercakeError, ValueError):
    """Signal an environment name with no configuration variant.

    Raised by ``configuration_for`` and ``Registry.for_environment``.

    Valid names are the ``Environment`` values: ``"production"`` and ``"test"``.
    """
