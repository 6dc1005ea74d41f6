from dicontainer.common import class_name


class DIException(Exception):
    """Base exception class for DI exceptions."""


class InvalidRegistration(DIException):
    """
    Exception risen when an implementation cannot be registered for a contract,
    because it is not a concrete type or it is not assignable to the contract."""

    def __init__(self, contract, implementation, reason):
        self.contract = contract
        self.implementation = implementation
        super().__init__(
            f"Cannot register '{class_name(implementation)}' "
            f"for '{class_name(contract)}': {reason}."
        )


class UnregisteredDependency(DIException):
    """
    Exception risen when a type is requested, that was not registered."""

    def __init__(self, desired_type):
        self.desired_type = desired_type
        super().__init__(
            f"Dependency '{class_name(desired_type)}' was not registered "
            "in the container."
        )


class GenericParameterMismatch(DIException):
    """
    Exception risen when a type parameter used by an open generic implementation
    cannot be bound to the type arguments of the requested contract."""

    def __init__(self, type_parameter, contract):
        self.type_parameter = type_parameter
        self.contract = contract
        super().__init__(
            f"The type parameter '{type_parameter}' cannot be bound using "
            f"the type arguments of '{class_name(contract)}'."
        )


class UnsupportedLifetime(DIException):
    def __init__(self, lifetime):
        self.lifetime = lifetime
        super().__init__(f"The lifetime {lifetime!r} is not supported.")


class CircularDependencyException(DIException):
    """Exception risen when a circular dependency between a type and
    one of its parameters is detected."""

    def __init__(self, expected_type, desired_type, cycle=None):
        message = (
            "A circular dependency was detected for the service "
            f"of type '{class_name(expected_type)}' "
            f"for '{class_name(desired_type)}'"
        )
        if cycle:
            message += f" ({' -> '.join(class_name(item) for item in cycle)})"
        super().__init__(message)
        self.cycle = list(cycle or [])


class AmbiguousBinding(DIException):
    """
    Exception risen in strict mode, when a single instance is requested for a
    contract having more than one implementation."""

    def __init__(self, contract, implementations):
        names = ", ".join(class_name(item) for item in implementations)
        super().__init__(
            f"The contract '{class_name(contract)}' is bound to more than one "
            f"implementation ({names}); resolve all of them instead."
        )


class CannotResolveParameterException(DIException):
    """
    Exception risen when it is not possible to resolve a parameter,
    necessary to instantiate a type."""

    def __init__(self, param_name, desired_type):
        super().__init__(
            f"Unable to resolve parameter '{param_name}' "
            f"when resolving '{class_name(desired_type)}'"
        )


class UnsupportedUnionTypeException(DIException):
    """Exception risen when a parameter type is defined
    as Optional or Union of several types."""

    def __init__(self, param_name, desired_type):
        super().__init__(
            f"Union or Optional type declaration is not supported. "
            f"Cannot resolve parameter '{param_name}' "
            f"when resolving '{class_name(desired_type)}'"
        )
