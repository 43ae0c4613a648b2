"""Typed errors raised while loading or validating a parameter set.

Every error names the offending file key (``R_0``, ``c``, ...) rather than
the Python attribute, so messages can be matched against the input file.
"""

from __future__ import annotations

from typing import Any


class ParameterError(Exception):
    """Base class for all parameter-set load and validation failures."""


class MalformedInputError(ParameterError):
    """The input is not a parseable key/value record."""


class MissingFieldError(ParameterError):
    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"missing required field '{field_name}'")


class TypeMismatchError(ParameterError):
    def __init__(self, field_name: str, expected_type: str) -> None:
        self.field_name = field_name
        self.expected_type = expected_type
        super().__init__(f"field '{field_name}' must be {expected_type}")


class InvalidRangeError(ParameterError):
    """A decoded value violates a range or length invariant."""

    def __init__(self, field_name: str, value: Any, reason: str = "") -> None:
        self.field_name = field_name
        self.value = value
        message = f"field '{field_name}' has invalid value {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownEquilibriumKindError(ParameterError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"unknown equilibrium kind {value!r}")
