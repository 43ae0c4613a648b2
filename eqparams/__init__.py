"""eqparams -- loader and validator for axisymmetric equilibrium parameter sets."""

from eqparams.errors import (
    InvalidRangeError,
    MalformedInputError,
    MissingFieldError,
    ParameterError,
    TypeMismatchError,
    UnknownEquilibriumKindError,
)
from eqparams.params.model import EquilibriumKind, EquilibriumParameterSet
from eqparams.params.reader import dumps, load, load_named, loads, save
from eqparams.params.validation import validate

__version__ = "0.1.0"

__all__ = [
    "EquilibriumKind",
    "EquilibriumParameterSet",
    "InvalidRangeError",
    "MalformedInputError",
    "MissingFieldError",
    "ParameterError",
    "TypeMismatchError",
    "UnknownEquilibriumKindError",
    "dumps",
    "load",
    "load_named",
    "loads",
    "save",
    "validate",
]
