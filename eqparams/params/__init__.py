"""Equilibrium parameter sets: model, validation, and file I/O."""

from eqparams.params.kinds import EquilibriumKind
from eqparams.params.model import EquilibriumParameterSet
from eqparams.params.reader import dumps, load, load_named, loads, save
from eqparams.params.validation import validate

__all__ = [
    "EquilibriumKind",
    "EquilibriumParameterSet",
    "dumps",
    "load",
    "load_named",
    "loads",
    "save",
    "validate",
]
