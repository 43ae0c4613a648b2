"""Invariant checks for equilibrium parameter sets.

``validate()`` never raises for bad parameters: it returns the first
violation as a ``ParameterError`` instance, or ``None`` when the record is
usable. Checks run in a fixed order so the same record always reports the
same violation:

0. every field is present (records built with ``model_construct``)
1. equilibrium kind is in the vocabulary
2. R_0 > 0 and finite
3. len(c) matches the kind
4. elongation > 0 and finite
5. 0 < inverseaspectratio < 1
6. rk4eps > 0 and finite

Comparisons are written as ``not x > 0`` so NaN is always rejected.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from eqparams.config.defaults import FIELD_ATTRIBUTES
from eqparams.errors import (
    InvalidRangeError,
    MissingFieldError,
    ParameterError,
    UnknownEquilibriumKindError,
)
from eqparams.params.kinds import EquilibriumKind

if TYPE_CHECKING:
    from eqparams.params.model import EquilibriumParameterSet

_MISSING = object()


def _positive_length(value: float) -> bool:
    return value > 0 and math.isfinite(value)


def first_violation(record: Any) -> ParameterError | None:
    """Return the first invariant violated by a decoded record, if any."""
    for key, attr in FIELD_ATTRIBUTES.items():
        if getattr(record, attr, _MISSING) is _MISSING:
            return MissingFieldError(key)

    try:
        kind = EquilibriumKind(record.equilibrium_kind)
    except ValueError:
        return UnknownEquilibriumKindError(str(record.equilibrium_kind))

    if not _positive_length(record.major_radius):
        return InvalidRangeError("R_0", record.major_radius, "must be positive and finite")

    coefficients = record.polynomial_coefficients
    if len(coefficients) != kind.coefficient_count:
        return InvalidRangeError(
            "c",
            coefficients,
            f"'{kind.value}' expects {kind.coefficient_count} coefficients, "
            f"got {len(coefficients)}",
        )

    if not _positive_length(record.elongation):
        return InvalidRangeError("elongation", record.elongation, "must be positive and finite")

    if not 0 < record.inverse_aspect_ratio < 1:
        return InvalidRangeError(
            "inverseaspectratio", record.inverse_aspect_ratio, "must lie in (0, 1)"
        )

    if not _positive_length(record.rk4_tolerance):
        return InvalidRangeError("rk4eps", record.rk4_tolerance, "must be positive and finite")

    return None


def validate(
    record: EquilibriumParameterSet | Mapping[str, Any],
) -> ParameterError | None:
    """Check a record without raising.

    Accepts a parameter set (including one built with ``model_construct``)
    or a raw mapping keyed by file keys. Mappings are decoded first, so
    missing fields and type mismatches are reported before range checks.
    """
    if isinstance(record, Mapping):
        from eqparams.params.model import EquilibriumParameterSet

        try:
            EquilibriumParameterSet.from_mapping(record)
        except ParameterError as exc:
            return exc
        return None
    return first_violation(record)
