"""EquilibriumParameterSet -- immutable parameter record for the equilibrium solver.

Attributes use Python names; the persisted file keys (``R_0``, ``c``,
``rk4eps``, ...) are the pydantic aliases. Numeric fields are strict: an
integer is accepted for a float, a string or boolean is not.

Usage::

    params = EquilibriumParameterSet.from_mapping(json.loads(text))
    solver = SolovevSolver(params.coefficient_array(), params.major_radius)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import numpy as np
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    ValidationError,
    model_validator,
)

from eqparams.config.defaults import EXPECTED_TYPES, UNBOUNDED_PSIP
from eqparams.errors import (
    MalformedInputError,
    MissingFieldError,
    ParameterError,
    TypeMismatchError,
    UnknownEquilibriumKindError,
)
from eqparams.params.kinds import EquilibriumKind
from eqparams.params.validation import first_violation

logger = logging.getLogger(__name__)


def as_bound(value: float, threshold: float = UNBOUNDED_PSIP) -> float | None:
    """Map a flux bound to ``None`` when it is the "no cutoff" sentinel."""
    if abs(value) >= threshold:
        return None
    return value


class EquilibriumParameterSet(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # --- Shape of the flux expansion ---
    profile_shape_factor: StrictFloat = Field(alias="A")
    """Profile shape factor A (dimensionless)."""

    major_radius: StrictFloat = Field(alias="R_0")
    """Major radius R_0 in units of the reference length."""

    perturbation_amplitude: StrictFloat = Field(alias="alpha")

    polynomial_coefficients: tuple[StrictFloat, ...] = Field(alias="c")
    """Basis-function coefficients, order significant."""

    elongation: StrictFloat = Field(alias="elongation")

    equilibrium_kind: EquilibriumKind = Field(alias="equilibrium")

    inverse_aspect_ratio: StrictFloat = Field(alias="inverseaspectratio")
    """Minor over major radius, strictly between 0 and 1."""

    # --- Poloidal flux bounds ---
    psip_max: StrictFloat = Field(alias="psip_max")
    psip_max_cut: StrictFloat = Field(alias="psip_max_cut")
    psip_max_lim: StrictFloat = Field(alias="psip_max_lim")
    psip_min: StrictFloat = Field(alias="psip_min")

    # --- Solver knobs ---
    q_amplitude: StrictFloat = Field(alias="qampl")

    rk4_tolerance: StrictFloat = Field(alias="rk4eps")
    """Step tolerance of the RK4 field-line tracer."""

    triangularity: StrictFloat = Field(alias="triangularity")

    @model_validator(mode="after")
    def check_invariants(self) -> EquilibriumParameterSet:
        # ParameterError is not a ValueError, so pydantic lets it through as-is
        violation = first_violation(self)
        if violation is not None:
            raise violation
        return self

    @classmethod
    def from_mapping(cls, raw: Any) -> EquilibriumParameterSet:
        """Decode a raw key/value record, raising typed ``ParameterError``s."""
        if not isinstance(raw, Mapping):
            raise MalformedInputError(
                f"expected a key/value record, got {type(raw).__name__}"
            )

        unknown = sorted(str(k) for k in raw if k not in EXPECTED_TYPES)
        if unknown:
            logger.debug("Ignoring unknown keys: %s", ", ".join(unknown))

        # Only file keys count; attribute names in a file are not aliases
        record = {k: v for k, v in raw.items() if k in EXPECTED_TYPES}
        try:
            return cls.model_validate(record)
        except ValidationError as exc:
            raise _translate_error(exc) from None

    # --- Derived, read-only views ---

    @property
    def minor_radius(self) -> float:
        return self.major_radius * self.inverse_aspect_ratio

    @property
    def psip_cut_bound(self) -> float | None:
        return as_bound(self.psip_max_cut)

    @property
    def psip_lim_bound(self) -> float | None:
        return as_bound(self.psip_max_lim)

    def coefficient_array(self) -> np.ndarray:
        """Coefficients as a read-only float64 array."""
        arr = np.array(self.polynomial_coefficients, dtype=np.float64)
        arr.setflags(write=False)
        return arr


def _file_key(loc: int | str) -> str:
    field = EquilibriumParameterSet.model_fields.get(str(loc))
    if field is not None and field.alias:
        return field.alias
    return str(loc)


def _translate_error(exc: ValidationError) -> ParameterError:
    """Turn a pydantic ValidationError into the first typed violation.

    Missing fields win over type errors; otherwise errors come in field order.
    """
    errors = exc.errors()
    missing = [err for err in errors if err["type"] == "missing"]
    err = missing[0] if missing else errors[0]
    key = _file_key(err["loc"][0]) if err["loc"] else ""

    if err["type"] == "missing":
        return MissingFieldError(key)
    if key == "equilibrium" and isinstance(err.get("input"), str):
        return UnknownEquilibriumKindError(err["input"])
    return TypeMismatchError(key, EXPECTED_TYPES.get(key, "a number"))
