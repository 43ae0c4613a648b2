"""Closed vocabulary of equilibrium formulations understood by the solver."""

from __future__ import annotations

from enum import Enum

from eqparams.config.defaults import COEFFICIENT_COUNTS


class EquilibriumKind(str, Enum):
    SOLOVEV = "solovev"

    @property
    def coefficient_count(self) -> int:
        """Number of entries the flux expansion expects in ``c``."""
        return COEFFICIENT_COUNTS[self.value]
