"""Pydantic model for the loader settings file (eqparams.yaml)."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from eqparams.config.defaults import SEARCH_DIRS, UNBOUNDED_PSIP


class LoaderSettings(BaseModel):
    search_dirs: list[str] = Field(default_factory=lambda: list(SEARCH_DIRS))
    include_bundled: bool = True
    unbounded_threshold: float = UNBOUNDED_PSIP

    @field_validator("unbounded_threshold")
    @classmethod
    def threshold_positive(cls, v: float) -> float:
        if not v > 0:
            raise ValueError(f"unbounded_threshold must be positive, got {v}")
        return v
