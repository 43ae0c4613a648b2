"""Shared test fixtures for eqparams.

Provides the TJ-K reference record (as a dict, as the bundled file, and as
a writer for modified copies) across all test modules.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from eqparams.config.schema import LoaderSettings
from eqparams.params.model import EquilibriumParameterSet
from eqparams.params.reader import BUNDLED_DIR, load

TJK_COEFFICIENTS = [
    5.7815223423311961,
    107.23565735140576,
    -105.57160684057777,
    -52.573453275104946,
    72.064171633423143,
    -60.449864359846785,
    -2.4170749524513462,
    11.87954516122273,
    48.789279014811996,
    -32.206033402915885,
    -8.0975029164673717,
    0.80857417394434761,
]

# ---------------------------------------------------------------------------
# Reference record
# ---------------------------------------------------------------------------

@pytest.fixture
def tjk_record() -> dict[str, Any]:
    """The TJ-K solovev record, keyed by file keys."""
    return {
        "A": 1,
        "R_0": 129.989,
        "alpha": 0.02,
        "c": list(TJK_COEFFICIENTS),
        "elongation": 1,
        "equilibrium": "solovev",
        "inverseaspectratio": 0.166667,
        "psip_max": 0,
        "psip_max_cut": 1e10,
        "psip_max_lim": 1e10,
        "psip_min": -6,
        "qampl": 1,
        "rk4eps": 1e-5,
        "triangularity": 0,
    }


@pytest.fixture
def tjk_path() -> Path:
    """The bundled TJ-K parameter file, comment header included."""
    return BUNDLED_DIR / "geometry_params_TJ-K_Taylor.js"


@pytest.fixture
def tjk_params(tjk_path: Path) -> EquilibriumParameterSet:
    return load(tjk_path)


@pytest.fixture
def write_record(tmp_path: Path) -> Callable[..., Path]:
    """Write a record as JSON into tmp_path and return the file path."""

    def _write(record: Any, name: str = "params.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(record, indent="\t"))
        return path

    return _write


@pytest.fixture
def isolated_settings(tmp_path: Path) -> LoaderSettings:
    """Settings that only search tmp_path and skip the bundled sets."""
    return LoaderSettings(search_dirs=[str(tmp_path)], include_bundled=False)


@pytest.fixture(autouse=True)
def _no_search_path_env(monkeypatch):
    """Keep a developer's EQPARAMS_PATH out of the tests."""
    monkeypatch.delenv("EQPARAMS_PATH", raising=False)
