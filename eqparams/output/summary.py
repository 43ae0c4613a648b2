"""Plain-text summary of a loaded parameter set.

Mirrors the parameter dump a solver prints at startup: one line per file
key, followed by derived geometry and the flux window the solver will use.
"""

from __future__ import annotations

from eqparams.config.defaults import UNBOUNDED_PSIP
from eqparams.config.schema import LoaderSettings
from eqparams.params.model import EquilibriumParameterSet, as_bound

# (file key, attribute, label)
_ROWS = [
    ("A", "profile_shape_factor", "Profile shape factor"),
    ("R_0", "major_radius", "Major radius"),
    ("alpha", "perturbation_amplitude", "Perturbation amplitude"),
    ("elongation", "elongation", "Elongation"),
    ("triangularity", "triangularity", "Triangularity"),
    ("inverseaspectratio", "inverse_aspect_ratio", "Inverse aspect ratio"),
    ("qampl", "q_amplitude", "q amplitude"),
    ("rk4eps", "rk4_tolerance", "RK4 tolerance"),
    ("psip_min", "psip_min", "psi_p min"),
    ("psip_max", "psip_max", "psi_p max"),
]


def _fmt_bound(value: float, threshold: float) -> str:
    bound = as_bound(value, threshold)
    return "unbounded" if bound is None else f"{bound:g}"


def format_summary(
    params: EquilibriumParameterSet,
    settings: LoaderSettings | None = None,
) -> str:
    """Render ``params`` as an aligned, multi-line text block."""
    threshold = settings.unbounded_threshold if settings is not None else UNBOUNDED_PSIP
    kind = params.equilibrium_kind
    coefficients = params.polynomial_coefficients

    lines = [f"Equilibrium: {kind.value} ({len(coefficients)} coefficients)", ""]
    for key, attr, label in _ROWS:
        lines.append(f"  {label:<24} {key:<20} {getattr(params, attr):g}")

    lines.append(f"  {'psi_p max cut':<24} {'psip_max_cut':<20} "
                 f"{_fmt_bound(params.psip_max_cut, threshold)}")
    lines.append(f"  {'psi_p max lim':<24} {'psip_max_lim':<20} "
                 f"{_fmt_bound(params.psip_max_lim, threshold)}")

    lines.append("")
    lines.append("  Coefficients c:")
    for i, value in enumerate(coefficients):
        lines.append(f"    c[{i:>2}] = {value!r}")

    lines.append("")
    lines.append(f"  Minor radius a = R_0 * inverseaspectratio = {params.minor_radius:g}")
    return "\n".join(lines)
