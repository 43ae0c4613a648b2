"""Default values and fixed vocabularies for equilibrium parameter sets.

The coefficient counts are set by the solver's flux expansion; changing them
makes every existing parameter file for that kind invalid.
"""

# ---------------------------------------------------------------------------
# Equilibrium kinds -> number of polynomial coefficients in "c"
# ---------------------------------------------------------------------------
COEFFICIENT_COUNTS = {
    "solovev": 12,
}

# ---------------------------------------------------------------------------
# Persisted file keys, in file order, with the type each must decode to
# ---------------------------------------------------------------------------
EXPECTED_TYPES = {
    "A": "a number",
    "R_0": "a number",
    "alpha": "a number",
    "c": "an array of numbers",
    "elongation": "a number",
    "equilibrium": "a string",
    "inverseaspectratio": "a number",
    "psip_max": "a number",
    "psip_max_cut": "a number",
    "psip_max_lim": "a number",
    "psip_min": "a number",
    "qampl": "a number",
    "rk4eps": "a number",
    "triangularity": "a number",
}

# ---------------------------------------------------------------------------
# Flux bounds at or above this magnitude mean "no cutoff"
# ---------------------------------------------------------------------------
UNBOUNDED_PSIP = 1e10

# ---------------------------------------------------------------------------
# Named parameter-set lookup
# ---------------------------------------------------------------------------
SEARCH_DIRS = [
    "geometries",
    "~/.eqparams/geometries",
]

NAMED_FILE_PATTERNS = [
    "geometry_params_{name}.js",
    "{name}.json",
    "{name}.js",
    "{name}.yaml",
]

YAML_SUFFIXES = (".yaml", ".yml")

# os.pathsep-separated directories searched before the settings file's
SEARCH_PATH_ENV = "EQPARAMS_PATH"

# ---------------------------------------------------------------------------
# File key -> Python attribute on EquilibriumParameterSet, in file order
# ---------------------------------------------------------------------------
FIELD_ATTRIBUTES = {
    "A": "profile_shape_factor",
    "R_0": "major_radius",
    "alpha": "perturbation_amplitude",
    "c": "polynomial_coefficients",
    "elongation": "elongation",
    "equilibrium": "equilibrium_kind",
    "inverseaspectratio": "inverse_aspect_ratio",
    "psip_max": "psip_max",
    "psip_max_cut": "psip_max_cut",
    "psip_max_lim": "psip_max_lim",
    "psip_min": "psip_min",
    "qampl": "q_amplitude",
    "rk4eps": "rk4_tolerance",
    "triangularity": "triangularity",
}
