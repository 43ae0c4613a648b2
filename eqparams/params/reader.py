"""Reading and writing equilibrium parameter files.

Parameter files are JSON documents that may carry ``//`` line comments and
``/* */`` block comments, usually a short header describing the device and
the scenario the coefficients were fitted for::

    //
    //   * Input-File for TJ-K axisymmetric solovev equilibrium *
    //
    {
        "A" : 1,
        "R_0" : 129.989,
        ...
    }

YAML documents with the same keys are accepted too. Every load is a single
bounded read followed by a pure decode, so concurrent loads need no locking.
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import IO, Any

import yaml

from eqparams.config.defaults import NAMED_FILE_PATTERNS, YAML_SUFFIXES
from eqparams.config.loader import load_settings, resolve_path
from eqparams.config.schema import LoaderSettings
from eqparams.errors import MalformedInputError
from eqparams.params.kinds import EquilibriumKind
from eqparams.params.model import EquilibriumParameterSet

logger = logging.getLogger(__name__)

BUNDLED_DIR = Path(__file__).resolve().parent.parent / "geometries"

# String literals are matched first so "//" inside a string survives
_STRING_OR_COMMENT = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/', re.DOTALL)


def _strip_comments(text: str) -> str:
    def _keep_strings(match: re.Match) -> str:
        token = match.group(0)
        return token if token.startswith('"') else " "

    return _STRING_OR_COMMENT.sub(_keep_strings, text)


def _decode_bytes(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"parameter document is not valid UTF-8: {exc}") from exc


def _fmt_for_path(path: Path) -> str:
    return "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"


def _parse(text: str, fmt: str) -> Any:
    if fmt == "json":
        try:
            return json.loads(_strip_comments(text))
        except json.JSONDecodeError as exc:
            raise MalformedInputError(f"not a valid JSON record: {exc}") from exc
    elif fmt == "yaml":
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise MalformedInputError(f"not a valid YAML record: {exc}") from exc
    raise ValueError(f"Unknown format: {fmt}")


def loads(document: str | bytes, *, fmt: str = "json") -> EquilibriumParameterSet:
    """Decode and validate an in-memory parameter document."""
    if isinstance(document, (bytes, bytearray)):
        document = _decode_bytes(bytes(document))
    raw = _parse(document, fmt)
    return EquilibriumParameterSet.from_mapping(raw)


def load(
    source: str | os.PathLike | bytes | IO[Any],
    *,
    fmt: str | None = None,
) -> EquilibriumParameterSet:
    """Load a parameter set from a path, raw bytes, or an open stream.

    The format defaults to YAML for ``.yaml``/``.yml`` paths and to JSON
    (with comments) otherwise.

    Raises
    ------
    MalformedInputError, MissingFieldError, TypeMismatchError,
    InvalidRangeError, UnknownEquilibriumKindError
        First problem found in the document; no partial record is returned.
    FileNotFoundError
        ``source`` is a path that does not exist.
    """
    if hasattr(source, "read"):
        data = source.read()
        origin = getattr(source, "name", "<stream>")
    elif isinstance(source, (bytes, bytearray)):
        data = bytes(source)
        origin = "<bytes>"
    else:
        path = Path(source)
        if fmt is None:
            fmt = _fmt_for_path(path)
        with open(path, "rb") as f:
            data = f.read()
        origin = str(path)

    logger.info("Loading parameter set from %s", origin)
    params = loads(data, fmt=fmt or "json")
    logger.debug(
        "Loaded %s equilibrium: R_0=%g, %d coefficients",
        params.equilibrium_kind.value,
        params.major_radius,
        len(params.polynomial_coefficients),
    )
    return params


def _candidate_dirs(settings: LoaderSettings) -> list[Path]:
    dirs = [resolve_path(d) for d in settings.search_dirs if d]
    if settings.include_bundled:
        dirs.append(BUNDLED_DIR)
    return dirs


def load_named(name: str, settings: LoaderSettings | None = None) -> EquilibriumParameterSet:
    """Load the parameter set called ``name`` from the search directories.

    Directories are tried in settings order, then the sets bundled with the
    package. Within a directory, ``geometry_params_<name>.js`` is preferred.
    """
    if settings is None:
        settings = load_settings()

    tried: list[Path] = []
    for directory in _candidate_dirs(settings):
        for pattern in NAMED_FILE_PATTERNS:
            candidate = directory / pattern.format(name=name)
            tried.append(candidate)
            if candidate.is_file():
                logger.info("Resolved parameter set '%s' to %s", name, candidate)
                return load(candidate)

    raise FileNotFoundError(
        f"No parameter set named '{name}' (tried: {', '.join(str(p) for p in tried)})"
    )


def _to_record(params: EquilibriumParameterSet) -> dict[str, Any]:
    """Plain dict keyed by file keys, in file order."""
    record = params.model_dump(by_alias=True)
    record["c"] = list(params.polynomial_coefficients)
    record["equilibrium"] = EquilibriumKind(params.equilibrium_kind).value
    return record


def dumps(
    params: EquilibriumParameterSet,
    *,
    fmt: str = "json",
    header: str | None = None,
) -> str:
    """Serialize a parameter set so that ``loads(dumps(p)) == p``."""
    record = _to_record(params)
    if fmt == "json":
        prefix = "//"
        body = json.dumps(record, indent="\t") + "\n"
    elif fmt == "yaml":
        prefix = "#"
        body = yaml.safe_dump(record, sort_keys=False, default_flow_style=None)
    else:
        raise ValueError(f"Unknown format: {fmt}")

    if header:
        lines = "".join(f"{prefix} {line}".rstrip() + "\n" for line in header.splitlines())
        body = lines + body
    return body


def save(
    params: EquilibriumParameterSet,
    path: str | os.PathLike,
    *,
    fmt: str | None = None,
    header: str | None = None,
) -> Path:
    """Write a parameter set to ``path`` and return the resolved path."""
    path = Path(path)
    if fmt is None:
        fmt = _fmt_for_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write(dumps(params, fmt=fmt, header=header))
    logger.info("Wrote parameter set to %s", path)
    return path
