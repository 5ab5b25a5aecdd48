# project_starter/version_gate.py
"""
Interpreter version gate.

Compares the running Python against the ``Requires-Python`` declared by this
tool's own distribution metadata.

Notes
-----
- Both strings go through :func:`format_version` first, so a specifier such
  as ``">=3.9"`` becomes ``"3.9"``. For a range such as ``">=3.9,<4"`` only
  the lower-bound clause is kept.
- Comparison uses :class:`packaging.version.Version`, so ``9.0.0`` sorts
  before ``10.0.0``.
"""

from __future__ import annotations

import platform
from importlib import metadata
from typing import Optional

from packaging.version import InvalidVersion, Version

from project_starter.config import MIN_PYTHON_VERSION
from project_starter.context import ExecutionContext
from project_starter.errors import VersionCheckError, VersionTooOld
from project_starter.naming import format_version

__all__ = [
    "DISTRIBUTION",
    "required_python",
    "current_python",
    "minimum_clause",
    "is_version_supported",
    "check_python_version",
]

DISTRIBUTION = "project-starter"


def required_python() -> str:
    """Return the declared ``Requires-Python`` (or the packaged fallback)."""
    try:
        declared: Optional[str] = metadata.metadata(DISTRIBUTION).get("Requires-Python")
    except metadata.PackageNotFoundError:
        declared = None
    return declared or MIN_PYTHON_VERSION


def current_python() -> str:
    return platform.python_version()


def minimum_clause(required: str) -> str:
    """Return the clause of a comma-separated specifier that sets the minimum.

    >>> minimum_clause("<4, >=3.9")
    '>=3.9'
    """
    clauses = [c.strip() for c in required.split(",") if c.strip()]
    for clause in clauses:
        if clause.startswith((">", "~=", "==")):
            return clause
    return clauses[0] if clauses else required


def is_version_supported(current: str, required: str) -> bool:
    """Return True when ``current`` is at least ``required``.

    Raises
    ------
    VersionCheckError
        If either value is not a parseable version after formatting.
    """
    cur, req = format_version(current), format_version(minimum_clause(required))
    try:
        return Version(cur) >= Version(req)
    except InvalidVersion as exc:
        raise VersionCheckError(
            f"Cannot compare python versions '{current}' and '{required}': {exc}"
        ) from exc


def check_python_version(
    context: ExecutionContext,
    current: Optional[str] = None,
    required: Optional[str] = None,
) -> None:
    """Pipeline step: abort with :class:`VersionTooOld` on an old interpreter."""
    current = current or current_python()
    required = required or required_python()

    context.logger.info("Checking python version.")
    context.logger.debug("Running %s, required %s", current, required)

    if not is_version_supported(current, required):
        raise VersionTooOld(current, required)
