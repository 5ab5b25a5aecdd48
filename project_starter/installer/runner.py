# project_starter/installer/runner.py
"""
Starter package installation for Project Starter.

This module builds the package-manager command for the starter template
package, runs it with the terminal's own stdio and turns a failed run into a
typed error. It exposes:
- installer detection (``uv`` on PATH or not),
- command construction for ``pip`` and ``uv``,
- the blocking subprocess call,
- the pipeline step :func:`install_package`.

Notes
-----
- The package is installed into ``<project>/.starter_packages`` so the
  hand-off can load it from a known place without touching site-packages.
- The child process has no timeout. A hung package manager hangs the tool;
  interrupt it with Ctrl-C.
"""

from __future__ import annotations

import re
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from project_starter.config import DEFAULT_URI, PACKAGE_NAME, VENDOR_DIRNAME
from project_starter.context import ExecutionContext, InstallResult
from project_starter.errors import InstallerNotFound, InstallFailed

# http(s)/ssh URL of a .git repository, optionally pinned with @ref or #fragment.
_BARE_GIT_URL_RE = re.compile(r"^(?:https?|ssh)://\S+\.git/?(?:[@#]\S*)?$")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "is_uv_installed",
    "resolve_installer",
    "resolve_uri",
    "build_install_command",
    "run_install",
    "install_package",
]


# ---------------------------------------------------------------------------
# Detection helpers
# ---------------------------------------------------------------------------


def is_uv_installed() -> bool:
    """Check if the ``uv`` binary is available on PATH."""
    return shutil_which("uv") is not None


def resolve_installer(name: str) -> str:
    """Map ``auto`` to a concrete installer; pass ``pip``/``uv`` through.

    Parameters
    ----------
    name : str
        One of ``pip``, ``uv`` or ``auto``.

    Returns
    -------
    str
        ``pip`` or ``uv``.
    """
    if name == "auto":
        return "uv" if is_uv_installed() else "pip"
    return name


def resolve_uri(override: Optional[str]) -> str:
    """Return the override (or the default URI) in a form pip and uv accept.

    A bare ``https://.../repo.git`` override is a git repository, not an
    archive, so it gets the ``git+`` VCS prefix. Anything else is passed
    through unchanged.

    >>> resolve_uri("https://example.com/alt.git")
    'git+https://example.com/alt.git'
    """
    if not override:
        return DEFAULT_URI
    if _BARE_GIT_URL_RE.match(override):
        return f"git+{override}"
    return override


# ---------------------------------------------------------------------------
# Command construction
# ---------------------------------------------------------------------------


def build_install_command(installer: str, uri: str, target: Path) -> List[str]:
    """Return the argv that installs ``uri`` into ``target``.

    Parameters
    ----------
    installer : str
        ``pip`` or ``uv``.
    uri : str
        Requirement or VCS URL of the starter package.
    target : Path
        Directory passed as ``--target``.
    """
    if installer == "uv":
        return ["uv", "pip", "install", "--target", str(target), uri]
    return [
        sys.executable,
        "-m",
        "pip",
        "install",
        "--upgrade",
        "--target",
        str(target),
        uri,
    ]


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


def run_install(command: List[str], cwd: Path) -> int:
    """Run ``command`` with inherited stdio and wait for it to exit.

    Returns
    -------
    int
        The child's exit code.

    Raises
    ------
    InstallerNotFound
        If the executable itself cannot be found.
    """
    try:
        completed = subprocess.run(command, cwd=str(cwd), check=False)
    except FileNotFoundError as exc:
        raise InstallerNotFound(
            f"Package manager '{command[0]}' was not found.",
            hint="Install it or pick another one with --installer.",
        ) from exc
    return completed.returncode


def install_package(context: ExecutionContext) -> None:
    """Pipeline step: install the starter package into the vendor directory.

    Stores an :class:`InstallResult` on the context on success.

    Raises
    ------
    InstallFailed
        If the package manager exits non-zero.
    """
    installer = resolve_installer(context.settings.installer)
    uri = resolve_uri(context.request.override_uri)
    target = context.working_dir / VENDOR_DIRNAME
    command = build_install_command(installer, uri, target)

    context.logger.info(
        "Installing latest version of %s using %s", PACKAGE_NAME, installer
    )
    context.logger.debug("Running: %s", " ".join(command))

    code = run_install(command, context.working_dir)
    if code != 0:
        raise InstallFailed(code, command)

    context.install_result = InstallResult(
        package_name=PACKAGE_NAME, exit_code=code, command=command
    )


# ---------------------------------------------------------------------------
# Small compatibility shim (isolated to ease testing)
# ---------------------------------------------------------------------------


def shutil_which(cmd: str) -> Optional[str]:
    """Wrapper for shutil.which to isolate for easier testing/mocking."""
    import shutil

    return shutil.which(cmd)
