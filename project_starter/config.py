# project_starter/config.py
"""
Runtime settings for Project Starter.

Values come from the process environment, optionally seeded from a ``.env``
file in the current working directory (existing shell exports win). Command
line flags override whatever is loaded here.

Environment variables
---------------------
PROJECT_STARTER_OVERRIDE
    Alternate starter package location (same as ``--override``).
PROJECT_STARTER_INSTALLER
    ``pip`` (default), ``uv`` or ``auto``.
PROJECT_STARTER_LOG_LEVEL
    Logging level name, e.g. ``DEBUG``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from project_starter.log_manager import parse_level

__all__ = [
    "PACKAGE_NAME",
    "MODULE_NAME",
    "DEFAULT_URI",
    "DESCRIPTOR_FILENAME",
    "DESCRIPTOR_VERSION",
    "VENDOR_DIRNAME",
    "MIN_PYTHON_VERSION",
    "INSTALLERS",
    "Settings",
    "load_settings",
]

#: Distribution name of the starter template package.
PACKAGE_NAME = "cnn-starter-proxy"

#: Import name of the starter package inside the vendor directory.
MODULE_NAME = "cnn_starter_proxy"

#: Where the starter package is fetched from unless overridden.
DEFAULT_URI = f"git+https://github.com/cnnlabs/{PACKAGE_NAME}.git"

DESCRIPTOR_FILENAME = "package.json"
DESCRIPTOR_VERSION = "0.1.0"

#: Project-local directory the starter package is installed into.
VENDOR_DIRNAME = ".starter_packages"

#: Used when this tool's own distribution metadata is unavailable.
MIN_PYTHON_VERSION = ">=3.9"

INSTALLERS: Tuple[str, ...] = ("pip", "uv", "auto")


@dataclass(frozen=True)
class Settings:
    override_uri: Optional[str] = None
    installer: str = "pip"
    log_level: int = logging.INFO


def load_settings(dotenv: bool = True) -> Settings:
    """Build :class:`Settings` from the environment.

    Parameters
    ----------
    dotenv : bool, default True
        Read ``.env`` from the working directory first, without overriding
        variables already set in the shell.
    """
    if dotenv:
        load_dotenv(Path.cwd() / ".env", override=False)

    installer = (os.getenv("PROJECT_STARTER_INSTALLER") or "pip").strip().lower()
    override = (os.getenv("PROJECT_STARTER_OVERRIDE") or "").strip() or None

    return Settings(
        override_uri=override,
        installer=installer,
        log_level=parse_level(os.getenv("PROJECT_STARTER_LOG_LEVEL")),
    )
