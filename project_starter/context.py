# project_starter/context.py
"""
Data model shared by the pipeline steps.

The :class:`ExecutionContext` replaces ambient process state: the working
directory the steps act on, how to change it, the logger and the exit
request all live on the context so each step can be tested on its own.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from project_starter.config import DESCRIPTOR_VERSION, Settings
from project_starter.errors import InvalidProjectName
from project_starter.naming import format_name

__all__ = [
    "ProjectRequest",
    "NormalizedProject",
    "ProjectDescriptor",
    "InstallResult",
    "ExecutionContext",
]

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class ProjectRequest:
    """What the user asked for on the command line."""

    raw_name: str
    override_uri: Optional[str] = None


@dataclass(frozen=True)
class NormalizedProject:
    name: str
    root_path: Path

    @classmethod
    def from_request(cls, request: ProjectRequest, cwd: Optional[Path] = None) -> "NormalizedProject":
        """Kebab-case the raw name and resolve it against ``cwd``.

        Raises
        ------
        InvalidProjectName
            If nothing usable is left after formatting.
        """
        name = format_name(request.raw_name)
        if not name:
            raise InvalidProjectName(
                f"'{request.raw_name}' does not contain any letters or digits.",
                hint="Pick a name such as 'my-app'.",
            )
        base = Path(cwd) if cwd is not None else Path.cwd()
        return cls(name=name, root_path=(base / name).resolve())


@dataclass(frozen=True)
class ProjectDescriptor:
    name: str
    version: str = DESCRIPTOR_VERSION
    private: bool = True

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "version": self.version, "private": self.private}


@dataclass(frozen=True)
class InstallResult:
    package_name: str
    exit_code: int
    command: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass
class ExecutionContext:
    """Mutable state threaded through every pipeline step.

    Attributes
    ----------
    request, project
        The parsed command line and its normalized project.
    settings
        Loaded configuration (flags already merged in).
    logger
        Where steps report progress and failures.
    working_dir
        Directory later steps run in. Starts at the invocation directory and
        becomes ``project.root_path`` after the switch step.
    chdir
        Changes the real process directory; tests swap in a no-op.
    install_result
        Set by the installer step.
    exit_requested, exit_code
        Set once by the runner when a step fails.
    """

    request: ProjectRequest
    project: NormalizedProject
    settings: Settings
    logger: logging.Logger
    working_dir: Path = field(default_factory=Path.cwd)
    chdir: Callable[[PathLike], None] = os.chdir
    install_result: Optional[InstallResult] = None
    exit_requested: bool = False
    exit_code: int = 0

    @property
    def root_path(self) -> Path:
        return self.project.root_path

    def request_exit(self, code: int) -> None:
        self.exit_requested = True
        self.exit_code = code
