# project_starter/errors.py
"""
Typed failures for the scaffolding pipeline.

Every step raises a subclass of :class:`StarterError`. The pipeline runner
catches it, logs it once and maps it to a single exit path; nothing is
retried.

Notes
-----
- ``exit_code`` is 1 for every kind. Directory conflicts and failed working
  directory switches are fatal too, same as a too-old interpreter or a failed
  install.
- ``hint`` is an optional one-line suggestion shown under the error panel.
"""

from __future__ import annotations

from typing import Optional, Sequence

__all__ = [
    "StarterError",
    "InvalidProjectName",
    "VersionTooOld",
    "VersionCheckError",
    "DirectoryConflict",
    "FilesystemAccessError",
    "DescriptorWriteError",
    "WorkingDirectoryError",
    "InstallerNotFound",
    "InstallFailed",
    "HandoffLoadError",
]


class StarterError(Exception):
    """Base class for every pipeline failure."""

    exit_code: int = 1
    title: str = "project-starter failed"

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class InvalidProjectName(StarterError):
    title = "invalid project name"


class VersionTooOld(StarterError):
    title = "python version"

    def __init__(self, current: str, required: str) -> None:
        super().__init__(
            f"You are running python version {current}, "
            f"but should be running at least {required}",
            hint="Update python and try again.",
        )
        self.current = current
        self.required = required


class VersionCheckError(StarterError):
    title = "python version"


class DirectoryConflict(StarterError):
    title = "directory conflict"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"A directory by the name of {name} already exists, "
            "please choose another name."
        )
        self.name = name


class FilesystemAccessError(StarterError):
    """Raised for any error other than "not found" while probing a path."""

    title = "filesystem error"


class DescriptorWriteError(StarterError):
    title = "filesystem error"


class WorkingDirectoryError(StarterError):
    title = "working directory"


class InstallerNotFound(StarterError):
    title = "installer missing"


class InstallFailed(StarterError):
    title = "install failed"

    def __init__(self, exit_code: int, command: Sequence[str]) -> None:
        super().__init__(f"{exit_code} {' '.join(command)} failed.")
        self.returncode = exit_code
        self.command = list(command)


class HandoffLoadError(StarterError):
    """The starter package could not be loaded or exposes no initializer."""

    title = "starter package"
