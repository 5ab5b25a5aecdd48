# project_starter/scaffold.py
"""
Filesystem steps of the pipeline.

- :func:`validate_directory` makes sure the project path is free.
- :func:`create_project` writes the ``package.json`` descriptor.
- :func:`change_directory` moves into the new project.

Each function takes the :class:`ExecutionContext` and raises a
:class:`StarterError` subclass on failure.
"""

from __future__ import annotations

import json
from pathlib import Path

from project_starter.config import DESCRIPTOR_FILENAME
from project_starter.context import ExecutionContext, ProjectDescriptor
from project_starter.errors import (
    DescriptorWriteError,
    DirectoryConflict,
    FilesystemAccessError,
    WorkingDirectoryError,
)

__all__ = [
    "build_descriptor",
    "write_descriptor",
    "validate_directory",
    "create_project",
    "change_directory",
]


def build_descriptor(root: Path) -> ProjectDescriptor:
    return ProjectDescriptor(name=root.name)


def write_descriptor(root: Path, descriptor: ProjectDescriptor) -> Path:
    """Serialize ``descriptor`` as 2-space JSON into ``root``.

    Missing parent directories are created. Returns the written path.
    """
    target = root / DESCRIPTOR_FILENAME
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as f:
        json.dump(descriptor.to_dict(), f, indent=2, ensure_ascii=False)
        f.write("\n")
    return target


def validate_directory(context: ExecutionContext) -> None:
    """Pipeline step: fail unless the project path is absent.

    Raises
    ------
    DirectoryConflict
        If anything (file or directory) already exists at the path.
    FilesystemAccessError
        For any other probing error, e.g. permission denied on a parent.
    """
    root = context.root_path
    context.logger.info("Checking potential directory conflicts.")
    try:
        root.stat()
    except FileNotFoundError:
        return
    except OSError as exc:
        raise FilesystemAccessError(
            f"Could not inspect {root}: {exc.strerror or exc}",
        ) from exc
    raise DirectoryConflict(root.name)


def create_project(context: ExecutionContext) -> None:
    """Pipeline step: write ``<root>/package.json``."""
    root = context.root_path
    context.logger.info("Creating new project.")
    try:
        path = write_descriptor(root, build_descriptor(root))
    except OSError as exc:
        raise DescriptorWriteError(
            f"Could not write {root / DESCRIPTOR_FILENAME}: {exc.strerror or exc}",
        ) from exc
    context.logger.debug("Wrote %s", path)


def change_directory(context: ExecutionContext) -> None:
    """Pipeline step: make the project root the working directory."""
    root = context.root_path
    try:
        context.chdir(root)
    except OSError as exc:
        raise WorkingDirectoryError(
            f"Error while attempting to change directory: {exc}",
        ) from exc
    context.working_dir = root
    context.logger.debug("Working directory is now %s", root)
