# project_starter/handoff.py
"""
Hand-off to the installed starter package.

The starter package is opaque to this tool. All we rely on is that, once
installed into the vendor directory, it exposes a module with a callable
``initialize(root_path)``. Locating that module goes through an
:class:`InitializerLocator` so tests can pass a fake instead of installing
anything.
"""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Optional, Protocol, runtime_checkable

from project_starter.config import MODULE_NAME, VENDOR_DIRNAME
from project_starter.context import ExecutionContext
from project_starter.errors import HandoffLoadError

__all__ = [
    "ENTRY_FUNCTION",
    "Initializer",
    "InitializerLocator",
    "VendoredModuleLocator",
    "load_module",
    "run_initializer",
]

ENTRY_FUNCTION = "initialize"


@runtime_checkable
class Initializer(Protocol):
    def initialize(self, root_path: str) -> None: ...


class InitializerLocator(Protocol):
    def locate(self, context: ExecutionContext) -> Initializer: ...


def load_module(name: str, path: Path) -> ModuleType:
    """Execute the file at ``path`` as module ``name`` and return it.

    The vendor directory is put on ``sys.path`` so the starter package can
    import its own submodules and dependencies.

    Raises
    ------
    HandoffLoadError
        If the file is missing or raises while being imported.
    """
    if not path.is_file():
        raise HandoffLoadError(
            f"Starter package entry point not found: {path}",
            hint="The install may have succeeded without providing the expected module.",
        )

    vendor_dir = str(path.parent.parent)
    if vendor_dir not in sys.path:
        sys.path.insert(0, vendor_dir)

    spec = importlib.util.spec_from_file_location(
        name, path, submodule_search_locations=[str(path.parent)]
    )
    if spec is None or spec.loader is None:
        raise HandoffLoadError(f"Failed to load {name} from {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(spec.name, None)
        raise HandoffLoadError(
            f"Importing {name} from {path} failed: {exc!r}"
        ) from exc
    return module


class VendoredModuleLocator:
    """Find the starter package inside ``<working_dir>/.starter_packages``."""

    def __init__(self, module_name: str = MODULE_NAME, vendor_dirname: str = VENDOR_DIRNAME) -> None:
        self.module_name = module_name
        self.vendor_dirname = vendor_dirname

    def entry_path(self, context: ExecutionContext) -> Path:
        return context.working_dir / self.vendor_dirname / self.module_name / "__init__.py"

    def locate(self, context: ExecutionContext) -> Initializer:
        module = load_module(self.module_name, self.entry_path(context))
        entry = getattr(module, ENTRY_FUNCTION, None)
        if not callable(entry):
            raise HandoffLoadError(
                f"{self.module_name} does not export a callable '{ENTRY_FUNCTION}'."
            )
        return module  # type: ignore[return-value]


def run_initializer(context: ExecutionContext, locator: Optional[InitializerLocator] = None) -> None:
    """Pipeline step: load the starter package and call its initializer.

    Anything raised by ``initialize`` itself is left to propagate; from this
    point on control belongs to the starter package.
    """
    locator = locator or VendoredModuleLocator()
    initializer = locator.locate(context)
    context.logger.debug("Handing off to %r", initializer)
    initializer.initialize(str(context.root_path))
