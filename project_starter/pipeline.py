# project_starter/pipeline.py
"""
Sequential runner for the scaffolding steps.

Order: version gate -> directory check -> descriptor -> chdir -> install ->
hand-off. The first :class:`StarterError` stops the run; it is logged once,
recorded on the context and returned to the caller, which owns the process
exit.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Sequence

from project_starter.context import ExecutionContext
from project_starter.errors import StarterError
from project_starter.handoff import InitializerLocator, run_initializer
from project_starter.installer.runner import install_package
from project_starter.scaffold import change_directory, create_project, validate_directory
from project_starter.version_gate import check_python_version

__all__ = ["Step", "default_steps", "run_pipeline"]


@dataclass(frozen=True)
class Step:
    name: str
    run: Callable[[ExecutionContext], None]


def default_steps(locator: Optional[InitializerLocator] = None) -> List[Step]:
    """Return the six steps in execution order."""
    return [
        Step("version-gate", check_python_version),
        Step("validate-directory", validate_directory),
        Step("create-project", create_project),
        Step("change-directory", change_directory),
        Step("install-package", install_package),
        Step("handoff", partial(run_initializer, locator=locator)),
    ]


def run_pipeline(
    context: ExecutionContext,
    steps: Optional[Sequence[Step]] = None,
) -> Optional[StarterError]:
    """Run ``steps`` in order, stopping at the first failure.

    Returns
    -------
    Optional[StarterError]
        ``None`` when every step succeeded, otherwise the error that stopped
        the run. ``context.exit_requested`` and ``context.exit_code`` are set
        in that case.
    """
    for step in steps if steps is not None else default_steps():
        context.logger.debug("Step: %s", step.name)
        try:
            step.run(context)
        except StarterError as exc:
            context.logger.error(exc.message)
            if exc.hint:
                context.logger.error(exc.hint)
            context.request_exit(exc.exit_code)
            return exc
    return None
