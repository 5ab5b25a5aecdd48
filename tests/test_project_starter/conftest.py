# tests/test_project_starter/conftest.py
from __future__ import annotations

import logging
import types
from pathlib import Path
from typing import List, Optional

import pytest

from project_starter.config import Settings
from project_starter.context import ExecutionContext, NormalizedProject, ProjectRequest
from project_starter.log_manager import get_logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PROJECT_STARTER_* from the developer's shell out of the tests."""
    for var in (
        "PROJECT_STARTER_OVERRIDE",
        "PROJECT_STARTER_INSTALLER",
        "PROJECT_STARTER_LOG_LEVEL",
        "PROJECT_STARTER_FORCE_COLOR",
    ):
        # setenv first so teardown also removes values load_dotenv() adds.
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.setenv("PROJECT_STARTER_FORCE_COLOR", "false")
    yield


@pytest.fixture
def logger() -> logging.Logger:
    return get_logger("project_starter.tests", level=logging.DEBUG)


@pytest.fixture
def make_context(tmp_path, logger):
    """Build an ExecutionContext rooted in tmp_path with a recording chdir."""

    def _factory(
        raw_name: str = "My Cool App",
        override_uri: Optional[str] = None,
        installer: str = "pip",
    ) -> ExecutionContext:
        request = ProjectRequest(raw_name=raw_name, override_uri=override_uri)
        project = NormalizedProject.from_request(request, cwd=tmp_path)
        chdirs: List[Path] = []
        ctx = ExecutionContext(
            request=request,
            project=project,
            settings=Settings(override_uri=override_uri, installer=installer),
            logger=logger,
            working_dir=tmp_path,
            chdir=lambda p: chdirs.append(Path(p)),
        )
        ctx.chdirs = chdirs  # type: ignore[attr-defined]
        return ctx

    return _factory


@pytest.fixture
def fake_run(monkeypatch):
    """Replace subprocess.run as used by the installer runner.

    ``fake_run.returncode`` controls the child's exit code and
    ``fake_run.calls`` records (argv, kwargs) tuples.
    """
    import project_starter.installer.runner as runner

    state = types.SimpleNamespace(returncode=0, calls=[])

    def _run(cmd, **kwargs):
        state.calls.append((list(cmd), kwargs))
        return types.SimpleNamespace(returncode=state.returncode)

    monkeypatch.setattr(runner.subprocess, "run", _run, raising=True)
    return state


class FakeInitializer:
    def __init__(self) -> None:
        self.roots: List[str] = []

    def initialize(self, root_path: str) -> None:
        self.roots.append(root_path)


class FakeLocator:
    def __init__(self, initializer: Optional[FakeInitializer] = None) -> None:
        self.initializer = initializer or FakeInitializer()
        self.located = 0

    def locate(self, context):
        self.located += 1
        return self.initializer


@pytest.fixture
def fake_locator() -> FakeLocator:
    return FakeLocator()
