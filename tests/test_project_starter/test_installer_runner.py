"""
Tests for project_starter.installer.runner.

The runner builds the package-manager argv for the starter package and turns
a failed child process into a typed error. subprocess.run is monkeypatched
(see the ``fake_run`` fixture) so nothing is installed.
"""

from __future__ import annotations

import sys

import pytest

import project_starter.installer.runner as runner
from project_starter.config import DEFAULT_URI, PACKAGE_NAME
from project_starter.errors import InstallerNotFound, InstallFailed


def test_resolve_uri_default_and_override():
    assert runner.resolve_uri(None) == DEFAULT_URI
    assert runner.resolve_uri("https://example.com/alt.git") == "git+https://example.com/alt.git"


@pytest.mark.parametrize(
    "override, expected",
    [
        ("https://example.com/alt.git", "git+https://example.com/alt.git"),
        ("https://example.com/alt.git@v2", "git+https://example.com/alt.git@v2"),
        ("ssh://git@example.com/alt.git", "git+ssh://git@example.com/alt.git"),
        ("git+https://example.com/alt.git", "git+https://example.com/alt.git"),
        ("https://example.com/starter-1.0.tar.gz", "https://example.com/starter-1.0.tar.gz"),
        ("cnn-starter-proxy==1.2", "cnn-starter-proxy==1.2"),
        ("./local/starter", "./local/starter"),
    ],
)
def test_resolve_uri_prefixes_bare_git_urls_only(override, expected):
    assert runner.resolve_uri(override) == expected


def test_resolve_installer_auto(monkeypatch):
    monkeypatch.setattr(runner, "shutil_which", lambda cmd: "/usr/bin/uv")
    assert runner.resolve_installer("auto") == "uv"
    monkeypatch.setattr(runner, "shutil_which", lambda cmd: None)
    assert runner.resolve_installer("auto") == "pip"
    assert runner.resolve_installer("uv") == "uv"


def test_build_install_command_pip_uses_current_interpreter(tmp_path):
    cmd = runner.build_install_command("pip", "pkg-uri", tmp_path / "vendor")
    assert cmd[:4] == [sys.executable, "-m", "pip", "install"]
    assert cmd[-3:] == ["--target", str(tmp_path / "vendor"), "pkg-uri"]


def test_build_install_command_uv(tmp_path):
    cmd = runner.build_install_command("uv", "pkg-uri", tmp_path)
    assert cmd == ["uv", "pip", "install", "--target", str(tmp_path), "pkg-uri"]


def test_run_install_inherits_stdio_and_returns_code(fake_run, tmp_path):
    fake_run.returncode = 3
    assert runner.run_install(["x", "y"], tmp_path) == 3
    argv, kwargs = fake_run.calls[0]
    assert argv == ["x", "y"]
    assert kwargs["cwd"] == str(tmp_path)
    # no stdout/stderr redirection: the child writes to the terminal
    assert "stdout" not in kwargs and "stderr" not in kwargs
    assert "timeout" not in kwargs


def test_run_install_missing_binary(monkeypatch, tmp_path):
    def missing(*a, **k):
        raise FileNotFoundError(2, "No such file or directory", "uv")

    monkeypatch.setattr(runner.subprocess, "run", missing)
    with pytest.raises(InstallerNotFound):
        runner.run_install(["uv", "pip", "install"], tmp_path)


def test_install_package_default_uri(make_context, fake_run):
    ctx = make_context()
    ctx.working_dir = ctx.root_path
    runner.install_package(ctx)

    argv, kwargs = fake_run.calls[0]
    assert argv[-1] == DEFAULT_URI
    assert argv[argv.index("--target") + 1] == str(ctx.root_path / ".starter_packages")
    assert kwargs["cwd"] == str(ctx.root_path)
    assert ctx.install_result is not None
    assert ctx.install_result.package_name == PACKAGE_NAME
    assert ctx.install_result.ok


def test_install_package_override_uri(make_context, fake_run):
    ctx = make_context(override_uri="https://example.com/alt.git")
    runner.install_package(ctx)
    argv, _ = fake_run.calls[0]
    assert argv[-1] == "git+https://example.com/alt.git"
    assert DEFAULT_URI not in argv


def test_install_package_nonzero_exit_raises(make_context, fake_run):
    ctx = make_context()
    fake_run.returncode = 2
    with pytest.raises(InstallFailed) as info:
        runner.install_package(ctx)
    err = info.value
    assert err.returncode == 2
    assert err.exit_code == 1
    assert str(err).startswith("2 ")
    assert DEFAULT_URI in str(err)
    assert ctx.install_result is None
