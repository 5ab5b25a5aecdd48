# project_starter/cli.py
"""
Project Starter CLI.

Usage::

    project-starter <project-name> [-o URI] [--installer pip|uv|auto]

Creates ``./<kebab-name>/package.json``, installs the starter template package
into the new project and hands control to its ``initialize`` function.

Notes
-----
- Every failure exits with code 1 after a diagnostic; the hand-off itself
  decides what happens on success.
- Flags win over ``PROJECT_STARTER_*`` variables from the shell or ``.env``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from project_starter import __version__
from project_starter.config import INSTALLERS, Settings, load_settings
from project_starter.context import ExecutionContext, NormalizedProject, ProjectRequest
from project_starter.errors import StarterError
from project_starter.handoff import InitializerLocator, VendoredModuleLocator
from project_starter.log_manager import get_logger
from project_starter.pipeline import default_steps, run_pipeline

__all__ = ["cli", "main"]

err_console = Console(stderr=True)


def _make_locator() -> InitializerLocator:
    return VendoredModuleLocator()


def _merge_settings(
    settings: Settings,
    override: Optional[str],
    installer: Optional[str],
    verbose: bool,
) -> Settings:
    """Apply command-line flags on top of environment settings."""
    chosen = installer or settings.installer
    if chosen not in INSTALLERS:
        raise click.BadParameter(
            f"'{chosen}' is not one of {', '.join(INSTALLERS)}.",
            param_hint="PROJECT_STARTER_INSTALLER",
        )
    return Settings(
        override_uri=override or settings.override_uri,
        installer=chosen,
        log_level=logging.DEBUG if verbose else settings.log_level,
    )


def _print_failure(error: StarterError) -> None:
    body = Text("Project setup aborted.", style="red")
    if error.hint:
        body.append(f"\n{error.hint}", style="yellow")
    err_console.print(Panel(body, title=error.title, border_style="red"))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="project-starter")
@click.argument("project_name", metavar="<project-name>", required=False)
@click.option(
    "-o",
    "--override",
    metavar="<uri>",
    help="Use a different version of the starter templates.",
)
@click.option(
    "--installer",
    type=click.Choice(list(INSTALLERS)),
    default=None,
    help="Package manager used to fetch the starter templates (default: pip).",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write log output to this file.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    project_name: Optional[str],
    override: Optional[str],
    installer: Optional[str],
    verbose: bool,
    log_file: Optional[str],
) -> None:
    """🚀 Create a standardized project from the starter templates."""
    if not project_name:
        click.echo(ctx.get_help())
        ctx.exit(0)

    settings = _merge_settings(load_settings(), override, installer, verbose)
    logger = get_logger(level=settings.log_level, log_to_file=log_file)
    request = ProjectRequest(raw_name=project_name, override_uri=settings.override_uri)

    try:
        project = NormalizedProject.from_request(request)
    except StarterError as exc:
        logger.error(exc.message)
        _print_failure(exc)
        sys.exit(exc.exit_code)

    context = ExecutionContext(
        request=request,
        project=project,
        settings=settings,
        logger=logger,
    )
    error = run_pipeline(context, default_steps(_make_locator()))
    if error is not None:
        _print_failure(error)
        sys.exit(context.exit_code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
