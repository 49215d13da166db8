# pmdetect/cli.py
from __future__ import annotations
import json
import logging
import subprocess
from pathlib import Path

import click

from pmdetect.agents import AGENTS, LOCKS
from pmdetect.api import resolve_project
from pmdetect.errors import InstallAborted
from pmdetect.installer import ensure_installed
from pmdetect.models import DetectOptions

# Exit status when no package manager could be determined
NOT_DETECTED_EXIT_CODE = 2


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose):
    """Detect the package manager a JavaScript project uses."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[pmdetect] %(levelname)s %(message)s",
    )


@main.command()
@click.option("--cwd", type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=None, help="Directory to start searching from (default: current directory)")
@click.option("--auto-install", is_flag=True, envvar="PMDETECT_AUTO_INSTALL",
              help="Install a missing package manager without asking")
@click.option("--programmatic", is_flag=True, envvar="PMDETECT_PROGRAMMATIC",
              help="No warnings, prompts or installs")
@click.option("--json", "as_json", is_flag=True, help="Print the full resolution as JSON")
@click.pass_context
def detect(ctx, cwd, auto_install, programmatic, as_json):
    """Print the package manager configured for a project."""
    options = DetectOptions(cwd=cwd, auto_install=auto_install, programmatic=programmatic)
    resolution = resolve_project(options)

    try:
        ensure_installed(resolution, options)
    except InstallAborted as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(e.exit_code)
    except subprocess.CalledProcessError as e:
        raise click.ClickException(
            f"Global install failed with exit code {e.returncode}: {' '.join(e.cmd)}"
        )

    if as_json:
        click.echo(json.dumps(resolution.to_dict(), indent=2))
    elif resolution.agent is not None:
        click.echo(resolution.agent)

    if resolution.agent is None and not programmatic:
        if not as_json:
            click.echo("No package manager detected", err=True)
        ctx.exit(NOT_DETECTED_EXIT_CODE)


@main.command()
def agents():
    """List recognized package managers and lockfiles."""
    click.echo("Agents:")
    for name, agent in AGENTS.items():
        click.echo(f"  {name:<12} {agent.install_page}")
    click.echo("\nLockfiles (first match wins):")
    for lockfile, agent in LOCKS.items():
        click.echo(f"  {lockfile:<20} {agent}")


if __name__ == "__main__":
    main()
