# pmdetect/installer.py
from __future__ import annotations
import logging
import os
import shutil
import subprocess
from typing import Mapping

import click
from rich.console import Console
from rich.style import Style
from rich.text import Text

from pmdetect.agents import INSTALL_PAGE, base_name
from pmdetect.errors import InstallAborted
from pmdetect.models import DetectOptions, Resolution

logger = logging.getLogger(__name__)


def cmd_exists(cmd: str) -> bool:
    return shutil.which(cmd) is not None


def is_ci(environ: Mapping[str, str] | None = None) -> bool:
    """True when the CI environment variable is set to anything non-empty."""
    if environ is None:
        environ = os.environ
    return bool(environ.get("CI"))


def install_link(agent: str, console: Console | None = None) -> str:
    """Render the agent name as a hyperlink to its install docs.

    Terminals get an OSC 8 link; anything else gets "agent (url)".
    """
    url = INSTALL_PAGE.get(agent) or INSTALL_PAGE.get(base_name(agent))
    if url is None:
        return agent
    if console is None:
        console = Console()
    if not console.is_terminal:
        return f"{agent} ({url})"
    with console.capture() as capture:
        console.print(Text(agent, style=Style(link=url)), end="")
    return capture.get()


def global_install_command(agent: str, version: str | None = None) -> list[str]:
    package = base_name(agent)
    if version:
        package = f"{package}@{version}"
    return ["npm", "i", "-g", package]


def ensure_installed(resolution: Resolution, options: DetectOptions) -> None:
    """Make sure the resolved agent's executable is on PATH.

    Installs it globally through npm when allowed. Raises InstallAborted
    when running under CI or when the user declines. A failing npm process
    raises CalledProcessError; success is not re-checked afterwards.
    """
    agent = resolution.agent
    if agent is None or options.programmatic:
        return
    if cmd_exists(base_name(agent)):
        return

    logger.warning("Detected %s but it doesn't seem to be installed.", agent)

    if not options.auto_install:
        if is_ci():
            raise InstallAborted(agent, reason="ci")
        link = install_link(agent)
        if not click.confirm(f"Would you like to globally install {link}?", default=False):
            raise InstallAborted(agent, reason="declined")

    cmd = global_install_command(agent, resolution.version)
    logger.info("Running %s", " ".join(cmd))
    # stdio is inherited so npm's progress shows up in the caller's terminal
    subprocess.run(cmd, cwd=options.start_dir(), check=True)
