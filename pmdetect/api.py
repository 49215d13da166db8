# pmdetect/api.py
from __future__ import annotations
from pathlib import Path

from pmdetect.installer import ensure_installed
from pmdetect.locator import locate
from pmdetect.models import DetectOptions, Resolution
from pmdetect.resolver import resolve


def _merge_options(
    options: DetectOptions | None,
    auto_install: bool | None,
    programmatic: bool | None,
    cwd: str | Path | None,
) -> DetectOptions:
    if options is None:
        options = DetectOptions()
    overrides = {}
    if auto_install is not None:
        overrides["auto_install"] = auto_install
    if programmatic is not None:
        overrides["programmatic"] = programmatic
    if cwd is not None:
        overrides["cwd"] = Path(cwd)
    if not overrides:
        return options
    return DetectOptions(**{**options.model_dump(), **overrides})


def resolve_project(
    options: DetectOptions | None = None,
    *,
    programmatic: bool | None = None,
    cwd: str | Path | None = None,
) -> Resolution:
    """Locate and resolve without touching the installed tools."""
    options = _merge_options(options, None, programmatic, cwd)
    location = locate(options.start_dir())
    return resolve(location, programmatic=options.programmatic)


def detect(
    options: DetectOptions | None = None,
    *,
    auto_install: bool | None = None,
    programmatic: bool | None = None,
    cwd: str | Path | None = None,
) -> str | None:
    """Detect the package manager a project uses.

    Returns an agent such as "npm", "yarn@berry" or "pnpm@6", or None.
    Unless programmatic, a detected agent that isn't installed triggers the
    install flow, which may raise InstallAborted.
    """
    options = _merge_options(options, auto_install, programmatic, cwd)
    resolution = resolve(locate(options.start_dir()), programmatic=options.programmatic)
    ensure_installed(resolution, options)
    return resolution.agent
