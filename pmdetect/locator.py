# pmdetect/locator.py
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable

from pmdetect.agents import LOCKS, MANIFEST_FILENAME
from pmdetect.models import Location

logger = logging.getLogger(__name__)


def find_up(names: Iterable[str], cwd: Path) -> Path | None:
    """Return the nearest file named in `names`, searching cwd then its parents.

    Within one directory the names are tried in the order given, so the
    caller's ordering decides ties.
    """
    names = list(names)
    current = Path(os.path.abspath(cwd))
    for directory in [current, *current.parents]:
        for name in names:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def locate(cwd: Path) -> Location:
    """Find the lockfile and the package.json to consult for `cwd`.

    The manifest belongs to the lockfile's directory when a lockfile is
    found, whether or not it exists there. Only without a lockfile is
    package.json searched for on its own.
    """
    lockfile = find_up(LOCKS.keys(), cwd)
    if lockfile is not None:
        manifest = lockfile.parent / MANIFEST_FILENAME
    else:
        manifest = find_up([MANIFEST_FILENAME], cwd)

    logger.debug("Located lockfile=%s manifest=%s from %s", lockfile, manifest, cwd)
    return Location(lockfile=lockfile, manifest=manifest)
