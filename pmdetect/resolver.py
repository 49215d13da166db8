# pmdetect/resolver.py
from __future__ import annotations
import json
import logging
import re
from pathlib import Path

from pydantic import ValidationError

from pmdetect.agents import AGENT_NAMES, LOCKS
from pmdetect.errors import ManifestError
from pmdetect.models import Location, PackageManifest, Resolution

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def int_prefix(text: str | None) -> int | None:
    """Parse the leading integer of a version string.

    "7.0.0" -> 7, "2" -> 2. Returns None when the string doesn't start with
    digits ("berry", "", None).
    """
    if not text:
        return None
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_package_manager(value: str) -> tuple[str, str | None]:
    """Split a packageManager field like "pnpm@8.6.0" into (name, version)."""
    if value.startswith("^"):
        value = value[1:]
    parts = value.split("@")
    name = parts[0]
    version = parts[1] if len(parts) > 1 else None
    return name, version


def read_manifest(path: Path) -> PackageManifest:
    """Load and validate package.json. Raises ManifestError on any problem."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ManifestError(path, "top level is not a JSON object")

    try:
        return PackageManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(path, str(e)) from e


def _agent_from_manifest(
    manifest: PackageManifest, programmatic: bool
) -> tuple[str | None, str | None]:
    name, version = parse_package_manager(manifest.package_manager)
    major = int_prefix(version)

    if name == "yarn" and major is not None and major > 1:
        # packageManager pins a berry release, which isn't a version of the
        # yarn npm package
        return "yarn@berry", "berry"
    if name == "pnpm" and major is not None and major < 7:
        return "pnpm@6", version
    if name in AGENT_NAMES:
        return name, version

    if not programmatic:
        logger.warning("Unknown packageManager: %s", manifest.package_manager)
    return None, version


def resolve(location: Location, programmatic: bool = False) -> Resolution:
    """Pick the agent for a located project.

    A packageManager field in the manifest takes precedence over the
    lockfile. Manifest problems are ignored and fall through to the
    lockfile.
    """
    agent: str | None = None
    version: str | None = None

    if location.manifest is not None and location.manifest.is_file():
        try:
            manifest = read_manifest(location.manifest)
        except ManifestError as e:
            logger.debug("Ignoring manifest: %s", e)
        else:
            if manifest.package_manager is not None:
                agent, version = _agent_from_manifest(manifest, programmatic)

    if agent is None and location.lockfile is not None:
        agent = LOCKS[location.lockfile.name]
        logger.debug("Inferred %s from %s", agent, location.lockfile.name)

    return Resolution(
        agent=agent,
        version=version,
        lockfile=location.lockfile,
        manifest=location.manifest,
    )
