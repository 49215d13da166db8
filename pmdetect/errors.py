# pmdetect/errors.py
from __future__ import annotations
from pathlib import Path


class DetectError(Exception):
    """Base class for errors raised by pmdetect."""


class ManifestError(DetectError):
    """package.json could not be read or did not validate.

    Ignorable: the resolver treats it as "no declaration present" and falls
    back to lockfile inference.
    """

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class InstallAborted(DetectError):
    """The detected agent is missing and installing it was not allowed.

    Raised under CI (reason "ci") or when the user declines the install
    prompt (reason "declined"). Callers that want the command line behavior
    exit with `exit_code`.
    """

    exit_code = 1

    def __init__(self, agent: str, reason: str):
        if reason == "ci":
            detail = "not installing in a CI environment"
        else:
            detail = "install declined"
        super().__init__(f"{agent} is not installed ({detail})")
        self.agent = agent
        self.reason = reason
