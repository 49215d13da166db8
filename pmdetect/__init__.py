from pmdetect.agents import AGENTS, AGENT_NAMES, INSTALL_PAGE, LOCKS, AgentConfig, base_name
from pmdetect.api import detect, resolve_project
from pmdetect.errors import DetectError, InstallAborted, ManifestError
from pmdetect.models import DetectOptions, Resolution

__all__ = [
    "AGENTS",
    "AGENT_NAMES",
    "INSTALL_PAGE",
    "LOCKS",
    "AgentConfig",
    "DetectError",
    "DetectOptions",
    "InstallAborted",
    "ManifestError",
    "Resolution",
    "base_name",
    "detect",
    "resolve_project",
]
