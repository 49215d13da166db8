# pmdetect/agents.py
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class AgentConfig:
    """A package manager pmdetect knows how to recognize.

    `name` is the agent identifier, optionally carrying an "@variant" suffix
    for tools whose major versions behave differently (yarn berry, pnpm 6).
    `executable` is what gets looked up on PATH and passed to the global
    install command.
    """
    name: str
    executable: str
    install_page: str


def base_name(agent: str) -> str:
    """Strip the "@variant" suffix from an agent identifier."""
    return agent.split("@")[0]


_AGENT_LIST = [
    AgentConfig(
        name="bun",
        executable="bun",
        install_page="https://bun.sh",
    ),
    AgentConfig(
        name="pnpm",
        executable="pnpm",
        install_page="https://pnpm.io/installation",
    ),
    AgentConfig(
        name="pnpm@6",
        executable="pnpm",
        install_page="https://pnpm.io/6.x/installation",
    ),
    AgentConfig(
        name="yarn",
        executable="yarn",
        install_page="https://classic.yarnpkg.com/en/docs/install",
    ),
    AgentConfig(
        name="yarn@berry",
        executable="yarn",
        install_page="https://yarnpkg.com/getting-started/install",
    ),
    AgentConfig(
        name="npm",
        executable="npm",
        install_page="https://docs.npmjs.com/cli/v8/configuring-npm/install",
    ),
]

AGENTS = MappingProxyType({agent.name: agent for agent in _AGENT_LIST})

AGENT_NAMES = frozenset(AGENTS)

# Order matters: when several lockfiles sit in the same directory the
# earliest entry wins.
LOCKS = MappingProxyType({
    "bun.lockb": "bun",
    "pnpm-lock.yaml": "pnpm",
    "yarn.lock": "yarn",
    "package-lock.json": "npm",
    "npm-shrinkwrap.json": "npm",
})

MANIFEST_FILENAME = "package.json"

INSTALL_PAGE = MappingProxyType(
    {agent.name: agent.install_page for agent in _AGENT_LIST}
)
