"""Configuration model: tool settings, package exports and workspace imports."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from ajisai.errors import ConfigError

SUPPORTED_CONFIG_EXTENSIONS = (".yaml", ".yml")

DEFAULT_CONFIG_FILE_YML = "ajisai.yml"
DEFAULT_CONFIG_FILE_YAML = "ajisai.yaml"
DEFAULT_PRESET_NAME = "default"

DEFAULT_CACHE_DIR = "./.cache/ajisai"
DEFAULT_NAMESPACE = "ajisai"


class ImportType(str, Enum):
    """Where an imported preset package comes from."""

    LOCAL = "local"
    GIT = "git"

    def __str__(self) -> str:
        return self.value


class AgentIntegrationType(str, Enum):
    """Agents that imported presets can be written for."""

    CURSOR = "cursor"
    GITHUB_COPILOT = "github-copilot"
    WINDSURF = "windsurf"

    def __str__(self) -> str:
        return self.value


@dataclass
class Settings:
    """Tool-wide settings; they have no effect on a package definition."""

    cache_dir: str = ""
    experimental: bool = False
    namespace: str = ""


@dataclass
class ExportedPresetDefinition:
    """Glob patterns of the prompts and rules a preset exports."""

    prompts: list[str] = field(default_factory=list)
    rules: list[str] = field(default_factory=list)


@dataclass
class Package:
    """Definition that treats the workspace as a preset package."""

    exports: dict[str, ExportedPresetDefinition] | None = None
    name: str = ""


@dataclass
class LocalImportDetails:
    """A package read from a local directory."""

    path: str = ""


@dataclass
class GitImportDetails:
    """A package fetched from a Git repository."""

    repository: str = ""
    revision: str = ""


ImportDetails = Union[LocalImportDetails, GitImportDetails]


@dataclass
class ImportedPackage:
    """A preset package imported into the workspace."""

    type: ImportType | str
    details: ImportDetails | None = None
    include: list[str] = field(default_factory=list)


@dataclass
class CursorIntegration:
    enabled: bool = False


@dataclass
class GitHubCopilotIntegration:
    enabled: bool = False


@dataclass
class WindsurfIntegration:
    enabled: bool = False


@dataclass
class AgentIntegrations:
    """Per-agent switches for writing imported presets."""

    cursor: CursorIntegration | None = None
    github_copilot: GitHubCopilotIntegration | None = None
    windsurf: WindsurfIntegration | None = None


@dataclass
class Workspace:
    """Presets used in this workspace and the agents they are written for."""

    imports: dict[str, ImportedPackage] | None = None
    integrations: AgentIntegrations | None = None


@dataclass
class Config:
    """The whole configuration of a workspace."""

    settings: Settings | None = None
    package: Package | None = None
    workspace: Workspace | None = None

    def imported_package_cache_root(self, package_name: str) -> str:
        """Return the absolute cache directory of an imported package."""
        settings = self.settings if self.settings is not None else Settings()
        cache_dir = os.path.abspath(settings.cache_dir)
        imports = (self.workspace.imports if self.workspace else None) or {}
        if package_name not in imports:
            raise ConfigError(f"package {package_name} not found")
        return os.path.join(cache_dir, package_name)


@dataclass
class ConfigContext:
    """A loaded configuration, or the fact that no configuration file exists."""

    config: Config | None = None
    not_found: bool = False

    @classmethod
    def found(cls, config: Config) -> ConfigContext:
        return cls(config=config, not_found=False)

    @classmethod
    def missing(cls) -> ConfigContext:
        return cls(config=None, not_found=True)


def is_supported_config_path(path: str) -> bool:
    """Whether the path has an extension that configuration can be read from."""
    return os.path.splitext(path)[1] in SUPPORTED_CONFIG_EXTENSIONS


def apply_settings_defaults(settings: Settings | None) -> Settings:
    """Fill in the default cache directory and namespace."""
    if settings is None:
        settings = Settings()
    if not settings.cache_dir:
        settings.cache_dir = DEFAULT_CACHE_DIR
    if not settings.namespace:
        settings.namespace = DEFAULT_NAMESPACE
    return settings


def apply_package_defaults(package: Package | None) -> Package:
    """Make sure the package and its exports exist."""
    if package is None:
        package = Package()
    if package.exports is None:
        package.exports = {}
    return package


def apply_workspace_defaults(workspace: Workspace | None) -> Workspace:
    """Make sure the workspace, its imports and its integrations exist."""
    if workspace is None:
        workspace = Workspace()
    if workspace.imports is None:
        workspace.imports = {}
    workspace.integrations = apply_integration_defaults(workspace.integrations)
    return workspace


def apply_integration_defaults(
    integrations: AgentIntegrations | None,
) -> AgentIntegrations:
    """Make sure every agent integration exists, disabled unless set."""
    if integrations is None:
        integrations = AgentIntegrations()
    if integrations.cursor is None:
        integrations.cursor = CursorIntegration()
    if integrations.github_copilot is None:
        integrations.github_copilot = GitHubCopilotIntegration()
    if integrations.windsurf is None:
        integrations.windsurf = WindsurfIntegration()
    return integrations