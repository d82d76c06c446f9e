"""Conversion between the configuration model and plain YAML-ready data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ajisai.config import (
    AgentIntegrations,
    Config,
    CursorIntegration,
    ExportedPresetDefinition,
    GitHubCopilotIntegration,
    GitImportDetails,
    ImportedPackage,
    ImportType,
    LocalImportDetails,
    Package,
    Settings,
    WindsurfIntegration,
    Workspace,
)
from ajisai.errors import ConfigError

_INTEGRATION_KEYS = (
    ("cursor", "cursor"),
    ("github-copilot", "github_copilot"),
    ("windsurf", "windsurf"),
)


def serialize_config(config: Config) -> dict[str, Any]:
    """Turn a configuration into nested dicts and lists, leaving out unset parts."""
    data: dict[str, Any] = {}
    if config.settings is not None:
        data["settings"] = _serialize_settings(config.settings)
    if config.package is not None:
        data["package"] = _serialize_package(config.package)
    if config.workspace is not None:
        data["workspace"] = _serialize_workspace(config.workspace)
    return data


def deserialize_config(data: Mapping[str, Any] | None) -> Config:
    """Build a configuration from parsed YAML data; unknown keys are ignored."""
    root = _mapping(data, "config")
    return Config(
        settings=_deserialize_settings(root.get("settings")),
        package=_deserialize_package(root.get("package")),
        workspace=_deserialize_workspace(root.get("workspace")),
    )


def _serialize_settings(settings: Settings) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if settings.cache_dir:
        data["cacheDir"] = settings.cache_dir
    data["experimental"] = settings.experimental
    if settings.namespace:
        data["namespace"] = settings.namespace
    return data


def _serialize_package(package: Package) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if package.exports:
        data["exports"] = {
            name: _serialize_export(package.exports[name])
            for name in sorted(package.exports)
        }
    data["name"] = package.name
    return data


def _serialize_export(export: ExportedPresetDefinition) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if export.prompts:
        data["prompts"] = list(export.prompts)
    if export.rules:
        data["rules"] = list(export.rules)
    return data


def _import_type(value: Any) -> ImportType:
    try:
        return ImportType(value)
    except ValueError:
        raise ConfigError(f"unsupported import type: {value}") from None


def _serialize_import(imported: ImportedPackage) -> dict[str, Any] | None:
    kind = _import_type(imported.type)
    details = imported.details
    data: dict[str, Any] = {"type": kind.value}
    if imported.include:
        data["include"] = list(imported.include)
    if kind is ImportType.LOCAL:
        if not isinstance(details, LocalImportDetails):
            return None
        if details.path:
            data["path"] = details.path
    else:
        if not isinstance(details, GitImportDetails):
            return None
        if details.repository:
            data["repository"] = details.repository
        if details.revision:
            data["revision"] = details.revision
    return data


def _serialize_workspace(workspace: Workspace) -> dict[str, Any]:
    imports: dict[str, Any] = {}
    for name in sorted(workspace.imports or {}):
        entry = _serialize_import(workspace.imports[name])
        if entry is not None:
            imports[name] = entry

    data: dict[str, Any] = {}
    if imports:
        data["imports"] = imports
    if workspace.integrations is not None:
        integrations: dict[str, Any] = {}
        for key, attribute in _INTEGRATION_KEYS:
            integration = getattr(workspace.integrations, attribute)
            if integration is not None:
                integrations[key] = {"enabled": integration.enabled}
        data["integrations"] = integrations
    return data


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"{where} must be a mapping")
    return value


def _string(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ConfigError(f"{where} must be a string")


def _boolean(value: Any, where: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise ConfigError(f"{where} must be a boolean")


def _string_list(value: Any, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{where} must be a list")
    return [_string(item, where) for item in value]


def _deserialize_settings(value: Any) -> Settings:
    if value is None:
        return Settings()
    data = _mapping(value, "settings")
    return Settings(
        cache_dir=_string(data.get("cacheDir"), "settings.cacheDir"),
        experimental=_boolean(data.get("experimental"), "settings.experimental"),
        namespace=_string(data.get("namespace"), "settings.namespace"),
    )


def _deserialize_package(value: Any) -> Package:
    package = Package()
    if value is None:
        return package
    data = _mapping(value, "package")
    package.name = _string(data.get("name"), "package.name")
    exports = data.get("exports")
    if exports is not None:
        package.exports = {}
        for name, export in _mapping(exports, "package.exports").items():
            where = f"package.exports.{name}"
            entry = _mapping(export, where)
            package.exports[str(name)] = ExportedPresetDefinition(
                prompts=_string_list(entry.get("prompts"), f"{where}.prompts"),
                rules=_string_list(entry.get("rules"), f"{where}.rules"),
            )
    return package


def _deserialize_import(name: str, value: Any) -> ImportedPackage:
    where = f"workspace.imports.{name}"
    data = _mapping(value, where)
    kind = _import_type(_string(data.get("type"), f"{where}.type"))
    include = _string_list(data.get("include"), f"{where}.include")
    if kind is ImportType.LOCAL:
        details: LocalImportDetails | GitImportDetails = LocalImportDetails(
            path=_string(data.get("path"), f"{where}.path")
        )
    else:
        details = GitImportDetails(
            repository=_string(data.get("repository"), f"{where}.repository"),
            revision=_string(data.get("revision"), f"{where}.revision"),
        )
    return ImportedPackage(type=kind, details=details, include=include)


def _deserialize_workspace(value: Any) -> Workspace:
    if value is None:
        return Workspace()
    data = _mapping(value, "workspace")

    imports = {
        str(name): _deserialize_import(str(name), entry)
        for name, entry in _mapping(data.get("imports"), "workspace.imports").items()
    }

    integrations = AgentIntegrations()
    raw_integrations = data.get("integrations")
    if raw_integrations is not None:
        section = _mapping(raw_integrations, "workspace.integrations")

        def enabled(key: str) -> bool:
            entry = _mapping(section.get(key), f"workspace.integrations.{key}")
            return _boolean(entry.get("enabled"), f"workspace.integrations.{key}.enabled")

        integrations = AgentIntegrations(
            cursor=CursorIntegration(enabled=enabled("cursor")),
            github_copilot=GitHubCopilotIntegration(enabled=enabled("github-copilot")),
            windsurf=WindsurfIntegration(enabled=enabled("windsurf")),
        )

    return Workspace(imports=imports, integrations=integrations)