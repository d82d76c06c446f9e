import os

import pytest

from ajisai.config import (
    AgentIntegrations,
    Config,
    CursorIntegration,
    ExportedPresetDefinition,
    GitHubCopilotIntegration,
    GitImportDetails,
    ImportedPackage,
    Package,
    Settings,
    WindsurfIntegration,
    Workspace,
)
from ajisai.errors import (
    ConfigError,
    NoFileToReadError,
    NoFileToWriteError,
    UnsupportedConfigFileError,
)
from ajisai.manager import ConfigManager


def _full_config():
    return Config(
        settings=Settings(
            cache_dir="/custom/cache/dir", experimental=True, namespace="test-namespace"
        ),
        workspace=Workspace(
            imports={
                "test-import": ImportedPackage(
                    type="git",
                    include=["test-export", "typescript-react"],
                    details=GitImportDetails(repository="https://example.com/ajisai.git"),
                )
            },
            integrations=AgentIntegrations(
                cursor=CursorIntegration(enabled=True),
                github_copilot=GitHubCopilotIntegration(enabled=True),
                windsurf=WindsurfIntegration(enabled=True),
            ),
        ),
        package=Package(
            name="test-package",
            exports={
                "go-guide": ExportedPresetDefinition(
                    prompts=["go-guide/prompts/**/*.md"],
                    rules=["go-guide/rules/**/*.md"],
                )
            },
        ),
    )


def test_save_and_load_full_config(tmp_path):
    manager = ConfigManager(str(tmp_path / "config.yml"))
    config = _full_config()
    manager.save(config)
    assert manager.load() == _full_config()


def test_load_missing_file_raises(tmp_path):
    path = str(tmp_path / "non-existent.yaml")
    manager = ConfigManager(path)
    with pytest.raises(NoFileToReadError) as info:
        manager.load()
    assert info.value.candidate_paths == [path]


def test_unsupported_extension(tmp_path):
    path = tmp_path / "config.unsupported"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFileError) as info:
        ConfigManager(str(path))
    assert info.value.path == str(path)


def test_save_without_candidates():
    with pytest.raises(NoFileToWriteError):
        ConfigManager().save(Config())


def test_save_prefers_existing_candidate(tmp_path):
    first = tmp_path / "a.yaml"
    second = tmp_path / "b.yml"
    second.write_text("{}\n", encoding="utf-8")
    ConfigManager(str(first), str(second)).save(Config(package=Package(name="p")))
    assert not first.exists()
    assert second.read_text(encoding="utf-8") == "package:\n  name: p\n"


def test_save_falls_back_to_first_candidate(tmp_path):
    first = tmp_path / "a.yaml"
    second = tmp_path / "b.yml"
    ConfigManager(str(first), str(second)).save(Config(package=Package(name="p")))
    assert first.read_text(encoding="utf-8") == "package:\n  name: p\n"
    assert not second.exists()


def test_in_directory_candidates(tmp_path):
    manager = ConfigManager.in_directory(str(tmp_path))
    assert manager.candidate_paths == (
        os.path.join(str(tmp_path), "ajisai.yaml"),
        os.path.join(str(tmp_path), "ajisai.yml"),
    )


def test_in_directory_loads_yml_and_applies_defaults(tmp_path):
    (tmp_path / "ajisai.yml").write_text("package:\n  name: from-yml\n", encoding="utf-8")
    config = ConfigManager.in_directory(str(tmp_path)).load()
    assert config.package.name == "from-yml"
    assert config.package.exports == {}
    assert config.settings.cache_dir == "./.cache/ajisai"
    assert config.settings.namespace == "ajisai"
    assert config.workspace.imports == {}
    assert config.workspace.integrations.cursor == CursorIntegration(enabled=False)


def test_load_invalid_file_wraps_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("settings: [oops\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="failed to load config file"):
        ConfigManager(str(path)).load()


def test_apply_defaults_to_none():
    config = ConfigManager().apply_defaults(None)
    assert config.settings.cache_dir == "./.cache/ajisai"
    assert config.settings.namespace == "ajisai"
    assert config.package.exports == {}
    assert config.workspace.imports == {}
    assert config.workspace.integrations == AgentIntegrations(
        cursor=CursorIntegration(),
        github_copilot=GitHubCopilotIntegration(),
        windsurf=WindsurfIntegration(),
    )


def test_apply_defaults_preserves_values():
    given = Config(settings=Settings(cache_dir="/custom/cache", experimental=True))
    config = ConfigManager().apply_defaults(given)
    assert config.settings.cache_dir == "/custom/cache"
    assert config.settings.experimental is True
    assert config.settings.namespace == "ajisai"
    assert config.package == Package(exports={}, name="")
    assert config.workspace.imports == {}


def test_default_config():
    config = ConfigManager().default_config()
    assert config.settings == Settings(
        cache_dir="./.cache/ajisai", experimental=False, namespace="ajisai"
    )
    assert config.package.exports == {}
    assert config.workspace.imports == {}
    assert config.workspace.integrations.windsurf == WindsurfIntegration(enabled=False)