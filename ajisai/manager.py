"""Finding, loading and saving the workspace configuration file."""

from __future__ import annotations

import os

from ajisai.config import (
    DEFAULT_CONFIG_FILE_YAML,
    DEFAULT_CONFIG_FILE_YML,
    Config,
    apply_package_defaults,
    apply_settings_defaults,
    apply_workspace_defaults,
    is_supported_config_path,
)
from ajisai.errors import (
    ConfigError,
    NoFileToReadError,
    NoFileToWriteError,
    UnsupportedConfigFileError,
)
from ajisai.yaml_loader import YamlLoader


class ConfigManager:
    """Reads the first existing file among candidate configuration paths."""

    def __init__(self, *args: str) -> None:
        for path in args:
            if not is_supported_config_path(path):
                raise UnsupportedConfigFileError(path)
        self.candidate_paths: tuple[str, ...] = tuple(args)

    @classmethod
    def in_directory(cls, directory: str) -> ConfigManager:
        """A manager for the default configuration files in directory."""
        absolute = os.path.abspath(directory)
        return cls(
            os.path.join(absolute, DEFAULT_CONFIG_FILE_YAML),
            os.path.join(absolute, DEFAULT_CONFIG_FILE_YML),
        )

    def load(self) -> Config:
        """Load the first existing candidate and fill in defaults."""
        target = self._file_to_read()
        try:
            loaded = YamlLoader().load(target)
        except ConfigError as exc:
            raise ConfigError(f"failed to load config file {target}: {exc}") from exc
        return self.apply_defaults(loaded)

    def save(self, config: Config) -> None:
        """Write the configuration to the existing file, or the first candidate."""
        YamlLoader().save(self._file_to_write(), config)

    def apply_defaults(self, config: Config | None) -> Config:
        """Fill in every missing part of the configuration with its default."""
        if config is None:
            config = Config()
        config.package = apply_package_defaults(config.package)
        config.settings = apply_settings_defaults(config.settings)
        config.workspace = apply_workspace_defaults(config.workspace)
        return config

    def default_config(self) -> Config:
        """A configuration made of defaults only."""
        return Config(
            settings=apply_settings_defaults(None),
            package=apply_package_defaults(None),
            workspace=apply_workspace_defaults(None),
        )

    def _file_to_read(self) -> str:
        for path in self.candidate_paths:
            if os.path.exists(path):
                return path
        raise NoFileToReadError(self.candidate_paths)

    def _file_to_write(self) -> str:
        if not self.candidate_paths:
            raise NoFileToWriteError()
        for path in self.candidate_paths:
            if os.path.exists(path):
                return path
        return self.candidate_paths[0]