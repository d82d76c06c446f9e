"""Reading and writing configuration as YAML files."""

from __future__ import annotations

import os
import tempfile

import yaml

from ajisai.config import Config
from ajisai.errors import ConfigError
from ajisai.serializer import deserialize_config, serialize_config


def _atomic_write(path: str, text: str) -> None:
    """Write text to path through a temporary file in the same directory."""
    directory = os.path.dirname(path) or "."
    fd, temp_path = tempfile.mkstemp(dir=directory, prefix=".ajisai-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, path)
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise


class YamlLoader:
    """Loads and saves a configuration in YAML form."""

    def load(self, config_path: str) -> Config:
        """Read and parse the YAML configuration at config_path."""
        resolved = os.path.abspath(config_path)
        if not os.path.exists(resolved):
            raise ConfigError(f"failed to get config file {resolved}: no such file")

        try:
            with open(resolved, encoding="utf-8") as handle:
                body = handle.read()
        except OSError as exc:
            raise ConfigError(f"failed to read config file {resolved}: {exc}") from exc

        try:
            data = yaml.safe_load(body)
        except yaml.YAMLError as exc:
            raise ConfigError(
                f"failed to unmarshal config file {resolved}: {exc}"
            ) from exc

        return deserialize_config(data)

    def save(self, config_path: str, config: Config) -> None:
        """Write the configuration to config_path, replacing the file atomically."""
        resolved = os.path.abspath(config_path)
        try:
            data = serialize_config(config)
        except ConfigError as exc:
            raise ConfigError(
                f"failed to convert config to serializable format: {exc}"
            ) from exc

        text = yaml.safe_dump(
            data,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )

        try:
            _atomic_write(resolved, text)
        except OSError as exc:
            raise ConfigError(
                f"failed to save config file atomically: {exc}"
            ) from exc