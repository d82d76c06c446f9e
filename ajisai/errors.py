"""Errors raised while locating, reading and writing configuration files."""

from __future__ import annotations

import os


class ConfigError(Exception):
    """Base class for configuration problems."""


class NoFileToReadError(ConfigError):
    """None of the candidate configuration files exists."""

    def __init__(self, candidate_paths):
        self.candidate_paths = list(candidate_paths)
        listed = " ".join(self.candidate_paths)
        super().__init__(
            f"could not find config file to read from candidates: [{listed}]"
        )


class NoFileToWriteError(ConfigError):
    """There is no candidate path to write a configuration file to."""

    def __init__(self):
        super().__init__("could not find config file to write")


class UnsupportedConfigFileError(ConfigError):
    """The configuration file has an extension that cannot be read."""

    def __init__(self, path):
        self.path = path
        extension = os.path.splitext(path)[1]
        super().__init__(
            f"config file path {path} has unsupported extension: {extension}"
        )