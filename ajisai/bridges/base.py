"""Agent-neutral rule and prompt items, and front matter parsing for Markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import yaml

_DELIMITER = "---"


class AttachType(str, Enum):
    """When a rule is attached to an agent's context."""

    ALWAYS = "always"
    GLOB = "glob"
    AGENT_REQUESTED = "agent-requested"
    MANUAL = "manual"

    def __str__(self) -> str:
        return self.value


@dataclass
class RuleMetadata:
    """How and when a rule applies."""

    attach: AttachType | str = AttachType.MANUAL
    globs: list[str] = field(default_factory=list)
    description: str = ""


@dataclass
class RuleItem:
    """A rule in the agent-neutral format."""

    slug: str
    content: str
    metadata: RuleMetadata = field(default_factory=RuleMetadata)


@dataclass
class PromptMetadata:
    """Descriptive data attached to a prompt."""

    description: str = ""


@dataclass
class PromptItem:
    """A prompt in the agent-neutral format."""

    slug: str
    content: str
    metadata: PromptMetadata = field(default_factory=PromptMetadata)


class FrontMatterError(ValueError):
    """The front matter of a Markdown document could not be read."""


@dataclass
class ParsedMarkdown:
    """A Markdown document split into its front matter and its body."""

    front_matter: dict[str, Any]
    content: str


def parse_markdown_with_metadata(text: str) -> ParsedMarkdown:
    """Split YAML front matter delimited by '---' lines from the Markdown body.

    A document without an opening delimiter has empty front matter and is
    returned whole as the body.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != _DELIMITER:
        return ParsedMarkdown(front_matter={}, content=text)

    closing = next(
        (
            position
            for position, line in enumerate(lines[1:], start=1)
            if line.rstrip("\r\n") == _DELIMITER
        ),
        None,
    )
    if closing is None:
        raise FrontMatterError("front matter is not closed")

    raw = "".join(lines[1:closing])
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"failed to parse front matter: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("front matter must be a mapping")

    return ParsedMarkdown(
        front_matter={str(key): value for key, value in data.items()},
        content="".join(lines[closing + 1 :]),
    )