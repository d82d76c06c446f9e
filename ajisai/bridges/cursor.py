"""Conversion between agent-neutral items and Cursor rules and prompts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ajisai.bridges.base import (
    AttachType,
    FrontMatterError,
    PromptItem,
    PromptMetadata,
    RuleItem,
    RuleMetadata,
    parse_markdown_with_metadata,
)

_GLOBS_PREFIX = "globs: "


@dataclass
class CursorRuleMetadata:
    always_apply: bool = False
    description: str = ""
    globs: str = ""


@dataclass
class CursorRule:
    slug: str
    content: str
    metadata: CursorRuleMetadata = field(default_factory=CursorRuleMetadata)


@dataclass
class CursorPrompt:
    slug: str
    content: str


def _text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise FrontMatterError(f"{key} must be a string")


def _flag(value: Any, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise FrontMatterError(f"{key} must be a boolean")


def _quote_globs(body: str) -> str:
    """Quote glob lines so that patterns such as '*.go' parse as YAML strings."""
    return "\n".join(
        _GLOBS_PREFIX + json.dumps(line[len(_GLOBS_PREFIX):].strip(), ensure_ascii=False)
        if line.startswith(_GLOBS_PREFIX)
        else line
        for line in body.split("\n")
    )


class CursorBridge:
    """Translates rules and prompts to and from Cursor's formats."""

    def to_agent_rule(self, rule: RuleItem) -> CursorRule:
        attach = rule.metadata.attach
        metadata = CursorRuleMetadata()
        if attach == AttachType.ALWAYS:
            metadata.always_apply = True
        elif attach == AttachType.GLOB:
            metadata.globs = ",".join(rule.metadata.globs)
        elif attach == AttachType.AGENT_REQUESTED:
            metadata.description = rule.metadata.description
        # Manual and unknown attach types become manual rules.
        return CursorRule(slug=rule.slug, content=rule.content, metadata=metadata)

    def from_agent_rule(self, rule: CursorRule) -> RuleItem:
        meta = rule.metadata
        if meta.always_apply:
            metadata = RuleMetadata(attach=AttachType.ALWAYS)
        elif meta.globs:
            metadata = RuleMetadata(attach=AttachType.GLOB, globs=meta.globs.split(","))
        elif meta.description:
            metadata = RuleMetadata(
                attach=AttachType.AGENT_REQUESTED, description=meta.description
            )
        else:
            metadata = RuleMetadata(attach=AttachType.MANUAL)
        return RuleItem(rule.slug, rule.content, metadata)

    def to_agent_prompt(self, prompt: PromptItem) -> CursorPrompt:
        return CursorPrompt(slug=prompt.slug, content=prompt.content)

    def from_agent_prompt(self, prompt: CursorPrompt) -> PromptItem:
        return PromptItem(prompt.slug, prompt.content, PromptMetadata())

    def serialize_agent_rule(self, rule: CursorRule) -> str:
        # Cursor does not accept quoted front matter values, so write it by hand.
        meta = rule.metadata
        description = meta.description.strip()
        globs = meta.globs.strip()
        lines = [
            "alwaysApply: " + ("true" if meta.always_apply else "false"),
            f"description: {description}" if description else "description:",
            f"globs: {globs}" if globs else "globs:",
        ]
        document = "---\n" + "\n".join(lines) + "\n---\n" + rule.content
        return document.rstrip("\n") + "\n"

    def deserialize_agent_rule(self, slug: str, body: str) -> CursorRule:
        parsed = parse_markdown_with_metadata(_quote_globs(body))
        data = parsed.front_matter
        metadata = CursorRuleMetadata(
            always_apply=_flag(data.get("alwaysApply"), "alwaysApply"),
            description=_text(data.get("description"), "description"),
            globs=_text(data.get("globs"), "globs"),
        )
        return CursorRule(slug=slug, content=parsed.content, metadata=metadata)

    def serialize_agent_prompt(self, prompt: CursorPrompt) -> str:
        return prompt.content

    def deserialize_agent_prompt(self, slug: str, body: str) -> CursorPrompt:
        return CursorPrompt(slug=slug, content=body)