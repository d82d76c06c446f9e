"""Conversion between agent-neutral items and Windsurf rules and prompts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
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


class WindsurfTriggerType(str, Enum):
    ALWAYS = "always_on"
    GLOB = "glob"
    AGENT_REQUESTED = "model_decision"
    MANUAL = "manual"

    def __str__(self) -> str:
        return self.value


@dataclass
class WindsurfRuleMetadata:
    trigger: WindsurfTriggerType | str = WindsurfTriggerType.MANUAL
    globs: str = ""
    description: str = ""


@dataclass
class WindsurfRule:
    slug: str
    content: str
    metadata: WindsurfRuleMetadata = field(default_factory=WindsurfRuleMetadata)


@dataclass
class WindsurfPrompt:
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


def _trigger(value: Any) -> WindsurfTriggerType | str:
    text = _text(value, "trigger")
    try:
        return WindsurfTriggerType(text)
    except ValueError:
        return text


def _quote_globs(body: str) -> str:
    """Quote glob lines so that patterns such as '*.go' parse as YAML strings."""
    return "\n".join(
        _GLOBS_PREFIX + json.dumps(line[len(_GLOBS_PREFIX):].strip(), ensure_ascii=False)
        if line.startswith(_GLOBS_PREFIX)
        else line
        for line in body.split("\n")
    )


class WindsurfBridge:
    """Translates rules and prompts to and from Windsurf's formats."""

    def to_agent_rule(self, rule: RuleItem) -> WindsurfRule:
        attach = rule.metadata.attach
        if attach == AttachType.ALWAYS:
            metadata = WindsurfRuleMetadata(trigger=WindsurfTriggerType.ALWAYS)
        elif attach == AttachType.GLOB:
            metadata = WindsurfRuleMetadata(
                trigger=WindsurfTriggerType.GLOB, globs=",".join(rule.metadata.globs)
            )
        elif attach == AttachType.AGENT_REQUESTED:
            metadata = WindsurfRuleMetadata(
                trigger=WindsurfTriggerType.AGENT_REQUESTED,
                description=rule.metadata.description,
            )
        else:
            # Manual and unknown attach types become manual rules.
            metadata = WindsurfRuleMetadata(trigger=WindsurfTriggerType.MANUAL)
        return WindsurfRule(slug=rule.slug, content=rule.content, metadata=metadata)

    def from_agent_rule(self, rule: WindsurfRule) -> RuleItem:
        meta = rule.metadata
        trigger = meta.trigger
        if trigger == WindsurfTriggerType.ALWAYS:
            metadata = RuleMetadata(attach=AttachType.ALWAYS)
        elif trigger == WindsurfTriggerType.GLOB:
            metadata = RuleMetadata(attach=AttachType.GLOB, globs=meta.globs.split(","))
        elif trigger == WindsurfTriggerType.AGENT_REQUESTED:
            metadata = RuleMetadata(
                attach=AttachType.AGENT_REQUESTED, description=meta.description
            )
        elif trigger == WindsurfTriggerType.MANUAL:
            metadata = RuleMetadata(attach=AttachType.MANUAL)
        else:
            raise ValueError(f"unsupported rule trigger type: {trigger}")
        return RuleItem(rule.slug, rule.content, metadata)

    def to_agent_prompt(self, prompt: PromptItem) -> WindsurfPrompt:
        return WindsurfPrompt(slug=prompt.slug, content=prompt.content)

    def from_agent_prompt(self, prompt: WindsurfPrompt) -> PromptItem:
        return PromptItem(prompt.slug, prompt.content, PromptMetadata())

    def serialize_agent_rule(self, rule: WindsurfRule) -> str:
        # Windsurf does not accept quoted front matter values, so write it by hand.
        meta = rule.metadata
        lines = [f"trigger: {meta.trigger}"]
        description = meta.description.strip()
        if description:
            lines.append(f"description: {description}")
        globs = meta.globs.strip()
        if globs:
            lines.append(f"globs: {globs}")
        document = "---\n" + "\n".join(lines) + "\n---\n" + rule.content
        return document.rstrip("\n") + "\n"

    def deserialize_agent_rule(self, slug: str, body: str) -> WindsurfRule:
        parsed = parse_markdown_with_metadata(_quote_globs(body))
        data = parsed.front_matter
        metadata = WindsurfRuleMetadata(
            trigger=_trigger(data.get("trigger")),
            globs=_text(data.get("globs"), "globs"),
            description=_text(data.get("description"), "description"),
        )
        return WindsurfRule(slug=slug, content=parsed.content, metadata=metadata)

    def serialize_agent_prompt(self, prompt: WindsurfPrompt) -> str:
        return prompt.content

    def deserialize_agent_prompt(self, slug: str, body: str) -> WindsurfPrompt:
        return WindsurfPrompt(slug=slug, content=body)