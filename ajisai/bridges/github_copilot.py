"""Conversion between agent-neutral items and GitHub Copilot instructions and prompts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import yaml

from ajisai.bridges.base import (
    AttachType,
    FrontMatterError,
    PromptItem,
    PromptMetadata,
    RuleItem,
    RuleMetadata,
    parse_markdown_with_metadata,
)

# Both patterns mean "apply to every file" and are treated alike.
GITHUB_COPILOT_APPLY_TO_ALL_PRIMARY = "**"
GITHUB_COPILOT_APPLY_TO_ALL_SECONDARY = "**/*"
GITHUB_COPILOT_APPLY_TO_ALL = (
    GITHUB_COPILOT_APPLY_TO_ALL_PRIMARY,
    GITHUB_COPILOT_APPLY_TO_ALL_SECONDARY,
)


class GitHubCopilotChatMode(str, Enum):
    """The chat mode a prompt runs in."""

    AGENT = "agent"
    ASK = "ask"
    EDIT = "edit"

    def __str__(self) -> str:
        return self.value


@dataclass
class GitHubCopilotInstructionMetadata:
    apply_to: str = ""


@dataclass
class GitHubCopilotInstruction:
    slug: str
    content: str
    metadata: GitHubCopilotInstructionMetadata = field(
        default_factory=GitHubCopilotInstructionMetadata
    )


@dataclass
class GitHubCopilotPromptMetadata:
    description: str = ""
    mode: GitHubCopilotChatMode | str = ""
    tools: list[str] = field(default_factory=list)


@dataclass
class GitHubCopilotPrompt:
    slug: str
    content: str
    metadata: GitHubCopilotPromptMetadata = field(
        default_factory=GitHubCopilotPromptMetadata
    )


def _text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise FrontMatterError(f"{key} must be a string")


def _text_list(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise FrontMatterError(f"{key} must be a list")
    return [_text(item, key) for item in value]


def _mode(value: Any) -> GitHubCopilotChatMode | str:
    text = _text(value, "mode")
    try:
        return GitHubCopilotChatMode(text)
    except ValueError:
        return text


def _dump(data: dict[str, Any]) -> str:
    return yaml.safe_dump(
        data,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=2**31 - 1,
    )


class GitHubCopilotBridge:
    """Translates rules and prompts to and from GitHub Copilot's formats."""

    def to_agent_rule(self, rule: RuleItem) -> GitHubCopilotInstruction:
        attach = rule.metadata.attach
        if attach == AttachType.ALWAYS:
            metadata = GitHubCopilotInstructionMetadata(
                apply_to=GITHUB_COPILOT_APPLY_TO_ALL_PRIMARY
            )
        elif attach == AttachType.GLOB:
            metadata = GitHubCopilotInstructionMetadata(
                apply_to=",".join(rule.metadata.globs)
            )
        else:
            # Agent-requested, manual and unknown attach types carry no applyTo.
            metadata = GitHubCopilotInstructionMetadata()
        return GitHubCopilotInstruction(
            slug=rule.slug, content=rule.content, metadata=metadata
        )

    def from_agent_rule(self, rule: GitHubCopilotInstruction) -> RuleItem:
        globs = [glob for glob in rule.metadata.apply_to.split(",") if glob]
        if any(glob in GITHUB_COPILOT_APPLY_TO_ALL for glob in globs):
            metadata = RuleMetadata(attach=AttachType.ALWAYS)
        elif globs:
            metadata = RuleMetadata(attach=AttachType.GLOB, globs=globs)
        else:
            metadata = RuleMetadata(attach=AttachType.MANUAL)
        return RuleItem(rule.slug, rule.content, metadata)

    def to_agent_prompt(self, prompt: PromptItem) -> GitHubCopilotPrompt:
        return GitHubCopilotPrompt(
            slug=prompt.slug,
            content=prompt.content,
            metadata=GitHubCopilotPromptMetadata(
                description=prompt.metadata.description,
                mode=GitHubCopilotChatMode.AGENT,
                tools=[],
            ),
        )

    def from_agent_prompt(self, prompt: GitHubCopilotPrompt) -> PromptItem:
        return PromptItem(
            prompt.slug,
            prompt.content,
            PromptMetadata(description=prompt.metadata.description),
        )

    def serialize_agent_rule(self, rule: GitHubCopilotInstruction) -> str:
        tidy_content = rule.content.rstrip("\n")
        data: dict[str, Any] = {}
        if rule.metadata.apply_to:
            data["applyTo"] = rule.metadata.apply_to
        if not data:
            return tidy_content
        return "---\n" + _dump(data) + "---\n" + tidy_content + "\n"

    def deserialize_agent_rule(self, slug: str, body: str) -> GitHubCopilotInstruction:
        parsed = parse_markdown_with_metadata(body)
        metadata = GitHubCopilotInstructionMetadata(
            apply_to=_text(parsed.front_matter.get("applyTo"), "applyTo")
        )
        return GitHubCopilotInstruction(
            slug=slug, content=parsed.content, metadata=metadata
        )

    def serialize_agent_prompt(self, prompt: GitHubCopilotPrompt) -> str:
        meta = prompt.metadata
        data: dict[str, Any] = {}
        if meta.description:
            data["description"] = meta.description
        if meta.mode:
            data["mode"] = str(meta.mode)
        if meta.tools:
            data["tools"] = [str(tool) for tool in meta.tools]
        if not data:
            return prompt.content.rstrip("\n") + "\n"
        document = "---\n" + _dump(data) + "---\n" + prompt.content
        return document.rstrip("\n") + "\n"

    def deserialize_agent_prompt(self, slug: str, body: str) -> GitHubCopilotPrompt:
        parsed = parse_markdown_with_metadata(body)
        data = parsed.front_matter
        metadata = GitHubCopilotPromptMetadata(
            description=_text(data.get("description"), "description"),
            mode=_mode(data.get("mode")),
            tools=_text_list(data.get("tools"), "tools"),
        )
        return GitHubCopilotPrompt(slug=slug, content=parsed.content, metadata=metadata)