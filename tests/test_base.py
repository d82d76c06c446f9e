import pytest

from ajisai.bridges.base import (
    AttachType,
    FrontMatterError,
    PromptItem,
    PromptMetadata,
    RuleItem,
    RuleMetadata,
    parse_markdown_with_metadata,
)


def test_parse_front_matter_and_body():
    text = "---\nalwaysApply: true\ndescription: hello\n---\nBody text\n"
    result = parse_markdown_with_metadata(text)
    assert result.front_matter == {"alwaysApply": True, "description": "hello"}
    assert result.content == "Body text\n"


def test_parse_without_front_matter_returns_whole_text():
    text = "# Title\n\nJust content"
    result = parse_markdown_with_metadata(text)
    assert result.front_matter == {}
    assert result.content == text


def test_parse_empty_front_matter():
    result = parse_markdown_with_metadata("---\n---\nbody")
    assert result.front_matter == {}
    assert result.content == "body"


def test_parse_empty_body_after_front_matter():
    result = parse_markdown_with_metadata("---\nglobs:\n---\n")
    assert result.front_matter == {"globs": None}
    assert result.content == ""


def test_parse_invalid_yaml_raises():
    with pytest.raises(FrontMatterError):
        parse_markdown_with_metadata("---\nalwaysApply: @invalid-format\n---\n\nx\n")


def test_parse_unclosed_front_matter_raises():
    with pytest.raises(FrontMatterError):
        parse_markdown_with_metadata("---\nkey: value\nno closing\n")


def test_parse_non_mapping_front_matter_raises():
    with pytest.raises(FrontMatterError):
        parse_markdown_with_metadata("---\n- a\n- b\n---\nbody\n")


def test_front_matter_error_is_value_error():
    with pytest.raises(ValueError):
        parse_markdown_with_metadata("---\n: : :\n  - [\n---\n")


def test_rule_item_defaults_and_equality():
    rule = RuleItem("slug", "content", RuleMetadata(attach=AttachType.GLOB, globs=["*.go"]))
    assert rule == RuleItem("slug", "content", RuleMetadata(attach="glob", globs=["*.go"]))
    assert RuleMetadata().globs == []
    assert RuleMetadata().description == ""


def test_prompt_item_equality():
    prompt = PromptItem("p", "body", PromptMetadata(description="d"))
    assert prompt == PromptItem("p", "body", PromptMetadata("d"))
    assert prompt != PromptItem("p", "body")