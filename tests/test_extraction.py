import pytest

from darijacode.assistant.errors import DecodeFailure
from darijacode.assistant.extraction import decode_payload, extract_candidate


def test_tagged_fence():
    text = 'Here you go:\n```json\n["javascript", "beginner"]\n```\nEnjoy!'
    assert extract_candidate(text) == '["javascript", "beginner"]'


def test_untagged_fence():
    text = "Sure!\n```\n{\"title\": \"Todo\"}\n```"
    assert extract_candidate(text) == '{"title": "Todo"}'


def test_plain_text_is_used_verbatim():
    assert extract_candidate('  ["css"]  ') == '["css"]'


def test_tagged_fence_is_preferred_over_earlier_untagged_one():
    text = "```\nnot this\n```\nand\n```json\n[1, 2]\n```"
    assert extract_candidate(text) == "[1, 2]"


def test_other_language_tag_is_skipped_in_generic_fence():
    text = "```javascript\n[\"react\"]\n```"
    assert extract_candidate(text) == '["react"]'


def test_inline_fence_without_tag():
    assert extract_candidate('```["a", "b"]```') == '["a", "b"]'


def test_mermaid_fence():
    text = "Flowchart:\n```mermaid\nflowchart TD\n  A --> B\n```"
    assert extract_candidate(text, language="mermaid") == "flowchart TD\n  A --> B"


def test_empty_fence_falls_through():
    text = "```json\n```\n```\n[3]\n```"
    assert extract_candidate(text) == "[3]"


def test_decode_payload_returns_structure():
    assert decode_payload('```json\n{"tags": ["api"]}\n```') == {"tags": ["api"]}


def test_decode_failure_is_reported_with_candidate():
    with pytest.raises(DecodeFailure) as info:
        decode_payload("```json\n{title: 'oops',}\n```")
    assert info.value.candidate == "{title: 'oops',}"
