"""Tests for prompt assembly."""

import json

from gitdraft.prompts import (
    SYSTEM_PROMPT,
    ChatRequest,
    build_request,
    build_user_prompt,
)

CHANGES = "- **a.txt**: Modified\n  - Added: hello world\n"


class TestBuildUserPrompt:
    """Tests for build_user_prompt()."""

    def test_embeds_changes_verbatim(self) -> None:
        prompt = build_user_prompt(CHANGES)

        assert prompt.endswith("Changes:\n" + CHANGES + "\n")
        assert "imperative mood" in prompt
        assert "Additional context" not in prompt

    def test_braces_in_changes_survive(self) -> None:
        changes = "- **x.py**: Modified\n  - Added: d = {k: v}\n"

        assert changes in build_user_prompt(changes)

    def test_context_appended(self) -> None:
        prompt = build_user_prompt(CHANGES, context="  Fixes issue #12  ")

        assert prompt.endswith("\nAdditional context:\nFixes issue #12\n")

    def test_blank_context_ignored(self) -> None:
        assert build_user_prompt(CHANGES, context="   ") == build_user_prompt(CHANGES)


class TestBuildRequest:
    """Tests for build_request()."""

    def test_messages_in_order(self) -> None:
        request = build_request(CHANGES)

        assert request.model == "gpt-4"
        assert [m.role for m in request.messages] == ["system", "user"]
        assert request.messages[0].content == SYSTEM_PROMPT
        assert request.messages[1].content == build_user_prompt(CHANGES)

    def test_model_override(self) -> None:
        assert build_request(CHANGES, model="local-llm").model == "local-llm"

    def test_serializes_to_chat_payload(self) -> None:
        payload = json.loads(build_request(CHANGES, context="ctx").model_dump_json())

        assert set(payload) == {"model", "messages"}
        assert payload["messages"][1]["role"] == "user"
        assert payload["messages"][1]["content"].endswith("ctx\n")

    def test_round_trips_through_model(self) -> None:
        request = build_request(CHANGES)

        assert ChatRequest.model_validate_json(request.model_dump_json()) == request
