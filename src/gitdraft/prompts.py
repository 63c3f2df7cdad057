"""Commit-message prompt built around the structured change block."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from gitdraft.config.constants import DEFAULT_MODEL

SYSTEM_PROMPT = (
    "You are a helpful assistant that writes clear and concise Git commit messages "
    "in the imperative mood, without any speculation."
)

USER_PROMPT_TEMPLATE = """\
Write a Git commit message with a short title and a detailed body, using the imperative mood. \
Do not include any speculation or guesses. Be concise and precise. \
Use bullet points in the body to list changes.

Changes:
{structured_changes}
"""

CONTEXT_TEMPLATE = """
Additional context:
{context}
"""


class ChatMessage(BaseModel):
    role: Literal["system", "user"]
    content: str


class ChatRequest(BaseModel):
    """Chat-completion request body, ready to be serialized with model_dump_json()."""

    model: str = DEFAULT_MODEL
    messages: list[ChatMessage] = Field(default_factory=list)


def build_user_prompt(structured_changes: str, context: str | None = None) -> str:
    prompt = USER_PROMPT_TEMPLATE.format(structured_changes=structured_changes)
    if context and context.strip():
        prompt += CONTEXT_TEMPLATE.format(context=context.strip())
    return prompt


def build_request(
    structured_changes: str,
    model: str = DEFAULT_MODEL,
    context: str | None = None,
) -> ChatRequest:
    return ChatRequest(
        model=model,
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=build_user_prompt(structured_changes, context)),
        ],
    )
