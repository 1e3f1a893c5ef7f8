import logging
from typing import Any, Callable, List, Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from darijacode.models import ChatMessage
from darijacode.utils import get_llm

from .errors import TransportFailure
from .prompts import COMPLETION_PROMPT

logger = logging.getLogger(__name__)


def to_langchain_history(turns: Sequence[ChatMessage]) -> List[BaseMessage]:
    history: List[BaseMessage] = []
    for turn in turns:
        if turn.role == "user":
            history.append(HumanMessage(content=turn.content))
        else:
            history.append(AIMessage(content=turn.content))
    return history


def _status_of(error: Exception) -> Optional[int]:
    """HTTP status carried by a provider error (groq / httpx / google), if any."""
    for candidate in (
        getattr(error, "status_code", None),
        getattr(getattr(error, "response", None), "status_code", None),
        getattr(error, "code", None),
    ):
        if isinstance(candidate, int):
            return candidate
    return None


def _text_of(content: Any) -> str:
    # Gemini may answer with a list of content parts instead of a plain string
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return ""


class CompletionClient:
    """
    Single request/response boundary to the text-completion service.

    One attempt per call: retry, if any, is a new request issued by the caller.
    """

    def __init__(self, llm_factory: Callable[..., BaseChatModel] = get_llm):
        self._llm_factory = llm_factory

    async def complete(
        self,
        system_prompt: str,
        user_turn: str,
        prior_turns: Sequence[ChatMessage] = (),
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> str:
        """
        Sends system prompt + prior turns + the new user turn and returns the completion text.

        Args:
            system_prompt: full system message, language instruction included.
            user_turn: the new user message.
            prior_turns: earlier conversation, oldest first (conversational features only).

        Raises:
            TransportFailure: the provider call failed or answered with a non-2xx status.
        """
        messages = COMPLETION_PROMPT.format_messages(
            system_prompt=system_prompt,
            history=to_langchain_history(prior_turns),
            user_turn=user_turn,
        )
        try:
            llm = self._llm_factory(max_tokens=max_tokens, temperature=temperature)
            response = await llm.ainvoke(messages)
        except Exception as e:
            status = _status_of(e)
            logger.error(f"Completion request failed (status={status}): {e}")
            raise TransportFailure("Completion request failed", status=status) from e

        return _text_of(response.content).strip()
