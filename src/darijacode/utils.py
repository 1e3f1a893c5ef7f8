import os
import time
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_groq import ChatGroq

from darijacode import config

_last_stamp = 0


def time_id() -> int:
    """
    Millisecond timestamp used to build record ids.
    Strictly increasing inside the process, so two records created in the
    same millisecond still get distinct ids.
    """
    global _last_stamp
    stamp = int(time.time() * 1000)
    if stamp <= _last_stamp:
        stamp = _last_stamp + 1
    _last_stamp = stamp
    return stamp


def get_llm(
    max_tokens: int = 1024,
    temperature: float = 0.7,
    provider: Optional[str] = None,
) -> BaseChatModel:
    """
    Crée une NOUVELLE instance du LLM pour chaque requête.
    Retries are disabled: a failed completion is surfaced to the caller after one attempt.
    """
    provider = (provider or config.LLM_PROVIDER).lower()
    if provider == "gemini":
        return ChatGoogleGenerativeAI(
            model=config.GEMINI_MODEL,
            google_api_key=os.getenv("GEMINI_API_KEY"),
            max_output_tokens=max_tokens,
            temperature=temperature,
            max_retries=0,
        )
    if provider == "groq":
        return ChatGroq(
            model=config.GROQ_MODEL,
            api_key=os.getenv("GROQ_API_KEY"),
            max_tokens=max_tokens,
            temperature=temperature,
            max_retries=0,
        )
    raise ValueError(f"Unknown LLM_PROVIDER '{provider}' (expected 'groq' or 'gemini')")
