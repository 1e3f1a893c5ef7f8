from typing import List

import pytest
from langchain_core.messages import AIMessage

from darijacode.assistant.completion import CompletionClient
from darijacode.db.store import MemoryStore


class ProviderError(Exception):
    """Stands in for a provider SDK error that carries an HTTP status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"provider answered {status_code}")


class ScriptedLLM:
    """Chat model double: answers with the scripted items in order, raising the exceptions."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls: List[list] = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if not self.responses:
            raise AssertionError("unexpected completion request")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return AIMessage(content=item)


class ScriptedFactory:
    def __init__(self, responses):
        self.llm = ScriptedLLM(responses)
        self.options: List[dict] = []

    def __call__(self, max_tokens: int, temperature: float):
        self.options.append({"max_tokens": max_tokens, "temperature": temperature})
        return self.llm

    @property
    def calls(self):
        return self.llm.calls


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def scripted():
    """scripted("answer", ProviderError(500), ...) -> (CompletionClient, ScriptedFactory)"""

    def build(*responses):
        factory = ScriptedFactory(responses)
        return CompletionClient(llm_factory=factory), factory

    return build
