import logging
from datetime import datetime
from typing import List, Optional

from darijacode.assistant.completion import CompletionClient
from darijacode.assistant.errors import AssistantError
from darijacode.assistant.mutators import append_message
from darijacode.assistant.prompts import CHAT_SYSTEM, with_language
from darijacode.assistant.transcription import TranscriptionClient, VoiceRecorder
from darijacode.db.store import CHAT_MESSAGES_KEY, KeyValueStore, PersistentValue
from darijacode.models import LANGUAGES, ChatMessage, Dictation
from darijacode.utils import time_id

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Marhaba! I'm your DarijaCode assistant. Ask me any coding question in Darija, Arabic, French, or English!"
)
EMPTY_REPLY = "Sorry, I couldn't process that request."
ERROR_REPLY = (
    "Sorry, there was an error processing your request. Please make sure your API key is set up correctly."
)
TRANSCRIPTION_ERROR = (
    "Could not transcribe audio. Please check your Hugging Face API token or try typing your message instead."
)


def welcome_history() -> List[ChatMessage]:
    return [ChatMessage(id="welcome", role="assistant", content=WELCOME_MESSAGE, timestamp=datetime.now())]


class ChatService:
    """Assistant conversation: one completion per user message, history kept in local storage."""

    def __init__(
        self,
        client: CompletionClient,
        store: Optional[KeyValueStore],
        transcriber: Optional[TranscriptionClient] = None,
        language: str = "en",
    ):
        self.client = client
        self.transcriber = transcriber or TranscriptionClient()
        self.messages = PersistentValue(store, CHAT_MESSAGES_KEY, List[ChatMessage], welcome_history)
        self.language = "en"
        self.set_language(language)

    def set_language(self, language: str) -> None:
        if language not in LANGUAGES:
            raise ValueError(f"Unsupported language '{language}'")
        self.language = language

    def _commit(self, role: str, content: str) -> ChatMessage:
        message = ChatMessage(id=str(time_id()), role=role, content=content, timestamp=datetime.now())
        self.messages.update(lambda current: append_message(current, message))
        return message

    async def send(self, text: str) -> Optional[ChatMessage]:
        """
        Commits the user's message, asks the assistant, commits its answer.
        Always returns the committed assistant message (real answer or fallback); None for blank input.
        """
        if not text or not text.strip():
            return None

        history = list(self.messages.value)
        self._commit("user", text)

        try:
            answer = await self.client.complete(
                with_language(CHAT_SYSTEM, self.language),
                text,
                prior_turns=history,
                max_tokens=1024,
                temperature=0.7,
            )
            content = answer or EMPTY_REPLY
        except AssistantError as e:
            logger.error(f"Error sending message to API: {e}")
            content = ERROR_REPLY

        return self._commit("assistant", content)

    async def dictate(self, audio: bytes) -> Dictation:
        """Transcribes recorded audio into text the user can edit before sending."""
        if not audio:
            return Dictation(error=TRANSCRIPTION_ERROR)
        try:
            text = await self.transcriber.transcribe(audio)
        except AssistantError as e:
            logger.error(f"Error transcribing audio: {e}")
            return Dictation(error=TRANSCRIPTION_ERROR)
        return Dictation(text=text)

    async def record(self, recorder: VoiceRecorder) -> Dictation:
        """Stops the recording (the microphone is released whatever happens) and transcribes it."""
        try:
            audio = recorder.stop()
        except Exception as e:
            logger.exception(f"Error stopping the recording: {e}")
            return Dictation(error=TRANSCRIPTION_ERROR)
        return await self.dictate(audio)

    def clear(self) -> List[ChatMessage]:
        return self.messages.reset()
