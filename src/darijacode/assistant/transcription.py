import asyncio
import io
import logging
import os
from typing import Callable, List, Optional

import numpy as np
import requests
import soundfile as sf

from darijacode import config

from .errors import EmptyResultFailure, TransportFailure

logger = logging.getLogger(__name__)

NO_TRANSCRIPTION = "No transcription returned"


class TranscriptionClient:
    """Speech-to-text boundary (Hugging Face inference API, Whisper). One attempt per call."""

    def __init__(self, url: Optional[str] = None, token: Optional[str] = None):
        self.url = url or config.HF_ASR_URL
        self._token = token

    async def transcribe(self, audio: bytes, filename: str = "recording.wav") -> str:
        """
        Raises:
            TransportFailure: network error or non-2xx status.
            EmptyResultFailure: the service answered but returned no text.
        """
        # requests is blocking, keep the event loop free while the upload runs
        return await asyncio.to_thread(self._transcribe_sync, audio, filename)

    def _transcribe_sync(self, audio: bytes, filename: str) -> str:
        token = self._token or os.getenv("HF_TOKEN")
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = requests.post(
                self.url,
                headers=headers,
                files={"file": (filename, audio, "audio/wav")},
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Transcription request failed: {e}")
            raise TransportFailure("Transcription request failed") from e

        if not response.ok:
            logger.error(f"Transcription API request failed with status {response.status_code}")
            raise TransportFailure("Transcription request failed", status=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise EmptyResultFailure(NO_TRANSCRIPTION, status=response.status_code) from e

        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise EmptyResultFailure(NO_TRANSCRIPTION, status=response.status_code)
        return text.strip()


def _open_input_stream(**kwargs):
    # imported here: loading sounddevice needs the PortAudio system library
    import sounddevice as sd
    return sd.InputStream(**kwargs)


class VoiceRecorder:
    """
    Microphone capture for dictation.

    The input device is held only between start() and stop()/release(); it is
    stopped and closed even when stopping or encoding fails.
    """

    SAMPLE_RATE = 16000
    CHANNELS = 1

    def __init__(self, stream_factory: Optional[Callable] = None):
        self._stream_factory = stream_factory or _open_input_stream
        self._stream = None
        self._chunks: List[np.ndarray] = []

    @property
    def is_recording(self) -> bool:
        return self._stream is not None

    def start(self) -> None:
        if self._stream is not None:
            return
        self._chunks = []
        stream = self._stream_factory(
            samplerate=self.SAMPLE_RATE,
            channels=self.CHANNELS,
            dtype="int16",
            callback=self._on_audio,
        )
        try:
            stream.start()
        except Exception:
            stream.close()
            raise
        self._stream = stream
        logger.info("Recording started")

    def _on_audio(self, indata, frames, time, status):
        if status:
            logger.warning(f"Audio status: {status}")
        self._chunks.append(indata.copy())

    def release(self) -> None:
        """Stops and closes the input stream. Safe to call more than once."""
        stream, self._stream = self._stream, None
        if stream is None:
            return
        try:
            stream.stop()
        finally:
            stream.close()
            logger.info("Recording device released")

    def stop(self) -> bytes:
        """Ends the recording and returns it as WAV bytes (empty when nothing was captured)."""
        self.release()
        if not self._chunks:
            return b""
        audio = np.concatenate(self._chunks, axis=0)
        self._chunks = []
        buffer = io.BytesIO()
        sf.write(buffer, audio, self.SAMPLE_RATE, format="WAV", subtype="PCM_16")
        return buffer.getvalue()

    def __enter__(self) -> "VoiceRecorder":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
