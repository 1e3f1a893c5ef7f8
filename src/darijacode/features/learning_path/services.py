import logging
from typing import Optional

from darijacode.assistant.completion import CompletionClient
from darijacode.assistant.errors import AssistantError, DecodeFailure
from darijacode.assistant.extraction import decode_payload
from darijacode.assistant.mutators import path_progress, toggle_step
from darijacode.assistant.prompts import LEARNING_PATH_REQUEST, LEARNING_PATH_SYSTEM
from darijacode.assistant.validation import validate_learning_path
from darijacode.db.store import LEARNING_PATH_KEY, PATH_GOAL_KEY, KeyValueStore, PersistentValue
from darijacode.models import LearningPath, PathOutcome

logger = logging.getLogger(__name__)

DEFAULT_PATH_GOAL = "I want to become a full-stack web developer"
EMPTY_GOAL_ERROR = "Please enter a learning goal"
GENERATION_ERROR = (
    "An error occurred while generating the learning path. Please check your API key and try again."
)


class LearningPathService:
    """
    Holds at most one learning path. Generating a new one replaces it.

    The path and its goal live under two keys that cannot be written together;
    the path is written first and nothing relies on the two matching.
    """

    def __init__(self, client: CompletionClient, store: Optional[KeyValueStore]):
        self.client = client
        self.goal = PersistentValue(store, PATH_GOAL_KEY, str, lambda: DEFAULT_PATH_GOAL)
        self.path = PersistentValue(store, LEARNING_PATH_KEY, Optional[LearningPath], lambda: None)

    async def generate(self, goal: str) -> PathOutcome:
        if not goal or not goal.strip():
            return PathOutcome(path=self.path.value, error=EMPTY_GOAL_ERROR)

        try:
            answer = await self.client.complete(
                LEARNING_PATH_SYSTEM,
                LEARNING_PATH_REQUEST.format(goal=goal),
                max_tokens=2048,
                temperature=0.7,
            )
        except AssistantError as e:
            logger.error(f"Error generating learning path: {e}")
            return PathOutcome(path=self.path.value, error=GENERATION_ERROR)

        try:
            raw = decode_payload(answer)
        except DecodeFailure as e:
            logger.warning(f"Error parsing learning path JSON, using a default path: {e}")
            raw = {}

        path = validate_learning_path(raw, goal)
        self.path.set(path)
        self.goal.set(goal)
        return PathOutcome(path=path)

    def toggle_step(self, step_id: str) -> Optional[LearningPath]:
        return self.path.update(lambda current: toggle_step(current, step_id))

    def progress(self) -> int:
        return path_progress(self.path.value)
