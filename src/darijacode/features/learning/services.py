import logging
from typing import List, Optional

from darijacode.assistant.completion import CompletionClient
from darijacode.assistant.errors import AssistantError
from darijacode.assistant.mutators import toggle_completed
from darijacode.assistant.prompts import LEARNING_SYSTEM, LESSON_REQUEST, with_language
from darijacode.db.store import COMPLETED_LESSONS_KEY, KeyValueStore, PersistentValue
from darijacode.models import LearningTopic

from .catalog import TOPICS

logger = logging.getLogger(__name__)

EMPTY_LESSON = "Sorry, I couldn't generate content for this topic."
ERROR_LESSON = (
    "Sorry, there was an error generating the learning content. Please make sure your API key is set up correctly."
)


class LearningService:
    def __init__(self, client: CompletionClient, store: Optional[KeyValueStore], topics: Optional[List[LearningTopic]] = None):
        self.client = client
        self.topics = list(topics if topics is not None else TOPICS)
        self.completed = PersistentValue(store, COMPLETED_LESSONS_KEY, List[str], list)

    def get_topic(self, topic_id: str) -> Optional[LearningTopic]:
        return next((t for t in self.topics if t.id == topic_id), None)

    def filter_topics(self, search: str = "", category: str = "all", language: str = "en") -> List[LearningTopic]:
        term = search.lower()
        return [
            topic for topic in self.topics
            if (term in topic.title.lower()
                or term in topic.description.lower()
                or any(term in tag.lower() for tag in topic.tags))
            and (category == "all" or topic.category == category)
            and (language == "all" or topic.language == language)
        ]

    async def fetch_lesson(self, topic_id: str) -> Optional[str]:
        """Markdown lesson for a catalog topic, in the topic's own language. None for an unknown id."""
        topic = self.get_topic(topic_id)
        if topic is None:
            return None
        try:
            content = await self.client.complete(
                with_language(LEARNING_SYSTEM, topic.language),
                LESSON_REQUEST.format(title=topic.title),
                max_tokens=2048,
                temperature=0.5,
            )
        except AssistantError as e:
            logger.error(f"Error generating learning content for {topic_id}: {e}")
            return ERROR_LESSON
        return content or EMPTY_LESSON

    # --- completed lessons ---

    def toggle_completed(self, topic_id: str) -> List[str]:
        return self.completed.update(lambda current: toggle_completed(current, topic_id))

    def is_completed(self, topic_id: str) -> bool:
        return topic_id in self.completed.value

    def completed_count(self) -> int:
        return len(self.completed.value)
