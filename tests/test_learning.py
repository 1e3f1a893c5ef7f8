from darijacode.assistant.prompts import LANGUAGE_INSTRUCTIONS
from darijacode.db.store import FileStore
from darijacode.features.learning.services import ERROR_LESSON, EMPTY_LESSON, LearningService

from .conftest import ProviderError


def test_default_filter_is_english_catalog(store, scripted):
    client, _ = scripted()
    topics = LearningService(client, store).filter_topics()
    assert len(topics) == 7
    assert all(t.language == "en" for t in topics)


def test_filters_combine(store, scripted):
    client, _ = scripted()
    learning = LearningService(client, store)

    assert [t.id for t in learning.filter_topics(search="python", language="all")] == ["python-basics", "python-basics-ar"]
    assert [t.id for t in learning.filter_topics(category="tools")] == ["git-basics"]
    assert [t.id for t in learning.filter_topics(search="intermediate")] == ["react-intro"]
    assert [t.id for t in learning.filter_topics(language="darija")] == ["javascript-intro-darija"]
    assert learning.filter_topics(search="kotlin") == []


async def test_lesson_is_requested_in_the_topic_language(store, scripted):
    client, factory = scripted("# Bases de HTML\n...")
    lesson = await LearningService(client, store).fetch_lesson("html-basics-fr")

    assert lesson.startswith("# Bases de HTML")
    assert factory.options == [{"max_tokens": 2048, "temperature": 0.5}]
    system, user = factory.calls[0]
    assert system.content.endswith(LANGUAGE_INSTRUCTIONS["fr"])
    assert "Bases de HTML" in user.content


async def test_lesson_fallbacks(store, scripted):
    client, factory = scripted(ProviderError(500), "")
    learning = LearningService(client, store)

    assert await learning.fetch_lesson("unknown-topic") is None
    assert await learning.fetch_lesson("git-basics") == ERROR_LESSON
    assert await learning.fetch_lesson("git-basics") == EMPTY_LESSON
    assert len(factory.calls) == 2


def test_completed_lessons_persist(store, scripted):
    client, _ = scripted()
    learning = LearningService(client, store)
    learning.toggle_completed("html-basics")
    learning.toggle_completed("css-styling")
    learning.toggle_completed("html-basics")

    reloaded = LearningService(client, store)
    assert reloaded.is_completed("css-styling")
    assert not reloaded.is_completed("html-basics")
    assert reloaded.completed_count() == 1


def test_corrupted_completed_file_starts_empty(tmp_path, scripted):
    (tmp_path / "completedLessons.json").write_bytes(b'["html-basics\xff"]')
    client, _ = scripted()

    learning = LearningService(client, FileStore(str(tmp_path)))

    assert learning.completed_count() == 0
