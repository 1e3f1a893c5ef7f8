"""
Turns loosely-typed decoded model output into well-formed records.

Nothing here raises: a field that is missing or has the wrong type takes a
fixed default, so a half-broken answer still yields a usable record.
"""
from typing import Any, List, Mapping, Optional

from darijacode.models import LEVELS, LearningPath, PathStep, ProjectIdea, Resource
from darijacode.utils import time_id

FORUM_DEFAULT_TAG = "general"
PROJECT_DEFAULT_TAG = "other"
FORUM_TAG_LIMIT = 3

DEFAULT_PATH_DESCRIPTION = "Custom learning path"
DEFAULT_PATH_CATEGORY = "web development"
DEFAULT_LEVEL = "beginner"
DEFAULT_ESTIMATED_TIME = "Unknown"
DEFAULT_PROJECT_TITLE = "New Project"


def _mapping(raw: Any) -> Mapping:
    return raw if isinstance(raw, Mapping) else {}


def _text(raw: Mapping, key: str, default: str) -> str:
    value = raw.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return default


def _level(raw: Mapping, key: str) -> str:
    value = raw.get(key)
    if isinstance(value, str) and value.strip().lower() in LEVELS:
        return value.strip().lower()
    return DEFAULT_LEVEL


def validate_tags(raw: Any, default: str, limit: Optional[int] = None) -> List[str]:
    if not isinstance(raw, list):
        return [default]
    tags = [tag.strip() for tag in raw if isinstance(tag, str) and tag.strip()]
    if not tags:
        return [default]
    return tags[:limit] if limit is not None else tags


def _resources(raw: Any) -> List[Resource]:
    if not isinstance(raw, list):
        return []
    resources = []
    for item in raw:
        if not isinstance(item, Mapping):
            continue
        resources.append(Resource(title=_text(item, "title", ""), url=_text(item, "url", "")))
    return resources


def validate_step(raw: Any, index: int) -> PathStep:
    """`index` is 1-based, it names steps that come without an id."""
    raw = _mapping(raw)
    return PathStep(
        id=_text(raw, "id", f"step-{index}"),
        title=_text(raw, "title", f"Step {index}"),
        description=_text(raw, "description", ""),
        resources=_resources(raw.get("resources")),
        estimatedTime=_text(raw, "estimatedTime", DEFAULT_ESTIMATED_TIME),
        # a freshly generated path always starts unstarted
        completed=False,
    )


def validate_learning_path(raw: Any, goal: str) -> LearningPath:
    raw = _mapping(raw)
    steps = raw.get("steps")
    return LearningPath(
        id=_text(raw, "id", f"path-{time_id()}"),
        title=_text(raw, "title", goal),
        description=_text(raw, "description", DEFAULT_PATH_DESCRIPTION),
        level=_level(raw, "level"),
        category=_text(raw, "category", DEFAULT_PATH_CATEGORY),
        steps=[validate_step(step, i) for i, step in enumerate(steps, start=1)] if isinstance(steps, list) else [],
    )


def validate_project_idea(raw: Any, prompt: str) -> ProjectIdea:
    raw = _mapping(raw)
    return ProjectIdea(
        id=f"project-{time_id()}",
        title=_text(raw, "title", DEFAULT_PROJECT_TITLE),
        description=_text(raw, "description", prompt),
        difficulty=_level(raw, "difficulty"),
        tags=validate_tags(raw.get("tags"), PROJECT_DEFAULT_TAG),
        savedToLibrary=False,
    )
