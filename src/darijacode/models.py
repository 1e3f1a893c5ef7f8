from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Language = Literal["en", "fr", "ar", "darija"]
Level = Literal["beginner", "intermediate", "advanced"]

LANGUAGES = ("en", "fr", "ar", "darija")
LEVELS = ("beginner", "intermediate", "advanced")


class Record(BaseModel):
    """Base for every stored entity. Frozen: changes go through the mutators."""
    model_config = ConfigDict(frozen=True)


# ==========================================
# Chat
# ==========================================

class ChatMessage(Record):
    """One turn of the assistant conversation."""
    id: str = Field(..., description="Time-derived unique id, 'welcome' for the synthesized greeting.")
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime


class Dictation(Record):
    """Result of a voice dictation: the transcribed text, or the message shown instead."""
    text: Optional[str] = None
    error: Optional[str] = None


# ==========================================
# Community forum
# ==========================================

class Reply(Record):
    id: str
    author: str
    content: str
    timestamp: str = Field(..., description="Display string, e.g. 'Just now' or '2 hours ago'.")
    likes: int = Field(0, ge=0)
    liked: bool = False
    isAI: bool = Field(False, description="True only for replies written by the assistant.")


class ForumPost(Record):
    id: str
    author: str
    content: str
    timestamp: str
    likes: int = Field(0, ge=0)
    liked: bool = Field(False, description="This client's own like state.")
    tags: List[str] = Field(default_factory=list)
    flagged: bool = False
    replies: List[Reply] = Field(default_factory=list)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "post-1718000000000",
                    "author": "Youssef",
                    "content": "How do I center a div?",
                    "timestamp": "Just now",
                    "likes": 0,
                    "liked": False,
                    "tags": ["css", "question"],
                    "flagged": False,
                    "replies": []
                }
            ]
        },
    )


# ==========================================
# Learning catalog
# ==========================================

class LearningTopic(Record):
    id: str
    title: str
    description: str
    category: str
    tags: List[str]
    language: Language


# ==========================================
# Learning path
# ==========================================

class Resource(Record):
    title: str
    url: str


class PathStep(Record):
    id: str
    title: str
    description: str = ""
    resources: List[Resource] = Field(default_factory=list)
    estimatedTime: str = "Unknown"
    completed: bool = False


class LearningPath(Record):
    id: str
    title: str
    description: str
    level: Level = "beginner"
    category: str = "web development"
    steps: List[PathStep] = Field(default_factory=list)


class PathOutcome(Record):
    """What the learning-path page shows after a generation request."""
    path: Optional[LearningPath] = None
    error: Optional[str] = None


# ==========================================
# Projects
# ==========================================

class ProjectIdea(Record):
    id: str
    title: str
    description: str
    difficulty: Level = "beginner"
    tags: List[str] = Field(default_factory=list)
    savedToLibrary: bool = False


class ProjectOutcome(Record):
    """Generated idea plus its flowchart (mermaid source), or the error shown instead."""
    project: Optional[ProjectIdea] = None
    flowchart: Optional[str] = None
    error: Optional[str] = None
