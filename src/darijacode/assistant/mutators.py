"""
Pure state transitions over the stored collections.

Every function takes the previous collection and returns the next one; the
input is never modified. Ids that are not in the collection are ignored.
"""
import math
from typing import List, Optional, Sequence, TypeVar

from darijacode.models import ChatMessage, ForumPost, LearningPath, ProjectIdea, Reply

T = TypeVar("T")


def _toggled_like(record):
    likes = record.likes - 1 if record.liked else record.likes + 1
    return record.model_copy(update={"liked": not record.liked, "likes": max(likes, 0)})


def toggle_like(posts: Sequence[ForumPost], post_id: str) -> List[ForumPost]:
    return [_toggled_like(post) if post.id == post_id else post for post in posts]


def toggle_reply_like(posts: Sequence[ForumPost], post_id: str, reply_id: str) -> List[ForumPost]:
    result = []
    for post in posts:
        if post.id == post_id:
            replies = [_toggled_like(reply) if reply.id == reply_id else reply for reply in post.replies]
            post = post.model_copy(update={"replies": replies})
        result.append(post)
    return result


def toggle_flag(posts: Sequence[ForumPost], post_id: str) -> List[ForumPost]:
    return [post.model_copy(update={"flagged": not post.flagged}) if post.id == post_id else post for post in posts]


def append_reply(posts: Sequence[ForumPost], post_id: str, reply: Reply) -> List[ForumPost]:
    return [
        post.model_copy(update={"replies": [*post.replies, reply]}) if post.id == post_id else post
        for post in posts
    ]


def append_message(messages: Sequence[ChatMessage], message: ChatMessage) -> List[ChatMessage]:
    return [*messages, message]


def prepend_item(items: Sequence[T], item: T) -> List[T]:
    return [item, *items]


def toggle_completed(completed_ids: Sequence[str], topic_id: str) -> List[str]:
    if topic_id in completed_ids:
        return [i for i in completed_ids if i != topic_id]
    return [*completed_ids, topic_id]


def toggle_saved(projects: Sequence[ProjectIdea], project_id: str) -> List[ProjectIdea]:
    return [
        p.model_copy(update={"savedToLibrary": not p.savedToLibrary}) if p.id == project_id else p
        for p in projects
    ]


def toggle_step(path: Optional[LearningPath], step_id: str) -> Optional[LearningPath]:
    if path is None:
        return None
    steps = [s.model_copy(update={"completed": not s.completed}) if s.id == step_id else s for s in path.steps]
    return path.model_copy(update={"steps": steps})


def path_progress(path: Optional[LearningPath]) -> int:
    """Percentage of completed steps, rounded half up. 0 when there is nothing to complete."""
    if path is None or not path.steps:
        return 0
    done = sum(1 for step in path.steps if step.completed)
    return math.floor(done * 100 / len(path.steps) + 0.5)
