import asyncio
import logging
from typing import List, Optional, Set

from darijacode import config
from darijacode.assistant.completion import CompletionClient
from darijacode.assistant.errors import AssistantError, DecodeFailure
from darijacode.assistant.extraction import decode_payload
from darijacode.assistant.mutators import append_reply, prepend_item, toggle_flag, toggle_like, toggle_reply_like
from darijacode.assistant.prompts import COMMUNITY_SYSTEM, TAGGING_REQUEST, TAGGING_SYSTEM
from darijacode.assistant.validation import FORUM_DEFAULT_TAG, FORUM_TAG_LIMIT, validate_tags
from darijacode.db.store import COMMUNITY_POSTS_KEY, USERNAME_KEY, KeyValueStore, PersistentValue
from darijacode.models import ForumPost, Reply
from darijacode.utils import time_id

from .seed import seed_posts

logger = logging.getLogger(__name__)

QUESTION_WORDS = ("how", "what", "why")


def looks_like_question(text: str) -> bool:
    """Blunt trigger for an assistant reply: a question mark, or 'how' / 'what' / 'why' anywhere."""
    lowered = text.lower()
    return "?" in text or any(word in lowered for word in QUESTION_WORDS)


class CommunityService:
    """
    Forum page state.

    A post or reply is committed as soon as it is submitted. When it looks like
    a question, an assistant reply is requested in the background and appended
    after `reply_delay` seconds, on top of whatever the posts look like by then.
    """

    def __init__(
        self,
        client: CompletionClient,
        store: Optional[KeyValueStore],
        reply_delay: float = config.AI_REPLY_DELAY_SECONDS,
    ):
        self.client = client
        self.reply_delay = reply_delay
        self.posts = PersistentValue(store, COMMUNITY_POSTS_KEY, List[ForumPost], seed_posts)
        self.username = PersistentValue(store, USERNAME_KEY, str, str)
        self._pending: Set[asyncio.Task] = set()

    # ==========================================
    # Username
    # ==========================================

    @property
    def has_username(self) -> bool:
        return bool(self.username.value.strip())

    def set_username(self, name: str) -> bool:
        name = (name or "").strip()[:config.USERNAME_MAX_LENGTH]
        if not name:
            return False
        self.username.set(name)
        return True

    # ==========================================
    # Generation
    # ==========================================

    async def generate_tags(self, content: str) -> List[str]:
        """Best effort: any failure gives the single default tag."""
        try:
            answer = await self.client.complete(
                TAGGING_SYSTEM,
                TAGGING_REQUEST.format(content=content),
                max_tokens=256,
                temperature=0.3,
            )
            return validate_tags(decode_payload(answer), FORUM_DEFAULT_TAG, limit=FORUM_TAG_LIMIT)
        except DecodeFailure as e:
            logger.warning(f"Error parsing tags: {e}")
        except AssistantError as e:
            logger.error(f"Error generating tags: {e}")
        return [FORUM_DEFAULT_TAG]

    def _schedule_reply(self, post_id: str, prompt: str) -> None:
        task = asyncio.create_task(self._auto_reply(post_id, prompt))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        logger.debug(f"AI reply scheduled for {post_id}")

    async def _auto_reply(self, post_id: str, prompt: str) -> Optional[Reply]:
        try:
            content = await self.client.complete(COMMUNITY_SYSTEM, prompt, max_tokens=512, temperature=0.7)
        except AssistantError as e:
            logger.error(f"Error generating AI response: {e}")
            return None
        if not content:
            logger.warning(f"Empty AI response for {post_id}, no reply added")
            return None

        reply = Reply(
            id=f"reply-{post_id}-{time_id()}",
            author=config.AI_AUTHOR,
            content=content,
            timestamp="Just now",
            isAI=True,
        )
        await asyncio.sleep(self.reply_delay)
        # merged against the posts as they are now: likes, flags and replies made meanwhile are kept
        self.posts.update(lambda current: append_reply(current, post_id, reply))
        logger.info(f"AI reply added to {post_id}")
        return reply

    async def drain(self) -> None:
        """Waits for every scheduled assistant reply to land."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    # ==========================================
    # Submissions
    # ==========================================

    async def submit_post(self, content: str) -> Optional[ForumPost]:
        if not content or not content.strip() or not self.has_username:
            return None

        tags = await self.generate_tags(content)
        post = ForumPost(
            id=f"post-{time_id()}",
            author=self.username.value,
            content=content,
            timestamp="Just now",
            tags=tags,
        )
        self.posts.update(lambda current: prepend_item(current, post))

        if looks_like_question(content):
            self._schedule_reply(post.id, content)
        return post

    async def submit_reply(self, post_id: str, content: str) -> Optional[Reply]:
        if not content or not content.strip() or not self.has_username:
            return None

        reply = Reply(
            id=f"reply-{post_id}-{time_id()}",
            author=self.username.value,
            content=content,
            timestamp="Just now",
            isAI=False,
        )
        self.posts.update(lambda current: append_reply(current, post_id, reply))

        if looks_like_question(content):
            self._schedule_reply(post_id, content)
        return reply

    # ==========================================
    # Optimistic toggles
    # ==========================================

    def like_post(self, post_id: str) -> List[ForumPost]:
        return self.posts.update(lambda current: toggle_like(current, post_id))

    def like_reply(self, post_id: str, reply_id: str) -> List[ForumPost]:
        return self.posts.update(lambda current: toggle_reply_like(current, post_id, reply_id))

    def flag_post(self, post_id: str) -> List[ForumPost]:
        return self.posts.update(lambda current: toggle_flag(current, post_id))

    # ==========================================
    # Browsing
    # ==========================================

    def get_post(self, post_id: str) -> Optional[ForumPost]:
        return next((p for p in self.posts.value if p.id == post_id), None)

    def all_tags(self) -> List[str]:
        return list(dict.fromkeys(tag for post in self.posts.value for tag in post.tags))

    def filter_posts(self, search: str = "", tag: str = "all") -> List[ForumPost]:
        term = search.lower()

        def matches(post: ForumPost) -> bool:
            matches_search = (
                term in post.content.lower()
                or term in post.author.lower()
                or any(term in t.lower() for t in post.tags)
            )
            return matches_search and (tag == "all" or tag in post.tags)

        return [post for post in self.posts.value if matches(post)]
