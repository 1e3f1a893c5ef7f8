import random

from darijacode.assistant.mutators import (
    append_message,
    append_reply,
    path_progress,
    prepend_item,
    toggle_completed,
    toggle_flag,
    toggle_like,
    toggle_reply_like,
    toggle_saved,
    toggle_step,
)
from darijacode.features.community.seed import seed_posts
from darijacode.features.projects.seed import seed_projects
from darijacode.models import LearningPath, PathStep, Reply


def _reply(reply_id="r-new", is_ai=False):
    return Reply(id=reply_id, author="Salma", content="Try flexbox", timestamp="Just now", isAI=is_ai)


def test_like_twice_restores_like_state():
    posts = seed_posts()
    once = toggle_like(posts, "post-2")
    assert (once[1].likes, once[1].liked) == (16, True)

    twice = toggle_like(once, "post-2")
    assert twice == posts


def test_likes_never_negative_under_random_toggles():
    posts = seed_posts()
    rng = random.Random(7)
    counts = {p.id: 0 for p in posts}
    for _ in range(200):
        post_id = rng.choice(list(counts))
        posts = toggle_like(posts, post_id)
        counts[post_id] += 1
        assert all(p.likes >= 0 for p in posts)

    before = {p.id: (p.likes, p.liked) for p in seed_posts()}
    for post in posts:
        if counts[post.id] % 2 == 0:
            assert (post.likes, post.liked) == before[post.id]


def test_unliking_zero_likes_stays_at_zero():
    post = seed_posts()[0].model_copy(update={"likes": 0, "liked": True})
    assert toggle_like([post], post.id)[0].likes == 0


def test_toggles_ignore_unknown_ids_and_do_not_mutate_input():
    posts = seed_posts()
    snapshot = [p.model_copy(deep=True) for p in posts]

    assert toggle_like(posts, "missing") == posts
    assert toggle_flag(posts, "missing") == posts
    assert append_reply(posts, "missing", _reply()) == posts
    toggle_like(posts, "post-1")
    append_reply(posts, "post-1", _reply())

    assert posts == snapshot


def test_reply_like_only_touches_that_reply():
    posts = toggle_reply_like(seed_posts(), "post-1", "reply-1-2")
    replies = posts[0].replies
    assert (replies[1].likes, replies[1].liked) == (4, True)
    assert (replies[0].likes, replies[0].liked) == (5, False)
    assert posts[0].likes == 8


def test_flag_toggles():
    posts = toggle_flag(seed_posts(), "post-3")
    assert posts[2].flagged is True
    assert toggle_flag(posts, "post-3")[2].flagged is False


def test_append_reply_keeps_order():
    posts = append_reply(seed_posts(), "post-2", _reply("r-a"))
    posts = append_reply(posts, "post-2", _reply("r-b", is_ai=True))
    assert [r.id for r in posts[1].replies] == ["reply-2-1", "r-a", "r-b"]


def test_prepend_and_append():
    assert prepend_item([2, 3], 1) == [1, 2, 3]
    assert append_message([], "hi") == ["hi"]


def test_completed_set_toggle():
    ids = toggle_completed([], "html-basics")
    ids = toggle_completed(ids, "css-styling")
    assert ids == ["html-basics", "css-styling"]
    assert toggle_completed(ids, "html-basics") == ["css-styling"]


def test_saved_toggle():
    projects = toggle_saved(seed_projects(), "project-1")
    assert projects[0].savedToLibrary is False
    assert projects[1].savedToLibrary is False


def _path(n_steps):
    return LearningPath(
        id="path-1", title="t", description="d",
        steps=[PathStep(id=f"step-{i}", title=f"Step {i}") for i in range(1, n_steps + 1)],
    )


def test_progress_on_zero_steps_is_zero():
    assert path_progress(_path(0)) == 0
    assert path_progress(None) == 0


def test_progress_rounds_to_nearest_percent():
    path = toggle_step(_path(3), "step-1")
    assert path_progress(path) == 33
    path = toggle_step(path, "step-2")
    assert path_progress(path) == 67
    path = toggle_step(path, "step-2")
    assert path_progress(path) == 33


def test_toggle_step_on_missing_path():
    assert toggle_step(None, "step-1") is None
