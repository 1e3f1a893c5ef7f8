from darijacode.assistant.validation import (
    validate_learning_path,
    validate_project_idea,
    validate_tags,
)


def test_tags_fall_back_to_default():
    assert validate_tags("javascript", "general") == ["general"]
    assert validate_tags([], "general") == ["general"]
    assert validate_tags(None, "other") == ["other"]
    assert validate_tags([1, None, "  "], "general") == ["general"]


def test_forum_tags_are_truncated_to_three():
    assert validate_tags(["js", "react", "hooks", "beginner"], "general", limit=3) == ["js", "react", "hooks"]


def test_project_tags_have_no_upper_bound():
    tags = ["a", "b", "c", "d", "e"]
    assert validate_tags(tags, "other") == tags


def test_path_with_non_array_steps_has_no_steps():
    path = validate_learning_path({"title": "Frontend", "steps": "none"}, "learn react")
    assert path.title == "Frontend"
    assert path.steps == []


def test_path_defaults():
    path = validate_learning_path("not a mapping", "become a data engineer")
    assert path.id.startswith("path-")
    assert path.title == "become a data engineer"
    assert path.description == "Custom learning path"
    assert path.level == "beginner"
    assert path.category == "web development"
    assert path.steps == []


def test_path_level_is_normalised_or_defaulted():
    assert validate_learning_path({"level": "Intermediate"}, "g").level == "intermediate"
    assert validate_learning_path({"level": "expert"}, "g").level == "beginner"
    assert validate_learning_path({"level": 3}, "g").level == "beginner"


def test_steps_are_defaulted_one_by_one():
    raw = {
        "steps": [
            {"title": "HTML", "completed": True, "resources": [{"title": "MDN", "url": "https://developer.mozilla.org"}, "junk"]},
            {"id": "css", "resources": "see google", "estimatedTime": "1 week"},
            "garbage",
        ]
    }
    steps = validate_learning_path(raw, "goal").steps

    assert [s.id for s in steps] == ["step-1", "css", "step-3"]
    assert [s.title for s in steps] == ["HTML", "Step 2", "Step 3"]
    assert all(s.completed is False for s in steps)
    assert [r.title for r in steps[0].resources] == ["MDN"]
    assert steps[1].resources == []
    assert steps[1].estimatedTime == "1 week"
    assert steps[0].estimatedTime == "Unknown"


def test_project_defaults():
    idea = validate_project_idea({}, "a budget tracker for students")
    assert idea.title == "New Project"
    assert idea.description == "a budget tracker for students"
    assert idea.difficulty == "beginner"
    assert idea.tags == ["other"]
    assert idea.savedToLibrary is False
    assert idea.id.startswith("project-")


def test_project_from_model_answer():
    idea = validate_project_idea(
        {"title": "Souk Finder", "description": "Map of local souks", "difficulty": "advanced",
         "tags": ["maps", "fullstack"], "savedToLibrary": True},
        "souks",
    )
    assert (idea.title, idea.difficulty, idea.tags) == ("Souk Finder", "advanced", ["maps", "fullstack"])
    assert idea.savedToLibrary is False


def test_project_ids_are_unique():
    first = validate_project_idea({}, "x")
    second = validate_project_idea({}, "x")
    assert first.id != second.id
