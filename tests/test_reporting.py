import json

from semcat.categories import CategoryRegistry
from semcat.ranking import rank
from semcat.reporting import render_categories, render_json, render_text


def test_render_text_lists_scores_and_best_match() -> None:
    result = rank({"ease_of_use": 0.41234, "look_and_feel": 0.73456, "functionality": 0.2})

    assert render_text(result).splitlines() == [
        "Classification results:",
        "look_and_feel: 0.7346",
        "ease_of_use: 0.4123",
        "functionality: 0.2000",
        "",
        "Best matching category: look_and_feel with score: 0.7346",
    ]


def test_render_text_top_limits_listed_scores() -> None:
    result = rank({"a": 0.1, "b": 0.9, "c": 0.5})
    lines = render_text(result, top=1).splitlines()
    assert lines[1:2] == ["b: 0.9000"]
    assert "c: 0.5000" not in lines


def test_render_json_keeps_ranked_order() -> None:
    result = rank({"a": 0.1, "b": 0.9, "c": 0.5}, model_id="fake")
    payload = json.loads(render_json(result))

    assert payload["model"] == "fake"
    assert list(payload["scores"]) == ["b", "c", "a"]
    assert payload["top"] == {"category_id": "b", "score": 0.9}


def test_render_categories() -> None:
    registry = CategoryRegistry.from_mapping({"x": "first", "y": "second"})
    assert render_categories(registry) == "x: first\ny: second"
    assert json.loads(render_categories(registry, "json")) == {"x": "first", "y": "second"}
