from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from pocket2wallabag.config import DEFAULT_CHUNK_SIZE, RunContext, new_run_tag


def test_run_context_defaults() -> None:
    context = RunContext()

    assert context.run_tag.startswith("pocket2wallabag-")
    assert context.favorite_tag is None
    assert context.chunk_size == DEFAULT_CHUNK_SIZE == 1000


def test_new_run_tag_is_time_derived() -> None:
    moment = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc)
    assert new_run_tag(moment) == "pocket2wallabag-20240305-070809"


def test_run_context_requires_positive_chunk_size() -> None:
    with pytest.raises(ValidationError):
        RunContext(chunk_size=0)


def test_run_context_normalizes_favorite_tag() -> None:
    assert RunContext(favorite_tag="  ").favorite_tag is None
    assert RunContext(favorite_tag=" fav ").favorite_tag == "fav"

    with pytest.raises(ValidationError):
        RunContext(favorite_tag="a|b")


def test_run_context_is_immutable() -> None:
    context = RunContext(run_tag="run1")

    with pytest.raises(ValidationError):
        context.chunk_size = 5
