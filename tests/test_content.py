"""Tests for content entities and the page service."""

from __future__ import annotations

from datetime import datetime

import pytest

from portfolio.domains.content.entities import format_date, format_views
from portfolio.domains.content.services import ContentService
from tests.fakes import FakeStore, make_category, make_note, make_project

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("views", "expected"),
    [(0, "0"), (999, "999"), (1000, "1.0K"), (15_300, "15.3K"), (1_000_000, "1.0M"), (2_450_000, "2.5M")],
)
def test_format_views(views, expected):
    assert format_views(views) == expected


def test_format_date():
    assert format_date(datetime(2024, 11, 3, 8, 30)) == "November 3, 2024"


class TestNote:
    def test_summary_prefers_excerpt(self):
        note = make_note(excerpt="Short version.", content="Long version " * 40)

        assert note.summary() == "Short version."

    def test_summary_truncates_content(self):
        note = make_note(content="x" * 400)

        assert note.summary() == "x" * 150 + "..."

    def test_tags_beyond_three_are_counted(self):
        note = make_note(tags=["a", "b", "c", "d"])

        assert note.visible_tags() == ["a", "b", "c"]
        assert note.hidden_tag_count() == 1

    def test_no_hidden_tags(self):
        assert make_note(tags=["a"]).hidden_tag_count() == 0


def _service(store: FakeStore) -> ContentService:
    return ContentService(store.projects, store.notes, store.categories, store.videos)


class TestContentService:
    async def test_projects_split_by_featured_flag(self):
        store = FakeStore()
        store.projects.rows = [
            make_project("Old featured", featured=True, days_ago=10),
            make_project("New regular", days_ago=1),
            make_project("New featured", featured=True, days_ago=2),
        ]

        page = await _service(store).get_projects_page()

        assert [p.title for p in page.featured] == ["New featured", "Old featured"]
        assert [p.title for p in page.others] == ["New regular"]
        assert not page.is_empty

    async def test_category_note_counts(self):
        store = FakeStore()
        ml, stats = make_category("ML"), make_category("Stats")
        store.categories.rows = [ml, stats]
        store.notes.rows = [make_note(category=ml), make_note(category=ml), make_note()]

        page = await _service(store).get_notes_page()

        counts = {summary.category.name: summary.note_count for summary in page.categories}
        assert counts == {"ML": 2, "Stats": 0}
        assert len(page.notes) == 3

    async def test_failed_query_yields_empty_list(self):
        store = FakeStore()
        store.videos.fail = True

        assert await _service(store).get_videos() == []
