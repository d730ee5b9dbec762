"""Tests for the SQLite resume store."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from resume_studio.models.resume import ResumeContent, TemplateStyle
from resume_studio.storage.resume_store import ResumeStore

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _content(title: str = "Resume", style: TemplateStyle = TemplateStyle.CLASSIC) -> ResumeContent:
    return ResumeContent(title=title, experience="- Built things", template_style=style)


class TestResumeStore:
    def test_create_and_get(self, store: ResumeStore):
        created = store.create(_content("First"), owner="alice")
        fetched = store.get(created.resume_id)
        assert fetched == created
        assert fetched.title == "First"
        assert fetched.owner == "alice"
        assert fetched.experience == "- Built things"
        assert fetched.suggestions_json is None
        assert fetched.created_at.tzinfo is not None

    def test_get_missing(self, store: ResumeStore):
        assert store.get(999) is None

    def test_ids_increment(self, store: ResumeStore):
        a = store.create(_content(), owner="alice")
        b = store.create(_content(), owner="alice")
        assert b.resume_id > a.resume_id

    def test_content_roundtrip(self, store: ResumeStore, strong_resume):
        created = store.create(strong_resume.model_copy(update={"template_style": TemplateStyle.MODERN}), owner="x")
        assert created.content == strong_resume.model_copy(update={"template_style": TemplateStyle.MODERN})

    def test_list_filters_by_owner(self, store: ResumeStore):
        store.create(_content("A"), owner="alice")
        store.create(_content("B"), owner="bob")
        store.create(_content("C"), owner="alice")
        assert {r.title for r in store.list(owner="alice")} == {"A", "C"}
        assert len(store.list()) == 3

    def test_list_newest_first(self, store: ResumeStore):
        old = store.create(_content("old"), owner="a", created_at=NOW - timedelta(days=2))
        new = store.create(_content("new"), owner="a", created_at=NOW - timedelta(days=1))
        assert [r.resume_id for r in store.list()] == [new.resume_id, old.resume_id]

    def test_update(self, store: ResumeStore):
        created = store.create(_content("Before"), owner="alice")
        updated = store.update(created.resume_id, _content("After", TemplateStyle.MINIMAL))
        assert updated.title == "After"
        assert updated.template_style == TemplateStyle.MINIMAL
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    def test_update_missing(self, store: ResumeStore):
        assert store.update(404, _content()) is None

    def test_save_suggestions(self, store: ResumeStore):
        created = store.create(_content(), owner="alice")
        assert store.save_suggestions(created.resume_id, "[]")
        assert store.get(created.resume_id).suggestions_json == "[]"
        assert not store.save_suggestions(404, "[]")

    def test_delete(self, store: ResumeStore):
        created = store.create(_content(), owner="alice")
        assert store.delete(created.resume_id)
        assert store.get(created.resume_id) is None
        assert not store.delete(created.resume_id)

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "resumes.db"
        created = ResumeStore(db_path=path).create(_content("Kept"), owner="alice")
        assert ResumeStore(db_path=path).get(created.resume_id).title == "Kept"


class TestResumeStats:
    def test_empty(self, store: ResumeStore):
        stats = store.stats(now=NOW)
        assert stats.total_resumes == 0
        assert stats.resumes_last_24h == 0
        assert stats.average_per_day == 0.0
        assert stats.template_usage == []
        assert stats.top_owners == []

    def test_time_windows(self, store: ResumeStore):
        for hours in (1, 30, 24 * 10, 24 * 40):
            store.create(_content(), owner="alice", created_at=NOW - timedelta(hours=hours))
        stats = store.stats(now=NOW)
        assert stats.total_resumes == 4
        assert stats.resumes_last_24h == 1
        assert stats.resumes_last_7_days == 2
        assert stats.resumes_last_30_days == 3
        assert stats.average_per_day == pytest.approx(0.1)

    def test_template_usage_sorted(self, store: ResumeStore):
        store.create(_content(style=TemplateStyle.MODERN), owner="a")
        store.create(_content(style=TemplateStyle.MODERN), owner="a")
        store.create(_content(style=TemplateStyle.CLASSIC), owner="b")
        usage = store.template_usage()
        assert [(u.template_style, u.count) for u in usage] == [("modern", 2), ("classic", 1)]

    def test_owner_activity_limit(self, store: ResumeStore):
        for i in range(12):
            for _ in range(i + 1):
                store.create(_content(), owner=f"user{i:02d}")
        activity = store.owner_activity()
        assert len(activity) == 10
        assert activity[0].owner == "user11"
        assert activity[0].resume_count == 12
