"""Tests for the Streamlit UI, driven through Streamlit's AppTest harness."""

from pathlib import Path
from unittest.mock import patch

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from resume_studio.config import DB_PATH_ENV
from resume_studio.exceptions import ResumeNotFoundError
from resume_studio.services.resume_service import ResumeService
from resume_studio.storage.resume_store import ResumeStore

APP_PATH = Path(__file__).resolve().parent.parent / "streamlit_app.py"


@pytest.fixture
def db(tmp_path, monkeypatch):
    path = tmp_path / "ui.db"
    monkeypatch.setenv(DB_PATH_ENV, str(path))
    st.cache_resource.clear()
    ResumeService(ResumeStore(db_path=path)).create(
        {"title": "Jane Doe", "skills": "Python"}, owner="me"
    )
    yield path
    st.cache_resource.clear()


@pytest.fixture
def resumes_page(db):
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    at.sidebar.radio[0].set_value("My resumes").run()
    return at


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def test_get_suggestions_stores_them(resumes_page, db):
    _button(resumes_page, "Get suggestions").click().run()
    assert not resumes_page.exception
    assert not resumes_page.error
    assert ResumeStore(db_path=db).get(1).suggestions_json is not None


def test_suggestion_failure_shows_error(resumes_page):
    with patch.object(ResumeService, "generate_suggestions", side_effect=RuntimeError("boom")):
        _button(resumes_page, "Get suggestions").click().run()
    assert not resumes_page.exception
    assert [e.value for e in resumes_page.error] == ["Could not generate suggestions."]


def test_delete_failure_shows_error(resumes_page, db):
    with patch.object(ResumeService, "delete", side_effect=ResumeNotFoundError(1)):
        _button(resumes_page, "Delete").click().run()
    assert not resumes_page.exception
    assert [e.value for e in resumes_page.error] == ["Could not delete the resume."]
    assert ResumeStore(db_path=db).get(1) is not None
