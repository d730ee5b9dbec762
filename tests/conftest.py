"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from resume_studio.models.resume import ResumeContent, ResumeDraft, TemplateStyle
from resume_studio.services.resume_service import ResumeService
from resume_studio.storage.resume_store import ResumeStore


@pytest.fixture
def strong_resume() -> ResumeContent:
    """A resume that passes every heuristic."""
    return ResumeContent(
        title="Jane Doe - Backend Engineer",
        personal_info=(
            "Backend engineer with eight years of experience designing distributed "
            "systems for payments and logistics. Led the migration of a monolith to "
            "services and improved deployment frequency across four product teams while "
            "mentoring engineers."
        ),
        education=(
            "B.Sc. Computer Science, University of Toronto, 2016\n"
            "Relevant coursework: Distributed Systems, Databases"
        ),
        experience=(
            "Senior Engineer | Acme Payments | 2019-2024\n"
            "- Designed the ledger service handling 2M transactions per day\n"
            "- Reduced p99 latency by 35% through query tuning\n"
            "- Led a team of 4 engineers"
        ),
        skills=(
            "Languages: Python, Go, SQL\n"
            "Infrastructure: Docker, Kubernetes, Terraform\n"
            "Data: PostgreSQL, Redis, Kafka"
        ),
        template_style=TemplateStyle.CLASSIC,
    )


@pytest.fixture
def empty_resume() -> ResumeContent:
    return ResumeContent(title="Empty resume")


@pytest.fixture
def sample_draft() -> ResumeDraft:
    return ResumeDraft(
        title="  Jane Doe  ",
        personal_info="Engineer who improved things.\r\nLikes Python.",
        education="B.Sc. Computer Science",
        experience="Acme Corp\r\n- Built 3 services",
        skills="Python, Go, SQL",
        template_style="modern",
    )


@pytest.fixture
def store(tmp_path: Path) -> ResumeStore:
    return ResumeStore(db_path=tmp_path / "test_resumes.db")


@pytest.fixture
def service(store: ResumeStore) -> ResumeService:
    return ResumeService(store)
