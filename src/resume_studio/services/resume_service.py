"""Resume workflows: validate and store, render downloads, run suggestions.

Every surface (CLI, web UI) goes through ``ResumeService`` so that input is
always sanitized before it is persisted, and the engines only ever see
stored, already-clean text.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from resume_studio.analysis.suggestion_engine import generate_suggestions
from resume_studio.exceptions import ResumeNotFoundError, ResumeValidationError
from resume_studio.export.pdf_renderer import render_document
from resume_studio.models.document import RenderedDocument
from resume_studio.models.resume import TITLE_MIN_LENGTH, ResumeDraft, StoredResume
from resume_studio.models.stats import ResumeStats
from resume_studio.models.suggestion import Suggestion
from resume_studio.storage.resume_store import ResumeStore
from resume_studio.utils.sanitizer import sanitize

logger = logging.getLogger(__name__)


class ResumeService:
    def __init__(self, store: ResumeStore, font_path: str | Path | None = None):
        self.store = store
        self.font_path = font_path

    def create(self, draft: ResumeDraft | Mapping[str, object], owner: str) -> StoredResume:
        content = self._clean(draft)
        resume = self.store.create(content, owner=owner)
        logger.info("Created resume %d for %s", resume.resume_id, owner)
        return resume

    def update(self, resume_id: int, draft: ResumeDraft | Mapping[str, object]) -> StoredResume:
        self.get(resume_id)
        content = self._clean(draft)
        resume = self.store.update(resume_id, content)
        if resume is None:
            raise ResumeNotFoundError(resume_id)
        logger.info("Updated resume %d", resume_id)
        return resume

    def get(self, resume_id: int) -> StoredResume:
        resume = self.store.get(resume_id)
        if resume is None:
            raise ResumeNotFoundError(resume_id)
        return resume

    def list(self, owner: str | None = None) -> list[StoredResume]:
        return self.store.list(owner=owner)

    def delete(self, resume_id: int) -> None:
        if not self.store.delete(resume_id):
            raise ResumeNotFoundError(resume_id)
        logger.info("Deleted resume %d", resume_id)

    def download(self, resume_id: int) -> RenderedDocument:
        """Render the stored resume with its stored template style."""
        resume = self.get(resume_id)
        return render_document(
            resume.content,
            resume.template_style,
            resume_id=resume.resume_id,
            font_path=self.font_path,
        )

    def generate_suggestions(self, resume_id: int) -> dict[str, list[dict]]:
        """Analyze a stored resume and persist the result alongside it.

        Returns the ``{"suggestions": [...]}`` response payload.
        """
        resume = self.get(resume_id)
        suggestions = generate_suggestions(resume.content)
        self.store.save_suggestions(resume_id, serialize_suggestions(suggestions))
        logger.info("Stored %d suggestions for resume %d", len(suggestions), resume_id)
        return {"suggestions": [s.model_dump(by_alias=True, mode="json") for s in suggestions]}

    def stats(self) -> ResumeStats:
        return self.store.stats()

    @staticmethod
    def _clean(draft: ResumeDraft | Mapping[str, object]):
        if not isinstance(draft, ResumeDraft):
            try:
                draft = ResumeDraft.model_validate(dict(draft))
            except ValidationError as e:
                raise ResumeValidationError(_describe(e)) from e
        result = sanitize(draft)
        if not result.ok:
            raise ResumeValidationError(result.error)
        # Trimming can shrink a title that passed the draft length check
        if len(result.fields.title) < TITLE_MIN_LENGTH:
            logger.warning("Rejected resume input: title too short after cleaning")
            raise ResumeValidationError(
                f"title: must be at least {TITLE_MIN_LENGTH} characters after trimming"
            )
        return result.fields


def serialize_suggestions(suggestions: list[Suggestion]) -> str:
    return json.dumps(
        [s.model_dump(by_alias=True, mode="json") for s in suggestions],
        ensure_ascii=False,
        indent=2,
    )


def parse_suggestions(suggestions_json: str | None) -> list[Suggestion]:
    if not suggestions_json:
        return []
    return [Suggestion.model_validate(item) for item in json.loads(suggestions_json)]


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"])
        parts.append(f"{field}: {item['msg']}")
    return "; ".join(parts)
