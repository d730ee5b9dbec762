"""Pydantic model for a rendered, downloadable document."""

from __future__ import annotations

from pydantic import BaseModel

PDF_CONTENT_TYPE = "application/pdf"


class RenderedDocument(BaseModel):
    content: bytes
    content_type: str = PDF_CONTENT_TYPE
    filename: str = "resume.pdf"

    model_config = {"frozen": True}

    @classmethod
    def for_resume(cls, resume_id: int, content: bytes) -> RenderedDocument:
        return cls(content=content, filename=f"resume-{resume_id}.pdf")
