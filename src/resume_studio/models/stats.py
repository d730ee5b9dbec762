"""Pydantic models for aggregate resume statistics."""

from __future__ import annotations

from pydantic import BaseModel


class TemplateUsage(BaseModel):
    template_style: str
    count: int


class OwnerActivity(BaseModel):
    owner: str
    resume_count: int


class ResumeStats(BaseModel):
    total_resumes: int
    resumes_last_24h: int
    resumes_last_7_days: int
    resumes_last_30_days: int
    average_per_day: float  # last 30 days / 30
    template_usage: list[TemplateUsage]
    top_owners: list[OwnerActivity]
