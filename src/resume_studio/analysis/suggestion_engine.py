"""Heuristic resume analysis producing prioritized improvement suggestions.

Five independent analyzers run in a fixed order (personal info, experience,
skills, education, overall content quality). Each one appends zero or more
catalog entries; no condition ever raises.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from resume_studio.analysis.catalog import Condition, lookup
from resume_studio.models.resume import ResumeContent
from resume_studio.models.suggestion import Suggestion, SuggestionSection

logger = logging.getLogger(__name__)

IMPACT_WORDS = ("achieved", "improved", "increased", "developed", "led", "managed", "delivered")
ACTION_VERBS = ("developed", "implemented", "designed", "managed", "led", "created", "optimized", "deployed")
BUZZWORDS = ("synergy", "leverage", "paradigm", "streamline", "optimize", "facilitate")

SUMMARY_BRIEF_LENGTH = 100
SUMMARY_SHORT_LENGTH = 200
MIN_SKILLS = 6
MAX_SKILLS = 25
GROUPING_SKILLS_THRESHOLD = 8
EDUCATION_DETAIL_LENGTH = 50
MAX_BUZZWORDS = 2
BULLET_EXPERIENCE_LENGTH = 100

_DIGITS = re.compile(r"\d+")
_DOLLAR_AMOUNT = re.compile(r"\$[\d,]+")
_SKILL_DELIMITERS = re.compile(r"[,;\r\n]")

Analyzer = Callable[[ResumeContent, list[Suggestion]], None]


def split_skills(skills: str) -> list[str]:
    """Split a skills field into trimmed, non-empty tokens."""
    return [token.strip() for token in _SKILL_DELIMITERS.split(skills) if token.strip()]


def _contains_any(text: str, words: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in words)


def analyze_personal_info(resume: ResumeContent, out: list[Suggestion]) -> None:
    summary = resume.personal_info.strip()
    if len(summary) < SUMMARY_BRIEF_LENGTH:
        out.append(lookup(SuggestionSection.PERSONAL_INFO, Condition.SUMMARY_TOO_BRIEF))
    elif len(summary) < SUMMARY_SHORT_LENGTH:
        out.append(lookup(SuggestionSection.PERSONAL_INFO, Condition.SUMMARY_SHORT))

    # An empty summary is already covered by the "too brief" entry
    if summary and not _contains_any(summary, IMPACT_WORDS):
        out.append(lookup(SuggestionSection.PERSONAL_INFO, Condition.SUMMARY_NO_ACTION_WORDS))


def analyze_experience(resume: ResumeContent, out: list[Suggestion]) -> None:
    experience = resume.experience.strip()
    if not experience:
        out.append(lookup(SuggestionSection.EXPERIENCE, Condition.EXPERIENCE_EMPTY))
        return

    quantified = (
        _DIGITS.search(experience) is not None
        or "%" in experience
        or _DOLLAR_AMOUNT.search(experience) is not None
    )
    if not quantified:
        out.append(lookup(SuggestionSection.EXPERIENCE, Condition.EXPERIENCE_NOT_QUANTIFIED))

    if not _contains_any(experience, ACTION_VERBS):
        out.append(lookup(SuggestionSection.EXPERIENCE, Condition.EXPERIENCE_NO_ACTION_VERBS))


def analyze_skills(resume: ResumeContent, out: list[Suggestion]) -> None:
    tokens = split_skills(resume.skills)
    if not tokens:
        out.append(lookup(SuggestionSection.SKILLS, Condition.SKILLS_EMPTY))
        return

    if len(tokens) < MIN_SKILLS:
        out.append(lookup(SuggestionSection.SKILLS, Condition.SKILLS_TOO_FEW))
    elif len(tokens) > MAX_SKILLS:
        out.append(lookup(SuggestionSection.SKILLS, Condition.SKILLS_TOO_MANY))

    # A colon means the user already wrote "Category: a, b, c" groups
    if ":" not in resume.skills and len(tokens) > GROUPING_SKILLS_THRESHOLD:
        out.append(lookup(SuggestionSection.SKILLS, Condition.SKILLS_UNGROUPED))


def analyze_education(resume: ResumeContent, out: list[Suggestion]) -> None:
    education = resume.education.strip()
    if not education:
        out.append(lookup(SuggestionSection.EDUCATION, Condition.EDUCATION_EMPTY))
    elif len(education) < EDUCATION_DETAIL_LENGTH:
        out.append(lookup(SuggestionSection.EDUCATION, Condition.EDUCATION_SPARSE))


def analyze_content_quality(resume: ResumeContent, out: list[Suggestion]) -> None:
    combined = " ".join(
        (resume.personal_info, resume.education, resume.experience, resume.skills)
    ).lower()

    buzzword_count = sum(1 for word in BUZZWORDS if word in combined)
    if buzzword_count > MAX_BUZZWORDS:
        out.append(lookup(SuggestionSection.CONTENT, Condition.CONTENT_BUZZWORDS))

    has_bullets = "•" in combined or "-" in combined
    if not has_bullets and len(resume.experience) > BULLET_EXPERIENCE_LENGTH:
        out.append(lookup(SuggestionSection.FORMATTING, Condition.FORMATTING_NO_BULLETS))


ANALYZERS: tuple[Analyzer, ...] = (
    analyze_personal_info,
    analyze_experience,
    analyze_skills,
    analyze_education,
    analyze_content_quality,
)


def generate_suggestions(resume: ResumeContent) -> list[Suggestion]:
    """Run every analyzer over the resume, in order."""
    suggestions: list[Suggestion] = []
    for analyzer in ANALYZERS:
        analyzer(resume, suggestions)
    logger.debug("Generated %d suggestions for %r", len(suggestions), resume.title)
    return suggestions
