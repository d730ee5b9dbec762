"""Exceptions raised by the resume service layer."""

from __future__ import annotations


class ResumeStudioError(Exception):
    """Base class for resume-studio errors."""


class ResumeValidationError(ResumeStudioError, ValueError):
    """Submitted resume content was rejected. Maps to a client error."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResumeNotFoundError(ResumeStudioError, LookupError):
    """No resume exists with the requested id."""

    def __init__(self, resume_id: int):
        super().__init__(f"Resume not found: {resume_id}")
        self.resume_id = resume_id
