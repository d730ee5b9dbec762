"""Streamlit Web UI for resume-studio.

Three modes:
  A) Builder     : create or edit a resume, sanitize, store
  B) My resumes  : suggestions, HTML preview and PDF download per resume
  C) Statistics  : aggregate counts across all stored resumes
"""

from __future__ import annotations

import logging

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

from resume_studio.config import load_config
from resume_studio.exceptions import ResumeStudioError, ResumeValidationError
from resume_studio.export.html_preview import render_html_preview
from resume_studio.export.themes import AVAILABLE_TEMPLATES
from resume_studio.models.document import PDF_CONTENT_TYPE
from resume_studio.models.resume import StoredResume
from resume_studio.services.resume_service import ResumeService, parse_suggestions
from resume_studio.storage.resume_store import ResumeStore

_PRIORITY_ICONS = {"high": ":red_circle:", "medium": ":large_orange_circle:", "low": ":large_blue_circle:"}

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Resume Studio",
    page_icon=":page_facing_up:",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@st.cache_resource
def _get_config():
    return load_config()


@st.cache_resource
def _get_service() -> ResumeService:
    config = _get_config()
    store = ResumeStore(db_path=config.storage.resolved_db_path)
    return ResumeService(store, font_path=config.export.font_path)


def _render_suggestions(suggestions) -> None:
    if not suggestions:
        st.success("No suggestions. The resume looks good by these checks.")
        return
    for s in suggestions:
        icon = _PRIORITY_ICONS.get(s.priority, "")
        with st.expander(f"{icon} {s.section}: {s.message}"):
            st.code(s.apply_template, language=None)


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title("Resume Studio")
    st.caption("Build, review and export resumes")

    mode = st.radio(
        "Mode",
        ["Builder", "My resumes", "Statistics"],
        index=0,
    )

    st.divider()

    owner = st.text_input("Your name", value=st.session_state.get("owner", "me"), max_chars=80)
    st.session_state["owner"] = owner


# ---------------------------------------------------------------------------
# Mode A: Builder
# ---------------------------------------------------------------------------


def _mode_builder():
    st.header("Resume builder")
    service = _get_service()

    mine = service.list(owner=owner)
    options = ["New resume"] + [f"{r.resume_id}: {r.title}" for r in mine]
    choice = st.selectbox("Edit", options, index=0)
    editing: StoredResume | None = None
    if choice != "New resume":
        editing = next(r for r in mine if f"{r.resume_id}: {r.title}" == choice)

    default_template = _get_config().export.default_template
    current_template = editing.template_style.value if editing else default_template

    with st.form("resume_form"):
        title = st.text_input("Title", value=editing.title if editing else "", max_chars=160)
        template_style = st.radio(
            "Template",
            AVAILABLE_TEMPLATES,
            index=AVAILABLE_TEMPLATES.index(current_template),
            horizontal=True,
        )
        personal_info = st.text_area(
            "Personal information",
            value=editing.personal_info if editing else "",
            height=150,
            max_chars=8000,
        )
        experience = st.text_area(
            "Experience",
            value=editing.experience if editing else "",
            height=250,
            max_chars=20000,
        )
        education = st.text_area(
            "Education",
            value=editing.education if editing else "",
            height=150,
            max_chars=16000,
        )
        skills = st.text_area(
            "Skills",
            value=editing.skills if editing else "",
            height=100,
            max_chars=4000,
            help="Separate skills with commas, semicolons or new lines.",
        )
        submitted = st.form_submit_button("Save", type="primary")

    if not submitted:
        return

    draft = {
        "title": title,
        "personal_info": personal_info,
        "education": education,
        "experience": experience,
        "skills": skills,
        "template_style": template_style,
    }
    try:
        if editing:
            resume = service.update(editing.resume_id, draft)
        else:
            resume = service.create(draft, owner=owner)
    except ResumeValidationError as e:
        st.error(e.message)
        return
    except ResumeStudioError as e:
        st.error(str(e))
        return
    st.success(f"Saved resume {resume.resume_id}: {resume.title}")


# ---------------------------------------------------------------------------
# Mode B: My resumes
# ---------------------------------------------------------------------------


def _mode_resumes():
    st.header("My resumes")
    service = _get_service()

    resumes = service.list(owner=owner)
    if not resumes:
        st.info("No resumes yet. Create one in the builder.")
        return

    labels = {f"{r.resume_id}: {r.title}": r for r in resumes}
    resume = labels[st.selectbox("Resume", list(labels))]

    col_download, col_suggest, col_delete = st.columns(3)
    with col_download:
        try:
            document = service.download(resume.resume_id)
        except Exception:
            logger.exception("PDF rendering failed for resume %d", resume.resume_id)
            st.error("Could not render the PDF.")
        else:
            st.download_button(
                label="Download PDF",
                data=document.content,
                file_name=document.filename,
                mime=PDF_CONTENT_TYPE,
                type="primary",
            )
    with col_suggest:
        if st.button("Get suggestions"):
            try:
                service.generate_suggestions(resume.resume_id)
                resume = service.get(resume.resume_id)
            except Exception:
                logger.exception("Suggestion generation failed for resume %d", resume.resume_id)
                st.error("Could not generate suggestions.")
    with col_delete:
        if st.button("Delete"):
            try:
                service.delete(resume.resume_id)
            except Exception:
                logger.exception("Deleting resume %d failed", resume.resume_id)
                st.error("Could not delete the resume.")
            else:
                st.rerun()

    tab_preview, tab_suggestions = st.tabs(["Preview", "Suggestions"])
    with tab_preview:
        components.html(render_html_preview(resume.content), height=900, scrolling=True)
    with tab_suggestions:
        if resume.suggestions_json is None:
            st.caption("Click \"Get suggestions\" to analyze this resume.")
        else:
            _render_suggestions(parse_suggestions(resume.suggestions_json))


# ---------------------------------------------------------------------------
# Mode C: Statistics
# ---------------------------------------------------------------------------


def _mode_stats():
    st.header("Statistics")
    stats = _get_service().stats()

    cols = st.columns(4)
    cols[0].metric("Total resumes", stats.total_resumes)
    cols[1].metric("Last 24h", stats.resumes_last_24h)
    cols[2].metric("Last 7 days", stats.resumes_last_7_days)
    cols[3].metric("Last 30 days", stats.resumes_last_30_days)
    st.caption(f"Average per day (30 days): {stats.average_per_day:.2f}")

    col_templates, col_owners = st.columns(2)
    with col_templates:
        st.subheader("Templates")
        st.dataframe([u.model_dump() for u in stats.template_usage], use_container_width=True)
    with col_owners:
        st.subheader("Most active")
        st.dataframe([a.model_dump() for a in stats.top_owners], use_container_width=True)


if mode == "Builder":
    _mode_builder()
elif mode == "My resumes":
    _mode_resumes()
else:
    _mode_stats()
