"""SQLite-backed resume storage."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timedelta, timezone
from pathlib import Path

from resume_studio.models.resume import ResumeContent, StoredResume
from resume_studio.models.stats import OwnerActivity, ResumeStats, TemplateUsage

DEFAULT_DB_PATH = Path.home() / ".resume-studio" / "resumes.db"
TOP_OWNERS_LIMIT = 10

_COLUMNS = (
    "resume_id, owner, title, personal_info, education, experience, skills, "
    "template_style, ai_suggestions_json, created_at, updated_at"
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_db_time(value: datetime) -> str:
    # Fixed-width ISO strings so SQL string comparison orders correctly
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


class ResumeStore:
    """SQLite-backed store for resumes with WAL mode."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS resumes (
                    resume_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    owner TEXT NOT NULL,
                    title TEXT NOT NULL,
                    personal_info TEXT NOT NULL DEFAULT '',
                    education TEXT NOT NULL DEFAULT '',
                    experience TEXT NOT NULL DEFAULT '',
                    skills TEXT NOT NULL DEFAULT '',
                    template_style TEXT NOT NULL DEFAULT 'classic',
                    ai_suggestions_json TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_resumes_owner ON resumes (owner)"
            )

    def create(
        self,
        content: ResumeContent,
        owner: str,
        created_at: datetime | None = None,
    ) -> StoredResume:
        """Insert a resume and return the stored row."""
        stamp = _to_db_time(created_at or _utcnow())
        with self._connect() as conn:
            cursor = conn.execute(
                """INSERT INTO resumes
                   (owner, title, personal_info, education, experience, skills,
                    template_style, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    owner,
                    content.title,
                    content.personal_info,
                    content.education,
                    content.experience,
                    content.skills,
                    content.template_style.value,
                    stamp,
                    stamp,
                ),
            )
            resume_id = cursor.lastrowid
        return self.get(resume_id)

    def get(self, resume_id: int) -> StoredResume | None:
        with self._connect() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM resumes WHERE resume_id = ?",
                (resume_id,),
            ).fetchone()
        return self._row_to_resume(row) if row else None

    def list(self, owner: str | None = None) -> list[StoredResume]:
        """Resumes newest-updated first, optionally for one owner."""
        with self._connect() as conn:
            if owner is not None:
                rows = conn.execute(
                    f"SELECT {_COLUMNS} FROM resumes WHERE owner = ? "
                    "ORDER BY updated_at DESC, resume_id DESC",
                    (owner,),
                ).fetchall()
            else:
                rows = conn.execute(
                    f"SELECT {_COLUMNS} FROM resumes ORDER BY updated_at DESC, resume_id DESC"
                ).fetchall()
        return [self._row_to_resume(row) for row in rows]

    def update(self, resume_id: int, content: ResumeContent) -> StoredResume | None:
        """Replace the text fields and template. Returns None if missing."""
        with self._connect() as conn:
            cursor = conn.execute(
                """UPDATE resumes
                   SET title = ?, personal_info = ?, education = ?, experience = ?,
                       skills = ?, template_style = ?, updated_at = ?
                   WHERE resume_id = ?""",
                (
                    content.title,
                    content.personal_info,
                    content.education,
                    content.experience,
                    content.skills,
                    content.template_style.value,
                    _to_db_time(_utcnow()),
                    resume_id,
                ),
            )
            if cursor.rowcount == 0:
                return None
        return self.get(resume_id)

    def save_suggestions(self, resume_id: int, suggestions_json: str) -> bool:
        """Attach serialized suggestions to a resume."""
        with self._connect() as conn:
            cursor = conn.execute(
                """UPDATE resumes SET ai_suggestions_json = ?, updated_at = ?
                   WHERE resume_id = ?""",
                (suggestions_json, _to_db_time(_utcnow()), resume_id),
            )
            return cursor.rowcount > 0

    def delete(self, resume_id: int) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM resumes WHERE resume_id = ?", (resume_id,))
            return cursor.rowcount > 0

    def template_usage(self) -> list[TemplateUsage]:
        with self._connect() as conn:
            rows = conn.execute(
                """SELECT template_style, COUNT(*) AS n FROM resumes
                   GROUP BY template_style ORDER BY n DESC, template_style"""
            ).fetchall()
        return [TemplateUsage(template_style=row[0], count=row[1]) for row in rows]

    def owner_activity(self, limit: int = TOP_OWNERS_LIMIT) -> list[OwnerActivity]:
        with self._connect() as conn:
            rows = conn.execute(
                """SELECT owner, COUNT(*) AS n FROM resumes
                   GROUP BY owner ORDER BY n DESC, owner LIMIT ?""",
                (limit,),
            ).fetchall()
        return [OwnerActivity(owner=row[0], resume_count=row[1]) for row in rows]

    def stats(self, now: datetime | None = None) -> ResumeStats:
        """Aggregate counts over creation time windows."""
        now = now or _utcnow()
        windows = [_to_db_time(now - timedelta(days=d)) for d in (1, 7, 30)]
        with self._connect() as conn:
            row = conn.execute(
                """SELECT
                       COUNT(*),
                       SUM(CASE WHEN created_at >= ? THEN 1 ELSE 0 END),
                       SUM(CASE WHEN created_at >= ? THEN 1 ELSE 0 END),
                       SUM(CASE WHEN created_at >= ? THEN 1 ELSE 0 END)
                   FROM resumes""",
                windows,
            ).fetchone()
        last_30 = row[3] or 0
        return ResumeStats(
            total_resumes=row[0] or 0,
            resumes_last_24h=row[1] or 0,
            resumes_last_7_days=row[2] or 0,
            resumes_last_30_days=last_30,
            average_per_day=round(last_30 / 30.0, 2),
            template_usage=self.template_usage(),
            top_owners=self.owner_activity(),
        )

    @staticmethod
    def _row_to_resume(row: tuple) -> StoredResume:
        return StoredResume(
            resume_id=row[0],
            owner=row[1],
            title=row[2],
            personal_info=row[3],
            education=row[4],
            experience=row[5],
            skills=row[6],
            template_style=row[7],
            suggestions_json=row[8],
            created_at=datetime.fromisoformat(row[9]),
            updated_at=datetime.fromisoformat(row[10]),
        )
