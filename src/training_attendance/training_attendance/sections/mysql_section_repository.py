from __future__ import annotations

from datetime import date

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import TrainingDayLookup


class MySQLSectionRepository(TrainingDayLookup):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_section_count(self, course_id: int, training_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS section_count
                FROM m_section
                WHERE course_id=%s AND section_date=%s AND delete_flg=0
                """,
                (int(course_id), training_date),
            )
            r = fetchone(cur)
            if not r:
                return 0
            return int(r["section_count"])
