# interview_prep/store/sql.py
# SQLAlchemy Core 문장으로 DataStore 구현. 요청 단위 Session(deps.db_session)을 그대로 사용한다.
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import Table, and_, delete, insert, select, update
from sqlalchemy.orm import Session

from interview_prep.db.base import Base
from interview_prep.models import sessions, questions, responses  # noqa: F401  (metadata 등록)
from interview_prep.store.base import Row

logger = logging.getLogger(__name__)


def _to_utc(value: Any) -> Any:
    # SQLite 는 tz 정보를 버리고 저장하므로 쓰기 전 UTC 로 맞추고, 읽을 때 UTC 로 붙인다
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return value


def _utc_row(values: dict) -> Row:
    return {key: _to_utc(value) for key, value in values.items()}


class SqlStore:
    def __init__(self, db: Session):
        self.db = db

    def _table(self, name: str) -> Table:
        return Base.metadata.tables[name]

    def _pk(self, table: Table):
        return list(table.primary_key.columns)[0]

    def _where(self, stmt, table: Table, eq: dict):
        if not eq:
            return stmt
        return stmt.where(and_(*[table.c[key] == value for key, value in eq.items()]))

    def _rows(self, stmt) -> List[Row]:
        return [_utc_row(r) for r in self.db.execute(stmt).mappings().all()]

    def select(self, table: str, **eq: Any) -> List[Row]:
        t = self._table(table)
        logger.debug("[STORE] select %s where %r", table, eq)
        return self._rows(self._where(select(t), t, eq))

    def insert(self, table: str, values: Row) -> Optional[Row]:
        t = self._table(table)
        pk = self._pk(t)
        logger.debug("[STORE] insert %s id=%r", table, values.get(pk.name))
        self.db.execute(insert(t).values(**_utc_row(values)))
        rows = self._rows(select(t).where(pk == values[pk.name]))
        return rows[0] if rows else None

    def update(self, table: str, values: Row, **eq: Any) -> List[Row]:
        t = self._table(table)
        pk = self._pk(t)
        logger.debug("[STORE] update %s where %r fields=%s", table, eq, sorted(values))
        matched = self.select(table, **eq)
        if not matched:
            return []
        ids = [r[pk.name] for r in matched]
        self.db.execute(self._where(update(t), t, eq).values(**_utc_row(values)))
        return self._rows(select(t).where(pk.in_(ids)))

    def delete(self, table: str, **eq: Any) -> List[Row]:
        t = self._table(table)
        logger.debug("[STORE] delete %s where %r", table, eq)
        matched = self.select(table, **eq)
        if not matched:
            return []
        self.db.execute(self._where(delete(t), t, eq))
        return matched
