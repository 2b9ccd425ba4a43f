# interview_prep/store/memory.py
# 테스트용 인메모리 DataStore. 행은 복사해서 넣고 복사해서 꺼낸다.
from collections import defaultdict
from typing import Any, Dict, List, Optional

from interview_prep.store.base import Row


def _matches(row: Row, eq: Dict[str, Any]) -> bool:
    return all(row.get(key) == value for key, value in eq.items())


class MemoryStore:
    def __init__(self):
        self.tables: Dict[str, List[Row]] = defaultdict(list)

    def select(self, table: str, **eq: Any) -> List[Row]:
        return [dict(r) for r in self.tables[table] if _matches(r, eq)]

    def insert(self, table: str, values: Row) -> Optional[Row]:
        row = dict(values)
        if any(r.get("id") == row.get("id") for r in self.tables[table]):
            raise ValueError(f"duplicate primary key in {table}: {row.get('id')!r}")
        self.tables[table].append(row)
        return dict(row)

    def update(self, table: str, values: Row, **eq: Any) -> List[Row]:
        updated = []
        for r in self.tables[table]:
            if _matches(r, eq):
                r.update(values)
                updated.append(dict(r))
        return updated

    def delete(self, table: str, **eq: Any) -> List[Row]:
        kept, removed = [], []
        for r in self.tables[table]:
            (removed if _matches(r, eq) else kept).append(r)
        self.tables[table] = kept
        return [dict(r) for r in removed]
