# interview_prep/store/supabase_store.py
# supabase(PostgREST) 클라이언트로 DataStore 구현
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from supabase import Client, create_client

from interview_prep.config import settings
from interview_prep.store.base import Row

logger = logging.getLogger(__name__)


def _encode(value: Any) -> Any:
    # PostgREST 는 JSON 으로 통신하므로 날짜는 ISO 문자열로 보냄
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def _encode_row(values: Row) -> Dict[str, Any]:
    return {key: _encode(value) for key, value in values.items()}


def create_supabase_client() -> Client:
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set in .env")
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


class SupabaseStore:
    def __init__(self, client: Client):
        self.client = client

    def _filtered(self, query, eq: Dict[str, Any]):
        for key, value in eq.items():
            query = query.eq(key, _encode(value))
        return query

    def select(self, table: str, **eq: Any) -> List[Row]:
        response = self._filtered(self.client.table(table).select("*"), eq).execute()
        return response.data if response.data else []

    def insert(self, table: str, values: Row) -> Optional[Row]:
        response = self.client.table(table).insert(_encode_row(values)).execute()
        return response.data[0] if response.data else None

    def update(self, table: str, values: Row, **eq: Any) -> List[Row]:
        query = self.client.table(table).update(_encode_row(values))
        response = self._filtered(query, eq).execute()
        return response.data if response.data else []

    def delete(self, table: str, **eq: Any) -> List[Row]:
        response = self._filtered(self.client.table(table).delete(), eq).execute()
        logger.debug("[STORE] supabase delete %s where %r -> %d rows", table, eq, len(response.data or []))
        return response.data if response.data else []
