# interview_prep/services/upsert.py
# id 유무로 생성/수정 분기. 호출부에서는 Insert / Update 타입으로만 분기한다
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Insert:
    fields: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Update:
    id: str
    fields: Dict[str, Any] = field(default_factory=dict)


Upsert = Union[Insert, Update]


def plan_upsert(id: Optional[str], fields: Dict[str, Any]) -> Upsert:
    # 빈 문자열 id 도 생성으로 취급
    if id:
        return Update(id=id, fields=dict(fields))
    return Insert(fields=dict(fields))
