# interview_prep/schemas/base.py
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class ActionModel(BaseModel):
    # JSON 은 camelCase(jobTitle), 파이썬 필드는 snake_case(job_title). 둘 다 입력 허용
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ActionInput(ActionModel):
    # 선택 필드는 "안 보냄"만 허용. null 은 입력 오류
    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Expected a value, received null")
        return v
