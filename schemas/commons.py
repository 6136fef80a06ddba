from typing import Annotated

import asyncpg
from fastapi import Depends, Path, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError
from pydantic.alias_generators import to_camel

from utils.database import get_connection

DBConnection = Annotated[asyncpg.Connection, Depends(get_connection)]

# PostgreSQL INTEGER(int4) 최대값
MAX_INT4 = 2**31 - 1


class CamelModel(BaseModel):
    """JSON은 camelCase, 파이썬 속성은 snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QueryModel(CamelModel):
    """쿼리스트링 모델: camelCase 키만 허용, 그 외 키는 거부"""
    model_config = ConfigDict(populate_by_name=False, extra="forbid")


Username = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=25),
]

Handle = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=25,
                      pattern=r"^[a-z0-9-]+$"),
]

HandlePath = Annotated[
    str,
    Path(min_length=1, max_length=25, description="회사 handle", examples=["anderson-arias-morrow"]),
]

UsernamePath = Annotated[
    str,
    Path(min_length=1, max_length=25, description="사용자 username", examples=["u1"]),
]

JobId = Annotated[
    int,
    Path(ge=0, le=MAX_INT4, description="채용공고 ID", examples=[1]),
]

Name = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

Count = Annotated[int, Field(ge=0, le=MAX_INT4)]


def query_params(model_cls: type[BaseModel]):
    """
    쿼리스트링 전체를 model_cls로 검증하는 의존성 생성.
    extra='forbid' 모델이면 허용되지 않은 키는 RequestValidationError(400)
    """
    def dependency(request: Request):
        try:
            return model_cls.model_validate(dict(request.query_params))
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e

    return dependency
