from decimal import Decimal
from typing import Annotated, Any

from pydantic import ConfigDict, Field, StringConstraints, field_validator, model_validator

from schemas.commons import CamelModel, Count, Handle, QueryModel

Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

Equity = Annotated[Decimal, Field(ge=0, le=1, max_digits=4, decimal_places=3)]


class JobBase(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None
    company_handle: str


class JobDetail(JobBase):
    company_name: str | None = None


class JobCreateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    title: Title
    salary: Count | None = None
    equity: Equity | None = None
    company_handle: Handle


class JobUpdateRequest(CamelModel):
    """id, companyHandle은 변경 불가"""
    model_config = ConfigDict(extra='forbid')

    title: Title | None = None
    salary: Count | None = None
    equity: Equity | None = None

    @model_validator(mode='after')
    def check_not_null(self):
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title은 null로 설정할 수 없습니다.")
        return self


class JobResponse(CamelModel):
    job: JobBase


class JobDetailResponse(CamelModel):
    job: JobDetail


class JobListResponse(CamelModel):
    jobs: list[JobDetail]


class JobDeleteResponse(CamelModel):
    deleted: int


class ListJobsQuery(QueryModel):
    """GET /jobs 쿼리 파라미터 (허용되지 않은 키는 400, 빈 title은 필터 없음)"""
    title: Annotated[
        str | None,
        Field(max_length=100, description="공고 제목에 포함된 검색어 (대소문자 무시)")
    ] = None
    min_salary: Count | None = None
    has_equity: bool | None = None

    @field_validator("has_equity", mode="before")
    @classmethod
    def parse_has_equity(cls, value: Any) -> Any:
        """'true'(대소문자 무시)만 True, 그 외 문자열은 False(필터 없음)"""
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value
