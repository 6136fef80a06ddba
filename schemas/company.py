from decimal import Decimal
from typing import Annotated

from pydantic import ConfigDict, Field, StringConstraints, model_validator

from schemas.commons import CamelModel, Count, Handle, Name, QueryModel

LogoUrl = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=500, pattern=r"^https?://\S+$"),
]


class CompanyBase(CamelModel):
    handle: Handle
    name: Name
    description: str | None = None
    num_employees: Count | None = None
    logo_url: str | None = None


class CompanyCreateRequest(CompanyBase):
    model_config = ConfigDict(extra='forbid')

    description: str = ""
    logo_url: LogoUrl | None = None


class CompanyUpdateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    name: Name | None = None
    description: str | None = None
    num_employees: Count | None = None
    logo_url: LogoUrl | None = None

    @model_validator(mode='after')
    def check_not_null(self):
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name은 null로 설정할 수 없습니다.")
        return self


class CompanyJob(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None


class CompanyDetail(CompanyBase):
    jobs: list[CompanyJob] = []


class CompanyResponse(CamelModel):
    company: CompanyBase


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[CompanyBase]


class CompanyDeleteResponse(CamelModel):
    deleted: str


class ListCompaniesQuery(QueryModel):
    """GET /companies 쿼리 파라미터 (허용되지 않은 키는 400, 빈 name은 필터 없음)"""
    name: Annotated[
        str | None,
        Field(max_length=100, description="회사 이름에 포함된 검색어 (대소문자 무시)")
    ] = None
    min_employees: Count | None = None
    max_employees: Count | None = None

    @model_validator(mode='after')
    def check_employee_range(self):
        if (self.min_employees is not None and self.max_employees is not None
                and self.min_employees > self.max_employees):
            raise ValueError("minEmployees cannot be greater than maxEmployees")
        return self
