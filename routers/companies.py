from typing import Annotated

from fastapi import APIRouter, Depends, status

import crud.companies as companies_crud
from schemas.commons import DBConnection, HandlePath, query_params
from schemas.company import (
    CompanyCreateRequest,
    CompanyUpdateRequest,
    CompanyResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyDeleteResponse,
    ListCompaniesQuery,
)
from utils.auth import require_admin

router = APIRouter(
    prefix="/companies",
    tags=["COMPANIES"],
)

AdminOnly = Depends(require_admin)


@router.post("", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED, dependencies=[AdminOnly])
async def create_company(company: CompanyCreateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 생성 (관리자)"""
    new_company = await companies_crud.create(conn, company.model_dump(by_alias=True))
    return CompanyResponse(company=new_company)


@router.get("", response_model=CompanyListResponse)
async def get_companies(
        conn: DBConnection,
        query: Annotated[ListCompaniesQuery, Depends(query_params(ListCompaniesQuery))],
) -> CompanyListResponse:
    """
    회사 목록 조회
    - name: 이름 부분 일치 (대소문자 무시)
    - minEmployees / maxEmployees: 직원 수 범위
    """
    companies = await companies_crud.find_all(
        conn, query.name, query.min_employees, query.max_employees
    )
    return CompanyListResponse(companies=companies)


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: HandlePath, conn: DBConnection) -> CompanyDetailResponse:
    """회사 상세 조회 (채용공고 포함)"""
    company = await companies_crud.get(conn, handle)
    return CompanyDetailResponse(company=company)


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[AdminOnly])
async def update_company(
        handle: HandlePath, update_data: CompanyUpdateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 정보 수정 (관리자)"""
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    company = await companies_crud.update(conn, handle, update_fields)
    return CompanyResponse(company=company)


@router.delete("/{handle}", response_model=CompanyDeleteResponse, dependencies=[AdminOnly])
async def delete_company(handle: HandlePath, conn: DBConnection) -> CompanyDeleteResponse:
    """회사 삭제 (관리자)"""
    await companies_crud.remove(conn, handle)
    return CompanyDeleteResponse(deleted=handle)
