from typing import Annotated

from fastapi import APIRouter, Depends, status

import crud.jobs as jobs_crud
from schemas.commons import DBConnection, JobId, query_params
from schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobResponse,
    JobDetailResponse,
    JobListResponse,
    JobDeleteResponse,
    ListJobsQuery,
)
from utils.auth import require_admin

router = APIRouter(
    prefix="/jobs",
    tags=["JOBS"],
)

AdminOnly = Depends(require_admin)


@router.post("", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED, dependencies=[AdminOnly])
async def create_job(job: JobCreateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 생성 (관리자)"""
    new_job = await jobs_crud.create(conn, job.model_dump(by_alias=True))
    return JobResponse(job=new_job)


@router.get("", response_model=JobListResponse)
async def get_jobs(
        conn: DBConnection,
        query: Annotated[ListJobsQuery, Depends(query_params(ListJobsQuery))],
) -> JobListResponse:
    """
    채용공고 목록 조회
    - title: 제목 부분 일치
    - minSalary: 최소 연봉
    - hasEquity: true면 지분이 있는 공고만 (false는 필터 없음)
    """
    jobs = await jobs_crud.find_all(conn, query.title, query.min_salary, query.has_equity)
    return JobListResponse(jobs=jobs)


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(job_id: JobId, conn: DBConnection) -> JobDetailResponse:
    """채용공고 상세 조회"""
    job = await jobs_crud.get(conn, job_id)
    return JobDetailResponse(job=job)


@router.patch("/{job_id}", response_model=JobResponse, dependencies=[AdminOnly])
async def update_job(job_id: JobId, update_data: JobUpdateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 수정 (관리자)"""
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    job = await jobs_crud.update(conn, job_id, update_fields)
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=JobDeleteResponse, dependencies=[AdminOnly])
async def delete_job(job_id: JobId, conn: DBConnection) -> JobDeleteResponse:
    """채용공고 삭제 (관리자)"""
    await jobs_crud.remove(conn, job_id)
    return JobDeleteResponse(deleted=job_id)
