from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

import crud.users as users_crud
from schemas.commons import DBConnection, JobId, UsernamePath
from schemas.user import (
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
    UserCreateResponse,
    UserDetailResponse,
    UserListResponse,
    UserDeleteResponse,
    ApplicationResponse,
)
from utils.auth import create_access_token, require_admin, require_admin_or_same_user

router = APIRouter(
    prefix="/users",
    tags=["USERS"],
)

AdminOnly = Depends(require_admin)
AdminOrSelf = Depends(require_admin_or_same_user)


@router.post("", response_model=UserCreateResponse,
             status_code=status.HTTP_201_CREATED, dependencies=[AdminOnly])
async def create_user(user: UserCreateRequest, conn: DBConnection) -> UserCreateResponse:
    """사용자 생성 (관리자 전용, 관리자 계정 생성 가능)"""
    new_user = await users_crud.register(conn, user.model_dump(by_alias=True))
    token = create_access_token(new_user["username"], new_user["isAdmin"])
    return UserCreateResponse(user=new_user, token=token)


@router.get("", response_model=UserListResponse, dependencies=[AdminOnly])
async def get_users(conn: DBConnection) -> UserListResponse:
    """전체 사용자 목록 (관리자)"""
    users = await users_crud.find_all(conn)
    return UserListResponse(users=users)


@router.get("/{username}", response_model=UserDetailResponse, dependencies=[AdminOrSelf])
async def get_user(username: UsernamePath, conn: DBConnection) -> UserDetailResponse:
    """사용자 조회 (관리자 또는 본인)"""
    user = await users_crud.get(conn, username)
    return UserDetailResponse(user=user)


@router.patch("/{username}", response_model=UserResponse)
async def update_user(
        username: UsernamePath,
        update_data: UserUpdateRequest,
        current_user: Annotated[dict, AdminOrSelf],
        conn: DBConnection,
) -> UserResponse:
    """사용자 정보 수정 (관리자 또는 본인, isAdmin은 관리자만)"""
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    if "isAdmin" in update_fields and not current_user["is_admin"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized"
        )
    user = await users_crud.update(conn, username, update_fields)
    return UserResponse(user=user)


@router.delete("/{username}", response_model=UserDeleteResponse, dependencies=[AdminOrSelf])
async def delete_user(username: UsernamePath, conn: DBConnection) -> UserDeleteResponse:
    """회원 탈퇴 (관리자 또는 본인)"""
    await users_crud.remove(conn, username)
    return UserDeleteResponse(deleted=username)


@router.post("/{username}/jobs/{job_id}", response_model=ApplicationResponse,
             dependencies=[AdminOrSelf])
async def apply_to_job(username: UsernamePath, job_id: JobId, conn: DBConnection) -> ApplicationResponse:
    """채용공고 지원 (관리자 또는 본인)"""
    await users_crud.apply_to_job(conn, username, job_id)
    return ApplicationResponse(applied=job_id)
