from fastapi import APIRouter, status

import crud.users as users_crud
from schemas.commons import DBConnection
from schemas.user import UserLoginRequest, UserRegisterRequest, TokenResponse
from utils.auth import create_access_token

router = APIRouter(
    prefix="/auth",
    tags=["AUTH"],
)


@router.post("/token", response_model=TokenResponse)
async def get_token(user: UserLoginRequest, conn: DBConnection) -> TokenResponse:
    """로그인 - JWT 발급"""
    db_user = await users_crud.authenticate(conn, user.username, user.password)
    token = create_access_token(db_user["username"], db_user["isAdmin"])
    return TokenResponse(token=token)


@router.post("/register", response_model=TokenResponse,
             status_code=status.HTTP_201_CREATED)
async def register(user: UserRegisterRequest, conn: DBConnection) -> TokenResponse:
    """회원가입 (관리자 지정 불가) - JWT 발급"""
    new_user = await users_crud.register(conn, {**user.model_dump(by_alias=True), "isAdmin": False})
    token = create_access_token(new_user["username"], new_user["isAdmin"])
    return TokenResponse(token=token)
