from pydantic import ConfigDict, EmailStr, StringConstraints, model_validator
from typing import Annotated

from schemas.commons import CamelModel, Username

Password = Annotated[
    str,
    StringConstraints(
        min_length=5,
        max_length=64,
    ),
]

PersonName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=30),
]


class UserRegisterRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    username: Username
    password: Password
    first_name: PersonName
    last_name: PersonName
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """관리자 전용 사용자 생성 (관리자 지정 가능)"""
    is_admin: bool = False


class UserLoginRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    username: Username
    password: str


class TokenResponse(CamelModel):
    token: str


class UserBase(CamelModel):
    username: str
    first_name: str
    last_name: str
    email: EmailStr
    is_admin: bool = False


class UserDetail(UserBase):
    jobs: list[int] = []


class UserResponse(CamelModel):
    user: UserBase


class UserCreateResponse(CamelModel):
    user: UserBase
    token: str


class UserDetailResponse(CamelModel):
    user: UserDetail


class UserListResponse(CamelModel):
    users: list[UserBase]


class UserDeleteResponse(CamelModel):
    deleted: str


class ApplicationResponse(CamelModel):
    applied: int


class UserUpdateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    first_name: PersonName | None = None
    last_name: PersonName | None = None
    password: Password | None = None
    email: EmailStr | None = None
    is_admin: bool | None = None

    @model_validator(mode='after')
    def check_not_null(self):
        """
        PATCH 요청에서 "미전송" vs "명시적 null 전송"을 구분하기 위해
        사용자가 실제로 보낸 필드 집합(model_fields_set)을 기준으로 검사
        (빈 요청은 build_set_clause에서 400 처리)
        """
        for field in self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{field}은 null로 설정할 수 없습니다.")
        return self
