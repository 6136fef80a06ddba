"""모든 테이블 모델을 import 해서 Base.metadata에 등록"""
from db.base import Base
from db.models.application import Application
from db.models.company import Company
from db.models.job import Job
from db.models.user import User

metadata = Base.metadata

__all__ = ["Application", "Company", "Job", "User", "metadata"]
