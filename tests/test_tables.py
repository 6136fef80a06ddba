"""SQLAlchemy 테이블 정의 테스트 (crud SQL이 기대하는 컬럼과 일치하는지)"""
from crud.companies import NAME_CONSTRAINT
from db.session import sqlalchemy_url
from db.tables import metadata


def test_tables_registered():
    assert set(metadata.tables) == {"companies", "jobs", "users", "applications"}


def test_columns_match_queries():
    columns = {name: set(table.columns.keys()) for name, table in metadata.tables.items()}
    assert columns["companies"] == {"handle", "name", "num_employees", "description", "logo_url"}
    assert columns["jobs"] == {"id", "title", "salary", "equity", "company_handle"}
    assert columns["users"] == {"username", "password", "first_name", "last_name", "email", "is_admin"}
    assert columns["applications"] == {"username", "job_id"}


def test_applications_primary_key():
    pk = metadata.tables["applications"].primary_key
    assert {column.name for column in pk.columns} == {"username", "job_id"}


def test_foreign_keys_cascade():
    for table_name, column_name in [("jobs", "company_handle"),
                                    ("applications", "username"),
                                    ("applications", "job_id")]:
        (fk,) = metadata.tables[table_name].columns[column_name].foreign_keys
        assert fk.ondelete == "CASCADE"


def test_sqlalchemy_url():
    assert sqlalchemy_url("postgresql://u:p@localhost:5432/jobly") == "postgresql+asyncpg://u:p@localhost:5432/jobly"
    assert sqlalchemy_url("postgres://u@db/jobly") == "postgresql+asyncpg://u@db/jobly"


def test_company_name_unique_constraint_name():
    """crud.companies가 중복 name 판별에 쓰는 제약 이름과 일치"""
    names = {constraint.name for constraint in metadata.tables["companies"].constraints}
    assert NAME_CONSTRAINT in names
