from typing import Any, Mapping


class NoDataError(ValueError):
    """UPDATE에 반영할 필드가 하나도 없을 때"""

    def __init__(self, message: str = "No data"):
        super().__init__(message)


def build_set_clause(
    update_fields: Mapping[str, Any],
    column_map: Mapping[str, str] | None = None,
) -> tuple[str, list]:
    """
    부분 수정(PATCH)용 UPDATE SET 절 생성.

    Args:
        update_fields: 업데이트할 필드와 값 {"firstName": "Aliya", "age": 32}
            dict 삽입 순서가 곧 파라미터 순서
        column_map: 필드명 -> DB 컬럼명 매핑 {"firstName": "first_name"}
            매핑에 없는 필드는 필드명을 그대로 컬럼명으로 사용

    Returns:
        (set_clause, values) 튜플
        - set_clause: '"first_name"=$1, "age"=$2'
        - values: ["Aliya", 32]

    Raises:
        NoDataError: update_fields가 비어 있는 경우

    Example:
        >>> build_set_clause({"name": "new name", "yearsOld": 5}, {"yearsOld": "years_old"})
        ('"name"=$1, "years_old"=$2', ['new name', 5])

    컬럼명은 검증하지 않는다. 필드명은 반드시 요청 스키마로 화이트리스트된 키만 넘길 것.
    """
    if not update_fields:
        raise NoDataError()

    column_map = column_map or {}
    set_parts = []
    values = []

    for idx, (field_name, value) in enumerate(update_fields.items(), start=1):
        column_name = column_map.get(field_name, field_name)
        set_parts.append(f'"{column_name}"=${idx}')
        values.append(value)

    return ", ".join(set_parts), values


class _Predicates:
    """WHERE 조건과 위치 파라미터($N)를 같은 순서로 쌓는다."""

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.values: list = []

    def add(self, template: str, value: Any) -> None:
        # template 예: "j.salary >= ${}"
        self.values.append(value)
        self.parts.append(template.format(len(self.values)))

    def build(self) -> tuple[str, list]:
        if not self.parts:
            return "", []
        return "WHERE " + " AND ".join(self.parts), self.values


def build_job_filter(
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool | None = None,
) -> tuple[str, list]:
    """
    채용공고 검색 WHERE 절 생성.

    - title: 대소문자 무시 부분 일치 (빈 문자열이면 무시)
    - min_salary: 최소 연봉 이상 (0도 유효한 값)
    - has_equity: True일 때만 equity > 0 으로 필터링, False는 "필터 없음"

    Returns:
        (where_clause, values) - 조건이 없으면 ("", [])
    """
    predicates = _Predicates()

    if title:
        predicates.add("j.title ILIKE ${}", f"%{title}%")

    if min_salary is not None:
        predicates.add("j.salary >= ${}", min_salary)

    if has_equity is True:
        predicates.add("j.equity > ${}", 0)

    return predicates.build()


def build_company_filter(
    name: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> tuple[str, list]:
    """회사 검색 WHERE 절 생성 (min > max 검증은 라우터에서)"""
    predicates = _Predicates()

    if name:
        predicates.add("name ILIKE ${}", f"%{name}%")

    if min_employees is not None:
        predicates.add("num_employees >= ${}", min_employees)

    if max_employees is not None:
        predicates.add("num_employees <= ${}", max_employees)

    return predicates.build()
