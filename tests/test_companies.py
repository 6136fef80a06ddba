"""회사 API 테스트"""
from unittest.mock import ANY, AsyncMock, patch

import pytest
from fastapi import HTTPException

C1 = {
    "handle": "c1",
    "name": "C1",
    "description": "Desc1",
    "numEmployees": 1,
    "logoUrl": "http://c1.img",
}

NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "description": "DescNew",
    "numEmployees": 10,
    "logoUrl": "http://new.img",
}


class TestCreateCompany:
    """POST /companies 테스트"""

    def test_ok_for_admin(self, client, admin_headers):
        with patch("crud.companies.create", new=AsyncMock(return_value=NEW_COMPANY)) as mock_create:
            response = client.post("/companies", json=NEW_COMPANY, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": NEW_COMPANY}
        mock_create.assert_awaited_once_with(ANY, NEW_COMPANY)

    def test_forbidden_for_users(self, client, user_headers):
        response = client.post("/companies", json=NEW_COMPANY, headers=user_headers)
        assert response.status_code == 403

    def test_bad_request_missing_data(self, client, admin_headers):
        response = client.post("/companies", json={"handle": "new", "numEmployees": 10},
                               headers=admin_headers)
        assert response.status_code == 400

    @pytest.mark.parametrize("field, value", [
        ("logoUrl", "not-a-url"),
        ("numEmployees", -1),
        ("handle", "Bad Handle"),
    ])
    def test_bad_request_invalid_data(self, client, admin_headers, field, value):
        response = client.post("/companies", json={**NEW_COMPANY, field: value},
                               headers=admin_headers)
        assert response.status_code == 400


class TestGetCompanies:
    """GET /companies 테스트"""

    def test_ok_for_anon(self, client):
        with patch("crud.companies.find_all", new=AsyncMock(return_value=[C1])) as mock_find:
            response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == {"companies": [C1]}
        mock_find.assert_awaited_once_with(ANY, None, None, None)

    def test_filters(self, client):
        with patch("crud.companies.find_all", new=AsyncMock(return_value=[])) as mock_find:
            response = client.get("/companies?name=c&minEmployees=1&maxEmployees=2")

        assert response.status_code == 200
        mock_find.assert_awaited_once_with(ANY, "c", 1, 2)

    def test_min_greater_than_max(self, client):
        with patch("crud.companies.find_all", new=AsyncMock()) as mock_find:
            response = client.get("/companies?minEmployees=3&maxEmployees=2")
        assert response.status_code == 400
        mock_find.assert_not_awaited()

    def test_unknown_filter(self, client):
        response = client.get("/companies?handle=c1")
        assert response.status_code == 400

    def test_snake_case_keys_rejected(self, client):
        with patch("crud.companies.find_all", new=AsyncMock()) as mock_find:
            response = client.get("/companies?min_employees=1&max_employees=5")
        assert response.status_code == 400
        mock_find.assert_not_awaited()

    def test_empty_name_is_not_an_error(self, client):
        """빈 name은 title과 마찬가지로 필터 없음"""
        with patch("crud.companies.find_all", new=AsyncMock(return_value=[C1])) as mock_find:
            response = client.get("/companies?name=")
        assert response.status_code == 200
        mock_find.assert_awaited_once_with(ANY, "", None, None)

    def test_num_employees_out_of_int_range(self, client):
        response = client.get("/companies?minEmployees=3000000000")
        assert response.status_code == 400


class TestGetCompany:
    """GET /companies/{handle} 테스트"""

    def test_works_for_anon(self, client):
        detail = {**C1, "jobs": [{"id": 1, "title": "j1", "salary": 10000, "equity": "0"}]}
        with patch("crud.companies.get", new=AsyncMock(return_value=detail)):
            response = client.get("/companies/c1")

        assert response.status_code == 200
        company = response.json()["company"]
        assert company["handle"] == "c1"
        assert [job["id"] for job in company["jobs"]] == [1]

    def test_not_found(self, client):
        not_found = HTTPException(status_code=404, detail="No company: nope")
        with patch("crud.companies.get", new=AsyncMock(side_effect=not_found)):
            response = client.get("/companies/nope")
        assert response.status_code == 404


class TestUpdateCompany:
    """PATCH /companies/{handle} 테스트"""

    def test_works_for_admin(self, client, admin_headers):
        updated = {**C1, "name": "C1-new"}
        with patch("crud.companies.update", new=AsyncMock(return_value=updated)) as mock_update:
            response = client.patch("/companies/c1", json={"name": "C1-new"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"company": updated}
        mock_update.assert_awaited_once_with(ANY, "c1", {"name": "C1-new"})

    def test_logo_url_can_be_cleared(self, client, admin_headers):
        """명시적 null 은 전달됨"""
        with patch("crud.companies.update", new=AsyncMock(return_value={**C1, "logoUrl": None})) as mock_update:
            response = client.patch("/companies/c1", json={"logoUrl": None}, headers=admin_headers)

        assert response.status_code == 200
        mock_update.assert_awaited_once_with(ANY, "c1", {"logoUrl": None})

    def test_forbidden_for_users(self, client, user_headers):
        response = client.patch("/companies/c1", json={"name": "C1-new"}, headers=user_headers)
        assert response.status_code == 403

    def test_handle_change_attempt(self, client, admin_headers):
        response = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)
        assert response.status_code == 400

    def test_empty_body(self, client, admin_headers):
        response = client.patch("/companies/c1", json={}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "No data"


class TestDeleteCompany:
    """DELETE /companies/{handle} 테스트"""

    def test_works_for_admin(self, client, admin_headers):
        with patch("crud.companies.remove", new=AsyncMock(return_value=None)) as mock_remove:
            response = client.delete("/companies/c1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "c1"}
        mock_remove.assert_awaited_once_with(ANY, "c1")

    def test_unauthorized_for_anon(self, client):
        response = client.delete("/companies/c1")
        assert response.status_code == 401
