from __future__ import annotations

import math

from jobboard.models.application import Application


JOB_PAYLOAD = {
    "title": "Backend Engineer",
    "company": "Acme Corp",
    "location": "Berlin, Germany",
    "type": "Full-time",
    "salary": "70k-90k EUR",
    "description": "Build and run the Python services behind our job board.",
}


def _auth_headers(client, *, email: str, role: str = "employer") -> dict[str, str]:
    r = client.post(
        "/api/auth/register",
        json={"name": "Poster", "email": email, "password": "SecretPass123", "role": role},
    )
    assert r.status_code == 201
    return {"Authorization": f"Bearer {r.json()['token']}"}


def _create_job(client, headers: dict[str, str], **overrides) -> dict:
    r = client.post("/api/jobs", json={**JOB_PAYLOAD, **overrides}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_and_get_job(client) -> None:
    headers = _auth_headers(client, email="employer@example.com")
    me = client.post("/api/auth/login", json={"email": "employer@example.com", "password": "SecretPass123"}).json()

    job = _create_job(client, headers)
    assert job["title"] == JOB_PAYLOAD["title"]
    assert job["type"] == "Full-time"
    assert job["userId"] == me["user"]["id"]
    assert "createdAt" in job

    r = client.get(f"/api/jobs/{job['id']}")
    assert r.status_code == 200
    detail = r.json()
    assert detail["id"] == job["id"]
    assert detail["user"] == {"name": "Poster", "email": "employer@example.com"}


def test_get_missing_job_returns_404(client) -> None:
    r = client.get("/api/jobs/9999")
    assert r.status_code == 404
    assert r.json() == {"error": "Job not found"}


def test_create_job_requires_authentication(client) -> None:
    r = client.post("/api/jobs", json=JOB_PAYLOAD)
    assert r.status_code == 401


def test_any_authenticated_role_may_post_a_job(client) -> None:
    headers = _auth_headers(client, email="cand@example.com", role="candidate")
    _create_job(client, headers)


def test_create_job_validation(client) -> None:
    headers = _auth_headers(client, email="employer@example.com")
    r = client.post(
        "/api/jobs",
        json={"title": "X", "company": "A", "location": "B", "type": "Freelance", "description": "short"},
        headers=headers,
    )
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "Validation error"
    assert {issue["path"] for issue in body["issues"]} == {"title", "company", "location", "type", "description"}


def test_salary_is_optional(client) -> None:
    headers = _auth_headers(client, email="employer@example.com")
    payload = {k: v for k, v in JOB_PAYLOAD.items() if k != "salary"}
    r = client.post("/api/jobs", json=payload, headers=headers)
    assert r.status_code == 201
    assert r.json()["salary"] is None


def test_owner_can_update_job(client) -> None:
    headers = _auth_headers(client, email="owner@example.com")
    job = _create_job(client, headers)

    r = client.patch(f"/api/jobs/{job['id']}", json={"title": "Senior Backend Engineer", "type": "Remote"}, headers=headers)
    assert r.status_code == 200
    updated = r.json()
    assert updated["title"] == "Senior Backend Engineer"
    assert updated["type"] == "Remote"
    assert updated["company"] == JOB_PAYLOAD["company"]


def test_update_validates_supplied_fields_only(client) -> None:
    headers = _auth_headers(client, email="owner@example.com")
    job = _create_job(client, headers)

    r = client.patch(f"/api/jobs/{job['id']}", json={"description": "too short"}, headers=headers)
    assert r.status_code == 400
    assert [issue["path"] for issue in r.json()["issues"]] == ["description"]

    r = client.patch(f"/api/jobs/{job['id']}", json={"title": None}, headers=headers)
    assert r.status_code == 400

    r = client.patch(f"/api/jobs/{job['id']}", json={"salary": None}, headers=headers)
    assert r.status_code == 200
    assert r.json()["salary"] is None


def test_non_owner_cannot_update_or_delete(client) -> None:
    owner = _auth_headers(client, email="owner@example.com")
    other = _auth_headers(client, email="other@example.com")
    job = _create_job(client, owner)

    r = client.patch(f"/api/jobs/{job['id']}", json={"title": "Hijacked"}, headers=other)
    assert r.status_code == 403
    assert r.json() == {"error": "Forbidden"}

    r = client.delete(f"/api/jobs/{job['id']}", headers=other)
    assert r.status_code == 403

    assert client.get(f"/api/jobs/{job['id']}").json()["title"] == JOB_PAYLOAD["title"]


def test_missing_job_is_404_before_ownership(client) -> None:
    headers = _auth_headers(client, email="someone@example.com")
    assert client.patch("/api/jobs/4242", json={"title": "Nope"}, headers=headers).status_code == 404
    assert client.delete("/api/jobs/4242", headers=headers).status_code == 404


def test_ownership_is_checked_before_body_validation(client) -> None:
    owner = _auth_headers(client, email="owner@example.com")
    other = _auth_headers(client, email="other@example.com")
    job = _create_job(client, owner)

    r = client.patch(f"/api/jobs/{job['id']}", json={"title": "X"}, headers=other)
    assert r.status_code == 403


def test_owner_can_delete_job_and_its_applications(client, db_session) -> None:
    owner = _auth_headers(client, email="owner@example.com")
    candidate = _auth_headers(client, email="cand@example.com", role="candidate")
    job = _create_job(client, owner)
    assert client.post(f"/api/applications/{job['id']}", json={}, headers=candidate).status_code == 201

    r = client.delete(f"/api/jobs/{job['id']}", headers=owner)
    assert r.status_code == 200
    assert r.json() == {"message": "Job deleted successfully"}

    assert client.get(f"/api/jobs/{job['id']}").status_code == 404
    assert db_session.query(Application).filter(Application.job_id == job["id"]).count() == 0


def test_list_jobs_newest_first_with_owner_and_application_count(client) -> None:
    owner = _auth_headers(client, email="owner@example.com")
    candidate = _auth_headers(client, email="cand@example.com", role="candidate")
    first = _create_job(client, owner, title="First Job")
    second = _create_job(client, owner, title="Second Job")
    client.post(f"/api/applications/{first['id']}", json={"coverNote": "hi"}, headers=candidate)

    r = client.get("/api/jobs")
    assert r.status_code == 200
    body = r.json()
    assert [job["id"] for job in body["jobs"]] == [second["id"], first["id"]]
    assert body["jobs"][0]["applicationCount"] == 0
    assert body["jobs"][1]["applicationCount"] == 1
    assert body["jobs"][1]["user"] == {"name": "Poster", "email": "owner@example.com"}
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 2, "totalPages": 1}


def test_list_jobs_filters(client) -> None:
    owner = _auth_headers(client, email="owner@example.com")
    _create_job(client, owner, title="Python Developer", company="Snake Works", location="London", type="Contract")
    _create_job(client, owner, title="Data Analyst", company="PyData Ltd", location="Remote - EU", type="Remote")
    _create_job(client, owner, title="Office Manager", company="Paper Co", location="london", type="Full-time")

    def titles(**params) -> set[str]:
        r = client.get("/api/jobs", params=params)
        assert r.status_code == 200
        return {job["title"] for job in r.json()["jobs"]}

    # search matches title OR company, case-insensitively
    assert titles(search="py") == {"Python Developer", "Data Analyst"}
    assert titles(search="PAPER") == {"Office Manager"}
    assert titles(type="Contract") == {"Python Developer"}
    assert titles(type="contract") == set()
    assert titles(location="LONDON") == {"Python Developer", "Office Manager"}
    assert titles(location="london", type="Full-time") == {"Office Manager"}


def test_search_treats_like_wildcards_literally(client) -> None:
    owner = _auth_headers(client, email="owner@example.com")
    _create_job(client, owner, title="100% Remote Role")
    _create_job(client, owner, title="Plain Role")

    r = client.get("/api/jobs", params={"search": "%"})
    assert [job["title"] for job in r.json()["jobs"]] == ["100% Remote Role"]


def test_pagination_metadata_and_out_of_range_page(client) -> None:
    owner = _auth_headers(client, email="owner@example.com")
    for i in range(5):
        _create_job(client, owner, title=f"Job {i:02d}")

    r = client.get("/api/jobs", params={"page": 2, "limit": 2})
    body = r.json()
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 5, "totalPages": math.ceil(5 / 2)}
    assert [job["title"] for job in body["jobs"]] == ["Job 02", "Job 01"]

    r = client.get("/api/jobs", params={"page": 9, "limit": 2})
    body = r.json()
    assert body["jobs"] == []
    assert body["pagination"]["total"] == 5
    assert body["pagination"]["totalPages"] == 3


def test_pagination_defaults_for_missing_or_non_numeric_values(client) -> None:
    r = client.get("/api/jobs", params={"page": "abc", "limit": "lots"})
    assert r.status_code == 200
    assert r.json()["pagination"] == {"page": 1, "limit": 10, "total": 0, "totalPages": 0}

    r = client.get("/api/jobs", params={"page": "0", "limit": "-5"})
    assert r.json()["pagination"]["page"] == 1
    assert r.json()["pagination"]["limit"] == 10


def test_non_integer_job_id_is_404(client) -> None:
    headers = _auth_headers(client, email="owner@example.com")

    r = client.get("/api/jobs/not-a-number")
    assert r.status_code == 404
    assert r.json() == {"error": "Job not found"}

    assert client.patch("/api/jobs/abc", json={"title": "Nope"}, headers=headers).status_code == 404
    assert client.delete("/api/jobs/1.5", headers=headers).status_code == 404


def test_huge_job_id_is_404(client) -> None:
    headers = _auth_headers(client, email="owner@example.com")
    huge = "99999999999999999999"

    r = client.get(f"/api/jobs/{huge}")
    assert r.status_code == 404
    assert r.json() == {"error": "Job not found"}

    assert client.patch(f"/api/jobs/{huge}", json={"title": "Nope"}, headers=headers).status_code == 404
    assert client.delete(f"/api/jobs/{huge}", headers=headers).status_code == 404


def test_pagination_clamps_huge_values(client) -> None:
    owner = _auth_headers(client, email="owner@example.com")
    _create_job(client, owner)

    r = client.get("/api/jobs", params={"limit": "99999999999999999999"})
    assert r.status_code == 200
    body = r.json()
    assert body["pagination"] == {"page": 1, "limit": 2**31 - 1, "total": 1, "totalPages": 1}
    assert len(body["jobs"]) == 1

    r = client.get("/api/jobs", params={"page": "9999999999999", "limit": "9999999"})
    assert r.status_code == 200
    body = r.json()
    assert body["jobs"] == []
    assert body["pagination"] == {"page": 2**31 - 1, "limit": 9999999, "total": 1, "totalPages": 1}
