"""Experience and education sub-list tests."""
import uuid

from helpers import auth_headers, error_messages, register_user

EXPERIENCE = {
    "title": "Backend Developer",
    "company": "Acme",
    "location": "Lisbon",
    "from": "2019-02-01",
    "to": "2021-06-30",
    "current": False,
    "description": "APIs",
}

EDUCATION = {
    "school": "State University",
    "degree": "BSc",
    "fieldofstudy": "Computer Science",
    "from": "2014-09-01",
    "to": "2018-07-01",
}


class TestExperience:
    def test_add_requires_profile(self, client, headers):
        response = client.put("/api/profile/experience", json=EXPERIENCE, headers=headers)

        assert response.status_code == 400
        assert response.json() == {"msg": "There is no profile for this user"}

    def test_add_returns_profile_with_entry(self, client, headers, profile):
        response = client.put("/api/profile/experience", json=EXPERIENCE, headers=headers)

        assert response.status_code == 200
        entries = response.json()["experience"]
        assert len(entries) == 1
        assert entries[0]["title"] == "Backend Developer"
        assert entries[0]["from"] == "2019-02-01"
        assert entries[0]["to"] == "2021-06-30"
        assert entries[0]["experience_id"]

    def test_newest_entry_comes_first(self, client, headers, profile):
        client.put("/api/profile/experience", json=EXPERIENCE, headers=headers)
        current_job = {"title": "Lead", "company": "Initech", "from": "2021-07-01", "current": True}
        response = client.put("/api/profile/experience", json=current_job, headers=headers)

        titles = [entry["title"] for entry in response.json()["experience"]]
        assert titles == ["Lead", "Backend Developer"]

        me = client.get("/api/profile/me", headers=headers).json()
        assert [entry["title"] for entry in me["experience"]] == ["Lead", "Backend Developer"]

    def test_required_fields(self, client, headers, profile):
        response = client.put("/api/profile/experience", json={"location": "Nowhere"}, headers=headers)

        assert response.status_code == 400
        assert sorted(error_messages(response)) == [
            "company is required",
            "from is required",
            "title is required",
        ]

    def test_current_entry_cannot_have_end_date(self, client, headers, profile):
        body = dict(EXPERIENCE, current=True)

        response = client.put("/api/profile/experience", json=body, headers=headers)

        assert response.status_code == 400
        assert error_messages(response) == ["A current entry cannot have a to date"]

    def test_remove_entry(self, client, headers, profile):
        client.put("/api/profile/experience", json=EXPERIENCE, headers=headers)
        added = client.put(
            "/api/profile/experience", json=dict(EXPERIENCE, title="Second"), headers=headers
        ).json()["experience"]

        response = client.delete(f"/api/profile/experience/{added[0]['experience_id']}", headers=headers)

        assert response.status_code == 200
        assert [entry["title"] for entry in response.json()["experience"]] == ["Backend Developer"]

    def test_remove_unknown_id_is_a_no_op(self, client, headers, profile):
        client.put("/api/profile/experience", json=EXPERIENCE, headers=headers)

        unknown = client.delete(f"/api/profile/experience/{uuid.uuid4()}", headers=headers)
        malformed = client.delete("/api/profile/experience/not-an-id", headers=headers)

        for response in (unknown, malformed):
            assert response.status_code == 200
            assert len(response.json()["experience"]) == 1

    def test_cannot_remove_another_users_entry(self, client, headers, profile):
        other_headers = auth_headers(register_user(client, name="John", email="john@example.com"))
        client.post("/api/profile", json={"status": "Dev", "skills": "go"}, headers=other_headers)
        other_entry = client.put(
            "/api/profile/experience", json=EXPERIENCE, headers=other_headers
        ).json()["experience"][0]

        client.delete(f"/api/profile/experience/{other_entry['experience_id']}", headers=headers)

        other = client.get("/api/profile/me", headers=other_headers).json()
        assert len(other["experience"]) == 1


class TestEducation:
    def test_add_returns_profile_with_entry(self, client, headers, profile):
        response = client.put("/api/profile/education", json=EDUCATION, headers=headers)

        assert response.status_code == 200
        entry = response.json()["education"][0]
        assert entry["school"] == "State University"
        assert entry["fieldofstudy"] == "Computer Science"
        assert entry["from"] == "2014-09-01"

    def test_newest_entry_comes_first(self, client, headers, profile):
        client.put("/api/profile/education", json=EDUCATION, headers=headers)
        response = client.put(
            "/api/profile/education",
            json=dict(EDUCATION, degree="MSc", **{"from": "2018-09-01", "to": None, "current": True}),
            headers=headers
        )

        assert [entry["degree"] for entry in response.json()["education"]] == ["MSc", "BSc"]

    def test_end_before_start_is_rejected_without_changes(self, client, headers, profile):
        body = dict(EDUCATION, **{"from": "2019-01-01", "to": "2018-01-01"})

        response = client.put("/api/profile/education", json=body, headers=headers)

        assert response.status_code == 400
        assert error_messages(response) == ["To date must not be earlier than from date"]
        me = client.get("/api/profile/me", headers=headers).json()
        assert me["education"] == []

    def test_required_fields(self, client, headers, profile):
        response = client.put(
            "/api/profile/education",
            json={"school": "", "degree": "BSc", "from": "2014-09-01"},
            headers=headers
        )

        assert response.status_code == 400
        errors = {error["param"]: error["msg"] for error in response.json()["errors"]}
        assert errors["school"] == "School is required"
        assert errors["fieldofstudy"] == "fieldofstudy is required"

    def test_remove_entry_and_unknown_id(self, client, headers, profile):
        entry = client.put("/api/profile/education", json=EDUCATION, headers=headers).json()["education"][0]

        unchanged = client.delete(f"/api/profile/education/{uuid.uuid4()}", headers=headers)
        removed = client.delete(f"/api/profile/education/{entry['education_id']}", headers=headers)

        assert len(unchanged.json()["education"]) == 1
        assert removed.status_code == 200
        assert removed.json()["education"] == []

    def test_remove_requires_profile(self, client, headers):
        response = client.delete(f"/api/profile/education/{uuid.uuid4()}", headers=headers)

        assert response.status_code == 400
        assert response.json() == {"msg": "There is no profile for this user"}
