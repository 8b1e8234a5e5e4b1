"""
Integration tests for the candidate API over a throwaway SQLite database.

Run: pytest tests/integration/test_candidate_api.py -v
"""

import json

from sqlalchemy.exc import OperationalError

from repositories.candidate_repository import CandidateRepository

PDF = "application/pdf"


def _post(client, payload, files=()):
    data = {"candidateData": payload if isinstance(payload, str) else json.dumps(payload)}
    return client.post(
        "/api/candidates",
        data=data,
        files=[("documents", f) for f in files] or None,
    )


def _pdf(name="cv.pdf", size=1024):
    return (name, b"%PDF-1.4" + b"0" * (size - 8), PDF)


def _stored(upload_dir):
    return sorted(path.name for path in upload_dir.iterdir())


class TestCreateCandidate:

    def test_creates_candidate_with_document(self, client, upload_dir, payload_factory):
        response = _post(client, payload_factory(), [_pdf(size=2 * 1024 * 1024)])

        assert response.status_code == 201
        body = response.json()
        assert body["firstName"] == "Ana"
        assert body["email"] == "ana@example.com"
        assert len(body["educations"]) == 1
        assert body["educations"][0]["fieldOfStudy"] == "CS"
        assert body["educations"][0]["endDate"] == "2022-06-01"
        assert body["experiences"] == []

        document = body["documents"][0]
        assert document["originalName"] == "cv.pdf"
        assert document["fileType"] == PDF
        assert document["fileSize"] == 2 * 1024 * 1024
        assert document["documentType"] == "resume"
        assert document["fileName"].startswith("resume-")
        assert document["url"] == f"/uploads/{document['fileName']}"
        assert _stored(upload_dir) == [document["fileName"]]

    def test_creates_candidate_without_documents(self, client, upload_dir, payload_factory):
        response = _post(client, payload_factory(email="nodocs@example.com"))

        assert response.status_code == 201
        assert response.json()["documents"] == []
        assert _stored(upload_dir) == []

    def test_validation_failure_removes_uploads(self, client, upload_dir, payload_factory):
        payload = payload_factory()
        payload["educations"][0]["endDate"] = "2017-06-01"

        response = _post(client, payload, [_pdf()])

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation failed"
        assert "education[0].endDate" in body["errors"]
        assert _stored(upload_dir) == []
        assert client.get("/api/candidates").json()["total"] == 0

    def test_all_violations_reported(self, client, payload_factory):
        response = _post(client, payload_factory(firstName="", email="invalid-email", phone="abc"))

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"firstName", "email", "phone"}

    def test_malformed_candidate_data(self, client, upload_dir):
        response = _post(client, "{not json", [_pdf()])

        assert response.status_code == 400
        assert response.json()["errors"] == {"candidateData": ["Invalid candidate data format"]}
        assert _stored(upload_dir) == []

    def test_duplicate_email_conflict(self, client, upload_dir, payload_factory):
        first = _post(client, payload_factory(), [_pdf("first.pdf")])
        assert first.status_code == 201

        second = _post(client, payload_factory(firstName="Jane", email="ANA@example.com"), [_pdf("second.pdf")])

        assert second.status_code == 409
        assert second.json()["detail"] == "A candidate with this email already exists"
        assert _stored(upload_dir) == [first.json()["documents"][0]["fileName"]]
        assert client.get("/api/candidates").json()["total"] == 1

    def test_rejects_disallowed_file_type(self, client, upload_dir, payload_factory):
        response = _post(client, payload_factory(), [("photo.png", b"\x89PNG", "image/png")])

        assert response.status_code == 400
        assert "Invalid file type" in response.json()["detail"]
        assert _stored(upload_dir) == []

    def test_rejects_more_than_three_files(self, client, upload_dir, payload_factory):
        files = [_pdf(f"cv{i}.pdf") for i in range(4)]

        response = _post(client, payload_factory(), files)

        assert response.status_code == 400
        assert "Maximum is 3 files" in response.json()["detail"]
        assert _stored(upload_dir) == []

    def test_storage_failure_is_generic_500(self, client, upload_dir, payload_factory, monkeypatch):
        def broken_write(self, candidate):
            raise OperationalError("INSERT INTO candidates", {}, Exception("connection refused at 10.0.0.5"))

        monkeypatch.setattr(CandidateRepository, "create_aggregate", broken_write)

        response = _post(client, payload_factory(), [_pdf()])

        assert response.status_code == 500
        assert response.json() == {"detail": "An error occurred while creating the candidate"}
        assert _stored(upload_dir) == []


class TestReadPath:

    def _seed(self, client, payload_factory, count):
        for i in range(count):
            payload = payload_factory(
                email=f"candidate{i}@example.com",
                educations=[{
                    "institution": "Harvard University" if i % 2 else "harvard university",
                    "degree": "BSc", "fieldOfStudy": "CS",
                    "startDate": "2015-09-01", "endDate": "2019-06-01", "current": False,
                }],
                experiences=[{
                    "company": f"Google {i % 3}", "position": "Engineer",
                    "startDate": "2019-07-01", "current": True,
                }],
            )
            assert _post(client, payload).status_code == 201

    def test_list_paginates(self, client, payload_factory):
        self._seed(client, payload_factory, 5)

        body = client.get("/api/candidates", params={"page": 2, "limit": 2}).json()

        assert body["total"] == 5
        assert body["page"] == 2
        assert body["limit"] == 2
        assert body["totalPages"] == 3
        assert len(body["items"]) == 2
        assert len(body["items"][0]["educations"]) == 1

    def test_list_defaults_and_newest_first(self, client, payload_factory):
        self._seed(client, payload_factory, 2)

        body = client.get("/api/candidates").json()

        assert body["page"] == 1
        assert body["limit"] == 10
        assert [item["email"] for item in body["items"]] == ["candidate1@example.com", "candidate0@example.com"]

    def test_list_empty(self, client):
        body = client.get("/api/candidates").json()
        assert body == {"items": [], "total": 0, "page": 1, "limit": 10, "totalPages": 0}

    def test_list_rejects_bad_paging(self, client):
        assert client.get("/api/candidates", params={"page": 0}).status_code == 422
        assert client.get("/api/candidates", params={"limit": 101}).status_code == 422

    def test_get_by_id(self, client, payload_factory):
        created = _post(client, payload_factory(), [_pdf()]).json()

        response = client.get(f"/api/candidates/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_id(self, client):
        response = client.get("/api/candidates/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Candidate not found"

    def test_institution_suggestions_are_distinct(self, client, payload_factory):
        self._seed(client, payload_factory, 4)

        response = client.get("/api/candidates/autocomplete/institutions", params={"query": "HARV"})

        assert response.status_code == 200
        assert sorted(response.json()) == ["Harvard University", "harvard university"]

    def test_company_suggestions(self, client, payload_factory):
        self._seed(client, payload_factory, 4)

        response = client.get("/api/candidates/autocomplete/companies", params={"query": "goo"})

        assert response.json() == ["Google 0", "Google 1", "Google 2"]

    def test_suggestions_capped_at_ten(self, client, payload_factory):
        for i in range(12):
            payload = payload_factory(
                email=f"c{i}@example.com",
                experiences=[{"company": f"Company {i:02d}", "position": "Engineer",
                              "startDate": "2019-07-01", "current": True}],
            )
            assert _post(client, payload).status_code == 201

        response = client.get("/api/candidates/autocomplete/companies", params={"query": "company"})

        assert len(response.json()) == 10

    def test_suggestions_require_query(self, client):
        assert client.get("/api/candidates/autocomplete/companies").status_code == 400
        response = client.get("/api/candidates/autocomplete/institutions", params={"query": "  "})
        assert response.status_code == 400
        assert response.json()["detail"] == "Query parameter is required"


class TestServiceEndpoints:

    def test_ping(self, client):
        assert client.get("/ping").json() == {"message": "pong"}

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
