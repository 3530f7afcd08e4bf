from fastapi.testclient import TestClient

from app.main import app
from app.core.resume_extractor import extract_basic_data
from app.core.schemas import ExtractedData

client = TestClient(app)

SAMPLE_RESUME = """
John Doe
Software Engineer
Email: john.doe@example.com | (555) 123-4567 | Austin, TX

SUMMARY
Backend developer with 6+ years of experience in Python, PostgreSQL and AWS.

EXPERIENCE
Senior Software Engineer at Initech
Software Engineer @ Globex

EDUCATION
Bachelor of Science in Computer Science, University of Texas
"""


def test_extract_basic_data_full_resume():
    data = extract_basic_data(SAMPLE_RESUME, reference_year=2024)

    assert data.candidate_name == "John Doe"
    assert data.skills == ["python", "postgresql", "aws"]
    assert data.total_years_experience == 6.0
    assert [e.degree for e in data.education] == ["Bachelor Computer Science"]
    assert data.contact_info.email == "john.doe@example.com"
    assert data.contact_info.phone == "(555) 123-4567"
    assert data.contact_info.location == "Austin, TX"
    assert [(w.title, w.company) for w in data.work_experience] == [
        ("Senior Software Engineer", "Initech"),
        ("Software Engineer", "Globex"),
    ]


def test_empty_text_yields_defaults():
    data = extract_basic_data("", reference_year=2024)
    assert data == ExtractedData()
    assert data.candidate_name == "Unknown"
    assert data.skills == []
    assert data.total_years_experience == 0.0
    assert data.education == []
    assert data.work_experience == []
    assert data.contact_info.model_dump(exclude_none=True) == {}


def test_deterministic_for_pinned_year():
    first = extract_basic_data(SAMPLE_RESUME, reference_year=2024).model_dump()
    second = extract_basic_data(SAMPLE_RESUME, reference_year=2024).model_dump()
    assert first == second


def test_parse_txt_upload():
    files = {"file": ("resume.txt", SAMPLE_RESUME.encode("utf-8"), "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200
    data = r.json()

    assert data["success"] is True
    assert data["file_path"] == "resume.txt"
    assert data["candidate_name"] == "John Doe"
    assert data["extracted_data"]["contact_info"]["email"] == "john.doe@example.com"
    assert "python" in data["extracted_data"]["skills"]
    assert "error" not in data


def test_parse_upload_by_extension():
    files = {"file": ("resume.md", b"Jane Smith\nPython developer", "application/octet-stream")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200
    assert r.json()["candidate_name"] == "Jane Smith"


def test_parse_upload_omits_missing_contact_fields():
    files = {"file": ("resume.txt", b"Jane Smith\nNo contact info here.", "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200
    assert r.json()["extracted_data"]["contact_info"] == {}


def test_parse_empty_upload():
    files = {"file": ("resume.txt", b"", "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 400


def test_parse_blank_upload():
    files = {"file": ("resume.txt", b"   \n\n  ", "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 422


def test_parse_unsupported_format():
    files = {"file": ("resume.pdf", b"%PDF-1.4 fake", "application/pdf")}
    r = client.post("/parse", files=files)
    assert r.status_code == 415


def test_parse_text_endpoint_with_reference_year():
    r = client.post("/parse/text", json={"text": "Jane Smith\nWorked 2015 to 2020.", "reference_year": 2024})
    assert r.status_code == 200
    data = r.json()
    assert data["extracted_data"]["total_years_experience"] == 9.0
    assert data["resume_text"] == "Jane Smith\nWorked 2015 to 2020."


def test_parse_text_endpoint_blank():
    r = client.post("/parse/text", json={"text": "  "})
    assert r.status_code == 422


def test_summary_endpoint():
    r = client.post("/summary", json={"text": SAMPLE_RESUME, "reference_year": 2024})
    assert r.status_code == 200
    data = r.json()
    assert data["candidate_name"] == "John Doe"
    assert data["summary"].splitlines() == [
        "Candidate: John Doe",
        "Experience: 6 years",
        "Skills: python, postgresql, aws",
        "Education: Bachelor Computer Science from Institution not specified",
    ]


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_parse_upload_too_large(monkeypatch):
    monkeypatch.setattr("app.api.routes.parse.MAX_UPLOAD_BYTES", 16)
    files = {"file": ("resume.txt", b"Jane Smith\nPython developer at Acme", "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 413


def test_parse_upload_at_size_limit(monkeypatch):
    body = b"Jane Smith\nPython"
    monkeypatch.setattr("app.api.routes.parse.MAX_UPLOAD_BYTES", len(body))
    files = {"file": ("resume.txt", body, "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200


def test_reference_year_from_environment(monkeypatch):
    monkeypatch.setenv("REFERENCE_YEAR", "2024")
    r = client.post("/parse/text", json={"text": "Jane Smith\nWorked 2015 to 2020."})
    assert r.status_code == 200
    assert r.json()["extracted_data"]["total_years_experience"] == 9.0

    files = {"file": ("resume.txt", b"Jane Smith\nWorked 2015 to 2020.", "text/plain")}
    r = client.post("/parse", files=files)
    assert r.json()["extracted_data"]["total_years_experience"] == 9.0


def test_request_reference_year_beats_environment(monkeypatch):
    monkeypatch.setenv("REFERENCE_YEAR", "2030")
    r = client.post("/parse/text", json={"text": "Jane Smith\nWorked 2015 to 2020.", "reference_year": 2024})
    assert r.json()["extracted_data"]["total_years_experience"] == 9.0


def test_invalid_reference_year_falls_back_to_current_year(monkeypatch):
    from datetime import date

    monkeypatch.setenv("REFERENCE_YEAR", "twenty24")
    text = "Jane Smith\nWorked 2015 to 2020."
    expected = float(max(date.today().year - 2015, 5))

    r = client.post("/parse/text", json={"text": text})
    assert r.status_code == 200
    assert r.json()["extracted_data"]["total_years_experience"] == expected

    r = client.post("/summary", json={"text": text})
    assert r.status_code == 200

    files = {"file": ("resume.txt", text.encode("utf-8"), "text/plain")}
    assert client.post("/parse", files=files).status_code == 200
