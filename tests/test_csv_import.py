"""
Unit tests for CSV parsing, validation and batched upload.
"""

import pytest

from app.services.csv_import import (
    ParsedRow,
    is_valid_email,
    is_valid_url,
    normalize_header,
    parse_companies_csv,
    parse_jobs_csv,
    template_csv,
    upload_in_batches,
)

JOB_HEADER = "title,description,company_name,job_type_code,industry_code,location,country,currency_code,apply_url"
JOB_ROW = "Engineer,Build things,Acme Corp,full-time,it,Dubai,AE,AED,https://acme.com/apply"


def _rows(count, invalid_at=()):
    return [
        ParsedRow(
            row=i,
            label=f"Job {i}",
            payload={"title": f"Job {i}"},
            errors=["Job title is required"] if i in invalid_at else [],
        )
        for i in range(1, count + 1)
    ]


class TestValidators:

    @pytest.mark.parametrize("value,expected", [
        ("https://acme.com/careers", True),
        ("http://localhost:8000", True),
        ("acme.com", False),
        ("not a url", False),
    ])
    def test_is_valid_url(self, value, expected):
        assert is_valid_url(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("jane@acme.com", True),
        ("jane@", False),
        ("jane.acme.com", False),
    ])
    def test_is_valid_email(self, value, expected):
        assert is_valid_email(value) is expected

    def test_normalize_header(self):
        assert normalize_header('  "Title" ') == "title"
        assert normalize_header("'Company_Name'") == "company_name"


class TestParseJobs:

    def test_valid_row(self):
        rows = parse_jobs_csv(f"{JOB_HEADER},salary_min,salary_frequency\n{JOB_ROW},25000,Monthly\n")

        assert len(rows) == 1
        row = rows[0]
        assert row.is_valid
        assert row.row == 1
        assert row.label == "Engineer"
        assert row.payload["company_name"] == "Acme Corp"
        assert row.payload["salary_min"] == 25000.0
        assert row.payload["salary_max"] is None
        assert row.payload["salary_frequency"] == "monthly"

    def test_header_aliases(self):
        text = (
            "Title,Description,Company,Type_Code,Industry_Code,Location,Country_Code,Currency,Apply_URL\n"
            "Engineer,Build things,Acme Corp,full-time,it,Dubai,AE,AED,https://acme.com/apply\n"
        )

        payload = parse_jobs_csv(text)[0].payload

        assert payload["company_name"] == "Acme Corp"
        assert payload["job_type_code"] == "full-time"
        assert payload["country"] == "AE"
        assert payload["currency_code"] == "AED"

    def test_blank_lines_skipped(self):
        rows = parse_jobs_csv(f"\n{JOB_HEADER}\n\n{JOB_ROW}\n   \n{JOB_ROW}\n")

        assert [row.row for row in rows] == [1, 2]

    @pytest.mark.parametrize("text", ["", JOB_HEADER, f"\n{JOB_HEADER}\n\n"])
    def test_no_data_rows(self, text):
        assert parse_jobs_csv(text) == []

    def test_quoted_values_with_commas(self):
        rows = parse_jobs_csv(f'{JOB_HEADER}\nEngineer,"Build, ship, run",Acme Corp,full-time,it,Dubai,AE,AED,https://acme.com\n')

        assert rows[0].payload["description"] == "Build, ship, run"

    def test_missing_required_fields(self):
        rows = parse_jobs_csv("title,location\n,Dubai\n")

        errors = rows[0].errors
        assert "Job title is required" in errors
        assert "Company name is required" in errors
        assert "Location is required" not in errors
        assert not rows[0].is_valid

    def test_invalid_values(self):
        text = (
            f"{JOB_HEADER},salary_min,salary_max,salary_frequency\n"
            "Engineer,Build things,Acme Corp,full-time,it,Dubai,AE,AED,acme.com/apply,lots,10k,weekly\n"
        )

        assert parse_jobs_csv(text)[0].errors == [
            "Invalid apply URL",
            "Invalid minimum salary (must be a number)",
            "Invalid maximum salary (must be a number)",
            'Invalid salary frequency (must be "monthly" or "annually")',
        ]


class TestParseCompanies:

    def test_dotted_columns_build_objects(self):
        text = (
            "name,short_description,website_url,location,country,metadata.industry,metadata.linkedin,contact.email\n"
            "Acme Corp,Software,https://acme.com,Dubai,AE,Technology,,jane@acme.com\n"
        )

        row = parse_companies_csv(text)[0]

        assert row.is_valid
        assert row.label == "Acme Corp"
        assert row.payload["metadata"] == {"industry": "Technology", "linkedin": None}
        assert row.payload["contact"] == {"email": "jane@acme.com"}

    def test_without_dotted_columns(self):
        row = parse_companies_csv("name,short_description,website_url,location,country\nAcme,Software,https://acme.com,Dubai,AE\n")[0]

        assert row.payload["metadata"] is None
        assert row.payload["contact"] is None

    def test_invalid_company_fields(self):
        text = (
            "name,short_description,website_url,logo_url,location,country,metadata.linkedin,contact.email\n"
            "Acme,Software,acme,logo.png,Dubai,AE,linkedin,jane-at-acme\n"
        )

        assert parse_companies_csv(text)[0].errors == [
            "Invalid website URL",
            "Invalid logo URL",
            "Invalid company LinkedIn URL",
            "Invalid contact email",
        ]

    def test_missing_name(self):
        row = parse_companies_csv("name,short_description\n,Software\n")[0]

        assert row.label == ""
        assert "Company name is required" in row.errors


class TestUploadInBatches:

    def test_all_batches_succeed(self):
        batches = []

        def submit(payloads):
            batches.append(payloads)
            return {"success": True, "created": len(payloads), "errors": []}

        report = upload_in_batches(_rows(25), submit, batch_size=10)

        assert [len(b) for b in batches] == [10, 10, 5]
        assert report == {"success": 25, "failed": 0, "errors": []}

    def test_invalid_rows_are_not_submitted(self):
        submitted = []

        def submit(payloads):
            submitted.extend(payloads)
            return {"success": True, "created": len(payloads), "errors": []}

        report = upload_in_batches(_rows(5, invalid_at={2, 4}), submit)

        assert [p["title"] for p in submitted] == ["Job 1", "Job 3", "Job 5"]
        assert report["success"] == 3

    def test_failed_batch_does_not_stop_the_rest(self):
        calls = []

        def submit(payloads):
            calls.append(payloads)
            if len(calls) == 2:
                raise ConnectionError("connection reset")
            return {"success": True, "created": len(payloads), "errors": []}

        report = upload_in_batches(_rows(7), submit, batch_size=3)

        assert len(calls) == 3
        assert report["success"] == 4
        assert report["failed"] == 3
        assert [e["row"] for e in report["errors"]] == [4, 5, 6]
        assert report["errors"][0] == {"row": 4, "label": "Job 4", "error": "connection reset"}

    def test_unsuccessful_response_fails_whole_batch(self):
        def submit(payloads):
            return {"success": False, "detail": "Not authenticated"}

        report = upload_in_batches(_rows(2), submit)

        assert report["failed"] == 2
        assert {e["error"] for e in report["errors"]} == {"Not authenticated"}

    def test_row_errors_are_made_absolute(self):
        def submit(payloads):
            return {
                "success": True,
                "created": len(payloads) - 1,
                "errors": [{"row": 2, "label": payloads[1]["title"], "error": "Unknown company: Ghost"}],
            }

        report = upload_in_batches(_rows(6), submit, batch_size=3)

        assert report["success"] == 4
        assert report["failed"] == 2
        assert report["errors"] == [
            {"row": 2, "label": "Job 2", "error": "Unknown company: Ghost"},
            {"row": 5, "label": "Job 5", "error": "Unknown company: Ghost"},
        ]

    def test_nothing_to_upload(self):
        def submit(payloads):
            raise AssertionError("should not be called")

        assert upload_in_batches([], submit) == {"success": 0, "failed": 0, "errors": []}


def test_template_csv():
    content = template_csv(["title", "description"], ["Engineer", "Builds, ships"])

    assert content == 'title,description\nEngineer,"Builds, ships"\n'


def test_upload_rejects_non_positive_batch_size():
    with pytest.raises(ValueError):
        upload_in_batches(_rows(3), lambda payloads: {"success": True}, batch_size=0)
