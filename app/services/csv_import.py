"""
CSV parsing, validation and batched upload for bulk job/company import.

Used in-process by the `/jobs/bulk/csv` and `/companies/bulk/csv` endpoints
and by the `import_csv.py` command-line importer, which submits batches to a
running API over HTTP.

Flow:
1. parse_jobs_csv / parse_companies_csv turn CSV text into ParsedRow objects,
   each carrying its bulk-endpoint payload and its validation errors
2. Invalid rows are reported and never submitted
3. upload_in_batches submits the valid payloads batch by batch and merges
   every batch's outcome into one report
"""

import csv
import io
import logging
from typing import Any, Callable, Dict, List, Optional
from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, BaseModel, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10

SALARY_FREQUENCIES = ("monthly", "annually")

# Normalized CSV header -> payload field
JOB_HEADER_MAP = {
    "title": "title",
    "description": "description",
    "company_name": "company_name",
    "company": "company_name",
    "job_type_code": "job_type_code",
    "type_code": "job_type_code",
    "industry_code": "industry_code",
    "location": "location",
    "country": "country",
    "country_code": "country",
    "salary_min": "salary_min",
    "salary_max": "salary_max",
    "salary_frequency": "salary_frequency",
    "currency_code": "currency_code",
    "currency": "currency_code",
    "apply_url": "apply_url",
}

COMPANY_HEADER_MAP = {
    "name": "name",
    "short_description": "short_description",
    "long_description": "long_description",
    "website_url": "website_url",
    "logo_url": "logo_url",
    "location": "location",
    "country": "country",
}

# Dotted company columns ("metadata.industry") fold into these JSON objects
COMPANY_NESTED_FIELDS = ("metadata", "contact")

JOB_REQUIRED_FIELDS = {
    "title": "Job title is required",
    "description": "Description is required",
    "company_name": "Company name is required",
    "job_type_code": "Job type is required",
    "industry_code": "Industry is required",
    "location": "Location is required",
    "country": "Country is required",
    "currency_code": "Currency is required",
    "apply_url": "Apply URL is required",
}

COMPANY_REQUIRED_FIELDS = {
    "name": "Company name is required",
    "short_description": "Short description is required",
    "website_url": "Website URL is required",
    "location": "Location is required",
    "country": "Country is required",
}

JOB_TEMPLATE_HEADERS = [
    "title", "description", "company_name", "job_type_code", "industry_code", "location", "country",
    "salary_min", "salary_max", "salary_frequency", "currency_code", "apply_url",
]
JOB_TEMPLATE_SAMPLE = [
    "Senior Backend Engineer", "Build and run our APIs", "Acme Corp", "full-time", "it", "Dubai", "AE",
    "25000", "35000", "monthly", "AED", "https://acme.com/careers/backend",
]

COMPANY_TEMPLATE_HEADERS = [
    "name", "short_description", "long_description", "website_url", "logo_url", "location", "country",
    "metadata.address", "metadata.industry", "metadata.email", "metadata.phone", "metadata.linkedin",
    "contact.first_name", "contact.last_name", "contact.email", "contact.linkedin",
]
COMPANY_TEMPLATE_SAMPLE = [
    "Acme Corp", "A technology company", "A longer description", "https://acme.com",
    "https://acme.com/logo.png", "Dubai", "AE", "Business Bay", "Technology", "hello@acme.com",
    "+971400000000", "https://linkedin.com/company/acme", "Jane", "Doe", "jane@acme.com",
    "https://linkedin.com/in/janedoe",
]

_url_adapter = TypeAdapter(AnyUrl)


class ParsedRow(BaseModel):
    """One CSV data row: its bulk payload plus validation errors."""
    row: int
    label: str
    payload: Dict[str, Any]
    errors: List[str] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors


def is_valid_url(value: str) -> bool:
    """Absolute URL with a scheme (https://..., mailto:...)."""
    try:
        _url_adapter.validate_python(value)
        return True
    except ValidationError:
        return False


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def normalize_header(header: str) -> str:
    return header.strip().lower().replace('"', "").replace("'", "")


def _read_rows(text: str) -> List[Dict[str, str]]:
    """
    Split CSV text into {normalized header: value} dicts.

    Blank lines are skipped; fewer than two non-blank lines yields nothing.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        return []

    reader = csv.reader(lines)
    headers = [normalize_header(h) for h in next(reader)]

    records = []
    for values in reader:
        if not any(v.strip() for v in values):
            continue
        records.append({
            header: values[index].strip()
            for index, header in enumerate(headers)
            if index < len(values)
        })
    return records


def _to_number(value: Optional[str]) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def validate_job(fields: Dict[str, str]) -> List[str]:
    """Validation messages for one job row (empty when valid)."""
    errors = [message for field, message in JOB_REQUIRED_FIELDS.items() if not fields.get(field)]

    apply_url = fields.get("apply_url")
    if apply_url and not is_valid_url(apply_url):
        errors.append("Invalid apply URL")

    if fields.get("salary_min") and _to_number(fields["salary_min"]) is None:
        errors.append("Invalid minimum salary (must be a number)")
    if fields.get("salary_max") and _to_number(fields["salary_max"]) is None:
        errors.append("Invalid maximum salary (must be a number)")

    frequency = fields.get("salary_frequency")
    if frequency and frequency.lower() not in SALARY_FREQUENCIES:
        errors.append('Invalid salary frequency (must be "monthly" or "annually")')

    return errors


def validate_company(fields: Dict[str, str], metadata: Dict[str, str], contact: Dict[str, str]) -> List[str]:
    """Validation messages for one company row (empty when valid)."""
    errors = [message for field, message in COMPANY_REQUIRED_FIELDS.items() if not fields.get(field)]

    if fields.get("website_url") and not is_valid_url(fields["website_url"]):
        errors.append("Invalid website URL")
    if fields.get("logo_url") and not is_valid_url(fields["logo_url"]):
        errors.append("Invalid logo URL")
    if metadata.get("linkedin") and not is_valid_url(metadata["linkedin"]):
        errors.append("Invalid company LinkedIn URL")
    if contact.get("email") and not is_valid_email(contact["email"]):
        errors.append("Invalid contact email")

    return errors


def parse_jobs_csv(text: str) -> List[ParsedRow]:
    """
    Parse and validate a jobs CSV.

    Returns:
        One ParsedRow per data row; payloads match the `/jobs/bulk` row schema
    """
    parsed = []
    for index, record in enumerate(_read_rows(text), start=1):
        fields = {}
        for header, value in record.items():
            field = JOB_HEADER_MAP.get(header)
            if field and value:
                fields[field] = value

        payload = {
            "title": fields.get("title"),
            "description": fields.get("description"),
            "company_name": fields.get("company_name"),
            "job_type_code": fields.get("job_type_code"),
            "industry_code": fields.get("industry_code"),
            "location": fields.get("location"),
            "country": fields.get("country"),
            "salary_min": _to_number(fields.get("salary_min")),
            "salary_max": _to_number(fields.get("salary_max")),
            "salary_frequency": fields["salary_frequency"].lower() if fields.get("salary_frequency") else None,
            "currency_code": fields.get("currency_code"),
            "apply_url": fields.get("apply_url"),
        }

        parsed.append(ParsedRow(
            row=index,
            label=fields.get("title", ""),
            payload=payload,
            errors=validate_job(fields),
        ))

    return parsed


def parse_companies_csv(text: str) -> List[ParsedRow]:
    """
    Parse and validate a companies CSV.

    `metadata.<key>` and `contact.<key>` columns become the `metadata` and
    `contact` objects of the payload.
    """
    parsed = []
    for index, record in enumerate(_read_rows(text), start=1):
        fields = {}
        nested = {name: {} for name in COMPANY_NESTED_FIELDS}
        has_nested = {name: False for name in COMPANY_NESTED_FIELDS}

        for header, value in record.items():
            prefix, _, key = header.partition(".")
            if key and prefix in nested:
                has_nested[prefix] = True
                nested[prefix][key] = value or None
                continue

            field = COMPANY_HEADER_MAP.get(header)
            if field and value:
                fields[field] = value

        metadata = {k: v for k, v in nested["metadata"].items() if v}
        contact = {k: v for k, v in nested["contact"].items() if v}

        payload = {field: fields.get(field) for field in COMPANY_HEADER_MAP.values()}
        payload["metadata"] = nested["metadata"] if has_nested["metadata"] else None
        payload["contact"] = nested["contact"] if has_nested["contact"] else None

        parsed.append(ParsedRow(
            row=index,
            label=fields.get("name", ""),
            payload=payload,
            errors=validate_company(fields, metadata, contact),
        ))

    return parsed


def template_csv(headers: List[str], sample: List[str]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    writer.writerow(sample)
    return buffer.getvalue()


def upload_in_batches(
    rows: List[ParsedRow],
    submit: Callable[[List[Dict[str, Any]]], Dict[str, Any]],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> Dict[str, Any]:
    """
    Submit valid rows sequentially, `batch_size` payloads at a time.

    `submit` receives the payload list of one batch and returns the bulk
    endpoint response ({"success", "created", "errors"}). A batch whose
    submission raises, or whose response is not successful, counts every one
    of its rows as failed; the next batch still runs. Row numbers in the
    report are absolute positions among the submitted rows.

    Returns:
        {"success": <rows created>, "failed": <rows failed>, "errors": [...]}

    Raises:
        ValueError: If batch_size is not positive
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    report = {"success": 0, "failed": 0, "errors": []}
    valid_rows = [row for row in rows if row.is_valid]

    for start in range(0, len(valid_rows), batch_size):
        batch = valid_rows[start:start + batch_size]

        try:
            response = submit([row.payload for row in batch])
        except Exception as e:
            logger.error(f"Batch starting at row {start + 1} failed: {e}")
            response = {"success": False, "error": str(e) or type(e).__name__}

        if response.get("success"):
            batch_errors = response.get("errors") or []
            report["success"] += response.get("created", len(batch) - len(batch_errors))
            report["failed"] += len(batch_errors)
            for error in batch_errors:
                report["errors"].append({
                    "row": start + error["row"],
                    "label": error.get("label", ""),
                    "error": error.get("error", "Unknown error"),
                })
        else:
            message = str(response.get("error") or response.get("detail") or "Unknown error")
            report["failed"] += len(batch)
            for offset, row in enumerate(batch, start=1):
                report["errors"].append({"row": start + offset, "label": row.label, "error": message})

    logger.info(f"Batched upload finished: {report['success']} created, {report['failed']} failed")
    return report
