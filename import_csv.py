"""
Import jobs or companies from a CSV file into a running API.

Rows are parsed and validated locally; invalid rows are printed and skipped,
valid rows are posted to /jobs/bulk or /companies/bulk in batches.

Usage:
    python import_csv.py jobs jobs.csv --email admin@example.com --password '...'
    python import_csv.py companies companies.csv --token <access token> --api-url http://localhost:8000/api/v1
"""

import argparse
import os
import sys
from typing import Any, Dict, List

import httpx

# Add app to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.services.csv_import import DEFAULT_BATCH_SIZE, parse_companies_csv, parse_jobs_csv, upload_in_batches

PARSERS = {
    "jobs": parse_jobs_csv,
    "companies": parse_companies_csv,
}


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def login(client: httpx.Client, email: str, password: str) -> str:
    response = client.post("/admin/auth/login", json={"email": email, "password": password})
    response.raise_for_status()
    return response.json()["access_token"]


def make_submitter(client: httpx.Client, kind: str):
    """Return a callable posting one batch to the bulk endpoint."""
    def submit(payloads: List[Dict[str, Any]]) -> Dict[str, Any]:
        response = client.post(f"/{kind}/bulk", json={kind: payloads})
        if response.status_code >= 400:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            return {"success": False, "error": f"HTTP {response.status_code}: {detail}"}
        return response.json()

    return submit


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Bulk import jobs or companies from CSV")
    parser.add_argument("kind", choices=sorted(PARSERS), help="What the CSV contains")
    parser.add_argument("csv_file", help="Path to the CSV file")
    parser.add_argument("--api-url", default=os.getenv("JOB_BOARD_API_URL", "http://localhost:8000/api/v1"))
    parser.add_argument("--token", default=os.getenv("JOB_BOARD_TOKEN"), help="Admin bearer token")
    parser.add_argument("--email", help="Admin email (used when no token is given)")
    parser.add_argument("--password", help="Admin password")
    parser.add_argument("--batch-size", type=positive_int, default=DEFAULT_BATCH_SIZE)
    parser.add_argument("--dry-run", action="store_true", help="Validate only, upload nothing")
    args = parser.parse_args(argv)

    with open(args.csv_file, encoding="utf-8-sig") as f:
        rows = PARSERS[args.kind](f.read())

    if not rows:
        print("No data rows found in the CSV file")
        return 1

    invalid = [row for row in rows if not row.is_valid]
    print(f"Parsed {len(rows)} rows: {len(rows) - len(invalid)} valid, {len(invalid)} invalid")
    for row in invalid:
        print(f"  row {row.row} ({row.label or 'no label'}): {'; '.join(row.errors)}")

    if args.dry_run or len(invalid) == len(rows):
        return 0 if not invalid else 1

    with httpx.Client(base_url=args.api_url, timeout=30.0) as client:
        token = args.token
        if not token:
            if not (args.email and args.password):
                parser.error("either --token or --email and --password are required")
            token = login(client, args.email, args.password)
        client.headers["Authorization"] = f"Bearer {token}"

        post_batch = make_submitter(client, args.kind)

        def submit(payloads):
            result = post_batch(payloads)
            print(f"  batch of {len(payloads)}: {result.get('created', 0)} created")
            return result

        report = upload_in_batches(rows, submit, batch_size=args.batch_size)

    print(f"\nUploaded {report['success']}, failed {report['failed']}")
    for error in report["errors"]:
        print(f"  row {error['row']} ({error['label']}): {error['error']}")

    return 0 if report["failed"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
