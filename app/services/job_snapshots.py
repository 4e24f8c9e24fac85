"""
JSON snapshots of published jobs.

Each export writes `jobs-<timestamp>.json` into SNAPSHOT_DIR with a metadata
header followed by the job rows. Snapshots are rotated (only the newest
SNAPSHOT_KEEP_LAST are kept) and summarized for the scheduler endpoint.
"""

import json
import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.models.job import Job
from app.models.lookup import Status

logger = logging.getLogger(__name__)

SNAPSHOT_PREFIX = "jobs-"
SNAPSHOT_SUFFIX = ".json"
SNAPSHOT_VERSION = "1.0.0"
RECENT_DAYS = 7


def serialize_job(job: Job) -> Dict[str, Any]:
    """Flatten a job and its joined lookups into a JSON-safe dict."""
    return {
        "id": str(job.id),
        "title": job.title,
        "description": job.description,
        "company_name": job.company.name if job.company else None,
        "location": job.location,
        "country": job.country,
        "job_type": job.job_type.code if job.job_type else None,
        "industry": job.industry.code if job.industry else None,
        "currency": job.currency.code if job.currency else None,
        "salary_min": job.salary_min,
        "salary_max": job.salary_max,
        "salary_frequency": job.salary_frequency.value if job.salary_frequency else None,
        "apply_url": job.apply_url,
        "source": job.source.code if job.source else None,
        "is_premium": job.is_premium,
        "created_at": job.created_at.isoformat() if job.created_at else None,
        "modified_at": job.modified_at.isoformat() if job.modified_at else None,
    }


def _distinct(jobs: List[Dict[str, Any]], key: str) -> List[str]:
    return sorted({job[key] for job in jobs if job.get(key)})


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    # SQLite returns naive timestamps
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class JobSnapshotStore:
    """
    Reads and writes job snapshot files in one directory.

    The directory is created on first write.
    """

    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = Path(data_dir or settings.SNAPSHOT_DIR)

    def save(self, jobs: List[Dict[str, Any]], filename: Optional[str] = None) -> Path:
        """
        Write jobs to a new snapshot file.

        Args:
            jobs: Serialized jobs (see serialize_job)
            filename: Override the generated `jobs-<timestamp>.json` name

        Returns:
            Path of the written file
        """
        now = datetime.now(timezone.utc)
        if not filename:
            filename = f"{SNAPSHOT_PREFIX}{now.strftime('%Y%m%dT%H%M%S%fZ')}{SNAPSHOT_SUFFIX}"

        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self.data_dir / filename

        data = {
            "metadata": {
                "total_jobs": len(jobs),
                "exported_at": now.isoformat(),
                "sources": _distinct(jobs, "source"),
                "countries": _distinct(jobs, "country"),
                "industries": _distinct(jobs, "industry"),
                "version": SNAPSHOT_VERSION,
            },
            "jobs": jobs,
        }
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

        logger.info(f"Saved {len(jobs)} jobs to {path}")
        return path

    def load(self, filename: str) -> List[Dict[str, Any]]:
        """
        Load the jobs of one snapshot file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or not a snapshot
        """
        path = self.data_dir / filename
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{filename} is not a job snapshot")
        jobs = data.get("jobs", [])
        if not isinstance(jobs, list) or not all(isinstance(job, dict) for job in jobs):
            raise ValueError(f"{filename} has no valid job list")
        logger.debug(f"Loaded {len(jobs)} jobs from {path}")
        return jobs

    def list_files(self) -> List[str]:
        """Snapshot file names, newest first."""
        if not self.data_dir.is_dir():
            return []
        names = [
            p.name for p in self.data_dir.iterdir()
            if p.is_file() and p.name.startswith(SNAPSHOT_PREFIX) and p.name.endswith(SNAPSHOT_SUFFIX)
        ]
        return sorted(names, reverse=True)

    def load_latest(self) -> List[Dict[str, Any]]:
        """Jobs of the newest snapshot ([] when there is none or it is unreadable)."""
        files = self.list_files()
        if not files:
            logger.info("No job snapshots found")
            return []
        try:
            return self.load(files[0])
        except (OSError, ValueError) as e:
            logger.error(f"Error loading latest snapshot {files[0]}: {e}")
            return []

    def merge(self, filenames: List[str]) -> List[Dict[str, Any]]:
        """
        Combine several snapshots, keeping the first job seen for each
        (title, company, location), compared case-insensitively.

        Unreadable files are logged and skipped.
        """
        all_jobs = []
        for filename in filenames:
            try:
                all_jobs.extend(self.load(filename))
            except (OSError, ValueError) as e:
                logger.error(f"Error loading snapshot {filename}: {e}")

        seen = set()
        unique = []
        for job in all_jobs:
            key = tuple((job.get(field) or "").lower() for field in ("title", "company_name", "location"))
            if key in seen:
                continue
            seen.add(key)
            unique.append(job)

        logger.info(f"Merged {len(all_jobs)} jobs, {len(unique)} unique")
        return unique

    def clean_old_files(self, keep_last: Optional[int] = None) -> List[str]:
        """
        Delete all but the newest `keep_last` snapshots.

        Returns:
            Names of the deleted files
        """
        if keep_last is None:
            keep_last = settings.SNAPSHOT_KEEP_LAST

        to_delete = self.list_files()[keep_last:]
        for name in to_delete:
            (self.data_dir / name).unlink()
            logger.info(f"Deleted old snapshot: {name}")

        return to_delete

    def statistics(self) -> Dict[str, Any]:
        """Counts over the newest snapshot."""
        jobs = self.load_latest()
        recent_cutoff = datetime.now(timezone.utc) - timedelta(days=RECENT_DAYS)

        recent = 0
        for job in jobs:
            modified_at = _parse_datetime(job.get("modified_at"))
            if modified_at and modified_at > recent_cutoff:
                recent += 1

        def count_by(key: str) -> Dict[str, int]:
            return dict(Counter(job.get(key) or "unknown" for job in jobs))

        return {
            "total_jobs": len(jobs),
            "by_country": count_by("country"),
            "by_source": count_by("source"),
            "by_industry": count_by("industry"),
            "by_job_type": count_by("job_type"),
            "recent_jobs": recent,
        }


def export_published_jobs(db: Session, store: Optional[JobSnapshotStore] = None) -> Path:
    """
    Snapshot every published job from the database.

    Returns:
        Path of the written snapshot
    """
    store = store or JobSnapshotStore()
    jobs = (
        db.query(Job)
        .options(
            joinedload(Job.company),
            joinedload(Job.job_type),
            joinedload(Job.industry),
            joinedload(Job.currency),
            joinedload(Job.source),
        )
        .filter(Job.status.has(Status.code == "published"))
        .order_by(Job.modified_at.desc(), Job.id)
        .all()
    )
    return store.save([serialize_job(job) for job in jobs])
