"""
Job snapshot schedule: status and manual trigger.

The export itself runs in the Celery worker; celery beat fires it every
SNAPSHOT_INTERVAL_HOURS.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from app.core.celery_utils import queue_task_safely
from app.core.config import settings
from app.core.deps import get_current_admin
from app.services.job_snapshots import JobSnapshotStore
from app.tasks.snapshot_tasks import export_job_snapshot_task

router = APIRouter(prefix="/scheduler", tags=["Scheduler"], dependencies=[Depends(get_current_admin)])
logger = logging.getLogger(__name__)


@router.get("")
def get_scheduler_status():
    """Schedule settings, available snapshot files and stats of the newest one."""
    store = JobSnapshotStore()
    return {
        "enabled": settings.SNAPSHOT_ENABLED,
        "interval_hours": settings.SNAPSHOT_INTERVAL_HOURS,
        "keep_last": settings.SNAPSHOT_KEEP_LAST,
        "files": store.list_files(),
        "statistics": store.statistics(),
    }


@router.post("/trigger", status_code=202)
def trigger_snapshot():
    """Queue an immediate snapshot export."""
    task_id = queue_task_safely(export_job_snapshot_task)
    if task_id is None:
        raise HTTPException(status_code=503, detail="Task queue unavailable")

    return {"message": "Snapshot export queued", "task_id": task_id}
