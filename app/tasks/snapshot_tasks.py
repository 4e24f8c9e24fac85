"""
Celery task for the periodic job snapshot export.
"""

import logging
from app.core.celery_app import celery_app
from app.core.config import settings
from app.core.database import SessionLocal
from app.services.job_snapshots import JobSnapshotStore, export_published_jobs

logger = logging.getLogger(__name__)


@celery_app.task(
    name="app.tasks.snapshot_tasks.export_job_snapshot_task",
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=True,
    max_retries=3,
)
def export_job_snapshot_task(self):
    """
    Export published jobs to a new snapshot file, then rotate old ones.

    Runs on the beat schedule and from POST /scheduler/trigger. Failures are
    retried up to 3 times with exponential backoff.

    Returns:
        dict: Snapshot file name, exported job count and deleted file names
    """
    logger.info(f"[Task {self.request.id}] Starting job snapshot export")

    # Create a new database session for this task
    db = SessionLocal()
    store = JobSnapshotStore()

    try:
        path = export_published_jobs(db, store)
        deleted = store.clean_old_files(settings.SNAPSHOT_KEEP_LAST)
        total = len(store.load(path.name))

        logger.info(f"[Task {self.request.id}] Exported {total} jobs to {path.name}, removed {len(deleted)} old snapshots")
        return {"status": "success", "file": path.name, "total_jobs": total, "deleted": deleted}

    except Exception as e:
        logger.error(f"[Task {self.request.id}] Snapshot export failed: {e}", exc_info=True)
        raise

    finally:
        db.close()
