"""
Celery utility functions for reliable task queueing.

Provides helper functions to ensure Celery tasks are queued successfully
even when called from FastAPI endpoints (e.g. the scheduler trigger).
"""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Optional, Tuple
from celery import Task
from kombu import Connection
from app.core.config import settings

logger = logging.getLogger(__name__)

# Thread pool for queueing tasks from request handlers
_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="celery_queue")

QUEUE_TIMEOUT_SECONDS = 5


def _queue_task_sync(task: Task, args: tuple, kwargs: dict) -> Tuple[bool, str, str]:
    """
    Queue a task on a fresh broker connection.

    Returns:
        Tuple[bool, str, str]: (success, task_id, error_message)
    """
    try:
        # Fresh Kombu connection; the app's pooled one can be stale after Redis restarts
        with Connection(settings.REDIS_URL) as conn:
            result = task.apply_async(
                args=args,
                kwargs=kwargs,
                connection=conn,
                retry=True,
                retry_policy={
                    'max_retries': 3,
                    'interval_start': 0,
                    'interval_step': 0.2,
                    'interval_max': 0.2,
                }
            )
            return (True, result.id, "")
    except Exception as e:
        return (False, "", str(e))


def queue_task_safely(task: Task, *args, **kwargs) -> Optional[str]:
    """
    Queue a Celery task without letting broker trouble break the request.

    The send runs in a worker thread with a short timeout, so an unreachable
    Redis costs the caller at most QUEUE_TIMEOUT_SECONDS.

    Args:
        task: The Celery task to queue
        *args: Positional arguments for the task
        **kwargs: Keyword arguments for the task

    Returns:
        The task id if queued, None otherwise

    Example:
        from app.tasks.snapshot_tasks import export_job_snapshot_task
        task_id = queue_task_safely(export_job_snapshot_task)
    """
    future = _executor.submit(_queue_task_sync, task, args, kwargs)
    try:
        success, task_id, error = future.result(timeout=QUEUE_TIMEOUT_SECONDS)
    except FutureTimeoutError:
        success, task_id, error = False, "", f"timed out after {QUEUE_TIMEOUT_SECONDS}s"

    if success:
        logger.info(f"Task {task.name} queued successfully: {task_id}")
        return task_id

    logger.error(f"Failed to queue task {task.name}: {error}")
    return None
