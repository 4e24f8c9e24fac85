"""
Celery tasks package.

Tasks are organized by domain:
- snapshot_tasks: periodic export of published jobs to JSON snapshots
"""

from app.tasks import snapshot_tasks

__all__ = ["snapshot_tasks"]
