"""
Test suite for scheduler and health endpoints.
"""

from redis.exceptions import ConnectionError as RedisConnectionError

from app.api.endpoints import health, scheduler
from app.core.config import settings
from app.services.job_snapshots import JobSnapshotStore


class TestScheduler:

    def test_status(self, client, auth_headers, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "SNAPSHOT_DIR", str(tmp_path))
        JobSnapshotStore(str(tmp_path)).save([{"title": "Engineer", "country": "AE"}], filename="jobs-1.json")

        response = client.get("/api/v1/scheduler", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["enabled"] == settings.SNAPSHOT_ENABLED
        assert data["interval_hours"] == settings.SNAPSHOT_INTERVAL_HOURS
        assert data["files"] == ["jobs-1.json"]
        assert data["statistics"]["total_jobs"] == 1
        assert data["statistics"]["by_country"] == {"AE": 1}

    def test_status_with_corrupt_latest_snapshot(self, client, auth_headers, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "SNAPSHOT_DIR", str(tmp_path))
        JobSnapshotStore(str(tmp_path)).save([{"title": "Engineer", "country": "AE"}], filename="jobs-1.json")
        (tmp_path / "jobs-2.json").write_text("{not json")

        response = client.get("/api/v1/scheduler", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["files"] == ["jobs-2.json", "jobs-1.json"]
        assert data["statistics"]["total_jobs"] == 0

    def test_trigger_queues_export(self, client, auth_headers, monkeypatch):
        queued = []

        def fake_queue(task, *args, **kwargs):
            queued.append(task.name)
            return "task-123"

        monkeypatch.setattr(scheduler, "queue_task_safely", fake_queue)

        response = client.post("/api/v1/scheduler/trigger", headers=auth_headers)

        assert response.status_code == 202
        assert response.json()["task_id"] == "task-123"
        assert queued == ["app.tasks.snapshot_tasks.export_job_snapshot_task"]

    def test_trigger_without_broker(self, client, auth_headers, monkeypatch):
        monkeypatch.setattr(scheduler, "queue_task_safely", lambda task, *args, **kwargs: None)

        response = client.post("/api/v1/scheduler/trigger", headers=auth_headers)

        assert response.status_code == 503
        assert response.json()["detail"] == "Task queue unavailable"

    def test_requires_admin(self, client):
        assert client.get("/api/v1/scheduler").status_code == 401
        assert client.post("/api/v1/scheduler/trigger").status_code == 401


class _FakeRedis:
    def __init__(self, error=None):
        self.error = error

    def ping(self):
        if self.error:
            raise self.error
        return True


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health(self, client, monkeypatch):
        monkeypatch.setattr(health.Redis, "from_url", lambda *args, **kwargs: _FakeRedis())

        data = client.get("/api/v1/health/detailed").json()

        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"
        assert data["checks"]["broker"]["status"] == "healthy"

    def test_broker_down_is_degraded(self, client, monkeypatch):
        error = RedisConnectionError("Connection refused")
        monkeypatch.setattr(health.Redis, "from_url", lambda *args, **kwargs: _FakeRedis(error))

        data = client.get("/api/v1/health/detailed").json()

        assert data["status"] == "degraded"
        assert data["checks"]["database"]["status"] == "healthy"
        assert data["checks"]["broker"]["status"] == "unhealthy"


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200


class _UnreachableTask:
    name = "unreachable"

    def apply_async(self, **kwargs):
        raise OSError("Connection refused")


def test_queue_task_safely_swallows_broker_errors():
    from app.core.celery_utils import queue_task_safely

    assert queue_task_safely(_UnreachableTask()) is None
