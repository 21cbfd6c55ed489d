"""Shared fixtures for the insights API tests."""
import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from insights_engine.api.dependencies import get_store  # noqa: E402
from insights_engine.core.dataset import build_store  # noqa: E402
from insights_engine.main import app  # noqa: E402
from insights_engine.models.activity import ActivityRecord  # noqa: E402


def make_record(
    teacher_id="T1",
    teacher_name=None,
    grade=8,
    subject="Math",
    activity_type="Quiz",
    created_at="2026-01-01 10:00:00",
    **extra,
) -> ActivityRecord:
    return ActivityRecord(
        teacher_id=teacher_id,
        teacher_name=teacher_name or f"Teacher {teacher_id}",
        grade=grade,
        subject=subject,
        activity_type=activity_type,
        created_at=created_at,
        **extra,
    )


@pytest.fixture
def sample_records():
    """A small deduplicated set spanning three teachers, two grades and three days."""
    return [
        make_record("T1", "Asha", 8, "Math", "Quiz", "2026-01-01 10:00:00"),
        make_record("T1", "Asha", 8, "Math", "Lesson Plan", "2026-01-01 12:00:00"),
        make_record("T2", "Bilal", 9, "Science", "Lesson Plan", "2026-01-02 09:00:00"),
        make_record("T1", "Asha", 9, "Math", "Question Paper", "2026-01-03 11:30:00"),
        make_record("T3", "Chen", 8, "Science", "Quiz", "2026-01-03 14:00:00"),
        make_record("T2", "Bilal", 9, "Math", "Quiz", "2026-01-02 16:45:00"),
    ]


@pytest.fixture
def client_for():
    """Build a test client serving a record store made from the given raw records."""
    def _client(raw_records):
        store = build_store(raw_records)
        app.dependency_overrides[get_store] = lambda: store
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()
