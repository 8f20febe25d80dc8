"""
Study Tracker - Subjects, Topics and Revisions API Tests
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient

from study_tracker.services.revision_scheduler import REVISION_INTERVALS
from study_tracker.utils.dates import utcnow


async def _create_subject(client: AsyncClient, headers, name: str = "Mathematics") -> dict:
    response = await client.post(
        "/api/v1/subjects",
        json={"name": name, "type": "A-Level", "color": "#6366f1"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


async def _create_topic(client: AsyncClient, headers, subject_id: str, name: str = "Integration") -> dict:
    response = await client.post(
        "/api/v1/topics",
        json={"subject_id": subject_id, "name": name, "order": 1},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_subject_lifecycle(client: AsyncClient, auth_headers):
    subject = await _create_subject(client, auth_headers)
    await _create_topic(client, auth_headers, subject["id"])
    
    listing = await client.get("/api/v1/subjects", headers=auth_headers)
    assert listing.status_code == 200
    assert listing.json()[0]["topic_count"] == 1
    assert listing.json()[0]["completed_topic_count"] == 0
    
    detail = await client.get(f"/api/v1/subjects/{subject['id']}", headers=auth_headers)
    assert detail.status_code == 200
    assert [t["name"] for t in detail.json()["topics"]] == ["Integration"]
    
    renamed = await client.patch(
        f"/api/v1/subjects/{subject['id']}", json={"name": "Further Maths"}, headers=auth_headers
    )
    assert renamed.json()["name"] == "Further Maths"
    
    deleted = await client.delete(f"/api/v1/subjects/{subject['id']}", headers=auth_headers)
    assert deleted.status_code == 204
    missing = await client.get(f"/api/v1/subjects/{subject['id']}", headers=auth_headers)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_completing_topic_schedules_revisions(client: AsyncClient, auth_headers):
    subject = await _create_subject(client, auth_headers)
    topic = await _create_topic(client, auth_headers, subject["id"])
    
    response = await client.patch(
        f"/api/v1/topics/{topic['id']}", json={"completed": True}, headers=auth_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert data["completed"] is True
    assert data["completed_at"] is not None
    assert [r["session_number"] for r in data["pending_revisions"]] == [
        number for number, _ in REVISION_INTERVALS
    ]
    assert [r["interval"] for r in data["pending_revisions"]] == [
        days for _, days in REVISION_INTERVALS
    ]


@pytest.mark.asyncio
async def test_completing_twice_keeps_schedule(client: AsyncClient, auth_headers):
    subject = await _create_subject(client, auth_headers)
    topic = await _create_topic(client, auth_headers, subject["id"])
    url = f"/api/v1/topics/{topic['id']}"
    
    first = await client.patch(url, json={"completed": True}, headers=auth_headers)
    second = await client.patch(url, json={"completed": True, "name": "Integration by parts"}, headers=auth_headers)
    
    assert second.json()["name"] == "Integration by parts"
    assert second.json()["completed_at"] == first.json()["completed_at"]
    assert {r["id"] for r in second.json()["pending_revisions"]} == {
        r["id"] for r in first.json()["pending_revisions"]
    }


@pytest.mark.asyncio
async def test_new_revisions_are_not_due_yet(client: AsyncClient, auth_headers):
    subject = await _create_subject(client, auth_headers)
    topic = await _create_topic(client, auth_headers, subject["id"])
    await client.patch(f"/api/v1/topics/{topic['id']}", json={"completed": True}, headers=auth_headers)
    
    response = await client.get("/api/v1/revisions/pending", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_update_revision(client: AsyncClient, auth_headers, other_auth_headers):
    subject = await _create_subject(client, auth_headers)
    topic = await _create_topic(client, auth_headers, subject["id"])
    completed = await client.patch(
        f"/api/v1/topics/{topic['id']}", json={"completed": True}, headers=auth_headers
    )
    revision_id = completed.json()["pending_revisions"][0]["id"]
    
    stolen = await client.patch(
        f"/api/v1/revisions/{revision_id}", json={"completed": True}, headers=other_auth_headers
    )
    assert stolen.status_code == 404
    
    response = await client.patch(
        f"/api/v1/revisions/{revision_id}",
        json={"completed": True, "notes": "Recalled everything"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["completed"] is True
    assert data["completed_at"] is not None
    assert data["topic"]["subject"]["name"] == "Mathematics"


@pytest.mark.asyncio
async def test_other_users_records_are_hidden(client: AsyncClient, auth_headers, other_auth_headers):
    subject = await _create_subject(client, auth_headers)
    topic = await _create_topic(client, auth_headers, subject["id"])
    
    assert (await client.get(f"/api/v1/subjects/{subject['id']}", headers=other_auth_headers)).status_code == 404
    assert (await client.patch(
        f"/api/v1/topics/{topic['id']}", json={"completed": True}, headers=other_auth_headers
    )).status_code == 404
    assert (await client.post(
        "/api/v1/topics", json={"subject_id": subject["id"], "name": "Sneaky"}, headers=other_auth_headers
    )).status_code == 404
    assert (await client.get("/api/v1/subjects", headers=other_auth_headers)).json() == []


@pytest.mark.asyncio
async def test_practice_paper_reminders(client: AsyncClient, auth_headers):
    subject = await _create_subject(client, auth_headers)
    topic = await _create_topic(client, auth_headers, subject["id"])
    
    created = await client.post(
        "/api/v1/practice-papers",
        json={
            "subject_id": subject["id"],
            "topic_id": topic["id"],
            "paper_name": "June 2024 Paper 1",
            "question_start": 1,
            "question_end": 8,
            "reminder_days": 2,
        },
        headers=auth_headers,
    )
    assert created.status_code == 201
    paper = created.json()
    assert paper["reminder_date"] is not None
    
    dashboard = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert [p["id"] for p in dashboard.json()["upcoming_reminders"]] == [paper["id"]]
    
    filtered = await client.get(
        "/api/v1/practice-papers", params={"topic_id": topic["id"]}, headers=auth_headers
    )
    assert [p["id"] for p in filtered.json()] == [paper["id"]]
    
    cleared = await client.patch(
        f"/api/v1/practice-papers/{paper['id']}", json={"reminder_days": 0}, headers=auth_headers
    )
    assert cleared.json()["reminder_date"] is None


@pytest.mark.asyncio
async def test_practice_paper_question_range_validated(client: AsyncClient, auth_headers):
    subject = await _create_subject(client, auth_headers)
    response = await client.post(
        "/api/v1/practice-papers",
        json={
            "subject_id": subject["id"],
            "paper_name": "Backwards",
            "question_start": 10,
            "question_end": 3,
        },
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_exam_countdown(client: AsyncClient, auth_headers):
    exam_date = utcnow() + timedelta(days=10, hours=1)
    created = await client.post(
        "/api/v1/exams",
        json={"name": "Maths Paper 2", "exam_date": exam_date.isoformat(), "board": "AQA"},
        headers=auth_headers,
    )
    assert created.status_code == 201
    
    listing = await client.get("/api/v1/exams", headers=auth_headers)
    assert listing.json()[0]["days_remaining"] == 11
    
    await client.patch(
        f"/api/v1/exams/{created.json()['id']}", json={"completed": True}, headers=auth_headers
    )
    assert (await client.get("/api/v1/exams", headers=auth_headers)).json() == []
