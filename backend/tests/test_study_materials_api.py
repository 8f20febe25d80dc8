"""
Study Tracker - Subtopics, Paper Tracking and Notes API Tests
"""
import pytest
from httpx import AsyncClient


async def _create_topic(client: AsyncClient, headers) -> dict:
    subject = await client.post(
        "/api/v1/subjects", json={"name": "Chemistry", "type": "A-Level"}, headers=headers
    )
    topic = await client.post(
        "/api/v1/topics",
        json={"subject_id": subject.json()["id"], "name": "Organic reactions"},
        headers=headers,
    )
    assert topic.status_code == 201
    return topic.json()


async def _create_paper(client: AsyncClient, headers, total_questions: int | None = 10) -> dict:
    subject = await client.post(
        "/api/v1/subjects", json={"name": "Physics", "type": "A-Level"}, headers=headers
    )
    paper = await client.post(
        "/api/v1/practice-papers",
        json={
            "subject_id": subject.json()["id"],
            "paper_name": "June 2023 Paper 1",
            "question_start": 1,
            "question_end": 4,
            "total_questions": total_questions,
        },
        headers=headers,
    )
    assert paper.status_code == 201
    return paper.json()


# ============================================================================
# Subtopics
# ============================================================================

@pytest.mark.asyncio
async def test_subtopic_completion(client: AsyncClient, auth_headers):
    topic = await _create_topic(client, auth_headers)
    for order, name in [(2, "Elimination"), (1, "Substitution")]:
        created = await client.post(
            "/api/v1/subtopics",
            json={"topic_id": topic["id"], "name": name, "order": order},
            headers=auth_headers,
        )
        assert created.status_code == 201
    
    listing = await client.get(
        "/api/v1/subtopics", params={"topic_id": topic["id"]}, headers=auth_headers
    )
    assert [s["name"] for s in listing.json()] == ["Substitution", "Elimination"]
    
    url = f"/api/v1/subtopics/{listing.json()[0]['id']}"
    done = await client.patch(url, json={"completed": True}, headers=auth_headers)
    assert done.json()["completed"] is True
    assert done.json()["completed_at"] is not None
    
    undone = await client.patch(url, json={"completed": False}, headers=auth_headers)
    assert undone.json()["completed_at"] is None
    
    deleted = await client.delete(url, headers=auth_headers)
    assert deleted.status_code == 204


@pytest.mark.asyncio
async def test_subtopics_are_private(client: AsyncClient, auth_headers, other_auth_headers):
    topic = await _create_topic(client, auth_headers)
    subtopic = await client.post(
        "/api/v1/subtopics", json={"topic_id": topic["id"], "name": "Addition"}, headers=auth_headers
    )
    
    foreign_create = await client.post(
        "/api/v1/subtopics", json={"topic_id": topic["id"], "name": "Sneaky"}, headers=other_auth_headers
    )
    assert foreign_create.status_code == 404
    
    foreign_update = await client.patch(
        f"/api/v1/subtopics/{subtopic.json()['id']}",
        json={"completed": True},
        headers=other_auth_headers,
    )
    assert foreign_update.status_code == 404


# ============================================================================
# Practice paper questions and sittings
# ============================================================================

@pytest.mark.asyncio
async def test_flagging_question_again_updates_it(client: AsyncClient, auth_headers):
    paper = await _create_paper(client, auth_headers)
    body = {"practice_paper_id": paper["id"], "question_number": "3b", "status": "redo"}
    
    first = await client.post("/api/v1/practice-paper-questions", json=body, headers=auth_headers)
    assert first.status_code == 201
    second = await client.post(
        "/api/v1/practice-paper-questions",
        json={**body, "status": "focus", "notes": "Sign error"},
        headers=auth_headers,
    )
    assert second.status_code == 201
    assert second.json()["id"] == first.json()["id"]
    
    listing = await client.get(
        "/api/v1/practice-paper-questions",
        params={"practice_paper_id": paper["id"]},
        headers=auth_headers,
    )
    assert len(listing.json()) == 1
    assert listing.json()[0]["status"] == "focus"
    assert listing.json()[0]["notes"] == "Sign error"
    
    url = f"/api/v1/practice-paper-questions/{first.json()['id']}"
    later = await client.patch(url, json={"status": "later"}, headers=auth_headers)
    assert later.json()["status"] == "later"
    assert (await client.delete(url, headers=auth_headers)).status_code == 204


@pytest.mark.asyncio
async def test_question_status_is_validated(client: AsyncClient, auth_headers):
    paper = await _create_paper(client, auth_headers)
    response = await client.post(
        "/api/v1/practice-paper-questions",
        json={"practice_paper_id": paper["id"], "question_number": "1", "status": "someday"},
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_questions_on_other_users_paper_are_hidden(
    client: AsyncClient, auth_headers, other_auth_headers
):
    paper = await _create_paper(client, auth_headers)
    response = await client.post(
        "/api/v1/practice-paper-questions",
        json={"practice_paper_id": paper["id"], "question_number": "1", "status": "redo"},
        headers=other_auth_headers,
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_sitting_reaching_last_question_completes_paper(client: AsyncClient, auth_headers):
    paper = await _create_paper(client, auth_headers, total_questions=10)
    
    partial = await client.post(
        "/api/v1/practice-paper-logs",
        json={"practice_paper_id": paper["id"], "question_start": 1, "question_end": 5, "duration": 40},
        headers=auth_headers,
    )
    assert partial.status_code == 201
    assert partial.json()["completed"] is False
    
    final = await client.post(
        "/api/v1/practice-paper-logs",
        json={
            "practice_paper_id": paper["id"],
            "question_start": 6,
            "question_end": 10,
            "score": 42,
            "total_marks": 50,
        },
        headers=auth_headers,
    )
    assert final.status_code == 201
    assert final.json()["completed"] is True
    
    papers = await client.get("/api/v1/practice-papers", headers=auth_headers)
    stored = papers.json()[0]
    assert stored["completed"] is True
    assert stored["score"] == 42
    assert stored["total_marks"] == 50
    
    logs = await client.get(
        "/api/v1/practice-paper-logs", params={"practice_paper_id": paper["id"]}, headers=auth_headers
    )
    assert len(logs.json()) == 2


@pytest.mark.asyncio
async def test_completed_paper_only_takes_rework_sittings(client: AsyncClient, auth_headers):
    paper = await _create_paper(client, auth_headers, total_questions=None)
    body = {"practice_paper_id": paper["id"], "question_start": 1, "question_end": 4}
    
    done = await client.post(
        "/api/v1/practice-paper-logs", json={**body, "completed": True}, headers=auth_headers
    )
    assert done.json()["completed"] is True
    
    rejected = await client.post("/api/v1/practice-paper-logs", json=body, headers=auth_headers)
    assert rejected.status_code == 400
    assert "rework" in rejected.json()["detail"]
    
    rework = await client.post(
        "/api/v1/practice-paper-logs", json={**body, "completed": True}, headers=auth_headers
    )
    assert rework.status_code == 201


@pytest.mark.asyncio
async def test_sitting_question_range_is_validated(client: AsyncClient, auth_headers):
    paper = await _create_paper(client, auth_headers)
    response = await client.post(
        "/api/v1/practice-paper-logs",
        json={"practice_paper_id": paper["id"], "question_start": 8, "question_end": 3},
        headers=auth_headers,
    )
    assert response.status_code == 422


# ============================================================================
# Notes
# ============================================================================

@pytest.mark.asyncio
async def test_note_lifecycle(client: AsyncClient, auth_headers):
    topic = await _create_topic(client, auth_headers)
    created = await client.post(
        "/api/v1/notes",
        json={
            "topic_id": topic["id"],
            "title": "Mechanism summary",
            "content": "Nucleophile attacks the delta-positive carbon.",
        },
        headers=auth_headers,
    )
    assert created.status_code == 201
    assert created.json()["last_viewed_at"] is None
    await client.post(
        "/api/v1/notes",
        json={
            "subject_id": topic["subject_id"],
            "title": "Reading list",
            "file_url": "https://example.com/a.pdf",
            "file_type": "pdf",
        },
        headers=auth_headers,
    )
    
    filtered = await client.get("/api/v1/notes", params={"topic_id": topic["id"]}, headers=auth_headers)
    assert [n["title"] for n in filtered.json()] == ["Mechanism summary"]
    everything = await client.get("/api/v1/notes", headers=auth_headers)
    assert len(everything.json()) == 2
    
    url = f"/api/v1/notes/{created.json()['id']}"
    opened = await client.get(url, headers=auth_headers)
    assert opened.json()["last_viewed_at"] is not None
    
    edited = await client.patch(url, json={"last_position": 12}, headers=auth_headers)
    assert edited.json()["last_position"] == 12
    assert edited.json()["title"] == "Mechanism summary"
    
    assert (await client.delete(url, headers=auth_headers)).status_code == 204
    assert (await client.get(url, headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_note_needs_a_place(client: AsyncClient, auth_headers):
    response = await client.post("/api/v1/notes", json={"title": "Loose"}, headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_note_cannot_be_filed_under_other_users_topic(
    client: AsyncClient, auth_headers, other_auth_headers
):
    topic = await _create_topic(client, auth_headers)
    response = await client.post(
        "/api/v1/notes", json={"topic_id": topic["id"], "title": "Mine now"}, headers=other_auth_headers
    )
    assert response.status_code == 404
    
    mine = await client.post(
        "/api/v1/notes", json={"topic_id": topic["id"], "title": "Mine"}, headers=auth_headers
    )
    foreign_read = await client.get(f"/api/v1/notes/{mine.json()['id']}", headers=other_auth_headers)
    assert foreign_read.status_code == 404


@pytest.mark.asyncio
async def test_deleting_subject_removes_its_study_materials(client: AsyncClient, auth_headers):
    topic = await _create_topic(client, auth_headers)
    await client.post(
        "/api/v1/subtopics", json={"topic_id": topic["id"], "name": "Addition"}, headers=auth_headers
    )
    await client.post(
        "/api/v1/notes", json={"topic_id": topic["id"], "title": "Summary"}, headers=auth_headers
    )
    
    deleted = await client.delete(f"/api/v1/subjects/{topic['subject_id']}", headers=auth_headers)
    assert deleted.status_code == 204
    
    notes = await client.get("/api/v1/notes", headers=auth_headers)
    assert notes.json() == []
    subtopics = await client.get(
        "/api/v1/subtopics", params={"topic_id": topic["id"]}, headers=auth_headers
    )
    assert subtopics.status_code == 404
