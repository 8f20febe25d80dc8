"""
Study Tracker - Essays, Vocabulary, Grammar and Error Log API Tests
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_essay_word_count(client: AsyncClient, auth_headers):
    created = await client.post(
        "/api/v1/essays",
        json={"title": "On screens", "content": "Technology shapes   how we\nlearn today."},
        headers=auth_headers,
    )
    assert created.status_code == 201
    essay = created.json()
    assert essay["word_count"] == 6
    
    updated = await client.patch(
        f"/api/v1/essays/{essay['id']}",
        json={"content": "Shorter now."},
        headers=auth_headers,
    )
    assert updated.json()["word_count"] == 2
    
    retitled = await client.patch(
        f"/api/v1/essays/{essay['id']}", json={"title": "On screens, revised"}, headers=auth_headers
    )
    assert retitled.json()["word_count"] == 2


@pytest.mark.asyncio
async def test_writing_activity_logs_one_study_session_per_day(client: AsyncClient, auth_headers):
    await client.post(
        "/api/v1/essays", json={"title": "Draft", "content": "A few words"}, headers=auth_headers
    )
    await client.post(
        "/api/v1/vocabulary",
        json={"word": "ubiquitous", "definition": "Found everywhere", "sentences": ["Phones are ubiquitous."]},
        headers=auth_headers,
    )
    await client.post(
        "/api/v1/grammar",
        json={"title": "Semicolons", "explanation": "Join related independent clauses"},
        headers=auth_headers,
    )
    await client.post(
        "/api/v1/essays", json={"title": "Second", "content": "More words"}, headers=auth_headers
    )
    
    sessions = (await client.get("/api/v1/study-sessions", headers=auth_headers)).json()
    assert len(sessions) == 1
    assert sessions[0]["activities"] == ["essay", "vocabulary", "grammar"]
    assert sessions[0]["duration"] == 30


@pytest.mark.asyncio
async def test_vocabulary_needs_an_example_sentence(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/vocabulary",
        json={"word": "laconic", "definition": "Using few words", "sentences": []},
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_vocabulary_learned_timestamp(client: AsyncClient, auth_headers):
    created = await client.post(
        "/api/v1/vocabulary",
        json={"word": "laconic", "definition": "Using few words", "sentences": ["He was laconic."]},
        headers=auth_headers,
    )
    url = f"/api/v1/vocabulary/{created.json()['id']}"
    
    learned = await client.patch(url, json={"learned": True}, headers=auth_headers)
    assert learned.json()["learned"] is True
    assert learned.json()["learned_at"] is not None
    
    unlearned = await client.patch(url, json={"learned": False}, headers=auth_headers)
    assert unlearned.json()["learned_at"] is None


@pytest.mark.asyncio
async def test_grammar_status(client: AsyncClient, auth_headers):
    created = await client.post(
        "/api/v1/grammar",
        json={"title": "Subjunctive", "explanation": "If I were...", "examples": ["If I were you"]},
        headers=auth_headers,
    )
    assert created.json()["status"] == "needs_work"
    
    updated = await client.patch(
        f"/api/v1/grammar/{created.json()['id']}", json={"status": "understood"}, headers=auth_headers
    )
    assert updated.json()["status"] == "understood"
    
    invalid = await client.patch(
        f"/api/v1/grammar/{created.json()['id']}", json={"status": "mastered"}, headers=auth_headers
    )
    assert invalid.status_code == 422


@pytest.mark.asyncio
async def test_error_log_resolution(client: AsyncClient, auth_headers, other_auth_headers):
    created = await client.post(
        "/api/v1/errors",
        json={"category": "spelling", "description": "recieve", "correction": "receive"},
        headers=auth_headers,
    )
    url = f"/api/v1/errors/{created.json()['id']}"
    
    assert (await client.patch(url, json={"resolved": True}, headers=other_auth_headers)).status_code == 404
    
    resolved = await client.patch(url, json={"resolved": True}, headers=auth_headers)
    assert resolved.json()["resolved_at"] is not None
    reopened = await client.patch(url, json={"resolved": False}, headers=auth_headers)
    assert reopened.json()["resolved_at"] is None
    
    assert (await client.delete(url, headers=auth_headers)).status_code == 204
    assert (await client.get("/api/v1/errors", headers=auth_headers)).json() == []


@pytest.mark.asyncio
async def test_sat_session_video_id(client: AsyncClient, auth_headers):
    created = await client.post(
        "/api/v1/sat-sessions",
        json={
            "topic": "Linear equations",
            "source": "youtube",
            "youtube_url": "https://www.youtube.com/watch?v=abc123XYZ",
            "timestamp": 95,
        },
        headers=auth_headers,
    )
    assert created.status_code == 201
    assert created.json()["video_id"] == "abc123XYZ"
    
    moved = await client.patch(
        f"/api/v1/sat-sessions/{created.json()['id']}",
        json={"youtube_url": "https://youtu.be/newVideo42"},
        headers=auth_headers,
    )
    assert moved.json()["video_id"] == "newVideo42"


@pytest.mark.asyncio
async def test_sat_video_id_only_for_youtube_source(client: AsyncClient, auth_headers):
    created = await client.post(
        "/api/v1/sat-sessions",
        json={
            "topic": "Reading comprehension",
            "source": "khan",
            "youtube_url": "https://www.youtube.com/watch?v=abc123XYZ",
        },
        headers=auth_headers,
    )
    assert created.status_code == 201
    assert created.json()["video_id"] is None
    
    url = f"/api/v1/sat-sessions/{created.json()['id']}"
    switched = await client.patch(url, json={"source": "youtube"}, headers=auth_headers)
    assert switched.json()["video_id"] == "abc123XYZ"
    
    switched_back = await client.patch(url, json={"source": "bluebook"}, headers=auth_headers)
    assert switched_back.json()["video_id"] is None
