"""
Study Tracker - Notes API
Notes and study material links filed under subjects, topics and subtopics
"""
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.note import Note
from study_tracker.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from study_tracker.services.ownership import (
    apply_updates,
    get_owned,
    get_owned_subject,
    get_owned_subtopic,
    get_owned_topic,
)
from study_tracker.utils.dates import utcnow

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("", response_model=list[NoteResponse])
async def list_notes(
    current_user: CurrentUser,
    db: DbSession,
    subject_id: UUID | None = Query(default=None),
    topic_id: UUID | None = Query(default=None),
    subtopic_id: UUID | None = Query(default=None),
):
    """The user's notes, newest first, optionally narrowed to one place."""
    query = (
        select(Note)
        .where(Note.user_id == current_user.id)
        .order_by(Note.created_at.desc())
    )
    if subject_id is not None:
        query = query.where(Note.subject_id == subject_id)
    if topic_id is not None:
        query = query.where(Note.topic_id == topic_id)
    if subtopic_id is not None:
        query = query.where(Note.subtopic_id == subtopic_id)
    
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(request: NoteCreate, current_user: CurrentUser, db: DbSession):
    """File a note; every place it is filed under must belong to the user."""
    if request.subject_id is not None:
        await get_owned_subject(db, request.subject_id, current_user.id)
    if request.topic_id is not None:
        await get_owned_topic(db, request.topic_id, current_user.id)
    if request.subtopic_id is not None:
        await get_owned_subtopic(db, request.subtopic_id, current_user.id)
    
    note = Note(user_id=current_user.id, **request.model_dump())
    db.add(note)
    await db.flush()
    return NoteResponse.model_validate(note)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(note_id: UUID, current_user: CurrentUser, db: DbSession):
    """Open a note, recording when it was last viewed."""
    note = await get_owned(db, Note, note_id, current_user.id)
    note.last_viewed_at = utcnow()
    await db.flush()
    return NoteResponse.model_validate(note)


@router.patch("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    note = await get_owned(db, Note, note_id, current_user.id)
    apply_updates(note, request)
    note.updated_at = utcnow()
    await db.flush()
    return NoteResponse.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: UUID, current_user: CurrentUser, db: DbSession):
    note = await get_owned(db, Note, note_id, current_user.id)
    await db.delete(note)
    await db.flush()
