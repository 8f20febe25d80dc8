"""
Study Tracker - Revision Scheduler
Spaced-repetition review dates for completed topics.

When a topic is completed, a fixed forgetting-curve schedule of reviews is
written for it. The gaps widen with each session:

    session  1   2   3    4    5    6
    day      1   3   7   14   28   58

Only one batch of incomplete revisions exists per topic. Rescheduling deletes
the incomplete ones before creating the new batch; completed revisions are kept
as history. Both steps run in the caller's transaction, so a failure rolls back
the whole batch. Two concurrent completions of the same topic can still each
delete-then-create and leave a duplicated schedule; serialising completions per
topic is left to the database.
"""
import logging
import uuid
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from study_tracker.core.exceptions import InvalidInputError, NotFoundError
from study_tracker.models.curriculum import Revision, Subject, Topic
from study_tracker.utils.dates import add_days, end_of_day, utcnow

logger = logging.getLogger(__name__)

# (session_number, days after completion)
REVISION_INTERVALS: tuple[tuple[int, int], ...] = (
    (1, 1),    # next day
    (2, 3),
    (3, 7),    # end of week 1
    (4, 14),
    (5, 28),
    (6, 58),
)


class RevisionScheduler:
    """Creates, lists and completes scheduled topic revisions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def schedule_revisions(
        self,
        topic_id: uuid.UUID | None,
        completion_moment: datetime | None = None,
    ) -> list[Revision]:
        """
        Replace the topic's pending revisions with a fresh schedule.

        Args:
            topic_id: Topic that was just completed
            completion_moment: When it was completed (defaults to now)

        Returns:
            The new revisions, ordered by session number

        Raises:
            InvalidInputError: If topic_id is missing
            NotFoundError: If the topic does not exist
        """
        if topic_id is None:
            raise InvalidInputError("Topic ID is required")

        topic = await self.db.get(Topic, topic_id)
        if not topic:
            raise NotFoundError("Topic not found")

        completion_moment = completion_moment or utcnow()

        await self.db.execute(
            delete(Revision).where(
                Revision.topic_id == topic_id,
                Revision.completed.is_(False),
            )
        )

        revisions = [
            Revision(
                topic_id=topic_id,
                scheduled_for=add_days(completion_moment, days),
                session_number=session_number,
                interval=days,
                completed=False,
            )
            for session_number, days in REVISION_INTERVALS
        ]
        self.db.add_all(revisions)
        await self.db.flush()

        logger.info(
            "Scheduled %d revisions for topic %s from %s",
            len(revisions), topic_id, completion_moment.isoformat()
        )
        return revisions

    async def get_pending_revisions(
        self,
        user_id: uuid.UUID,
        as_of: datetime | None = None,
    ) -> list[Revision]:
        """
        Incomplete revisions due by the end of `as_of`'s day, oldest first.

        Anything scheduled for today counts as due, whatever the time of day.
        Topic and subject are loaded with each revision.
        """
        cutoff = end_of_day(as_of or utcnow())

        result = await self.db.execute(
            select(Revision)
            .join(Revision.topic)
            .join(Topic.subject)
            .options(selectinload(Revision.topic).selectinload(Topic.subject))
            .where(
                Subject.user_id == user_id,
                Revision.completed.is_(False),
                Revision.scheduled_for <= cutoff,
            )
            .order_by(Revision.scheduled_for, Revision.session_number)
        )
        return list(result.scalars().all())

    async def get_owned_revision(
        self,
        revision_id: uuid.UUID | None,
        user_id: uuid.UUID,
    ) -> Revision:
        """Load a revision through its topic and subject, or raise NotFoundError."""
        if revision_id is None:
            raise InvalidInputError("Revision ID is required")

        result = await self.db.execute(
            select(Revision)
            .join(Revision.topic)
            .join(Topic.subject)
            .options(selectinload(Revision.topic).selectinload(Topic.subject))
            .where(Revision.id == revision_id, Subject.user_id == user_id)
        )
        revision = result.scalar_one_or_none()
        if not revision:
            raise NotFoundError("Revision not found")
        return revision

    async def complete_revision(
        self,
        revision_id: uuid.UUID | None,
        user_id: uuid.UUID,
        notes: str | None = None,
    ) -> Revision:
        """
        Mark a revision complete.

        completed_at is stamped on the first completion only; marking an
        already-completed revision again leaves it untouched.
        """
        return await self.update_revision(revision_id, user_id, completed=True, notes=notes)

    async def update_revision(
        self,
        revision_id: uuid.UUID | None,
        user_id: uuid.UUID,
        completed: bool | None = None,
        notes: str | None = None,
    ) -> Revision:
        """Update the mutable fields of a revision (completion and notes)."""
        revision = await self.get_owned_revision(revision_id, user_id)

        if completed is True:
            revision.completed = True
            if revision.completed_at is None:
                revision.completed_at = utcnow()
        elif completed is False:
            revision.completed = False

        if notes is not None:
            revision.notes = notes

        await self.db.flush()
        return revision
