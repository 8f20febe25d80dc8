"""Study Tracker - API v1 Router."""
from fastapi import APIRouter

from study_tracker.api.v1.auth import router as auth_router
from study_tracker.api.v1.subjects import router as subjects_router
from study_tracker.api.v1.topics import router as topics_router
from study_tracker.api.v1.subtopics import router as subtopics_router
from study_tracker.api.v1.revisions import router as revisions_router
from study_tracker.api.v1.exams import router as exams_router
from study_tracker.api.v1.practice_papers import router as practice_papers_router
from study_tracker.api.v1.paper_tracking import router as paper_tracking_router
from study_tracker.api.v1.notes import router as notes_router
from study_tracker.api.v1.essays import router as essays_router
from study_tracker.api.v1.vocabulary import router as vocabulary_router
from study_tracker.api.v1.grammar import router as grammar_router
from study_tracker.api.v1.errors import router as errors_router
from study_tracker.api.v1.study_sessions import router as study_sessions_router
from study_tracker.api.v1.sat_sessions import router as sat_sessions_router
from study_tracker.api.v1.learning import router as learning_router
from study_tracker.api.v1.dashboard import router as dashboard_router

api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(subjects_router)
api_router.include_router(topics_router)
api_router.include_router(subtopics_router)
api_router.include_router(revisions_router)
api_router.include_router(exams_router)
api_router.include_router(practice_papers_router)
api_router.include_router(paper_tracking_router)
api_router.include_router(notes_router)
api_router.include_router(essays_router)
api_router.include_router(vocabulary_router)
api_router.include_router(grammar_router)
api_router.include_router(errors_router)
api_router.include_router(study_sessions_router)
api_router.include_router(sat_sessions_router)
api_router.include_router(learning_router)
api_router.include_router(dashboard_router)
