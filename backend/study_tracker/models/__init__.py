"""Study Tracker - Models initialization."""
from study_tracker.models.user import User
from study_tracker.models.curriculum import (
    Subject,
    Topic,
    Subtopic,
    Revision,
    PracticePaper,
    PracticePaperQuestion,
    PracticePaperLog,
    QuestionStatus,
)
from study_tracker.models.note import Note
from study_tracker.models.exam import Exam
from study_tracker.models.writing import (
    Essay,
    Vocabulary,
    GrammarRule,
    GrammarStatus,
    ErrorLog,
)
from study_tracker.models.session import (
    StudySession,
    SATSession,
    LearningProject,
    LearningSession,
    ProjectStatus,
)


__all__ = [
    # User models
    "User",
    # Curriculum models
    "Subject",
    "Topic",
    "Subtopic",
    "Revision",
    "PracticePaper",
    "PracticePaperQuestion",
    "PracticePaperLog",
    "QuestionStatus",
    # Note models
    "Note",
    # Exam models
    "Exam",
    # Language practice models
    "Essay",
    "Vocabulary",
    "GrammarRule",
    "GrammarStatus",
    "ErrorLog",
    # Session models
    "StudySession",
    "SATSession",
    "LearningProject",
    "LearningSession",
    "ProjectStatus",
]
