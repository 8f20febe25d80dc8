"""
Study Tracker - Service Exceptions
Errors raised by the service layer and translated to HTTP responses in main.py.

Database failures are not wrapped: SQLAlchemy errors propagate unchanged and
are answered with 503 by the application-level handler.
"""


class StudyTrackerError(Exception):
    """Base error for service-layer failures."""
    pass


class NotFoundError(StudyTrackerError):
    """Record does not exist or is not owned by the requesting user."""
    pass


class InvalidInputError(StudyTrackerError):
    """A required identifier or value is missing or malformed."""
    pass
