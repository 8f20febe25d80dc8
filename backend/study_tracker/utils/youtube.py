"""YouTube URL helpers."""
import re

_VIDEO_ID_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\s?/]+)"),
    re.compile(r"youtube\.com/embed/([^&\s?/]+)"),
)


def extract_youtube_id(url: str | None) -> str | None:
    """Video ID from a watch, short or embed URL; None if it is not one."""
    if not url:
        return None
    for pattern in _VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None
