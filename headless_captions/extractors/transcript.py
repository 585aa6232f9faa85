"""Transcript timing helpers"""

import re
from typing import List, Sequence, Tuple

from ..models.transcript import TranscriptSegment

# Duration given to the last segment, which has no successor to measure against
FALLBACK_DURATION = "3.0"

TIMESTAMP_RE = re.compile(r"\d+:\d+")


def looks_like_timestamp(text: str) -> bool:
    return bool(TIMESTAMP_RE.search(text or ""))


def is_bare_timestamp(text: str) -> bool:
    return bool(re.fullmatch(r"\d+:\d+", (text or "").strip()))


def parse_timestamp(timestamp: str) -> int:
    """Convert "h:mm:ss" or "m:ss" to whole seconds

    Parts that are not numbers count as zero.
    """
    if not timestamp or ":" not in timestamp:
        return 0

    total = 0
    for index, part in enumerate(reversed(timestamp.strip().split(":"))):
        match = re.match(r"\s*(\d+)", part)
        total += (int(match.group(1)) if match else 0) * 60 ** index
    return total


def derive_durations(raw: Sequence[Tuple[str, str]]) -> List[TranscriptSegment]:
    """Build segments from (start, text) pairs kept in display order

    Each duration is the gap to the next segment's start, one decimal place;
    the final segment gets FALLBACK_DURATION.
    """
    segments = []
    for index, (start, text) in enumerate(raw):
        if index + 1 < len(raw):
            dur = f"{float(raw[index + 1][0]) - float(start):.1f}"
        else:
            dur = FALLBACK_DURATION
        segments.append(TranscriptSegment(start=start, dur=dur, text=text))
    return segments
