import re
from typing import Optional, Tuple

from researchai.schemas import PodcastScript, PodcastSegment


SPEAKER_LABEL_RE = re.compile(
    r"^[*_]*\s*("
    r"(?i:co-?host|host|expert|guest|narrator|interviewer|moderator|speaker\s*\d*)"
    r"|(?:Dr|Prof|Mr|Mrs|Ms)\.?\s+[A-Z][\w'-]*"
    r"|[A-Z][\w'-]*(?:\s+[A-Z][\w'-]*){0,2}"
    r")\s*[*_]*\s*:\s*[*_]*\s*(.+)$"
)

# Capitalised labels that introduce a cue rather than a voice
NON_SPEAKER_LABELS = {
    "note", "notes", "intro", "introduction", "outro", "conclusion", "segment",
    "episode", "title", "music", "sound", "sfx", "timestamp", "duration",
}


def format_clock(seconds: int, pad_minutes: bool = True) -> str:
    minutes, secs = divmod(seconds, 60)
    if pad_minutes:
        return f"{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def segment_seconds(line: str) -> int:
    # ~3 seconds per 10 words, never under 3
    word_count = len(line.split(" "))
    return max(3, (word_count // 10) * 3)


def split_speaker(line: str) -> Tuple[Optional[str], str]:
    match = SPEAKER_LABEL_RE.match(line)
    if not match:
        return None, line
    if match.group(1).split()[0].rstrip(".").lower() in NON_SPEAKER_LABELS:
        return None, line
    return match.group(1).strip(), match.group(2).strip()


def parse_podcast(text: str) -> PodcastScript:
    """
    One segment per non-blank line. Speakers alternate Host/Expert unless
    the line carries its own "Sarah:" or "**Host:**" label. NEVER throws.
    """
    lines = [line for line in (text or "").split("\n") if line.strip()]
    segments = []
    current_time = 0

    for index, line in enumerate(lines):
        speaker, content = split_speaker(line.strip())
        if speaker is None:
            speaker = "Host" if index % 2 == 0 else "Expert"

        if index == 0:
            notes = "Introduction"
        elif index == len(lines) - 1:
            notes = "Conclusion"
        else:
            notes = None

        segments.append(
            PodcastSegment(
                timestamp=format_clock(current_time),
                speaker=speaker,
                content=content,
                notes=notes,
            )
        )

        current_time += segment_seconds(line)

    return PodcastScript(
        duration=format_clock(current_time, pad_minutes=False),
        segments=segments,
    )
