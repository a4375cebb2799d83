from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from researchai.db.models import GenerationLog


EXCERPT_CHARS = 500


def record_generation(
    db: Optional[Session],
    kind: str,
    source_text: str,
    output: str,
    content_type: Optional[str] = None,
    fallback_used: bool = False,
) -> Optional[GenerationLog]:
    """
    Store one model round-trip. A failed write is reported and skipped;
    the request that produced the output still succeeds.
    """
    if db is None:
        return None

    entry = GenerationLog(
        kind=kind,
        content_type=content_type,
        source_excerpt=(source_text or "")[:EXCERPT_CHARS],
        output=output,
        fallback_used=fallback_used,
    )

    try:
        db.add(entry)
        db.commit()
        db.refresh(entry)
    except SQLAlchemyError as e:
        db.rollback()
        print(f"[DB] Warning: could not record {kind}: {e}")
        return None

    return entry


def recent_generations(db: Optional[Session], limit: int = 20) -> List[GenerationLog]:
    if db is None:
        return []

    stmt = (
        select(GenerationLog)
        .order_by(GenerationLog.created_at.desc(), GenerationLog.id.desc())
        .limit(limit)
    )
    return list(db.scalars(stmt))
