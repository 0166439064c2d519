# assessment_engine/riasec/sessions.py
# In-memory lifecycle of a questionnaire being filled in. Storage is the caller's concern.

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from .models import AssessmentMetadata, AssessmentSession, Question
from .validator import ResponseInput, parse_response

logger = logging.getLogger(__name__)

SESSION_VERSION = "1.0"

class SessionStateError(ValueError):
    """Raised when a session is changed after it was completed or abandoned."""
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_in_progress(session: AssessmentSession, action: str) -> None:
    if session.status != "in_progress":
        raise SessionStateError(f"Cannot {action} session {session.session_id} with status '{session.status}'")


def create_session(user_id: str, now: Optional[datetime] = None) -> AssessmentSession:
    session = AssessmentSession(
        session_id=f"assessment_{uuid.uuid4().hex}",
        user_id=user_id,
        started_at=now or _utcnow(),
    )
    logger.info(f"Created RIASEC session {session.session_id} for user {user_id}")
    return session


def update_session(
    session: AssessmentSession,
    responses: Iterable[ResponseInput],
) -> AssessmentSession:
    """Returns a new session with `responses` appended."""
    _require_in_progress(session, "update")
    new_responses = tuple(parse_response(item) for item in responses)
    return session.model_copy(update={"responses": session.responses + new_responses})


def complete_session(
    session: AssessmentSession,
    now: Optional[datetime] = None,
    version: str = SESSION_VERSION,
) -> AssessmentSession:
    _require_in_progress(session, "complete")
    completed_at = now or _utcnow()
    metadata = AssessmentMetadata(
        user_id=session.user_id,
        started_at=session.started_at,
        completed_at=completed_at,
        version=version,
        duration=int((completed_at - session.started_at).total_seconds()),
    )
    logger.info(f"Completed RIASEC session {session.session_id} in {metadata.duration}s")
    return session.model_copy(update={"status": "completed", "completed_at": completed_at, "metadata": metadata})


def abandon_session(session: AssessmentSession) -> AssessmentSession:
    _require_in_progress(session, "abandon")
    logger.info(f"Abandoned RIASEC session {session.session_id}")
    return session.model_copy(update={"status": "abandoned"})


def calculate_progress(session: AssessmentSession, catalog: Sequence[Question]) -> float:
    """Percentage of catalog questions answered so far; repeated answers count once."""
    if not catalog:
        return 0.0
    known_ids = {question.id for question in catalog}
    answered = {response.question_id for response in session.responses if response.question_id in known_ids}
    return min(100.0, len(answered) / len(catalog) * 100)
