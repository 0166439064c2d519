# assessment_engine/riasec/validator.py
# Precondition gate for submitted responses. Nothing is scored until this passes.

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from .models import Question, Response

ResponseInput = Union[Response, Mapping[str, Any]]

logger = logging.getLogger(__name__)

LIKERT_MIN = 1
LIKERT_MAX = 5

INTEGER_STRING = re.compile(r"[+-]?[0-9]+")

# --- Custom Exceptions ---

class AssessmentValidationError(ValueError):
    """Base class for rejected response sets."""
    pass

class IncompleteAssessmentError(AssessmentValidationError):
    """Fewer responses than catalog questions."""
    pass

class UnknownQuestionError(AssessmentValidationError):
    """A response references a question id that is not in the catalog."""
    pass

class OutOfRangeError(AssessmentValidationError):
    """A response value is not an integer between 1 and 5."""
    pass


def coerce_response_value(value: Any) -> Optional[int]:
    """
    Converts a submitted answer to an int, or returns None if it cannot be read as one.

    Numeric strings ("4", " 4 ") are accepted, as are integral floats (4.0).
    Strings must be plain ASCII digits: "0_5" and non-Latin digits are rejected.
    Booleans are rejected even though Python treats them as ints.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        stripped = value.strip()
        if INTEGER_STRING.fullmatch(stripped) is None:
            return None
        return int(stripped)
    return None

def _in_range(value: Optional[int]) -> bool:
    return value is not None and LIKERT_MIN <= value <= LIKERT_MAX

def _question_index(catalog: Sequence[Question]) -> Dict[str, Question]:
    return {question.id: question for question in catalog}

def _raw_question_id(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("questionId", item.get("question_id"))
    return None


def parse_response(item: ResponseInput) -> Response:
    """
    Accepts either a Response or a plain dict using camelCase or snake_case keys.

    A missing or non-string question id raises UnknownQuestionError and a
    missing value raises OutOfRangeError, like any other bad answer.
    """
    if isinstance(item, Response):
        return item
    try:
        return Response.model_validate(item)
    except ValidationError as e:
        failed_fields = {error["loc"][0] for error in e.errors() if error["loc"]}
        question_id = _raw_question_id(item)
        if failed_fields & {"questionId", "question_id"}:
            raise UnknownQuestionError(f"Invalid question ID: {question_id!r}") from e
        if "value" in failed_fields:
            raise OutOfRangeError(
                f"Missing value for question '{question_id}'. "
                f"Expected an integer from {LIKERT_MIN} to {LIKERT_MAX}."
            ) from e
        raise AssessmentValidationError(f"Malformed response {item!r}") from e


def _check_completeness(submitted: int, catalog: Sequence[Question]) -> Optional[str]:
    if submitted < len(catalog):
        return f"Incomplete assessment: expected {len(catalog)} responses, got {submitted}"
    return None


def validate_responses(responses: Sequence[ResponseInput], catalog: Sequence[Question]) -> List[Response]:
    """
    Raises on the first problem found: completeness first, then for each
    response in order a malformed item, an unknown question id, then an
    out-of-range value. Returns the submission as Response objects.
    """
    incomplete = _check_completeness(len(responses), catalog)
    if incomplete:
        logger.warning(f"Rejected incomplete assessment: {len(responses)} of {len(catalog)} responses")
        raise IncompleteAssessmentError(incomplete)

    questions = _question_index(catalog)
    validated: List[Response] = []
    for item in responses:
        try:
            response = parse_response(item)
        except AssessmentValidationError as e:
            logger.warning(f"Rejected malformed response: {e}")
            raise
        if response.question_id not in questions:
            logger.warning(f"Rejected response for unknown question '{response.question_id}'")
            raise UnknownQuestionError(f"Invalid question ID: {response.question_id}")
        if not _in_range(coerce_response_value(response.value)):
            logger.warning(f"Rejected out-of-range value {response.value!r} for question '{response.question_id}'")
            raise OutOfRangeError(
                f"Invalid value {response.value!r} for question '{response.question_id}'. "
                f"Expected an integer from {LIKERT_MIN} to {LIKERT_MAX}."
            )
        validated.append(response)
    return validated

def collect_validation_errors(responses: Sequence[ResponseInput], catalog: Sequence[Question]) -> List[str]:
    """Same checks as validate_responses, but reports every problem instead of raising."""
    errors: List[str] = []
    incomplete = _check_completeness(len(responses), catalog)
    if incomplete:
        errors.append(incomplete)

    questions = _question_index(catalog)
    for item in responses:
        try:
            response = parse_response(item)
        except AssessmentValidationError as e:
            errors.append(str(e))
            continue
        if response.question_id not in questions:
            errors.append(f"Invalid question ID: {response.question_id}")
        elif not _in_range(coerce_response_value(response.value)):
            errors.append(f"Invalid value {response.value!r} for question '{response.question_id}'")
    return errors
