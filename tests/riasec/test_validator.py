import pytest

from assessment_engine.riasec.models import Response
from assessment_engine.riasec.validator import (
    AssessmentValidationError,
    IncompleteAssessmentError,
    OutOfRangeError,
    UnknownQuestionError,
    coerce_response_value,
    collect_validation_errors,
    parse_response,
    validate_responses,
)


def full_responses(catalog, value=3):
    return [Response(question_id=q.id, value=value) for q in catalog.questions]


def test_complete_valid_submission_passes(minimal_catalog):
    validate_responses(full_responses(minimal_catalog), minimal_catalog.questions)


def test_one_response_short(minimal_catalog):
    responses = full_responses(minimal_catalog)[:-1]
    with pytest.raises(IncompleteAssessmentError, match="expected 12 responses, got 11"):
        validate_responses(responses, minimal_catalog.questions)


def test_unknown_question_id(minimal_catalog):
    responses = full_responses(minimal_catalog)
    responses[4] = Response(question_id="does-not-exist", value=3)
    with pytest.raises(UnknownQuestionError, match="Invalid question ID: does-not-exist"):
        validate_responses(responses, minimal_catalog.questions)


@pytest.mark.parametrize("bad_value", [0, 6, -1, 4.5, "abc", "", None, True, [3]])
def test_out_of_range_values(minimal_catalog, bad_value):
    responses = full_responses(minimal_catalog)
    responses[0] = Response(question_id=responses[0].question_id, value=bad_value)
    with pytest.raises(OutOfRangeError, match="Expected an integer from 1 to 5"):
        validate_responses(responses, minimal_catalog.questions)


def test_errors_share_a_base_class(minimal_catalog):
    with pytest.raises(AssessmentValidationError):
        validate_responses([], minimal_catalog.questions)
    assert issubclass(OutOfRangeError, ValueError)


def test_completeness_is_checked_before_values(minimal_catalog):
    responses = [Response(question_id="R1", value=99)]
    with pytest.raises(IncompleteAssessmentError):
        validate_responses(responses, minimal_catalog.questions)


def test_first_problem_in_order_is_reported(minimal_catalog):
    responses = full_responses(minimal_catalog)
    responses[1] = Response(question_id=responses[1].question_id, value=9)
    responses[2] = Response(question_id="nope", value=3)
    with pytest.raises(OutOfRangeError):
        validate_responses(responses, minimal_catalog.questions)


@pytest.mark.parametrize("raw, expected", [
    (4, 4),
    ("4", 4),
    (" 5 ", 5),
    (4.0, 4),
    (4.5, None),
    ("4.0", None),
    ("four", None),
    ("0_5", None),
    ("\u0665", None),
    ("+4", 4),
    (True, None),
    (False, None),
    (None, None),
])
def test_coerce_response_value(raw, expected):
    assert coerce_response_value(raw) == expected


def test_numeric_strings_and_integral_floats_are_accepted(minimal_catalog):
    responses = full_responses(minimal_catalog)
    responses[0] = Response(question_id=responses[0].question_id, value="4")
    responses[1] = Response(question_id=responses[1].question_id, value=2.0)
    validate_responses(responses, minimal_catalog.questions)


def test_extra_responses_are_allowed(minimal_catalog):
    responses = full_responses(minimal_catalog) + [Response(question_id="R1", value=5)]
    validate_responses(responses, minimal_catalog.questions)


def test_collect_validation_errors_reports_everything(minimal_catalog):
    responses = full_responses(minimal_catalog)[:-1]
    responses[0] = Response(question_id="ghost", value=3)
    responses[1] = Response(question_id=responses[1].question_id, value=7)

    errors = collect_validation_errors(responses, minimal_catalog.questions)

    assert len(errors) == 3
    assert errors[0] == "Incomplete assessment: expected 12 responses, got 11"
    assert errors[1] == "Invalid question ID: ghost"
    assert errors[2].startswith("Invalid value 7 for question 'R2'")


def test_collect_validation_errors_empty_for_valid(minimal_catalog):
    assert collect_validation_errors(full_responses(minimal_catalog), minimal_catalog.questions) == []


@pytest.mark.parametrize("raw", ["0_5", "\u0665", "\uff14"])
def test_non_ascii_or_grouped_digit_strings_are_rejected(minimal_catalog, raw):
    responses = [{"questionId": q.id, "value": raw} for q in minimal_catalog.questions]
    with pytest.raises(OutOfRangeError):
        validate_responses(responses, minimal_catalog.questions)


def test_parse_response_accepts_both_key_styles():
    camel = parse_response({"questionId": "A1", "value": 2})
    snake = parse_response({"question_id": "A1", "value": 2})
    assert camel.question_id == snake.question_id == "A1"
    existing = Response(question_id="A2", value=1)
    assert parse_response(existing) is existing


@pytest.mark.parametrize("item", [{"value": 3}, {"questionId": None, "value": 3}, {"questionId": 7, "value": 3}])
def test_item_without_usable_question_id(item):
    with pytest.raises(UnknownQuestionError, match="Invalid question ID"):
        parse_response(item)


def test_item_without_value():
    with pytest.raises(OutOfRangeError, match="Missing value for question 'R1'"):
        parse_response({"questionId": "R1"})


def test_malformed_items_follow_validation_order(minimal_catalog):
    responses = [{"questionId": q.id, "value": 3} for q in minimal_catalog.questions]
    responses[3] = {"questionId": "R1"}
    with pytest.raises(OutOfRangeError, match="Missing value"):
        validate_responses(responses, minimal_catalog.questions)

    with pytest.raises(IncompleteAssessmentError):
        validate_responses(responses[:-1], minimal_catalog.questions)


def test_collect_validation_errors_reports_malformed_items(minimal_catalog):
    responses = [{"questionId": q.id, "value": 3} for q in minimal_catalog.questions]
    responses[0] = {"value": 3}
    responses[1] = {"questionId": "R2"}

    errors = collect_validation_errors(responses, minimal_catalog.questions)

    assert len(errors) == 2
    assert errors[0].startswith("Invalid question ID")
    assert errors[1].startswith("Missing value for question 'R2'")
