# assessment_engine/riasec/scorer.py
# Aggregation, normalization, code derivation, percentiles and trait thresholds.

import logging
import math
from typing import Dict, List, Mapping, Sequence, Tuple

from .definitions import (
    DOMINANT_THRESHOLD,
    ENTREPRENEUR_REFERENCE,
    PERCENTILE_SLOPE,
    WEAK_THRESHOLD,
    ReferenceStat,
)
from .models import CANONICAL_ORDER, Category, Question, Response
from .validator import LIKERT_MAX, LIKERT_MIN, coerce_response_value

logger = logging.getLogger(__name__)

CODE_LENGTH = 3


def round_half_up(value: float) -> int:
    """Rounds .5 upwards (2.5 -> 3) instead of to the nearest even integer."""
    return int(math.floor(value + 0.5))


def effective_value(question: Question, value: int) -> int:
    """Inverts reversed-scored items on the Likert scale (1 <-> 5, 2 <-> 4)."""
    if question.reversed:
        return LIKERT_MIN + LIKERT_MAX - value
    return value


def calculate_category_averages(
    responses: Sequence[Response],
    catalog: Sequence[Question],
) -> Tuple[Dict[Category, float], Dict[Category, int]]:
    """
    Returns the mean answer per category on the 1-5 scale, plus the number of
    responses that went into each mean. Categories without responses average 0.
    """
    questions = {question.id: question for question in catalog}
    sums = {category: 0 for category in CANONICAL_ORDER}
    counts = {category: 0 for category in CANONICAL_ORDER}

    for response in responses:
        question = questions.get(response.question_id)
        if question is None:
            continue
        value = coerce_response_value(response.value)
        assert value is not None, f"Unvalidated value for question '{response.question_id}'"
        sums[question.category] += effective_value(question, value)
        counts[question.category] += 1

    averages = {
        category: (sums[category] / counts[category] if counts[category] > 0 else 0.0)
        for category in CANONICAL_ORDER
    }
    return averages, counts


def normalize_score(average: float) -> int:
    """Maps a 1-5 mean onto 0-100: 1 -> 0, 3 -> 50, 5 -> 100."""
    normalized = round_half_up(((average - LIKERT_MIN) / (LIKERT_MAX - LIKERT_MIN)) * 100)
    # An empty category averages 0, which would map below the scale
    return max(0, min(100, normalized))


def normalize_scores(averages: Mapping[Category, float]) -> Dict[Category, int]:
    return {category: normalize_score(averages[category]) for category in CANONICAL_ORDER}


def aggregate_scores(responses: Sequence[Response], catalog: Sequence[Question]) -> Dict[Category, int]:
    """Validated responses -> normalized 0-100 score per category."""
    averages, _ = calculate_category_averages(responses, catalog)
    scores = normalize_scores(averages)
    logger.debug(f"Category averages: {averages} -> normalized: {scores}")
    return scores


def rank_categories(scores: Mapping[Category, int]) -> List[Category]:
    """Categories by descending score; equal scores keep canonical order (sort is stable)."""
    return sorted(CANONICAL_ORDER, key=lambda category: scores[category], reverse=True)


def derive_primary_code(scores: Mapping[Category, int]) -> str:
    """The three highest-scoring category letters, highest first (e.g. 'EIA')."""
    return "".join(category.value for category in rank_categories(scores)[:CODE_LENGTH])


def score_to_percentile(score: float, reference: ReferenceStat) -> int:
    z_score = (score - reference.mean) / reference.std_dev
    percentile = 50 + z_score * PERCENTILE_SLOPE
    return round_half_up(max(0.0, min(100.0, percentile)))


def calculate_percentiles(
    scores: Mapping[Category, int],
    reference: Mapping[Category, ReferenceStat] = ENTREPRENEUR_REFERENCE,
) -> Dict[Category, int]:
    """Percentile of each score against the entrepreneur reference population."""
    return {category: score_to_percentile(scores[category], reference[category]) for category in CANONICAL_ORDER}


def identify_dominant_traits(scores: Mapping[Category, int]) -> List[Category]:
    return [category for category in CANONICAL_ORDER if scores[category] > DOMINANT_THRESHOLD]


def identify_weak_areas(scores: Mapping[Category, int]) -> List[Category]:
    return [category for category in CANONICAL_ORDER if scores[category] < WEAK_THRESHOLD]
