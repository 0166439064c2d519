# assessment_engine/riasec/reliability.py
# Internal-consistency checks for the questionnaire over a batch of completed assessments.

import logging
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .models import CANONICAL_ORDER, Question, Response
from .scorer import effective_value
from .validator import coerce_response_value

logger = logging.getLogger(__name__)


def calculate_cronbach_alpha(data: pd.DataFrame) -> float:
    """
    Calculates Cronbach's alpha for a set of items.
    Rows are respondents, columns are items.
    """
    if data.shape[1] < 2:  # Need at least 2 items
        return np.nan

    item_variances = data.var(axis=0, ddof=1).sum()
    total_variance = data.sum(axis=1).var(ddof=1)

    n_items = data.shape[1]

    if total_variance == 0:
        return 1.0 if item_variances == 0 else 0.0

    return (n_items / (n_items - 1)) * (1 - (item_variances / total_variance))


def build_response_frame(response_sets: Sequence[Sequence[Response]], catalog: Sequence[Question]) -> pd.DataFrame:
    """
    One row per respondent, one column per catalog question, holding the
    effective (reverse-corrected) answer. Missing or unreadable answers are NaN.
    """
    questions = {question.id: question for question in catalog}
    rows: List[Dict[str, float]] = []
    for responses in response_sets:
        row: Dict[str, float] = {}
        for response in responses:
            question = questions.get(response.question_id)
            value = coerce_response_value(response.value)
            if question is None or value is None:
                continue
            row[question.id] = float(effective_value(question, value))
        rows.append(row)
    return pd.DataFrame(rows, columns=[question.id for question in catalog], dtype=float)


def _clean(value: Any) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)


def generate_reliability_report(
    response_sets: Sequence[Sequence[Response]],
    catalog: Sequence[Question],
    threshold: float,
) -> Dict[str, Any]:
    """
    Cronbach's alpha and item statistics per category.

    A category passes when its alpha is at least `threshold`. Fewer than two
    complete respondents (or items) leaves alpha undefined and the category fails.
    """
    responses_df = build_response_frame(response_sets, catalog)
    report: Dict[str, Any] = {
        "cronbach_alpha_threshold": threshold,
        "respondents": int(responses_df.shape[0]),
        "categories": {},
        "overall_pass": True,
    }

    for category in CANONICAL_ORDER:
        question_ids = [question.id for question in catalog if question.category == category]
        category_data = responses_df[question_ids].dropna()  # drop respondents with gaps in this category

        if category_data.shape[0] < 2 or category_data.shape[1] < 2:
            alpha = None
        else:
            alpha = _clean(calculate_cronbach_alpha(category_data))
        is_pass = alpha is not None and alpha >= threshold

        report["categories"][category.value] = {
            "cronbach_alpha": alpha,
            "pass": is_pass,
            "n_items": len(question_ids),
            "n_complete_respondents": int(category_data.shape[0]),
            "items": {
                qid: {
                    "mean": _clean(responses_df[qid].mean()),
                    "stddev": _clean(responses_df[qid].std(ddof=1)),
                }
                for qid in question_ids
            },
        }
        if not is_pass:
            report["overall_pass"] = False

    logger.info(f"Reliability report over {report['respondents']} respondents, overall pass: {report['overall_pass']}")
    return report
