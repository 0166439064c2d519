from typing import Callable, Dict, List, Optional

import pytest

from assessment_engine.riasec.engine import RIASECAssessment
from assessment_engine.riasec.loader import load_catalog_data
from assessment_engine.riasec.models import CANONICAL_ORDER, CatalogConfig, Category, Response

CATEGORY_NAMES = {
    "R": "Realistic", "I": "Investigative", "A": "Artistic",
    "S": "Social", "E": "Enterprising", "C": "Conventional",
}


def _build_catalog_data(items_per_category: int = 1, reversed_ids: tuple = ()) -> dict:
    """Raw catalog dictionary with `items_per_category` questions per category (ids like 'R1')."""
    return {
        "version": "test-0.1",
        "released_at": "2024-01-01",
        "meta": {"minimum_items_per_category": 1},
        "categories": [
            {"id": letter, "name": name, "description": f"{name} description"}
            for letter, name in CATEGORY_NAMES.items()
        ],
        "questions": [
            {
                "id": f"{letter}{n}",
                "category": letter,
                "text": f"{CATEGORY_NAMES[letter]} statement {n}",
                "reversed": f"{letter}{n}" in reversed_ids,
            }
            for letter in CATEGORY_NAMES
            for n in range(1, items_per_category + 1)
        ],
    }


@pytest.fixture(scope="session")
def engine() -> RIASECAssessment:
    """Engine over the packaged 60-question catalog."""
    return RIASECAssessment()


@pytest.fixture
def minimal_catalog_data() -> dict:
    return _build_catalog_data(items_per_category=2)


@pytest.fixture
def minimal_catalog(minimal_catalog_data) -> CatalogConfig:
    return load_catalog_data(minimal_catalog_data)


@pytest.fixture
def make_responses(engine) -> Callable[..., List[Response]]:
    """
    Factory answering every packaged question with `default`, except categories
    listed in `by_category` which get their own value.
    """
    def _make(default=3, by_category: Optional[Dict[Category, int]] = None) -> List[Response]:
        by_category = by_category or {}
        return [
            Response(question_id=q.id, value=by_category.get(q.category, default))
            for q in engine.questions()
        ]
    return _make


@pytest.fixture
def flat_scores() -> Callable[..., Dict[Category, int]]:
    """Factory for score dictionaries: every category `default` unless overridden by letter."""
    def _scores(default: int = 50, **overrides: int) -> Dict[Category, int]:
        return {category: overrides.get(category.value, default) for category in CANONICAL_ORDER}
    return _scores


@pytest.fixture
def catalog_data_factory() -> Callable[..., dict]:
    return _build_catalog_data
