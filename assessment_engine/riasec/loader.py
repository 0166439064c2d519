import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from .models import CANONICAL_ORDER, CatalogConfig

logger = logging.getLogger(__name__)

class CatalogValidationError(ValueError):
    """Catalog problems not covered by the Pydantic schema."""
    pass

def load_catalog_data(data: Dict[str, Any]) -> CatalogConfig:
    """
    Validates raw catalog data against the CatalogConfig model
    and performs the cross-reference checks the schema cannot express.
    """
    try:
        config = CatalogConfig.model_validate(data)
    except ValidationError as e:
        # Schema issues surface as Pydantic's own error
        raise e

    category_ids = set()
    for category in config.categories:
        if category.id in category_ids:
            raise CatalogValidationError(f"Duplicate category ID found: {category.id.value}")
        category_ids.add(category.id)

    missing_categories = [c.value for c in CANONICAL_ORDER if c not in category_ids]
    if missing_categories:
        raise CatalogValidationError(f"Catalog does not declare categories: {missing_categories}")

    question_ids = set()
    items_per_category = {category: 0 for category in CANONICAL_ORDER}
    for question in config.questions:
        if question.id in question_ids:
            raise CatalogValidationError(f"Duplicate question ID found: {question.id}")
        question_ids.add(question.id)
        items_per_category[question.category] += 1

    minimum = config.meta.minimum_items_per_category
    for category, count in items_per_category.items():
        if count < minimum:
            raise CatalogValidationError(
                f"Category '{category.value}' has {count} questions, at least {minimum} required"
            )

    return config

def load_catalog_from_file(file_path: Union[str, Path]) -> CatalogConfig:
    """
    Loads a question catalog from a YAML file, validates it,
    and returns a CatalogConfig object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise CatalogValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise CatalogValidationError(f"YAML file is empty or invalid: {file_path}")

    config = load_catalog_data(data)
    logger.info(f"Loaded RIASEC catalog version {config.version} with {len(config.questions)} questions from {file_path}")
    return config
