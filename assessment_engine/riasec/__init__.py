"""RIASEC career-interest scoring and startup-role interpretation."""

from .engine import RIASECAssessment
from .loader import CatalogValidationError, load_catalog_data, load_catalog_from_file
from .models import (
    CANONICAL_ORDER,
    Category,
    Interpretation,
    Profile,
    Question,
    Response,
    RoleMapping,
    StartupRole,
)
from .validator import (
    AssessmentValidationError,
    IncompleteAssessmentError,
    OutOfRangeError,
    UnknownQuestionError,
)

__all__ = [
    "RIASECAssessment",
    "CatalogValidationError",
    "load_catalog_data",
    "load_catalog_from_file",
    "CANONICAL_ORDER",
    "Category",
    "Interpretation",
    "Profile",
    "Question",
    "Response",
    "RoleMapping",
    "StartupRole",
    "AssessmentValidationError",
    "IncompleteAssessmentError",
    "OutOfRangeError",
    "UnknownQuestionError",
]
