import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..core.config import settings
from .interpreter import interpret_profile
from .loader import load_catalog_from_file
from .models import (
    AssessmentSession,
    CatalogConfig,
    CategoryDefinition,
    Profile,
    Question,
    RoleMapping,
    ValidationReport,
)
from .reliability import generate_reliability_report
from .scorer import (
    calculate_category_averages,
    calculate_percentiles,
    derive_primary_code,
    identify_weak_areas,
    normalize_scores,
)
from .sessions import calculate_progress
from .startup_mapping import ROLE_MAPPINGS, get_complementary_roles
from .validator import ResponseInput, collect_validation_errors, parse_response, validate_responses

logger = logging.getLogger(__name__)


class RIASECAssessment:
    """
    Scores and interprets the RIASEC career-interest questionnaire.

    The catalog is loaded once at construction and treated as read-only, so a
    single instance can serve concurrent callers.
    """
    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        catalog: Optional[CatalogConfig] = None,
        role_mappings: Sequence[RoleMapping] = ROLE_MAPPINGS,
    ):
        """
        Args:
            config_path: YAML catalog to load. Defaults to RIASEC_CATALOG_PATH / the packaged catalog.
            catalog: An already validated catalog; takes precedence over config_path.
            role_mappings: Ordered role table used for exact and partial code matches.
        """
        if catalog is None:
            catalog = load_catalog_from_file(config_path or settings.catalog_path)
        self.config = catalog
        self.role_mappings: Tuple[RoleMapping, ...] = tuple(role_mappings)
        self._questions: Tuple[Question, ...] = tuple(catalog.questions)

    def questions(self) -> Tuple[Question, ...]:
        """The catalog in presentation order, for rendering the questionnaire."""
        return self._questions

    def categories(self) -> List[CategoryDefinition]:
        return list(self.config.categories)

    def validate(self, responses: Iterable[ResponseInput]) -> ValidationReport:
        """Reports every problem with a submission without raising."""
        errors = collect_validation_errors(list(responses), self._questions)
        return ValidationReport(valid=not errors, errors=errors)

    def process(self, responses: Iterable[ResponseInput]) -> Profile:
        """
        Validates, scores and interprets one submission.

        Raises:
            IncompleteAssessmentError: fewer responses than catalog questions.
            UnknownQuestionError: a response has no question id or one not in the catalog.
            OutOfRangeError: a value is missing or not an integer from 1 to 5.
        """
        submitted = validate_responses(list(responses), self._questions)

        averages, counts = calculate_category_averages(submitted, self._questions)
        unanswered = [category.value for category, count in counts.items() if count == 0]
        assert not unanswered, f"Validated submission left categories without responses: {unanswered}"

        scores = normalize_scores(averages)
        primary_code = derive_primary_code(scores)
        percentiles = calculate_percentiles(scores)
        weak_traits = identify_weak_areas(scores)
        interpretation = interpret_profile(scores, primary_code, self.role_mappings)

        profile = Profile(
            scores=scores,
            primary_code=primary_code,
            percentiles=percentiles,
            interpretation=interpretation,
            weak_traits=weak_traits,
            complementary_roles=get_complementary_roles(interpretation.startup_fit.ideal_roles),
            version=self.config.version,
        )
        logger.info(f"Processed RIASEC assessment: code {primary_code}, roles {[r.value for r in interpretation.startup_fit.ideal_roles]}")
        return profile

    def process_session(self, session: AssessmentSession) -> Profile:
        return self.process(session.responses)

    def progress(self, session: AssessmentSession) -> float:
        return calculate_progress(session, self._questions)

    def reliability_report(
        self,
        response_sets: Sequence[Iterable[ResponseInput]],
        threshold: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Cronbach's alpha per category; threshold falls back to the catalog meta, then settings."""
        if threshold is None:
            threshold = self.config.meta.cronbach_alpha_threshold
        if threshold is None:
            threshold = settings.reliability_alpha_threshold
        normalized_sets = [[parse_response(item) for item in responses] for responses in response_sets]
        return generate_reliability_report(normalized_sets, self._questions, threshold)


# Example Usage (for manual runs)
if __name__ == "__main__":
    from ..core.logging_config import setup_logging

    setup_logging("INFO")
    engine = RIASECAssessment()
    simulated = [
        {"questionId": q.id, "value": 5 if q.category.value in ("E", "I") else 3}
        for q in engine.questions()
    ]
    print(engine.process(simulated).model_dump_json(by_alias=True, indent=2))
