from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """The six Holland interest dimensions. Declaration order is the canonical order."""
    R = "R"  # Realistic
    I = "I"  # Investigative
    A = "A"  # Artistic
    S = "S"  # Social
    E = "E"  # Enterprising
    C = "C"  # Conventional


CANONICAL_ORDER: Tuple[Category, ...] = tuple(Category)


class StartupRole(str, Enum):
    VISIONARY_FOUNDER = "visionary_founder"
    TECHNICAL_FOUNDER = "technical_founder"
    GROWTH_STRATEGIST = "growth_strategist"
    PRODUCT_BUILDER = "product_builder"
    PEOPLE_LEADER = "people_leader"
    OPERATIONS_LEAD = "operations_lead"
    CREATIVE_DIRECTOR = "creative_director"
    BUSINESS_DEVELOPER = "business_developer"
    DATA_SCIENTIST = "data_scientist"
    COMMUNITY_BUILDER = "community_builder"


class OutputModel(BaseModel):
    """Immutable result value, serialized with camelCase keys for the platform."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# --- Catalog (YAML) ---

class MetaConfig(BaseModel):
    minimum_items_per_category: int = 1
    cronbach_alpha_threshold: Optional[float] = None

class CategoryDefinition(BaseModel):
    id: Category
    name: str
    description: str

class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: Category
    text: str = ""
    scenario: Optional[str] = None
    reversed: bool = False

class CatalogConfig(BaseModel):
    version: str
    released_at: str
    meta: MetaConfig = Field(default_factory=MetaConfig)
    categories: List[CategoryDefinition]
    questions: List[Question]


# --- Input ---

class Response(OutputModel):
    question_id: str
    value: Any  # range and type are checked by the validator, not here
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# --- Role mapping ---

class RoleMapping(OutputModel):
    code: str
    roles: Tuple[StartupRole, ...]
    description: str
    strengths: Tuple[str, ...]
    challenges: Tuple[str, ...]

class RoleMatch(OutputModel):
    kind: Literal["exact", "partial", "inferred"]
    roles: List[StartupRole]
    mapping: Optional[RoleMapping] = None


# --- Output ---

class StartupFit(OutputModel):
    ideal_roles: List[StartupRole]
    strengths: List[str]
    potential_challenges: List[str]

class WorkEnvironment(OutputModel):
    preferred: List[str]
    to_avoid: List[str]

class Interpretation(OutputModel):
    dominant_traits: List[str]
    startup_fit: StartupFit
    work_environment: WorkEnvironment
    decision_making_style: str

class Profile(OutputModel):
    scores: Dict[Category, int]
    primary_code: str
    percentiles: Dict[Category, int]
    interpretation: Interpretation
    weak_traits: List[Category] = Field(default_factory=list)
    complementary_roles: List[StartupRole] = Field(default_factory=list)
    version: str = "1.0"

class ValidationReport(OutputModel):
    valid: bool
    errors: List[str]


# --- Sessions ---

SessionStatus = Literal["in_progress", "completed", "abandoned"]

class AssessmentMetadata(OutputModel):
    user_id: str
    started_at: datetime
    completed_at: datetime
    version: str
    duration: int  # seconds

class AssessmentSession(OutputModel):
    session_id: str
    user_id: str
    assessment_type: Literal["riasec"] = "riasec"
    status: SessionStatus = "in_progress"
    responses: Tuple[Response, ...] = ()
    started_at: datetime
    completed_at: Optional[datetime] = None
    metadata: Optional[AssessmentMetadata] = None
