# assessment_engine/riasec/startup_mapping.py
# Maps Holland codes to startup role archetypes.

import logging
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .definitions import ROLE_DESCRIPTIONS
from .models import Category, RoleMapping, RoleMatch, StartupRole
from .scorer import rank_categories

logger = logging.getLogger(__name__)

R, I, A, S, E, C = Category.R, Category.I, Category.A, Category.S, Category.E, Category.C

# Declaration order matters: the first entry sharing two letters wins a partial match.
ROLE_MAPPINGS: Tuple[RoleMapping, ...] = (
    RoleMapping(
        code="EIA",
        roles=(StartupRole.VISIONARY_FOUNDER, StartupRole.CREATIVE_DIRECTOR),
        description="Bold visionary who combines leadership with innovation",
        strengths=("Strategic vision", "Innovation", "Persuasion", "Creativity"),
        challenges=("Execution details", "Process management", "Operational discipline"),
    ),
    RoleMapping(
        code="EIS",
        roles=(StartupRole.GROWTH_STRATEGIST, StartupRole.BUSINESS_DEVELOPER),
        description="Strategic leader who excels at growth and partnerships",
        strengths=("Strategic thinking", "Relationship building", "Data-driven decisions", "Networking"),
        challenges=("Technical depth", "Creative innovation", "Hands-on execution"),
    ),
    RoleMapping(
        code="IRA",
        roles=(StartupRole.TECHNICAL_FOUNDER, StartupRole.PRODUCT_BUILDER),
        description="Technical innovator who builds breakthrough products",
        strengths=("Technical expertise", "Problem-solving", "Innovation", "Hands-on building"),
        challenges=("Sales and marketing", "Team management", "Business development"),
    ),
    RoleMapping(
        code="AES",
        roles=(StartupRole.CREATIVE_DIRECTOR, StartupRole.COMMUNITY_BUILDER),
        description="Creative leader who builds engaged communities",
        strengths=("Brand building", "Community engagement", "Creative vision", "People skills"),
        challenges=("Technical implementation", "Financial management", "Operational systems"),
    ),
    RoleMapping(
        code="CER",
        roles=(StartupRole.OPERATIONS_LEAD,),
        description="Operational excellence leader who scales efficiently",
        strengths=("Process optimization", "Execution", "Financial discipline", "Systems thinking"),
        challenges=("Disruptive innovation", "Creative thinking", "Ambiguity tolerance"),
    ),
    RoleMapping(
        code="IAS",
        roles=(StartupRole.PRODUCT_BUILDER, StartupRole.DATA_SCIENTIST),
        description="Analytical innovator with strong user empathy",
        strengths=("User research", "Data analysis", "Product design", "Innovation"),
        challenges=("Sales and pitching", "Rapid execution", "Leadership"),
    ),
    RoleMapping(
        code="SEA",
        roles=(StartupRole.PEOPLE_LEADER, StartupRole.COMMUNITY_BUILDER),
        description="People-focused leader who builds strong cultures",
        strengths=("Team building", "Culture development", "Networking", "Creative thinking"),
        challenges=("Technical depth", "Financial management", "Hard decisions"),
    ),
    RoleMapping(
        code="ICR",
        roles=(StartupRole.DATA_SCIENTIST, StartupRole.TECHNICAL_FOUNDER),
        description="Technical analyst who excels at data-driven solutions",
        strengths=("Data analysis", "Technical skills", "Systematic thinking", "Quality focus"),
        challenges=("Innovation", "People management", "Sales and marketing"),
    ),
    RoleMapping(
        code="EAI",
        roles=(StartupRole.VISIONARY_FOUNDER,),
        description="Charismatic innovator who sees the future",
        strengths=("Vision", "Innovation", "Persuasion", "Strategic thinking"),
        challenges=("Execution", "Process", "Details", "Patience with incremental progress"),
    ),
    RoleMapping(
        code="ESC",
        roles=(StartupRole.BUSINESS_DEVELOPER, StartupRole.OPERATIONS_LEAD),
        description="Relationship-driven leader with operational skills",
        strengths=("Partnership building", "Process management", "Team coordination", "Execution"),
        challenges=("Deep technical work", "Disruptive innovation", "R&D"),
    ),
)

PARTIAL_MATCH_MIN_SHARED = 2

Scores = Mapping[Category, int]

# --- Score-inference cascade ---
# Each block is evaluated independently; within a block the first matching rule wins.
InferenceRule = Tuple[Callable[[Scores], bool], StartupRole]

INFERENCE_BLOCKS: Tuple[Tuple[InferenceRule, ...], ...] = (
    (
        (lambda s: s[E] > 70 and s[I] > 60, StartupRole.GROWTH_STRATEGIST),
        (lambda s: s[E] > 70 and s[A] > 60, StartupRole.VISIONARY_FOUNDER),
        (lambda s: s[E] > 70 and s[S] > 60, StartupRole.BUSINESS_DEVELOPER),
        (lambda s: s[E] > 70, StartupRole.GROWTH_STRATEGIST),
    ),
    (
        (lambda s: s[I] > 70 and s[R] > 60, StartupRole.TECHNICAL_FOUNDER),
        (lambda s: s[I] > 70 and s[A] > 60, StartupRole.PRODUCT_BUILDER),
        (lambda s: s[I] > 70 and s[C] > 60, StartupRole.DATA_SCIENTIST),
    ),
    (
        (lambda s: s[A] > 70 and s[S] > 60, StartupRole.CREATIVE_DIRECTOR),
        (lambda s: s[A] > 70, StartupRole.PRODUCT_BUILDER),
    ),
    (
        (lambda s: s[S] > 70 and s[E] > 60, StartupRole.PEOPLE_LEADER),
        (lambda s: s[S] > 70 and s[A] > 60, StartupRole.COMMUNITY_BUILDER),
    ),
    (
        (lambda s: s[C] > 70 and s[E] > 60, StartupRole.OPERATIONS_LEAD),
    ),
    (
        (lambda s: s[R] > 70 and s[I] > 60, StartupRole.TECHNICAL_FOUNDER),
    ),
)

DEFAULT_ROLE_BY_CATEGORY = {
    E: StartupRole.GROWTH_STRATEGIST,
    I: StartupRole.PRODUCT_BUILDER,
    A: StartupRole.CREATIVE_DIRECTOR,
    S: StartupRole.PEOPLE_LEADER,
    C: StartupRole.OPERATIONS_LEAD,
    R: StartupRole.TECHNICAL_FOUNDER,
}

COMPLEMENTARY_ROLES = {
    StartupRole.VISIONARY_FOUNDER: (StartupRole.OPERATIONS_LEAD, StartupRole.TECHNICAL_FOUNDER),
    StartupRole.TECHNICAL_FOUNDER: (StartupRole.BUSINESS_DEVELOPER, StartupRole.PEOPLE_LEADER),
    StartupRole.CREATIVE_DIRECTOR: (StartupRole.OPERATIONS_LEAD, StartupRole.DATA_SCIENTIST),
    StartupRole.OPERATIONS_LEAD: (StartupRole.VISIONARY_FOUNDER, StartupRole.CREATIVE_DIRECTOR),
    StartupRole.PEOPLE_LEADER: (StartupRole.TECHNICAL_FOUNDER, StartupRole.DATA_SCIENTIST),
    StartupRole.GROWTH_STRATEGIST: (StartupRole.PRODUCT_BUILDER, StartupRole.TECHNICAL_FOUNDER),
}
DEFAULT_COMPLEMENTARY_ROLES = (StartupRole.OPERATIONS_LEAD, StartupRole.BUSINESS_DEVELOPER)


def shared_letter_count(code: str, other: str) -> int:
    """Letters of `code` that also appear in `other`, ignoring position."""
    return sum(1 for letter in code if letter in other)


def find_exact_match(code: str, mappings: Sequence[RoleMapping] = ROLE_MAPPINGS) -> Optional[RoleMapping]:
    return next((mapping for mapping in mappings if mapping.code == code), None)


def find_partial_match(code: str, mappings: Sequence[RoleMapping] = ROLE_MAPPINGS) -> Optional[RoleMapping]:
    """First entry, in declaration order, sharing at least two letters with `code`."""
    return next(
        (mapping for mapping in mappings if shared_letter_count(code, mapping.code) >= PARTIAL_MATCH_MIN_SHARED),
        None,
    )


def infer_roles_from_scores(scores: Scores) -> List[StartupRole]:
    """
    Threshold cascade over individual dimension scores. Always returns at least
    one role: when no rule fires, the highest category's default role is used.
    """
    roles: List[StartupRole] = []
    for block in INFERENCE_BLOCKS:
        for predicate, role in block:
            if predicate(scores):
                roles.append(role)
                break

    if not roles:
        highest = rank_categories(scores)[0]
        roles.append(DEFAULT_ROLE_BY_CATEGORY[highest])

    return roles


def resolve_role_match(
    code: str,
    scores: Scores,
    mappings: Sequence[RoleMapping] = ROLE_MAPPINGS,
) -> RoleMatch:
    """
    Resolves a Holland code to roles: exact table entry, else first partial
    entry, else inference from the individual scores.
    """
    exact = find_exact_match(code, mappings)
    if exact is not None:
        return RoleMatch(kind="exact", roles=list(exact.roles), mapping=exact)

    partial = find_partial_match(code, mappings)
    if partial is not None:
        logger.debug(f"No exact role mapping for '{code}', using partial match '{partial.code}'")
        return RoleMatch(kind="partial", roles=list(partial.roles), mapping=partial)

    logger.debug(f"No role mapping shares two letters with '{code}', inferring from scores")
    return RoleMatch(kind="inferred", roles=infer_roles_from_scores(scores))


def get_startup_roles(
    code: str,
    scores: Scores,
    mappings: Sequence[RoleMapping] = ROLE_MAPPINGS,
) -> List[StartupRole]:
    return resolve_role_match(code, scores, mappings).roles


def get_role_description(role: StartupRole) -> str:
    return ROLE_DESCRIPTIONS.get(role, "Startup leader")


def get_complementary_roles(primary_roles: Sequence[StartupRole]) -> List[StartupRole]:
    """Co-founder roles that balance the given roles, without duplicates."""
    complementary: List[StartupRole] = []
    for role in primary_roles:
        for candidate in COMPLEMENTARY_ROLES.get(role, DEFAULT_COMPLEMENTARY_ROLES):
            if candidate not in complementary:
                complementary.append(candidate)
    return complementary
