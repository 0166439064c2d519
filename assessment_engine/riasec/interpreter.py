# assessment_engine/riasec/interpreter.py
# Turns normalized RIASEC scores into startup-relevant statements.

import logging
from typing import Callable, FrozenSet, List, Mapping, Sequence, Tuple

from .definitions import DOMINANT_THRESHOLD, TRAIT_DESCRIPTIONS, WEAK_THRESHOLD
from .models import (
    Category,
    Interpretation,
    RoleMapping,
    StartupFit,
    WorkEnvironment,
)
from .scorer import identify_dominant_traits, rank_categories
from .startup_mapping import ROLE_MAPPINGS, get_startup_roles

logger = logging.getLogger(__name__)

R, I, A, S, E, C = Category.R, Category.I, Category.A, Category.S, Category.E, Category.C

COMBINATION_THRESHOLD = 65
ENVIRONMENT_THRESHOLD = 65

Scores = Mapping[Category, int]
Predicate = Callable[[Scores], bool]
PhraseRule = Tuple[Predicate, Tuple[str, ...]]


def above(threshold: int, *categories: Category) -> Predicate:
    return lambda scores: all(scores[c] > threshold for c in categories)

def below(threshold: int, *categories: Category) -> Predicate:
    return lambda scores: all(scores[c] < threshold for c in categories)


# --- Rule tables ---
# Rules are evaluated in order and every matching rule contributes its phrases.

STRENGTH_RULES: Tuple[PhraseRule, ...] = (
    (above(DOMINANT_THRESHOLD, E), (
        "Natural leadership and vision-setting capabilities",
        "Excellent at fundraising, pitching, and persuasion",
        "Comfortable with risk and ambiguity",
        "Strong business development and partnership skills",
    )),
    (above(DOMINANT_THRESHOLD, I), (
        "Data-driven decision making and analytical thinking",
        "Deep problem-solving capabilities",
        "Research and technical due diligence skills",
        "Strategic thinking and pattern recognition",
    )),
    (above(DOMINANT_THRESHOLD, A), (
        "Innovative thinking and creative problem-solving",
        "Strong product vision and differentiation",
        "Brand building and storytelling capabilities",
        "Comfortable pivoting and adapting",
    )),
    (above(DOMINANT_THRESHOLD, S), (
        "Exceptional team building and culture development",
        "Strong networking and relationship building",
        "Customer empathy and user research skills",
        "Effective collaboration and partnership development",
    )),
    (above(DOMINANT_THRESHOLD, R), (
        "Hands-on product development and prototyping",
        "Technical problem-solving and troubleshooting",
        "Practical, results-oriented approach",
        "Strong in physical product or hardware startups",
    )),
    (above(DOMINANT_THRESHOLD, C), (
        "Excellent operational management and execution",
        "Financial discipline and metrics tracking",
        "Process optimization and scalability",
        "Strong compliance and risk management",
    )),
    (above(COMBINATION_THRESHOLD, E, I), ("Unique combination: Strategic leadership with analytical depth",)),
    (above(COMBINATION_THRESHOLD, A, I), ("Unique combination: Creative innovation backed by research",)),
    (above(COMBINATION_THRESHOLD, E, S), ("Unique combination: Charismatic leadership with people skills",)),
)

CHALLENGE_RULES: Tuple[PhraseRule, ...] = (
    (below(WEAK_THRESHOLD, C), (
        "May struggle with operational details and processes",
        "Financial management and metrics tracking might need attention",
        "Consider hiring strong operations support early",
    )),
    (below(WEAK_THRESHOLD, S), (
        "Team building and people management may be challenging",
        "Networking and relationship building might feel draining",
        "Consider a people-focused co-founder or HR leader",
    )),
    (below(WEAK_THRESHOLD, E), (
        "Fundraising and pitching may be uncomfortable",
        "Leadership and decision-making might be challenging",
        "Sales and business development may need support",
        "Consider partnering with a strong business leader",
    )),
    (below(WEAK_THRESHOLD, A), (
        "Innovation and creative thinking may be limited",
        "May miss opportunities for differentiation",
        "Pivoting and adapting to change could be difficult",
        "Consider creative co-founder or advisor",
    )),
    (below(WEAK_THRESHOLD, I), (
        "May make decisions without sufficient analysis",
        "Strategic planning and research might be weak",
        "Technical due diligence may need support",
    )),
    (below(WEAK_THRESHOLD, R), (
        "Hands-on product development may not be natural",
        "Technical troubleshooting might require support",
        "More suited to service/software than physical products",
    )),
    (below(WEAK_THRESHOLD, C, E), (
        "⚠️ Critical gap: Low on both organization AND leadership - strongly consider co-founder",
    )),
    (below(WEAK_THRESHOLD, I, A), (
        "⚠️ May struggle with both innovation and analysis - seek diverse team",
    )),
)

# (predicate, preferred, to avoid)
WORK_ENVIRONMENT_RULES: Tuple[Tuple[Predicate, Tuple[str, ...], Tuple[str, ...]], ...] = (
    (above(ENVIRONMENT_THRESHOLD, A), (
        "Flexible, creative environments",
        "Autonomy and freedom to innovate",
        "Fast-paced, dynamic settings",
    ), (
        "Highly structured, bureaucratic organizations",
        "Rigid processes and procedures",
    )),
    (above(ENVIRONMENT_THRESHOLD, C), (
        "Well-organized, structured environments",
        "Clear roles and responsibilities",
        "Established processes and systems",
    ), (
        "Chaotic, constantly changing environments",
        "Lack of structure or clarity",
    )),
    (above(ENVIRONMENT_THRESHOLD, S), (
        "Collaborative, team-oriented culture",
        "People-centric organization",
        "Opportunities for mentoring and teaching",
    ), (
        "Highly competitive, cutthroat environments",
        "Isolated, solo work",
    )),
    (above(ENVIRONMENT_THRESHOLD, E), (
        "High-growth, ambitious environments",
        "Leadership opportunities",
        "Competitive, results-driven culture",
    ), (
        "Slow-moving, bureaucratic settings",
        "Limited autonomy or decision-making power",
    )),
    (above(ENVIRONMENT_THRESHOLD, I), (
        "Intellectually stimulating environment",
        "Time for deep work and analysis",
        "Research-oriented culture",
    ), (
        "Superficial, action-without-thought culture",
        "Constant interruptions and context switching",
    )),
    (above(ENVIRONMENT_THRESHOLD, R), (
        "Hands-on, practical work environments",
        "Access to tools and equipment",
        "Focus on tangible results",
    ), (
        "Abstract, theoretical-only work",
        "Excessive meetings and discussions",
    )),
)

# Checked in order against the unordered top-2 categories
DECISION_STYLE_PAIRS: Tuple[Tuple[FrozenSet[Category], str], ...] = (
    (frozenset({I, E}), "Strategic and analytical, but action-oriented - balances research with decisiveness"),
    (frozenset({E, A}), "Visionary and bold - makes quick, intuitive decisions based on big picture thinking"),
    (frozenset({I, C}), "Highly analytical and methodical - prefers data-driven, systematic decision-making"),
    (frozenset({S, E}), "Collaborative but decisive - seeks input from others but takes clear action"),
    (frozenset({A, I}), "Creative problem-solver - combines innovative thinking with analytical rigor"),
    (frozenset({C, E}), "Process-oriented leader - structures decisions with clear frameworks and execution"),
)
DECISION_STYLE_SINGLES: Tuple[Tuple[Category, str], ...] = (
    (R, "Practical and hands-on - prefers concrete evidence and tangible results"),
)
BALANCED_DECISION_STYLE = "Balanced decision-maker - considers multiple perspectives before acting"


def accumulate_phrases(rules: Sequence[PhraseRule], scores: Scores) -> List[str]:
    phrases: List[str] = []
    for predicate, rule_phrases in rules:
        if predicate(scores):
            phrases.extend(rule_phrases)
    return phrases


def identify_startup_strengths(scores: Scores) -> List[str]:
    return accumulate_phrases(STRENGTH_RULES, scores)


def identify_startup_challenges(scores: Scores) -> List[str]:
    return accumulate_phrases(CHALLENGE_RULES, scores)


def determine_work_environment(scores: Scores) -> WorkEnvironment:
    preferred: List[str] = []
    to_avoid: List[str] = []
    for predicate, preferred_phrases, avoid_phrases in WORK_ENVIRONMENT_RULES:
        if predicate(scores):
            preferred.extend(preferred_phrases)
            to_avoid.extend(avoid_phrases)
    return WorkEnvironment(preferred=preferred, to_avoid=to_avoid)


def infer_decision_making_style(scores: Scores) -> str:
    top_two = frozenset(rank_categories(scores)[:2])
    for pair, style in DECISION_STYLE_PAIRS:
        if pair == top_two:
            return style
    for category, style in DECISION_STYLE_SINGLES:
        if category in top_two:
            return style
    return BALANCED_DECISION_STYLE


def get_trait_description(category: Category) -> str:
    return TRAIT_DESCRIPTIONS.get(category, category.value)


def analyze_startup_fit(
    scores: Scores,
    code: str,
    mappings: Sequence[RoleMapping] = ROLE_MAPPINGS,
) -> StartupFit:
    return StartupFit(
        ideal_roles=get_startup_roles(code, scores, mappings),
        strengths=identify_startup_strengths(scores),
        potential_challenges=identify_startup_challenges(scores),
    )


def interpret_profile(
    scores: Scores,
    code: str,
    mappings: Sequence[RoleMapping] = ROLE_MAPPINGS,
) -> Interpretation:
    """Full interpretation of a scored profile. Pure: same input, same output."""
    dominant = identify_dominant_traits(scores)
    interpretation = Interpretation(
        dominant_traits=[get_trait_description(trait) for trait in dominant],
        startup_fit=analyze_startup_fit(scores, code, mappings),
        work_environment=determine_work_environment(scores),
        decision_making_style=infer_decision_making_style(scores),
    )
    logger.debug(f"Interpreted code {code}: {len(dominant)} dominant traits, roles {interpretation.startup_fit.ideal_roles}")
    return interpretation
