from itertools import permutations

import pytest

from assessment_engine.riasec.definitions import ROLE_DESCRIPTIONS
from assessment_engine.riasec.models import CANONICAL_ORDER, RoleMapping, StartupRole
from assessment_engine.riasec.startup_mapping import (
    ROLE_MAPPINGS,
    find_exact_match,
    find_partial_match,
    get_complementary_roles,
    get_role_description,
    get_startup_roles,
    infer_roles_from_scores,
    resolve_role_match,
    shared_letter_count,
)


def mapping(code, *roles):
    return RoleMapping(
        code=code,
        roles=roles,
        description=f"{code} archetype",
        strengths=("Strength",),
        challenges=("Challenge",),
    )


def test_default_table_codes_are_unique_and_well_formed():
    codes = [m.code for m in ROLE_MAPPINGS]
    assert len(codes) == len(set(codes)) == 10
    for code in codes:
        assert len(code) == 3 and len(set(code)) == 3
        assert set(code) <= {c.value for c in CANONICAL_ORDER}


def test_exact_match(flat_scores):
    match = resolve_role_match("EIA", flat_scores())
    assert match.kind == "exact"
    assert match.roles == [StartupRole.VISIONARY_FOUNDER, StartupRole.CREATIVE_DIRECTOR]
    assert match.mapping.description == "Bold visionary who combines leadership with innovation"


@pytest.mark.parametrize("code, roles", [
    ("CER", [StartupRole.OPERATIONS_LEAD]),
    ("ICR", [StartupRole.DATA_SCIENTIST, StartupRole.TECHNICAL_FOUNDER]),
    ("ESC", [StartupRole.BUSINESS_DEVELOPER, StartupRole.OPERATIONS_LEAD]),
])
def test_exact_match_returns_table_roles(flat_scores, code, roles):
    assert get_startup_roles(code, flat_scores()) == roles


def test_letter_order_matters_for_exact_match():
    assert find_exact_match("AIE") is None
    assert find_exact_match("EAI").code == "EAI"


def test_shared_letter_count_ignores_position():
    assert shared_letter_count("ERC", "CER") == 3
    assert shared_letter_count("ERC", "ESC") == 2
    assert shared_letter_count("RIA", "SEC") == 0


def test_partial_match_uses_declaration_order(flat_scores):
    # ERC shares all letters with CER and two with ESC; CER is declared first
    match = resolve_role_match("ERC", flat_scores())
    assert match.kind == "partial"
    assert match.mapping.code == "CER"
    assert match.roles == [StartupRole.OPERATIONS_LEAD]


def test_partial_match_prefers_earlier_entry_over_better_overlap():
    # the first entry with two shared letters wins even though CER shares three
    table = (mapping("ESC", StartupRole.BUSINESS_DEVELOPER), mapping("CER", StartupRole.OPERATIONS_LEAD))
    assert find_partial_match("ERC", table).code == "ESC"
    assert find_partial_match("ERC", tuple(reversed(table))).code == "CER"


def test_single_partial_match_in_custom_table(flat_scores):
    table = (
        mapping("IRA", StartupRole.TECHNICAL_FOUNDER),
        mapping("SEC", StartupRole.PEOPLE_LEADER),
    )
    match = resolve_role_match("ECR", flat_scores(), table)
    assert match.kind == "partial"
    assert match.roles == [StartupRole.PEOPLE_LEADER]


def test_inference_when_no_entry_shares_two_letters(flat_scores):
    table = (mapping("IRA", StartupRole.TECHNICAL_FOUNDER),)
    scores = flat_scores(S=80, E=75, C=72)
    match = resolve_role_match("SEC", scores, table)
    assert match.kind == "inferred"
    assert match.mapping is None
    assert match.roles == infer_roles_from_scores(scores)
    assert match.roles


def test_every_code_matches_the_default_table(flat_scores):
    # every three-letter code shares two letters with some entry, so inference is never reached
    for letters in permutations([c.value for c in CANONICAL_ORDER], 3):
        match = resolve_role_match("".join(letters), flat_scores())
        assert match.kind in ("exact", "partial")


@pytest.mark.parametrize("overrides, expected", [
    ({"E": 80, "I": 65}, [StartupRole.GROWTH_STRATEGIST]),
    ({"E": 80, "A": 65}, [StartupRole.VISIONARY_FOUNDER]),
    ({"E": 80, "S": 65}, [StartupRole.BUSINESS_DEVELOPER]),
    ({"E": 80}, [StartupRole.GROWTH_STRATEGIST]),
    ({"I": 75, "R": 65}, [StartupRole.TECHNICAL_FOUNDER]),
    ({"I": 75, "A": 65}, [StartupRole.PRODUCT_BUILDER]),
    ({"I": 75, "C": 65}, [StartupRole.DATA_SCIENTIST]),
    ({"A": 75, "S": 65}, [StartupRole.CREATIVE_DIRECTOR]),
    ({"A": 75}, [StartupRole.PRODUCT_BUILDER]),
    ({"S": 75, "E": 65}, [StartupRole.PEOPLE_LEADER]),
    ({"S": 75, "A": 65}, [StartupRole.COMMUNITY_BUILDER]),
    ({"C": 75, "E": 65}, [StartupRole.OPERATIONS_LEAD]),
    ({"R": 75, "I": 65}, [StartupRole.TECHNICAL_FOUNDER]),
])
def test_inference_cascade_rules(flat_scores, overrides, expected):
    assert infer_roles_from_scores(flat_scores(**overrides)) == expected


def test_inference_blocks_are_independent(flat_scores):
    roles = infer_roles_from_scores(flat_scores(E=80, I=75, R=65))
    assert roles == [StartupRole.GROWTH_STRATEGIST, StartupRole.TECHNICAL_FOUNDER]


def test_inference_keeps_roles_from_every_block(flat_scores):
    roles = infer_roles_from_scores(flat_scores(E=80, I=75, R=75))
    assert roles == [
        StartupRole.GROWTH_STRATEGIST, StartupRole.TECHNICAL_FOUNDER, StartupRole.TECHNICAL_FOUNDER,
    ]


def test_inference_first_rule_in_block_wins(flat_scores):
    # E > 70 with both I and A above 60: only the first rule of the block applies
    assert infer_roles_from_scores(flat_scores(E=80, I=65, A=65)) == [StartupRole.GROWTH_STRATEGIST]


@pytest.mark.parametrize("overrides, expected", [
    ({"S": 60}, StartupRole.PEOPLE_LEADER),
    ({"C": 65}, StartupRole.OPERATIONS_LEAD),
    ({"I": 90}, StartupRole.PRODUCT_BUILDER),
    ({}, StartupRole.TECHNICAL_FOUNDER),
])
def test_inference_defaults_to_highest_category(flat_scores, overrides, expected):
    assert infer_roles_from_scores(flat_scores(**overrides)) == [expected]


def test_complementary_roles_are_deduplicated():
    roles = get_complementary_roles([StartupRole.VISIONARY_FOUNDER, StartupRole.CREATIVE_DIRECTOR])
    assert roles == [StartupRole.OPERATIONS_LEAD, StartupRole.TECHNICAL_FOUNDER, StartupRole.DATA_SCIENTIST]


def test_complementary_roles_default():
    assert get_complementary_roles([StartupRole.BUSINESS_DEVELOPER]) == [
        StartupRole.OPERATIONS_LEAD, StartupRole.BUSINESS_DEVELOPER,
    ]
    assert get_complementary_roles([]) == []


def test_every_role_has_a_description():
    for role in StartupRole:
        assert role in ROLE_DESCRIPTIONS
        assert get_role_description(role) != "Startup leader"
