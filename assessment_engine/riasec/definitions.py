# assessment_engine/riasec/definitions.py
# Static reference data for the RIASEC engine: labels, population constants, role texts.

from typing import Dict, NamedTuple

from .models import Category, StartupRole

CATEGORY_NAMES: Dict[Category, str] = {
    Category.R: "Realistic",
    Category.I: "Investigative",
    Category.A: "Artistic",
    Category.S: "Social",
    Category.E: "Enterprising",
    Category.C: "Conventional",
}

# Used for the dominant-trait lines of the interpretation
TRAIT_DESCRIPTIONS: Dict[Category, str] = {
    Category.R: "Realistic - Hands-on, practical, technical orientation",
    Category.I: "Investigative - Analytical, research-oriented problem-solver",
    Category.A: "Artistic - Creative, innovative, visionary thinker",
    Category.S: "Social - People-oriented, collaborative team builder",
    Category.E: "Enterprising - Leadership-driven, persuasive opportunity-seeker",
    Category.C: "Conventional - Organized, systematic, detail-focused",
}


class ReferenceStat(NamedTuple):
    mean: float
    std_dev: float


# Entrepreneur reference population on the normalized 0-100 scale.
ENTREPRENEUR_REFERENCE: Dict[Category, ReferenceStat] = {
    Category.R: ReferenceStat(mean=45, std_dev=20),  # moderate on hands-on work
    Category.I: ReferenceStat(mean=65, std_dev=15),  # problem-solving
    Category.A: ReferenceStat(mean=70, std_dev=15),  # innovation
    Category.S: ReferenceStat(mean=60, std_dev=18),  # networking
    Category.E: ReferenceStat(mean=75, std_dev=12),  # leadership
    Category.C: ReferenceStat(mean=50, std_dev=20),  # structure
}

# Linear z-score to percentile slope; not a normal CDF.
PERCENTILE_SLOPE = 19.1

DOMINANT_THRESHOLD = 70
WEAK_THRESHOLD = 30

ROLE_DESCRIPTIONS: Dict[StartupRole, str] = {
    StartupRole.VISIONARY_FOUNDER: "Sets bold vision and drives innovation. Natural leader who inspires teams and investors with compelling future vision.",
    StartupRole.TECHNICAL_FOUNDER: "Deep technical expertise, builds core product. Combines technical skills with problem-solving to create breakthrough solutions.",
    StartupRole.GROWTH_STRATEGIST: "Drives growth through strategic initiatives. Data-driven leader who identifies opportunities and executes growth plans.",
    StartupRole.PRODUCT_BUILDER: "Creates innovative products users love. Combines creativity, technical skills, and user empathy to build great products.",
    StartupRole.PEOPLE_LEADER: "Builds high-performing teams and culture. Exceptional at recruiting, developing, and retaining top talent.",
    StartupRole.OPERATIONS_LEAD: "Scales operations efficiently. Creates systems and processes that enable rapid, sustainable growth.",
    StartupRole.CREATIVE_DIRECTOR: "Drives brand and creative vision. Builds distinctive brand identity and creates memorable user experiences.",
    StartupRole.BUSINESS_DEVELOPER: "Builds strategic partnerships and drives revenue. Excellent networker who creates win-win partnerships.",
    StartupRole.DATA_SCIENTIST: "Leverages data for insights and decisions. Analytical expert who turns data into competitive advantage.",
    StartupRole.COMMUNITY_BUILDER: "Builds engaged user communities. Creates passionate communities that drive growth through word-of-mouth.",
}
