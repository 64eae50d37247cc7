"""Category Classification for Panel Membership.

Maps each expert to the panel types it can sit on:
- Primary panel type comes from a static category table
- Secondary panel types come from the Red Team allowlist and the
  Left-Field crossover categories

Primary membership is single-valued and drives aggregate statistics.
The full list is for eligibility checks only.
"""

from __future__ import annotations

from typing import Any

from packages.core.src.errors import UnknownPanelTypeError
from packages.core.src.types import Category, Expert, PanelType, PanelTypeInfo

# Category to primary panel type. Categories missing here fall back to Blue Team.
CATEGORY_PANEL_MAPPING: dict[Category, PanelType] = {
    # Blue Team - core business expertise
    Category.INVESTMENT_FINANCE: PanelType.BLUE_TEAM,
    Category.ENTREPRENEURSHIP_STRATEGY: PanelType.BLUE_TEAM,
    Category.LEGAL_COMPLIANCE: PanelType.BLUE_TEAM,
    Category.TAX_ACCOUNTING: PanelType.BLUE_TEAM,
    Category.OPERATIONS_SUPPLY_CHAIN: PanelType.BLUE_TEAM,
    Category.TECHNOLOGY_AI: PanelType.BLUE_TEAM,
    Category.HEALTHCARE_BIOTECH: PanelType.BLUE_TEAM,
    Category.REAL_ESTATE: PanelType.BLUE_TEAM,
    Category.ENERGY_SUSTAINABILITY: PanelType.BLUE_TEAM,
    Category.HR_TALENT: PanelType.BLUE_TEAM,
    Category.MARKETING_BRAND: PanelType.BLUE_TEAM,
    # Left-Field - diverse perspectives
    Category.LEFT_FIELD: PanelType.LEFT_FIELD,
    Category.CELEBRITY_CROSSOVER: PanelType.LEFT_FIELD,
    Category.MEDIA_ENTERTAINMENT: PanelType.LEFT_FIELD,
    Category.REGIONAL_SPECIALISTS: PanelType.LEFT_FIELD,
    # Red Team - challenge and critique
    Category.GOVERNMENT_POLICY: PanelType.RED_TEAM,
}

DEFAULT_PANEL_TYPE = PanelType.BLUE_TEAM

# Experts suited to Red Team work regardless of category
RED_TEAM_ALLOWLIST: frozenset[str] = frozenset(
    {
        "inv-002",  # Risk management focus
        "inv-003",  # Contrarian
        "inv-006",  # Due diligence
        "inv-007",  # Risk assessment
        "ent-002",  # Challenges status quo
        "ent-005",  # Failure analysis
        "leg-001",  # Litigation
        "leg-003",  # Regulatory risk
        "leg-005",  # Privacy risk
        "leg-006",  # IP protection
        "gov-001",  # Policy risk
        "gov-002",  # Regulatory challenges
        "gov-003",  # Security risk
    }
)

# Categories that can always also sit on the Left-Field panel
LEFT_FIELD_CATEGORIES: frozenset[Category] = frozenset(
    {Category.LEFT_FIELD, Category.CELEBRITY_CROSSOVER}
)

# Categories whose members are always Red Team eligible
RED_TEAM_CATEGORIES: frozenset[Category] = frozenset({Category.GOVERNMENT_POLICY})

PANEL_TYPE_INFO: dict[PanelType, PanelTypeInfo] = {
    PanelType.BLUE_TEAM: PanelTypeInfo(
        code=PanelType.BLUE_TEAM,
        name="Blue Team",
        description="Primary expert panel that builds the case",
        role=(
            "Core expertise, analysis, and recommendations. These experts provide "
            "the foundational work and primary deliverables."
        ),
    ),
    PanelType.LEFT_FIELD: PanelTypeInfo(
        code=PanelType.LEFT_FIELD,
        name="Left-Field Panel",
        description="Cross-sector perspectives and unexpected insights",
        role=(
            "Bring diverse viewpoints from other industries, creative thinking, and "
            "unconventional approaches that the Blue Team might miss."
        ),
    ),
    PanelType.RED_TEAM: PanelTypeInfo(
        code=PanelType.RED_TEAM,
        name="Red Team",
        description="Devil's Advocate - challenges and stress-tests",
        role=(
            "Challenge assumptions, identify risks, find flaws in logic, and "
            "stress-test proposals. Essential for pre-mortems and quality gates."
        ),
    ),
}


def coerce_panel_type(value: Any) -> PanelType:
    """Accept a PanelType or its string value.

    Raises:
        UnknownPanelTypeError: For anything else
    """
    if isinstance(value, PanelType):
        return value
    try:
        return PanelType(value)
    except ValueError as e:
        raise UnknownPanelTypeError(value) from e


def get_primary_panel_type(expert: Expert) -> PanelType:
    """Primary panel type, from the expert's category alone."""
    return CATEGORY_PANEL_MAPPING.get(expert.category, DEFAULT_PANEL_TYPE)


def get_all_panel_types(expert: Expert) -> list[PanelType]:
    """Every panel type the expert can sit on, primary first."""
    panels = [get_primary_panel_type(expert)]

    if expert.id in RED_TEAM_ALLOWLIST and PanelType.RED_TEAM not in panels:
        panels.append(PanelType.RED_TEAM)

    if expert.category in LEFT_FIELD_CATEGORIES and PanelType.LEFT_FIELD not in panels:
        panels.append(PanelType.LEFT_FIELD)

    return panels


def is_red_team_eligible(expert: Expert) -> bool:
    """Red Team override rule: allowlist or Government & Policy.

    Ignores the category table entirely.
    """
    return expert.id in RED_TEAM_ALLOWLIST or expert.category in RED_TEAM_CATEGORIES


def is_eligible(expert: Expert, panel_type: PanelType) -> bool:
    """Whether the expert may be selected for a panel of this type."""
    if panel_type == PanelType.RED_TEAM:
        return is_red_team_eligible(expert)
    return panel_type in get_all_panel_types(expert)


def get_panel_type_info(panel_type: PanelType | str) -> PanelTypeInfo:
    return PANEL_TYPE_INFO[coerce_panel_type(panel_type)]
