"""Panel Engine Type Definitions.

Domain types for expert catalog records and panel assembly results.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class Category(str, Enum):
    """Expert catalog categories. Values are the display names."""

    INVESTMENT_FINANCE = "Investment & Finance"
    ENTREPRENEURSHIP_STRATEGY = "Entrepreneurship & Strategy"
    LEGAL_COMPLIANCE = "Legal & Compliance"
    TAX_ACCOUNTING = "Tax & Accounting"
    MARKETING_BRAND = "Marketing & Brand"
    TECHNOLOGY_AI = "Technology & AI"
    OPERATIONS_SUPPLY_CHAIN = "Operations & Supply Chain"
    HEALTHCARE_BIOTECH = "Healthcare & Biotech"
    REAL_ESTATE = "Real Estate"
    ENERGY_SUSTAINABILITY = "Energy & Sustainability"
    MEDIA_ENTERTAINMENT = "Media & Entertainment"
    REGIONAL_SPECIALISTS = "Regional Specialists"
    GOVERNMENT_POLICY = "Government & Policy"
    HR_TALENT = "HR & Talent"
    LEFT_FIELD = "Left Field"
    CELEBRITY_CROSSOVER = "Celebrity Crossover"
    STRATEGIC_LEADERSHIP = "Strategic Leadership"


class PanelType(str, Enum):
    """Role a panel plays in a review."""

    BLUE_TEAM = "blue_team"  # Primary expertise, builds the case
    LEFT_FIELD = "left_field"  # Cross-sector, unconventional perspectives
    RED_TEAM = "red_team"  # Devil's advocate, challenges and stress-tests


class ExpertStatus(str, Enum):
    """Expert lifecycle status."""

    ACTIVE = "active"
    TRAINING = "training"
    REVIEW = "review"
    INACTIVE = "inactive"


# =============================================================================
# Catalog Types
# =============================================================================


class Expert(BaseModel):
    """A single expert persona from the catalog.

    Instances are frozen: panel computation never alters an expert.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    category: Category
    specialty: str = Field(default="")
    bio: str = Field(default="")
    performance_score: float = Field(..., ge=0, le=100)
    status: ExpertStatus = Field(default=ExpertStatus.ACTIVE)
    last_used: date | None = Field(default=None)
    strengths: tuple[str, ...] = Field(default=())
    composite_of: tuple[str, ...] = Field(default=())


# =============================================================================
# Panel Types
# =============================================================================


class PanelTypeInfo(BaseModel):
    """Display metadata for a panel type."""

    model_config = ConfigDict(frozen=True)

    code: PanelType
    name: str
    description: str
    role: str


class ThreePanelTeam(BaseModel):
    """Blue Team, Left-Field and Red Team assembled for one topic.

    The three lists never share an expert id.
    """

    blue_team: list[Expert] = Field(default_factory=list)
    left_field: list[Expert] = Field(default_factory=list)
    red_team: list[Expert] = Field(default_factory=list)

    def panels(self) -> dict[PanelType, list[Expert]]:
        return {
            PanelType.BLUE_TEAM: self.blue_team,
            PanelType.LEFT_FIELD: self.left_field,
            PanelType.RED_TEAM: self.red_team,
        }

    def member_ids(self) -> list[str]:
        """Ids of every member, Blue Team first."""
        return [e.id for panel in self.panels().values() for e in panel]


class PhaseComposition(BaseModel):
    """Recommended panel mix for a workflow phase."""

    primary: PanelType
    secondary: list[PanelType] = Field(default_factory=list)


class PanelStats(BaseModel):
    """Summary statistics for one panel type."""

    count: int = Field(default=0, ge=0)
    avg_score: int = Field(default=0, ge=0)
