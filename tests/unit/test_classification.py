"""Unit tests for category to panel type classification."""

import pytest

from packages.algorithms.src.classification import (
    CATEGORY_PANEL_MAPPING,
    RED_TEAM_ALLOWLIST,
    coerce_panel_type,
    get_all_panel_types,
    get_panel_type_info,
    get_primary_panel_type,
    is_eligible,
    is_red_team_eligible,
)
from packages.core.src.errors import UnknownPanelTypeError
from packages.core.src.types import Category, PanelType


class TestPrimaryPanelType:
    """Tests for get_primary_panel_type."""

    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            (Category.INVESTMENT_FINANCE, PanelType.BLUE_TEAM),
            (Category.MARKETING_BRAND, PanelType.BLUE_TEAM),
            (Category.HR_TALENT, PanelType.BLUE_TEAM),
            (Category.LEFT_FIELD, PanelType.LEFT_FIELD),
            (Category.CELEBRITY_CROSSOVER, PanelType.LEFT_FIELD),
            (Category.MEDIA_ENTERTAINMENT, PanelType.LEFT_FIELD),
            (Category.REGIONAL_SPECIALISTS, PanelType.LEFT_FIELD),
            (Category.GOVERNMENT_POLICY, PanelType.RED_TEAM),
        ],
    )
    def test_category_mapping(self, make_expert, category, expected):
        """Should map categories through the static table."""
        assert get_primary_panel_type(make_expert("x-001", category)) == expected

    def test_unmapped_category_falls_back_to_blue_team(self, make_expert):
        """Strategic Leadership has no table entry and defaults to Blue Team."""
        expert = make_expert("sl-001", Category.STRATEGIC_LEADERSHIP)
        assert get_primary_panel_type(expert) == PanelType.BLUE_TEAM

    def test_only_documented_fallback_is_unmapped(self):
        """Every category is mapped explicitly except the documented fallback."""
        unmapped = set(Category) - set(CATEGORY_PANEL_MAPPING)
        assert unmapped == {Category.STRATEGIC_LEADERSHIP}

    def test_allowlist_does_not_change_primary(self, make_expert):
        """Allowlisted experts keep their category-derived primary panel."""
        expert = make_expert("inv-002", Category.INVESTMENT_FINANCE)
        assert get_primary_panel_type(expert) == PanelType.BLUE_TEAM


class TestAllPanelTypes:
    """Tests for get_all_panel_types."""

    def test_plain_blue_expert(self, make_expert):
        """Non-allowlisted Blue expert sits on Blue Team only."""
        assert get_all_panel_types(make_expert("tech-001")) == [PanelType.BLUE_TEAM]

    def test_allowlisted_blue_expert_adds_red_team(self, make_expert):
        """Allowlisted expert gains Red Team after its primary."""
        expert = make_expert("inv-002", Category.INVESTMENT_FINANCE)
        assert get_all_panel_types(expert) == [PanelType.BLUE_TEAM, PanelType.RED_TEAM]

    def test_allowlisted_government_expert_has_no_duplicate(self, make_expert):
        """Red Team primary plus allowlist yields Red Team once."""
        expert = make_expert("gov-001", Category.GOVERNMENT_POLICY)
        assert get_all_panel_types(expert) == [PanelType.RED_TEAM]

    def test_left_field_category_has_no_duplicate(self, make_expert):
        """Left Field category is primary Left-Field, not listed twice."""
        expert = make_expert("lf-001", Category.LEFT_FIELD)
        assert get_all_panel_types(expert) == [PanelType.LEFT_FIELD]

    def test_allowlisted_crossover_keeps_order(self, make_expert):
        """Primary first, then Red Team, and Left-Field is not repeated."""
        expert = make_expert("ent-005", Category.CELEBRITY_CROSSOVER)
        assert get_all_panel_types(expert) == [PanelType.LEFT_FIELD, PanelType.RED_TEAM]

    def test_no_duplicates_across_catalog(self, panel_catalog):
        """No expert lists the same panel type twice."""
        for expert in panel_catalog:
            panels = get_all_panel_types(expert)
            assert panels[0] == get_primary_panel_type(expert)
            assert len(panels) == len(set(panels))


class TestEligibility:
    """Tests for panel eligibility rules."""

    def test_red_team_override_ignores_category_table(self, make_expert):
        """Marketing maps to Blue and is not Red Team eligible unless allowlisted."""
        marketer = make_expert("mkt-001", Category.MARKETING_BRAND)
        assert not is_red_team_eligible(marketer)
        assert not is_eligible(marketer, PanelType.RED_TEAM)

    def test_allowlisted_marketer_is_red_team_eligible(self, make_expert):
        """Allowlist admits an expert regardless of category."""
        marketer = make_expert("ent-002", Category.MARKETING_BRAND)
        assert "ent-002" in RED_TEAM_ALLOWLIST
        assert is_eligible(marketer, PanelType.RED_TEAM)

    def test_government_is_red_team_eligible(self, make_expert):
        """Government & Policy is always Red Team eligible."""
        assert is_eligible(make_expert("gov-009", Category.GOVERNMENT_POLICY), PanelType.RED_TEAM)

    def test_government_is_not_blue_team_eligible(self, make_expert):
        """Government & Policy experts are Red Team primary only."""
        expert = make_expert("gov-009", Category.GOVERNMENT_POLICY)
        assert not is_eligible(expert, PanelType.BLUE_TEAM)


class TestPanelTypeHelpers:
    """Tests for coercion and display metadata."""

    def test_coerce_accepts_string_value(self):
        """String values resolve to the enum member."""
        assert coerce_panel_type("red_team") is PanelType.RED_TEAM

    def test_coerce_passes_enum_through(self):
        """Enum members are returned unchanged."""
        assert coerce_panel_type(PanelType.LEFT_FIELD) is PanelType.LEFT_FIELD

    @pytest.mark.parametrize("value", ["purple_team", "Blue Team", "", None, 3])
    def test_coerce_rejects_unknown_values(self, value):
        """Unknown values are a caller error."""
        with pytest.raises(UnknownPanelTypeError) as exc_info:
            coerce_panel_type(value)
        assert exc_info.value.code == "UNKNOWN_PANEL_TYPE"

    def test_panel_type_info(self):
        """Display metadata is available for each panel type."""
        info = get_panel_type_info("red_team")
        assert info.code == PanelType.RED_TEAM
        assert info.name == "Red Team"
        assert {get_panel_type_info(p).name for p in PanelType} == {
            "Blue Team",
            "Left-Field Panel",
            "Red Team",
        }
