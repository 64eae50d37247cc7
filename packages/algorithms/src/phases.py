"""Workflow Phase to Panel Composition Lookup."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

import structlog

from packages.core.src.types import PanelType, PhaseComposition

logger = structlog.get_logger()


class WorkflowPhase(IntEnum):
    """Value chain phases of a consultation workflow."""

    IDEATION = 1
    INNOVATION = 2
    DEVELOPMENT = 3
    GO_TO_MARKET = 4
    OPERATIONS = 5
    RETENTION = 6
    EXIT = 7


# (primary, secondary) panel mix per phase
PHASE_RECOMMENDED_PANELS: dict[WorkflowPhase, tuple[PanelType, tuple[PanelType, ...]]] = {
    WorkflowPhase.IDEATION: (PanelType.BLUE_TEAM, (PanelType.LEFT_FIELD,)),
    WorkflowPhase.INNOVATION: (PanelType.BLUE_TEAM, (PanelType.RED_TEAM, PanelType.LEFT_FIELD)),
    WorkflowPhase.DEVELOPMENT: (PanelType.BLUE_TEAM, (PanelType.RED_TEAM,)),
    WorkflowPhase.GO_TO_MARKET: (PanelType.BLUE_TEAM, (PanelType.LEFT_FIELD, PanelType.RED_TEAM)),
    WorkflowPhase.OPERATIONS: (PanelType.BLUE_TEAM, (PanelType.RED_TEAM,)),
    WorkflowPhase.RETENTION: (PanelType.BLUE_TEAM, (PanelType.LEFT_FIELD, PanelType.RED_TEAM)),
    WorkflowPhase.EXIT: (PanelType.RED_TEAM, (PanelType.BLUE_TEAM,)),  # due diligence focus
}

DEFAULT_COMPOSITION: tuple[PanelType, tuple[PanelType, ...]] = (PanelType.BLUE_TEAM, ())


def _lookup_phase(phase: Any) -> WorkflowPhase | None:
    # bool is an int subclass but never a phase number
    if isinstance(phase, bool):
        return None
    if isinstance(phase, float):
        if not phase.is_integer():
            return None
        phase = int(phase)
    elif not isinstance(phase, int):
        return None
    try:
        return WorkflowPhase(phase)
    except ValueError:
        return None


def recommend_panels_for_phase(phase: Any) -> PhaseComposition:
    """Recommended panel mix for a workflow phase (1-7).

    Integral floats such as ``3.0`` name the same phase as ``3``. Any other
    value gets Blue Team with no secondary panels.
    """
    workflow_phase = _lookup_phase(phase)
    if workflow_phase is None:
        logger.debug("unknown_phase_requested", phase=repr(phase))
        primary, secondary = DEFAULT_COMPOSITION
    else:
        primary, secondary = PHASE_RECOMMENDED_PANELS[workflow_phase]
    return PhaseComposition(primary=primary, secondary=list(secondary))
