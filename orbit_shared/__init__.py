"""Shared enums and input schemas for AIOrbit."""

from orbit_shared.enums import (
    DataAccess,
    DecisionCategory,
    GoalCategory,
    GoalStatus,
    InsightCategory,
    InsightType,
    OutcomeStatus,
    ToolCategory,
    ToolStatus,
)
from orbit_shared.schemas import Decision, Goal, Tool

__all__ = [
    "Tool",
    "Goal",
    "Decision",
    "ToolCategory",
    "ToolStatus",
    "DataAccess",
    "GoalCategory",
    "GoalStatus",
    "DecisionCategory",
    "OutcomeStatus",
    "InsightType",
    "InsightCategory",
]
