from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from orbit_shared.enums import (
    DataAccess,
    DecisionCategory,
    GoalCategory,
    GoalStatus,
    OutcomeStatus,
    ToolCategory,
    ToolStatus,
)


class _Record(BaseModel):
    # Dashboard records carry timestamps, milestones and free text we do not read.
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)


def _as_id_list(value: Any) -> Any:
    if value is None:
        return []
    return value


class Tool(_Record):
    name: str
    category: ToolCategory
    monthly_cost: float = Field(default=0.0, ge=0)
    status: ToolStatus = ToolStatus.ACTIVE
    data_access: DataAccess = DataAccess.NONE
    url: str | None = None
    purpose: str | None = None


class Goal(_Record):
    title: str
    category: GoalCategory
    status: GoalStatus = GoalStatus.ACTIVE
    progress: int = Field(default=0, ge=0, le=100)
    linked_tool_ids: list[str] = Field(default_factory=list)

    @field_validator("linked_tool_ids", mode="before")
    @classmethod
    def default_linked_tools(cls, value: Any) -> Any:
        return _as_id_list(value)


class Decision(_Record):
    title: str
    category: DecisionCategory = DecisionCategory.OTHER
    outcome_status: OutcomeStatus | None = None
    ai_tools_used: list[str] = Field(default_factory=list)

    @field_validator("ai_tools_used", mode="before")
    @classmethod
    def default_tools_used(cls, value: Any) -> Any:
        return _as_id_list(value)

    @property
    def effective_outcome(self) -> OutcomeStatus:
        return self.outcome_status or OutcomeStatus.PENDING
