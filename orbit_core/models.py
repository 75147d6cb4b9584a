from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from orbit_shared.enums import GoalCategory, InsightCategory, InsightType, ToolCategory


class Insight(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(min_length=1)
    type: InsightType
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: InsightCategory


class ToolRecommendation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    goal_category: GoalCategory
    tool_category: ToolCategory
    description: str = Field(min_length=1)
    examples: tuple[str, ...] = Field(min_length=1)


class RuleThresholds(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    high_spend: float = Field(default=100.0, ge=0)
    overlap_min_tools: int = Field(default=3, ge=2)
    stuck_progress_below: int = Field(default=50, ge=1, le=100)
    pending_min_decisions: int = Field(default=3, ge=1)
    negative_min_decisions: int = Field(default=2, ge=1)
    correlation_min_decisions: int = Field(default=3, ge=1)


class CategorySpend(BaseModel):
    model_config = ConfigDict(extra="forbid")

    category: ToolCategory
    spend: float = Field(ge=0)


class PortfolioSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total_monthly_spend: float = Field(ge=0)
    active_tools: int = Field(ge=0)
    goal_completion_percent: int = Field(ge=0, le=100)
    tools_by_category: dict[str, int] = Field(default_factory=dict)
    spend_by_category: list[CategorySpend] = Field(default_factory=list)
    outcome_counts: dict[str, int] = Field(default_factory=dict)
    data_access_counts: dict[str, int] = Field(default_factory=dict)
    relevant_recommendations: list[ToolRecommendation] = Field(default_factory=list)
    insight_count: int = Field(ge=1)
