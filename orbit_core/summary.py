from __future__ import annotations

from collections.abc import Sequence

from orbit_core.engine import generate_insights
from orbit_core.models import CategorySpend, PortfolioSummary, RuleThresholds
from orbit_core.recommendations import relevant_recommendations
from orbit_shared.enums import DataAccess, GoalStatus, ToolCategory, ToolStatus
from orbit_shared.schemas import Decision, Goal, Tool


def _spend_by_category(tools: Sequence[Tool]) -> list[CategorySpend]:
    raw: dict[ToolCategory, float] = {}
    for tool in tools:
        if tool.monthly_cost <= 0:
            continue
        raw[tool.category] = raw.get(tool.category, 0.0) + tool.monthly_cost
    rows = [CategorySpend(category=category, spend=round(spend, 2)) for category, spend in raw.items()]
    rows.sort(key=lambda item: item.spend, reverse=True)
    return rows


def summarize_portfolio(
    tools: Sequence[Tool],
    goals: Sequence[Goal],
    decisions: Sequence[Decision],
    thresholds: RuleThresholds | None = None,
) -> PortfolioSummary:
    total_spend = sum(tool.monthly_cost for tool in tools if tool.status != ToolStatus.PAUSED)
    completed = sum(1 for goal in goals if goal.status == GoalStatus.COMPLETED)
    completion = round(100 * completed / len(goals)) if goals else 0

    tools_by_category: dict[str, int] = {}
    for tool in tools:
        tools_by_category[tool.category.value] = tools_by_category.get(tool.category.value, 0) + 1

    outcome_counts: dict[str, int] = {}
    for decision in decisions:
        key = decision.effective_outcome.value
        outcome_counts[key] = outcome_counts.get(key, 0) + 1

    data_access_counts: dict[str, int] = {}
    for level in DataAccess:
        count = sum(1 for tool in tools if tool.data_access == level)
        if count:
            data_access_counts[level.value] = count

    return PortfolioSummary(
        total_monthly_spend=round(total_spend, 2),
        active_tools=sum(1 for tool in tools if tool.status == ToolStatus.ACTIVE),
        goal_completion_percent=completion,
        tools_by_category=tools_by_category,
        spend_by_category=_spend_by_category(tools),
        outcome_counts=outcome_counts,
        data_access_counts=data_access_counts,
        relevant_recommendations=relevant_recommendations(goals, limit=6),
        insight_count=len(generate_insights(tools, goals, decisions, thresholds)),
    )
