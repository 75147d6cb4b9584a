from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from orbit_core.models import Insight, RuleThresholds
from orbit_core.recommendations import TOOL_GOAL_MAP
from orbit_shared.enums import GoalStatus, InsightCategory, InsightType, OutcomeStatus, ToolCategory, ToolStatus
from orbit_shared.schemas import Decision, Goal, Tool

logger = logging.getLogger("aiorbit.insights")

DEFAULT_THRESHOLDS = RuleThresholds()


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _dollars(amount: float) -> str:
    return f"${math.floor(amount)}"


def _names(tools: Sequence[Tool]) -> str:
    return ", ".join(tool.name for tool in tools)


def _spending_insights(tools: Sequence[Tool], thresholds: RuleThresholds) -> list[Insight]:
    out: list[Insight] = []
    total_spend = sum(tool.monthly_cost for tool in tools if tool.status != ToolStatus.PAUSED)
    if total_spend > thresholds.high_spend:
        out.append(
            Insight(
                id="high-spend",
                type=InsightType.WARNING,
                title=f"You're spending {_dollars(total_spend)}/mo on AI tools",
                description=(
                    "Consider auditing tools you use less frequently. "
                    "Pausing unused subscriptions could save money."
                ),
                category=InsightCategory.SPENDING,
            )
        )

    has_paid = any(tool.monthly_cost > 0 for tool in tools)
    has_free = any(tool.monthly_cost == 0 for tool in tools)
    if has_paid and not has_free:
        out.append(
            Insight(
                id="no-free-tools",
                type=InsightType.TIP,
                title="All your tools are paid",
                description="Many AI tools offer free tiers. Consider free alternatives for tools you use lightly.",
                category=InsightCategory.SPENDING,
            )
        )
    return out


def _overlap_insights(tools: Sequence[Tool], thresholds: RuleThresholds) -> list[Insight]:
    grouped: dict[ToolCategory, list[Tool]] = {}
    for tool in tools:
        grouped.setdefault(tool.category, []).append(tool)

    out: list[Insight] = []
    for category, members in grouped.items():
        if len(members) < thresholds.overlap_min_tools:
            continue
        out.append(
            Insight(
                id=f"overlap-{category.value}",
                type=InsightType.WARNING,
                title=f"{len(members)} tools in {category.value}",
                description=f"You have {_names(members)}. Consider if all are needed or if some overlap.",
                category=InsightCategory.TOOLS,
            )
        )
    return out


def _status_insights(tools: Sequence[Tool]) -> list[Insight]:
    out: list[Insight] = []
    paused = [tool for tool in tools if tool.status == ToolStatus.PAUSED]
    if paused:
        paused_spend = sum(tool.monthly_cost for tool in paused)
        if paused_spend > 0:
            description = f"You're saving {_dollars(paused_spend)}/mo by pausing {_names(paused)}."
        else:
            verb = "is" if len(paused) == 1 else "are"
            description = f"{_names(paused)} {verb} paused. Reactivate or remove if no longer needed."
        out.append(
            Insight(
                id="paused-tools",
                type=InsightType.INFO,
                title=_plural(len(paused), "paused tool"),
                description=description,
                category=InsightCategory.TOOLS,
            )
        )

    trial = [tool for tool in tools if tool.status == ToolStatus.TRIAL]
    if trial:
        out.append(
            Insight(
                id="trial-tools",
                type=InsightType.TIP,
                title=f"{_plural(len(trial), 'tool')} on trial",
                description=f"Evaluate {_names(trial)} before the trial ends to avoid unexpected charges.",
                category=InsightCategory.TOOLS,
            )
        )
    return out


def _goal_insights(goals: Sequence[Goal], thresholds: RuleThresholds) -> list[Insight]:
    out: list[Insight] = []
    active = [goal for goal in goals if goal.status == GoalStatus.ACTIVE]

    stuck = [goal for goal in active if 0 < goal.progress < thresholds.stuck_progress_below]
    if stuck:
        more = f" and {len(stuck) - 1} more" if len(stuck) > 1 else ""
        out.append(
            Insight(
                id="stuck-goals",
                type=InsightType.WARNING,
                title=f"{_plural(len(stuck), 'goal')} under {thresholds.stuck_progress_below}% progress",
                description=(
                    f'"{stuck[0].title}"{more} may need attention. Consider breaking them into smaller steps.'
                ),
                category=InsightCategory.GOALS,
            )
        )

    unlinked = [goal for goal in active if not goal.linked_tool_ids]
    if unlinked:
        out.append(
            Insight(
                id="unlinked-goals",
                type=InsightType.TIP,
                title=f"{_plural(len(unlinked), 'goal')} without linked tools",
                description="Link AI tools to your goals to track which tools drive the most value for each objective.",
                category=InsightCategory.GOALS,
            )
        )

    completed = [goal for goal in goals if goal.status == GoalStatus.COMPLETED]
    if completed:
        out.append(
            Insight(
                id="completed-goals",
                type=InsightType.SUCCESS,
                title=f"{_plural(len(completed), 'goal')} completed!",
                description="Great progress. Set new goals to keep your momentum going.",
                category=InsightCategory.GOALS,
            )
        )
    return out


def _top_positive_tool(positive: Sequence[Decision]) -> tuple[str, int] | None:
    counts: dict[str, int] = {}
    for decision in positive:
        for tool_id in dict.fromkeys(decision.ai_tools_used):
            counts[tool_id] = counts.get(tool_id, 0) + 1

    best: tuple[str, int] | None = None
    for tool_id, count in counts.items():
        # strict comparison keeps the first-encountered id on ties
        if best is None or count > best[1]:
            best = (tool_id, count)
    return best


def _decision_insights(
    tools: Sequence[Tool],
    decisions: Sequence[Decision],
    thresholds: RuleThresholds,
) -> list[Insight]:
    out: list[Insight] = []
    positive = [d for d in decisions if d.effective_outcome == OutcomeStatus.POSITIVE]
    negative = [d for d in decisions if d.effective_outcome == OutcomeStatus.NEGATIVE]
    pending = [d for d in decisions if d.effective_outcome == OutcomeStatus.PENDING]

    if len(pending) >= thresholds.pending_min_decisions:
        out.append(
            Insight(
                id="pending-decisions",
                type=InsightType.TIP,
                title=f"{len(pending)} decisions awaiting outcome review",
                description="Revisit past decisions and update their outcomes. This helps you learn what works.",
                category=InsightCategory.DECISIONS,
            )
        )

    if positive and len(decisions) >= thresholds.correlation_min_decisions:
        top = _top_positive_tool(positive)
        if top is not None:
            tool_id, count = top
            tool = next((item for item in tools if item.id == tool_id), None)
            if tool is not None:
                out.append(
                    Insight(
                        id="best-decision-tool",
                        type=InsightType.SUCCESS,
                        title=f"{tool.name} correlates with your best decisions",
                        description=(
                            f"{count} of your positive-outcome decisions involved {tool.name}. "
                            "It may be your most valuable tool."
                        ),
                        category=InsightCategory.DECISIONS,
                    )
                )

    if len(negative) >= thresholds.negative_min_decisions:
        out.append(
            Insight(
                id="negative-pattern",
                type=InsightType.WARNING,
                title=f"{len(negative)} decisions had negative outcomes",
                description="Review these decisions to identify patterns. Were they rushed? Missing data? Wrong category?",
                category=InsightCategory.DECISIONS,
            )
        )
    return out


def _recommendation_insights(tools: Sequence[Tool], goals: Sequence[Goal]) -> list[Insight]:
    tools_by_id = {}
    for tool in tools:
        tools_by_id.setdefault(tool.id, tool)
    owned_categories = {tool.category for tool in tools}

    out: list[Insight] = []
    for goal in goals:
        if goal.status != GoalStatus.ACTIVE:
            continue
        linked_categories = {
            tools_by_id[tool_id].category for tool_id in goal.linked_tool_ids if tool_id in tools_by_id
        }
        for rec in TOOL_GOAL_MAP:
            if rec.goal_category != goal.category:
                continue
            if rec.tool_category in owned_categories or rec.tool_category in linked_categories:
                continue
            out.append(
                Insight(
                    id=f"rec-{goal.id}-{rec.tool_category.value}",
                    type=InsightType.TIP,
                    title=f'Consider a {rec.tool_category.value} tool for "{goal.title}"',
                    description=f"{rec.description} Try: {rec.examples[0]}.",
                    category=InsightCategory.RECOMMENDATION,
                )
            )
    return out


def _welcome_insight() -> Insight:
    return Insight(
        id="welcome",
        type=InsightType.INFO,
        title="Add more data to unlock insights",
        description=(
            "Register tools, set goals, and log decisions. "
            "AIOrbit will analyze patterns and surface recommendations."
        ),
        category=InsightCategory.TOOLS,
    )


def generate_insights(
    tools: Sequence[Tool],
    goals: Sequence[Goal],
    decisions: Sequence[Decision],
    thresholds: RuleThresholds | None = None,
) -> list[Insight]:
    limits = thresholds or DEFAULT_THRESHOLDS

    candidates: list[Insight] = []
    candidates.extend(_spending_insights(tools, limits))
    candidates.extend(_overlap_insights(tools, limits))
    candidates.extend(_status_insights(tools))
    candidates.extend(_goal_insights(goals, limits))
    candidates.extend(_decision_insights(tools, decisions, limits))
    candidates.extend(_recommendation_insights(tools, goals))

    insights: list[Insight] = []
    seen: set[str] = set()
    for insight in candidates:
        if insight.id in seen:
            continue
        seen.add(insight.id)
        insights.append(insight)

    if not insights:
        insights.append(_welcome_insight())

    logger.debug(
        "generated insights",
        extra={"tools": len(tools), "goals": len(goals), "decisions": len(decisions), "insights": len(insights)},
    )
    return insights
