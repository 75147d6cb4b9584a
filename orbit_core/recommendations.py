"""Static goal-category to tool-category knowledge base."""

from __future__ import annotations

from collections.abc import Iterable

from orbit_core.models import ToolRecommendation
from orbit_shared.enums import GoalCategory, GoalStatus, ToolCategory
from orbit_shared.schemas import Goal

TOOL_GOAL_MAP: tuple[ToolRecommendation, ...] = (
    ToolRecommendation(
        goal_category=GoalCategory.CAREER,
        tool_category=ToolCategory.COMMUNICATION,
        description=(
            "Communication AI tools help craft professional messages, prepare for interviews, "
            "and build your personal brand."
        ),
        examples=("ChatGPT for cover letters", "Grammarly for professional writing", "Otter.ai for meeting notes"),
    ),
    ToolRecommendation(
        goal_category=GoalCategory.CAREER,
        tool_category=ToolCategory.ANALYTICS,
        description=(
            "Analytics tools help you track industry trends, analyze job markets, "
            "and make data-driven career decisions."
        ),
        examples=("LinkedIn AI features", "Crystal for personality insights", "Tableau for portfolio dashboards"),
    ),
    ToolRecommendation(
        goal_category=GoalCategory.LEARNING,
        tool_category=ToolCategory.RESEARCH,
        description=(
            "Research AI tools accelerate learning by summarizing papers, explaining concepts, "
            "and finding relevant resources."
        ),
        examples=("Perplexity for research", "Elicit for academic papers", "NotebookLM for study notes"),
    ),
    ToolRecommendation(
        goal_category=GoalCategory.LEARNING,
        tool_category=ToolCategory.CODE,
        description=(
            "Code AI tools are essential for learning programming: they explain code, suggest fixes, "
            "and teach best practices."
        ),
        examples=("GitHub Copilot for coding", "Cursor for AI-first development", "Replit AI for quick experiments"),
    ),
    ToolRecommendation(
        goal_category=GoalCategory.PROJECT,
        tool_category=ToolCategory.PRODUCTIVITY,
        description=(
            "Productivity AI tools help manage tasks, automate workflows, "
            "and keep projects on track with less manual effort."
        ),
        examples=("Notion AI for project docs", "Zapier for automation", "Linear for issue tracking"),
    ),
    ToolRecommendation(
        goal_category=GoalCategory.PROJECT,
        tool_category=ToolCategory.CODE,
        description=(
            "Code AI tools dramatically speed up project development, "
            "from scaffolding to debugging to deployment."
        ),
        examples=("Cursor for full-stack dev", "v0 by Vercel for UI", "Claude for architecture planning"),
    ),
    ToolRecommendation(
        goal_category=GoalCategory.PROJECT,
        tool_category=ToolCategory.CREATIVE,
        description=(
            "Creative AI tools generate assets, designs, and content that bring your project to life "
            "without a full design team."
        ),
        examples=("Midjourney for visuals", "Canva AI for design", "ElevenLabs for voice"),
    ),
    ToolRecommendation(
        goal_category=GoalCategory.FINANCIAL,
        tool_category=ToolCategory.ANALYTICS,
        description=(
            "Analytics AI tools help track spending, forecast budgets, "
            "and identify cost optimization opportunities."
        ),
        examples=("ChatGPT for financial analysis", "Columns for data viz", "Mint AI for budgeting"),
    ),
    ToolRecommendation(
        goal_category=GoalCategory.HEALTH,
        tool_category=ToolCategory.PRODUCTIVITY,
        description=(
            "Productivity AI tools can help build healthy habits, manage schedules for work-life balance, "
            "and reduce cognitive load."
        ),
        examples=("Reclaim.ai for schedule optimization", "Headspace AI for mindfulness", "Whoop for health tracking"),
    ),
)


def recommendations_for(goal_category: GoalCategory | str) -> list[ToolRecommendation]:
    category = GoalCategory(goal_category)
    return [rec for rec in TOOL_GOAL_MAP if rec.goal_category == category]


def relevant_recommendations(goals: Iterable[Goal], limit: int = 6) -> list[ToolRecommendation]:
    """Table entries matching the category of at least one active goal, table order."""
    active_categories = {goal.category for goal in goals if goal.status == GoalStatus.ACTIVE}
    matched = [rec for rec in TOOL_GOAL_MAP if rec.goal_category in active_categories]
    return matched[: max(0, limit)]
