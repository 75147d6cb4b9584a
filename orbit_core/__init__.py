"""Pure insight computation for AIOrbit."""

from orbit_core.engine import generate_insights
from orbit_core.models import Insight, PortfolioSummary, RuleThresholds, ToolRecommendation
from orbit_core.recommendations import TOOL_GOAL_MAP, recommendations_for, relevant_recommendations
from orbit_core.summary import summarize_portfolio

__all__ = [
    "generate_insights",
    "summarize_portfolio",
    "recommendations_for",
    "relevant_recommendations",
    "TOOL_GOAL_MAP",
    "Insight",
    "PortfolioSummary",
    "RuleThresholds",
    "ToolRecommendation",
]
