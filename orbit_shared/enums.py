from __future__ import annotations

from enum import Enum


class ToolCategory(str, Enum):
    PRODUCTIVITY = "Productivity"
    CREATIVE = "Creative"
    CODE = "Code"
    RESEARCH = "Research"
    COMMUNICATION = "Communication"
    ANALYTICS = "Analytics"
    WRITING = "Writing"
    OTHER = "Other"


class ToolStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    TRIAL = "trial"


class DataAccess(str, Enum):
    NONE = "none"
    LIMITED = "limited"
    FULL = "full"


class GoalCategory(str, Enum):
    CAREER = "Career"
    LEARNING = "Learning"
    PROJECT = "Project"
    FINANCIAL = "Financial"
    HEALTH = "Health"
    OTHER = "Other"


class GoalStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


class DecisionCategory(str, Enum):
    BUSINESS = "Business"
    CAREER = "Career"
    TECHNOLOGY = "Technology"
    FINANCIAL = "Financial"
    PERSONAL = "Personal"
    OTHER = "Other"


class OutcomeStatus(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    PENDING = "pending"


class InsightType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    TIP = "tip"


class InsightCategory(str, Enum):
    SPENDING = "spending"
    TOOLS = "tools"
    GOALS = "goals"
    DECISIONS = "decisions"
    RECOMMENDATION = "recommendation"
