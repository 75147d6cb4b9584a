from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from orbit_shared.enums import (
    DataAccess,
    GoalCategory,
    GoalStatus,
    OutcomeStatus,
    ToolCategory,
    ToolStatus,
)
from orbit_shared.schemas import Decision, Goal, Tool

BASE_CONFIG = """data_path = \"db.json\"
web_host = \"127.0.0.1\"
web_port = 8787
dashboard_insight_limit = 4
dev_enable_docs = false

[thresholds]
high_spend = 100.0
overlap_min_tools = 3
stuck_progress_below = 50
pending_min_decisions = 3
negative_min_decisions = 2
correlation_min_decisions = 3
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "AIORBIT_DATA_PATH",
        "AIORBIT_HOST",
        "AIORBIT_PORT",
        "AIORBIT_INSIGHT_LIMIT",
        "AIORBIT_DEV_ENABLE_DOCS",
        "AIORBIT_HIGH_SPEND_THRESHOLD",
        "AIORBIT_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)


def make_tool(
    tool_id: str,
    name: str | None = None,
    category: ToolCategory = ToolCategory.CODE,
    monthly_cost: float = 0.0,
    status: ToolStatus = ToolStatus.ACTIVE,
    data_access: DataAccess = DataAccess.NONE,
) -> Tool:
    return Tool(
        id=tool_id,
        name=name or tool_id,
        category=category,
        monthly_cost=monthly_cost,
        status=status,
        data_access=data_access,
    )


def make_goal(
    goal_id: str,
    title: str | None = None,
    category: GoalCategory = GoalCategory.OTHER,
    status: GoalStatus = GoalStatus.ACTIVE,
    progress: int = 0,
    linked_tool_ids: list[str] | None = None,
) -> Goal:
    return Goal(
        id=goal_id,
        title=title or goal_id,
        category=category,
        status=status,
        progress=progress,
        linked_tool_ids=linked_tool_ids or [],
    )


def make_decision(
    decision_id: str,
    outcome_status: OutcomeStatus | None = OutcomeStatus.NEUTRAL,
    ai_tools_used: list[str] | None = None,
) -> Decision:
    return Decision(
        id=decision_id,
        title=f"Decision {decision_id}",
        outcome_status=outcome_status,
        ai_tools_used=ai_tools_used or [],
    )


@pytest.fixture()
def tool() -> Callable[..., Tool]:
    return make_tool


@pytest.fixture()
def goal() -> Callable[..., Goal]:
    return make_goal


@pytest.fixture()
def decision() -> Callable[..., Decision]:
    return make_decision


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(BASE_CONFIG, encoding="utf-8")
    return path


@pytest.fixture()
def write_document(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    def _write(document: dict[str, Any]) -> Path:
        path = tmp_path / "db.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def sample_document() -> dict[str, Any]:
    return {
        "tools": [
            {
                "id": "t-cursor",
                "name": "Cursor",
                "category": "Code",
                "url": "https://cursor.sh",
                "monthlyCost": 20,
                "dataAccess": "full",
                "status": "active",
                "purpose": "Coding",
                "addedAt": "2025-01-01T00:00:00Z",
                "updatedAt": "2025-01-01T00:00:00Z",
            },
            {
                "id": "t-midjourney",
                "name": "Midjourney",
                "category": "Creative",
                "monthlyCost": 30,
                "dataAccess": "limited",
                "status": "paused",
            },
            {
                "id": "t-perplexity",
                "name": "Perplexity",
                "category": "Research",
                "monthlyCost": 0,
                "dataAccess": "none",
                "status": "trial",
            },
        ],
        "goals": [
            {
                "id": "g-ship",
                "title": "Ship the side project",
                "category": "Project",
                "status": "active",
                "progress": 30,
                "linkedToolIds": ["t-cursor", "t-missing"],
                "milestones": [{"id": "m1", "title": "MVP", "done": False}],
            },
            {
                "id": "g-learn",
                "title": "Learn Rust",
                "category": "Learning",
                "status": "completed",
                "progress": 100,
                "linkedToolIds": [],
            },
        ],
        "decisions": [
            {"id": "d1", "title": "Adopt Cursor", "category": "Technology", "outcomeStatus": "positive", "aiToolsUsed": ["t-cursor"]},
            {"id": "d2", "title": "Drop Midjourney", "category": "Financial", "outcomeStatus": "neutral", "aiToolsUsed": []},
            {"id": "d3", "title": "Hire help", "category": "Business", "aiToolsUsed": ["t-perplexity"]},
        ],
        "learning": [],
    }
