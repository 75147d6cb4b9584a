from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request

from aiorbit.config import AppConfig
from aiorbit.snapshot import Snapshot, load_snapshot
from orbit_core.recommendations import TOOL_GOAL_MAP, recommendations_for
from orbit_shared.enums import GoalCategory

router = APIRouter()


def _get_config(request: Request) -> AppConfig:
    return request.app.state.config  # type: ignore[no-any-return]


def _snapshot(request: Request) -> Snapshot:
    return load_snapshot(_get_config(request).resolved_data_path)


@router.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/insights")
def list_insights(
    request: Request,
    limit: int | None = Query(default=None, ge=1, le=50),
) -> dict[str, Any]:
    config = _get_config(request)
    insights = _snapshot(request).insights(config.thresholds)
    shown = insights[:limit] if limit is not None else insights
    return {
        "count": len(insights),
        "insights": [item.model_dump(mode="json") for item in shown],
    }


@router.get("/api/insights/top")
def top_insights(request: Request) -> dict[str, Any]:
    config = _get_config(request)
    insights = _snapshot(request).insights(config.thresholds)
    return {
        "count": len(insights),
        "insights": [item.model_dump(mode="json") for item in insights[: config.dashboard_insight_limit]],
    }


@router.get("/api/summary")
def summary(request: Request) -> dict[str, Any]:
    config = _get_config(request)
    return _snapshot(request).summary(config.thresholds).model_dump(mode="json")


@router.get("/api/recommendations")
def recommendations(goal_category: str | None = Query(default=None)) -> dict[str, Any]:
    if goal_category is None:
        entries = list(TOOL_GOAL_MAP)
    else:
        try:
            entries = recommendations_for(GoalCategory(goal_category))
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=f"unknown goal category: {goal_category}") from exc
    return {"recommendations": [item.model_dump(mode="json") for item in entries]}
