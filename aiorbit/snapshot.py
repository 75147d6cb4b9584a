from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from orbit_core import generate_insights, summarize_portfolio
from orbit_core.models import Insight, PortfolioSummary, RuleThresholds
from orbit_shared.schemas import Decision, Goal, Tool

logger = logging.getLogger("aiorbit.snapshot")

EMPTY_DOCUMENT: dict[str, list[Any]] = {"tools": [], "goals": [], "decisions": [], "learning": []}


class SnapshotError(RuntimeError):
    pass


@dataclass(slots=True)
class Snapshot:
    tools: list[Tool] = field(default_factory=list)
    goals: list[Goal] = field(default_factory=list)
    decisions: list[Decision] = field(default_factory=list)
    skipped: int = 0

    def insights(self, thresholds: RuleThresholds | None = None) -> list[Insight]:
        return generate_insights(self.tools, self.goals, self.decisions, thresholds)

    def summary(self, thresholds: RuleThresholds | None = None) -> PortfolioSummary:
        return summarize_portfolio(self.tools, self.goals, self.decisions, thresholds)


def _load_records(document: dict[str, Any], key: str, model: type[BaseModel]) -> tuple[list[Any], int]:
    raw = document.get(key)
    if raw is None:
        return [], 0
    if not isinstance(raw, list):
        raise SnapshotError(f'"{key}" must be a JSON array')

    records: list[Any] = []
    skipped = 0
    for index, item in enumerate(raw):
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            skipped += 1
            logger.warning(
                "skipping invalid record",
                extra={"collection": key, "index": index, "errors": exc.error_count()},
            )
    return records, skipped


def parse_snapshot(document: Any) -> Snapshot:
    if not isinstance(document, dict):
        raise SnapshotError("data document must be a JSON object")
    tools, bad_tools = _load_records(document, "tools", Tool)
    goals, bad_goals = _load_records(document, "goals", Goal)
    decisions, bad_decisions = _load_records(document, "decisions", Decision)
    return Snapshot(
        tools=tools,
        goals=goals,
        decisions=decisions,
        skipped=bad_tools + bad_goals + bad_decisions,
    )


def load_snapshot(path: Path) -> Snapshot:
    if not path.exists():
        logger.info("data document not found, using empty snapshot", extra={"path": str(path)})
        return Snapshot()
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SnapshotError(f"cannot read data document {path}: {exc}") from exc
    return parse_snapshot(document)


def write_empty_snapshot(path: Path) -> bool:
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(EMPTY_DOCUMENT, indent=2), encoding="utf-8")
    return True
