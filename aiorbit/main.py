from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import uvicorn

from aiorbit.config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from aiorbit.logging import configure_logging
from aiorbit.snapshot import SnapshotError, load_snapshot, write_empty_snapshot
from aiorbit.web.app import create_app
from orbit_core.recommendations import TOOL_GOAL_MAP, recommendations_for
from orbit_shared.enums import GoalCategory

logger = logging.getLogger("aiorbit")


def _apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    updates: dict[str, Any] = {}
    if getattr(args, "data", None) is not None:
        updates["data_path"] = str(Path(args.data).expanduser().resolve(strict=False))
    if getattr(args, "host", None) is not None:
        updates["web_host"] = str(args.host)
    if getattr(args, "port", None) is not None:
        updates["web_port"] = int(args.port)
    if not updates:
        return config
    merged = config.model_dump()
    merged.update(updates)
    updated = AppConfig.model_validate(merged)
    updated._config_dir = config.config_dir
    return updated


def _load(args: argparse.Namespace) -> AppConfig:
    path = Path(args.config).expanduser() if args.config else DEFAULT_CONFIG_PATH
    return _apply_cli_overrides(load_config(path), args)


def _emit(payload: Any) -> None:
    sys.stdout.write(json.dumps(payload, indent=2, ensure_ascii=True) + "\n")


def cmd_init(args: argparse.Namespace) -> int:
    config = _load(args)
    data_path = config.resolved_data_path
    created = write_empty_snapshot(data_path)
    logger.info("initialized config", extra={"config_dir": str(config.config_dir)})
    if created:
        logger.info("created empty data document", extra={"data_path": str(data_path)})
    return 0


def cmd_insights(args: argparse.Namespace) -> int:
    config = _load(args)
    try:
        snapshot = load_snapshot(config.resolved_data_path)
    except SnapshotError as exc:
        logger.error("cannot load data document: %s", exc)
        return 1
    insights = snapshot.insights(config.thresholds)
    if args.limit is not None:
        insights = insights[: args.limit]
    _emit([item.model_dump(mode="json") for item in insights])
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    config = _load(args)
    try:
        snapshot = load_snapshot(config.resolved_data_path)
    except SnapshotError as exc:
        logger.error("cannot load data document: %s", exc)
        return 1
    _emit(snapshot.summary(config.thresholds).model_dump(mode="json"))
    return 0


def cmd_recommendations(args: argparse.Namespace) -> int:
    if args.goal_category is None:
        entries = list(TOOL_GOAL_MAP)
    else:
        entries = recommendations_for(GoalCategory(args.goal_category))
    _emit([item.model_dump(mode="json") for item in entries])
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    config = _load(args)
    app = create_app(config)
    uvicorn.run(
        app,
        host=config.web_host,
        port=config.web_port,
        log_level="debug" if args.verbose else "info",
    )
    return 0


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aiorbit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="create config, data dir, and an empty data document")
    init_parser.add_argument("--config", type=str, default=None, help="path to config.toml")
    init_parser.add_argument("--verbose", action="store_true")
    init_parser.set_defaults(func=cmd_init)

    insights_parser = subparsers.add_parser("insights", help="print insights for the data document")
    insights_parser.add_argument("--config", type=str, default=None, help="path to config.toml")
    insights_parser.add_argument("--data", type=str, default=None, help="data document override")
    insights_parser.add_argument("--limit", type=_positive_int, default=None, help="show only the first N")
    insights_parser.add_argument("--verbose", action="store_true")
    insights_parser.set_defaults(func=cmd_insights)

    summary_parser = subparsers.add_parser("summary", help="print portfolio spend and outcome summary")
    summary_parser.add_argument("--config", type=str, default=None, help="path to config.toml")
    summary_parser.add_argument("--data", type=str, default=None, help="data document override")
    summary_parser.add_argument("--verbose", action="store_true")
    summary_parser.set_defaults(func=cmd_summary)

    rec_parser = subparsers.add_parser("recommendations", help="print the tool recommendation table")
    rec_parser.add_argument(
        "--goal-category",
        choices=[item.value for item in GoalCategory],
        default=None,
        help="only entries for this goal category",
    )
    rec_parser.add_argument("--verbose", action="store_true")
    rec_parser.set_defaults(func=cmd_recommendations)

    serve_parser = subparsers.add_parser("serve", help="serve the read-only insights API")
    serve_parser.add_argument("--config", type=str, default=None, help="path to config.toml")
    serve_parser.add_argument("--data", type=str, default=None, help="data document override")
    serve_parser.add_argument("--host", type=str, default=None, help="bind host")
    serve_parser.add_argument("--port", type=int, default=None, help="bind port")
    serve_parser.add_argument("--verbose", action="store_true")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(bool(getattr(args, "verbose", False)))
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
