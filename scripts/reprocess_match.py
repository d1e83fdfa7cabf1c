#!/usr/bin/env python3
"""Re-run impact analysis for one match from saved Match-V5 payloads.

Usage:
    python scripts/reprocess_match.py match.json timeline.json \
        --puuid <PUUID> [--match-id NA1_5151928908] [--log-level DEBUG]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from src.config.settings import get_settings
from src.core.observability import configure_logging
from src.core.services.impact_analysis_service import analyze_match_performance


def _load_json(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def _match_id_from(payload: dict[str, Any], fallback: str) -> str:
    return payload.get("metadata", {}).get("matchId") or fallback


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Recompute a match's impact summary")
    parser.add_argument("match", type=Path, help="Match-V5 match JSON file")
    parser.add_argument("timeline", type=Path, help="Match-V5 timeline JSON file")
    parser.add_argument("--puuid", required=True, help="PUUID of the player to score")
    parser.add_argument("--match-id", default=None, help="Override the match id")
    parser.add_argument("--log-level", default=None, help="Log level (default from settings)")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level or settings.app_log_level, json_logs=settings.log_json)

    match_data = _load_json(args.match)
    timeline_data = _load_json(args.timeline)
    match_id = args.match_id or _match_id_from(match_data, args.match.stem)

    result = analyze_match_performance(match_id, args.puuid, match_data, timeline_data)
    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
