"""Command-line interface for the points projection engine."""

import argparse
import json
import logging
import sys
import uuid
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from .config.model_constants import PROJECTION_CONFIG, get_profile
from .pipelines.projection_pipeline import ProjectionPipeline
from .reporting.formatter import format_projection, format_run_summary

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# (field, prompt, kind, optional)
PROMPTS = [
    ("player_line_pts", "Sportsbook line (points): ", "float", False),
    ("season_avg_pts", "Season avg points: ", "float", False),
    ("is_home", "Is home? (1=yes, 0=no): ", "bool", False),
    ("game_total_ou", "Game total O/U: ", "float", False),
    ("team_total_ou", "Team total O/U: ", "float", False),
    ("opp_pts_allowed_vs_pos", "Opponent points allowed to this position (per game): ", "float", False),
    ("recent_avg_pts", "Recent avg points (last N; blank to ignore): ", "float", True),
    ("season_avg_minutes", "Season avg minutes (blank to ignore): ", "float", True),
    ("expected_minutes", "Expected minutes this game (blank to ignore): ", "float", True),
    ("matchup_pace", "Matchup pace (possessions per team; blank for league avg): ", "float", True),
    ("is_back_to_back", "Back-to-back? (1=yes, 0=no): ", "bool", True),
]

_TRUE_ANSWERS = {"1", "y", "yes", "true"}
_FALSE_ANSWERS = {"0", "n", "no", "false"}


def _parse_answer(raw: str, kind: str) -> Any:
    if kind == "bool":
        answer = raw.lower()
        if answer in _TRUE_ANSWERS:
            return True
        if answer in _FALSE_ANSWERS:
            return False
        raise ValueError(f"expected 1/0 or yes/no, got '{raw}'")
    return float(raw)


def collect_interactive(
    input_fn: Optional[Callable[[str], str]] = None,
    output_fn: Optional[Callable[[str], None]] = None
) -> Dict[str, Any]:
    """
    Prompt for one player's inputs: name, core drivers, context, then optional drivers.

    Blank answers on optional drivers leave them unset (neutral factor).
    Invalid answers are asked again.
    """
    input_fn = input_fn or input
    output_fn = output_fn or print

    payload: Dict[str, Any] = {"player_name": input_fn("Player name: ").strip()}

    for field, prompt, kind, optional in PROMPTS:
        while True:
            raw = input_fn(prompt).strip()
            if not raw and optional:
                break
            try:
                payload[field] = _parse_answer(raw, kind)
                break
            except ValueError as e:
                output_fn(f"  invalid value: {e}")

    return payload


def load_players_file(path: Path) -> List[Dict[str, Any]]:
    """
    Load player payloads from a JSON or YAML file.

    Accepts a list of players, a mapping with a "players" key, or a single player mapping.
    """
    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if isinstance(data, dict) and "players" in data:
        data = data["players"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of players or a mapping")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Project a player's points from the sportsbook line, season average and game context"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for one player's inputs (default when no --input is given)"
    )
    source.add_argument(
        "--input", "-i",
        type=Path,
        help="JSON or YAML file with player payloads"
    )
    parser.add_argument(
        "--profile", "-p",
        default=None,
        help=f"Calibration profile (default: {PROJECTION_CONFIG.default_profile})"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the run result as JSON instead of the text report"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        constants = get_profile(args.profile)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 2

    try:
        if args.input is not None:
            players = load_players_file(args.input)
        else:
            players = [collect_interactive()]
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        print("\nInput aborted", file=sys.stderr)
        return 1

    pipeline = ProjectionPipeline(constants=constants)
    result = pipeline.project_players(
        run_id=str(uuid.uuid4()),
        trace_id=str(uuid.uuid4()),
        players=players
    )

    if args.json:
        print(json.dumps(result.model_dump_json_safe(), indent=2, default=str))
    else:
        for output in result.projections:
            print()
            print(format_projection(output, constants))
        print()
        print(format_run_summary(result))

    return 1 if result.status == "failed" else 0


if __name__ == "__main__":
    sys.exit(main())
