from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from mars_rover.config import LoggingConfig, MissionConfig, load_mission_config
from mars_rover.console import read_mission_config
from mars_rover.grid import Plateau
from mars_rover.mission import execute_mission
from mars_rover.render import render_mission_parameters
from telemetry.logger import MissionTelemetryLogger


def run(config: MissionConfig, logging_cfg: LoggingConfig, json_only: bool = False) -> int:
    plateau = Plateau.from_rows(config.plateau)

    if not json_only:
        print()
        print("=== Mission Execution ===")
        print(render_mission_parameters(config, plateau))

    telemetry = None
    if logging_cfg.telemetry_path:
        telemetry = MissionTelemetryLogger(logging_cfg.telemetry_path)
    try:
        result = execute_mission(
            plateau,
            config.initial_position,
            config.direction,
            config.max_power,
            config.charging_rate,
            config.commands,
            telemetry=telemetry,
        )
    finally:
        if telemetry is not None:
            telemetry.close()

    if not json_only:
        print()
        print("=== Mission Result ===")
    print(result.to_json())
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a Mars rover mission.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/mission.yaml",
        help="Path to mission YAML config.",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for the mission instead of reading --config.",
    )
    parser.add_argument(
        "--telemetry",
        type=str,
        default=None,
        help="JSONL telemetry output path (overrides logging.telemetry_path).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print only the mission result JSON.",
    )
    args = parser.parse_args()

    try:
        if args.interactive:
            config = read_mission_config()
            logging_cfg = LoggingConfig()
        else:
            config, logging_cfg = load_mission_config(args.config)
        if args.telemetry:
            logging_cfg.telemetry_path = args.telemetry

        logging.basicConfig(
            level=getattr(logging, logging_cfg.level, logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        exit_code = run(config, logging_cfg, json_only=args.json)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except EOFError:
        print("Error: input ended before the mission was complete.", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
