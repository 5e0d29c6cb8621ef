from __future__ import annotations

from pathlib import Path

import pytest

from mars_rover.config import LoggingConfig, MissionConfig, load_mission_config
from mars_rover.direction import Direction
from mars_rover.mission import MissionStatus, execute_mission

CONFIGS_DIR = Path(__file__).resolve().parent.parent / "configs"


def _run(config: MissionConfig):
    return execute_mission(
        config.plateau,
        config.initial_position,
        config.direction,
        config.max_power,
        config.charging_rate,
        config.commands,
    )


def test_load_inline_mission(tmp_path) -> None:
    path = tmp_path / "mission.yaml"
    path.write_text(
        "mission:\n"
        "  plateau:\n"
        "    - \"E E\"\n"
        "    - [A, C]\n"
        "  start: {x: 0, y: 0}\n"
        "  direction: \"E\"\n"
        "  max_power: 4\n"
        "  charging_rate: 1\n"
        "  commands: PM\n"
        "logging:\n"
        "  level: debug\n",
        encoding="utf-8",
    )
    config, logging_cfg = load_mission_config(str(path))
    assert config.plateau == ["E E", "A C"]
    assert config.initial_position == (0, 0)
    assert config.direction == "E"
    assert config.max_power == 4
    assert config.charging_rate == 1
    assert config.commands == "PM"
    assert logging_cfg == LoggingConfig(level="DEBUG", telemetry_path=None)


def test_map_file_resolved_relative_to_config(tmp_path) -> None:
    (tmp_path / "maps").mkdir()
    (tmp_path / "maps" / "tiny.json").write_text('{"rows": ["E A"]}', encoding="utf-8")
    path = tmp_path / "mission.yaml"
    path.write_text(
        "mission:\n"
        "  map_file: maps/tiny.json\n"
        "  start: {x: 0, y: 0}\n"
        "  direction: \"E\"\n"
        "  max_power: 3\n"
        "  charging_rate: 0\n"
        "  commands: MP\n",
        encoding="utf-8",
    )
    config, _ = load_mission_config(str(path))
    assert config.plateau == ["E A"]
    result = _run(config)
    assert result.final_state.science_count == 1
    assert result.final_state.power == 1


def test_missing_keys_rejected() -> None:
    with pytest.raises(ValueError):
        MissionConfig.from_dict({})
    with pytest.raises(ValueError):
        MissionConfig.from_dict({"mission": {"plateau": ["E"], "start": {"x": 0, "y": 0}}})


def test_commands_default_to_empty() -> None:
    config = MissionConfig.from_dict(
        {
            "mission": {
                "plateau": ["E"],
                "start": {"x": 0, "y": 0},
                "direction": "N",
                "max_power": 1,
                "charging_rate": 0,
            }
        }
    )
    assert config.commands == ""
    assert MissionConfig.from_dict(config.to_dict()) == config


def test_default_mission_config() -> None:
    config, logging_cfg = load_mission_config(str(CONFIGS_DIR / "mission.yaml"))
    assert logging_cfg.level == "INFO"
    assert logging_cfg.telemetry_path == "runs/mission_telemetry.jsonl"
    result = _run(config)
    s = result.final_state
    assert result.status is MissionStatus.SUCCESS
    assert s.position == (4, 3)
    assert s.direction is Direction.S
    assert s.power == 4
    assert s.science_count == 1


def test_crater_mission_config() -> None:
    config, logging_cfg = load_mission_config(str(CONFIGS_DIR / "crater.yaml"))
    assert logging_cfg.level == "DEBUG"
    result = _run(config)
    s = result.final_state
    assert result.status is MissionStatus.SUCCESS
    assert s.position == (3, 1)
    assert s.direction is Direction.E
    assert s.power == 4
    assert s.science_count == 1


@pytest.mark.parametrize(
    "mission_yaml",
    [
        "mission:\n",
        "mission: [1, 2]\n",
        "mission:\n  plateau: [\"E\"]\n  start: {y: 0}\n  direction: N\n  max_power: 1\n  charging_rate: 0\n",
        "mission:\n  plateau: [\"E\"]\n  start: [1, 2]\n  direction: N\n  max_power: 1\n  charging_rate: 0\n",
        "mission:\n  plateau: [\"E\"]\n  start: {x: 0, y: 0}\n  direction: N\n  max_power:\n  charging_rate: 0\n",
    ],
)
def test_malformed_mission_sections_raise_value_error(tmp_path, mission_yaml) -> None:
    path = tmp_path / "mission.yaml"
    path.write_text(mission_yaml, encoding="utf-8")
    with pytest.raises(ValueError):
        load_mission_config(str(path))
