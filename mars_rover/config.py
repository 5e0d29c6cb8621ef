from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple
import os

import yaml

from .grid import Plateau


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@dataclass
class MissionConfig:
    """Already-parsed mission inputs, ready for ``execute_mission``."""

    plateau: List[str]
    start_x: int
    start_y: int
    direction: str
    max_power: int
    charging_rate: int
    commands: str = ""

    @property
    def initial_position(self) -> Tuple[int, int]:
        return (self.start_x, self.start_y)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any], base_dir: str = ".") -> "MissionConfig":
        """Build from a parsed config dict holding a ``mission`` section.

        The map is either inline (``plateau``: rows top to bottom) or a JSON
        map file (``map_file``), resolved against ``base_dir`` when relative.
        """
        mission_cfg = cfg.get("mission") if isinstance(cfg, Mapping) else None
        if not isinstance(mission_cfg, Mapping):
            raise ValueError("Config is missing the 'mission' section")
        if "plateau" not in mission_cfg and "map_file" in mission_cfg:
            map_path = os.path.join(base_dir, str(mission_cfg["map_file"]))
            mission_cfg = dict(mission_cfg, plateau=Plateau.from_map_file(map_path).to_dict()["rows"])
        for key in ("plateau", "start", "direction", "max_power", "charging_rate"):
            if key not in mission_cfg:
                raise ValueError(f"Mission config is missing '{key}'")

        start = mission_cfg["start"]
        if not isinstance(start, Mapping) or "x" not in start or "y" not in start:
            raise ValueError("Mission config 'start' needs x and y")
        rows = mission_cfg["plateau"]
        if isinstance(rows, str):
            rows = [r for r in rows.splitlines() if r.strip()]
        try:
            return cls(
                plateau=[r if isinstance(r, str) else " ".join(str(t) for t in r) for r in rows],
                start_x=int(start["x"]),
                start_y=int(start["y"]),
                direction=str(mission_cfg["direction"]),
                max_power=int(mission_cfg["max_power"]),
                charging_rate=int(mission_cfg["charging_rate"]),
                commands=str(mission_cfg.get("commands") or ""),
            )
        except TypeError as exc:
            raise ValueError(f"Malformed mission config: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mission": {
                "plateau": list(self.plateau),
                "start": {"x": self.start_x, "y": self.start_y},
                "direction": self.direction,
                "max_power": self.max_power,
                "charging_rate": self.charging_rate,
                "commands": self.commands,
            }
        }


@dataclass
class LoggingConfig:
    level: str = "INFO"
    telemetry_path: str | None = None

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "LoggingConfig":
        logging_cfg = cfg.get("logging") or {}
        return cls(
            level=str(logging_cfg.get("level", "INFO")).upper(),
            telemetry_path=logging_cfg.get("telemetry_path"),
        )


def load_mission_config(path: str) -> Tuple[MissionConfig, LoggingConfig]:
    """Load a mission YAML file into typed mission and logging settings."""
    cfg = load_yaml(path)
    base_dir = os.path.dirname(os.path.abspath(path))
    return MissionConfig.from_dict(cfg, base_dir=base_dir), LoggingConfig.from_dict(cfg)
