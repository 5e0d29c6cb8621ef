"""JSONL mission telemetry."""

from .logger import MissionTelemetryLogger

__all__ = ["MissionTelemetryLogger"]
