"""Runtime services shared by every subpackage."""

from . import telemetry

__all__ = ["telemetry"]
