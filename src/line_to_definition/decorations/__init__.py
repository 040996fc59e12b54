"""Decoration state machine and display decisions."""

from .state_machine import (
    AnchoredDecoration,
    Clear,
    DecorationStateMachine,
    DisplayDecision,
    Evaluation,
    KeepCurrent,
    Replace,
    Superseded,
)

__all__ = [
    "AnchoredDecoration",
    "DecorationStateMachine",
    "DisplayDecision",
    "Evaluation",
    "KeepCurrent",
    "Clear",
    "Replace",
    "Superseded",
]
