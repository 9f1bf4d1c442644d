"""
Traffic light signal state definitions and transitions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class SignalState(Enum):
    """Signal states of a single traffic light"""
    STOPPED = 0             # Red: traffic has to stop
    STOPPED_TO_MOVING = 1   # Yellow: about to move
    MOVING = 2              # Green: traffic may go
    MOVING_TO_STOPPED = 3   # Yellow: about to stop
    OVERRIDE = 4            # Yellow blinking: attention mode

    @property
    def label(self) -> str:
        """Human-readable signal indication"""
        return SIGNAL_LABELS[self]


class NominalState(Enum):
    """Where a light returns to when normal operation resumes"""
    RED = "red"
    GREEN = "green"

    @classmethod
    def parse(cls, value: Union["NominalState", str, None]) -> Optional["NominalState"]:
        """
        Parse a nominal state from a member or a config string.

        Returns None for anything that is neither red nor green.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


SIGNAL_LABELS: Dict[SignalState, str] = {
    SignalState.STOPPED: "Red",
    SignalState.STOPPED_TO_MOVING: "Yellow",
    SignalState.MOVING: "Green",
    SignalState.MOVING_TO_STOPPED: "Yellow",
    SignalState.OVERRIDE: "Yellow blinking",
}

# Normal cycle. OVERRIDE has no successor.
NEXT_STATE: Dict[SignalState, SignalState] = {
    SignalState.STOPPED: SignalState.STOPPED_TO_MOVING,
    SignalState.STOPPED_TO_MOVING: SignalState.MOVING,
    SignalState.MOVING: SignalState.MOVING_TO_STOPPED,
    SignalState.MOVING_TO_STOPPED: SignalState.STOPPED,
}

# Resuming normal operation always lands on the yellow state one step
# before the nominal steady state.
RESET_STATE: Dict[NominalState, SignalState] = {
    NominalState.RED: SignalState.STOPPED_TO_MOVING,
    NominalState.GREEN: SignalState.MOVING_TO_STOPPED,
}


class UnsupportedTransition(Exception):
    """Raised when a light is advanced from a state with no successor."""

    def __init__(self, light_id: int, state: SignalState):
        self.light_id = light_id
        self.state = state
        super().__init__(light_id, state)

    def __str__(self) -> str:
        return (f"light {self.light_id} cannot advance from {self.state.name} "
                f"(attention mode must be turned off first)")


@dataclass(frozen=True)
class SignalReading:
    """
    Signal indication of one light at one moment.

    Field Guarantees:
        - light_id: id of the emitting light, unchanged
        - label: one of Red, Yellow, Green, Yellow blinking
    """
    light_id: int
    label: str

    def __str__(self) -> str:
        return f"light {self.light_id} is {self.label}"
