"""
State machine for a single traffic light.

States cycle Stopped -> StoppedToMoving -> Moving -> MovingToStopped -> Stopped.
Attention mode (yellow blinking) suspends the cycle until the light is reset.
"""

from typing import Optional, Union

from control.signal_states import (
    NEXT_STATE,
    RESET_STATE,
    NominalState,
    SignalReading,
    SignalState,
    UnsupportedTransition,
)


class TrafficLight:
    """
    Traffic light with a fixed nominal state.

    The nominal state decides where reset() lands: red resumes on the
    rising yellow, green on the falling yellow.
    """

    def __init__(self, light_id: int, nominal_state: Union[NominalState, str]):
        """
        Initialize traffic light

        Args:
            light_id: Positive id, stable for the light's lifetime
            nominal_state: NominalState or its config string ('red'/'green')
        """
        self.light_id = light_id
        self.nominal_state: Optional[NominalState] = NominalState.parse(nominal_state)

        self.state: SignalState = SignalState.OVERRIDE
        self.reset()

    def advance(self):
        """Switch to the next signal state"""
        next_state = NEXT_STATE.get(self.state)
        if next_state is None:
            raise UnsupportedTransition(self.light_id, self.state)
        self.state = next_state

    def emit_signal(self) -> SignalReading:
        """Get the current signal indication"""
        return SignalReading(light_id=self.light_id, label=self.state.label)

    def enter_attention(self):
        """Switch to attention mode (normal operation is suspended)"""
        self.state = SignalState.OVERRIDE

    def exit_attention(self):
        """Leave attention mode and resume normal operation"""
        self.reset()

    def reset(self):
        """Reset to the transitional state for the nominal state"""
        self.state = RESET_STATE.get(self.nominal_state, SignalState.OVERRIDE)

    @property
    def in_attention(self) -> bool:
        return self.state == SignalState.OVERRIDE

    def __repr__(self) -> str:
        nominal = self.nominal_state.value if self.nominal_state else None
        return (f"{self.__class__.__name__}(light_id={self.light_id}, "
                f"nominal='{nominal}', state={self.state.name})")
