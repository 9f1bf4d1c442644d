"""
Group controller driving all lights of a crossing in lockstep.

Lane control comes from the complementary nominal states in the topology
table; the controller itself only broadcasts operations.
"""

from typing import Dict, Iterable, List, Tuple

from control.signal_states import SignalReading, SignalState
from control.topology import PLUS_CROSSING, LightConfig, validate_topology
from control.traffic_light import TrafficLight


class LightGroupController:
    """
    Broadcasts advance, signal and attention operations to a fixed group
    of traffic lights.
    """

    def __init__(self, topology: Iterable[LightConfig] = PLUS_CROSSING):
        """
        Initialize group controller

        Args:
            topology: Light table, defaults to the four-light "+"-crossing
        """
        entries = validate_topology(topology)
        self.lights: Tuple[TrafficLight, ...] = tuple(
            TrafficLight(entry.light_id, entry.nominal_state)
            for entry in sorted(entries, key=lambda e: e.light_id)
        )
        self._by_id: Dict[int, TrafficLight] = {
            light.light_id: light for light in self.lights
        }

    def advance_all(self):
        """
        Switch every light to its next signal state, in id order.

        Not transactional: if a light is in attention mode the error
        propagates and lights earlier in the order stay advanced.
        """
        for light in self.lights:
            light.advance()

    def emit_all(self) -> List[SignalReading]:
        """Current signal of every light, in id order"""
        return [light.emit_signal() for light in self.lights]

    def attention_on_all(self):
        """Turn on attention mode (normal operation is switched off)"""
        for light in self.lights:
            light.enter_attention()

    def attention_off_all(self):
        """Turn off attention mode (back to normal operation)"""
        for light in self.lights:
            light.exit_attention()

    def reset(self):
        """Reset controller state"""
        self.attention_off_all()

    def get_light(self, light_id: int) -> TrafficLight:
        """Get light by id (KeyError if unknown)"""
        return self._by_id[light_id]

    def states(self) -> Dict[int, SignalState]:
        return {light.light_id: light.state for light in self.lights}

    @property
    def in_attention(self) -> bool:
        """True when every light is blinking"""
        return all(light.in_attention for light in self.lights)

    def get_status(self) -> dict:
        """Get controller status for monitoring"""
        return {
            'mode': 'ATTENTION' if self.in_attention else 'NORMAL',
            'lights': {
                light.light_id: light.state.name for light in self.lights
            },
            'signals': [str(reading) for reading in self.emit_all()],
        }
