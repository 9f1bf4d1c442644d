"""
Control module - traffic light state machines and group controller.

Exports:
    - SignalState: Signal state variants of a single light
    - NominalState: Red/green starting configuration of a light
    - SignalReading: (light id, label) signal indication
    - UnsupportedTransition: Raised when advancing a blinking light
    - TrafficLight: Per-light state machine
    - LightGroupController: Lockstep controller for a crossing
    - LightConfig / PLUS_CROSSING / load_topology: Crossing topology tables
"""

from control.signal_states import (
    NominalState,
    SignalReading,
    SignalState,
    UnsupportedTransition,
)
from control.traffic_light import TrafficLight
from control.topology import (
    PLUS_CROSSING,
    LightConfig,
    load_topology,
    validate_topology,
)
from control.light_group_controller import LightGroupController

__all__ = [
    # States
    'SignalState',
    'NominalState',
    'SignalReading',
    'UnsupportedTransition',

    # State machines
    'TrafficLight',
    'LightGroupController',

    # Topology
    'LightConfig',
    'PLUS_CROSSING',
    'load_topology',
    'validate_topology',
]
