"""
Crossing topologies: which lights exist and where each one starts.
"""

import yaml
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from control.signal_states import NominalState


@dataclass(frozen=True)
class LightConfig:
    """One light of a crossing"""
    light_id: int
    nominal_state: Union[NominalState, str]


# "+"-crossing: lane A (ids 1, 2) starts red, lane B (ids 3, 4) starts green
PLUS_CROSSING: Tuple[LightConfig, ...] = (
    LightConfig(light_id=1, nominal_state=NominalState.RED),
    LightConfig(light_id=2, nominal_state=NominalState.RED),
    LightConfig(light_id=3, nominal_state=NominalState.GREEN),
    LightConfig(light_id=4, nominal_state=NominalState.GREEN),
)


def validate_topology(entries: Iterable[LightConfig]) -> Tuple[LightConfig, ...]:
    """
    Check a topology table

    Returns:
        The entries as a tuple, in the given order

    Raises:
        ValueError: empty table, non-positive or duplicate light id
    """
    entries = tuple(entries)
    if not entries:
        raise ValueError("topology must define at least one light")

    seen = set()
    for entry in entries:
        light_id = entry.light_id
        if isinstance(light_id, bool) or not isinstance(light_id, int) or light_id <= 0:
            raise ValueError(f"light id must be a positive int, got {light_id!r}")
        if light_id in seen:
            raise ValueError(f"duplicate light id {light_id}")
        seen.add(light_id)

    return entries


def load_topology(config_path: str) -> Tuple[LightConfig, ...]:
    """
    Load a crossing topology from YAML

    Args:
        config_path: Path to a crossing config (see config/plus_crossing.yaml)
    """
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict) or 'crossing' not in config:
        raise ValueError(f"{config_path}: missing 'crossing' section")

    crossing = config['crossing']
    if not isinstance(crossing, dict):
        raise ValueError(f"{config_path}: 'crossing' must be a mapping, got {crossing!r}")

    lights = crossing.get('lights') or []
    if not isinstance(lights, list):
        raise ValueError(f"{config_path}: 'lights' must be a list, got {lights!r}")

    entries = []
    for light_data in lights:
        try:
            entries.append(LightConfig(
                light_id=light_data['id'],
                # Unknown values are kept as-is; such lights reset to attention mode
                nominal_state=NominalState.parse(light_data['nominal']) or light_data['nominal'],
            ))
        except (KeyError, TypeError) as e:
            raise ValueError(f"{config_path}: malformed light entry {light_data!r}") from e

    topology = validate_topology(entries)
    print(f"✓ Loaded {len(topology)} light definitions "
          f"({crossing.get('name', 'unnamed crossing')})")
    return topology
