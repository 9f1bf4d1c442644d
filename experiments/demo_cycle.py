"""
Demo: drive the four-light crossing through normal cycles and an attention
(yellow blinking) episode, printing every signal.
"""

import sys
from pathlib import Path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from control.light_group_controller import LightGroupController
from control.signal_states import SignalState
from control.topology import PLUS_CROSSING, load_topology
import numpy as np


def signal(ctrl: LightGroupController, timeline: list):
    """Print current signals and record states for the timeline"""
    for reading in ctrl.emit_all():
        print(reading)
    timeline.append([light.state.value for light in ctrl.lights])


def run_cycle(ctrl: LightGroupController, timeline: list):
    """One cycle: emit, then advance x3 with an emit after each"""
    signal(ctrl, timeline)
    for _ in range(3):
        ctrl.advance_all()
        signal(ctrl, timeline)


def run_demo(ctrl: LightGroupController, cycles: int = 1) -> np.ndarray:
    """
    Run the demo scenario

    Returns:
        (steps, lights) array of SignalState values
    """
    timeline = []

    # Lights without a red/green nominal state stay blinking and cannot advance
    blinking = [light.light_id for light in ctrl.lights if light.in_attention]
    if blinking:
        print(f"⚠️  Lights {blinking} have no red/green nominal state, "
              f"skipping normal cycles")
        cycles = 0

    for _ in range(cycles):
        run_cycle(ctrl, timeline)

    # Alert situation
    print("⚠️  ATTENTION MODE ON")
    ctrl.attention_on_all()
    signal(ctrl, timeline)
    ctrl.attention_off_all()
    print("✓  ATTENTION MODE OFF")

    for _ in range(cycles):
        run_cycle(ctrl, timeline)

    return np.array(timeline, dtype=int)


def plot_timeline(timeline: np.ndarray, light_ids, plot_path: Path):
    """Save a step x light chart of signal states"""
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from matplotlib.colors import ListedColormap

    # Indexed by SignalState value
    colors = ['red', 'gold', 'green', 'orange', 'khaki']
    cmap = ListedColormap(colors)

    fig, ax = plt.subplots(figsize=(max(6, len(timeline) * 0.5), 3))
    ax.imshow(timeline.T, cmap=cmap, vmin=0, vmax=len(colors) - 1,
              aspect='auto', interpolation='nearest')
    ax.set_xlabel('Step')
    ax.set_ylabel('Light')
    ax.set_yticks(np.arange(len(light_ids)))
    ax.set_yticklabels([str(i) for i in light_ids])
    ax.set_title('Signal Timeline')

    handles = [
        plt.Rectangle((0, 0), 1, 1, color=colors[state.value])
        for state in SignalState
    ]
    ax.legend(handles, [f"{s.name} ({s.label})" for s in SignalState],
              loc='upper left', bbox_to_anchor=(1.01, 1.0), fontsize=8)

    plot_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(plot_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"✓ Plot saved: {plot_path}")


def main(argv=None):
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description='Traffic light crossing demo (normal cycle + attention mode)'
    )
    parser.add_argument('--config', type=str, default=None,
                       help='Crossing topology YAML (default: built-in "+"-crossing)')
    parser.add_argument('--cycles', type=int, default=1,
                       help='Normal cycles before and after attention mode (default: 1)')
    parser.add_argument('--plot', type=str, default=None,
                       help='Save a signal timeline chart to this path')

    args = parser.parse_args(argv)

    try:
        topology = load_topology(args.config) if args.config else PLUS_CROSSING
        ctrl = LightGroupController(topology)
        timeline = run_demo(ctrl, cycles=args.cycles)

        if args.plot:
            plot_timeline(timeline, [light.light_id for light in ctrl.lights],
                          Path(args.plot))
        return 0

    except Exception as e:
        print(f"\n✗ ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
