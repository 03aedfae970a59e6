"""Sensor and action neuron kinds and their names."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

__all__ = [
    "Sensor",
    "Action",
    "NUM_SENSES",
    "NUM_ACTIONS",
    "SENSOR_MIN",
    "SENSOR_MAX",
    "SENSOR_RANGE",
    "NEURON_MIN",
    "NEURON_MAX",
    "NEURON_RANGE",
    "ACTION_MIN",
    "ACTION_MAX",
    "ACTION_RANGE",
    "sensor_name",
    "action_name",
    "sensor_short_name",
    "action_short_name",
    "print_sensors_actions",
]

SENSOR_MIN = 0.0
SENSOR_MAX = 1.0
SENSOR_RANGE = SENSOR_MAX - SENSOR_MIN

NEURON_MIN = -1.0
NEURON_MAX = 1.0
NEURON_RANGE = NEURON_MAX - NEURON_MIN

ACTION_MIN = 0.0
ACTION_MAX = 1.0
ACTION_RANGE = ACTION_MAX - ACTION_MIN


class Sensor(IntEnum):
    """Sensor (input) neurons."""

    LOC_X = 0
    LOC_Y = 1
    BOUNDARY_DIST_X = 2
    BOUNDARY_DIST = 3
    BOUNDARY_DIST_Y = 4
    GENETIC_SIM_FWD = 5
    LAST_MOVE_DIR_X = 6
    LAST_MOVE_DIR_Y = 7
    LONGPROBE_POP_FWD = 8
    LONGPROBE_BAR_FWD = 9
    POPULATION = 10
    POPULATION_FWD = 11
    POPULATION_LR = 12
    OSC1 = 13
    AGE = 14
    BARRIER_FWD = 15
    BARRIER_LR = 16
    RANDOM = 17
    SIGNAL0 = 18
    SIGNAL0_FWD = 19
    SIGNAL0_LR = 20


class Action(IntEnum):
    """Action (output) neurons."""

    MOVE_X = 0
    MOVE_Y = 1
    MOVE_FORWARD = 2
    MOVE_RL = 3
    MOVE_RANDOM = 4
    SET_OSCILLATOR_PERIOD = 5
    SET_LONGPROBE_DIST = 6
    SET_RESPONSIVENESS = 7
    EMIT_SIGNAL0 = 8
    MOVE_EAST = 9
    MOVE_WEST = 10
    MOVE_NORTH = 11
    MOVE_SOUTH = 12
    MOVE_LEFT = 13
    MOVE_RIGHT = 14
    MOVE_REVERSE = 15
    KILL_FORWARD = 16


NUM_SENSES = len(Sensor)
NUM_ACTIONS = len(Action)

_SENSOR_NAMES = {
    Sensor.AGE: "age",
    Sensor.BOUNDARY_DIST: "boundary dist",
    Sensor.BOUNDARY_DIST_X: "boundary dist X",
    Sensor.BOUNDARY_DIST_Y: "boundary dist Y",
    Sensor.LAST_MOVE_DIR_X: "last move dir X",
    Sensor.LAST_MOVE_DIR_Y: "last move dir Y",
    Sensor.LOC_X: "loc X",
    Sensor.LOC_Y: "loc Y",
    Sensor.LONGPROBE_POP_FWD: "long probe population fwd",
    Sensor.LONGPROBE_BAR_FWD: "long probe barrier fwd",
    Sensor.BARRIER_FWD: "short probe barrier fwd-rev",
    Sensor.BARRIER_LR: "short probe barrier left-right",
    Sensor.OSC1: "osc1",
    Sensor.POPULATION: "population",
    Sensor.POPULATION_FWD: "population fwd",
    Sensor.POPULATION_LR: "population LR",
    Sensor.RANDOM: "random",
    Sensor.SIGNAL0: "signal 0",
    Sensor.SIGNAL0_FWD: "signal 0 fwd",
    Sensor.SIGNAL0_LR: "signal 0 LR",
    Sensor.GENETIC_SIM_FWD: "genetic similarity fwd",
}

_ACTION_NAMES = {
    Action.MOVE_EAST: "move east",
    Action.MOVE_WEST: "move west",
    Action.MOVE_NORTH: "move north",
    Action.MOVE_SOUTH: "move south",
    Action.MOVE_FORWARD: "move fwd",
    Action.MOVE_X: "move X",
    Action.MOVE_Y: "move Y",
    Action.SET_RESPONSIVENESS: "set inv-responsiveness",
    Action.SET_OSCILLATOR_PERIOD: "set osc1",
    Action.EMIT_SIGNAL0: "emit signal 0",
    Action.KILL_FORWARD: "kill fwd",
    Action.MOVE_REVERSE: "move reverse",
    Action.MOVE_LEFT: "move left",
    Action.MOVE_RIGHT: "move right",
    Action.MOVE_RL: "move R-L",
    Action.MOVE_RANDOM: "move random",
    Action.SET_LONGPROBE_DIST: "set longprobe dist",
}

_SENSOR_SHORT_NAMES = {
    Sensor.AGE: "Age",
    Sensor.BOUNDARY_DIST: "ED",
    Sensor.BOUNDARY_DIST_X: "EDx",
    Sensor.BOUNDARY_DIST_Y: "EDy",
    Sensor.LAST_MOVE_DIR_X: "LMx",
    Sensor.LAST_MOVE_DIR_Y: "LMy",
    Sensor.LOC_X: "Lx",
    Sensor.LOC_Y: "Ly",
    Sensor.LONGPROBE_POP_FWD: "LPf",
    Sensor.LONGPROBE_BAR_FWD: "LPb",
    Sensor.BARRIER_FWD: "Bfd",
    Sensor.BARRIER_LR: "Blr",
    Sensor.OSC1: "Osc",
    Sensor.POPULATION: "Pop",
    Sensor.POPULATION_FWD: "Pfd",
    Sensor.POPULATION_LR: "Plr",
    Sensor.RANDOM: "Rnd",
    Sensor.SIGNAL0: "Sg",
    Sensor.SIGNAL0_FWD: "Sfd",
    Sensor.SIGNAL0_LR: "Slr",
    Sensor.GENETIC_SIM_FWD: "Gen",
}

_ACTION_SHORT_NAMES = {
    Action.MOVE_EAST: "MvE",
    Action.MOVE_WEST: "MvW",
    Action.MOVE_NORTH: "MvN",
    Action.MOVE_SOUTH: "MvS",
    Action.MOVE_X: "MvX",
    Action.MOVE_Y: "MvY",
    Action.MOVE_FORWARD: "Mfd",
    Action.SET_RESPONSIVENESS: "Res",
    Action.SET_OSCILLATOR_PERIOD: "OSC",
    Action.EMIT_SIGNAL0: "SG",
    Action.KILL_FORWARD: "Klf",
    Action.MOVE_REVERSE: "Mrv",
    Action.MOVE_LEFT: "MvL",
    Action.MOVE_RIGHT: "MvR",
    Action.MOVE_RL: "MRL",
    Action.MOVE_RANDOM: "Mrn",
    Action.SET_LONGPROBE_DIST: "LPD",
}


def _lookup(table: dict, kind: type[IntEnum], value: int) -> str | None:
    try:
        return table[kind(value)]
    except (ValueError, KeyError):
        return None


def sensor_name(sensor: int) -> str:
    """Descriptive name of a sensor; unknown numbers are reported as such."""
    name = _lookup(_SENSOR_NAMES, Sensor, sensor)
    return name if name is not None else f"unknown sensor {int(sensor)}"


def action_name(action: int) -> str:
    """Descriptive name of an action; unknown numbers are reported as such."""
    name = _lookup(_ACTION_NAMES, Action, action)
    return name if name is not None else f"unknown action {int(action)}"


def sensor_short_name(sensor: int) -> str:
    """Mnemonic of a sensor as used in edge lists."""
    name = _lookup(_SENSOR_SHORT_NAMES, Sensor, sensor)
    return name if name is not None else f"S{int(sensor)}"


def action_short_name(action: int) -> str:
    """Mnemonic of an action as used in edge lists."""
    name = _lookup(_ACTION_SHORT_NAMES, Action, action)
    return name if name is not None else f"A{int(action)}"


def print_sensors_actions(file: TextIO | None = None) -> None:
    """Write the names of all sensors and actions."""
    out = file if file is not None else sys.stdout
    print("Sensors:", file=out)
    for sensor in Sensor:
        print(f"  {sensor_name(sensor)}", file=out)
    print("Actions:", file=out)
    for action in Action:
        print(f"  {action_name(action)}", file=out)
    print(file=out)