"""Feed-forward evaluation of an agent's neural net."""

from __future__ import annotations

import math
from collections.abc import Callable

from .genome import ACTION, SENSOR, NeuralNet
from .sensors_actions import NUM_ACTIONS, Sensor

__all__ = ["feed_forward"]


def feed_forward(nnet: NeuralNet, read_sensor: Callable[[Sensor], float]) -> list[float]:
    """Evaluate ``nnet`` once and return the raw level of every action.

    Connections are expected to be ordered neuron sinks first. When the
    first action connection is reached, driven neurons latch
    ``tanh`` of their summed inputs; undriven neurons keep their output.
    Action levels are unbounded sums of weighted inputs.
    """
    action_levels = [0.0] * NUM_ACTIONS
    accumulators = [0.0] * len(nnet.neurons)
    outputs_computed = False

    for conn in nnet.connections:
        if conn.sink_type == ACTION and not outputs_computed:
            for neuron, total in zip(nnet.neurons, accumulators):
                if neuron.driven:
                    neuron.output = math.tanh(total)
            outputs_computed = True

        if conn.source_type == SENSOR:
            value = read_sensor(Sensor(conn.source_num))
        else:
            value = nnet.neurons[conn.source_num].output

        weighted = value * conn.weight_as_float()
        if conn.sink_type == ACTION:
            action_levels[conn.sink_num] += weighted
        else:
            accumulators[conn.sink_num] += weighted

    return action_levels