"""Text reports about genomes, neural nets and the population."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

from .genome import ACTION, SENSOR, Gene, NeuralNet
from .sensors_actions import (
    NUM_ACTIONS,
    NUM_SENSES,
    action_name,
    action_short_name,
    sensor_name,
    sensor_short_name,
)

__all__ = [
    "format_genome",
    "format_edge_list",
    "average_genome_length",
    "append_epoch_log",
    "reference_counts",
    "format_reference_counts",
    "format_sample_genomes",
]

_GENES_PER_LINE = 8
_LENGTH_SAMPLES = 100
_EPOCH_LOG_NAME = "epoch-log.txt"
_RULE = "---------------------------"


class _Wired(Protocol):
    alive: bool
    genome: Sequence[Gene]
    nnet: NeuralNet


def format_genome(genome: Sequence[Gene]) -> str:
    """Genes as 32-bit hex words, eight to a line."""
    words = [f"{int(gene):08x}" for gene in genome]
    lines = [
        " ".join(words[start:start + _GENES_PER_LINE])
        for start in range(0, len(words), _GENES_PER_LINE)
    ]
    return "\n".join(lines) + "\n"


def format_edge_list(connections: Iterable[Gene]) -> str:
    """One ``source sink weight`` line per connection, for graphing the net."""
    lines = []
    for conn in connections:
        source = (
            sensor_short_name(conn.source_num)
            if conn.source_type == SENSOR
            else f"N{conn.source_num}"
        )
        sink = (
            action_short_name(conn.sink_num)
            if conn.sink_type == ACTION
            else f"N{conn.sink_num}"
        )
        lines.append(f"{source} {sink} {conn.weight}\n")
    return "".join(lines)


def average_genome_length(genomes: Sequence[Sequence[Gene]], rng: random.Random) -> float:
    """Mean genome length over 100 random samples; 0.0 for no genomes."""
    if not genomes:
        return 0.0
    total = sum(len(genomes[rng.randrange(len(genomes))]) for _ in range(_LENGTH_SAMPLES))
    return total / _LENGTH_SAMPLES


def append_epoch_log(
    log_dir: str | Path,
    generation: int,
    survivors: int,
    diversity: float,
    average_length: float,
    murder_count: int,
) -> Path:
    """Append one generation's line to the epoch log; generation 0 starts it afresh."""
    path = Path(log_dir) / _EPOCH_LOG_NAME
    mode = "w" if generation == 0 else "a"
    with path.open(mode, encoding="utf-8") as log:
        log.write(
            f"{generation} {survivors} {diversity:g} {average_length:g} {murder_count}\n"
        )
    return path


def reference_counts(agents: Iterable[_Wired]) -> tuple[list[int], list[int]]:
    """Count connections from each sensor and to each action over the living agents."""
    sensor_counts = [0] * NUM_SENSES
    action_counts = [0] * NUM_ACTIONS
    for agent in agents:
        if not agent.alive:
            continue
        for gene in agent.nnet.connections:
            if gene.source_type == SENSOR and gene.source_num < NUM_SENSES:
                sensor_counts[gene.source_num] += 1
            if gene.sink_type == ACTION and gene.sink_num < NUM_ACTIONS:
                action_counts[gene.sink_num] += 1
    return sensor_counts, action_counts


def format_reference_counts(
    sensor_counts: Sequence[int], action_counts: Sequence[int]
) -> str:
    """List the sensors and actions in use with their counts."""
    lines = ["Sensors in use:\n"]
    lines += [
        f"  {count} - {sensor_name(number)}\n"
        for number, count in enumerate(sensor_counts[:NUM_SENSES])
        if count > 0
    ]
    lines.append("Actions in use:\n")
    lines += [
        f"  {count} - {action_name(number)}\n"
        for number, count in enumerate(action_counts[:NUM_ACTIONS])
        if count > 0
    ]
    return "".join(lines)


def format_sample_genomes(agents: Sequence[_Wired], count: int) -> str:
    """Genomes and edge lists of the first ``count`` living agents, then reference counts.

    Agents are numbered from 1 in the order given.
    """
    parts = []
    for index, agent in enumerate(agents, start=1):
        if count <= 0:
            break
        if not agent.alive:
            continue
        parts.append(f"{_RULE}\nIndividual ID {index}\n")
        parts.append(format_genome(agent.genome))
        parts.append("\n")
        parts.append(format_edge_list(agent.nnet.connections))
        parts.append(f"{_RULE}\n")
        count -= 1
    parts.append(format_reference_counts(*reference_counts(agents)))
    return "".join(parts)