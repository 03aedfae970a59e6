"""Genes, genomes, their mutation and the wiring of a neural net from a genome."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

from .sensors_actions import NUM_ACTIONS, NUM_SENSES

__all__ = [
    "NEURON",
    "SENSOR",
    "ACTION",
    "Gene",
    "Genome",
    "Neuron",
    "NeuralNet",
    "GenomeConfig",
    "make_random_gene",
    "make_random_genome",
    "create_wiring_from_genome",
    "deduplicate_connections",
    "random_bit_flip",
    "crop_length",
    "random_insert_deletion",
    "apply_point_mutations",
    "generate_child_genome",
]

NEURON = 0
"""Source or sink type of an internal neuron."""

SENSOR = 1
"""Source type of a sensor neuron."""

ACTION = 1
"""Sink type of an action neuron."""

_INT16_MIN = -0x8000
_INT16_MAX = 0x7FFF
_WEIGHT_SCALE = 8192.0


def _wrap16(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


@dataclass(frozen=True)
class Gene:
    """One connection: a 1-bit source type, 7-bit source number,
    1-bit sink type, 7-bit sink number and a signed 16-bit weight.

    Values outside a field's width are truncated to it.
    """

    source_type: int = 0
    source_num: int = 0
    sink_type: int = 0
    sink_num: int = 0
    weight: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "source_type", int(self.source_type) & 0x01)
        object.__setattr__(self, "source_num", int(self.source_num) & 0x7F)
        object.__setattr__(self, "sink_type", int(self.sink_type) & 0x01)
        object.__setattr__(self, "sink_num", int(self.sink_num) & 0x7F)
        object.__setattr__(self, "weight", _wrap16(self.weight))

    def weight_as_float(self) -> float:
        return self.weight / _WEIGHT_SCALE

    @staticmethod
    def random_weight(rng: random.Random) -> int:
        """Return a uniformly random signed 16-bit weight."""
        return rng.randint(_INT16_MIN, _INT16_MAX)

    def __int__(self) -> int:
        """The gene packed into 32 bits, low bits first."""
        return (
            self.source_type
            | (self.source_num << 1)
            | (self.sink_type << 8)
            | (self.sink_num << 9)
            | ((self.weight & 0xFFFF) << 16)
        )


Genome = list[Gene]


@dataclass
class Neuron:
    """An internal neuron; undriven neurons keep their output as a bias."""

    output: float = 0.5
    driven: bool = False


@dataclass
class NeuralNet:
    """Connections ordered neuron sinks first, then action sinks."""

    connections: list[Gene] = field(default_factory=list)
    neurons: list[Neuron] = field(default_factory=list)


@dataclass(frozen=True)
class GenomeConfig:
    """Parameters that steer reproduction and mutation."""

    initial_length_min: int = 24
    initial_length_max: int = 24
    max_length: int = 300
    point_mutation_rate: float = 0.001
    gene_insertion_deletion_rate: float = 0.0
    deletion_ratio: float = 0.5
    sexual_reproduction: bool = True
    choose_parents_by_fitness: bool = True


def make_random_gene(rng: random.Random) -> Gene:
    return Gene(
        source_type=rng.getrandbits(1),
        source_num=rng.randint(0, 0x7FFF),
        sink_type=rng.getrandbits(1),
        sink_num=rng.randint(0, 0x7FFF),
        weight=Gene.random_weight(rng),
    )


def make_random_genome(rng: random.Random, min_length: int, max_length: int) -> Genome:
    length = rng.randint(min_length, max_length)
    return [make_random_gene(rng) for _ in range(length)]


@dataclass
class _Node:
    outputs: int = 0
    self_inputs: int = 0
    other_inputs: int = 0


def _renumbered(gene: Gene, max_neurons: int) -> Gene:
    source_mod = max_neurons if gene.source_type == NEURON else NUM_SENSES
    sink_mod = max_neurons if gene.sink_type == NEURON else NUM_ACTIONS
    return replace(
        gene,
        source_num=gene.source_num % source_mod,
        sink_num=gene.sink_num % sink_mod,
    )


def _make_node_map(connections: Iterable[Gene]) -> dict[int, _Node]:
    nodes: dict[int, _Node] = {}
    for conn in connections:
        if conn.sink_type == NEURON:
            node = nodes.setdefault(conn.sink_num, _Node())
            if conn.source_type == NEURON and conn.source_num == conn.sink_num:
                node.self_inputs += 1
            else:
                node.other_inputs += 1
        if conn.source_type == NEURON:
            nodes.setdefault(conn.source_num, _Node()).outputs += 1
    return nodes


def _cull_useless_neurons(connections: list[Gene], nodes: dict[int, _Node]) -> list[Gene]:
    """Drop neurons that feed nothing but themselves, with the connections into them."""
    changed = True
    while changed:
        changed = False
        for number in sorted(nodes):
            node = nodes[number]
            if node.outputs != node.self_inputs:
                continue
            changed = True
            kept = []
            for conn in connections:
                if conn.sink_type == NEURON and conn.sink_num == number:
                    if conn.source_type == NEURON and conn.source_num in nodes:
                        nodes[conn.source_num].outputs -= 1
                else:
                    kept.append(conn)
            connections = kept
            del nodes[number]
    return connections


def create_wiring_from_genome(
    genome: Iterable[Gene], max_neurons: int, initial_output: float = 0.5
) -> NeuralNet:
    """Build the neural net encoded by ``genome``.

    Neuron numbers are reduced modulo ``max_neurons``, sensors and actions
    modulo their counts; useless neurons are culled and the rest renumbered
    from zero in ascending order.
    """
    if max_neurons <= 0:
        raise ValueError("max_neurons must be positive")

    connections = [_renumbered(gene, max_neurons) for gene in genome]
    nodes = _make_node_map(connections)
    connections = _cull_useless_neurons(connections, nodes)

    remap = {number: index for index, number in enumerate(sorted(nodes))}

    def remapped_source(conn: Gene) -> int:
        return remap[conn.source_num] if conn.source_type == NEURON else conn.source_num

    to_neurons = [
        replace(conn, sink_num=remap[conn.sink_num], source_num=remapped_source(conn))
        for conn in connections
        if conn.sink_type == NEURON
    ]
    to_actions = [
        replace(conn, source_num=remapped_source(conn))
        for conn in connections
        if conn.sink_type == ACTION
    ]

    # Neuron slots run up to the highest surviving original neuron number;
    # a slot is driven when the neuron of that original number had inputs.
    slot_count = max(nodes) + 1 if nodes else 0
    neurons = [
        Neuron(
            output=initial_output,
            driven=number in nodes and nodes[number].other_inputs != 0,
        )
        for number in range(slot_count)
    ]
    return NeuralNet(
        connections=deduplicate_connections(to_neurons + to_actions),
        neurons=neurons,
    )


def deduplicate_connections(connections: Iterable[Gene]) -> list[Gene]:
    """Merge connections with the same source and sink by summing their weights.

    Sums are clamped to the signed 16-bit range; first occurrences keep their order.
    """
    sums: dict[tuple[int, int, int, int], int] = {}
    for conn in connections:
        key = (conn.source_type, conn.source_num, conn.sink_type, conn.sink_num)
        sums[key] = sums.get(key, 0) + conn.weight
    return [
        Gene(source_type, source_num, sink_type, sink_num,
             max(_INT16_MIN, min(_INT16_MAX, total)))
        for (source_type, source_num, sink_type, sink_num), total in sums.items()
    ]


def random_bit_flip(genome: Genome, rng: random.Random) -> None:
    """Flip one random bit of one random gene in place."""
    if not genome:
        raise ValueError("cannot mutate an empty genome")
    index = rng.randint(0, len(genome) - 1)
    bit = 1 << rng.randint(0, 7)
    gene = genome[index]
    chance = rng.random()
    if chance < 0.2:
        gene = replace(gene, source_type=gene.source_type ^ 1)
    elif chance < 0.4:
        gene = replace(gene, sink_type=gene.sink_type ^ 1)
    elif chance < 0.6:
        gene = replace(gene, source_num=gene.source_num ^ bit)
    elif chance < 0.8:
        gene = replace(gene, sink_num=gene.sink_num ^ bit)
    else:
        gene = replace(gene, weight=gene.weight ^ (1 << rng.randint(1, 15)))
    genome[index] = gene


def crop_length(genome: Genome, length: int, rng: random.Random) -> None:
    """Trim the genome in place to ``length`` genes from the front or the back."""
    if len(genome) > length > 0:
        if rng.random() < 0.5:
            del genome[: len(genome) - length]
        else:
            del genome[length:]


def random_insert_deletion(genome: Genome, rng: random.Random, config: GenomeConfig) -> None:
    """Maybe delete a random gene or append a new one, in place.

    Longer genomes than the initial length are more likely to lose a gene.
    """
    if rng.random() >= config.gene_insertion_deletion_rate:
        return
    length = float(len(genome))
    initial = float(config.initial_length_min)
    length_factor = initial / length if length > initial else 1.0
    deletion_ratio = config.deletion_ratio + (1.0 - length_factor) * (1.0 - config.deletion_ratio)
    if rng.random() < deletion_ratio:
        if len(genome) > 1:
            del genome[rng.randint(0, len(genome) - 1)]
    elif len(genome) < config.max_length:
        genome.append(make_random_gene(rng))


def apply_point_mutations(genome: Genome, rng: random.Random, rate: float) -> None:
    """Give each gene position one chance at ``rate`` of a bit flip, in place."""
    for _ in range(len(genome)):
        if rng.random() < rate:
            random_bit_flip(genome, rng)


def generate_child_genome(
    parent_genomes: Sequence[Sequence[Gene]], rng: random.Random, config: GenomeConfig
) -> Genome:
    """Make a mutated child genome from one or two of the candidate parents.

    With fitness preference the candidates are taken to be ordered by
    score, and the second parent is chosen from before the first.
    """
    count = len(parent_genomes)
    if count == 0:
        raise ValueError("no parent genomes")

    if config.choose_parents_by_fitness and count > 1:
        first = rng.randint(1, count - 1)
        second = rng.randint(0, first - 1)
    else:
        first = rng.randint(0, count - 1)
        second = rng.randint(0, count - 1)

    g1 = parent_genomes[first]
    g2 = parent_genomes[second]
    if not g1 or not g2:
        raise ValueError("invalid genome: a parent genome is empty")

    if config.sexual_reproduction:
        longer, shorter = (g1, g2) if len(g1) > len(g2) else (g2, g1)
        genome = list(longer)
        start = rng.randint(0, len(shorter) - 1)
        stop = rng.randint(0, len(shorter))
        if start > stop:
            start, stop = stop, start
        genome[start:stop] = shorter[start:stop]

        total = len(g1) + len(g2)
        if total & 1 and rng.getrandbits(1):
            total += 1
        crop_length(genome, total // 2, rng)
    else:
        genome = list(g2)

    random_insert_deletion(genome, rng, config)
    apply_point_mutations(genome, rng, config.point_mutation_rate)
    return genome