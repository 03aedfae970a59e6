import random
from dataclasses import dataclass, field

from biosimkit.genome import ACTION, NEURON, SENSOR, Gene, NeuralNet
from biosimkit.report import (
    append_epoch_log,
    average_genome_length,
    format_edge_list,
    format_genome,
    format_reference_counts,
    format_sample_genomes,
    reference_counts,
)
from biosimkit.sensors_actions import NUM_ACTIONS, NUM_SENSES, Action, Sensor


@dataclass
class _Indiv:
    alive: bool
    genome: list = field(default_factory=list)
    nnet: NeuralNet = field(default_factory=NeuralNet)


SENSOR_TO_ACTION = Gene(SENSOR, Sensor.AGE, ACTION, Action.MOVE_EAST, 100)
NEURON_TO_NEURON = Gene(NEURON, 3, NEURON, 5, -7)


def test_format_genome_zero_gene():
    assert format_genome([Gene()]) == "00000000\n"


def test_format_genome_wraps_after_eight():
    text = format_genome([Gene()] * 9)
    lines = text.splitlines()
    assert len(lines) == 2
    assert len(lines[0].split(" ")) == 8
    assert lines[1] == "00000000"


def test_format_genome_words_are_hex_of_gene():
    genes = [SENSOR_TO_ACTION, NEURON_TO_NEURON]
    words = format_genome(genes).split()
    assert [int(word, 16) for word in words] == [int(g) for g in genes]


def test_format_edge_list():
    text = format_edge_list([SENSOR_TO_ACTION, NEURON_TO_NEURON])
    assert text == "Age MvE 100\nN3 N5 -7\n"


def test_format_edge_list_empty():
    assert format_edge_list([]) == ""


def test_average_genome_length_uniform():
    genomes = [[Gene()] * 5 for _ in range(4)]
    assert average_genome_length(genomes, random.Random(0)) == 5.0


def test_average_genome_length_bounds():
    genomes = [[Gene()] * n for n in (2, 4, 8)]
    value = average_genome_length(genomes, random.Random(1))
    assert 2.0 <= value <= 8.0


def test_average_genome_length_empty():
    assert average_genome_length([], random.Random(0)) == 0.0


def test_append_epoch_log(tmp_path):
    path = append_epoch_log(tmp_path, 0, 10, 0.5, 24.0, 3)
    append_epoch_log(tmp_path, 1, 8, 0.25, 25.5, 0)
    assert path.read_text().splitlines() == ["0 10 0.5 24 3", "1 8 0.25 25.5 0"]
    append_epoch_log(tmp_path, 0, 7, 0.5, 24.0, 1)
    assert path.read_text().splitlines() == ["0 7 0.5 24 1"]


def test_reference_counts_ignores_dead():
    net = NeuralNet(connections=[SENSOR_TO_ACTION, NEURON_TO_NEURON])
    agents = [_Indiv(True, nnet=net), _Indiv(False, nnet=net), _Indiv(True, nnet=net)]
    sensors, actions = reference_counts(agents)
    assert len(sensors) == NUM_SENSES and len(actions) == NUM_ACTIONS
    assert sensors[Sensor.AGE] == 2
    assert actions[Action.MOVE_EAST] == 2
    assert sum(sensors) == 2 and sum(actions) == 2


def test_format_reference_counts():
    sensors = [0] * NUM_SENSES
    actions = [0] * NUM_ACTIONS
    sensors[Sensor.AGE] = 2
    actions[Action.KILL_FORWARD] = 1
    assert format_reference_counts(sensors, actions) == (
        "Sensors in use:\n  2 - age\nActions in use:\n  1 - kill fwd\n"
    )


def test_format_sample_genomes_skips_dead():
    net = NeuralNet(connections=[SENSOR_TO_ACTION])
    agents = [
        _Indiv(False, [Gene()], net),
        _Indiv(True, [Gene()], net),
        _Indiv(True, [Gene()], net),
    ]
    text = format_sample_genomes(agents, 1)
    assert "Individual ID 2\n" in text
    assert "Individual ID 1\n" not in text
    assert "Individual ID 3\n" not in text
    assert text.startswith("---------------------------\nIndividual ID 2\n00000000\n\nAge MvE 100\n")
    assert text.endswith(format_reference_counts(*reference_counts(agents)))