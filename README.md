# biosimkit

Building blocks for an evolutionary artificial-life simulation. Agents live on a
2D grid and carry a genome of connection genes. The genome grows into a small
neural net, and the net turns sensor readings into action levels. Genomes can be
mutated, recombined into child genomes and compared with one another.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `biosimkit.geometry`: `Compass`, `Dir`, `Coord` and `Polar`. These are
  directions, eighth-turn rotations, signed 16-bit grid coordinates that wrap
  like int16, and polar vectors.
- `biosimkit.sensors_actions`: the `Sensor` and `Action` enumerations, the
  `NUM_SENSES` and `NUM_ACTIONS` counts, and the value-range constants. It also
  provides `sensor_name`, `action_name`, `sensor_short_name`,
  `action_short_name` and `print_sensors_actions`.
- `biosimkit.grid`: the `Grid` arena, with the cell values `EMPTY` and
  `BARRIER`. Any other cell value is the index of an agent. The module also has
  `visit_neighborhood`, which yields the in-bounds locations within a radius.
- `biosimkit.barriers`: `create_barrier(grid, barrier_type, rng)` draws one of
  the barrier layouts 0 to 6 onto an empty grid. It records the barrier
  locations and centers on the grid.
- `biosimkit.genome` covers genes, neural nets and reproduction:
  - The types `Gene`, `Neuron`, `NeuralNet` and `GenomeConfig`.
  - Random creation with `make_random_gene` and `make_random_genome`.
  - `create_wiring_from_genome`, which renumbers the neurons, culls useless ones
    and merges duplicate connections.
  - In-place mutation with `random_bit_flip`, `crop_length`,
    `random_insert_deletion` and `apply_point_mutations`.
  - `generate_child_genome`, which makes a child from the candidate parents.
- `biosimkit.genome_compare`: `genes_match` and `jaro_winkler_distance`. It also
  has `hamming_distance_bits` and `hamming_distance_bytes`, which work on
  genomes of equal length only. `genome_similarity` combines these, and
  `genetic_diversity` estimates diversity from random neighbouring pairs.
- `biosimkit.neural`: `feed_forward(nnet, read_sensor)` evaluates a net once and
  returns one raw level per action.
- `biosimkit.report` produces text reports:
  - `format_genome` lists genes as hex words.
  - `format_edge_list` gives `source sink weight` lines for graphing a net.
  - `average_genome_length` gives the mean genome length over random samples.
  - `reference_counts` and `format_reference_counts` count and list the
    sensors and actions in use.
  - `format_sample_genomes` reports on the first few living agents.
  - `append_epoch_log` appends a line to `epoch-log.txt` in a log directory.

Every source of randomness is passed in explicitly as a `random.Random`, so a
seeded generator gives reproducible runs.

## A short example

```python
import random

from biosimkit.barriers import create_barrier
from biosimkit.genome import create_wiring_from_genome, make_random_genome
from biosimkit.grid import Grid
from biosimkit.neural import feed_forward
from biosimkit.report import format_edge_list, format_genome

rng = random.Random(1)

grid = Grid(128, 128)
create_barrier(grid, 1, rng)

genome = make_random_genome(rng, 24, 24)
nnet = create_wiring_from_genome(genome, 5, 0.5)

print(format_genome(genome))
print(format_edge_list(nnet.connections))

# Feed every sensor a constant mid-range value.
levels = feed_forward(nnet, lambda sensor: 0.5)
print(levels)
```

## What the package does not do

The package does not compute sensor readings from the grid. `feed_forward` takes
a `read_sensor` callable, which you supply.

It also does not act on action levels. Nothing here turns levels into movements,
signal emission or kills.

There is no simulation loop, population store, signal layer, selection step,
command-line program, or image and video output. These pieces are meant to be
combined by the caller into a full simulation.