"""Grid world, barriers, genomes, neural wiring, genome comparison and reports for evolutionary artificial-life simulations."""

__version__ = "1.0.0"