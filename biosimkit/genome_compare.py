"""Similarity measures between genomes and the genetic diversity of a population."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .genome import Gene

__all__ = [
    "genes_match",
    "jaro_winkler_distance",
    "hamming_distance_bits",
    "hamming_distance_bytes",
    "genome_similarity",
    "genetic_diversity",
]

_MAX_GENES_TO_COMPARE = 20
_MAX_PREFIX_LENGTH = 4
_WINKLER_SCALING = 0.1
_BYTES_PER_GENE = 4
_BITS_PER_GENE = 8 * _BYTES_PER_GENE
_MAX_DIVERSITY_SAMPLES = 1000


def genes_match(g1: Gene, g2: Gene) -> bool:
    """True if both genes have the same source, sink and weight."""
    return (
        g1.sink_num == g2.sink_num
        and g1.source_num == g2.source_num
        and g1.sink_type == g2.sink_type
        and g1.source_type == g2.source_type
        and g1.weight == g2.weight
    )


def jaro_winkler_distance(genome1: Sequence[Gene], genome2: Sequence[Gene]) -> float:
    """Jaro-Winkler similarity 0.0..1.0 over at most the first 20 genes of each genome.

    Tolerant of gaps, relocations and unequal lengths.
    """
    s = genome1[:_MAX_GENES_TO_COMPARE]
    a = genome2[:_MAX_GENES_TO_COMPARE]
    sl, al = len(s), len(a)
    if not sl or not al:
        return 0.0

    match_range = max(0, max(sl, al) // 2 - 1)
    s_flags = [False] * sl
    a_flags = [False] * al
    matches = 0

    for i, a_gene in enumerate(a):
        for j in range(max(i - match_range, 0), min(i + match_range + 1, sl)):
            if not s_flags[j] and genes_match(a_gene, s[j]):
                s_flags[j] = True
                a_flags[i] = True
                matches += 1
                break

    if not matches:
        return 0.0

    transpositions = 0
    next_s = 0
    for a_gene, a_flag in zip(a, a_flags):
        if not a_flag:
            continue
        j = next_s
        while j < sl:
            if s_flags[j]:
                next_s = j + 1
                break
            j += 1
        if j < sl and not genes_match(a_gene, s[j]):
            transpositions += 1
    transpositions //= 2

    jaro = (matches / sl + matches / al + (matches - transpositions) / matches) / 3.0

    prefix = 0
    for g_s, g_a in zip(s[:_MAX_PREFIX_LENGTH], a[:_MAX_PREFIX_LENGTH]):
        if not genes_match(g_s, g_a):
            break
        prefix += 1

    bonus = _WINKLER_SCALING * prefix * (1.0 - jaro)
    return min(1.0, jaro + bonus)


def _check_equal_lengths(genome1: Sequence[Gene], genome2: Sequence[Gene]) -> None:
    if len(genome1) != len(genome2):
        raise ValueError(
            f"genomes must have equal lengths ({len(genome1)} != {len(genome2)})"
        )


def hamming_distance_bits(genome1: Sequence[Gene], genome2: Sequence[Gene]) -> float:
    """Bitwise similarity of two equal-length genomes, scaled so random pairs give about 0.0."""
    _check_equal_lengths(genome1, genome2)
    length_bits = len(genome1) * _BITS_PER_GENE
    if length_bits == 0:
        return 0.0
    bit_count = sum(bin(int(g1) ^ int(g2)).count("1") for g1, g2 in zip(genome1, genome2))
    return 1.0 - min(1.0, (2.0 * bit_count) / length_bits)


def hamming_distance_bytes(genome1: Sequence[Gene], genome2: Sequence[Gene]) -> float:
    """Number of identical genes divided by the genome length in bytes."""
    _check_equal_lengths(genome1, genome2)
    if not genome1:
        raise ValueError("cannot compare empty genomes")
    same = sum(int(g1) == int(g2) for g1, g2 in zip(genome1, genome2))
    return same / (len(genome1) * _BYTES_PER_GENE)


def genome_similarity(
    g1: Sequence[Gene], g2: Sequence[Gene], method: int = 0, initial_length_min: int = 24
) -> float:
    """Similarity 0.0..1.0 of two genomes.

    Genomes of unequal length are compared by Jaro-Winkler blended with
    penalties for their length ratio and their deviation from
    ``initial_length_min``. Equal-length genomes use ``method``:
    0 Jaro-Winkler, 1 bitwise Hamming, 2 per-gene Hamming.
    """
    if len(g1) != len(g2):
        similarity = jaro_winkler_distance(g1, g2)
        len1, len2 = float(len(g1)), float(len(g2))
        length_ratio = min(len1, len2) / max(len1, len2)
        average = (len1 + len2) / 2.0
        if initial_length_min:
            deviation = abs(average - initial_length_min) / initial_length_min
            penalty = min(deviation / 2.0, 1.0)
        else:
            penalty = 1.0
        return similarity * 0.3 + length_ratio * 0.35 + (1.0 - penalty) * 0.35

    if method == 0:
        return jaro_winkler_distance(g1, g2)
    if method == 1:
        return hamming_distance_bits(g1, g2)
    if method == 2:
        return hamming_distance_bytes(g1, g2)
    raise ValueError(f"unknown genome comparison method {method}")


def genetic_diversity(
    genomes: Sequence[Sequence[Gene]],
    rng: random.Random,
    method: int = 0,
    initial_length_min: int = 24,
) -> float:
    """Diversity 0.0..1.0 estimated from random pairs of neighbouring genomes."""
    population = len(genomes)
    if population < 2:
        return 0.0
    samples = min(_MAX_DIVERSITY_SAMPLES, population)
    total = 0.0
    for _ in range(samples):
        index = rng.randint(0, population - 2)
        total += genome_similarity(
            genomes[index], genomes[index + 1], method, initial_length_min
        )
    return 1.0 - total / samples