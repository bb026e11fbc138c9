"""Locality-sensitive hashing for approximate nearest-neighbour search under cosine distance."""

import argparse
import math
import random
from dataclasses import dataclass
from typing import Any, Callable

from .hash_table import HashTable

DATA_DIM = 3
DATASET_SIZE = 10_000
QUERYSET_SIZE = 1_000
CODE_BITS = 32
MAX_CHAINS = 256
INF = math.inf


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def sample_unit_vector(rng, dim=DATA_DIM):
    """Draw a vector uniformly distributed on the unit hypersphere."""
    vec = [rng.gauss(0.0, 1.0) for _ in range(dim)]
    norm = math.sqrt(_dot(vec, vec))
    return tuple(x / norm for x in vec)


def sample_dataset(rng, size, dim=DATA_DIM):
    """Draw ``size`` unit vectors."""
    return [sample_unit_vector(rng, dim) for _ in range(size)]


def cosine_distance(a, b):
    """Return ``1 - cos(angle)`` between two non-zero vectors."""
    den = math.sqrt(_dot(a, a) * _dot(b, b))
    if den == 0:
        raise ValueError("cosine distance is undefined for zero vectors")
    return 1 - _dot(a, b) / den


def sample_lsh_function(rng, dim=DATA_DIM):
    """Draw a one-bit hash ``f(x) = [<w, x> >= 0]`` with a random unit ``w``."""
    weights = sample_unit_vector(rng, dim)

    def lsh(vec):
        return 1 if _dot(weights, vec) >= 0 else 0

    return lsh


def sample_amplified_lsh_function(rng, r, dim=DATA_DIM):
    """Draw ``r`` one-bit hashes and concatenate their bits into an ``r``-bit code."""
    if not 1 <= r <= CODE_BITS:
        raise ValueError(f"amplification must lie in [1, {CODE_BITS}], got {r}")
    functions = [sample_lsh_function(rng, dim) for _ in range(r)]

    def lsh(vec):
        code = 0
        for function in functions:
            code = (code << 1) | function(vec)
        return code

    return lsh


@dataclass
class LSHFamily:
    """A family of amplified hashes; calling it draws one member."""

    amplification: int
    rng: random.Random
    dim: int = DATA_DIM

    def __call__(self):
        return sample_amplified_lsh_function(self.rng, self.amplification, self.dim)


@dataclass
class LSHResult:
    """Outcome of a retrieval: best distance, matching key and comparisons made."""

    distance: float
    key: Any
    num_comparisons: int


def _identity(code):
    return code


class LSHTable:
    """Several hash tables, each keyed by the code of its own sampled LSH function."""

    def __init__(self, num_chains, num_tables, lsh_family,
                 distance: Callable[[Any, Any], float] = cosine_distance):
        self._distance = distance
        self._tables = []
        self._functions = []
        for _ in range(num_tables):
            self._tables.append(HashTable(num_chains, _identity))
            self._functions.append(lsh_family())

    def insert(self, key):
        """Add ``key`` to the bucket of its code in every table."""
        for function, table in zip(self._functions, self._tables):
            code = function(key)
            bucket = table.get(code)
            if bucket is None:
                table.insert(code, [key])
            else:
                bucket.append(key)

    def get(self, query, m=1, tau=0.0):
        """Search for a key within distance ``tau`` of ``query``.

        At most ``m`` comparisons are made; the closest key seen so far is
        returned.  If nothing is found the distance is infinite and the key None.
        """
        result = LSHResult(INF, None, 0)
        for function, table in zip(self._functions, self._tables):
            bucket = table.get(function(query))
            if bucket is None:
                continue
            for key in bucket:
                distance = self._distance(key, query)
                if distance < result.distance:
                    result.distance = distance
                    result.key = key
                result.num_comparisons += 1
                if result.num_comparisons >= m:
                    return result
                if result.distance <= tau:
                    break
        return result


def naive_retrieve(dataset, query):
    """Scan every key for the closest one; the comparison count starts at one."""
    result = LSHResult(INF, None, 1)
    for key in dataset:
        distance = cosine_distance(key, query)
        result.num_comparisons += 1
        if distance < result.distance:
            result.distance = distance
            result.key = key
    return result


def benchmark(queries, get):
    """Return ``(mean, variance, success_rate)`` of the finite distances ``get`` reports."""
    total = 0.0
    total2 = 0.0
    found = 0
    count = 0
    for query in queries:
        distance = get(query)
        if math.isfinite(distance):
            total += distance
            total2 += distance * distance
            found += 1
        count += 1
    if found == 0:
        return math.nan, math.nan, 0.0 if count else math.nan
    mean = total / found
    variance = total2 / found - mean * mean
    return mean, variance, found / count


def _text(value, spec):
    if isinstance(value, float):
        return format(value, spec)
    return str(value)


def _row(nt, nc, r, sp, mean, stddev, rate, rel):
    return (
        "| " + _text(nt, "").ljust(7)
        + " | " + _text(nc, "").ljust(7)
        + " | " + _text(r, "").ljust(7)
        + " | " + _text(mean, ".3g").ljust(10)
        + " " + _text(stddev, ".3g").ljust(10)
        + " | " + _text(sp, ".1g").ljust(7)
        + " | " + _text(rate, ".1f").rjust(6)
        + " | " + _text(rel, ".1f").rjust(6)
        + "|"
    )


def main(argv=None):
    """Compare LSH retrieval against a linear scan over random unit vectors."""
    parser = argparse.ArgumentParser(
        prog="algolab-lsh",
        description="Benchmark locality-sensitive hashing against exhaustive search.",
    )
    parser.add_argument("--dataset-size", type=int, default=DATASET_SIZE)
    parser.add_argument("--queries", type=int, default=QUERYSET_SIZE)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)
    if args.dataset_size < 1 or args.queries < 1:
        parser.error("dataset and query set sizes must be positive")

    rng = random.Random(args.seed)
    dataset = sample_dataset(rng, args.dataset_size)
    queries = sample_dataset(rng, args.queries)
    sqrt_n = math.sqrt(args.queries)

    print(_row("#tables", "#comp.", "amplif.", "speedup", "distance", "(stddev)", "succ.", "rel d."))
    print(_row("-", "-", "-", "-", "-", "", "-", "-"))

    def naive(query):
        return naive_retrieve(dataset, query).distance

    mean, variance, rate = benchmark(queries, naive)
    print(_row("-", args.dataset_size, "-", 1, mean, variance / sqrt_n, rate, 1))
    best = mean

    for num_comparisons in (1, 10, 100, 1000):
        for num_tables in (1, 2, 3):
            for amplification in (1, 4, 8, 16, 32):
                num_chains = min(1 << amplification, MAX_CHAINS)
                table = LSHTable(num_chains, num_tables, LSHFamily(amplification, rng))
                for key in dataset:
                    table.insert(key)

                def approximate(query, table=table, m=num_comparisons):
                    return table.get(query, m, 0.0).distance

                mean, variance, rate = benchmark(queries, approximate)
                print(_row(
                    num_tables, num_comparisons, amplification,
                    args.dataset_size / num_comparisons, mean, variance / sqrt_n,
                    rate * 100, mean / best if best else math.nan,
                ))
    return 0