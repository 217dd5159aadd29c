#!/usr/bin/env python3
"""
densemm benchmark CLI.

Times every multiplication strategy on a pair of random square matrices,
checks each result against the BLAS result, and prints a short report:

    densemm-bench --size 256 --tile 16 --tile 32 -o performance.txt
"""

import argparse
import logging
import os
import sys
import time
from typing import Callable, List, Tuple

import numpy as np

from densemm.config import (
    BenchConfig, DEFAULT_BENCH_SIZE, DEFAULT_REPEAT, DEFAULT_SEED,
)
from densemm.errors import DenseMMError
from densemm.kernels import multiply_naive, multiply_tiled, multiply_vendor
from densemm.matrix import DenseMatrix

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="densemm-bench",
        description="Benchmark naive, BLAS and tiled dense matrix multiplication",
    )
    parser.add_argument("--size", type=int, default=DEFAULT_BENCH_SIZE,
                        help="Edge length of the square input matrices")
    parser.add_argument("--tile", type=int, action="append",
                        help="Tile size for the tiled strategy (repeatable)")
    parser.add_argument("--repeat", type=int, default=DEFAULT_REPEAT,
                        help="Runs per strategy; the fastest is reported")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help="Random seed for the input matrices")
    parser.add_argument("--skip-naive", action="store_true",
                        help="Do not time the naive strategy")
    parser.add_argument("-o", "--output", help="Also write the report to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def time_best(fn: Callable[[], DenseMatrix], repeat: int) -> Tuple[float, DenseMatrix]:
    """Run fn repeat times; return (fastest wall time, last result)."""
    best = float("inf")
    result = None
    for _ in range(repeat):
        t0 = time.perf_counter()
        result = fn()
        best = min(best, time.perf_counter() - t0)
    return best, result


def run_benchmark(config: BenchConfig) -> Tuple[List[str], bool]:
    """
    Run the benchmark described by config.

    Returns:
        (report lines, True if every strategy matched the BLAS result)
    """
    rng = np.random.default_rng(config.seed)
    n = config.size
    mat1 = DenseMatrix.from_array(rng.standard_normal((n, n)))
    mat2 = DenseMatrix.from_array(rng.standard_normal((n, n)))

    strategies = []
    if not config.skip_naive:
        strategies.append(("naive", lambda: multiply_naive(mat1, mat2)))
    for t in config.tiles:
        strategies.append((f"tiled[{t}]", lambda t=t: multiply_tiled(mat1, mat2, t)))

    logger.info("benchmarking %dx%d, %d run(s) per strategy", n, n, config.repeat)
    vendor_time, expected = time_best(lambda: multiply_vendor(mat1, mat2), config.repeat)

    lines = [
        f"size = {n}x{n}, repeat = {config.repeat}, seed = {config.seed}",
        f"{'vendor':<12} : {vendor_time:10.6f} s",
    ]
    ok = True
    for label, fn in strategies:
        logger.debug("running %s", label)
        elapsed, result = time_best(fn, config.repeat)
        match = bool(np.allclose(result.to_array(), expected.to_array()))
        ok = ok and match
        ratio = elapsed / vendor_time if vendor_time > 0 else float("inf")
        lines.append(
            f"{label:<12} : {elapsed:10.6f} s  ({ratio:8.1f}x vendor)"
            + ("" if match else "  MISMATCH")
        )

    return lines, ok


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = BenchConfig.from_args(args)
        lines, ok = run_benchmark(config)
    except DenseMMError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)

    if config.output:
        output_dir = os.path.dirname(os.path.abspath(config.output))
        os.makedirs(output_dir, exist_ok=True)
        with open(config.output, "w") as f:
            for line in lines:
                f.write(line + "\n")
        print(f"Report saved to {config.output}")

    if not ok:
        print("Error: results differ from the BLAS product", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
