#!/usr/bin/env python3
"""
reactify Write-Overhead Benchmark

Measures what the write trap costs compared with writing to the target
directly, for both surrogate kinds and for changed vs unchanged writes.

Usage:
    python scripts/benchmark.py                  # Run with default iterations
    python scripts/benchmark.py --iterations N   # Writes per scenario
    python scripts/benchmark.py --quiet          # Only print the results table
"""

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Callable, List

# Add the project root to the Python path
sys.path.insert(0, ".")

from rich.console import Console
from rich.table import Table, box

from reactify import wrap

DEFAULT_ITERATIONS = 200_000


@dataclass
class BenchmarkResult:
    """Timing of one scenario."""

    name: str
    iterations: int
    seconds: float
    notifications: int

    @property
    def ns_per_write(self) -> float:
        return self.seconds / self.iterations * 1e9


class _Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self, message):
        self.calls += 1


class _Record:
    def __init__(self):
        self.value = 0


def _time(name: str, iterations: int, write: Callable[[int], None], counter) -> BenchmarkResult:
    start = time.perf_counter()
    for i in range(iterations):
        write(i)
    elapsed = time.perf_counter() - start
    return BenchmarkResult(name, iterations, elapsed, counter.calls if counter else 0)


def run_benchmarks(iterations: int) -> List[BenchmarkResult]:
    """Run every scenario and return their timings."""
    results = []

    plain = {"value": 0}

    def plain_write(i):
        plain["value"] = i

    results.append(_time("dict (direct)", iterations, plain_write, None))

    counter = _Counter()
    changing = wrap({"value": -1}, counter)

    def changed_write(i):
        changing["value"] = i

    results.append(_time("ReactiveDict, changed", iterations, changed_write, counter))

    counter = _Counter()
    steady = wrap({"value": 0}, counter)

    def unchanged_write(i):
        steady["value"] = 0

    results.append(_time("ReactiveDict, unchanged", iterations, unchanged_write, counter))

    record = _Record()

    def attr_write(i):
        record.value = i

    results.append(_time("object (direct)", iterations, attr_write, None))

    counter = _Counter()
    proxied = wrap(_Record(), counter)
    proxied.value = -1
    counter.calls = 0

    def proxy_write(i):
        proxied.value = i

    results.append(_time("ReactiveProxy, changed", iterations, proxy_write, counter))

    return results


def display_results(console: Console, results: List[BenchmarkResult]) -> None:
    """Render the results as a table, with overhead relative to the direct write."""
    table = Table(title="Write Overhead", box=box.SIMPLE_HEAVY)
    table.add_column("Scenario", style="cyan", no_wrap=True)
    table.add_column("Writes", style="magenta", justify="right")
    table.add_column("ns/write", style="green", justify="right")
    table.add_column("vs direct", style="yellow", justify="right")
    table.add_column("Notifications", style="white", justify="right")

    baseline = None
    for result in results:
        if "direct" in result.name:
            baseline = result
        ratio = result.ns_per_write / baseline.ns_per_write if baseline else 1.0
        table.add_row(
            result.name,
            f"{result.iterations:,}",
            f"{result.ns_per_write:,.1f}",
            f"{ratio:.1f}x",
            f"{result.notifications:,}",
        )

    console.print(table)


def main():
    """Main entry point for the benchmark script."""
    parser = argparse.ArgumentParser(description="reactify write-overhead benchmark")
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Writes per scenario (default: {DEFAULT_ITERATIONS:,})",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output, show only final results",
    )
    args = parser.parse_args()

    console = Console()
    if not args.quiet:
        console.print(f"[yellow]Running {args.iterations:,} writes per scenario...[/yellow]")

    start = time.perf_counter()
    results = run_benchmarks(args.iterations)
    display_results(console, results)

    if not args.quiet:
        console.print(f"[dim]Benchmark completed in {time.perf_counter() - start:.2f} seconds[/dim]")


if __name__ == "__main__":
    main()
