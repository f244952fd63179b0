"""
pushflow vs RxPY Benchmark
==========================

Times the cold "emit a fixed batch, then complete" path of both libraries:

1. Factory + subscribe + drain (``Observable.from_`` vs ``rx.from_iterable``)
2. Re-subscribing one cold observable many times
3. Hand-written producers (``Observable(...)`` vs ``rx.create``)

Each benchmark grows ``n`` by ``scale_factor`` until a single run exceeds
``time_limit`` and reports the largest ``n`` reached with its timings.
"""

import argparse
import gc
import os
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List

script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(script_dir, "../.."))
sys.path.insert(0, project_root)

import numpy as np
import rx
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pushflow import Observable

# ============================================================================
# Configuration
# ============================================================================


@dataclass
class BenchmarkConfig:
    """Benchmark configuration parameters."""

    time_limit: float = 1.0
    starting_n: int = 10
    scale_factor: float = 1.5
    num_iterations: int = 3


CONFIG = BenchmarkConfig()


@dataclass
class BenchmarkResult:
    operation: str
    library: str
    max_n: int
    timings: List[float] = field(default_factory=list)

    @property
    def median(self) -> float:
        return float(np.median(self.timings)) if self.timings else 0.0

    @property
    def p95(self) -> float:
        return float(np.percentile(self.timings, 95)) if self.timings else 0.0

    @property
    def operations_per_second(self) -> float:
        return self.max_n / self.median if self.median > 0 else 0.0


BENCHMARKS: Dict[str, Dict[str, Callable[[int], int]]] = {}


def benchmark(operation: str, library: str = "pushflow"):
    """Register ``func`` under ``operation`` for ``library``."""

    def decorator(func: Callable[[int], int]) -> Callable[[int], int]:
        BENCHMARKS.setdefault(operation, {})[library] = func
        return func

    return decorator


# ============================================================================
# Benchmarks
# ============================================================================


@benchmark("From + Drain")
def bench_from_pushflow(n):
    received = []
    Observable.from_(range(n)).subscribe({"next": received.append})
    return len(received)


@benchmark("From + Drain", library="rxpy")
def bench_from_rxpy(n):
    received = []
    rx.from_iterable(range(n)).subscribe(on_next=received.append)
    return len(received)


@benchmark("Repeated Subscribe")
def bench_resubscribe_pushflow(n):
    source = Observable.from_((1, 2, 3))
    count = 0

    def increment(_):
        nonlocal count
        count += 1

    for _ in range(n):
        source.subscribe(on_next=increment).unsubscribe()
    return count


@benchmark("Repeated Subscribe", library="rxpy")
def bench_resubscribe_rxpy(n):
    source = rx.from_iterable((1, 2, 3))
    count = 0

    def increment(_):
        nonlocal count
        count += 1

    for _ in range(n):
        source.subscribe(on_next=increment).dispose()
    return count


@benchmark("Custom Producer")
def bench_create_pushflow(n):
    def produce(observer):
        for i in range(n):
            observer.next(i)
        observer.complete()
        return None

    total = 0

    def add(value):
        nonlocal total
        total += value

    Observable(produce).subscribe(on_next=add)
    return total


@benchmark("Custom Producer", library="rxpy")
def bench_create_rxpy(n):
    def produce(observer, scheduler):
        for i in range(n):
            observer.on_next(i)
        observer.on_completed()

    total = 0

    def add(value):
        nonlocal total
        total += value

    rx.create(produce).subscribe(on_next=add)
    return total


# ============================================================================
# Runner
# ============================================================================


def run_adaptive(operation: str, library: str, func: Callable[[int], int]):
    """Grow n until one run exceeds the time limit."""
    n = CONFIG.starting_n
    result = BenchmarkResult(operation=operation, library=library, max_n=n)

    while True:
        timings = []
        for _ in range(CONFIG.num_iterations):
            gc.collect()
            start = time.perf_counter()
            func(n)
            timings.append(time.perf_counter() - start)

        result.max_n = n
        result.timings = timings
        if max(timings) > CONFIG.time_limit:
            break
        n = max(n + 1, int(n * CONFIG.scale_factor))

    return result


def display_results(console: Console, results: List[BenchmarkResult]) -> None:
    table = Table(title="pushflow vs RxPY")
    table.add_column("Benchmark", style="cyan")
    table.add_column("Library", style="magenta")
    table.add_column("Max N", style="yellow", justify="right")
    table.add_column("Median (sec)", style="blue", justify="right")
    table.add_column("p95 (sec)", style="blue", justify="right")
    table.add_column("Operations/sec", style="green", justify="right")

    for result in results:
        table.add_row(
            result.operation,
            result.library,
            f"{result.max_n:,}",
            f"{result.median:.4f}",
            f"{result.p95:.4f}",
            f"{result.operations_per_second:,.0f}",
        )

    console.print(table)


def print_config(console: Console) -> None:
    console.print(
        Panel(
            f"Time limit: {CONFIG.time_limit}s\n"
            f"Starting N: {CONFIG.starting_n}\n"
            f"Scale factor: {CONFIG.scale_factor}\n"
            f"Iterations: {CONFIG.num_iterations}",
            title="Benchmark Configuration",
        )
    )


def main():
    parser = argparse.ArgumentParser(description="pushflow vs RxPY benchmarks")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Run quick benchmarks (reduced time limits)",
    )
    args = parser.parse_args()

    console = Console()

    if args.config:
        print_config(console)
        return

    if args.quick:
        CONFIG.time_limit = 0.1
        CONFIG.num_iterations = 1
    else:
        print_config(console)

    results = []
    for operation, implementations in BENCHMARKS.items():
        for library, func in implementations.items():
            console.print(f"Running [cyan]{operation}[/cyan] ({library})...")
            results.append(run_adaptive(operation, library, func))

    display_results(console, results)


if __name__ == "__main__":
    main()
