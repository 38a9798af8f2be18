"""Benchmarks for Option combinators against plain `None` checks."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Annotated, Final, NamedTuple

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import optionchain as oc

app = typer.Typer(help="Option benchmarks: optionchain vs plain None checks")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 5_000
    NORMAL = 2_500
    EXPENSIVE = 500


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    OPTION = auto()
    BASELINE = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    option_median: float
    baseline_median: float
    overhead: float


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


type BenchFn = Callable[[], object]

TEST_VALUE: Final[int] = 42
CHAIN_THRESHOLD: Final[int] = 5
NULLABLE_DATA: Final = [x if x % 3 != 0 else None for x in range(100)]
OPTION_DATA: Final = [oc.from_nullable(x) for x in NULLABLE_DATA]

CONSOLE: Final = Console()
RESULTS: list[BenchmarkResult] = []
BENCHMARK_REGISTRY: dict[BenchFn, BenchmarkMetadata] = {}


def bench(
    category: str,
    name: str,
    implementation: Implementation,
    cost: Runs = Runs.CHEAP,
) -> Callable[[BenchFn], BenchFn]:
    """Decorator to register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Construction").
        name (str): The name of the benchmark (e.g., "some(value)").
        implementation (Implementation): Which side of the comparison the function is.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.

    Examples:
    ```python
    @bench("Construction", "some(value)", Implementation.OPTION)
    def bench_option_some() -> object:
        return oc.some(TEST_VALUE)
    ```
    """

    def decorator(func: BenchFn) -> BenchFn:
        BENCHMARK_REGISTRY[func] = BenchmarkMetadata(
            category=category, name=name, cost=cost, implementation=implementation
        )

        @wraps(func)
        def wrapper() -> object:
            return func()

        return wrapper

    return decorator


@bench("Construction", "some(value)", Implementation.OPTION)
def bench_option_some() -> object:
    return oc.some(TEST_VALUE)


@bench("Construction", "some(value)", Implementation.BASELINE)
def bench_baseline_some() -> object:
    return TEST_VALUE


@bench("Transform", "map + unwrap_or", Implementation.OPTION)
def bench_option_map() -> object:
    return oc.Some(TEST_VALUE).map(lambda x: x * 2).unwrap_or(0)


@bench("Transform", "map + unwrap_or", Implementation.BASELINE)
def bench_baseline_map() -> object:
    value: int | None = TEST_VALUE
    return value * 2 if value is not None else 0


@bench("Transform", "and_then + filter chain", Implementation.OPTION)
def bench_option_chain() -> object:
    return (
        oc.Some(TEST_VALUE)
        .and_then(lambda x: oc.Some(x + 1))
        .filter(lambda x: x > CHAIN_THRESHOLD)
        .unwrap_or(0)
    )


@bench("Transform", "and_then + filter chain", Implementation.BASELINE)
def bench_baseline_chain() -> object:
    value: int | None = TEST_VALUE
    if value is None:
        return 0
    value += 1
    return value if value > CHAIN_THRESHOLD else 0


@bench("Collections", "all(2 somes)", Implementation.OPTION, Runs.NORMAL)
def bench_option_all() -> object:
    return oc.all(OPTION_DATA[1:3])


@bench("Collections", "all(2 somes)", Implementation.BASELINE, Runs.NORMAL)
def bench_baseline_all() -> object:
    values = NULLABLE_DATA[1:3]
    return None if any(v is None for v in values) else values


@bench("Collections", "find", Implementation.OPTION, Runs.NORMAL)
def bench_option_find() -> object:
    return oc.find(NULLABLE_DATA, lambda x: x is not None and x > TEST_VALUE)


@bench("Collections", "find", Implementation.BASELINE, Runs.NORMAL)
def bench_baseline_find() -> object:
    return next(
        (x for x in NULLABLE_DATA if x is not None and x > TEST_VALUE), None
    )


def bench_one(option_fn: BenchFn, baseline_fn: BenchFn) -> None:
    """Run a single benchmark multiple times and store median results.

    Args:
        option_fn (BenchFn): The optionchain benchmark function.
        baseline_fn (BenchFn): The plain Python benchmark function.
    """
    meta = BENCHMARK_REGISTRY[option_fn]
    n_calls = meta.cost.value // 10
    option_times = [
        timeit.timeit(option_fn, number=n_calls) for _ in range(meta.cost.value // 10)
    ]
    baseline_times = [
        timeit.timeit(baseline_fn, number=n_calls)
        for _ in range(meta.cost.value // 10)
    ]
    option_median = statistics.median(option_times)
    baseline_median = statistics.median(baseline_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            option_median=option_median,
            baseline_median=baseline_median,
            overhead=option_median / baseline_median,
        )
    )


def _pairs(category: str | None) -> list[tuple[BenchFn, BenchFn]]:
    grouped: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        if category is not None and meta.category != category:
            continue
        grouped.setdefault((meta.category, meta.name), {})[meta.implementation] = func

    pairs: list[tuple[BenchFn, BenchFn]] = []
    for (cat, name), impls in grouped.items():
        match (
            oc.get(impls, Implementation.OPTION),
            oc.get(impls, Implementation.BASELINE),
        ):
            case (oc.Some(option_fn), oc.Some(baseline_fn)):
                pairs.append((option_fn, baseline_fn))
            case _:
                CONSOLE.print(
                    f"[yellow]Warning: Skipping {cat}/{name} - missing implementation[/yellow]"
                )
    return pairs


def _run_benchmarks(category: str | None) -> None:
    pairs = _pairs(category)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(pairs))
        for option_fn, baseline_fn in pairs:
            meta = BENCHMARK_REGISTRY[option_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(option_fn, baseline_fn)
            progress.advance(task)


def _display_results() -> None:
    """Display benchmark results in a formatted table."""
    table = Table(title="Option Benchmark Results (optionchain vs plain None checks)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("optionchain (s, median)", justify="right", style="green")
    table.add_column("baseline (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        style = "green bold" if result.overhead < 2 else "red bold"  # noqa: PLR2004
        table.add_row(
            result.category,
            result.name,
            f"{result.option_median:.4f}",
            f"{result.baseline_median:.4f}",
            Text(f"{result.overhead:.2f}x", style=style),
        )

    CONSOLE.print(table)
    oc.from_nullable(RESULTS or None).map(
        lambda results: statistics.median(r.overhead for r in results)
    ).if_some(
        lambda median: CONSOLE.print(
            Text("Median overhead: ", style="bold")
            + Text(f"{median:.2f}x", style="green bold")
        )
    )


@app.command()
def run(
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only run one category.")
    ] = None,
) -> None:
    """Run the benchmarks and display results."""
    CONSOLE.print(Text("Running Option benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_benchmarks(category)
    _display_results()


if __name__ == "__main__":
    app()
