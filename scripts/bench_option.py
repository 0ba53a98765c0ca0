"""Benchmarks for Option combinators against hand-written `None` checks."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Final, NamedTuple

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

import pyoption as po

app = typer.Typer(help="Option benchmarks: combinators vs plain None checks")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 5_000
    NORMAL = 2_500
    EXPENSIVE = 500


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    OPTION = auto()
    PLAIN = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    option_median: float
    plain_median: float
    overhead: float


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


TEST_VALUE: Final[int] = 42
NULLABLE_DATA: Final = [x if x % 3 != 0 else None for x in range(100)]
OPTION_DATA: Final = [po.from_nullable(x) for x in NULLABLE_DATA]
ALL_PRESENT: Final = [po.some(x) for x in range(100)]
type BenchFn = Callable[[], object]

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
        category (str): The category of the benchmark (e.g., "Combinators").
        name (str): The name of the benchmark (e.g., "map").
        implementation (Implementation): Which side of the comparison the function is.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.

    Examples:
    ```python
    @bench("Instantiation", "some(value)", Implementation.OPTION)
    def bench_option_some() -> object:
        return po.some(TEST_VALUE)
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


@bench("Instantiation", "some(value)", Implementation.OPTION)
def bench_option_some() -> object:
    return po.some(TEST_VALUE)


@bench("Instantiation", "some(value)", Implementation.PLAIN)
def bench_plain_some() -> object:
    return TEST_VALUE


@bench("Combinators", "map", Implementation.OPTION)
def bench_option_map() -> object:
    return po.some(TEST_VALUE).map(lambda x: x + 1)


@bench("Combinators", "map", Implementation.PLAIN)
def bench_plain_map() -> object:
    value: int | None = TEST_VALUE
    return value + 1 if value is not None else None


@bench("Combinators", "and_then chain", Implementation.OPTION)
def bench_option_chain() -> object:
    return (
        po.some(TEST_VALUE)
        .and_then(lambda x: po.some(x * 2))
        .and_then(lambda x: po.NONE if x > 100 else po.some(x))
        .unwrap_or(0)
    )


@bench("Combinators", "and_then chain", Implementation.PLAIN)
def bench_plain_chain() -> object:
    value: int | None = TEST_VALUE * 2
    if value is not None and value > 100:
        value = None
    return value if value is not None else 0


@bench("Combinators", "or_else", Implementation.OPTION)
def bench_option_or_else() -> object:
    return po.NONE.or_else(lambda: po.some(TEST_VALUE))


@bench("Combinators", "or_else", Implementation.PLAIN)
def bench_plain_or_else() -> object:
    value: int | None = None
    return value if value is not None else TEST_VALUE


@bench("Collect", "collect (all present)", Implementation.OPTION, Runs.EXPENSIVE)
def bench_option_collect() -> object:
    return po.collect(ALL_PRESENT)


@bench("Collect", "collect (all present)", Implementation.PLAIN, Runs.EXPENSIVE)
def bench_plain_collect() -> object:
    values = list(range(100))
    return None if any(v is None for v in values) else values


@bench("Collect", "values (mixed)", Implementation.OPTION, Runs.EXPENSIVE)
def bench_option_values() -> object:
    return list(po.values(OPTION_DATA))


@bench("Collect", "values (mixed)", Implementation.PLAIN, Runs.EXPENSIVE)
def bench_plain_values() -> object:
    return [x for x in NULLABLE_DATA if x is not None]


def bench_one(option_fn: BenchFn, plain_fn: BenchFn) -> None:
    """Run a single benchmark multiple times and store median results.

    Uses metadata from the BENCHMARK_REGISTRY to determine category, name, and iteration counts.
    """
    meta = BENCHMARK_REGISTRY[option_fn]
    n_calls = meta.cost.value // 10
    repeats = meta.cost.value // 50

    option_times = [timeit.timeit(option_fn, number=n_calls) for _ in range(repeats)]
    plain_times = [timeit.timeit(plain_fn, number=n_calls) for _ in range(repeats)]
    option_median = statistics.median(option_times)
    plain_median = statistics.median(plain_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            option_median=option_median,
            plain_median=plain_median,
            overhead=option_median / plain_median,
        )
    )


def _run_all_benchmarks() -> None:
    """Run all registered benchmarks by pairing Option and plain implementations."""
    benchmark_pairs: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        benchmark_pairs.setdefault((meta.category, meta.name), {})[
            meta.implementation
        ] = func

    benchmarks: list[tuple[BenchFn, BenchFn]] = []
    for (category, name), impls in benchmark_pairs.items():
        match (impls.get(Implementation.OPTION), impls.get(Implementation.PLAIN)):
            case (option_fn, plain_fn) if option_fn and plain_fn:
                benchmarks.append((option_fn, plain_fn))
            case _:
                CONSOLE.print(
                    f"[yellow]Warning: Skipping {category}/{name} - missing implementation[/yellow]"
                )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(benchmarks))
        for option_fn, plain_fn in benchmarks:
            meta = BENCHMARK_REGISTRY[option_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(option_fn, plain_fn)
            progress.advance(task)


def _display_results() -> None:
    """Display benchmark results in a formatted table."""
    table = Table(title="Option Benchmark Results (combinators vs plain checks)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("Option (s, median)", justify="right", style="green")
    table.add_column("Plain (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        style = "green bold" if result.overhead < 2 else "red bold"  # noqa: PLR2004
        table.add_row(
            result.category,
            result.name,
            f"{result.option_median:.4f}",
            f"{result.plain_median:.4f}",
            Text(f"{result.overhead:.2f}x", style=style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    median_overhead = statistics.median([r.overhead for r in RESULTS])
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(f"{median_overhead:.2f}x", style="green bold")
    )


@app.command()
def all_benchmarks() -> None:
    """Run all benchmarks (default)."""
    CONSOLE.print(Text("Running Option benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks()
    _display_results()


@app.command()
def category(name: str) -> None:
    """Run only the benchmarks of one category."""
    selected = {
        fn: meta for fn, meta in BENCHMARK_REGISTRY.items() if meta.category == name
    }
    if not selected:
        CONSOLE.print(f"[red]Unknown category: {name}[/red]")
        raise typer.Exit(code=1)
    BENCHMARK_REGISTRY.clear()
    BENCHMARK_REGISTRY.update(selected)
    _run_all_benchmarks()
    _display_results()


if __name__ == "__main__":
    app()
