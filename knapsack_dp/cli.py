"""Command line demonstrations for the knapsack solvers and helper utilities."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import click

from .configuration import Settings, load_settings
from .data_structures.basic.josephus import JosephusRing
from .divide_and_conquer.basic.hanoi import TowerOfHanoi
from .dynamic_programming.basic.knapsack import solve_table
from .dynamic_programming.basic.rolling_knapsack import solve_rolling
from .errors import InvalidInput, SparseFormatError
from .logging_setup import setup_logging
from .searching.basic.binary_search import BinarySearch
from .searching.basic.fibonacci_search import FibonacciSearch
from .storage.basic.sparse_matrix import SparseMatrixCodec
from .utils import format_table

DEMO_WEIGHTS = [1, 2, 1]
DEMO_VALUES = [500, 5000, 3000]
DEMO_CAPACITY = 3


def _parse_ints(raw: str) -> List[int]:
    if not raw.strip():
        return []
    try:
        return [int(part) for part in raw.split(",")]
    except ValueError as err:
        raise click.BadParameter(f"expected comma separated integers: {raw!r}") from err


def _settings(ctx: click.Context) -> Settings:
    return ctx.obj["settings"]


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="YAML settings file.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str]) -> None:
    """0/1 knapsack solvers and companion utilities."""
    settings = load_settings(config_path)
    setup_logging(settings.logging)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.option("--weights", required=True, help="Comma separated item weights.")
@click.option("--values", required=True, help="Comma separated item values.")
@click.option("--capacity", required=True, type=int)
@click.option("--strategy", type=click.Choice(["table", "rolling"]), default="rolling",
              show_default=True)
@click.option("--show-table", is_flag=True, help="Print the filled table (table strategy).")
def solve(weights: str, values: str, capacity: int, strategy: str, show_table: bool) -> None:
    """Print the best total value for the given items."""
    w, v = _parse_ints(weights), _parse_ints(values)
    try:
        if strategy == "table":
            result = solve_table(w, v, capacity)
            if show_table:
                click.echo(result.format())
            best = result.max_value
        else:
            best = solve_rolling(w, v, capacity)
    except InvalidInput as err:
        raise click.UsageError(str(err)) from err
    click.echo(best)


@cli.command()
def demo() -> None:
    """Solve the speaker / laptop / phone example and show the table."""
    result = solve_table(DEMO_WEIGHTS, DEMO_VALUES, DEMO_CAPACITY)
    click.echo("Filled table:")
    click.echo(result.format())
    click.echo(f"Maximum total value: {result.max_value}")


@cli.command()
@click.option("--data", required=True, help="Comma separated, ascending integers.")
@click.option("--target", required=True, type=int)
@click.option("--method", type=click.Choice(["binary", "fibonacci"]), default="binary",
              show_default=True)
def search(data: str, target: int, method: str) -> None:
    """Search a sorted sequence; prints the index or -1."""
    searcher = FibonacciSearch() if method == "fibonacci" else BinarySearch()
    click.echo(searcher.execute(_parse_ints(data), target))


@cli.command()
@click.argument("disks", type=int)
def hanoi(disks: int) -> None:
    """Print the moves that solve the Tower of Hanoi for DISKS disks."""
    try:
        moves = TowerOfHanoi().execute(disks)
    except InvalidInput as err:
        raise click.UsageError(str(err)) from err
    for move in moves:
        click.echo(str(move))
    click.echo(f"{len(moves)} moves")


@cli.command()
@click.argument("count", type=int)
@click.option("--start", default=1, show_default=True, type=int)
@click.option("--step", default=1, show_default=True, type=int)
def josephus(count: int, start: int, step: int) -> None:
    """Print the elimination order of COUNT people counting off by STEP."""
    try:
        order = JosephusRing(count).execute(start=start, step=step)
    except InvalidInput as err:
        raise click.UsageError(str(err)) from err
    click.echo(" ".join(str(number) for number in order))
    click.echo(f"Survivor: {order[-1]}")


@cli.group()
def sparse() -> None:
    """Encode dense grids to sparse records and back."""


@sparse.command("encode")
@click.argument("grid_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", type=click.Path(dir_okay=False), default=None,
              help="Sparse file; defaults to the configured sparse.path.")
@click.pass_context
def sparse_encode(ctx: click.Context, grid_file: str, output: Optional[str]) -> None:
    """Read a whitespace separated dense grid and store it sparsely."""
    try:
        rows = [
            [int(cell) for cell in line.split()]
            for line in Path(grid_file).read_text(encoding="utf-8").splitlines()
            if line.strip()
        ]
    except ValueError as err:
        raise click.UsageError(f"{grid_file}: {err}") from err
    codec = SparseMatrixCodec(output or _settings(ctx).sparse.path)
    try:
        triples = codec.execute(rows)
    except InvalidInput as err:
        raise click.UsageError(str(err)) from err
    click.echo(format_table(triples, width=3))
    click.echo(f"Stored {len(triples) - 1} non-zero cells to {codec.path}")


@sparse.command("decode")
@click.option("--input", "input_path", type=click.Path(dir_okay=False), default=None,
              help="Sparse file; defaults to the configured sparse.path.")
@click.pass_context
def sparse_decode(ctx: click.Context, input_path: Optional[str]) -> None:
    """Restore and print the dense grid stored in a sparse file."""
    codec = SparseMatrixCodec(input_path or _settings(ctx).sparse.path)
    try:
        grid = codec.load()
    except (FileNotFoundError, SparseFormatError) as err:
        raise click.ClickException(str(err)) from err
    click.echo(format_table(grid, width=3))


@cli.command()
@click.option("--sizes", default="10,50,100", show_default=True)
@click.option("--iterations", default=3, show_default=True, type=int)
@click.option("--seed", default=None, type=int)
@click.option("--output", type=click.Path(dir_okay=False), default=None,
              help="Write JSON results to this file.")
def benchmark(sizes: str, iterations: int, seed: Optional[int], output: Optional[str]) -> None:
    """Time the table and rolling solvers on identical random instances."""
    from .performance.benchmark_system import BenchmarkConfig, SolverBenchmark

    bench = SolverBenchmark(seed=seed)
    results = bench.compare(BenchmarkConfig(sizes=_parse_ints(sizes), iterations=iterations))
    for result in results:
        stats = result.summary()
        click.echo(
            f"{result.solver:<8} items={result.item_count:<6} capacity={result.capacity:<8} "
            f"value={result.max_value:<8} mean={stats['mean']:.6f}s"
        )
    if output:
        click.echo(f"Results written to {bench.save(output)}")


if __name__ == "__main__":
    cli()
