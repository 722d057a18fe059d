"""
CLI commands for LogMine.
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from logmine.config import ClustererConfig
from logmine.errors import ConfigurationError
from logmine.services import ClusteringEngine, ShardedClusterer
from logmine.services.sharding import SHARD_STRATEGIES


def render_table(clusters, marker: str) -> Table:
    table = Table(title=f"{len(clusters)} clusters")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Count", justify="right", style="cyan")
    table.add_column("Pattern")
    for summary in clusters:
        table.add_row(str(summary.cluster_id), str(summary.count), summary.pattern.render(marker))
    return table


@click.command()
@click.option('--input', '-i', 'input_path', default=None, help='Input log file path (default: stdin)')
@click.option('--max-distance', '-d', default=0.5, show_default=True, type=float,
              help='Maximum distance for a line to join a cluster (0-1)')
@click.option('--min-members', '-m', default=1, show_default=True, type=int,
              help='Hide clusters with fewer members')
@click.option('--delimiters', default=' \t', help='Token delimiter characters (default: space and tab)')
@click.option('--wildcard', default='*', show_default=True,
              help='Marker printed for variable fields; pick one that never occurs as a token '
                   '(JSON output also lists wildcard positions)')
@click.option('--shards', default=1, show_default=True, type=click.IntRange(min=1),
              help='Number of independent engines')
@click.option('--shard-by', type=click.Choice(SHARD_STRATEGIES), default='length', show_default=True,
              help='How lines are assigned to shards')
@click.option('--workers', default=1, show_default=True, type=click.IntRange(min=1),
              help='Worker processes for sharded runs')
@click.option('--format', 'output_format', type=click.Choice(['text', 'table', 'json']), default='text',
              show_default=True, help='Output format')
@click.option('--verbose', '-v', is_flag=True, help='Print progress to stderr')
def cluster(input_path, max_distance, min_members, delimiters, wildcard, shards, shard_by,
            workers, output_format, verbose):
    """
    Cluster log lines into patterns.

    Example:
        logmine cluster -i datasets/Apache/Apache_full.log -d 0.6 -m 2
    """
    console = Console(stderr=True)

    try:
        config = ClustererConfig(
            max_distance=max_distance,
            min_members=min_members,
            delimiters=delimiters,
            wildcard_marker=wildcard,
        )
    except ConfigurationError as e:
        raise click.BadParameter(str(e))

    if input_path is not None and not Path(input_path).exists():
        click.echo(f"Error: Input file not found: {input_path}", err=True)
        sys.exit(1)

    with click.open_file(input_path or '-', 'r', encoding='utf-8', errors='ignore') as f:
        if shards > 1 or workers > 1:
            try:
                sharded = ShardedClusterer(config, shards=shards, strategy=shard_by, workers=workers)
            except ConfigurationError as e:
                raise click.BadParameter(str(e))
            if verbose:
                console.print(f"[bold]Clustering[/bold] across {shards} shards...")
            clusters = sharded.run(f)
        else:
            engine = ClusteringEngine(config)
            if verbose:
                console.print("[bold]Clustering[/bold]...")
            stats = engine.process_lines(f)
            clusters = engine.result()
            if verbose:
                console.print(f"Processed {stats.line_count} lines into {stats.cluster_count} clusters "
                              f"in {stats.elapsed:.2f}s")

    if output_format == 'json':
        click.echo(json.dumps([c.to_dict(wildcard) for c in clusters], indent=2))
    elif output_format == 'table':
        Console().print(render_table(clusters, wildcard))
    else:
        for summary in clusters:
            click.echo(summary.to_string(wildcard))
