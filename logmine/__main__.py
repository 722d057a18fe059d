"""
Entry point for python -m logmine
"""

import click
from logmine.cli import cluster

@click.group()
@click.version_option(version='1.0.0')
def cli():
    """LogMine - Online Log Pattern Clustering"""
    pass

cli.add_command(cluster)

if __name__ == '__main__':
    cli()
