# orchestration/cli.py
from pathlib import Path
from typing import Optional
import json

import click

from .pipeline import PipelineManager, Dataset, DEFAULT_DATASET
from ..database.graph import SocialGraph
from ..database.pathfinding import PathFinder
from ..utils.error_handler import GraphError, format_error_message
from ..utils.report_formatting import ReportFormatter

@click.group()
def cli():
    """Social Network Analytics CLI"""
    pass

@cli.command()
@click.argument('config_path', type=click.Path(exists=True))
@click.argument('dataset_path', type=click.Path(exists=True), required=False)
@click.option('--output', '-o', type=click.Path(),
              help="Output path for the JSON analysis summary")
def analyze(config_path: str, dataset_path: Optional[str], output: Optional[str]):
    """Rank users by degree centrality and answer the dataset's path queries."""
    try:
        manager = PipelineManager(config_path)
        result = manager.run_file(dataset_path)

        click.echo(ReportFormatter.format_centrality(result.centrality))
        if result.paths:
            click.echo("")
            click.echo(ReportFormatter.format_paths(result.graph, result.paths))
        if result.rejected_relationships:
            click.echo(f"\nSkipped {result.rejected_relationships} invalid relationships.")

        if output:
            output_path = Path(output)
            with open(output_path, 'w') as f:
                json.dump(manager.prepare_summary(result), f, indent=2)
            click.echo(f"Detailed results saved to: {output_path}")

    except GraphError as e:
        click.echo(format_error_message(e), err=True)
        raise click.Abort()
    except Exception as e:
        click.echo(f"Error: {str(e)}", err=True)
        raise click.Abort()

@cli.command()
@click.argument('config_path', type=click.Path(exists=True))
@click.argument('start')
@click.argument('target')
@click.option('--dataset', '-d', type=click.Path(exists=True),
              help="Dataset file (defaults to the bundled sample network)")
def path(config_path: str, start: str, target: str, dataset: Optional[str]):
    """Show the shortest path between two users.

    START and TARGET are user names. A number that is not a user name is
    taken as a user id.
    """
    try:
        manager = PipelineManager(config_path)
        graph: SocialGraph = manager.pipeline.build_graph(Dataset.load(dataset or DEFAULT_DATASET))

        result = PathFinder(graph).find_shortest_path(
            manager.pipeline.resolve(graph, start),
            manager.pipeline.resolve(graph, target)
        )
        click.echo(ReportFormatter.format_path(graph, result))

    except GraphError as e:
        click.echo(format_error_message(e), err=True)
        raise click.Abort()
    except Exception as e:
        click.echo(f"Error: {str(e)}", err=True)
        raise click.Abort()

if __name__ == "__main__":
    cli()
