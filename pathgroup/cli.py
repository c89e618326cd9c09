import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathgroup.config import get_config
from pathgroup.exceptions import PathGroupError
from pathgroup.grouping import GroupingResult, partition_operations
from pathgroup.loader import load_operations

console = Console()
app = typer.Typer(
    name='pathgroup',
    help='Group API operations into resources and resolve their base paths',
    no_args_is_help=True,
)


def _print_tables(result: GroupingResult) -> None:
    for key, operations in result:
        table = Table(title=escape(key))
        table.add_column('Method', style='cyan')
        table.add_column('Path')
        table.add_column('Subresource')
        table.add_column('Operation ID', style='dim')
        for operation in operations:
            table.add_row(
                escape(operation.http_method),
                escape(operation.path) if operation.path else '[dim](root)[/dim]',
                'yes' if operation.subresource_operation else 'no',
                escape(operation.operation_id or ''),
            )
        console.print(table)

    if result.api_base_path is not None:
        console.print(f'Base path: [bold]{escape(repr(result.api_base_path))}[/bold]')


@app.command()
def group(
    operations_file: Annotated[
        str, typer.Argument(help='YAML or JSON file with the operation records')
    ],
    config: Annotated[
        str | None,
        typer.Option('--config', '-c', help='Path to configuration file (YAML or JSON)'),
    ] = None,
    use_tags: Annotated[
        bool,
        typer.Option(
            '--use-tags',
            help='Group by tag instead of first path segment (overrides config)',
        ),
    ] = False,
    as_json: Annotated[
        bool, typer.Option('--json', help='Print the template context as JSON')
    ] = False,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Group the operations in a file and print the result.

    Examples:
        pathgroup group operations.yaml
        pathgroup group operations.yaml --use-tags
        pathgroup group operations.json -c pathgroup.yaml --json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        options = get_config(config)
        if use_tags:
            options = options.model_copy(update={'use_tags': True})

        operations = load_operations(operations_file)
        result = partition_operations(operations, options.grouping_config())
    except PathGroupError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_template_context(), indent=2))
    else:
        _print_tables(result)


@app.command()
def version() -> None:
    """Show the version of pathgroup."""
    from pathgroup import __version__

    console.print(f'pathgroup version: {__version__}')


if __name__ == '__main__':
    app()
