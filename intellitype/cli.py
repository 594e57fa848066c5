from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from intellitype.codegen.codegen import Codegen
from intellitype.codegen.resolver import resolve_dynamic, resolve_static
from intellitype.config import get_config
from intellitype.exceptions import IntellitypeError

console = Console()
app = typer.Typer(
    name='intellitype',
    help='Generate IntelliSense files from server-side model descriptions',
    no_args_is_help=True,
)


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
) -> None:
    """Generate IntelliSense files from configuration.

    If no config file is specified, will look for intellitype.yaml in the
    current directory or a [tool.intellitype] table in pyproject.toml.

    Examples:
        intellitype generate
        intellitype generate --config my-config.yaml
        intellitype generate -c config.json
    """
    try:
        codegen_config = get_config(config)

        for document_config in codegen_config.documents:
            with Progress(
                SpinnerColumn(),
                TextColumn('[progress.description]{task.description}'),
                console=console,
            ) as progress:
                task = progress.add_task(
                    f'Generating {document_config.output} from {document_config.source}...',
                    total=None,
                )

                codegen = Codegen(document_config)
                codegen.generate()

                progress.update(
                    task, description=f'Generated {document_config.output}'
                )

        console.print('[green]Successfully generated code[/green]')

    except IntellitypeError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)


@app.command()
def resolve(
    descriptors: Annotated[
        list[str], typer.Argument(help='Type descriptors to resolve')
    ],
    bracket_generic_arguments: Annotated[
        bool,
        typer.Option(
            '--bracket-generic-arguments',
            help='Render Nullable<int> as Nullable<Number>',
        ),
    ] = False,
) -> None:
    """Show how type descriptors resolve in both notations.

    Examples:
        intellitype resolve 'int?' 'System.Collections.Generic.List<Widget>'
    """
    table = Table('Descriptor', 'TypeScript', 'JavaScript')
    for descriptor in descriptors:
        table.add_row(
            escape(descriptor),
            escape(resolve_static(descriptor, bracket_generic_arguments)),
            resolve_dynamic(descriptor),
        )
    console.print(table)


@app.command()
def version() -> None:
    """Show the version of intellitype."""
    from intellitype import __version__

    console.print(f'intellitype version: {__version__}')


if __name__ == '__main__':
    app()
