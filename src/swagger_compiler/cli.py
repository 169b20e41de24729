"""CLI entry point for swagger-compiler."""

import logging
from pathlib import Path

import click

from swagger_compiler.compiler.document import compile_resource
from swagger_compiler.compiler.normalizer import TypeFallback
from swagger_compiler.errors import CompilerError
from swagger_compiler.output import FORMATS, render_document
from swagger_compiler.schema.loader import load_resource_file, parse_methods


def _compile_file(doc_path: Path, methods: str | None) -> tuple[dict, list[TypeFallback]]:
    """Load a resource file and compile it, collecting fallback diagnostics."""
    loaded = load_resource_file(doc_path)
    resource = loaded.resource
    if methods is not None:
        resource = resource.model_copy(update={"methods": parse_methods(methods)})

    diagnostics: list[TypeFallback] = []
    document = compile_resource(
        resource,
        schema=loaded.schema_,
        definition=loaded.definition,
        diagnostics=diagnostics,
    )
    return document, diagnostics


def _report(diagnostics: list[TypeFallback]) -> None:
    for d in diagnostics:
        click.echo(
            f"Warning: {d.definition}.{d.field} ({d.type_tag}) is not supported, using \"string\"",
            err=True,
        )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """swagger-compiler: build Swagger documents from data model schemas."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("compile")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Output file (default: stdout).")
@click.option("--format", "fmt", default="yaml", envvar="SWAGGER_COMPILER_FORMAT", type=click.Choice(FORMATS), help="Output format.")
@click.option("--methods", default=None, help="Comma-separated methods overriding the resource file, e.g. index,post,get.")
@click.option("--strict", is_flag=True, help="Fail when any field falls back to string.")
def compile_cmd(doc_path: Path, output: Path | None, fmt: str, methods: str | None, strict: bool):
    """Compile a resource file into a Swagger document."""
    try:
        document, diagnostics = _compile_file(doc_path, methods)
    except CompilerError as e:
        raise click.ClickException(str(e)) from e

    _report(diagnostics)
    if strict and diagnostics:
        raise click.ClickException(f"{len(diagnostics)} field(s) fell back to string")

    text = render_document(document, fmt)
    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Document saved to {output}", err=True)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(doc_path: Path):
    """Compile a resource file and summarize the result without writing it."""
    try:
        document, diagnostics = _compile_file(doc_path, None)
    except CompilerError as e:
        raise click.ClickException(str(e)) from e

    _report(diagnostics)
    operations = sum(len(verbs) for verbs in document["paths"].values())
    click.echo(
        f"{len(document['definitions'])} definitions, "
        f"{len(document['paths'])} paths, {operations} operations, "
        f"{len(diagnostics)} warnings."
    )
