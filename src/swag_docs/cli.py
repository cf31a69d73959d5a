"""CLI entry point for swag-docs."""

import logging
from pathlib import Path

import click

from swag_docs.generator.markdown import generate_markdown
from swag_docs.llm import LlmClient
from swag_docs.parser.base import Endpoint
from swag_docs.parser.detect import SpecLoadError, load_document
from swag_docs.parser.endpoints import extract_endpoints, search_endpoints, select_endpoints
from swag_docs.parser.spec import SpecDocument

PROMPTS_DIR = Path(__file__).parent / "prompts"
DEFAULT_PROMPT = PROMPTS_DIR / "frontend.md"


def _load(doc_path: Path) -> tuple[SpecDocument, list[Endpoint]]:
    """Load the document and extract its endpoints."""
    try:
        doc = load_document(doc_path)
    except SpecLoadError as e:
        raise click.ClickException(str(e)) from e
    spec = SpecDocument.from_raw(doc)
    return spec, extract_endpoints(spec)


def _choose(endpoints: list[Endpoint], keys: tuple[str, ...], search: str | None) -> list[Endpoint]:
    """Apply --endpoint selection and --search filtering."""
    if keys:
        unknown = [k for k in keys if not select_endpoints(endpoints, [k])]
        if unknown:
            raise click.BadParameter(
                f"unknown endpoint(s): {', '.join(unknown)}", param_hint="--endpoint"
            )
        endpoints = select_endpoints(endpoints, keys)

    endpoints = search_endpoints(endpoints, search)
    if not endpoints:
        raise click.ClickException("No endpoints found.")
    return endpoints


def _read_prompt(prompt_file: Path | None, no_prompt: bool = False) -> str | None:
    if no_prompt:
        return None
    path = prompt_file or DEFAULT_PROMPT
    return path.read_text(encoding="utf-8").strip()


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """swag-docs: turn OpenAPI/Swagger documents into API reference text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("list")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--search", default=None, help="Only list endpoints matching this text.")
def list_endpoints(doc_path: Path, search: str | None):
    """List the documentable endpoints of a specification."""
    _, endpoints = _load(doc_path)
    for ep in _choose(endpoints, (), search):
        line = f"{ep.method:<7} {ep.path}"
        if ep.summary:
            line += f"  {ep.summary}"
        click.echo(line)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-e", "--endpoint", "keys", multiple=True, help="Endpoint key METHOD:path (repeatable). Default: all.")
@click.option("--search", default=None, help="Only include endpoints matching this text.")
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Output file. Default: stdout.")
@click.option("--prompt-file", default=None, envvar="SWAG_DOCS_PROMPT_FILE", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Text prepended to the document.")
@click.option("--no-prompt", is_flag=True, help="Do not prepend any prompt text.")
def generate(doc_path: Path, keys: tuple[str, ...], search: str | None, output: Path | None, prompt_file: Path | None, no_prompt: bool):
    """Generate the API reference for selected endpoints."""
    spec, endpoints = _load(doc_path)
    selected = _choose(endpoints, keys, search)
    click.echo(f"Documenting {len(selected)} of {len(endpoints)} endpoints...", err=True)

    markdown = generate_markdown(spec, selected, prefix=_read_prompt(prompt_file, no_prompt))

    if output is None:
        click.echo(markdown, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markdown, encoding="utf-8")
    click.echo(f"Reference saved to {output}", err=True)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-e", "--endpoint", "keys", multiple=True, help="Endpoint key METHOD:path (repeatable). Default: all.")
@click.option("--search", default=None, help="Only include endpoints matching this text.")
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file for the LLM answer.")
@click.option("--model", default=None, envvar="SWAG_DOCS_MODEL", help="LLM model to use.")
@click.option("--prompt-file", default=None, envvar="SWAG_DOCS_PROMPT_FILE", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="System prompt sent with the reference.")
def ask(doc_path: Path, keys: tuple[str, ...], search: str | None, output: Path, model: str | None, prompt_file: Path | None):
    """Send the API reference to an LLM and save its integration code."""
    spec, endpoints = _load(doc_path)
    selected = _choose(endpoints, keys, search)
    markdown = generate_markdown(spec, selected)

    client = LlmClient(model=model)
    click.echo(f"Asking {client.model} about {len(selected)} endpoints...", err=True)
    answer = client.integrate(markdown, instructions=_read_prompt(prompt_file))

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(answer, encoding="utf-8")
    click.echo(f"Answer saved to {output}", err=True)
