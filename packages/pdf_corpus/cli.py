from __future__ import annotations

import logging
from pathlib import Path

import click

from insu_core.config import InsuSettings, get_settings
from insu_core.errors import InsuError
from insu_core.models import ChatRequest
from insu_core.prompt import assemble

from .loader import load_corpus
from .parser import extract_text

_log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _load(settings: InsuSettings):
    return load_corpus(
        settings.pdf_dir,
        sort_by_name=settings.sort_by_name,
        strict=settings.strict_extraction,
    )


@click.group()
@click.option("--pdf-dir", type=click.Path(path_type=Path), default=None, help="Override the PDF directory.")
@click.pass_context
def main(ctx: click.Context, pdf_dir: Path | None) -> None:
    """CLI entrypoint for the Insu PDF chat service."""
    settings = get_settings()
    if pdf_dir is not None:
        settings = settings.model_copy(update={"pdf_dir": pdf_dir.resolve()})

    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    ctx.obj = settings


@main.command("list")
@click.pass_obj
def list_corpus(settings: InsuSettings) -> None:
    """List the PDFs that would be sent to the model, with their product index."""
    _log.info("Using pdf_dir=%s", settings.pdf_dir)
    try:
        corpus = _load(settings)
    except InsuError as exc:
        raise click.ClickException(str(exc)) from exc

    for doc in corpus:
        click.echo(f"{doc.index}\t{len(doc.text)}\t{doc.path.name}")


@main.command("extract")
@click.argument("pdf_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def extract(pdf_path: Path) -> None:
    """Print the extracted text of a single PDF."""
    try:
        click.echo(extract_text(pdf_path))
    except InsuError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command("prompt")
@click.argument("question")
@click.pass_obj
def prompt(settings: InsuSettings, question: str) -> None:
    """Print the assembled prompt for QUESTION without calling the model."""
    try:
        click.echo(assemble(_load(settings), question))
    except InsuError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command("ask")
@click.argument("question")
@click.pass_obj
def ask(settings: InsuSettings, question: str) -> None:
    """Answer QUESTION from the PDF corpus using the configured model."""
    # Imported lazily so corpus inspection does not need the HTTP stack.
    from agents.query_service import QueryService
    from apps.backend.llm.ollama_client import OllamaClient

    with OllamaClient(
        base_url=settings.ollama_base_url,
        timeout=settings.ollama_timeout,
        chat_path=settings.ollama_chat_path,
    ) as client:
        service = QueryService(settings=settings, client=client)
        try:
            answer = service.handle(ChatRequest(prompt=question))
        except InsuError as exc:
            raise click.ClickException(str(exc)) from exc
    click.echo(answer)


@main.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8081, show_default=True, type=int)
@click.pass_obj
def serve(settings: InsuSettings, host: str, port: int) -> None:
    """Run the chat API with uvicorn."""
    import os

    import uvicorn

    # The app builds its own settings; pass a --pdf-dir override through the environment.
    os.environ["INSU_PDF_DIR"] = str(settings.pdf_dir)

    _log.info("Serving chat API on %s:%d (pdf_dir=%s)", host, port, settings.pdf_dir)
    uvicorn.run("apps.backend.main:app", host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
