#!/usr/bin/env python3
"""
Résumé and Career History Generation CLI

Generates a Japanese résumé (履歴書) or career history (職務経歴書) PDF from a
saved form file, and looks up addresses by postal code.

Commands:
    resume  - Generate a 履歴書 PDF
    career  - Generate a 職務経歴書 PDF
    postal  - Look up the address for a postal code

Examples:\n

    generate_document.py resume forms/yamada.yaml                     # A4, default margins

    generate_document.py resume forms/yamada.yaml -p margin_narrow    # Apply a layout preset

    generate_document.py resume --save-draft forms/yamada.yaml        # Also keep the form as draft

    generate_document.py resume                                       # Use the saved draft

    generate_document.py career forms/yamada_career.json -o out.pdf   # Explicit output path

    generate_document.py postal 100-0001                              # Address lookup
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from rireki.contexts.calendar import MalformedDateError
from rireki.contexts.intake import (
    DraftStore,
    career_snapshot_from_dict,
    format_postal_code,
    load_form_data,
    lookup_address,
    resume_snapshot_from_dict,
)
from rireki.contexts.layout import A4, apply_layout_presets
from rireki.contexts.modeling import InvalidSnapshotError
from rireki.contexts.rendering import (
    DocumentGenerationError,
    FontRegistry,
    generate_career_document,
    generate_resume_document,
)
from rireki.contexts.rendering.logger import setup_rendering_logger
from rireki.utils import now, today
from rireki.utils.logger import session_log_dir
from rireki.utils.pdf_processing import page_count

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

OUTPUT_NAMES = {"resume": "rirekisho", "career": "shokumu_keirekisho"}

app = typer.Typer(
    help="Generate Japanese résumé and career history PDFs from saved form data",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _read_form(form_file: Optional[Path], save_draft: bool) -> dict:
    """Form data from the file, or from the saved draft when no file is given."""
    store = DraftStore()
    if form_file is None:
        form_data = store.load()
        if form_data is None:
            typer.secho("Error: No form file given and no saved draft found\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Using saved draft: {store.path}")
        return form_data

    try:
        form_data = load_form_data(form_file)
    except (FileNotFoundError, InvalidSnapshotError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if save_draft:
        store.save(form_data)
        typer.echo(f"Draft saved: {store.path}")
    return form_data


def _generate(
    document_type: str,
    form_file: Optional[Path],
    output: Optional[Path],
    presets: Optional[List[str]],
    save_draft: bool,
    verbose: bool,
) -> None:
    typer.secho(f"\nGenerating {document_type}: {form_file or 'saved draft'}", fg=typer.colors.BLUE, bold=True)

    fonts = FontRegistry()
    log_file = setup_rendering_logger(
        session_log_dir("render", LOGS_PATH),
        font_name=str(fonts.font_path or "built-in"),
        verbose=verbose,
    )

    form_data = _read_form(form_file, save_draft)

    try:
        geometry = apply_layout_presets(A4, presets or [])
        if document_type == "resume":
            artifact = generate_resume_document(resume_snapshot_from_dict(form_data), fonts=fonts, geometry=geometry)
        else:
            artifact = generate_career_document(career_snapshot_from_dict(form_data), fonts=fonts, geometry=geometry)
    except (InvalidSnapshotError, MalformedDateError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except DocumentGenerationError as e:
        typer.secho(f"✗ {e.user_message}", fg=typer.colors.RED, bold=True, err=True)
        if verbose:
            typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    if output is None:
        output = RESULTS_PATH / today() / f"{OUTPUT_NAMES[document_type]}_{now()}.pdf"
    saved = artifact.save(output)

    typer.secho("✓ Generation succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Pages: {artifact.page_count}")
    if verbose:
        typer.echo(f"  Pages in PDF: {page_count(saved)}")
        typer.echo(f"  Sections: {', '.join(artifact.section_names)}")
        for number, page in enumerate(artifact.layout.pages, start=1):
            typer.echo(f"  Page {number}: {', '.join(s.section_name for s in page)}")
    typer.echo(f"  PDF: {saved}")
    typer.echo(f"  Log: {log_file}")
    typer.echo("")


@app.command("resume")
def resume_command(
    form_file: Annotated[
        Optional[Path],
        typer.Argument(help="Form file (YAML or JSON); the saved draft is used if omitted"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: RESULTS_PATH/<date>/)"),
    ] = None,
    presets: Annotated[
        Optional[List[str]],
        typer.Option("--preset", "-p", help="Layout preset, repeatable (e.g. margin_narrow)"),
    ] = None,
    save_draft: Annotated[
        bool,
        typer.Option("--save-draft", help="Keep the form data as the saved draft"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show sections and page breaks"),
    ] = False,
):
    """
    Generate a 履歴書 PDF.

    Examples:\n

        $ generate_document.py resume forms/yamada.yaml

        $ generate_document.py resume forms/yamada.yaml -p margin_narrow -p spacing_tight -v
    """
    _generate("resume", form_file, output, presets, save_draft, verbose)


@app.command("career")
def career_command(
    form_file: Annotated[
        Optional[Path],
        typer.Argument(help="Form file (YAML or JSON); the saved draft is used if omitted"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: RESULTS_PATH/<date>/)"),
    ] = None,
    presets: Annotated[
        Optional[List[str]],
        typer.Option("--preset", "-p", help="Layout preset, repeatable (e.g. margin_narrow)"),
    ] = None,
    save_draft: Annotated[
        bool,
        typer.Option("--save-draft", help="Keep the form data as the saved draft"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show sections and page breaks"),
    ] = False,
):
    """
    Generate a 職務経歴書 PDF.

    Examples:\n

        $ generate_document.py career forms/yamada_career.yaml
    """
    _generate("career", form_file, output, presets, save_draft, verbose)


@app.command("postal")
def postal_command(
    postal_code: Annotated[
        str,
        typer.Argument(help="Seven-digit postal code, with or without hyphen"),
    ],
):
    """
    Look up the address for a postal code.

    Examples:\n

        $ generate_document.py postal 100-0001

        $ generate_document.py postal 1500002
    """
    address = lookup_address(postal_code)
    if address is None:
        typer.secho(f"No address found for {postal_code}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    typer.secho(f"〒{format_postal_code(address.postal_code)}", bold=True)
    typer.echo(f"  {address.prefecture} {address.city} {address.address}")


if __name__ == "__main__":
    app()
