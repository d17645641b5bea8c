from __future__ import annotations

from pathlib import Path

import typer

from ngram_speller.corrector.speller import SpellingCorrector
from ngram_speller.utils.config import load_speller_config

app = typer.Typer(help="Dictionary lookups and spelling correction.")


@app.command("word")
def check_word(
    word: str = typer.Argument(...),
    dictionary: Path = typer.Option(..., exists=True, dir_okay=False),
):
    """Report whether WORD is in the dictionary."""
    corrector = SpellingCorrector.from_file(dictionary)
    if corrector.is_misspelled(word.lower()):
        typer.echo(f"{word}: misspelled")
        raise typer.Exit(code=1)
    typer.echo(f"{word}: ok")


@app.command("complete")
def complete(
    prefix: str = typer.Argument(...),
    dictionary: Path = typer.Option(..., exists=True, dir_okay=False),
):
    """Print the unique dictionary completion of PREFIX, if there is exactly one."""
    corrector = SpellingCorrector.from_file(dictionary)
    word = corrector.autocomplete(prefix.lower())
    if word is None:
        typer.echo("no unique completion")
        raise typer.Exit(code=1)
    typer.echo(word)


@app.command("correct")
def correct(
    text: list[str] = typer.Argument(..., help="Words to correct."),
    dictionary: Path = typer.Option(..., exists=True, dir_okay=False),
    corpus: Path = typer.Option(None, exists=True, dir_okay=False, help="Corpus for the context model."),
    config: Path = typer.Option(None, exists=True, dir_okay=False, help="YAML speller config."),
):
    """Correct every misspelled word of TEXT."""
    from ngram_speller.cli.model import build_model

    try:
        cfg = load_speller_config(config)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--config")

    corrector = SpellingCorrector.from_file(dictionary, max_edits=cfg.max_edits)
    ngrams = build_model(corpus, cfg.n, cfg.seed) if corpus is not None else None
    typer.echo(corrector.correct_text(ngrams, " ".join(text), cfg.num_considered))
