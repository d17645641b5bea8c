from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

import typer
from tqdm import tqdm

from ngram_speller.datasets.corpus import iter_tokens
from ngram_speller.model.ngram import NGram
from ngram_speller.model.ngram_map import NGramMap

app = typer.Typer(help="Query an n-gram context model built from a corpus.")


def build_model(corpus: Path, n: int, seed: Optional[int] = None) -> NGramMap:
    """Ingest `corpus` with a progress bar."""
    rng = random.Random(seed)
    tokens = tqdm(iter_tokens(corpus), desc=f"ingest {corpus.name}", unit="tok", disable=None)
    return NGramMap(tokens, n, rng=rng)


@app.command("sample")
def sample(
    corpus: Path = typer.Option(..., exists=True, dir_okay=False),
    context: str = typer.Option(..., help="The preceding words, e.g. 'of the'."),
    n: int = typer.Option(2, min=1),
    seed: int = typer.Option(None, help="Seed for reproducible sampling."),
):
    """Print one continuation drawn uniformly among those seen after CONTEXT."""
    ngrams = build_model(corpus, n, seed)
    word = ngrams.random_next(NGram.from_text(context, n))
    typer.echo(word if word is not None else "No information regarding this prefix.")


@app.command("suggest")
def suggest(
    corpus: Path = typer.Option(..., exists=True, dir_okay=False),
    context: str = typer.Option(..., help="The preceding words, e.g. 'of the'."),
    n: int = typer.Option(2, min=1),
    k: int = typer.Option(5, min=0),
):
    """Print the K most frequent continuations of CONTEXT, one per line."""
    ngrams = build_model(corpus, n)
    for word in ngrams.words_after(NGram.from_text(context, n), k):
        typer.echo(word)
