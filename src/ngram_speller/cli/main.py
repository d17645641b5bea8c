from __future__ import annotations

import typer

from ngram_speller.cli import check as check_cmd
from ngram_speller.cli import model as model_cmd

app = typer.Typer(help="N-gram spelling corrector CLI.")

app.add_typer(model_cmd.app, name="model")
app.add_typer(check_cmd.app, name="check")
