"""CLI for argcalc: evaluate an infix expression given as arguments.

Usage:
    argcalc 2 + 3 '*' 4              # 14
    argcalc '(' 1 + 2 ')' '*' 3      # 9
    argcalc '{' 1 + 2 '}' '*' 3      # braces work like parentheses
    argcalc --explain 8 - 3 - 2      # show tokens and postfix on stderr
    argcalc --bits 32 2147483647 + 1 # overflow checks at 32 bits
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from argcalc.engine import evaluate
from argcalc.errors import CalcError
from argcalc.report import format_result, render_error, render_evaluation
from argcalc.settings import MAX_BITS, load_settings

app = typer.Typer(
    name="argcalc",
    help="Evaluate an integer infix expression supplied as words",
    add_completion=False,
)
console = Console(stderr=True)


@app.command(
    context_settings={
        # Expression words such as "-" or "-5" are not options.
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
def cmd_eval(
    words: Optional[list[str]] = typer.Argument(
        None, help="Expression words: numbers and + - * / ( ) { }", show_default=False
    ),
    explain: bool = typer.Option(
        False, "--explain", "-x", envvar="ARGCALC_EXPLAIN",
        help="Show the token and postfix sequences on stderr",
    ),
    bits: Optional[int] = typer.Option(
        None, "--bits", envvar="ARGCALC_BITS", min=2, max=MAX_BITS,
        help="Signed integer width for range and overflow checks [default: 64]",
    ),
) -> None:
    """Evaluate WORDS and print the result.

    Options are only read before the first word. A leading "--" ends
    the options and is not itself a word, so "argcalc -- - 1 2" passes
    "-" as the first word; "-x" or "--bits" in first position are options.
    """
    settings = load_settings(bits=bits, explain=explain)

    try:
        evaluation = evaluate(words or [], settings)
    except CalcError as e:
        render_error(e, console)
        raise typer.Exit(1)

    if settings.explain:
        render_evaluation(evaluation, console)
    if evaluation.result is not None:
        typer.echo(format_result(evaluation.result), nl=False)


if __name__ == "__main__":
    app()
