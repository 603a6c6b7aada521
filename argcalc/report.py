"""Rich rendering for argcalc: stage tables and diagnostics.

Everything here writes to the console it is given (stderr in the CLI);
stdout is reserved for the result line.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argcalc.errors import CalcError
from argcalc.models import Evaluation, LeftGroup, Number, Operator, RightGroup, Token


def format_result(value: int) -> str:
    """The stdout line for a result: value, a space, newline."""
    return f"{value} \n"


def _kind(token: Token) -> str:
    if isinstance(token, Number):
        return "number"
    if isinstance(token, Operator):
        return "operator"
    if isinstance(token, LeftGroup):
        return "open"
    if isinstance(token, RightGroup):
        return "close"
    raise TypeError(f"Not a token: {token!r}")


def _token_table(title: str, tokens: list[Token]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Token", style="green", justify="right", min_width=6)
    table.add_column("Kind", min_width=8)
    table.add_column("Rank", justify="right")

    for i, token in enumerate(tokens):
        rank = getattr(token, "precedence", None)
        table.add_row(
            str(i),
            escape(str(token)),
            _kind(token),
            "--" if rank is None else str(rank),
        )
    return table


def render_evaluation(evaluation: Evaluation, console: Console) -> None:
    """Render the token and postfix sequences plus the result."""
    if not evaluation.tokens:
        console.print("[yellow]Nothing to evaluate.[/yellow]")
        return

    console.print()
    console.print(_token_table("Tokens (infix)", evaluation.tokens))
    console.print(_token_table("Postfix (RPN)", evaluation.postfix))
    rpn = " ".join(str(t) for t in evaluation.postfix)
    console.print(f"  [dim]rpn:[/dim] {escape(rpn)}")
    if evaluation.result is not None:
        console.print(f"  [bold]result:[/bold] {evaluation.result}")
    console.print()


def render_error(error: CalcError, console: Console) -> None:
    """One-line diagnostic naming the failure."""
    console.print(f"[red]argcalc: {escape(str(error))}[/red]", soft_wrap=True)
