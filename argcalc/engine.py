"""argcalc engine: runs words → tokens → postfix → result.

Data flow per evaluation:
1. Tokenize the words (nothing at all below the minimum word count)
2. Convert the infix tokens to postfix with the shunting yard
3. Evaluate the postfix sequence with checked arithmetic
4. Return an Evaluation holding every stage's output

Stages run to completion one after another. Each stage owns the
container it builds and hands it to the next; nothing is kept between
calls, so evaluations are independent and reentrant.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from argcalc.errors import AllocationFailure
from argcalc.models import Evaluation
from argcalc.rpn import evaluate_postfix
from argcalc.settings import Settings
from argcalc.shunting_yard import to_postfix
from argcalc.tokenizer import tokenize

T = TypeVar("T")


def _stage(what: str, fn: Callable[[], T]) -> T:
    """Run one stage, reporting exhausted memory as AllocationFailure."""
    try:
        return fn()
    except MemoryError as e:
        if isinstance(e, AllocationFailure):
            raise
        raise AllocationFailure(what) from e


def evaluate(words: Iterable[str], settings: Optional[Settings] = None) -> Evaluation:
    """Evaluate an infix expression given as words.

    Args:
        words: Expression words, without a leading program name.
        settings: Integer width etc.; defaults to Settings().

    Returns:
        Evaluation with tokens, postfix and result. ``result`` is None
        when there was nothing to evaluate.

    Raises:
        CalcError: any fatal condition from the stages.
    """
    settings = settings or Settings()
    bounds = settings.bounds
    evaluation = Evaluation(words=list(words))

    evaluation.tokens = _stage("token", lambda: tokenize(evaluation.words, bounds))
    if not evaluation.tokens:
        return evaluation

    evaluation.postfix = _stage("queue node", lambda: to_postfix(evaluation.tokens))
    evaluation.result = _stage(
        "evaluation stack node", lambda: evaluate_postfix(evaluation.postfix, bounds)
    )
    return evaluation


def calculate(words: Iterable[str], settings: Optional[Settings] = None) -> Optional[int]:
    """Shorthand for ``evaluate(words, settings).result``."""
    return evaluate(words, settings).result
