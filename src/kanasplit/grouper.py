from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from kanasplit.categories import Category, Mode
from kanasplit.chars import iter_scalars
from kanasplit.classifier import classify
from kanasplit.config import TokenizeOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """One maximal run of same-category characters."""

    category: Category
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"category": self.category.value, "value": self.value}


def tokenize(
    text: str | None, *, compact: bool = False, detailed: bool = False
) -> list[str] | list[Token]:
    """
    Split text into runs of characters sharing one category.

    Categories ('en', 'ja', 'englishNumeral', 'japaneseNumeral',
    'englishPunctuation', 'japanesePunctuation', 'kanji', 'hiragana',
    'katakana', 'space', 'other') come from `classify`.

    - compact=True: use the three compact categories, which merges e.g. kanji
      with kana and English words with the spaces between them.
    - detailed=True: return `Token(category, value)` instead of plain strings.

    Joining the returned values always reproduces `text`. None or "" -> [].

    >>> tokenize("truly 私は悲しい")
    ['truly', ' ', '私', 'は', '悲', 'しい']
    >>> tokenize("truly 私は悲しい", compact=True)
    ['truly ', '私は悲しい']
    """
    if text is None:
        return []
    if not isinstance(text, str):
        raise TypeError(f"tokenize() expects str or None, got {type(text).__name__}")
    if not text:
        return []

    mode: Mode = "compact" if compact else "full"

    scalars = iter_scalars(text)
    head = next(scalars)
    run: list[str] = [head]
    prev = classify(head, mode)
    runs: list[list[str]] = []
    n_scalars = 1
    for char in scalars:
        n_scalars += 1
        curr = classify(char, mode)
        if curr == prev:
            run.append(char)
            continue
        runs.append(run)
        run = [char]
        prev = curr
    runs.append(run)

    logger.debug(
        "Tokenize: %d scalars -> %d tokens (mode=%s)", n_scalars, len(runs), mode
    )

    if not detailed:
        return ["".join(r) for r in runs]
    # Every scalar in a run shares one category, so the first one decides it.
    return [Token(category=classify(r[0], mode), value="".join(r)) for r in runs]


def tokenize_with_options(
    text: str | None,
    options: TokenizeOptions | Mapping[str, Any] | None = None,
) -> list[str] | list[Token]:
    """`tokenize` driven by an options object or a mapping like {"compact": True}."""
    if not isinstance(options, TokenizeOptions):
        options = TokenizeOptions.from_mapping(options)
    return tokenize(text, compact=options.compact, detailed=options.detailed)
