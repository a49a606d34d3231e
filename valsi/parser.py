"""
Lojban parsing with wordlist validation.

parse_lojban() is the main entry point: it makes sure the wordlists are
loaded, parses the text against the grammar, then checks that every word is
a known cmavo or gismu.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .errors import LojbanParseError
from .grammar import Pair, parse_text
from .logging_config import log_with_context
from .validator import validate_words
from .wordlists import Wordlists, get_wordlists

logger = logging.getLogger(__name__)


def parse_lojban(text: str, wordlists: Optional[Wordlists] = None) -> Pair:
    """
    Parse Lojban text and validate its words.

    Args:
        text: Raw input text
        wordlists: Lexicons to validate against. Defaults to the process-wide
            store, which is loaded on first use.

    Returns:
        The root Pair of the parse tree (rule ``text``)

    Raises:
        WordlistLoadError: if the default wordlists cannot be loaded
        LojbanSyntaxError: if the text does not match the grammar
        InvalidWordError: for the first word found in no wordlist
    """
    if wordlists is None:
        wordlists = get_wordlists()

    tree = parse_text(text)
    if logger.isEnabledFor(logging.DEBUG):
        log_with_context("Parsed text", {"text": text, "words": len(tree.words())}, logger=logger)

    validate_words(tree, wordlists)
    return tree


@dataclass
class LineResult:
    """Outcome of parsing one line of a multi-line input."""
    line_num: int
    text: str
    tree: Optional[Pair] = None
    error: Optional[LojbanParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_many(lines: Iterable[str], wordlists: Optional[Wordlists] = None,
               progress=None) -> List[LineResult]:
    """
    Run parse_lojban() over each non-blank line.

    Unlike parse_lojban(), a bad line doesn't stop the run: its syntax or word
    error is recorded on its LineResult. Wordlist load failures still raise.

    Args:
        lines: Input lines (trailing newlines are stripped)
        wordlists: Lexicons, as for parse_lojban()
        progress: Optional ProgressLogger, advanced once per input line

    Returns:
        One LineResult per non-blank line, with 1-based line numbers
    """
    if wordlists is None:
        wordlists = get_wordlists()

    results = []
    for line_num, line in enumerate(lines, 1):
        if progress is not None:
            progress.update()
        text = line.rstrip('\r\n')
        if not text.strip():
            continue
        try:
            tree = parse_lojban(text, wordlists)
            results.append(LineResult(line_num, text, tree=tree))
        except LojbanParseError as e:
            logger.debug(f"Line {line_num} failed: {e}")
            results.append(LineResult(line_num, text, error=e))
    return results
