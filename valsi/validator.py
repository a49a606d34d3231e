"""
Lexical validation of parse trees.

The grammar accepts any run of letters as a word, so a successful parse only
says the text is well formed. This pass walks the tree and checks every word
against the cmavo and gismu lists, stopping at the first unknown one.
"""

import logging

from .errors import InvalidWordError
from .grammar import Pair, Rule
from .wordlists import Wordlists

logger = logging.getLogger(__name__)

# Rule.WORD doesn't say which word class was intended
EXPECTED_WORD_TYPE = "lojban word"


def validate_words(pair: Pair, wordlists: Wordlists) -> None:
    """
    Check every word in the tree rooted at ``pair``.

    Traversal is depth-first, children in order, so the first failure is the
    leftmost unknown word in the source.

    Raises:
        InvalidWordError: for the first word found in neither cmavo nor gismu
    """
    if pair.rule == Rule.WORD:
        if not wordlists.is_known(pair.text):
            logger.debug(f"Unknown word '{pair.text}' at {pair.span}")
            raise InvalidWordError(
                word=str(pair.text),
                span=(pair.start, pair.end),
                expected_type=EXPECTED_WORD_TYPE,
            )
        return

    for child in pair.children:
        validate_words(child, wordlists)
