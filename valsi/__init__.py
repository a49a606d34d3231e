# valsi: a Lojban parser that checks every word against the cmavo and gismu lists.

from valsi.errors import (
    LojbanParseError,
    LojbanSyntaxError,
    InvalidWordError,
    WordlistLoadError,
)
from valsi.grammar import Pair, Rule
from valsi.parser import parse_lojban, parse_many, LineResult
from valsi.wordlists import Wordlists, WordlistStore, load_wordlist, get_wordlists

__all__ = [
    'parse_lojban',
    'parse_many',
    'LineResult',
    'Pair',
    'Rule',
    'LojbanParseError',
    'LojbanSyntaxError',
    'InvalidWordError',
    'WordlistLoadError',
    'Wordlists',
    'WordlistStore',
    'load_wordlist',
    'get_wordlists',
]
