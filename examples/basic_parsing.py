#!/usr/bin/env python3
"""
Basic Lojban Parsing Examples

Parses a few texts with the bundled wordlists and shows the three ways a
text can fail.
"""
import sys
from pathlib import Path

# Add parent directory to path to import valsi
sys.path.insert(0, str(Path(__file__).parent.parent))

from valsi import parse_lojban, LojbanParseError


EXAMPLES = [
    "mi klama le zarci",          # I go to the market
    "mi prami do .i do prami mi",  # two sentences
    "mi klama le qarci",          # unknown word
    "mi klama le zarci!",         # not in the grammar
    "",                           # empty input
]


def show(text):
    print("=" * 60)
    print(f"Input: '{text}'")
    try:
        tree = parse_lojban(text)
    except LojbanParseError as e:
        print(f"  {e.kind} error: {e}")
        if e.span:
            start, end = e.span
            print(f"  {text}")
            print(f"  {' ' * start}{'^' * (end - start)}")
        return
    print(tree.pretty())


if __name__ == '__main__':
    for example in EXAMPLES:
        show(example)
