"""
Grammar engine adapter.

Runs lark over ``grammar.lark`` and converts its tree into Pair nodes. A Pair
keeps the rule tag, the exact matched text, the UTF-8 byte span of that text
in the input, and its children in source order.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from .errors import LojbanSyntaxError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
START_RULE = "text"


class Rule(str, Enum):
    """Rule tags exposed on Pair nodes."""
    TEXT = "text"
    SENTENCE = "sentence"
    WORD = "word"


@dataclass(frozen=True)
class Pair:
    """
    One node of the parse tree.

    ``start`` and ``end`` are absolute byte offsets, so
    ``source.encode('utf-8')[start:end]`` is exactly ``text``.
    """

    rule: Rule
    text: str
    start: int
    end: int
    children: Tuple["Pair", ...] = ()

    @property
    def span(self) -> Tuple[int, int]:
        return (self.start, self.end)

    @property
    def is_word(self) -> bool:
        return self.rule == Rule.WORD

    def walk(self) -> Iterator["Pair"]:
        """Pre-order traversal, this node first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def words(self) -> List[str]:
        """Word leaves in source order."""
        return [pair.text for pair in self.walk() if pair.is_word]

    def char_span(self, source: str) -> Tuple[int, int]:
        """Convert the byte span back to str indices into ``source``."""
        encoded = source.encode('utf-8')
        start = len(encoded[:self.start].decode('utf-8'))
        return (start, start + len(self.text))

    def to_dict(self) -> Dict[str, Any]:
        data = {"rule": self.rule.value, "text": self.text, "span": [self.start, self.end]}
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    def pretty(self, indent: str = "  ") -> str:
        """Indented one-node-per-line rendering."""
        lines = []

        def _render(pair: "Pair", depth: int):
            label = f"{indent * depth}{pair.rule.value} {pair.start}..{pair.end}"
            if pair.is_word:
                label += f" '{pair.text}'"
            lines.append(label)
            for child in pair.children:
                _render(child, depth + 1)

        _render(self, 0)
        return "\n".join(lines)


def _build_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding='utf-8'),
        start=START_RULE,
        parser="lalr",
        propagate_positions=True,
    )


_PARSER = _build_parser()


class _ByteOffsets:
    """Maps str indices of one input to UTF-8 byte offsets."""

    def __init__(self, text: str):
        self.text = text
        self.ascii = text.isascii()

    def __call__(self, index: int) -> int:
        if self.ascii:
            return index
        return len(self.text[:index].encode('utf-8'))


def _to_pair(node: Tree, text: str, offsets: _ByteOffsets) -> Pair:
    rule = Rule(str(node.data))

    if rule == Rule.WORD:
        token = next(child for child in node.children if isinstance(child, Token))
        return Pair(
            rule=rule,
            text=str(token),
            start=offsets(token.start_pos),
            end=offsets(token.end_pos),
        )

    children = tuple(
        _to_pair(child, text, offsets)
        for child in node.children
        if isinstance(child, Tree)
    )
    start_pos, end_pos = node.meta.start_pos, node.meta.end_pos
    return Pair(
        rule=rule,
        text=text[start_pos:end_pos],
        start=offsets(start_pos),
        end=offsets(end_pos),
        children=children,
    )


def _syntax_error(error: UnexpectedInput, text: str) -> LojbanSyntaxError:
    pos = getattr(error, 'pos_in_stream', None)
    # UnexpectedToken carries the token, UnexpectedCharacters the character
    token = getattr(error, 'token', None) or getattr(error, 'char', None)
    token_text: Optional[str] = str(token) if token else None
    position = _ByteOffsets(text)(pos) if pos is not None else None
    line = getattr(error, 'line', None)
    column = getattr(error, 'column', None)
    return LojbanSyntaxError(
        str(error),
        line=line if isinstance(line, int) and line > 0 else None,
        column=column if isinstance(column, int) and column > 0 else None,
        position=position,
        token=token_text,
    )


def parse_text(text: str) -> Pair:
    """
    Parse text against the grammar, starting at the ``text`` rule.

    Raises:
        LojbanSyntaxError: if the text does not match the grammar
    """
    try:
        tree = _PARSER.parse(text)
    except UnexpectedInput as e:
        logger.debug(f"Grammar rejected input: {e}")
        raise _syntax_error(e, text) from e
    return _to_pair(tree, text, _ByteOffsets(text))
