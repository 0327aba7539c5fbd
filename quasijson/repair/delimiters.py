from dataclasses import dataclass
from typing import Iterator, List, Sequence

from quasijson._core.schema import RichEnum


class Delimiter(str, RichEnum):
    """Structural tokens the repair stages reason about."""

    COMMA = ','
    COLON = ':'
    LEFT_BRACE = '{'
    RIGHT_BRACE = '}'
    LEFT_BRACKET = '['
    RIGHT_BRACKET = ']'
    DOUBLE_QUOTE = '"'
    SINGLE_QUOTE = "'"
    # Stands in for a comma folded back into a value; never valid in JSON text.
    PLACEHOLDER = '\x1f'
    EMPTY = ''


OPENERS = frozenset({Delimiter.LEFT_BRACE.value, Delimiter.LEFT_BRACKET.value})
CLOSERS = frozenset({Delimiter.RIGHT_BRACE.value, Delimiter.RIGHT_BRACKET.value})


@dataclass(frozen=True)
class FieldToken:
    """
    A substring between two top-level commas (or the buffer boundaries).

    ``position`` is the token's index in the comma-split sequence it came
    from, so a token can be replaced without searching for its text.
    """

    text: str
    position: int

    @property
    def is_complete(self) -> bool:
        """A key/value pair: the token carries a colon."""
        return Delimiter.COLON.value in self.text

    @property
    def is_blank(self) -> bool:
        """Left behind by doubled commas."""
        return not self.text.strip()

    @property
    def is_orphan(self) -> bool:
        """A continuation of the previous value that was split off at a comma."""
        return not self.is_complete and not self.is_blank


def iter_top_level(buffer: str, targets: str) -> Iterator[int]:
    """
    Yield the index of every character of ``targets`` that sits at the top
    level of ``buffer``: outside double-quoted strings and not nested deeper
    than the outermost brace or bracket.
    """
    depth = 0
    in_string = False
    escaped = False
    for index, char in enumerate(buffer):
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == Delimiter.DOUBLE_QUOTE.value:
                in_string = False
            continue
        if char == Delimiter.DOUBLE_QUOTE.value:
            in_string = True
        elif char in OPENERS:
            depth += 1
        elif char in CLOSERS:
            depth -= 1
        elif char in targets and depth <= 1:
            yield index


def split_fields(buffer: str) -> List[FieldToken]:
    """Split ``buffer`` on its top-level commas, keeping each token's position."""
    tokens = []
    start = 0
    for index in iter_top_level(buffer, Delimiter.COMMA.value):
        tokens.append(FieldToken(text=buffer[start:index], position=len(tokens)))
        start = index + 1
    tokens.append(FieldToken(text=buffer[start:], position=len(tokens)))
    return tokens


def has_unseparated_fields(buffer: str) -> bool:
    """
    True when two key/value separators (colons) share one top-level segment
    of ``buffer``, i.e. a comma between two fields is missing.
    """
    colons = 0
    for index in iter_top_level(buffer, Delimiter.COMMA.value + Delimiter.COLON.value):
        if buffer[index] == Delimiter.COMMA.value:
            colons = 0
            continue
        colons += 1
        if colons > 1:
            return True
    return False


def join_fields(tokens: Sequence[FieldToken]) -> str:
    return Delimiter.COMMA.value.join(token.text for token in tokens)


def count_orphans(tokens: Sequence[FieldToken]) -> int:
    return sum(1 for token in tokens if token.is_orphan)


def restore_commas(buffer: str) -> str:
    """Turn every placeholder back into a literal comma."""
    return buffer.replace(Delimiter.PLACEHOLDER.value, Delimiter.COMMA.value)
