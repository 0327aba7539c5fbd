"""
Comma disambiguation: folds value fragments that were split off at a literal
comma back into the field they belong to.

Once keys and values are quoted, the comma is the only field separator left,
so a value such as ``hello, world`` ends up as a complete field
(``"note": "hello"``) followed by an orphan fragment (`` world``). Each pass
folds the first orphan into the closest complete field before it and marks the
folded comma with :attr:`Delimiter.PLACEHOLDER` so the next split leaves it
alone.

Termination: the number of orphan fragments is the decreasing measure. Every
pass either lowers it by one or raises :class:`UnrecoverableCorruptionError`,
so the loop runs at most as many times as there were orphans to begin with.
"""

from typing import List, Optional

from quasijson._core.error import (
    MissingFieldSeparatorsError,
    UnrecoverableCorruptionError,
)
from quasijson._core.logging import get_logger
from quasijson.repair.delimiters import (
    CLOSERS,
    Delimiter,
    FieldToken,
    count_orphans,
    has_unseparated_fields,
    join_fields,
    split_fields,
)
from quasijson.repair.schema import DisambiguationResult

logger = get_logger(__name__)

_QUOTE = Delimiter.DOUBLE_QUOTE.value
_BRACE = Delimiter.RIGHT_BRACE.value
_PLACEHOLDER = Delimiter.PLACEHOLDER.value


def merge_fragment(previous: str, fragment: str) -> str:
    """
    Fold ``fragment`` back into the field text ``previous``.

    Args:
        previous: Text of the complete field the fragment was split from.
        fragment: Text of the orphan fragment.

    Returns:
        The merged field text, with the folded comma marked by the placeholder.
    """
    previous = previous.rstrip()
    stripped = fragment.strip()
    if stripped and all(char in CLOSERS for char in stripped):
        # Tail of a trailing comma: `{"a": 1,}`
        return previous + stripped

    closes_object = fragment.rstrip().endswith(_BRACE)
    if closes_object:
        fragment = fragment.rstrip()[:-1]

    if previous.endswith(_QUOTE):
        if fragment.rstrip().endswith(_QUOTE):
            fragment = fragment.rstrip()[:-1]
        merged = f'{previous[:-1]}{_PLACEHOLDER}{fragment}{_QUOTE}'
    else:
        merged = f'{previous}{_PLACEHOLDER}{fragment}'

    if closes_object:
        merged += _BRACE
    return merged


class CommaDisambiguator:
    """
    Iteratively reassembles values that contain literal commas.

    Example:
        >>> CommaDisambiguator().run('{"note": "hello", world, "id": 5}').buffer
        '{"note": "hello\\x1f world", "id": 5}'
    """

    def run(self, buffer: str) -> DisambiguationResult:
        """
        Fold every orphan fragment of ``buffer`` into its field.

        Raises:
            UnrecoverableCorruptionError: the buffer became empty, a fragment
                had no preceding field, or a pass made no progress.
            MissingFieldSeparatorsError: the result holds two fields with
                no comma between them.
        """
        tokens = self._collapse(split_fields(buffer))
        remaining = count_orphans(tokens)
        merges = 0

        while remaining:
            orphan = next(token for token in tokens if token.is_orphan)
            anchor = self._anchor_for(tokens, orphan)
            if anchor is None:
                raise UnrecoverableCorruptionError(
                    f'Fragment {orphan.text!r} has no preceding key/value field '
                    'to be folded into.'
                )

            merged = merge_fragment(anchor.text, orphan.text)
            logger.debug(
                f'Pass {merges + 1}: folding {orphan.text!r} into {anchor.text!r}'
            )
            buffer = join_fields(self._rewrite(tokens, anchor, orphan, merged))
            tokens = self._collapse(split_fields(buffer))
            merges += 1

            left = count_orphans(tokens)
            if left >= remaining:
                raise UnrecoverableCorruptionError(
                    f'Folding {orphan.text!r} did not reduce the number of '
                    f'fragments ({remaining} before, {left} after).'
                )
            remaining = left

        buffer = join_fields(tokens)
        if has_unseparated_fields(buffer):
            raise MissingFieldSeparatorsError(
                "JSON doesn't have fields separated by commas."
            )
        return DisambiguationResult(buffer=buffer, merges=merges)

    @staticmethod
    def _collapse(tokens: List[FieldToken]) -> List[FieldToken]:
        """Drop blank tokens (doubled commas) and renumber the rest."""
        kept = [
            FieldToken(text=token.text, position=position)
            for position, token in enumerate(t for t in tokens if not t.is_blank)
        ]
        if not kept:
            raise UnrecoverableCorruptionError(
                'Working buffer became empty: more invalid characters than '
                'commas and quotes on keys and values.'
            )
        return kept

    @staticmethod
    def _anchor_for(
        tokens: List[FieldToken], orphan: FieldToken
    ) -> Optional[FieldToken]:
        """The last complete field positioned before ``orphan``."""
        for token in reversed(tokens[: orphan.position]):
            if token.is_complete:
                return token
        return None

    @staticmethod
    def _rewrite(
        tokens: List[FieldToken],
        anchor: FieldToken,
        orphan: FieldToken,
        merged: str,
    ) -> List[FieldToken]:
        rewritten = []
        for token in tokens:
            if token.position == orphan.position:
                continue
            if token.position == anchor.position:
                token = FieldToken(text=merged, position=token.position)
            rewritten.append(token)
        return rewritten


def disambiguate_commas(buffer: str) -> DisambiguationResult:
    """Convenience wrapper around :meth:`CommaDisambiguator.run`."""
    return CommaDisambiguator().run(buffer)
