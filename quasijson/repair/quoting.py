"""
Quoting repair: turns bare ``key: value`` pairs into ``"key": "value"``.

Only flat fields are rewritten. A value starting with ``{`` or ``[`` is left
exactly as it is; its key is still quoted. Values holding a literal comma come
out of this stage split across several comma-separated tokens; folding those
back together is the job of :mod:`quasijson.repair.disambiguation`.
"""

import re

from quasijson._core.logging import get_logger
from quasijson.repair.delimiters import Delimiter

logger = get_logger(__name__)

# key:,  ->  key:'',
_EMPTY_BEFORE_COMMA = re.compile(r':\s*,')
# key:}  ->  key: ''}
_EMPTY_BEFORE_BRACE = re.compile(r':\s*}')
# {key,,  ->  {key:'',   (colon and value collapsed into a doubled comma)
_KEY_BEFORE_DOUBLE_COMMA = re.compile(r'(?<=[{,])(\s*[A-Za-z][A-Za-z0-9_]*)\s*,,')

# Start of another field inside a value: a missing comma, never value content.
_NEXT_KEY = r'\s*"[^"\\\n]+"\s*:|\s+[A-Za-z][A-Za-z0-9_]*\s*:'

_FIELD = re.compile(
    r'(?<=[{,])(?P<lead>\s*)'
    r'(?P<key>"[^"\\\n]+"|[A-Za-z][A-Za-z0-9_]*)'
    r'\s*:\s*'
    r'(?P<value>'
    r'[{\[]'  # nested container: left untouched
    r'|"(?:[^"\\]|\\.)*"(?=\s*[,}])'  # already quoted
    r'|[^\s,{}\[](?:(?!' + _NEXT_KEY + r')[^,}])*'  # bareword, up to , } or a key
    r')'
)
_LITERAL = re.compile(
    r'-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?|true|false|null'
)
_UNESCAPED_QUOTE = re.compile(r'(?<!\\)"')

_EMPTY_VALUE = Delimiter.SINGLE_QUOTE.value * 2


def normalize_empty_fields(text: str) -> str:
    """Give every value-less field an explicit ``''`` value so it can be quoted."""
    text = _EMPTY_BEFORE_COMMA.sub(f':{_EMPTY_VALUE},', text)
    text = _EMPTY_BEFORE_BRACE.sub(f': {_EMPTY_VALUE}}}', text)
    return _KEY_BEFORE_DOUBLE_COMMA.sub(rf'\1:{_EMPTY_VALUE},', text)


def _quote_value(value: str, preserve_literals: bool) -> str:
    if value[0] in '{[':
        return value
    if preserve_literals and _LITERAL.fullmatch(value):
        return value
    if len(value) > 1 and value[0] == value[-1] == '"':
        return value
    inner = _UNESCAPED_QUOTE.sub(r'\\"', value.strip('"'))
    return f'"{inner}"'


def quote_barewords(text: str, preserve_literals: bool = True) -> str:
    """
    Quote bare keys and flat values in a single pass over ``text``.

    Args:
        text: Working buffer with empty fields already normalized.
        preserve_literals: Keep bare numbers, ``true``, ``false`` and
            ``null`` unquoted.

    Returns:
        A new buffer with ``"key": "value"`` pairs.
    """

    def _replace(match: re.Match) -> str:
        key = match.group('key').strip('"')
        raw_value = match.group('value')
        value = raw_value.rstrip()
        trailing = raw_value[len(value) :]
        quoted = _quote_value(value, preserve_literals)
        return f'{match.group("lead")}"{key}": {quoted}{trailing}'

    return _FIELD.sub(_replace, text)


def strip_single_quotes(text: str) -> str:
    """
    Remove every single-quote character.

    This also removes apostrophes from genuine content
    (``"O'Brien"`` becomes ``"OBrien"``).
    """
    return text.replace(Delimiter.SINGLE_QUOTE.value, Delimiter.EMPTY.value)


def quote_fields(
    text: str,
    *,
    strip_quotes: bool = True,
    preserve_literals: bool = True,
) -> str:
    """Run the three quoting steps in order and return the new buffer."""
    buffer = normalize_empty_fields(text)
    logger.debug(f'After empty-field normalization: {buffer!r}')
    buffer = quote_barewords(buffer, preserve_literals=preserve_literals)
    logger.debug(f'After bareword quoting: {buffer!r}')
    if strip_quotes:
        buffer = strip_single_quotes(buffer)
        logger.debug(f'After single-quote stripping: {buffer!r}')
    return buffer
