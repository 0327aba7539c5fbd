import json
from typing import Any

from quasijson._core.error import NullInputError
from quasijson._core.logging import get_logger, truncate_for_log
from quasijson.repair.schema import ClassifiedInput, Validity

logger = get_logger(__name__)


def read_input(json_input: Any) -> str:
    """
    Render a caller's input as text without changing it.

    Bytes are decoded as UTF-8 and readable streams are read once; any
    other object is rendered with ``str()``.

    Raises:
        UnicodeDecodeError: the bytes are not valid UTF-8.
    """
    if isinstance(json_input, str):
        return json_input
    if isinstance(json_input, (bytes, bytearray)):
        return bytes(json_input).decode('utf-8')
    read = getattr(json_input, 'read', None)
    if callable(read):
        content = read()
        if isinstance(content, (bytes, bytearray)):
            return bytes(content).decode('utf-8')
        return content
    return str(json_input)


def classify(json_input: Any) -> ClassifiedInput:
    """
    Decide whether ``json_input`` already is a JSON object or array.

    Containers produced by a JSON parser upstream are accepted as they are.
    Text is handed to the parser; anything it rejects, and any scalar it
    returns, is classified invalid and carried forward as text for repair.

    Raises:
        NullInputError: ``json_input`` is None.
    """
    if json_input is None:
        raise NullInputError()

    if isinstance(json_input, (dict, list)):
        return ClassifiedInput(validity=Validity.VALID, value=json_input)

    text = read_input(json_input)
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f'Parser rejected input: {e}')
    else:
        if isinstance(value, (dict, list)):
            return ClassifiedInput(validity=Validity.VALID, text=text, value=value)
        logger.debug(f'Parser returned a {type(value).__name__}, not an object')

    logger.info(f'Invalid json: {truncate_for_log(text)}')
    return ClassifiedInput(validity=Validity.INVALID, text=text)
