import json
from typing import Any

from quasijson._core.error import PostRepairSyntaxError
from quasijson._core.logging import get_logger
from quasijson.repair.delimiters import restore_commas
from quasijson.repair.schema import JSONContainer

logger = get_logger(__name__)


def assemble(buffer: str, original: Any = None) -> JSONContainer:
    """
    Restore folded commas in ``buffer`` and parse the result.

    Args:
        buffer: Output of the comma disambiguation stage.
        original: The caller's input, attached to any error raised.

    Returns:
        The parsed JSON object (or array).

    Raises:
        PostRepairSyntaxError: The repaired text is still not a JSON object
            or array.
    """
    text = restore_commas(buffer)
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise PostRepairSyntaxError(
            f'Repaired text is still not valid JSON: {e}',
            original=original,
            repaired_text=text,
        ) from e

    if not isinstance(value, (dict, list)):
        raise PostRepairSyntaxError(
            f'Repaired text parsed to a {type(value).__name__}, not an object.',
            original=original,
            repaired_text=text,
        )
    logger.debug(f'Assembled {type(value).__name__} with {len(value)} entries')
    return value
