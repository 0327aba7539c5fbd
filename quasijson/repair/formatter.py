from typing import Any, Optional, Tuple

from quasijson._core.environment import resolve_option
from quasijson._core.error import JSONRepairError
from quasijson._core.logging import get_logger, truncate_for_log
from quasijson.repair.assembly import assemble
from quasijson.repair.classifier import classify
from quasijson.repair.delimiters import restore_commas
from quasijson.repair.disambiguation import CommaDisambiguator
from quasijson.repair.quoting import quote_fields
from quasijson.repair.schema import DisambiguationResult, JSONContainer, RepairResult

logger = get_logger(__name__)


class JSONFormatter:
    """
    Checks whether an input is valid JSON and repairs it when it is not.

    The pipeline runs the validity check first; only inputs the JSON parser
    rejects go through quoting, comma disambiguation and a final parse.
    Every stage works on its own copy of the text, so one formatter can be
    reused, but ``valid_json`` always reflects the last call only.

    Example:
        >>> formatter = JSONFormatter()
        >>> formatter.check_validity_and_format('{name: John, age: 23}')
        {'name': 'John', 'age': 23}
    """

    def __init__(
        self,
        strip_single_quotes: Optional[bool] = None,
        preserve_literals: Optional[bool] = None,
    ):
        """
        Args:
            strip_single_quotes: Remove every single quote after quoting.
                Defaults to ``settings.repair_strip_single_quotes``.
            preserve_literals: Keep bare numbers, booleans and null unquoted.
                Defaults to ``settings.repair_preserve_literals``.
        """
        self.strip_single_quotes = resolve_option(
            strip_single_quotes, 'repair_strip_single_quotes'
        )
        self.preserve_literals = resolve_option(
            preserve_literals, 'repair_preserve_literals'
        )
        self.disambiguator = CommaDisambiguator()
        self._valid_json: Optional[JSONContainer] = None

    @property
    def valid_json(self) -> Optional[JSONContainer]:
        """Result of the last successful call, or None after a failure."""
        return self._valid_json

    def repair_text(self, text: str) -> str:
        """
        Run the repair stages on ``text`` and return the repaired JSON text
        without parsing it.
        """
        return restore_commas(self._repair(text).buffer)

    def check_validity_and_format(self, json_input: Any) -> JSONContainer:
        """
        Return ``json_input`` as a JSON object, repairing it if needed.

        Args:
            json_input: JSON text (str, bytes or a readable stream), or an
                already-parsed dict or list.

        Raises:
            NullInputError: ``json_input`` is None.
            UnrecoverableCorruptionError: the text has too little structure
                left to anchor a repair to.
            MissingFieldSeparatorsError: fields could not be separated.
            PostRepairSyntaxError: the repaired text is still not valid JSON.
        """
        self._valid_json = None
        value, _ = self._run(json_input)
        self._valid_json = value
        logger.info(f'Valid json: {truncate_for_log(value)}')
        return value

    def try_format(self, json_input: Any) -> RepairResult:
        """Like :meth:`check_validity_and_format`, but returns failures as a result."""
        self._valid_json = None
        try:
            value, outcome = self._run(json_input)
        except JSONRepairError as e:
            return RepairResult.from_error(e)

        self._valid_json = value
        if outcome is None:
            return RepairResult(data=value, was_valid=True)
        return RepairResult(
            data=value,
            repaired_text=restore_commas(outcome.buffer),
            merges=outcome.merges,
        )

    def _run(
        self, json_input: Any
    ) -> Tuple[JSONContainer, Optional[DisambiguationResult]]:
        classified = classify(json_input)
        if classified.is_valid:
            return classified.value, None

        with logger.log_operation('repair json'):
            try:
                outcome = self._repair(classified.text)
                value = assemble(outcome.buffer, original=json_input)
            except JSONRepairError as e:
                if e.original is None:
                    e.original = json_input
                logger.warning_highlight(
                    f'Repair failed ({e.kind.value}): {e.message}'
                )
                raise

        logger.success(f'Repaired json after {outcome.merges} merge(s)')
        return value, outcome

    def _repair(self, text: str) -> DisambiguationResult:
        buffer = quote_fields(
            text,
            strip_quotes=self.strip_single_quotes,
            preserve_literals=self.preserve_literals,
        )
        return self.disambiguator.run(buffer)


def format_json(json_input: Any, **options: Any) -> JSONContainer:
    """
    Return ``json_input`` as a JSON object, repairing it if needed.

    Keyword options are passed to :class:`JSONFormatter`.
    """
    return JSONFormatter(**options).check_validity_and_format(json_input)


def repair_json_text(text: str, **options: Any) -> str:
    """Return the repaired JSON text for ``text`` without parsing it."""
    return JSONFormatter(**options).repair_text(text)
