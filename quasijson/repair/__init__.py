from quasijson.repair.assembly import assemble
from quasijson.repair.classifier import classify
from quasijson.repair.delimiters import Delimiter, FieldToken
from quasijson.repair.disambiguation import (
    CommaDisambiguator,
    disambiguate_commas,
    merge_fragment,
)
from quasijson.repair.formatter import JSONFormatter, format_json, repair_json_text
from quasijson.repair.quoting import (
    normalize_empty_fields,
    quote_barewords,
    quote_fields,
    strip_single_quotes,
)
from quasijson.repair.schema import (
    ClassifiedInput,
    DisambiguationResult,
    RepairResult,
    Validity,
)

__all__ = [
    'assemble',
    'classify',
    'ClassifiedInput',
    'CommaDisambiguator',
    'Delimiter',
    'disambiguate_commas',
    'DisambiguationResult',
    'FieldToken',
    'format_json',
    'JSONFormatter',
    'merge_fragment',
    'normalize_empty_fields',
    'quote_barewords',
    'quote_fields',
    'repair_json_text',
    'RepairResult',
    'strip_single_quotes',
    'Validity',
]
