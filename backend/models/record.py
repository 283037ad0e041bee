"""Default-value policy shared by all record parsers.

Ingestion records are JSON-like trees. Every field is optional and a missing
or malformed value never aborts parsing: it resolves to an empty string, zero,
an empty list or an empty record instead.
"""
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

Record = Mapping[str, Any]

EMPTY_RECORD: Record = MappingProxyType({})

# Integer fields are 32-bit signed in the ingestion format
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def as_record(value: Any) -> Record:
    """Return value if it is a mapping, otherwise an empty record."""
    if isinstance(value, Mapping):
        return value
    return EMPTY_RECORD


def get_str(record: Record, key: str, default: str = "") -> str:
    """Read a string field, falling back to default for missing or non-string values."""
    value = as_record(record).get(key)
    if isinstance(value, str):
        return value
    return default


def get_int(
    record: Record,
    key: str,
    default: int = 0,
    minimum: Optional[int] = None,
    maximum: int = INT_MAX
) -> int:
    """
    Read an integral number field.

    Floats are accepted only if they hold an integral value (3.0 but not 3.5).
    Booleans and numeric strings are rejected. Values outside the 32-bit
    range, below minimum or above maximum resolve to default.

    Args:
        record: Source record
        key: Field name
        default: Value used for missing or malformed fields
        minimum: Optional lower bound (inclusive)
        maximum: Upper bound (inclusive)

    Returns:
        The parsed integer or default
    """
    value = as_record(record).get(key)

    if isinstance(value, bool):
        return default

    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    else:
        return default

    if number < INT_MIN or number > maximum:
        return default

    if minimum is not None and number < minimum:
        return default

    return number


def get_list(record: Record, key: str) -> List[Any]:
    """Read an array field; anything other than a list yields an empty list."""
    value = as_record(record).get(key)
    if isinstance(value, list):
        return value
    return []


def get_records(record: Record, key: str) -> List[Record]:
    """Read an array of records, turning non-object elements into empty records."""
    return [as_record(item) for item in get_list(record, key)]
