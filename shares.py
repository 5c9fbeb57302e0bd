import json
import logging
from dataclasses import dataclass

from encoding import base_to_int
from utils import MissingShareError, ShareFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    x: int
    """Share identifier, used directly as the x-coordinate."""
    y: int
    """Decoded share value."""

    def __iter__(self):
        return iter((self.x, self.y))


def _to_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise ShareFormatError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        return int(value.strip())
    raise ShareFormatError(f"{what} must be an integer, got {value!r}")


def _threshold(data: dict) -> int:
    keys = data.get("keys")
    if not isinstance(keys, dict) or "k" not in keys:
        raise ShareFormatError("Missing 'keys.k' threshold")
    k = _to_int(keys["k"], "keys.k")
    if k < 1:
        raise ShareFormatError(f"Threshold k must be positive, got {k}")
    return k


def _is_identifier(key) -> bool:
    # canonical positive decimal only, so "01" and "1" never collide
    return (isinstance(key, str) and key.isascii() and key.isdigit()
            and key == str(int(key)) and int(key) >= 1)


def _records(data: dict) -> dict[int, dict]:
    records = {}
    for key, record in data.items():
        if not _is_identifier(key):
            continue
        records[int(key)] = record
    return records


def decode_share(x: int, record) -> Share:
    if not isinstance(record, dict):
        raise ShareFormatError(f"Share {x} must be an object, got {record!r}")
    if "base" not in record or "value" not in record:
        raise ShareFormatError(f"Share {x} needs both 'base' and 'value'")
    base = _to_int(record["base"], f"share {x} base")
    value = record["value"]
    if not isinstance(value, str):
        raise ShareFormatError(f"Share {x} value must be a string, got {value!r}")
    y = base_to_int(value, base)
    logger.debug("share %d: base %d value %s -> %d", x, base, value, y)
    return Share(x, y)


def shares_from_input(data: dict, select=None) -> list[Share]:
    """Decode the share records of a share document.

    Without ``select`` the identifiers 1..k are used in order. With
    ``select`` exactly those identifiers are used, in the order given.
    """
    if not isinstance(data, dict):
        raise ShareFormatError("Share document must be a JSON object")
    k = _threshold(data)
    records = _records(data)
    if select is None:
        ids = range(1, k + 1)
    else:
        ids = list(select)
        if len(set(ids)) != len(ids):
            raise ShareFormatError(f"Duplicate share identifiers in selection {ids}")
        if len(ids) < k:
            raise MissingShareError(f"Need {k} shares, {len(ids)} selected")
        ids = ids[:k]
    logger.debug("threshold k=%d, %d records, using %s", k, len(records), ids)

    shares = []
    for i in ids:
        if i not in records:
            raise MissingShareError(f"Missing share number {i} in input")
        shares.append(decode_share(i, records[i]))
    return shares


def load_shares(path, select=None) -> tuple[int, list[Share]]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ShareFormatError(f"{path} is not valid JSON: {e}") from e
    shares = shares_from_input(data, select)
    return _threshold(data), shares
