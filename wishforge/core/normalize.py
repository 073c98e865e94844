# =============================================================================
# core/normalize.py  —  Defensive argument coercion
# =============================================================================
#
# Tool arguments arrive from an untrusted client as a JSON object.  Any key
# may be missing, null, the wrong type, or unexpected.  These helpers turn
# that bag into plain, bounded Python values and never raise — except
# require(), whose whole job is to raise.
#
# CLAMPING RULE (shared by every numeric field):
#     clamped = max(lo, min(hi, number(value) if numeric else default))
#
#   - "7", 7, 7.9  → 7          (strings parsed, floats truncated)
#   - None, "abc", NaN, True    → default
#   - 100 with [3, 7]           → 7
#   Applying it twice gives the same answer as applying it once.
# =============================================================================

import math
from typing import Any, Mapping, Optional, Union

from wishforge.core.errors import ToolValidationError


def _as_number(value: Any) -> Optional[Union[int, float]]:
    """Best-effort numeric view of a JSON value, or None."""
    # bool is an int subclass; a JSON true is not a count.
    if value is None or isinstance(value, bool):
        return None
    # ints of any size compare fine; float() would overflow past ~1e308
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def clamp_int(value: Any, default: int, lo: int, hi: int) -> int:
    """Coerce value to an int inside [lo, hi], using default when unusable."""
    number = _as_number(value)
    effective = default if number is None else int(number)
    return max(lo, min(hi, effective))


def text_arg(arguments: Optional[Mapping[str, Any]], key: str, default: str = "") -> str:
    """String view of arguments[key]; missing, null or empty → default."""
    if not arguments:
        return default
    value = arguments.get(key)
    if value is None or isinstance(value, (dict, list)):
        return default
    text = str(value)
    return text if text.strip() else default


def require(value: str, field_name: str) -> str:
    """Trim value and raise ToolValidationError when nothing is left."""
    value = value.strip()
    if not value:
        raise ToolValidationError(f"{field_name} is required")
    return value
