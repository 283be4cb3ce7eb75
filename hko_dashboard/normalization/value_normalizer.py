"""Value normalizer.

The HKO API is not schema-stable: the same logical field can arrive as a
bare number, a ``{"value": .., "unit": ..}`` wrapper, a localized
``{"place": .., "value": ..}`` record, or a list of any of those.
``get_value`` is the single choke point that reduces such a fragment to a
scalar every rendering call site can print directly.

Resolution order
----------------
1. ``None`` → placeholder.
2. Sequence → first element, resolved recursively (empty → placeholder).
3. Mapping → the requested attribute, else the first of
   ``value``/``text``/``name``/``description``, else the first attribute
   in insertion order.  The resolved attribute is returned as-is.
4. Primitive (``str``, ``int``, ``float``, ``bool``) → unchanged.
5. Anything else → ``str()`` of it, unless that only yields a generic
   object marker, in which case the placeholder.

Attributes whose value is ``None`` (JSON ``null``) count as absent.
``get_value`` never raises.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from hko_dashboard.core.constants import FALLBACK_FIELDS, MAX_NORMALIZE_DEPTH, PLACEHOLDER
from hko_dashboard.normalization.recorder import NULL_RECORDER, Recorder, emit

RawField = None | bool | int | float | str | Sequence[Any] | Mapping[str, Any]

_PRIMITIVES = (str, int, float, bool)


def get_value(
    field: RawField,
    name: str = "value",
    *,
    recorder: Recorder | None = None,
) -> Any:
    """Return a display-ready scalar for *field*, or ``"--"``.

    Parameters
    ----------
    field:
        Raw JSON fragment taken from an API response.
    name:
        Attribute expected on a wrapper object.  Defaults to ``"value"``.
    recorder:
        Receives one event per fallback branch taken.  Defaults to a
        no-op recorder.

    Returns
    -------
    Any
        A primitive or the placeholder.  The one exception is a wrapper
        whose resolved attribute is itself non-scalar: that attribute is
        returned untouched.
    """
    return _resolve(field, name, recorder or NULL_RECORDER, 0)


def _resolve(field: Any, name: str, recorder: Recorder, depth: int) -> Any:
    if field is None:
        return PLACEHOLDER

    if depth >= MAX_NORMALIZE_DEPTH:
        emit(recorder, "depth_exceeded", {"requested": name, "used": None, "raw": field})
        return PLACEHOLDER

    if _is_sequence(field):
        emit(recorder, "sequence", {"requested": name, "used": 0, "raw": field})
        if len(field) == 0:
            return PLACEHOLDER
        return _resolve(field[0], name, recorder, depth + 1)

    if isinstance(field, Mapping):
        if field.get(name) is not None:
            return field[name]

        for candidate in FALLBACK_FIELDS:
            if field.get(candidate) is not None:
                emit(recorder, "field_fallback", {"requested": name, "used": candidate, "raw": field})
                return field[candidate]

        for key, value in field.items():
            if value is not None:
                emit(recorder, "first_attribute", {"requested": name, "used": key, "raw": field})
                return value

    if isinstance(field, _PRIMITIVES):
        return field

    emit(recorder, "unexpected_type", {"requested": name, "used": None, "raw": field})
    return _stringify(field)


def _is_sequence(field: Any) -> bool:
    return isinstance(field, Sequence) and not isinstance(field, (str, bytes, bytearray))


def _stringify(field: Any) -> str:
    """``str(field)``, or the placeholder when no real text comes out."""
    if isinstance(field, Mapping):
        return PLACEHOLDER

    cls = type(field)
    if cls.__str__ is object.__str__ and cls.__repr__ is object.__repr__:
        return PLACEHOLDER

    try:
        text = str(field)
    except Exception:  # noqa: BLE001
        return PLACEHOLDER

    return text if text else PLACEHOLDER
