"""Field accessors – cached get/set closures for one masked field.

Resolution of *how* to reach a field (property functions, slot, plain
attribute) happens once per :class:`FieldDescriptor`; the closures handed
back then go straight to the underlying function or ``operator.attrgetter``.
"""
from __future__ import annotations

import inspect
import operator
from typing import Any, Callable, NamedTuple

from mp_masking.application.masking.descriptors import FieldDescriptor
from mp_masking.observability.logging.processors import get_logger

__all__ = ["AccessorCache", "FieldAccessor", "compile_accessor"]

_log = get_logger(__name__)

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


class FieldAccessor(NamedTuple):
    get: Getter
    set: Setter


def _absent(obj: Any) -> None:  # noqa: ARG001
    return None


def _ignore(obj: Any, value: Any) -> None:  # noqa: ARG001
    return None


NOOP_ACCESSOR = FieldAccessor(_absent, _ignore)


def _safe_getter(read: Getter) -> Getter:
    def get(obj: Any) -> Any:
        try:
            return read(obj)
        except AttributeError:
            return None

    return get


def compile_accessor(field: FieldDescriptor) -> FieldAccessor:
    """Build the accessor for *field*; never raises.

    * property – bind ``fget`` / ``fset`` directly, skipping descriptor lookup.
    * anything else – ``operator.attrgetter`` plus ``setattr``.

    A missing getter reads as ``None``; a missing setter is a no-op.
    """
    name = field.name
    try:
        attr = inspect.getattr_static(field.declaring_type, name, None)
        if isinstance(attr, property):
            getter = _safe_getter(attr.fget) if attr.fget is not None else _absent
            setter = attr.fset if attr.fset is not None else _ignore
            return FieldAccessor(getter, setter)

        def set_attr(obj: Any, value: Any) -> None:
            setattr(obj, name, value)

        return FieldAccessor(_safe_getter(operator.attrgetter(name)), set_attr)
    except Exception as exc:  # noqa: BLE001
        _log.warning(
            "accessor_compile_failed",
            type=getattr(field.declaring_type, "__qualname__", repr(field.declaring_type)),
            field=name,
            error=repr(exc),
        )
        return NOOP_ACCESSOR


class AccessorCache:
    """Memoises :func:`compile_accessor` per :class:`FieldDescriptor`.

    Same concurrency contract as the descriptor cache: concurrent first
    access may compile twice, the first stored accessor is kept.
    """

    def __init__(self) -> None:
        self._accessors: dict[FieldDescriptor, FieldAccessor] = {}

    def __len__(self) -> int:
        return len(self._accessors)

    def get(self, field: FieldDescriptor) -> FieldAccessor:
        accessor = self._accessors.get(field)
        if accessor is None:
            accessor = self._accessors.setdefault(field, compile_accessor(field))
        return accessor

    def clear(self) -> None:
        self._accessors.clear()
