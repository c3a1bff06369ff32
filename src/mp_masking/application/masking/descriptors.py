"""Type descriptors – which fields of a type are masked, and how.

A field takes part in masking when it is string-typed, readable and
writable, and carries a :class:`MaskingRule` either in its annotation::

    @dataclass
    class Customer:
        name: Annotated[str, NameMasking()] = ""
        email: Annotated[str | None, EmailMasking(visible_chars=3)] = None
        address: str = ""

or in the explicit policy table::

    cache.register(Customer, "address", NameMasking(visible_chars=4))

Descriptors are built on first request and kept until :meth:`clear`.
"""
from __future__ import annotations

import dataclasses
import inspect
import sys
import threading
import types
import typing
from typing import Annotated, Any, Iterator, Union

from mp_masking.application.masking.rules import MaskingRule
from mp_masking.config.validation import MaskingConfigError
from mp_masking.kernel.errors import InvalidArgumentError
from mp_masking.observability.logging.processors import get_logger

__all__ = ["DescriptorCache", "FieldDescriptor", "TypeDescriptor"]

_log = get_logger(__name__)

_NO_RULE = object()


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """One masked field: its name, the class declaring it and its rule."""

    name: str
    declaring_type: type
    rule: MaskingRule


@dataclasses.dataclass(frozen=True)
class TypeDescriptor:
    """Ordered, immutable list of the masked fields of *type*."""

    type: type
    fields: tuple[FieldDescriptor, ...] = ()

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __bool__(self) -> bool:
        return bool(self.fields)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)


class DescriptorCache:
    """Builds and memoises :class:`TypeDescriptor` per type.

    Lookups of built types are lock-free. Building and registration share a
    lock, so a rule is either seen by the build or refused because the
    descriptor already exists.
    """

    def __init__(self) -> None:
        self._descriptors: dict[type, TypeDescriptor] = {}
        self._policies: dict[type, dict[str, MaskingRule]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, cls: object) -> bool:
        return cls in self._descriptors

    def get(self, cls: type) -> TypeDescriptor:
        descriptor = self._descriptors.get(cls)
        if descriptor is None:
            with self._lock:
                descriptor = self._descriptors.get(cls)
                if descriptor is None:
                    descriptor = self._descriptors[cls] = self._build(cls)
        return descriptor

    def register(self, cls: type, field_name: str, rule: MaskingRule) -> None:
        """Declare *rule* for ``cls.field_name`` without touching the class.

        Raises:
            InvalidArgumentError: *rule* is not a :class:`MaskingRule`.
            MaskingConfigError: *field_name* is blank, or the descriptor of
                *cls* (or of a subclass) has already been built.
        """
        if not isinstance(rule, MaskingRule):
            raise InvalidArgumentError("rule", rule, "expected a MaskingRule")
        if not isinstance(field_name, str) or not field_name.strip():
            raise MaskingConfigError(
                f"Field name for {cls.__qualname__} must be a non-empty string",
                masked_type=cls,
                field_name=field_name,
            )
        with self._lock:
            sealed = [t.__qualname__ for t in self._descriptors if cls in t.__mro__]
            if sealed:
                raise MaskingConfigError(
                    f"Cannot register '{field_name}' on {cls.__qualname__}: "
                    f"descriptor already built for {', '.join(sorted(sealed))}",
                    masked_type=cls,
                    field_name=field_name,
                )
            self._policies.setdefault(cls, {})[field_name] = rule

    def clear(self) -> None:
        """Drop every cached descriptor. Registered policies are kept."""
        self._descriptors.clear()

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def _build(self, cls: type) -> TypeDescriptor:
        fields: list[FieldDescriptor] = []
        try:
            registered = self._registered_rules(cls)
            for name, declaring, hint in self._candidates(cls):
                rule = registered.pop(name, _NO_RULE)
                field = self._describe(cls, name, declaring, hint, rule)
                if field is not None:
                    fields.append(field)
            for name, rule in registered.items():
                # Registered names with no annotation at all: the value is
                # type-checked when it is read.
                if self._is_writable(cls, name):
                    fields.append(FieldDescriptor(name, self._declaring_type(cls, name), rule))
        except Exception as exc:  # noqa: BLE001
            _log.warning("descriptor_build_failed", type=cls.__qualname__, error=repr(exc))
            return TypeDescriptor(cls)

        _log.debug("descriptor_built", type=cls.__qualname__, fields=[f.name for f in fields])
        return TypeDescriptor(cls, tuple(fields))

    def _registered_rules(self, cls: type) -> dict[str, MaskingRule]:
        rules: dict[str, MaskingRule] = {}
        for klass in reversed(cls.__mro__):
            rules.update(self._policies.get(klass, {}))
        return rules

    def _candidates(self, cls: type) -> Iterator[tuple[str, type, Any]]:
        """Yield ``(name, declaring_type, type_hint)`` in declaration order.

        Annotations are resolved one field at a time, so a single hint that
        cannot be evaluated only drops that field.
        """
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            for name, value in _own_annotations(klass).items():
                try:
                    hints[name] = _resolve_hint(klass, name, value)
                except Exception as exc:  # noqa: BLE001
                    hints.pop(name, None)
                    _log.warning(
                        "type_hint_unresolved",
                        type=cls.__qualname__,
                        field=name,
                        error=repr(exc),
                    )

        seen: set[str] = set()
        for name, hint in hints.items():
            if typing.get_origin(hint) is typing.ClassVar:
                continue
            seen.add(name)
            yield name, self._declaring_type(cls, name), hint

        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if not isinstance(attr, property) or name in seen:
                    continue
                seen.add(name)
                try:
                    hint = typing.get_type_hints(attr.fget, include_extras=True).get("return")
                except Exception:  # noqa: BLE001
                    hint = None
                yield name, klass, hint

    def _describe(
        self,
        cls: type,
        name: str,
        declaring: type,
        hint: Any,
        registered: Any,
    ) -> FieldDescriptor | None:
        base, annotated = _split_annotated(hint)
        if len(annotated) > 1:
            _log.warning(
                "masking_rule_duplicate",
                type=cls.__qualname__,
                field=name,
                rules=[r.masking_type for r in annotated],
            )
        rule = registered if registered is not _NO_RULE else (annotated[0] if annotated else None)
        if rule is None:
            return None
        if hint is not None and not _is_str_type(base):
            _log.warning(
                "masking_rule_ignored",
                type=cls.__qualname__,
                field=name,
                rule=rule.masking_type,
                reason="field is not string-typed",
            )
            return None
        if not self._is_writable(cls, name):
            _log.warning(
                "masking_rule_ignored",
                type=cls.__qualname__,
                field=name,
                rule=rule.masking_type,
                reason="field is not writable",
            )
            return None
        return FieldDescriptor(name, declaring, rule)

    @staticmethod
    def _declaring_type(cls: type, name: str) -> type:
        for klass in cls.__mro__:
            if name in _own_annotations(klass) or name in vars(klass):
                return klass
        return cls

    @staticmethod
    def _is_writable(cls: type, name: str) -> bool:
        attr = inspect.getattr_static(cls, name, None)
        if isinstance(attr, property):
            return attr.fget is not None and attr.fset is not None
        params = getattr(cls, "__dataclass_params__", None)
        if params is not None and params.frozen:
            return False
        return True


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # Eagerly evaluated on 3.14+ without the future import; keep the
        # names that resolve and leave the rest as forward references.
        import annotationlib

        return annotationlib.get_annotations(klass, format=annotationlib.Format.FORWARDREF)
    except Exception:  # noqa: BLE001
        return {}


def _resolve_hint(klass: type, name: str, value: Any) -> Any:
    """Evaluate the single annotation *value* of ``klass.name``."""
    module = sys.modules.get(klass.__module__)
    globalns = vars(module) if module is not None else {}
    holder = type(klass.__name__, (), {"__annotations__": {name: value}, "__module__": klass.__module__})
    return typing.get_type_hints(holder, globalns, dict(vars(klass)), include_extras=True)[name]


def _split_annotated(hint: Any) -> tuple[Any, list[MaskingRule]]:
    if typing.get_origin(hint) is Annotated:
        rules = [m for m in hint.__metadata__ if isinstance(m, MaskingRule)]
        return hint.__origin__, rules
    return hint, []


def _is_str_type(hint: Any) -> bool:
    if hint is str:
        return True
    if typing.get_origin(hint) in (Union, types.UnionType):
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        return args == [str]
    return False
