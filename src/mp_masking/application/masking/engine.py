"""Redaction engine – clone an object and mask its annotated string fields."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Iterable, Iterator, TypeVar

from mp_masking.application.masking.accessors import AccessorCache
from mp_masking.application.masking.descriptors import DescriptorCache, TypeDescriptor
from mp_masking.kernel.errors import RedactionError
from mp_masking.observability.logging.processors import get_logger

if TYPE_CHECKING:
    from mp_masking.config.settings import MaskingSettings

__all__ = ["RedactionEngine"]

T = TypeVar("T")

_log = get_logger(__name__)

_PLAIN_TYPES: tuple[type, ...] = (
    str, bytes, bytearray, int, float, complex, bool, type(None),
    dict, list, tuple, set, frozenset,
)


def _slot_names(cls: type) -> Iterator[str]:
    for klass in cls.__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            yield name


class RedactionEngine:
    """Produces masked shallow copies of annotated objects.

    The original object is never mutated. Nested objects are shared between
    the original and the copy; only the top-level string fields named by the
    type's descriptor are masked.

    Parameters
    ----------
    descriptors:
        Descriptor cache (and policy table) to use. A private one is created
        when omitted.
    accessors:
        Accessor cache to use. A private one is created when omitted.
    max_workers:
        Thread count for :meth:`mask_all_parallel`; ``None`` lets
        :class:`~concurrent.futures.ThreadPoolExecutor` decide.
    fail_open:
        When ``True`` (default) an object that cannot be cloned is returned
        as-is, **unmasked**. When ``False`` a :class:`RedactionError` is
        raised instead.
    """

    def __init__(
        self,
        descriptors: DescriptorCache | None = None,
        accessors: AccessorCache | None = None,
        *,
        max_workers: int | None = None,
        fail_open: bool = True,
    ) -> None:
        self._descriptors = descriptors if descriptors is not None else DescriptorCache()
        self._accessors = accessors if accessors is not None else AccessorCache()
        self._max_workers = max_workers
        self._fail_open = fail_open

    @classmethod
    def from_settings(
        cls,
        settings: MaskingSettings,
        descriptors: DescriptorCache | None = None,
    ) -> RedactionEngine:
        return cls(
            descriptors,
            max_workers=settings.max_workers,
            fail_open=settings.fail_open,
        )

    @property
    def descriptors(self) -> DescriptorCache:
        return self._descriptors

    @property
    def accessors(self) -> AccessorCache:
        return self._accessors

    @property
    def max_workers(self) -> int | None:
        return self._max_workers

    @property
    def fail_open(self) -> bool:
        return self._fail_open

    def descriptor(self, cls: type) -> TypeDescriptor:
        return self._descriptors.get(cls)

    def is_maskable(self, obj: Any) -> bool:
        """``True`` when *obj*'s type has at least one masked field."""
        if isinstance(obj, _PLAIN_TYPES):
            return False
        return bool(self._descriptors.get(type(obj)))

    def clear(self) -> None:
        """Reset both caches; registered policies survive."""
        self._descriptors.clear()
        self._accessors.clear()

    # ------------------------------------------------------------------
    # Single object
    # ------------------------------------------------------------------

    def mask(self, obj: T) -> T:
        """Return a masked shallow copy of *obj* (``None`` passes through)."""
        if obj is None:
            return None  # type: ignore[return-value]
        if isinstance(obj, _PLAIN_TYPES):
            return obj

        cls = type(obj)
        try:
            clone = self._shallow_copy(obj)
        except Exception as exc:  # noqa: BLE001
            if not self._fail_open:
                raise RedactionError(
                    f"Cannot clone {cls.__qualname__} for masking",
                    detail={"type": cls.__qualname__},
                    cause=exc,
                ) from exc
            _log.error(
                "masking_clone_failed",
                type=cls.__qualname__,
                error=repr(exc),
                returned="original",
            )
            return obj

        for field in self._descriptors.get(cls):
            try:
                accessor = self._accessors.get(field)
                value = accessor.get(clone)
                if isinstance(value, str) and value:
                    accessor.set(clone, field.rule.mask(value))
            except Exception as exc:  # noqa: BLE001
                _log.warning(
                    "masking_field_skipped",
                    type=cls.__qualname__,
                    field=field.name,
                    rule=field.rule.masking_type,
                    error=repr(exc),
                )
        return clone

    @staticmethod
    def _shallow_copy(obj: T) -> T:
        cls = type(obj)
        clone = cls()
        state = getattr(obj, "__dict__", None)
        if state is not None:
            vars(clone).update(state)
        for name in _slot_names(cls):
            try:
                value = object.__getattribute__(obj, name)
            except AttributeError:
                continue
            object.__setattr__(clone, name, value)
        return clone

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def mask_all(self, items: Iterable[T] | None) -> Iterator[T]:
        """Lazily mask each item, in input order."""
        if items is None:
            return iter(())
        return (self.mask(item) for item in items)

    def mask_all_parallel(
        self,
        items: Iterable[T] | None,
        *,
        max_workers: int | None = None,
    ) -> list[T]:
        """Mask items on a thread pool; the result keeps input order."""
        if items is None:
            return []
        batch = list(items)
        if not batch:
            return []
        workers = max_workers or self._max_workers
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="mp-masking") as executor:
            results = list(executor.map(self.mask, batch))
        _log.debug("masked_batch", items=len(results), max_workers=workers)
        return results
