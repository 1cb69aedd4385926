"""
Reactive Wrapper Factory
========================

``wrap(target, on_change)`` returns a surrogate that reads straight through to
``target`` and intercepts every write. A write whose value differs from the
stored one (see ``reactify.equality.strict_equals``) is committed to the target
first and then reported to ``on_change`` as a single formatted line:

```python
from reactify import wrap

target = {"형규": "솔로"}
surrogate = wrap(target, print)

surrogate.형규 = "솔로"   # unchanged, nothing printed
surrogate.형규 = "커플"   # prints: 형규가 [솔로] >> [커플] 로 변경되었습니다
target["형규"]            # "커플"
```

Two surrogate kinds exist:

- ``ReactiveDict`` for ``MutableMapping`` targets. Properties are keys and can
  be reached with attribute or item syntax; the ``MutableMapping`` helpers
  (``update``, ``setdefault``, ...) write through the same interception.
- ``ReactiveProxy`` for every other object. Properties are attributes.

Reads are never intercepted and always come from the target, even for names
the surrogate itself defines (a key called ``items`` shadows ``Mapping.items``
on attribute reads). Deletions pass through without a notification.
Errors raised by ``on_change`` propagate to the writer after the new value has
been committed. Nested values are not wrapped.
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Iterator

from .change import CHANGE_MESSAGE_TEMPLATE, MISSING, Change
from .equality import strict_equals

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str], Any]

_SLOTS = ("_proxy_target", "_proxy_callback", "_proxy_template")


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _target_of(surrogate: "ReactiveProxy") -> Any:
    return object.__getattribute__(surrogate, "_proxy_target")


# ============================================================================
# WRITE TRAP
# ============================================================================
# Kept outside the surrogate classes so no helper name can shadow a property
# of the target.


def _read_attribute(target: Any, name: str) -> Any:
    return getattr(target, name, MISSING)


def _store_attribute(target: Any, name: str, value: Any) -> None:
    setattr(target, name, value)


def _read_key(target: Any, name: str) -> Any:
    # Membership first, so a defaultdict target is not populated by reads
    if name in target:
        return target[name]
    return MISSING


def _store_key(target: Any, name: str, value: Any) -> None:
    target[name] = value


def _assign(surrogate: "ReactiveProxy", name: str, value: Any, read, store) -> None:
    """Compare, commit, then notify."""
    target = _target_of(surrogate)
    previous = read(target, name)
    if strict_equals(previous, value):
        logger.debug("Unchanged write to %r ignored", name)
        return

    store(target, name, value)
    change = Change(name, previous, value)
    logger.debug("Committed %r", change)

    callback = object.__getattribute__(surrogate, "_proxy_callback")
    template = object.__getattribute__(surrogate, "_proxy_template")
    callback(change.describe(template))


# ============================================================================
# SURROGATES
# ============================================================================


class ReactiveProxy:
    """
    Attribute-level surrogate over an arbitrary object.

    Reading ``proxy.x`` returns ``target.x``. Assigning ``proxy.x = v`` stores
    ``v`` on the target and notifies only when ``v`` differs from the stored
    value.
    """

    __slots__ = _SLOTS

    def __init__(
        self,
        target: Any,
        on_change: ChangeCallback,
        template: str = CHANGE_MESSAGE_TEMPLATE,
    ):
        # __setattr__ is the write trap, so internal state bypasses it
        object.__setattr__(self, "_proxy_target", target)
        object.__setattr__(self, "_proxy_callback", on_change)
        object.__setattr__(self, "_proxy_template", template)

    def __getattribute__(self, name: str) -> Any:
        if _is_dunder(name):
            return object.__getattribute__(self, name)
        return getattr(_target_of(self), name)

    def __setattr__(self, name: str, value: Any) -> None:
        _assign(self, name, value, _read_attribute, _store_attribute)

    def __delattr__(self, name: str) -> None:
        delattr(_target_of(self), name)

    def __dir__(self):
        return dir(_target_of(self))

    def __repr__(self):
        return f"{type(self).__name__}({_target_of(self)!r})"


class ReactiveDict(ReactiveProxy, MutableMapping):
    """
    Key-level surrogate over a mutable mapping.

    Attribute reads look up the target's keys first and fall back to the
    mapping methods (``get``, ``update``, ...) only for names that are not keys.
    """

    __slots__ = ()

    def __getattribute__(self, name: str) -> Any:
        if _is_dunder(name):
            return object.__getattribute__(self, name)

        target = _target_of(self)
        if name in target:
            return target[name]
        if name in _SLOTS:
            raise AttributeError(name)
        return object.__getattribute__(self, name)

    def __setattr__(self, name: str, value: Any) -> None:
        _assign(self, name, value, _read_key, _store_key)

    def __delattr__(self, name: str) -> None:
        try:
            del _target_of(self)[name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self):
        target = _target_of(self)
        return sorted(
            set(object.__dir__(self)).union(k for k in target if isinstance(k, str))
        )

    # Mapping protocol

    def __getitem__(self, key: str) -> Any:
        return _target_of(self)[key]

    def __setitem__(self, key: str, value: Any) -> None:
        _assign(self, key, value, _read_key, _store_key)

    def __delitem__(self, key: str) -> None:
        del _target_of(self)[key]

    def __iter__(self) -> Iterator[str]:
        return iter(_target_of(self))

    def __len__(self) -> int:
        return len(_target_of(self))

    def __contains__(self, key: object) -> bool:
        return key in _target_of(self)

    def __eq__(self, other: object) -> bool:
        # Mapping.__eq__ goes through self.items, which a key may shadow
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(_target_of(self).items()) == dict(other.items())

    def clear(self) -> None:
        # MutableMapping.clear goes through self.popitem, which a key may shadow
        _target_of(self).clear()


# ============================================================================
# FACTORY
# ============================================================================


def wrap(
    target: Any,
    on_change: ChangeCallback,
    *,
    template: str = CHANGE_MESSAGE_TEMPLATE,
) -> ReactiveProxy:
    """
    Wrap ``target`` so that value-changing writes are reported to ``on_change``.

    Args:
        target: Mapping or object to observe. It is never copied.
        on_change: Called synchronously with one formatted message per change.
        template: ``str.format`` template with ``name``, ``previous`` and
            ``current`` fields.

    Returns:
        A ``ReactiveDict`` for mutable mappings, a ``ReactiveProxy`` otherwise.

    Raises:
        TypeError: If ``on_change`` is not callable.
    """
    if not callable(on_change):
        raise TypeError(
            f"on_change must be callable, got {type(on_change).__name__}"
        )
    if isinstance(target, MutableMapping):
        return ReactiveDict(target, on_change, template)
    return ReactiveProxy(target, on_change, template)


def unwrap(surrogate: ReactiveProxy) -> Any:
    """Return the object a surrogate reads from and writes to."""
    if not isinstance(surrogate, ReactiveProxy):
        raise TypeError(f"{type(surrogate).__name__} is not a reactive surrogate")
    return _target_of(surrogate)


def is_reactive(obj: Any) -> bool:
    """True if ``obj`` was produced by ``wrap``."""
    return isinstance(obj, ReactiveProxy)
