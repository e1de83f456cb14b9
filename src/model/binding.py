"""Accessor pairs that connect a ValueModel to a property of another object.

A bound ValueModel never looks anything up by name at runtime: it holds a
Binding (reader + optional writer) and an optional AutomaticBinding, both
plain closures. Name-based discovery happens once, here, when the model is
built, and fails immediately with BindingError if the property does not exist.

Name convention for a property ``name`` on ``source``:

    reader:     source.get_<name>()      or the attribute source.<name>
    writer:     source.set_<name>(value) or assignment to source.<name>
    automatic:  source.is_<name>_automatic() + source.set_<name>_automatic(flag)
                or the attribute source.<name>_automatic

A method-based reader never falls back to attribute assignment for writing;
a property without a setter gives a read-only binding.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable

from model.errors import BindingError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Binding:
    """Reader and optional writer for a numeric property (raw units)."""

    read: Callable[[], float]
    write: Callable[[float], None] | None = None

    @property
    def writable(self) -> bool:
        return self.write is not None


@dataclass(frozen=True)
class AutomaticBinding:
    """Reader and writer for the boolean "automatic" flag of a property."""

    read: Callable[[], bool]
    write: Callable[[bool], None]


def _method(source: Any, method_name: str) -> Callable | None:
    method = getattr(source, method_name, None)
    return method if callable(method) else None


def _has_attribute(source: Any, name: str) -> bool:
    sentinel = object()
    return inspect.getattr_static(source, name, sentinel) is not sentinel


def _is_writable_attribute(source: Any, name: str) -> bool:
    """Check whether ``source.<name> = value`` would store a value."""
    class_attr = inspect.getattr_static(type(source), name, None)
    if isinstance(class_attr, property):
        return class_attr.fset is not None
    if class_attr is not None and hasattr(type(class_attr), "__set__"):
        return True
    if class_attr is not None and not callable(class_attr) and not hasattr(type(class_attr), "__get__"):
        # Plain class-level default, shadowed per instance on assignment
        return True
    instance_dict = getattr(source, "__dict__", {})
    return name in instance_dict


def _attribute_reader(source: Any, name: str) -> Callable[[], Any]:
    return lambda: getattr(source, name)


def _attribute_writer(source: Any, name: str) -> Callable[[Any], None]:
    return lambda value: setattr(source, name, value)


def check_change_source(source: Any) -> None:
    """Fail fast if ``source`` cannot notify a model about property changes."""
    for method_name in ("add_change_listener", "remove_change_listener"):
        if _method(source, method_name) is None:
            raise BindingError(
                f"{type(source).__name__} has no {method_name}() and cannot be observed"
            )


def resolve_binding(source: Any, name: str) -> Binding:
    """Build the value Binding for property ``name`` of ``source``.

    Raises:
        BindingError: if no reader exists for the property
    """
    getter = _method(source, f"get_{name}")
    if getter is not None:
        return Binding(read=getter, write=_method(source, f"set_{name}"))

    if not _has_attribute(source, name):
        raise BindingError(
            f"get method for value '{name}' not present in class {type(source).__name__}"
        )

    writer = _attribute_writer(source, name) if _is_writable_attribute(source, name) else None
    return Binding(read=_attribute_reader(source, name), write=writer)


def resolve_automatic_binding(source: Any, name: str) -> AutomaticBinding | None:
    """Build the AutomaticBinding for ``name``, or None when it is not supported."""
    getter = _method(source, f"is_{name}_automatic")
    setter = _method(source, f"set_{name}_automatic")
    if getter is not None and setter is not None:
        return AutomaticBinding(read=getter, write=setter)
    if getter is not None or setter is not None:
        log.debug(f"{type(source).__name__}.{name}: incomplete automatic accessors, ignoring")
        return None

    attr_name = f"{name}_automatic"
    if _has_attribute(source, attr_name) and _is_writable_attribute(source, attr_name):
        return AutomaticBinding(
            read=_attribute_reader(source, attr_name),
            write=_attribute_writer(source, attr_name),
        )
    return None
