"""
Descriptor registry for page object classes.

Descriptors are built the first time a class is looked up and cached for
the lifetime of the process. Only attributes declared with ``selector`` are
examined. The declared shape must be one of:

- an element handle                  -> SINGLE handle
- a list of element handles          -> MANY handles
- an ElementObject subclass          -> SINGLE element object
- a list of an ElementObject subclass -> MANY element objects

``Optional[...]`` and ``Awaitable[...]`` around a shape are unwrapped and
``list``, ``List`` and ``Sequence`` all denote MANY. Any other shape leaves
the property without a descriptor, which makes it read as None, unless the
``strict_shapes`` option is set.
"""

from __future__ import annotations

import collections.abc
import inspect
import logging
import sys
import types
from typing import Any, Optional, Union, get_args, get_origin, get_type_hints

from kuromi_pageobjects.config import get_options
from kuromi_pageobjects.exceptions import UnsupportedShapeError
from kuromi_pageobjects.interfaces import ElementHandle
from kuromi_pageobjects.models import Cardinality, SelectorDescriptor
from kuromi_pageobjects.objects import ElementObject

logger = logging.getLogger(__name__)

Descriptors = tuple[tuple[str, SelectorDescriptor], ...]

_registry: dict[type, Descriptors] = {}
_by_name: dict[type, dict[str, SelectorDescriptor]] = {}

_MISSING = object()
_WRAPPERS = (collections.abc.Awaitable, collections.abc.Coroutine)
_SEQUENCES = (list, collections.abc.Sequence)


def _is_target(hint: Any) -> bool:
    if get_origin(hint) is not None or not isinstance(hint, type):
        return False
    return issubclass(hint, (ElementHandle, ElementObject))


def _unwrap(hint: Any) -> Any:
    """Strip Awaitable/Coroutine and Optional wrappers from ``hint``."""
    origin = get_origin(hint)

    if origin in _WRAPPERS:
        args = get_args(hint)
        return _unwrap(args[-1]) if args else None

    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
        return None

    return hint


def shape_of(hint: Any) -> Optional[tuple[type, Cardinality]]:
    """Classify a declared result shape.

    Returns:
        ``(target_type, cardinality)`` for a supported shape, None otherwise.
    """
    hint = _unwrap(hint)

    if get_origin(hint) in _SEQUENCES:
        args = get_args(hint)
        if len(args) == 1 and _is_target(args[0]):
            return args[0], Cardinality.MANY
        return None

    if _is_target(hint):
        return hint, Cardinality.SINGLE

    return None


def _class_annotation(owner: type, name: str) -> Any:
    """Return the raw annotation of ``name`` declared on ``owner`` itself."""
    try:
        annotations = inspect.get_annotations(owner)
    except NameError:
        # Deferred annotations referring to names that only exist for type checkers
        import annotationlib

        annotations = annotationlib.get_annotations(
            owner, format=annotationlib.Format.FORWARDREF
        )
    return annotations.get(name, _MISSING)


def _declared_shape(owner: type, name: str, prop: Any) -> Any:
    """Evaluate the annotation declaring the shape of ``prop``.

    Only that one annotation is evaluated, against the owner's module and
    the names visible where the owner class was defined.
    """
    localns = dict(prop.scope or {})
    localns.update(vars(owner))
    localns.setdefault(owner.__name__, owner)

    if prop.fget is not None:
        hints = get_type_hints(prop.fget, localns=localns)
        return hints.get("return", _MISSING)

    annotation = _class_annotation(owner, name)
    if annotation is _MISSING:
        return _MISSING

    module = sys.modules.get(owner.__module__)
    globalns = vars(module) if module is not None else {}
    holder = types.SimpleNamespace(__annotations__={name: annotation})
    return get_type_hints(holder, globalns=globalns, localns=localns)[name]


def _collect(cls: type) -> dict[str, Any]:
    """Map attribute names to the selector properties visible on ``cls``.

    Attributes redefined further down the MRO shadow inherited selectors.
    """
    from kuromi_pageobjects.selectors import SelectorProperty

    found: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            found[name] = attr if isinstance(attr, SelectorProperty) else None
    return {name: prop for name, prop in found.items() if prop is not None}


def _build(cls: type) -> Descriptors:
    strict = get_options().strict_shapes
    entries = []

    for name, prop in _collect(cls).items():
        owner = prop.owner or cls
        try:
            hint = _declared_shape(owner, name, prop)
        except (NameError, TypeError) as e:
            if strict:
                raise UnsupportedShapeError(owner, name, f"<unresolved: {e}>") from e
            logger.warning(f"{owner.__qualname__}.{name}: cannot resolve annotation ({e}), property disabled")
            continue

        shape = None if hint is _MISSING else shape_of(hint)
        if shape is None:
            annotation = None if hint is _MISSING else hint
            if strict:
                raise UnsupportedShapeError(owner, name, annotation)
            logger.warning(
                f"{owner.__qualname__}.{name}: unsupported selector shape {annotation!r}, property disabled"
            )
            continue

        target_type, cardinality = shape
        entries.append((name, SelectorDescriptor(prop.selector, target_type, cardinality)))

    logger.debug(f"Registered {len(entries)} selector descriptor(s) for {cls.__qualname__}")
    return tuple(entries)


def get_descriptors(cls: type) -> Descriptors:
    """Return the ``(name, descriptor)`` pairs of ``cls``.

    The first call builds the descriptors; later calls return the same
    tuple object.

    Raises:
        UnsupportedShapeError: In strict mode, for an unsupported shape.
    """
    cached = _registry.get(cls)
    if cached is not None:
        return cached

    descriptors = _registry.setdefault(cls, _build(cls))
    _by_name.setdefault(cls, dict(descriptors))
    return descriptors


def get_descriptor(cls: type, name: Optional[str]) -> Optional[SelectorDescriptor]:
    """Return the descriptor of attribute ``name`` on ``cls``, if any."""
    lookup = _by_name.get(cls)
    if lookup is None:
        get_descriptors(cls)
        lookup = _by_name[cls]
    return lookup.get(name) if name is not None else None


def register(*classes: type) -> None:
    """Build descriptors for ``classes`` now instead of on first access.

    With ``strict_shapes`` enabled this surfaces unsupported shapes at
    startup.
    """
    for cls in classes:
        get_descriptors(cls)


def clear_registry() -> None:
    """Forget all cached descriptors."""
    _registry.clear()
    _by_name.clear()
