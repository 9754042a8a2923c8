# -*- coding: utf-8 -*-
"""
Query helpers exposed to templates.

All helpers operate on introspection data (plain mappings and lists), never
mutate their input and are total: missing or empty collections yield
``None``, ``[]`` or ``False`` instead of raising.
"""

from typing import Any, Iterable, List, Mapping, Optional

INTROSPECTION_PREFIX = "__"

_ROOT_TYPE_KEYS = ("queryType", "mutationType", "subscriptionType")


def strict_equals(lhs: Any, rhs: Any) -> bool:
    """ Equality without cross type coercion (``True != 1``, ``1 != 1.0``). """
    return type(lhs) is type(rhs) and lhs == rhs


def find_type(
    collection: Optional[Iterable[Mapping[str, Any]]], name: str
) -> Optional[Mapping[str, Any]]:
    """
    Returns:
        First element of ``collection`` named ``name`` if any.
    """
    for item in collection or ():
        if strict_equals(item.get("name"), name):
            return item
    return None


def root_type_names(root: Mapping[str, Any]) -> List[str]:
    """
    Returns:
        Names of the query, mutation and subscription types defined on the
        schema root, in that order.
    """
    names = []
    for key in _ROOT_TYPE_KEYS:
        ref = root.get(key)
        if ref is not None and ref.get("name") is not None:
            names.append(ref["name"])
    return names


def find_objects(root: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    """ Find all user defined object types of a schema.

    Introspection types (``__*``) and the root operation types are excluded
    as they are usually documented separately.

    Args:
        root: Introspection schema root (content of ``__schema``)

    Returns:
        Matching types in schema order.
    """
    excluded = set(root_type_names(root))
    return [
        type_
        for type_ in root.get("types") or ()
        if type_.get("kind") == "OBJECT"
        and not (type_.get("name") or "").startswith(INTROSPECTION_PREFIX)
        and type_.get("name") not in excluded
    ]


def has_objects(root: Mapping[str, Any]) -> bool:
    return len(find_objects(root)) > 0


def filter_by(
    collection: Optional[Iterable[Mapping[str, Any]]], field: str, value: Any
) -> List[Mapping[str, Any]]:
    """
    Returns:
        Elements of ``collection`` for which ``field`` equals ``value``.
    """
    return [
        item
        for item in collection or ()
        if strict_equals(item.get(field), value)
    ]


def has_type(
    collection: Optional[Iterable[Mapping[str, Any]]], kind: str
) -> bool:
    return any(
        strict_equals(item.get("kind"), kind) for item in collection or ()
    )


def is_introspection_type(type_: Optional[Mapping[str, Any]]) -> bool:
    return type_ is not None and (type_.get("name") or "").startswith(
        INTROSPECTION_PREFIX
    )
