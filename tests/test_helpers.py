# -*- coding: utf-8 -*-

import pytest

from gqldoc.helpers import (
    filter_by,
    find_objects,
    find_type,
    has_objects,
    has_type,
    is_introspection_type,
    root_type_names,
)

from ._schema_utils import schema_root, type_def


def _names(types):
    return [t["name"] for t in types]


def test_find_type_returns_first_match():
    first = type_def("User")
    second = type_def("User", "INTERFACE")
    assert find_type([type_def("Query"), first, second], "User") is first


def test_find_type_returns_none_when_absent():
    assert find_type([type_def("Query")], "User") is None
    assert find_type([], "User") is None
    assert find_type(None, "User") is None


def test_find_objects(users_root):
    assert _names(find_objects(users_root)) == ["User", "Group"]


def test_find_objects_excludes_all_root_types():
    root = schema_root(
        [
            type_def("Q"),
            type_def("M"),
            type_def("S"),
            type_def("User"),
            type_def("__Schema"),
            type_def("__Type"),
            type_def("Role", "ENUM"),
        ],
        query="Q",
        mutation="M",
        subscription="S",
    )
    assert _names(find_objects(root)) == ["User"]


def test_find_objects_without_operation_types():
    root = schema_root([type_def("Query"), type_def("User")], query=None)
    assert _names(find_objects(root)) == ["Query", "User"]


def test_find_objects_preserves_schema_order():
    root = schema_root([type_def("B"), type_def("Query"), type_def("A")])
    assert _names(find_objects(root)) == ["B", "A"]


@pytest.mark.parametrize(
    "types",
    [
        [],
        [type_def("Query")],
        [type_def("Query"), type_def("__Schema")],
        [type_def("Query"), type_def("User")],
        [type_def("Query"), type_def("Node", "INTERFACE")],
    ],
)
def test_has_objects_is_consistent_with_find_objects(types):
    root = schema_root(types)
    assert has_objects(root) == (len(find_objects(root)) > 0)


def test_root_type_names(users_root):
    assert root_type_names(users_root) == ["Query", "Mutation"]


def test_filter_by(users_root):
    assert _names(filter_by(users_root["types"], "kind", "INTERFACE")) == [
        "Node"
    ]
    assert _names(filter_by(users_root["types"], "name", "Role")) == ["Role"]


def test_filter_by_uses_strict_equality():
    types = [type_def("A", description="1"), type_def("B", description=1)]
    assert _names(filter_by(types, "description", 1)) == ["B"]


@pytest.mark.parametrize(
    "stored, value",
    [(True, 1), (1, True), (False, 0), (1, 1.0), (0.0, 0), (None, False)],
)
def test_filter_by_does_not_coerce_across_types(stored, value):
    types = [type_def("A", x=stored)]
    assert filter_by(types, "x", value) == []
    assert _names(filter_by(types, "x", stored)) == ["A"]


def test_find_type_and_has_type_do_not_coerce_across_types():
    types = [type_def(1, kind=True)]
    assert find_type(types, True) is None
    assert find_type(types, 1.0) is None
    assert find_type(types, 1) is types[0]
    assert has_type(types, 1) is False
    assert has_type(types, True) is True


@pytest.mark.parametrize("collection", [[], None])
def test_filter_and_has_type_on_empty_collections(collection):
    assert filter_by(collection, "kind", "OBJECT") == []
    assert has_type(collection, "OBJECT") is False


def test_has_type(users_root):
    assert has_type(users_root["types"], "UNION")
    assert not has_type(users_root["types"], "NON_NULL")


def test_is_introspection_type():
    assert is_introspection_type(type_def("__Type"))
    assert not is_introspection_type(type_def("Type"))
    assert not is_introspection_type(None)
