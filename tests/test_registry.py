# -*- coding: utf-8 -*-

import logging
import os

import pytest

from gqldoc.exc import RenderError, TemplateNotFound, TemplateSyntaxError
from gqldoc.registry import Registry, fragment_name
from gqldoc.type_ref import list_markup_for

from ._schema_utils import list_of, named, non_null, schema_root, type_def


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("field.j2", "field"),
        ("input-field.j2", "input-field"),
        ("field_2.j2", "field_2"),
        ("README.md", None),
        ("field.j2.bak", None),
        ("field.hbs", None),
        (".j2", None),
        ("my.type.j2", "type"),
        ("field.j2.j2", "j2"),
    ],
)
def test_fragment_name(filename, expected):
    assert fragment_name(filename) == expected


def test_discover_fragments_walks_nested_directories(make_templates):
    root = make_templates(
        {
            "partials/a.j2": "A",
            "partials/types/b.j2": "B",
            "partials/types/deep/deeper/c.j2": "C",
        }
    )
    registry = Registry()
    count = registry.discover_fragments(os.path.join(root, "partials"))
    assert count == 3
    assert registry.fragments == {"a": "A", "b": "B", "c": "C"}


def test_discover_fragments_names_dotted_files_by_last_segment(
    make_templates,
):
    root = make_templates({"partials/my.type.j2": "T", "partials/z.j2": "Z"})
    registry = Registry()
    count = registry.discover_fragments(os.path.join(root, "partials"))
    assert count == 2
    assert registry.fragments == {"type": "T", "z": "Z"}


def test_discover_fragments_last_discovered_wins(make_templates):
    root = make_templates(
        {
            "partials/a/field.j2": "first",
            "partials/b/field.j2": "second",
        }
    )
    registry = Registry()
    registry.discover_fragments(os.path.join(root, "partials"))
    assert registry.fragments == {"field": "second"}


def test_discover_fragments_stops_at_unexpected_file(make_templates, caplog):
    root = make_templates(
        {
            "partials/a.j2": "A",
            "partials/b.txt": "not a fragment",
            "partials/c.j2": "C",
            "partials/d/e.j2": "E",
        }
    )
    registry = Registry()
    with caplog.at_level(logging.WARNING, logger="gqldoc.registry"):
        count = registry.discover_fragments(os.path.join(root, "partials"))

    assert count == 1
    assert registry.fragments == {"a": "A"}
    assert "b.txt" in caplog.text


def test_discover_fragments_missing_directory(tmp_path):
    with pytest.raises(TemplateNotFound) as exc_info:
        Registry().discover_fragments(str(tmp_path / "partials"))
    assert isinstance(exc_info.value, FileNotFoundError)
    assert exc_info.value.path == str(tmp_path / "partials")


def test_register_helpers():
    registry = Registry()
    registry.register_helpers()
    assert set(registry.helpers) == {
        "findType",
        "findObjects",
        "hasObjects",
        "filter",
        "hasType",
        "kind",
        "namedType",
    }


def test_kind_helper_uses_registry_markup():
    registry = Registry(list_markup_for("asciidoc"))
    registry.register_helpers()
    kind = registry.helpers["kind"]
    assert kind(list_of(non_null(named("User")))) == "++[++User!++]++"


def test_registries_are_isolated(make_templates):
    root = make_templates({"layouts/main.j2": "{% include 'name' %}"})
    layout = os.path.join(root, "layouts", "main.j2")

    first, second = Registry(), Registry()
    first.register_fragment("name", "first")
    second.register_fragment("name", "second")

    assert first.render(first.compile_layout(layout), {}) == "first"
    assert second.render(second.compile_layout(layout), {}) == "second"


def test_fragments_can_include_fragments(make_templates):
    root = make_templates(
        {"layouts/main.j2": "<{% include 'outer' %}>"}
    )
    registry = Registry()
    registry.register_fragment("outer", "[{% include 'inner' %}]")
    registry.register_fragment("inner", "{{ root.types | length }}")
    template = registry.compile_layout(os.path.join(root, "layouts", "main.j2"))
    assert registry.render(template, schema_root([type_def("Query")])) == (
        "<[1]>"
    )


def test_compile_layout_missing_file(tmp_path):
    with pytest.raises(TemplateNotFound):
        Registry().compile_layout(str(tmp_path / "main.j2"))


def test_compile_layout_syntax_error(make_templates):
    root = make_templates({"layouts/main.j2": "line\n{% for %}"})
    with pytest.raises(TemplateSyntaxError) as exc_info:
        Registry().compile_layout(os.path.join(root, "layouts", "main.j2"))
    assert exc_info.value.name == "main.j2"
    assert exc_info.value.lineno == 2


def test_compile_layout_reports_broken_fragment(make_templates):
    root = make_templates({"layouts/main.j2": "ok"})
    registry = Registry()
    registry.register_fragment("broken", "{{ unclosed ")
    with pytest.raises(TemplateSyntaxError) as exc_info:
        registry.compile_layout(os.path.join(root, "layouts", "main.j2"))
    assert exc_info.value.name == "broken"


def test_render_missing_fragment_is_render_error(make_templates):
    root = make_templates({"layouts/main.j2": "{% include 'missing' %}"})
    registry = Registry()
    template = registry.compile_layout(os.path.join(root, "layouts", "main.j2"))
    with pytest.raises(RenderError):
        registry.render(template, {})


def test_render_exposes_root_and_options(make_templates):
    root = make_templates(
        {
            "layouts/main.j2": (
                "{{ queryType.name }}/{{ root.queryType.name }}"
                "/{{ options.title }}"
            )
        }
    )
    registry = Registry()
    template = registry.compile_layout(os.path.join(root, "layouts", "main.j2"))
    assert (
        registry.render(template, schema_root([]), {"title": "T"})
        == "Query/Query/T"
    )
