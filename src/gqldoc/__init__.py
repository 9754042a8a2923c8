# -*- coding: utf-8 -*-
"""
gqldoc

Render GraphQL schemas as human readable documents (AsciiDoc by default)
describing every type and field with links between related types.

The schema is resolved to an introspection result by :mod:`gqldoc.loader`
and rendered by :func:`render_schema` using a set of `Jinja2
<https://jinja.palletsprojects.com/>`_ templates.
"""

from .version import __version__  # isort:skip

from .exc import (
    GqlDocError,
    InvalidOptions,
    RenderError,
    SchemaLoadError,
    TemplateNotFound,
    TemplateSyntaxError,
)
from .loader import load_schema_json, schema_to_json
from .options import RenderOptions, Shown, Suppressed
from .render import render_schema
from .type_ref import render_type


__all__ = (
    "__version__",
    "render_schema",
    "render_type",
    "load_schema_json",
    "schema_to_json",
    "RenderOptions",
    "Shown",
    "Suppressed",
    "GqlDocError",
    "InvalidOptions",
    "RenderError",
    "SchemaLoadError",
    "TemplateNotFound",
    "TemplateSyntaxError",
)
