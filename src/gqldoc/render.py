# -*- coding: utf-8 -*-
""" Render introspected schemas to documents. """

import logging
import os
from typing import Any, Mapping, Optional

from .exc import TemplateNotFound
from .options import RenderOptions
from .registry import FRAGMENT_EXTENSION, Registry
from .type_ref import list_markup_for

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "templates"
)


def schema_root(schema: Any) -> Mapping[str, Any]:
    """ Extract the schema root from an introspection result.

    Supported shapes are a full GraphQL response (``{"data": {"__schema":
    ...}}``), the content of ``data`` (``{"__schema": ...}``) and the schema
    root itself. :class:`py_gql.schema.Schema` instances are introspected
    first.

    Raises:
        TypeError: Unsupported value
        ValueError: The mapping does not look like an introspection result
    """
    if not isinstance(schema, Mapping):
        from .loader import schema_to_json

        schema = schema_to_json(schema)

    if "data" in schema and isinstance(schema["data"], Mapping):
        schema = schema["data"]

    if "__schema" in schema:
        schema = schema["__schema"]

    if not isinstance(schema, Mapping) or "types" not in schema:
        raise ValueError("Expected an introspection result with a types list")

    return schema


def render_schema(
    schema: Any, options: Optional[RenderOptions] = None, **kwargs: Any
) -> str:
    """ Render a schema to a document.

    Every call builds its own :class:`~gqldoc.registry.Registry`, fragments
    and helpers are never shared between calls.

    Args:
        schema: Introspection result (see :func:`schema_root`)
        options: Rendering options, if not provided they are built from the
            keyword arguments with :meth:`RenderOptions.from_mapping`
        **kwargs: Loose options, unknown keys are ignored

    Returns:
        The complete rendered document.

    Raises:
        :py:class:`~gqldoc.exc.TemplateNotFound`: Unknown language or layout
        :py:class:`~gqldoc.exc.TemplateSyntaxError`: Invalid template source
        :py:class:`~gqldoc.exc.RenderError`: Template evaluation failed
    """
    if options is None:
        options = RenderOptions.from_mapping(kwargs)
    elif kwargs:
        raise TypeError("Cannot pass both options and keyword arguments")

    root = schema_root(schema)

    language_dir = os.path.join(
        options.templates_dir or TEMPLATES_DIR, options.language
    )
    if not os.path.isdir(language_dir):
        raise TemplateNotFound(
            'Unknown language "%s" (no directory %s)'
            % (options.language, language_dir),
            language_dir,
        )

    logger.debug(
        'Rendering %d types with language "%s" and layout "%s"',
        len(root["types"] or ()),
        options.language,
        options.layout,
    )

    registry = Registry(list_markup_for(options.language))
    registry.register_helpers()
    registry.discover_fragments(os.path.join(language_dir, "partials"))
    template = registry.compile_layout(
        os.path.join(
            language_dir, "layouts", options.layout + FRAGMENT_EXTENSION
        )
    )
    return registry.render(template, root, options.template_context())
