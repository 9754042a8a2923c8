# -*- coding: utf-8 -*-
"""
Template registry.

A :class:`Registry` holds everything templates can reference during a single
render: named fragments discovered on disk and helper functions. Each
registry owns its own :class:`jinja2.Environment` so that independent renders
never share mutable state.
"""

import logging
import os
import re
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import jinja2

from . import helpers as _helpers
from .exc import RenderError, TemplateNotFound, TemplateSyntaxError
from .type_ref import PLAIN_LIST_MARKUP, ListMarkup, named_type, render_type

logger = logging.getLogger(__name__)

FRAGMENT_EXTENSION = ".j2"

_FRAGMENT_NAME_RE = re.compile(
    r"([\w-]+)%s$" % re.escape(FRAGMENT_EXTENSION)
)


def fragment_name(filename: str) -> Optional[str]:
    """ Only the end of the name is considered: ``my.type.j2`` is the
    ``type`` fragment.

    Args:
        filename: Base name of a file

    Returns:
        Fragment name derived from ``filename`` or ``None`` if the file does
        not look like a fragment.
    """
    match = _FRAGMENT_NAME_RE.search(filename)
    return match.group(1) if match else None


class Registry:
    """
    Named fragments and helpers visible to a layout and, transitively, to all
    the fragments it includes.

    Args:
        list_markup: Markers used by the ``kind`` helper for list types
    """

    def __init__(self, list_markup: ListMarkup = PLAIN_LIST_MARKUP):
        self.list_markup = list_markup
        self.fragments = {}  # type: Dict[str, str]
        self.helpers = {}  # type: Dict[str, Callable[..., Any]]
        self.environment = jinja2.Environment(
            loader=jinja2.FunctionLoader(self._load_fragment),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.environment.tests[
            "introspection"
        ] = _helpers.is_introspection_type

    def _load_fragment(
        self, name: str
    ) -> Optional[Tuple[str, Optional[str], Callable[[], bool]]]:
        source = self.fragments.get(name)
        if source is None:
            return None
        return source, None, lambda: self.fragments.get(name) is source

    def register_fragment(self, name: str, source: str) -> None:
        """ Register a fragment, replacing any previous one of the same name.
        """
        if name in self.fragments:
            logger.debug('Overwriting fragment "%s"', name)
        else:
            logger.debug('Registering fragment "%s"', name)
        self.fragments[name] = source

    def register_helper(self, name: str, func: Callable[..., Any]) -> None:
        self.helpers[name] = func
        self.environment.globals[name] = func

    def register_helpers(self) -> None:
        """ Register the standard schema query helpers. """
        list_markup = self.list_markup

        def kind(type_ref: Optional[Mapping[str, Any]]) -> str:
            return render_type(type_ref, list_markup)

        self.register_helper("findType", _helpers.find_type)
        self.register_helper("findObjects", _helpers.find_objects)
        self.register_helper("hasObjects", _helpers.has_objects)
        self.register_helper("filter", _helpers.filter_by)
        self.register_helper("hasType", _helpers.has_type)
        self.register_helper("kind", kind)
        self.register_helper("namedType", named_type)

    def discover_fragments(self, partials_dir: str) -> int:
        """ Register all fragments found under ``partials_dir``.

        The directory tree is walked depth first in name order, files and
        sub-directories intermixed. Every ``<name>.j2`` file is registered as
        fragment ``<name>``; later files override earlier ones of the same
        name.

        Discovery stops at the first file which does not follow that naming
        pattern: fragments registered so far are kept and the rest of the
        tree is ignored.

        Args:
            partials_dir: Root directory of the fragments

        Returns:
            Number of registered fragment files.

        Raises:
            :py:class:`~gqldoc.exc.TemplateNotFound`: ``partials_dir`` does
                not exist
        """
        if not os.path.isdir(partials_dir):
            raise TemplateNotFound(
                'Partials directory "%s" does not exist' % partials_dir,
                partials_dir,
            )

        registered = 0
        stack = [partials_dir]

        while stack:
            path = stack.pop()

            if os.path.isdir(path):
                with os.scandir(path) as entries:
                    children = sorted(entry.path for entry in entries)
                stack.extend(reversed(children))
                continue

            name = fragment_name(os.path.basename(path))
            if name is None:
                logger.warning(
                    'Unexpected file "%s", skipping remaining fragments', path
                )
                break

            with open(path, encoding="utf-8") as f:
                self.register_fragment(name, f.read())
            registered += 1

        return registered

    def _compile_fragments(self) -> None:
        for name in self.fragments:
            try:
                self.environment.get_template(name)
            except jinja2.TemplateSyntaxError as err:
                raise TemplateSyntaxError(
                    err.message or str(err), name, err.lineno
                ) from err

    def compile_layout(self, layout_file: str) -> jinja2.Template:
        """ Compile a layout along with every registered fragment.

        Args:
            layout_file: Path to the layout template

        Returns:
            Compiled layout

        Raises:
            :py:class:`~gqldoc.exc.TemplateNotFound`: Missing layout file
            :py:class:`~gqldoc.exc.TemplateSyntaxError`: The layout or one of
                the fragments is not a valid template
        """
        try:
            with open(layout_file, encoding="utf-8") as f:
                source = f.read()
        except FileNotFoundError:
            raise TemplateNotFound(
                'Layout "%s" does not exist' % layout_file, layout_file
            ) from None

        self._compile_fragments()

        name = os.path.basename(layout_file)
        try:
            return self.environment.from_string(source)
        except jinja2.TemplateSyntaxError as err:
            raise TemplateSyntaxError(
                err.message or str(err), name, err.lineno
            ) from err

    def render(
        self,
        template: jinja2.Template,
        root: Mapping[str, Any],
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """ Evaluate a compiled layout against a schema root.

        The keys of ``root`` are exposed as top level variables, ``root``
        refers to the whole schema root and ``options`` to the rendering
        options.

        Raises:
            :py:class:`~gqldoc.exc.RenderError`
        """
        context = dict(root)
        context["root"] = root
        context["options"] = dict(options or {})
        try:
            return template.render(context)
        except jinja2.TemplateError as err:
            raise RenderError("Failed to render template: %s" % err) from err
