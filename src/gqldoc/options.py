# -*- coding: utf-8 -*-
""" Rendering configuration. """

from typing import Any, Dict, Mapping, Optional

from .exc import InvalidOptions

DEFAULT_LANGUAGE = "asciidoc"
DEFAULT_LAYOUT = "main"
DEFAULT_TITLE = "Schema Types"


class TitleSetting:
    """ Base class for the title configuration. """

    __slots__ = ()

    text = ""  # type: str
    suppressed = False  # type: bool


class Shown(TitleSetting):
    """
    Print a title.

    Args:
        text: Title text
    """

    __slots__ = ("_text",)

    def __init__(self, text: str = DEFAULT_TITLE):
        self._text = text

    @property
    def text(self) -> str:  # type: ignore
        return self._text

    def __eq__(self, rhs: Any) -> bool:
        return isinstance(rhs, Shown) and rhs.text == self.text

    def __hash__(self) -> int:
        return hash((Shown, self._text))

    def __repr__(self) -> str:
        return "Shown(%r)" % self._text


class _Suppressed(TitleSetting):
    """ Do not print any title. """

    __slots__ = ()

    suppressed = True

    def __repr__(self) -> str:
        return "Suppressed"


Suppressed = _Suppressed()


def resolve_title(value: Any) -> TitleSetting:
    """ Interpret the loose ``title`` values accepted at the boundary.

    - ``None`` uses the default title.
    - ``False`` suppresses the title.
    - A string sets the title text.
    - A list (repeated command line flags) is read in order, the last string
      sets the text and any ``False`` suppresses the title.
    - A :class:`TitleSetting` is returned as-is.
    """
    if isinstance(value, TitleSetting):
        return value
    if value is None or value is True:
        return Shown()
    if value is False:
        return Suppressed
    if isinstance(value, str):
        return Shown(value)
    if isinstance(value, (list, tuple)):
        text = DEFAULT_TITLE
        suppressed = False
        for entry in value:
            if isinstance(entry, str):
                text = entry
            elif entry is False:
                suppressed = True
        return Suppressed if suppressed else Shown(text)
    raise InvalidOptions("Invalid title value %r" % (value,))


class RenderOptions:
    """
    Immutable options consumed by :func:`gqldoc.render_schema`.

    Args:
        language: Template set to use (``asciidoc`` or ``markdown`` for the
            bundled ones)
        layout: Entry template name inside the ``layouts`` directory
        title: Title configuration, see :func:`resolve_title` for accepted
            values
        skip_table_of_contents: If ``True`` do not print the table of contents
        heading_level: Level of the top heading, useful when embedding the
            output in a larger document
        prologue: Text inserted after the title
        epilogue: Text inserted at the end of the document
        templates_dir: Root directory containing the template sets, defaults
            to the bundled templates
    """

    __slots__ = (
        "_language",
        "_layout",
        "_title",
        "_skip_table_of_contents",
        "_heading_level",
        "_prologue",
        "_epilogue",
        "_templates_dir",
    )

    def __init__(
        self,
        language: Optional[str] = None,
        layout: Optional[str] = None,
        title: Any = None,
        skip_table_of_contents: bool = False,
        heading_level: Optional[int] = None,
        prologue: Optional[str] = None,
        epilogue: Optional[str] = None,
        templates_dir: Optional[str] = None,
    ):
        if heading_level is None:
            heading_level = 1
        try:
            heading_level = int(heading_level)
        except (TypeError, ValueError):
            raise InvalidOptions(
                "Invalid heading level %r" % (heading_level,)
            ) from None
        if heading_level < 1:
            raise InvalidOptions(
                "Heading level must be >= 1 (got %d)" % heading_level
            )

        self._language = language or DEFAULT_LANGUAGE
        self._layout = layout or DEFAULT_LAYOUT
        self._title = resolve_title(title)
        self._skip_table_of_contents = bool(skip_table_of_contents)
        self._heading_level = heading_level
        self._prologue = prologue
        self._epilogue = epilogue
        self._templates_dir = templates_dir

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RenderOptions":
        """ Build options from a loose mapping, ignoring unknown keys.

        Both snake case and camel case keys are recognised
        (``skipTableOfContents``, ``headingLevel``). A truthy ``skipTitle``
        key suppresses the title regardless of ``title``.
        """

        def _get(*keys: str) -> Any:
            for key in keys:
                if mapping.get(key) is not None:
                    return mapping[key]
            return None

        title = resolve_title(mapping.get("title"))
        if mapping.get("skipTitle") or mapping.get("skip_title"):
            title = Suppressed

        return cls(
            language=_get("language"),
            layout=_get("layout"),
            title=title,
            skip_table_of_contents=bool(
                _get("skip_table_of_contents", "skipTableOfContents")
            ),
            heading_level=_get("heading_level", "headingLevel"),
            prologue=_get("prologue"),
            epilogue=_get("epilogue"),
            templates_dir=_get("templates_dir", "templatesDir"),
        )

    @property
    def language(self) -> str:
        return self._language

    @property
    def layout(self) -> str:
        return self._layout

    @property
    def title(self) -> TitleSetting:
        return self._title

    @property
    def skip_title(self) -> bool:
        return self._title.suppressed

    @property
    def skip_table_of_contents(self) -> bool:
        return self._skip_table_of_contents

    @property
    def heading_level(self) -> int:
        return self._heading_level

    @property
    def prologue(self) -> Optional[str]:
        return self._prologue

    @property
    def epilogue(self) -> Optional[str]:
        return self._epilogue

    @property
    def templates_dir(self) -> Optional[str]:
        return self._templates_dir

    def template_context(self) -> Dict[str, Any]:
        """
        Returns:
            Options as exposed to templates under the ``options`` variable.
        """
        return {
            "language": self._language,
            "layout": self._layout,
            "title": self._title.text,
            "skipTitle": self.skip_title,
            "skipTableOfContents": self._skip_table_of_contents,
            "headingLevel": self._heading_level,
            "prologue": self._prologue,
            "epilogue": self._epilogue,
        }

    def __repr__(self) -> str:
        return "<RenderOptions language=%r layout=%r title=%r>" % (
            self._language,
            self._layout,
            self._title,
        )
