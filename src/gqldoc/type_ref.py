# -*- coding: utf-8 -*-
""" Display type references from introspection results. """

from typing import Any, List, Mapping, NamedTuple, Optional


class ListMarkup(NamedTuple):
    """ Opening and closing markers wrapped around list types. """

    open: str
    close: str


PLAIN_LIST_MARKUP = ListMarkup("[", "]")

# Square brackets are reserved characters in both AsciiDoc (attribute lists,
# macros) and Markdown (links).
LIST_MARKUPS = {
    "asciidoc": ListMarkup("++[++", "++]++"),
    "markdown": ListMarkup("\\[", "\\]"),
}


def list_markup_for(language: str) -> ListMarkup:
    """
    Args:
        language: Output language name

    Returns:
        List markers for the language, unknown languages use plain brackets.
    """
    return LIST_MARKUPS.get(language, PLAIN_LIST_MARKUP)


def render_type(
    type_ref: Optional[Mapping[str, Any]],
    list_markup: ListMarkup = PLAIN_LIST_MARKUP,
) -> str:
    """ Convert an introspected type reference to its display string.

    ``NON_NULL`` wrappers add a trailing ``!`` and ``LIST`` wrappers surround
    the wrapped type with ``list_markup`` so that
    ``LIST(NON_NULL(String))`` renders as ``[String!]`` with plain markers.

    Wrapping chains are walked iteratively and can be arbitrarily deep.

    Args:
        type_ref: Introspection ``__Type`` reference (``kind``, ``name`` and
            ``ofType`` keys)
        list_markup: Markers used for list types

    Returns:
        Display string, empty if ``type_ref`` is ``None``.
    """
    wrappers = []  # type: List[str]
    current = type_ref
    while current is not None and current.get("kind") in ("NON_NULL", "LIST"):
        wrappers.append(current["kind"])
        current = current.get("ofType")

    rendered = "" if current is None else "%s" % current.get("name")

    for wrapper in reversed(wrappers):
        if wrapper == "NON_NULL":
            rendered = rendered + "!"
        else:
            rendered = list_markup.open + rendered + list_markup.close

    return rendered


def named_type(type_ref: Optional[Mapping[str, Any]]) -> Optional[str]:
    """
    Args:
        type_ref: Introspection ``__Type`` reference

    Returns:
        Name of the innermost named type, ignoring all wrappers.
    """
    current = type_ref
    while current is not None and current.get("kind") in ("NON_NULL", "LIST"):
        current = current.get("ofType")
    return None if current is None else current.get("name")
