# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import Optional


class GqlDocError(Exception):
    """
    Base exception from which all other inherit. You should prefer using one
    of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SchemaLoadError(GqlDocError):
    """
    The schema could not be resolved from the given source.

    This covers network failures, invalid HTTP responses, GraphQL errors
    returned by the introspection query, syntax errors in SDL documents,
    invalid JSON files and modules which cannot be imported or do not expose a
    schema.

    Args:
        message: Explanatory message
        source: Schema source as passed by the caller

    Attributes:
        message (str): Explanatory message
        source (str): Schema source as passed by the caller
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class TemplateNotFound(GqlDocError, FileNotFoundError):
    """
    A template directory or layout file does not exist.

    Args:
        message: Explanatory message
        path: Missing path

    Attributes:
        message (str): Explanatory message
        path (str): Missing path
    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class TemplateSyntaxError(GqlDocError):
    """
    A fragment or layout could not be compiled.

    Attributes:
        message (str): Explanatory message
        name (Optional[str]): Name of the failing template
        lineno (Optional[int]): 1-indexed line of the syntax error
    """

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        lineno: Optional[int] = None,
    ):
        super().__init__(message)
        self.name = name
        self.lineno = lineno

    def __str__(self) -> str:
        if self.name is None:
            return self.message
        if self.lineno is None:
            return "%s (in %s)" % (self.message, self.name)
        return "%s (in %s, line %d)" % (self.message, self.name, self.lineno)


class RenderError(GqlDocError):
    """
    A compiled template failed while being evaluated against the schema.
    """


class InvalidOptions(GqlDocError, ValueError):
    """
    Rendering options were given invalid values.
    """
