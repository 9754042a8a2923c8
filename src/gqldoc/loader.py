# -*- coding: utf-8 -*-
"""
Resolve GraphQL schemas from various sources to introspection results.

A schema source can be:

- the URL of a GraphQL endpoint, the introspection query is run against it;
- a GraphQL SDL document (``.graphql`` or ``.gql``);
- a JSON document containing the result of the introspection query;
- an importable Python module (``package.module`` or
  ``package.module:attribute``) or a Python file exposing the schema as a
  :class:`py_gql.schema.Schema`, an introspection result or an SDL string.
"""

import importlib
import importlib.util
import json
import logging
import os
import re
from typing import Any, Dict, Mapping, Optional

import requests
from py_gql import build_schema, graphql_blocking
from py_gql.exc import GraphQLError
from py_gql.schema import Schema
from py_gql.utilities import introspection_query

from .exc import SchemaLoadError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
    "User-Agent": "gqldoc",
}

DEFAULT_MODULE_ATTRIBUTE = "schema"

SDL_EXTENSIONS = (".graphql", ".gql")

_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


def is_url(source: str) -> bool:
    return bool(_URL_RE.match(source))


def schema_to_json(schema: Schema) -> Dict[str, Any]:
    """ Run the introspection query against a schema.

    Args:
        schema: Executable schema

    Returns:
        Introspection result (``{"__schema": ...}``)

    Raises:
        TypeError: ``schema`` is not a :class:`py_gql.schema.Schema`
        :py:class:`~gqldoc.exc.SchemaLoadError`: Introspection failed
    """
    if not isinstance(schema, Schema):
        raise TypeError("Expected a Schema but got %r" % (schema,))

    result = graphql_blocking(schema, introspection_query(description=True))
    if result.errors:
        raise SchemaLoadError(
            "Introspection failed: %s"
            % "; ".join(str(err) for err in result.errors)
        )
    return result.data


def schema_from_sdl(sdl: str, source: Optional[str] = None) -> Dict[str, Any]:
    """ Build a schema from a SDL document and introspect it. """
    try:
        schema = build_schema(sdl)
    except GraphQLError as err:
        raise SchemaLoadError(
            "Invalid schema document: %s" % err, source
        ) from err
    return schema_to_json(schema)


def _error_message(error: Any) -> str:
    if isinstance(error, Mapping) and "message" in error:
        return str(error["message"])
    return str(error)


def fetch_schema_json(
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """ Run the introspection query against a remote GraphQL endpoint.

    Args:
        url: Endpoint URL
        headers: Additional HTTP headers, e.g. ``Authorization``
        timeout: Request timeout in seconds

    Returns:
        Introspection result (``{"__schema": ...}``)

    Raises:
        :py:class:`~gqldoc.exc.SchemaLoadError`: Network failure, invalid
            status code or GraphQL errors in the response
    """
    request_headers = dict(DEFAULT_HEADERS)
    request_headers.update(headers or {})

    logger.info("Fetching schema from %s", url)
    try:
        response = requests.post(
            url,
            json={
                "query": introspection_query(description=True),
                "operationName": "IntrospectionQuery",
            },
            headers=request_headers,
            timeout=timeout,
        )
        response.raise_for_status()
        body = response.json()
    except requests.exceptions.RequestException as err:
        raise SchemaLoadError(
            "Failed to fetch schema from %s: %s" % (url, err), url
        ) from err
    except ValueError as err:
        raise SchemaLoadError(
            "Invalid JSON response from %s" % url, url
        ) from err

    if not isinstance(body, Mapping):
        raise SchemaLoadError("Invalid GraphQL response from %s" % url, url)

    if body.get("errors"):
        raise SchemaLoadError(
            "Introspection query failed: %s"
            % "; ".join(_error_message(err) for err in body["errors"]),
            url,
        )

    data = body.get("data")
    if not isinstance(data, Mapping) or "__schema" not in data:
        raise SchemaLoadError("No schema in response from %s" % url, url)

    return dict(data)


def _from_value(value: Any, source: str) -> Dict[str, Any]:
    if isinstance(value, Schema):
        return schema_to_json(value)
    if isinstance(value, str):
        return schema_from_sdl(value, source)
    if isinstance(value, Mapping):
        return _unwrap(value, source)
    raise SchemaLoadError(
        "Unsupported schema value %r in %s" % (type(value).__name__, source),
        source,
    )


def _unwrap(value: Mapping[str, Any], source: str) -> Dict[str, Any]:
    if "data" in value and isinstance(value["data"], Mapping):
        value = value["data"]
    if "__schema" in value:
        return dict(value)
    if "types" in value:
        return {"__schema": value}
    raise SchemaLoadError(
        "%s does not contain an introspection result" % source, source
    )


def load_module_schema(source: str) -> Dict[str, Any]:
    """ Load a schema exposed by a Python module or file.

    ``source`` is either a dotted module path or a path to a ``.py`` file,
    optionally followed by ``:attribute`` (default: ``schema``). Any error
    raised while importing the module is reported as a
    :py:class:`~gqldoc.exc.SchemaLoadError`.
    """
    path, _, attribute = source.partition(":")
    attribute = attribute or DEFAULT_MODULE_ATTRIBUTE

    try:
        if path.endswith(".py") or os.path.sep in path:
            spec = importlib.util.spec_from_file_location(
                os.path.splitext(os.path.basename(path))[0], path
            )
            if spec is None or spec.loader is None:
                raise ImportError("Cannot load %s" % path)
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)  # type: ignore
        else:
            module = importlib.import_module(path)
    except Exception as err:
        raise SchemaLoadError(
            "Could not import %s: %s" % (path, err), source
        ) from err

    try:
        value = getattr(module, attribute)
    except AttributeError:
        raise SchemaLoadError(
            'Module %s has no attribute "%s"' % (path, attribute), source
        ) from None

    return _from_value(value, source)


def load_schema_json(
    source: str,
    headers: Optional[Mapping[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """ Resolve a schema source to an introspection result.

    Args:
        source: URL, file path or module path
        headers: Additional HTTP headers (only used for URLs)
        timeout: HTTP timeout in seconds (only used for URLs)

    Returns:
        Introspection result (``{"__schema": ...}``)

    Raises:
        :py:class:`~gqldoc.exc.SchemaLoadError`
    """
    if is_url(source):
        return fetch_schema_json(source, headers=headers, timeout=timeout)

    ext = os.path.splitext(source.partition(":")[0])[1].lower()

    if ext in SDL_EXTENSIONS or ext == ".json":
        logger.info("Loading schema from %s", source)
        try:
            with open(source, encoding="utf-8") as f:
                content = f.read()
        except OSError as err:
            raise SchemaLoadError(
                "Could not read %s: %s" % (source, err), source
            ) from err

        if ext in SDL_EXTENSIONS:
            return schema_from_sdl(content, source)

        try:
            value = json.loads(content)
        except ValueError as err:
            raise SchemaLoadError(
                "Invalid JSON in %s: %s" % (source, err), source
            ) from err

        if not isinstance(value, Mapping):
            raise SchemaLoadError(
                "%s does not contain an introspection result" % source, source
            )
        return _unwrap(value, source)

    logger.info("Loading schema from module %s", source)
    return load_module_schema(source)
