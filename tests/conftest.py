# -*- coding: utf-8 -*-
""" Global fixtures """

import json
import os

import pytest

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def fixture_path():
    """ Helper to get the path of fixture files by name. """

    def path(name):
        return os.path.join(FIXTURES_DIR, name)

    return path


@pytest.fixture
def fixture_file(fixture_path):
    """ Helper to load fixture files by name. """

    def load(name):
        with open(fixture_path(name), "rb") as f:
            return f.read().decode("utf-8")

    return load


@pytest.fixture
def users_schema(fixture_file):
    """ Full introspection response for the users schema. """
    return json.loads(fixture_file("users-schema.json"))


@pytest.fixture
def users_root(users_schema):
    return users_schema["data"]["__schema"]


@pytest.fixture
def make_templates(tmp_path):
    """ Write a template tree under a temporary directory.

    Keys are paths relative to the template root, values the file content.
    Returns the template root.
    """

    def factory(files):
        for relpath, content in files.items():
            path = tmp_path / relpath
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return str(tmp_path)

    return factory
