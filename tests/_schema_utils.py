# -*- coding: utf-8 -*-
""" Builders for hand written introspection data. """


def named(name, kind="OBJECT"):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type):
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type):
    return {"kind": "LIST", "name": None, "ofType": of_type}


def type_def(name, kind="OBJECT", fields=None, **extra):
    return dict(
        {"kind": kind, "name": name, "description": None, "fields": fields},
        **extra
    )


def field(name, type_, args=None, description=None):
    return {
        "name": name,
        "description": description,
        "args": args or [],
        "type": type_,
        "isDeprecated": False,
        "deprecationReason": None,
    }


def schema_root(types, query="Query", mutation=None, subscription=None):
    return {
        "queryType": {"name": query} if query else None,
        "mutationType": {"name": mutation} if mutation else None,
        "subscriptionType": {"name": subscription} if subscription else None,
        "types": types,
        "directives": [],
    }
