"""Locate the App named on the command line.

``burrow routes`` and ``burrow run`` both take a ``"module:attribute"``
string. The attribute must be the App itself: the CLI compiles nothing
and calls nothing on the user's behalf.
"""

import importlib

from burrow.app import App


def resolve_app(import_string: str) -> App:
    """Import *import_string* and return the App it names.

    The attribute defaults to ``"app"`` when omitted. An app wrapped with
    ``inject_context`` is rejected with a hint, since the wrapper hides
    the router the CLI needs.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the attribute is not a burrow ``App``.
    """
    module_path, _, attr_name = import_string.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or "app")

    if isinstance(obj, App):
        return obj

    if isinstance(getattr(obj, "__wrapped__", None), App):
        msg = (
            f"{import_string!r} is an App wrapped with inject_context(); "
            "point the CLI at the unwrapped App and pass context= to it instead"
        )
    else:
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a burrow.App instance"
    raise TypeError(msg)
