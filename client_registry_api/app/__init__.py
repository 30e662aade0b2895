"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The client collection lives in ``core.store``, the
operations over it in ``services`` and the HTTP surface in
``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
