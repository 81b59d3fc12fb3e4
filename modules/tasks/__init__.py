"""Tasks module package."""

from flask import Blueprint

bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")

from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "routes"]
