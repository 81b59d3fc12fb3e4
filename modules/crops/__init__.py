"""Crops module package."""

from flask import Blueprint

bp = Blueprint("crops", __name__, url_prefix="/api/crops")

from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "routes"]
