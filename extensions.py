from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Extensions are created unbound and attached in create_app()

# Database (only used by the "sql" record store)
db = SQLAlchemy()

# Session authentication
login_manager = LoginManager()

STORE_KEY = "record_store"


def get_store():
    """Record store injected into the current app by create_app()."""
    return current_app.extensions[STORE_KEY]
