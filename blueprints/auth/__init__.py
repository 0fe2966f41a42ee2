"""Auth blueprint – registration and session login for the JSON API."""
from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api')

# No blueprint-wide login_required: /register and /login are public.

from . import routes  # noqa: E402,F401
