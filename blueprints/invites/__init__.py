"""Invites blueprint – checking and accepting invite tokens."""
from flask import Blueprint

invites_bp = Blueprint('invites', __name__, url_prefix='/api/invites')

# Looking up a token is public (the invitee may not have an account yet);
# accepting one requires login, applied per route in routes.py.

from . import routes  # noqa: E402,F401
