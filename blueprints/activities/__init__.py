"""Activities blueprint – shared family activities."""
from flask import Blueprint
from flask_login import login_required

activities_bp = Blueprint('activities', __name__, url_prefix='/api/activities')


# Require authentication for all routes in this blueprint
@activities_bp.before_request
@login_required
def require_login():
    pass


from . import routes  # noqa: E402,F401
