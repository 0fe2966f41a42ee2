"""
Activity routes (all require login).

  GET   /api/activities?familyId=<id>      – activities of a family (members only)
  POST  /api/activities                    – create an activity
  PATCH /api/activities/<id>/complete      – mark an activity completed
  GET   /api/activities/categories         – suggested category names
"""
from flask import current_app, jsonify, request
from flask_login import current_user

from blueprints.activities import activities_bp
from blueprints.activities.forms import ActivityForm
from services import get_services
from utils.errors import ValidationError


@activities_bp.route('', methods=['GET'])
def list_activities():
    family_id = request.args.get('familyId', type=int)
    if family_id is None:
        raise ValidationError('familyId: A valid family id is required.')

    activities = get_services().activities.list_activities(family_id, current_user)
    return jsonify([activity.to_dict() for activity in activities])


@activities_bp.route('', methods=['POST'])
def create_activity():
    form = ActivityForm.from_json(request.get_json(silent=True)).validate_or_raise()

    activity = get_services().activities.create_activity(
        current_user,
        family_id=form.family_id.data,
        title=form.title.data,
        category=form.category.data,
        start_date=form.start_date.data,
        assigned_to=form.assigned_to.data,
        description=form.description.data or None,
        end_date=form.end_date.data,
        is_all_day=form.is_all_day.data,
    )
    return jsonify(activity.to_dict()), 201


@activities_bp.route('/<int:activity_id>/complete', methods=['PATCH'])
def complete_activity(activity_id):
    activity = get_services().activities.complete_activity(activity_id, current_user)
    return jsonify(activity.to_dict())


@activities_bp.route('/categories', methods=['GET'])
def categories():
    return jsonify(current_app.config['ACTIVITY_CATEGORIES'])
