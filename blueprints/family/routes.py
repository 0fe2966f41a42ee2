"""
Family blueprint routes (all require login).

  POST /api/families                       – create a family, caller becomes admin
  GET  /api/families                       – families the caller belongs to
  POST /api/families/<id>/members          – invite a member by email (admin only)
  GET  /api/families/<id>/members          – list members and pending invites
"""
from flask import jsonify, request
from flask_login import current_user

from blueprints.family import family_bp
from blueprints.family.forms import FamilyForm, InviteForm
from services import get_services


@family_bp.route('', methods=['POST'])
def create_family():
    form = FamilyForm.from_json(request.get_json(silent=True)).validate_or_raise()
    family = get_services().families.create_family(form.name.data, current_user)
    return jsonify(family.to_dict()), 201


@family_bp.route('', methods=['GET'])
def list_families():
    families = get_services().families.list_families(current_user)
    return jsonify([family.to_dict() for family in families])


@family_bp.route('/<int:family_id>/members', methods=['POST'])
def invite_member(family_id):
    form = InviteForm.from_json(request.get_json(silent=True)).validate_or_raise()

    invitation = get_services().invites.invite_member(
        family_id,
        form.invite_email.data,
        current_user,
        role=form.role.data,
    )
    payload = invitation.member.to_dict(include_token=True)
    payload['inviteUrl'] = invitation.invite_url
    payload['emailSent'] = invitation.email_sent
    return jsonify(payload), 201


@family_bp.route('/<int:family_id>/members', methods=['GET'])
def list_members(family_id):
    members = get_services().families.list_members(family_id, current_user)
    return jsonify([member.to_dict() for member in members])
