"""
Invite routes.

  GET  /api/invites/<token>          – public: which family the invite is for
  POST /api/invites/<token>/accept   – login required: join the family
"""
from flask import jsonify
from flask_login import current_user, login_required

from blueprints.invites import invites_bp
from services import get_services


@invites_bp.route('/<token>', methods=['GET'])
def verify(token):
    member = get_services().invites.verify_invite(token)
    return jsonify({
        'familyId': member.family_id,
        'familyName': member.family.name,
    })


@invites_bp.route('/<token>/accept', methods=['POST'])
@login_required
def accept(token):
    member = get_services().invites.accept_invite(token, current_user)
    return jsonify(member.to_dict())
