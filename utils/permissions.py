"""
Family membership checks.

A user belongs to a family when a FamilyMember row for that family carries
their user id.  Pending invites have no user id yet, so they never grant
access.  Admin-only actions (inviting) additionally require the ``admin``
role on an ``active`` row.
"""
from utils.errors import AuthorizationError


def is_family_member(storage, family_id, user_id):
    """Return True if *user_id* has a membership row in *family_id*."""
    if user_id is None:
        return False
    return storage.get_membership(family_id, user_id) is not None


def require_family_member(storage, family_id, user_id):
    """Return the caller's membership row or raise ``AuthorizationError``."""
    membership = storage.get_membership(family_id, user_id) if user_id is not None else None
    if membership is None:
        raise AuthorizationError('You are not a member of this family')
    return membership


def require_family_admin(storage, family_id, user_id):
    """Like ``require_family_member`` but the row must be an active admin."""
    membership = require_family_member(storage, family_id, user_id)
    if not (membership.is_active and membership.is_admin):
        raise AuthorizationError('Only family admins can do that')
    return membership
