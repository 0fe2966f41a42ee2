"""
Invite Service
Email invitations to join a family.

Lifecycle of a FamilyMember created by an invite::

    pending --accept_invite()--> active

An invite to an email that already has an account is created ``active``
straight away; the token is still issued so the link can be shared.
Tokens are single use and do not expire.
"""
import secrets
from collections import namedtuple
from urllib.parse import urlencode

from flask import current_app

from models.family import ROLE_MEMBER, STATUS_ACTIVE, STATUS_PENDING
from utils.errors import ConflictError, NotFound, ValidationError
from utils.permissions import require_family_admin


INVITE_TOKEN_BYTES = 32  # 64 hex characters

Invitation = namedtuple('Invitation', ['member', 'invite_url', 'email_sent'])


def generate_invite_token():
    return secrets.token_hex(INVITE_TOKEN_BYTES)


class InviteService:

    def __init__(self, storage, mailer, app_url):
        self.storage = storage
        self.mailer = mailer
        self.app_url = app_url

    def build_invite_url(self, token):
        """Link the client app opens to accept an invite."""
        return f"{self.app_url.rstrip('/')}/auth?{urlencode({'invite': token})}"

    def invite_member(self, family_id, invite_email, actor, role=ROLE_MEMBER):
        """Invite *invite_email* to a family on behalf of *actor*.

        Returns an ``Invitation``.  Email delivery is best effort: the invite
        and its URL are returned even when no email could be sent.
        """
        family = self.storage.get_family(family_id)
        if family is None:
            raise NotFound('Family not found')
        require_family_admin(self.storage, family_id, actor.id)

        email = invite_email.strip().lower()
        if self.storage.get_member_by_email(family_id, email) is not None:
            raise ConflictError('This email has already been invited to the family')

        token = generate_invite_token()
        existing_user = self.storage.get_user_by_email(email)
        if existing_user is not None:
            member = self.storage.create_family_member(
                family_id, email, role, STATUS_ACTIVE, token, user_id=existing_user.id)
        else:
            member = self.storage.create_family_member(
                family_id, email, role, STATUS_PENDING, token)

        current_app.logger.info(
            'User %s invited %s to family %s as %s (status=%s)',
            actor.id, email, family_id, role, member.status,
        )

        invite_url = self.build_invite_url(token)
        email_sent = self.mailer.send_family_invite(email, family.name, invite_url)
        return Invitation(member, invite_url, email_sent)

    def _get_unused_invite(self, token):
        member = self.storage.get_member_by_token(token)
        if member is None:
            raise NotFound('Invite not found')
        if member.status == STATUS_ACTIVE:
            raise ValidationError('Invite has already been used')
        return member

    def verify_invite(self, token):
        """Return the pending membership for *token*."""
        return self._get_unused_invite(token)

    def accept_invite(self, token, user):
        """Bind the pending membership for *token* to *user* and activate it."""
        member = self._get_unused_invite(token)
        if self.storage.get_membership(member.family_id, user.id) is not None:
            raise ConflictError('You are already a member of this family')
        self.storage.activate_member(member, user.id)
        current_app.logger.info('User %s accepted invite to family %s', user.id, member.family_id)
        return member

    def resend_invite(self, token):
        member = self._get_unused_invite(token)
        invite_url = self.build_invite_url(token)
        email_sent = self.mailer.send_family_invite(member.invite_email, member.family.name, invite_url)
        return Invitation(member, invite_url, email_sent)
