"""
Email Service
Invite emails through SendGrid. Delivery is best effort: every failure is
logged and reported as ``False``, never raised.
"""
from flask import current_app, render_template
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail


class InviteMailer:

    def __init__(self, api_key, sender):
        self.api_key = api_key
        self.sender = sender

    @property
    def enabled(self):
        return bool(self.api_key)

    def send_family_invite(self, invite_email, family_name, invite_url):
        """Send the invite link to *invite_email*. Returns True on delivery."""
        if not self.enabled:
            current_app.logger.info('SendGrid not configured; invite email to %s not sent', invite_email)
            return False

        message = Mail(
            from_email=self.sender,
            to_emails=invite_email,
            subject=f"You've been invited to join {family_name}",
            html_content=render_template('email/family_invite.html',
                                         family_name=family_name, invite_url=invite_url),
        )
        try:
            response = SendGridAPIClient(self.api_key).send(message)
        except Exception:
            current_app.logger.exception('Failed to send invite email to %s', invite_email)
            return False

        if not 200 <= response.status_code < 300:
            current_app.logger.error('SendGrid rejected invite email to %s: status=%s',
                                     invite_email, response.status_code)
            return False

        current_app.logger.info('Invite email sent to %s', invite_email)
        return True
