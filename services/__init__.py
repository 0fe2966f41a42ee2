"""
Service container.

One ``Services`` instance is built per application in ``create_app()`` and
kept in ``app.extensions['services']``; request handlers reach it through
``get_services()``.
"""
from flask import current_app

from services.activity_service import ActivityService
from services.auth_service import AuthService
from services.email_service import InviteMailer
from services.family_service import FamilyService
from services.invite_service import InviteService
from services.storage import Storage


class Services:

    def __init__(self, storage, mailer, config):
        self.storage = storage
        self.mailer = mailer
        self.auth = AuthService(storage)
        self.families = FamilyService(storage)
        self.invites = InviteService(storage, mailer, app_url=config['APP_URL'])
        self.activities = ActivityService(
            storage,
            list_limit=config['ACTIVITY_LIST_LIMIT'],
            complete_requires_membership=config['ACTIVITY_COMPLETE_REQUIRES_MEMBERSHIP'],
        )


def init_services(app, db):
    mailer = InviteMailer(app.config.get('SENDGRID_API_KEY'), app.config['MAIL_DEFAULT_SENDER'])
    services = Services(Storage(db), mailer, app.config)
    app.extensions['services'] = services
    return services


def get_services():
    return current_app.extensions['services']
