"""
Authentication Service
Registration and credential checks for session login
"""
from flask import current_app

from utils.errors import AuthenticationRequired, ConflictError


class AuthService:
    """Creates accounts and verifies credentials."""

    def __init__(self, storage):
        self.storage = storage

    def register(self, username, password, display_name, email):
        """Create a new account. Username and email must both be unused."""
        if self.storage.get_user_by_username(username):
            raise ConflictError('Username already exists')
        if self.storage.get_user_by_email(email):
            raise ConflictError('Email already registered')

        user = self.storage.create_user(username, password, display_name, email)
        current_app.logger.info('Registered user %s (id=%s)', user.username, user.id)
        return user

    def authenticate(self, username, password):
        """Return the user for valid credentials.

        The same error is raised for an unknown username and a wrong password
        so callers cannot tell which one was wrong.
        """
        user = self.storage.get_user_by_username(username)
        if user is None or not user.check_password(password):
            current_app.logger.info('Failed login attempt for username %r', username)
            raise AuthenticationRequired('Invalid username or password')

        self.storage.record_login(user)
        return user
