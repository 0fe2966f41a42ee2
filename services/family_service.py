"""
Family Service
Family creation and membership listing
"""
from flask import current_app

from utils.permissions import require_family_member


class FamilyService:

    def __init__(self, storage):
        self.storage = storage

    def create_family(self, name, creator):
        """Create a family; *creator* becomes its first active admin."""
        family = self.storage.create_family(name, creator)
        current_app.logger.info('User %s created family %s (id=%s)', creator.id, family.name, family.id)
        return family

    def list_families(self, user):
        return self.storage.get_families_for_user(user.id)

    def list_members(self, family_id, user):
        require_family_member(self.storage, family_id, user.id)
        return self.storage.get_family_members(family_id)
