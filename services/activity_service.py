"""
Activity Service
Creating, listing and completing family activities
"""
from flask import current_app

from utils.errors import NotFound, ValidationError
from utils.permissions import require_family_member


class ActivityService:

    def __init__(self, storage, list_limit=100, complete_requires_membership=True):
        self.storage = storage
        self.list_limit = list_limit
        self.complete_requires_membership = complete_requires_membership

    def create_activity(self, creator, family_id, title, category, start_date, assigned_to,
                        description=None, end_date=None, is_all_day=False):
        require_family_member(self.storage, family_id, creator.id)

        if end_date is not None and end_date < start_date:
            raise ValidationError('endDate: Must not be before startDate.')

        assignee = self.storage.get_membership(family_id, assigned_to)
        if assignee is None or not assignee.is_active:
            raise ValidationError('assignedTo: Must be an active member of the family.')

        activity = self.storage.create_activity(
            title=title,
            category=category,
            start_date=start_date,
            family_id=family_id,
            created_by_id=creator.id,
            assigned_to_id=assigned_to,
            description=description,
            end_date=end_date,
            is_all_day=is_all_day,
        )
        current_app.logger.info('User %s created activity %s in family %s', creator.id, activity.id, family_id)
        return activity

    def list_activities(self, family_id, user):
        """Up to ``list_limit`` activities, ordered by start date."""
        require_family_member(self.storage, family_id, user.id)
        return self.storage.get_activities(family_id, limit=self.list_limit)

    def complete_activity(self, activity_id, user):
        """Mark an activity completed. Completing twice is a no-op."""
        activity = self.storage.get_activity(activity_id)
        if activity is None:
            raise NotFound('Activity not found')
        if self.complete_requires_membership:
            require_family_member(self.storage, activity.family_id, user.id)

        activity = self.storage.complete_activity(activity_id)
        current_app.logger.info('User %s completed activity %s', user.id, activity_id)
        return activity
