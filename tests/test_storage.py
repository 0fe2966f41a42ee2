"""
Tests for the persistence layer.
"""
from datetime import datetime
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from models.family import Family, FamilyMember, ROLE_ADMIN, ROLE_MEMBER, STATUS_ACTIVE, STATUS_PENDING
from utils.errors import ConflictError, NotFound


class TestUsers:
    def test_duplicate_username(self, app_ctx, services, user):
        with pytest.raises(ConflictError):
            services.storage.create_user('admin', 'password123', 'Other', 'other@example.com')

    def test_lookup_by_email_is_case_insensitive(self, app_ctx, services, user):
        assert services.storage.get_user_by_email('ADMIN@Example.com').id == user.id

    def test_record_login(self, app_ctx, services, user):
        assert user.last_login is None
        services.storage.record_login(user)
        assert services.storage.get_user(user.id).last_login is not None


class TestFamilies:
    def test_creator_becomes_active_admin(self, app_ctx, services, user, family):
        members = services.storage.get_family_members(family.id)

        assert len(members) == 1
        assert members[0].user_id == user.id
        assert members[0].role == ROLE_ADMIN
        assert members[0].status == STATUS_ACTIVE
        assert members[0].invite_email == 'admin@example.com'
        assert members[0].accepted_at is not None

    def test_failed_membership_insert_leaves_no_family(self, app_ctx, services, user):
        broken_creator = SimpleNamespace(id=user.id, email=None)

        with pytest.raises(IntegrityError):
            services.storage.create_family('Half Made', broken_creator)

        assert Family.query.count() == 0
        assert FamilyMember.query.count() == 0

    def test_families_for_user_are_distinct(self, app_ctx, services, user, family):
        # A second row for the same user must not duplicate the family
        services.storage.create_family_member(
            family.id, 'alias@example.com', ROLE_MEMBER, STATUS_ACTIVE, 'a' * 64, user_id=user.id)

        families = services.storage.get_families_for_user(user.id)
        assert [f.id for f in families] == [family.id]

    def test_pending_rows_do_not_count_for_unrelated_users(self, app_ctx, services, family):
        stranger = services.storage.create_user('stranger', 'password123', 'Stranger', 's@example.com')
        assert services.storage.get_families_for_user(stranger.id) == []


class TestMembers:
    def test_unique_family_email(self, app_ctx, services, family):
        services.storage.create_family_member(family.id, 'x@example.com', ROLE_MEMBER, STATUS_PENDING, 'b' * 64)

        with pytest.raises(ConflictError):
            services.storage.create_family_member(family.id, 'X@example.com', ROLE_MEMBER, STATUS_PENDING, 'c' * 64)

        assert FamilyMember.query.filter_by(family_id=family.id).count() == 2

    def test_activate_member(self, app_ctx, services, user, family):
        member = services.storage.create_family_member(
            family.id, 'y@example.com', ROLE_MEMBER, STATUS_PENDING, 'd' * 64)
        assert member.accepted_at is None

        services.storage.activate_member(member, user.id)

        reloaded = services.storage.get_member_by_token('d' * 64)
        assert reloaded.status == STATUS_ACTIVE
        assert reloaded.user_id == user.id
        assert reloaded.accepted_at is not None

    def test_pending_members_filter(self, app_ctx, services, user, family):
        other = services.storage.create_family('Other Family', user)
        services.storage.create_family_member(family.id, 'p1@example.com', ROLE_MEMBER, STATUS_PENDING, 'e' * 64)
        services.storage.create_family_member(other.id, 'p2@example.com', ROLE_MEMBER, STATUS_PENDING, 'f' * 64)

        assert [m.invite_email for m in services.storage.get_pending_members()] == ['p1@example.com', 'p2@example.com']
        assert [m.invite_email for m in services.storage.get_pending_members(other.id)] == ['p2@example.com']


class TestActivities:
    def _add(self, services, user, family, title, start):
        return services.storage.create_activity(
            title=title, category='Chores', start_date=start,
            family_id=family.id, created_by_id=user.id, assigned_to_id=user.id,
        )

    def test_limit_and_order(self, app_ctx, services, user, family):
        self._add(services, user, family, 'C', datetime(2024, 6, 3))
        self._add(services, user, family, 'A', datetime(2024, 6, 1))
        self._add(services, user, family, 'B', datetime(2024, 6, 2))

        assert [a.title for a in services.storage.get_activities(family.id, limit=2)] == ['A', 'B']

    def test_complete_is_idempotent(self, app_ctx, services, user, family):
        activity = self._add(services, user, family, 'Dishes', datetime(2024, 6, 1))

        services.storage.complete_activity(activity.id)
        services.storage.complete_activity(activity.id)

        assert services.storage.get_activity(activity.id).completed is True

    def test_complete_unknown(self, app_ctx, services):
        with pytest.raises(NotFound):
            services.storage.complete_activity(404)
