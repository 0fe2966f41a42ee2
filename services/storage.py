"""
Persistence layer.

All reads and writes against the four tables go through ``Storage`` so that
services never build queries themselves.  Methods that change data commit
their own transaction; on failure the session is rolled back before the
error propagates, so no partial rows are left behind.
"""
from sqlalchemy.exc import IntegrityError

from models.activities import Activity
from models.family import Family, FamilyMember, ROLE_ADMIN, STATUS_ACTIVE
from models.users import User
from utils.dates import utcnow
from utils.errors import ConflictError, NotFound


class Storage:
    """Typed query/insert/update calls over a Flask-SQLAlchemy session."""

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def _commit(self):
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user(self, user_id):
        return self.session.get(User, user_id)

    def get_user_by_username(self, username):
        return User.query.filter_by(username=username).first()

    def get_user_by_email(self, email):
        return User.query.filter_by(email=email.lower()).first()

    def create_user(self, username, password, display_name, email):
        user = User(username=username, display_name=display_name, email=email.lower())
        user.set_password(password)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError('Username or email already exists')
        return user

    def record_login(self, user):
        user.last_login = utcnow()
        self._commit()

    # ------------------------------------------------------------------
    # Families
    # ------------------------------------------------------------------

    def create_family(self, name, creator):
        """Insert a family and its admin membership in one transaction."""
        family = Family(name=name, created_by_id=creator.id)
        self.session.add(family)
        try:
            self.session.flush()
            self.session.add(FamilyMember(
                family_id=family.id,
                user_id=creator.id,
                invite_email=creator.email,
                role=ROLE_ADMIN,
                status=STATUS_ACTIVE,
                accepted_at=utcnow(),
            ))
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return family

    def get_family(self, family_id):
        return self.session.get(Family, family_id)

    def get_families_for_user(self, user_id):
        """Families in which *user_id* has a membership row of any status."""
        return (
            Family.query
            .join(FamilyMember, FamilyMember.family_id == Family.id)
            .filter(FamilyMember.user_id == user_id)
            .distinct()
            .order_by(Family.id)
            .all()
        )

    # ------------------------------------------------------------------
    # Family members
    # ------------------------------------------------------------------

    def get_family_members(self, family_id):
        return (
            FamilyMember.query
            .filter_by(family_id=family_id)
            .order_by(FamilyMember.id)
            .all()
        )

    def get_membership(self, family_id, user_id):
        return (
            FamilyMember.query
            .filter_by(family_id=family_id, user_id=user_id)
            .order_by(FamilyMember.id)
            .first()
        )

    def get_member_by_email(self, family_id, email):
        return FamilyMember.query.filter_by(family_id=family_id, invite_email=email.lower()).first()

    def get_member_by_token(self, token):
        return FamilyMember.query.filter_by(invite_token=token).first()

    def get_pending_members(self, family_id=None):
        query = FamilyMember.query.filter(FamilyMember.status != STATUS_ACTIVE)
        if family_id is not None:
            query = query.filter_by(family_id=family_id)
        return query.order_by(FamilyMember.id).all()

    def create_family_member(self, family_id, invite_email, role, status, invite_token, user_id=None):
        """Insert a membership row.

        The ``(family_id, invite_email)`` unique constraint is the final word
        on duplicates: a violation is reported as ``ConflictError``.
        """
        member = FamilyMember(
            family_id=family_id,
            user_id=user_id,
            invite_email=invite_email.lower(),
            role=role,
            status=status,
            invite_token=invite_token,
            accepted_at=utcnow() if status == STATUS_ACTIVE else None,
        )
        self.session.add(member)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError('This email has already been invited to the family')
        return member

    def activate_member(self, member, user_id):
        member.activate(user_id)
        self._commit()
        return member

    # ------------------------------------------------------------------
    # Activities
    # ------------------------------------------------------------------

    def get_activity(self, activity_id):
        return self.session.get(Activity, activity_id)

    def get_activities(self, family_id, limit=100):
        return (
            Activity.query
            .filter_by(family_id=family_id)
            .order_by(Activity.start_date, Activity.id)
            .limit(limit)
            .all()
        )

    def create_activity(self, title, category, start_date, family_id, created_by_id, assigned_to_id,
                        description=None, end_date=None, is_all_day=False):
        activity = Activity(
            title=title,
            description=description,
            category=category,
            start_date=start_date,
            end_date=end_date,
            family_id=family_id,
            created_by_id=created_by_id,
            assigned_to_id=assigned_to_id,
            completed=False,
            is_all_day=is_all_day,
        )
        self.session.add(activity)
        self._commit()
        return activity

    def complete_activity(self, activity_id):
        activity = self.get_activity(activity_id)
        if activity is None:
            raise NotFound('Activity not found')
        if not activity.completed:
            activity.completed = True
            self._commit()
        return activity
