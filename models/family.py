"""
Family and FamilyMember models.

A Family groups users together around a shared set of activities.
FamilyMember is the join row between a family and a user; it doubles as the
invite record, so a member starts out ``pending`` with no user attached and
becomes ``active`` once the invite token is accepted.
"""
from extensions import db
from utils.dates import utcnow, isoformat_utc


ROLE_ADMIN = 'admin'
ROLE_MEMBER = 'member'
ROLES = (ROLE_ADMIN, ROLE_MEMBER)

STATUS_PENDING = 'pending'
STATUS_ACTIVE = 'active'


class Family(db.Model):
    """A group of users sharing activities."""
    __tablename__ = 'families'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    created_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    # Relationships
    created_by = db.relationship('User', foreign_keys=[created_by_id])
    members = db.relationship('FamilyMember', back_populates='family',
                              lazy='dynamic', cascade='all, delete-orphan')
    activities = db.relationship('Activity', back_populates='family',
                                 lazy='dynamic', cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'createdBy': self.created_by_id,
            'createdAt': isoformat_utc(self.created_at),
        }

    def __repr__(self):
        return f'<Family {self.name}>'


class FamilyMember(db.Model):
    """Membership of a user in a family, created by an invite."""
    __tablename__ = 'family_members'
    __table_args__ = (
        db.UniqueConstraint('family_id', 'invite_email', name='uq_family_members_family_email'),
    )

    id = db.Column(db.Integer, primary_key=True)
    family_id = db.Column(db.Integer, db.ForeignKey('families.id'), nullable=False, index=True)
    # NULL until the invitee has an account and accepts
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)

    role = db.Column(db.String(20), nullable=False, default=ROLE_MEMBER)  # 'admin' | 'member'
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)  # 'pending' | 'active'

    invite_email = db.Column(db.String(120), nullable=False)
    invite_token = db.Column(db.String(64), unique=True, nullable=True, index=True)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    accepted_at = db.Column(db.DateTime, nullable=True)

    # Relationships
    family = db.relationship('Family', back_populates='members')
    user = db.relationship('User', back_populates='memberships')

    @property
    def is_active(self):
        return self.status == STATUS_ACTIVE

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def activate(self, user_id):
        """Bind the membership to *user_id* and mark it active."""
        self.user_id = user_id
        self.status = STATUS_ACTIVE
        self.accepted_at = utcnow()

    def to_dict(self, include_token=False):
        data = {
            'id': self.id,
            'familyId': self.family_id,
            'userId': self.user_id,
            'role': self.role,
            'status': self.status,
            'inviteEmail': self.invite_email,
            'createdAt': isoformat_utc(self.created_at),
        }
        if include_token:
            data['inviteToken'] = self.invite_token
        return data

    def __repr__(self):
        return f'<FamilyMember {self.invite_email} family={self.family_id} status={self.status}>'
