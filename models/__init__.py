# Models package - Import all models for Flask-SQLAlchemy

from models.activities import Activity
from models.family import Family, FamilyMember
from models.users import User

__all__ = [
    'Activity',
    'Family',
    'FamilyMember',
    'User',
]
