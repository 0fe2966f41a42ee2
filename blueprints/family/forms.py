from wtforms import SelectField
from wtforms.validators import DataRequired, Email, Length

from models.family import ROLES, ROLE_MEMBER
from utils.forms import ApiForm, TextField


class FamilyForm(ApiForm):
    name = TextField('Family Name', validators=[
        DataRequired(message='Family name is required'),
        Length(max=100, message='Family name must be at most 100 characters')
    ])


class InviteForm(ApiForm):
    invite_email = TextField('Email', name='inviteEmail', validators=[
        DataRequired(message='Email is required'),
        Email(message='Invalid email address'),
        Length(max=120)
    ])
    role = SelectField('Role', choices=[(role, role) for role in ROLES], default=ROLE_MEMBER)
