"""
Authentication Forms
Request bodies for registration and login
"""
import re

from flask import current_app
from wtforms.validators import DataRequired, Email, Length, ValidationError

from utils.forms import ApiForm, TextField


class LoginForm(ApiForm):
    username = TextField('Username', validators=[
        DataRequired(message='Username is required')
    ])
    password = TextField('Password', strip=False, validators=[
        DataRequired(message='Password is required')
    ])


class RegisterForm(ApiForm):
    username = TextField('Username', validators=[
        DataRequired(message='Username is required'),
        Length(min=3, max=64, message='Username must be between 3 and 64 characters')
    ])
    password = TextField('Password', strip=False, validators=[
        DataRequired(message='Password is required')
    ])
    display_name = TextField('Display Name', name='displayName', validators=[
        DataRequired(message='Display name is required'),
        Length(max=100, message='Display name must be at most 100 characters')
    ])
    email = TextField('Email', validators=[
        DataRequired(message='Email is required'),
        Email(message='Invalid email address'),
        Length(max=120)
    ])

    def validate_password(self, field):
        is_valid, error_message = validate_password_strength(field.data)
        if not is_valid:
            raise ValidationError(error_message)


def validate_password_strength(password):
    """
    Validate password meets security requirements
    Returns: (is_valid, error_message)
    """
    min_length = current_app.config.get('PASSWORD_MIN_LENGTH', 8)
    require_uppercase = current_app.config.get('PASSWORD_REQUIRE_UPPERCASE', False)
    require_lowercase = current_app.config.get('PASSWORD_REQUIRE_LOWERCASE', False)
    require_digit = current_app.config.get('PASSWORD_REQUIRE_DIGIT', False)
    require_special = current_app.config.get('PASSWORD_REQUIRE_SPECIAL', False)
    
    errors = []
    
    if len(password) < min_length:
        errors.append(f"at least {min_length} characters")
    
    if require_uppercase and not re.search(r'[A-Z]', password):
        errors.append("an uppercase letter")
    
    if require_lowercase and not re.search(r'[a-z]', password):
        errors.append("a lowercase letter")
    
    if require_digit and not re.search(r'\d', password):
        errors.append("a number")
    
    if require_special and not re.search(r'[!@#$%^&*(),.?":{}|<>]', password):
        errors.append("a special character (!@#$%^&*(),.?\":{}|<>)")
    
    if errors:
        return False, f"Password must contain {', '.join(errors)}"
    
    return True, None
