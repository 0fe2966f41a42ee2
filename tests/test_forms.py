"""
Tests for JSON request binding and validation.
"""
from datetime import datetime

import pytest

from blueprints.activities.forms import ActivityForm
from blueprints.auth.forms import RegisterForm
from blueprints.family.forms import InviteForm
from utils.errors import ValidationError


@pytest.fixture
def request_ctx(app):
    with app.test_request_context():
        yield


def bind(form_class, payload):
    return form_class.from_json(payload).validate_or_raise()


def error_of(form_class, payload):
    with pytest.raises(ValidationError) as exc_info:
        bind(form_class, payload)
    return exc_info.value.message


VALID_ACTIVITY = {
    'title': '  Swim lesson  ',
    'category': 'Sports',
    'startDate': '2024-06-01T09:00:00Z',
    'familyId': 1,
    'assignedTo': 2,
}


class TestApiForm:
    def test_body_must_be_object(self, request_ctx):
        assert error_of(ActivityForm, ['not', 'an', 'object']) == 'Request body must be a JSON object'
        assert error_of(ActivityForm, None) == 'Request body must be a JSON object'

    def test_nested_values_rejected(self, request_ctx):
        payload = dict(VALID_ACTIVITY, title={'text': 'x'})
        assert error_of(ActivityForm, payload) == 'title: Must be a single value.'

    def test_unknown_field(self, request_ctx):
        payload = dict(VALID_ACTIVITY, colour='red')
        assert error_of(ActivityForm, payload) == 'Unrecognized field: colour'

    def test_python_attribute_names_are_not_wire_names(self, request_ctx):
        payload = dict(VALID_ACTIVITY, start_date='2024-06-01T09:00:00Z')
        assert error_of(ActivityForm, payload) == 'Unrecognized field: start_date'

    def test_null_treated_as_missing(self, request_ctx):
        form = bind(ActivityForm, dict(VALID_ACTIVITY, endDate=None, description=None))
        assert form.end_date.data is None
        assert not form.description.data

    def test_non_string_text_rejected(self, request_ctx):
        payload = dict(VALID_ACTIVITY, title=42)
        assert error_of(ActivityForm, payload) == 'title: Not a valid string value.'


class TestActivityForm:
    def test_valid_payload(self, request_ctx):
        form = bind(ActivityForm, VALID_ACTIVITY)

        assert form.title.data == 'Swim lesson'
        assert form.start_date.data == datetime(2024, 6, 1, 9, 0)
        assert form.family_id.data == 1
        assert form.assigned_to.data == 2
        assert form.is_all_day.data is False

    def test_date_only_start(self, request_ctx):
        form = bind(ActivityForm, dict(VALID_ACTIVITY, startDate='2024-06-01'))
        assert form.start_date.data == datetime(2024, 6, 1)

    def test_blank_title(self, request_ctx):
        assert error_of(ActivityForm, dict(VALID_ACTIVITY, title='   ')) == 'title: Title is required'

    def test_category_length(self, request_ctx):
        message = error_of(ActivityForm, dict(VALID_ACTIVITY, category='x' * 51))
        assert message.startswith('category:')

    def test_family_id_not_a_number(self, request_ctx):
        message = error_of(ActivityForm, dict(VALID_ACTIVITY, familyId='smiths'))
        assert message.startswith('familyId:')

    def test_family_id_rejects_boolean(self, request_ctx):
        assert error_of(ActivityForm, dict(VALID_ACTIVITY, familyId=True)) == \
            'familyId: Not a valid integer value.'

    def test_family_id_rejects_float(self, request_ctx):
        assert error_of(ActivityForm, dict(VALID_ACTIVITY, familyId=1.7)) == \
            'familyId: Not a valid integer value.'

    def test_assignee_rejects_signed_string(self, request_ctx):
        assert error_of(ActivityForm, dict(VALID_ACTIVITY, assignedTo='-2')) == \
            'assignedTo: Not a valid integer value.'

    def test_ids_accept_digit_strings(self, request_ctx):
        form = bind(ActivityForm, dict(VALID_ACTIVITY, familyId='1', assignedTo='2'))
        assert (form.family_id.data, form.assigned_to.data) == (1, 2)

    def test_all_day_rejects_strings(self, request_ctx):
        assert error_of(ActivityForm, dict(VALID_ACTIVITY, isAllDay='no')) == \
            'isAllDay: Not a valid boolean value.'

    def test_all_day_rejects_numbers(self, request_ctx):
        assert error_of(ActivityForm, dict(VALID_ACTIVITY, isAllDay=1)) == \
            'isAllDay: Not a valid boolean value.'

    def test_all_day_false(self, request_ctx):
        assert bind(ActivityForm, dict(VALID_ACTIVITY, isAllDay=False)).is_all_day.data is False


class TestRegisterForm:
    def payload(self, **overrides):
        data = {'username': 'carol', 'password': 'password123', 'displayName': 'Carol', 'email': 'c@x.com'}
        data.update(overrides)
        return data

    def test_valid(self, request_ctx):
        form = bind(RegisterForm, self.payload(password=' padded password '))
        assert form.display_name.data == 'Carol'
        assert form.password.data == ' padded password '

    def test_short_password(self, request_ctx):
        assert error_of(RegisterForm, self.payload(password='short')) == \
            'password: Password must contain at least 8 characters'

    def test_policy_is_configurable(self, app, request_ctx):
        app.config['PASSWORD_REQUIRE_DIGIT'] = True
        assert error_of(RegisterForm, self.payload(password='no-digits-here')) == \
            'password: Password must contain a number'

    def test_invalid_email(self, request_ctx):
        assert error_of(RegisterForm, self.payload(email='nope')) == 'email: Invalid email address'


class TestInviteForm:
    def test_role_defaults_to_member(self, request_ctx):
        assert bind(InviteForm, {'inviteEmail': 'd@x.com'}).role.data == 'member'

    def test_unknown_role(self, request_ctx):
        message = error_of(InviteForm, {'inviteEmail': 'd@x.com', 'role': 'owner'})
        assert message.startswith('role:')
