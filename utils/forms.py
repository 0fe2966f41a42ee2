"""
Request DTOs for the JSON API.

Request bodies are bound to WTForms forms before any service code runs.
``ApiForm.from_json`` rejects anything that is not a flat JSON object and any
key the form does not declare; ``validate_or_raise`` reports the first failing
field as a ``ValidationError``.

Field names on the wire are camelCase, so form fields declare ``name=``::

    class ActivityForm(ApiForm):
        start_date = ISODateTimeField('Start date', name='startDate',
                                      validators=[InputRequired()])
"""
from dateutil.parser import isoparse
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import BooleanField, Field, IntegerField, StringField

from utils.dates import to_naive_utc
from utils.errors import ValidationError


def strip_whitespace(value):
    return value.strip() if isinstance(value, str) else value


class TextField(StringField):
    """StringField that refuses non-string JSON values (numbers, booleans)."""

    def __init__(self, label=None, validators=None, filters=(), strip=True, **kwargs):
        if strip:
            filters = (strip_whitespace,) + tuple(filters)
        super().__init__(label, validators, filters=filters, **kwargs)

    def process_formdata(self, valuelist):
        if valuelist and not isinstance(valuelist[0], str):
            self.data = None
            raise ValueError(self.gettext('Not a valid string value.'))
        super().process_formdata(valuelist)


class JSONIntegerField(IntegerField):
    """IntegerField that accepts a JSON integer or a string of digits only.

    Booleans and floats are refused instead of being coerced to an int.
    """

    def process_formdata(self, valuelist):
        if valuelist:
            value = valuelist[0]
            if isinstance(value, bool) or not (
                isinstance(value, int) or (isinstance(value, str) and value.isdigit())
            ):
                self.data = None
                raise ValueError(self.gettext('Not a valid integer value.'))
        super().process_formdata(valuelist)


class JSONBooleanField(BooleanField):
    """BooleanField that only accepts JSON true/false."""

    def process_formdata(self, valuelist):
        if not valuelist:
            self.data = False
            return
        if not isinstance(valuelist[0], bool):
            self.data = False
            raise ValueError(self.gettext('Not a valid boolean value.'))
        self.data = valuelist[0]


class ISODateTimeField(Field):
    """ISO-8601 timestamp, stored as naive UTC."""

    def _value(self):
        if self.raw_data:
            return ' '.join(str(v) for v in self.raw_data)
        return self.data.isoformat() if self.data else ''

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        try:
            self.data = to_naive_utc(isoparse(valuelist[0]))
        except (ValueError, TypeError, OverflowError):
            self.data = None
            raise ValueError(self.gettext('Not a valid datetime value.'))


class ApiForm(FlaskForm):
    """Base form for JSON request bodies."""

    class Meta:
        csrf = False

    @classmethod
    def from_json(cls, payload):
        if not isinstance(payload, dict):
            raise ValidationError('Request body must be a JSON object')

        for key, value in payload.items():
            if isinstance(value, (list, dict)):
                raise ValidationError(f'{key}: Must be a single value.')

        # JSON null is treated the same as an omitted field
        form = cls(formdata=MultiDict({k: v for k, v in payload.items() if v is not None}))

        known = {field.name for field in form}
        unknown = sorted(key for key in payload if key not in known)
        if unknown:
            raise ValidationError(f'Unrecognized field: {unknown[0]}')
        return form

    def validate_or_raise(self):
        if not self.validate():
            for field in self:
                if field.errors:
                    raise ValidationError(f'{field.name}: {field.errors[0]}')
        return self
