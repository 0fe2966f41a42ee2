from wtforms.validators import DataRequired, InputRequired, Length, Optional

from utils.forms import ApiForm, ISODateTimeField, JSONBooleanField, JSONIntegerField, TextField


class ActivityForm(ApiForm):
    title = TextField('Title', validators=[
        DataRequired(message='Title is required'),
        Length(max=200)
    ])
    description = TextField('Description', validators=[Optional(), Length(max=2000)])
    category = TextField('Category', validators=[
        DataRequired(message='Category is required'),
        Length(max=50)
    ])
    start_date = ISODateTimeField('Start Date', name='startDate', validators=[
        InputRequired(message='Start date is required')
    ])
    end_date = ISODateTimeField('End Date', name='endDate', validators=[Optional()])
    is_all_day = JSONBooleanField('All Day', name='isAllDay', default=False)
    family_id = JSONIntegerField('Family', name='familyId', validators=[
        InputRequired(message='Family is required')
    ])
    assigned_to = JSONIntegerField('Assigned To', name='assignedTo', validators=[
        InputRequired(message='Assignee is required')
    ])
