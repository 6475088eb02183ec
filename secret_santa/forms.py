from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length

NAME_MAX_LENGTH = 64


class AddParticipantForm(FlaskForm):
    name = StringField(
        "Name",
        filters=[lambda value: value.strip() if value else value],
        validators=[DataRequired(message="Enter a name first."), Length(max=NAME_MAX_LENGTH)],
        render_kw={"placeholder": "Enter name", "autocomplete": "off"},
    )
    submit = SubmitField("Add Participant")


class RemoveParticipantForm(FlaskForm):
    submit = SubmitField("Remove")
