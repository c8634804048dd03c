from flask_babel import lazy_gettext as _l
from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired


def strip(value):
    return value.strip() if isinstance(value, str) else value


# ===============================
# FORMULAIRE CONTACT
# ===============================
class ContactForm(FlaskForm):
    name = StringField(_l('Name'), filters=[strip], validators=[DataRequired()])
    email = StringField(_l('Email'), filters=[strip], validators=[DataRequired()])
    message = TextAreaField(_l('Message'), filters=[strip], validators=[DataRequired()])
