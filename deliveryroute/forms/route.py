"""Route and route session forms."""
from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, DecimalField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Optional, NumberRange, Length, AnyOf

from deliveryroute.models import Route


class RouteForm(FlaskForm):
    driver_id = IntegerField('Driver', validators=[InputRequired()])
    name = StringField('Name', validators=[DataRequired(), Length(1, 100)])
    date = StringField('Date', validators=[DataRequired()])
    status = StringField('Status', validators=[Optional(), AnyOf(Route.STATUSES)])
    total_distance = DecimalField('Total Distance', validators=[Optional(), NumberRange(min=0)])
    estimated_time = IntegerField('Estimated Time', validators=[Optional(), NumberRange(min=0)])


class RouteUpdateForm(FlaskForm):
    status = StringField('Status', validators=[Optional(), AnyOf(Route.STATUSES)])
    actual_time = IntegerField('Actual Time', validators=[Optional(), NumberRange(min=0)])


class RouteSessionStartForm(FlaskForm):
    route_id = IntegerField('Route', validators=[InputRequired()])
    driver_id = IntegerField('Driver', validators=[Optional()])
    assistant_name = StringField('Assistant', validators=[Optional(), Length(max=100)])
    start_mileage = DecimalField('Start Mileage', validators=[InputRequired(), NumberRange(min=0)])


class RouteSessionEndForm(FlaskForm):
    session_id = IntegerField('Session', validators=[InputRequired()])
    end_mileage = DecimalField('End Mileage', validators=[InputRequired(), NumberRange(min=0)])
    observations = TextAreaField('Observations', validators=[Optional()])
