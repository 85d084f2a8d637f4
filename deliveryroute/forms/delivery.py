"""Delivery action forms (start, complete, not delivered, GPS capture)."""
from flask_wtf import FlaskForm
from wtforms import IntegerField, DecimalField, StringField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Optional, NumberRange, Length


class DeliveryStartForm(FlaskForm):
    order_id = IntegerField('Order ID', validators=[InputRequired()])


class DeliveryCompleteForm(FlaskForm):
    order_id = IntegerField('Order ID', validators=[InputRequired()])
    delivered_amount = DecimalField('Delivered Amount', validators=[Optional(), NumberRange(min=0)])
    signature_data = TextAreaField('Signature', validators=[Optional()])
    photo_url = StringField('Photo URL', validators=[Optional(), Length(max=500)])


class NotDeliveredForm(FlaskForm):
    order_id = IntegerField('Order ID', validators=[InputRequired()])
    reason = StringField('Reason', validators=[DataRequired(), Length(max=200)])
    gps_latitude = DecimalField('GPS Latitude', validators=[Optional(), NumberRange(min=-90, max=90)])
    gps_longitude = DecimalField('GPS Longitude', validators=[Optional(), NumberRange(min=-180, max=180)])


class CaptureGpsForm(FlaskForm):
    order_id = IntegerField('Order ID', validators=[InputRequired()])
    latitude = DecimalField('Latitude', validators=[InputRequired(), NumberRange(min=-90, max=90)])
    longitude = DecimalField('Longitude', validators=[InputRequired(), NumberRange(min=-180, max=180)])
