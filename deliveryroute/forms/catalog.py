"""Customer and product forms."""
from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, DecimalField, TextAreaField, BooleanField
from wtforms.validators import DataRequired, InputRequired, Optional, NumberRange, Length, Email


class CustomerForm(FlaskForm):
    name = StringField('Name', validators=[DataRequired(), Length(1, 200)])
    contact = StringField('Contact', validators=[Optional(), Length(max=100)])
    phone = StringField('Phone', validators=[Optional(), Length(max=20)])
    email = StringField('Email', validators=[Optional(), Email()])
    address = TextAreaField('Address', validators=[DataRequired()])
    latitude = DecimalField('Latitude', validators=[Optional(), NumberRange(min=-90, max=90)])
    longitude = DecimalField('Longitude', validators=[Optional(), NumberRange(min=-180, max=180)])
    schedule = StringField('Schedule', validators=[Optional(), Length(max=100)])
    credit_days = IntegerField('Credit Days', validators=[Optional(), NumberRange(min=0)])


class CustomerUpdateForm(FlaskForm):
    name = StringField('Name', validators=[Optional(), Length(1, 200)])
    contact = StringField('Contact', validators=[Optional(), Length(max=100)])
    phone = StringField('Phone', validators=[Optional(), Length(max=20)])
    email = StringField('Email', validators=[Optional(), Email()])
    address = TextAreaField('Address', validators=[Optional()])
    latitude = DecimalField('Latitude', validators=[Optional(), NumberRange(min=-90, max=90)])
    longitude = DecimalField('Longitude', validators=[Optional(), NumberRange(min=-180, max=180)])
    schedule = StringField('Schedule', validators=[Optional(), Length(max=100)])
    credit_days = IntegerField('Credit Days', validators=[Optional(), NumberRange(min=0)])
    is_active = BooleanField('Active', validators=[Optional()])


class ProductForm(FlaskForm):
    code = StringField('Code', validators=[DataRequired(), Length(1, 50)])
    wms_product_code = StringField('WMS Code', validators=[Optional(), Length(max=50)])
    name = StringField('Name', validators=[DataRequired(), Length(1, 200)])
    description = TextAreaField('Description', validators=[Optional()])
    category = StringField('Category', validators=[Optional(), Length(max=100)])
    price = DecimalField('Price', validators=[InputRequired(), NumberRange(min=0)])
    unit = StringField('Unit', validators=[Optional(), Length(max=20)])
