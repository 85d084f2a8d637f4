"""Order forms."""
from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, DecimalField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Optional, NumberRange, Length, AnyOf

from deliveryroute.models import Order


class OrderForm(FlaskForm):
    order_number = StringField('Order Number', validators=[Optional(), Length(max=50)])
    wms_order_code = StringField('WMS Order Code', validators=[Optional(), Length(max=50)])
    customer_id = IntegerField('Customer', validators=[InputRequired()])
    driver_id = IntegerField('Driver', validators=[Optional()])
    scheduled_date = StringField('Scheduled Date', validators=[DataRequired()])
    notes = TextAreaField('Notes', validators=[Optional()])


class OrderUpdateForm(FlaskForm):
    driver_id = IntegerField('Driver', validators=[Optional()])
    scheduled_date = StringField('Scheduled Date', validators=[Optional()])
    status = StringField('Status', validators=[Optional(), AnyOf(Order.STATUSES)])
    notes = TextAreaField('Notes', validators=[Optional()])


class OrderItemForm(FlaskForm):
    order_id = IntegerField('Order', validators=[InputRequired()])
    product_id = IntegerField('Product', validators=[InputRequired()])
    quantity = IntegerField('Quantity', validators=[InputRequired(), NumberRange(min=1)])
    price = DecimalField('Price', validators=[Optional(), NumberRange(min=0)])


class OrderItemUpdateForm(FlaskForm):
    delivered_quantity = IntegerField('Delivered Quantity', validators=[Optional(), NumberRange(min=0)])
    partial_reason = StringField('Partial Reason', validators=[Optional(), Length(max=200)])
