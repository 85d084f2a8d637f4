"""Inventory form."""
from flask_wtf import FlaskForm
from wtforms import IntegerField
from wtforms.validators import InputRequired, Optional, NumberRange


class InventoryForm(FlaskForm):
    product_id = IntegerField('Product', validators=[InputRequired()])
    driver_id = IntegerField('Driver', validators=[Optional()])
    quantity = IntegerField('Quantity', validators=[InputRequired(), NumberRange(min=0)])
