"""Query-string helpers shared by the API blueprints."""
from flask import abort, jsonify, request

from deliveryroute.forms import first_error
from deliveryroute.utils import parse_date


def required_int_arg(name, label):
    value = request.args.get(name, type=int)
    if value is None:
        abort(400, description=f'{label} is required')
    return value


def date_arg(name='date'):
    try:
        return parse_date(request.args.get(name))
    except ValueError as e:
        abort(400, description=str(e))


def bool_arg(name):
    return request.args.get(name, '').lower() in ('1', 'true', 'yes')


def form_error(form):
    return jsonify({'error': first_error(form)}), 400
