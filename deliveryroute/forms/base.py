"""Bind Flask-WTF forms to JSON request bodies."""
import re

from flask import request
from werkzeug.datastructures import MultiDict

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def camel_to_snake(name):
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def json_payload():
    """The request body as a dict; anything that is not a JSON object is treated as empty."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _formdata(payload):
    data = MultiDict()
    for key, value in payload.items():
        if value is None or isinstance(value, (list, dict)):
            continue
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        data.add(camel_to_snake(key), str(value))
    return data


def bind_json(form_class, payload=None):
    """Instantiate ``form_class`` from the scalar members of a camelCase JSON body.

    Values are stringified so WTForms coerces them the same way it coerces
    HTML form input (``0`` stays a present value). Nested lists and objects
    are left to the caller.
    """
    if payload is None:
        payload = json_payload()
    return form_class(formdata=_formdata(payload), meta={'csrf': False})


def provided_data(form):
    """Field data for the fields actually present in the request, for partial updates."""
    return {name: field.data for name, field in form._fields.items() if field.raw_data}


def first_error(form):
    """Flatten WTForms errors into one message for the JSON error body."""
    for name, errors in form.errors.items():
        if errors:
            field = getattr(form, name, None)
            label = field.label.text if field is not None else name
            return f'{label}: {errors[0]}'
    return 'Invalid request data'
