"""Role checks for API endpoints."""
import logging
from functools import wraps

from flask import abort, request
from flask_login import current_user

logger = logging.getLogger(__name__)


def role_required(*roles):
    """401 without a session, 403 when the user's role is not in ``roles``."""
    def decorator(f):
        @wraps(f)
        def wrapped(*args, **kwargs):
            if not current_user.is_authenticated:
                abort(401)
            if not current_user.has_role(*roles):
                logger.warning('%s (%s) denied %s %s', current_user.username, current_user.role,
                               request.method, request.path)
                abort(403, description='Insufficient permissions')
            return f(*args, **kwargs)
        return wrapped
    return decorator


def admin_required(f):
    return role_required('admin')(f)
