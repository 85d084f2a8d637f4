"""Audit logging service."""
from flask import has_request_context, request
from flask_login import current_user

from deliveryroute import db
from deliveryroute.models import AuditLog


class AuditService:
    @staticmethod
    def log(action, entity_type=None, entity_id=None, details=None, user_id=None):
        """Stage an audit row in the current transaction; the caller commits."""
        if user_id is None and has_request_context() and current_user.is_authenticated:
            user_id = current_user.id
        entry = AuditLog(
            user_id=user_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details,
            ip_address=request.remote_addr if has_request_context() else None,
        )
        db.session.add(entry)
        return entry
