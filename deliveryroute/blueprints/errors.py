"""JSON error handlers."""
import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from deliveryroute import db

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        logger.error('Unhandled error on %s %s', request.method, request.path, exc_info=e)
        return jsonify({'error': 'Internal server error'}), 500
