"""Errors raised by the marketplace handlers.

Each error carries the HTTP status the RPC layer answers with, so the
handlers never deal with responses themselves.
"""
from flask import current_app, jsonify
from marshmallow import ValidationError


class MarketError(Exception):
    status_code = 400

    def to_dict(self):
        return {"msg": str(self), "error": type(self).__name__}


class NotFound(MarketError):
    status_code = 404

    def __init__(self, entity, entity_id):
        super().__init__(f"{entity.capitalize()} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class Conflict(MarketError):
    status_code = 409


class ForeignKeyViolation(MarketError):
    status_code = 422


class RoleMismatch(MarketError):
    status_code = 422


class InvalidState(MarketError):
    status_code = 409


class InsufficientFunds(MarketError):
    status_code = 402

    def __init__(self, balance, price):
        super().__init__(f"Insufficient coins: balance {balance}, price {price}")
        self.balance = balance
        self.price = price


def register_error_handlers(blueprint):
    @blueprint.errorhandler(MarketError)
    def handle_market_error(error):
        current_app.logger.warning("%s: %s", type(error).__name__, error)
        return jsonify(error.to_dict()), error.status_code

    @blueprint.errorhandler(ValidationError)
    def handle_validation_error(error):
        return jsonify({
            "msg": "Invalid input",
            "error": "ValidationError",
            "errors": error.messages,
        }), 400
