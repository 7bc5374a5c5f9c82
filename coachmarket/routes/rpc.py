"""Single RPC endpoint exposing the marketplace handlers.

``POST /rpc/<procedure>`` takes the procedure input as a JSON object.
Read-only procedures can also be called with ``GET /rpc/<procedure>?input=<json>``.
Successful calls answer ``{"result": ...}``.
"""
import json
from datetime import datetime, timezone

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from coachmarket import services
from coachmarket.errors import register_error_handlers
from coachmarket.extensions import db
from coachmarket.schemas import (
    AcceptFeedbackSchema,
    AthleteIdSchema,
    CreateFeedbackSchema,
    CreatePostSchema,
    FeedbackSchema,
    FeedbackWithCoachInfoSchema,
    LoginSchema,
    PostIdSchema,
    PostSchema,
    PostWithFeedbackSchema,
    SignupSchema,
    UserIdSchema,
    UserSchema,
)

rpc_bp = Blueprint("rpc", __name__)
register_error_handlers(rpc_bp)

QUERY = "query"
MUTATION = "mutation"

# procedure name -> (kind, input schema, handler, output schema)
PROCEDURES = {
    "signup": (MUTATION, SignupSchema(), services.signup, UserSchema()),
    "login": (MUTATION, LoginSchema(), services.login, UserSchema()),
    "getUserById": (QUERY, UserIdSchema(), services.get_user_by_id, UserSchema()),
    "createPost": (MUTATION, CreatePostSchema(), services.create_post, PostSchema()),
    "getAllPosts": (QUERY, None, services.get_all_posts, PostWithFeedbackSchema(many=True)),
    "getPostsByAthlete": (
        QUERY, AthleteIdSchema(), services.get_posts_by_athlete, PostWithFeedbackSchema(many=True)
    ),
    "createFeedback": (MUTATION, CreateFeedbackSchema(), services.create_feedback, FeedbackSchema()),
    "acceptFeedback": (MUTATION, AcceptFeedbackSchema(), services.accept_feedback, FeedbackSchema()),
    "getFeedbackByPost": (
        QUERY, PostIdSchema(), services.get_feedback_by_post, FeedbackWithCoachInfoSchema(many=True)
    ),
}


def _read_input():
    if request.method == "GET":
        raw = request.args.get("input")
        if not raw:
            return {}
        try:
            return json.loads(raw)
        except ValueError:
            raise ValidationError({"input": ["Not valid JSON."]})

    data = request.get_json(silent=True)
    return {} if data is None else data


@rpc_bp.route("/rpc/<procedure>", methods=["GET", "POST"])
def call(procedure):
    entry = PROCEDURES.get(procedure)
    if entry is None:
        return jsonify({"msg": f"Unknown procedure '{procedure}'", "error": "NotFound"}), 404

    kind, input_schema, handler, output_schema = entry
    if request.method == "GET" and kind != QUERY:
        return jsonify({"msg": f"'{procedure}' must be called with POST", "error": "MethodNotAllowed"}), 405

    payload = _read_input()
    kwargs = input_schema.load(payload) if input_schema is not None else {}

    result = handler(db.session, **kwargs)
    if result is None:
        return jsonify({"result": None}), 200
    return jsonify({"result": output_schema.dump(result)}), 200


@rpc_bp.route("/healthcheck", methods=["GET"])
def healthcheck():
    return jsonify({"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}), 200
