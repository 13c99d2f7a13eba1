from flask import Blueprint, jsonify

from mail_storage_api.api.schemas.common_schema import HealthResponse

bp_health = Blueprint("health", __name__)


@bp_health.get("")
def health():
    return jsonify(HealthResponse().model_dump()), 200
