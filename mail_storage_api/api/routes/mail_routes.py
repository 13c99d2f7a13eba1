# mail_storage_api/api/routes/mail_routes.py

from flask import Blueprint, jsonify, request

from mail_storage_api.api.dependencies import get_services
from mail_storage_api.api.schemas.mail_schema import SendMailRequest, SendMailResponse

bp_mail = Blueprint("mail", __name__)


def _request_payload() -> dict:
    # aceita JSON ou application/x-www-form-urlencoded
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


@bp_mail.post("/send")
def send_mail():
    payload = SendMailRequest.model_validate(_request_payload())

    message_id = get_services().mail.send(
        to=payload.to,
        subject=payload.subject,
        text=payload.text,
        html=payload.html,
    )

    return jsonify(SendMailResponse(message_id=message_id).model_dump(by_alias=True)), 200
