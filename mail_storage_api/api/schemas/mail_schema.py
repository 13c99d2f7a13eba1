# mail_storage_api/api/schemas/mail_schema.py
from pydantic import BaseModel, ConfigDict, Field


class SendMailRequest(BaseModel):
    # números viram texto (ex.: {"text": 5})
    model_config = ConfigDict(coerce_numbers_to_str=True)

    # todos opcionais aqui: a checagem de obrigatórios é feita no MailService
    # para devolver uma única mensagem agregada
    to: str | None = None
    subject: str | None = None
    text: str | None = None
    html: str | None = None


class SendMailResponse(BaseModel):
    success: bool = True
    message: str = "Email sent successfully"
    message_id: str = Field(serialization_alias="messageId")
