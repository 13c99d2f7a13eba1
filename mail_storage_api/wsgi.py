# gunicorn mail_storage_api.wsgi:app
from mail_storage_api.main import create_app

app = create_app()
