# mail_storage_api/api/routes/static_routes.py

from pathlib import Path

from flask import Blueprint, send_from_directory


def build_static_blueprint(public_dir: Path) -> Blueprint:
    """Serve os arquivos de `public_dir` na raiz do site (index.html em "/")."""
    bp_static = Blueprint(
        "public",
        __name__,
        static_folder=str(public_dir),
        static_url_path="",
    )

    @bp_static.get("/")
    def index():
        return send_from_directory(public_dir, "index.html")

    return bp_static
