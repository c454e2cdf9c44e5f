"""
main.py

Flask development server for TempShare.

Notes:
  - Endpoints: POST /upload, GET /file/<key>, DELETE /file/delete/<key>,
    GET /cron/delete-expired, GET /health
  - Swagger docs at /docs
  - Production deployments should run the app under a WSGI server
    (``tempshare.main:app``) and the sweep via Celery beat or an external
    scheduler hitting /cron/delete-expired
"""

import os

from tempshare.app_factory import create_app

app = create_app()


def run() -> None:
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_PORT", 8000))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true"

    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    run()
