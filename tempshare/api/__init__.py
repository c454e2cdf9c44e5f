"""
TempShare REST API

Upload, retrieval, deletion and sweep endpoints with OpenAPI/Swagger
documentation.
"""

from flask import Blueprint
from flask_restx import Api

api_bp = Blueprint("api", __name__)

# Initialize Flask-RESTX API with Swagger documentation
api = Api(
    api_bp,
    version="1.0",
    title="TempShare API",
    description="Temporary file sharing: uploads expire and are swept automatically",
    doc="/docs",  # Swagger UI will be available at /docs
    license="MIT",
    # No authentication required
)

# Import namespaces after api is created to avoid circular imports
from .namespaces import cron_ns, file_ns, preview_ns, upload_ns  # noqa: E402

api.add_namespace(upload_ns, path="/upload")
api.add_namespace(file_ns, path="/file")
api.add_namespace(preview_ns, path="/api/file")
api.add_namespace(cron_ns, path="/cron")
