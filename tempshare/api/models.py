"""
API Models for Swagger documentation
"""

from flask_restx import fields

from tempshare.api import api

# =============================================================================
# Response Models
# =============================================================================

file_descriptor = api.model(
    "FileDescriptor",
    {
        "id": fields.String(
            description="Object key",
            example="1000-604801000-report.pdf",
        ),
        "name": fields.String(description="Original filename", example="report.pdf"),
        "size": fields.Integer(description="Size in bytes"),
        "type": fields.String(description="Declared content type"),
        "url": fields.String(description="Direct link to the stored object"),
        "previewUrl": fields.String(description="Inline preview link served by this API"),
        "fileName": fields.String(description="Object key (same as id)"),
        "isMedia": fields.Boolean(description="True for images and videos"),
        "isImage": fields.Boolean(),
        "isVideo": fields.Boolean(),
        "uploadedAt": fields.String(description="Upload time (ISO 8601, UTC)"),
        "expiresAt": fields.String(description="Expiry time (ISO 8601, UTC)"),
    },
)

upload_response = api.model(
    "UploadResponse",
    {
        "success": fields.Boolean(example=True),
        "file": fields.Nested(file_descriptor),
    },
)

delete_response = api.model(
    "DeleteResponse",
    {
        "success": fields.Boolean(example=True),
        "message": fields.String(example="File deleted successfully"),
        "deletedPath": fields.String(description="Key of the removed object"),
    },
)

sweep_response = api.model(
    "SweepResponse",
    {
        "success": fields.Boolean(example=True),
        "deleted": fields.List(fields.String, description="Keys removed by this run"),
        "count": fields.Integer(description="Number of removed objects"),
        "message": fields.String(description="Present when nothing had expired"),
    },
)

error_response = api.model(
    "ErrorResponse",
    {
        "success": fields.Boolean(example=False),
        "error": fields.String(description="User-facing error message"),
        "code": fields.String(description="Error category"),
    },
)
