"""
API Namespaces - Organized endpoint groups
"""

from flask import Response, current_app, request
from flask_restx import Namespace, Resource, reqparse
from werkzeug.datastructures import FileStorage

from tempshare.api.models import (
    delete_response,
    error_response,
    sweep_response,
    upload_response,
)
from tempshare.application.file_service import FileService
from tempshare.application.sweep_service import ExpirationSweepService
from tempshare.application.upload_service import UploadService
from tempshare.domain.errors import (
    DomainError,
    ErrorCategory,
    StorageError,
    create_error_response,
    error_response_from,
)


def _resolve(service_type):
    return current_app.container.resolve(service_type)


def _unexpected(endpoint: str, error: Exception):
    current_app.logger.exception(f"Unexpected error in {endpoint}: {error}")
    return create_error_response(ErrorCategory.SYSTEM_ERROR, status_code=500)


# =============================================================================
# Upload Namespace
# =============================================================================

upload_ns = Namespace("upload", description="File upload operations")

# Documents the multipart form in Swagger only; Upload.post reads request.files
# itself so a missing file gets the PAYLOAD_MISSING error body.
upload_parser = reqparse.RequestParser()
upload_parser.add_argument(
    "file", location="files", type=FileStorage, required=True, help="File to share"
)


@upload_ns.route("")
class Upload(Resource):
    """Upload a file"""

    @upload_ns.doc("upload_file")
    @upload_ns.expect(upload_parser)
    @upload_ns.response(200, "Success", upload_response)
    @upload_ns.response(400, "Missing or oversize file", error_response)
    @upload_ns.response(500, "Storage error", error_response)
    def post(self):
        """
        Upload a file and receive a shareable link

        The file is stored under a key that encodes its expiry and is removed
        by the sweep once the configured TTL has passed.
        """
        file = request.files.get("file")

        try:
            upload_service = _resolve(UploadService)
            if file is None:
                descriptor = upload_service.upload(None, None)
            else:
                descriptor = upload_service.upload(
                    file.filename,
                    file.stream,
                    content_type=file.mimetype or None,
                    declared_size=file.content_length or None,
                )
            return {"success": True, "file": descriptor.to_dict()}, 200

        except StorageError as e:
            current_app.logger.error(
                f"[UPLOAD] Storage failure: {e} (cause: {e.original_error})"
            )
            return error_response_from(e)
        except DomainError as e:
            return error_response_from(e)
        except Exception as e:
            return _unexpected("/upload", e)


# =============================================================================
# File Namespace - retrieval and deletion
# =============================================================================

file_ns = Namespace("file", description="Stored file operations")


@file_ns.route("/<path:key>")
@file_ns.param("key", "The object key")
class FileContentResource(Resource):
    """Serve a stored file inline"""

    @file_ns.doc("get_file")
    @file_ns.response(200, "File content")
    @file_ns.response(400, "Bad Request", error_response)
    @file_ns.response(404, "File Not Found", error_response)
    def get(self, key):
        """
        Stream a stored file

        The content type is inferred from the key's extension and the file is
        served for inline rendering rather than forced download.
        """
        try:
            content = _resolve(FileService).get_file(key)
        except DomainError as e:
            current_app.logger.info(f"[FILE] {key}: {e}")
            return error_response_from(e)
        except Exception as e:
            return _unexpected("/file", e)

        filename = content.key.rsplit("/", 1)[-1].replace('"', "")
        return Response(
            content.data,
            status=200,
            content_type=content.content_type,
            headers={"Content-Disposition": f'inline; filename="{filename}"'},
        )


@file_ns.route("/delete/<path:key>")
@file_ns.param("key", "The object key")
class FileDelete(Resource):
    """Delete a stored file"""

    @file_ns.doc("delete_file")
    @file_ns.response(200, "File deleted", delete_response)
    @file_ns.response(400, "Bad Request", error_response)
    @file_ns.response(404, "File Not Found", error_response)
    @file_ns.response(500, "Storage error", error_response)
    def delete(self, key):
        """
        Delete a stored file before it expires
        """
        try:
            deleted = _resolve(FileService).delete_file(key)
            return {
                "success": True,
                "message": "File deleted successfully",
                "deletedPath": deleted,
            }, 200

        except StorageError as e:
            current_app.logger.error(
                f"[DELETE] Storage failure for {key}: {e} (cause: {e.original_error})"
            )
            return error_response_from(e)
        except DomainError as e:
            return error_response_from(e)
        except Exception as e:
            return _unexpected("/file/delete", e)


# =============================================================================
# Preview Namespace - same content under the preview prefix
# =============================================================================

preview_ns = Namespace("preview", description="Inline file previews")


@preview_ns.route("/<path:key>")
@preview_ns.param("key", "The object key")
class FilePreview(FileContentResource):
    """Serve a stored file inline under the preview prefix"""


# =============================================================================
# Cron Namespace - externally triggered maintenance
# =============================================================================

cron_ns = Namespace("cron", description="Scheduled maintenance triggers")


@cron_ns.route("/delete-expired")
class DeleteExpired(Resource):
    """Run the expiration sweep"""

    @cron_ns.doc("delete_expired_files")
    @cron_ns.response(200, "Sweep completed", sweep_response)
    @cron_ns.response(500, "Listing or deletion failed", error_response)
    def get(self):
        """
        Delete every file whose expiry has passed

        Meant to be called by an external scheduler. Safe to call repeatedly
        or concurrently.
        """
        try:
            result = _resolve(ExpirationSweepService).sweep()
        except StorageError as e:
            current_app.logger.error(f"[CRON] Sweep failed: {e} (cause: {e.original_error})")
            return error_response_from(e)
        except Exception as e:
            return _unexpected("/cron/delete-expired", e)

        if not result.succeeded:
            return create_error_response(
                ErrorCategory.STORAGE_DELETE_FAILED,
                status_code=500,
                context={
                    "error": "Failed to delete some files",
                    "deleted": result.deleted,
                    "count": result.count,
                    "failed": sorted(result.failed),
                },
            )

        if not result.deleted:
            return {"success": True, "message": "No expired files"}, 200

        return {"success": True, "deleted": result.deleted, "count": result.count}, 200
