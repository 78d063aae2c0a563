from __future__ import annotations

from flask import Response, jsonify

from ..core.exceptions import AttachmentStoreError, MissingFieldsError

UPLOAD_FAILED_MESSAGE = "File upload failed. Please try again."


def missing_fields_response(error: MissingFieldsError) -> Response:
    return Response(str(error), status=error.status_code, mimetype="text/plain")


def attachment_error_response(error: AttachmentStoreError):
    return jsonify({"error": UPLOAD_FAILED_MESSAGE}), error.status_code


def invalid_intent_response() -> Response:
    return Response("Invalid intent", status=400, mimetype="text/plain")
