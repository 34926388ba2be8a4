"""
Protocol-wide error codes.

These values are part of the public API contract and must remain stable.
Each code maps to exactly one HTTP status at the protocol boundary
(see gateway.shared.errors.response).
"""

from enum import Enum


class Code(str, Enum):
    """Symbolic error identifiers returned in every error body."""

    # Owned by the request-handling layer
    BAD_REQUEST = "bad_request"
    MISSING_CONTENT_TYPE = "missing_content_type"
    INVALID_CONTENT_TYPE = "invalid_content_type"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    MISSING_PAYLOAD = "missing_payload"
    MALFORMED_PAYLOAD = "malformed_payload"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INTERNAL = "internal"

    # Owned by the task scheduler
    INDEX_NOT_FOUND = "index_not_found"
    INDEX_ALREADY_EXISTS = "index_already_exists"
    INVALID_INDEX_UID = "invalid_index_uid"
    TASK_NOT_FOUND = "task_not_found"
    NO_SPACE_LEFT_ON_DEVICE = "no_space_left_on_device"
