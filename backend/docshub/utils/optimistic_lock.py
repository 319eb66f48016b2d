from flask import request
from datetime import timezone
from dateutil.parser import parse, ParserError
from docshub.domain.invariants.exceptions import InvariantViolation, VersionConflict


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(entity):
    """
    Enforces optimistic locking using the If-Unmodified-Since header.
    Raises VersionConflict if the entity has been modified since.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ParserError, OverflowError, ValueError):
        raise InvariantViolation("Invalid If-Unmodified-Since header")

    # HTTP-dates carry whole seconds only
    server_ts = normalize_ts(entity.updated_at).replace(microsecond=0)

    if server_ts > client_ts:
        raise VersionConflict("Conflict detected. Resource has been modified.")


def with_last_modified(response, entity):
    """Expose updated_at for clients to echo back as If-Unmodified-Since."""
    response.last_modified = normalize_ts(entity.updated_at)
    return response


def expected_version(data):
    """
    Version the editor loaded, from the JSON body or an If-Match header.
    """
    raw = data.get("version")
    if raw is None:
        raw = request.headers.get("If-Match", "").strip('"') or None

    if raw is None:
        raise InvariantViolation("The version being edited is required")

    try:
        version = int(raw)
    except (TypeError, ValueError):
        raise InvariantViolation("Version must be an integer")

    if version < 1:
        raise InvariantViolation("Version must be at least 1")
    return version
