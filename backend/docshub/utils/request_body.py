from flask import request
from docshub.domain.invariants.exceptions import InvariantViolation


def json_object():
    """
    JSON object body of the current request; {} when no JSON was sent.
    Arrays and scalars are rejected as invalid input.
    """
    data = request.get_json(silent=True)
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise InvariantViolation("Invalid request body")
    return data
