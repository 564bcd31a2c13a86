"""
Success envelope shared by every endpoint.

Failures are rendered by the handlers in banking_api.errors.
"""


def success(message: str | None = None, data=None) -> dict:
    """Build ``{success, message?, data?}``, omitting empty parts."""
    body = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body
