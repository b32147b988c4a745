"""Success envelope and response sanitization."""

from typing import Any

from fastapi.responses import JSONResponse

SENSITIVE_KEYS = frozenset({"password", "token", "secret"})


def sanitize(data: Any) -> Any:
    """Recursively drop keys named password/token/secret (any case)."""
    if isinstance(data, dict):
        return {
            key: sanitize(value)
            for key, value in data.items()
            if not (isinstance(key, str) and key.lower() in SENSITIVE_KEYS)
        }
    if isinstance(data, list | tuple):
        return [sanitize(item) for item in data]
    return data


def envelope(data: Any) -> dict[str, Any]:
    """Wrap ``data`` as ``{"success": True, "data": ...}`` unless it already is."""
    if isinstance(data, dict) and "success" in data and "data" in data:
        return data
    return {"success": True, "data": data}


class EnvelopeJSONResponse(JSONResponse):
    """Default response class: sanitizes and wraps every successful payload."""

    def render(self, content: Any) -> bytes:
        return super().render(envelope(sanitize(content)))
