from __future__ import annotations

from typing import Any, Dict, Optional


class ProxyError(Exception):
    """Base for every failure that is answered with a JSON error body."""

    status_code: int = 500
    # Set on errors whose raise site already logged the details.
    logged: bool = False

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def body(self) -> Dict[str, Any]:
        return {"error": self.message}


class MethodNotAllowed(ProxyError):
    status_code = 405

    def __init__(self) -> None:
        super().__init__("Method Not Allowed")


class MissingParameters(ProxyError):
    status_code = 400

    def __init__(self) -> None:
        super().__init__("Missing required parameters: base64Image and prompt.")


class ConfigurationError(ProxyError):
    def __init__(self) -> None:
        super().__init__("Server configuration error: GEMINI_API_KEY is not set.")


class UpstreamError(ProxyError):
    """The image API answered with an error; message is already sanitized."""

    logged = True

    def __init__(self, message: str, *, original_status: Optional[int]) -> None:
        status = original_status if original_status is not None else 500
        super().__init__(message, status_code=status)
        self.original_status = original_status

    def body(self) -> Dict[str, Any]:
        return {"error": self.message, "originalStatus": self.original_status}


class ExtractionError(ProxyError):
    logged = True

    def __init__(self) -> None:
        super().__init__("Failed to extract generated image data.")


class InternalError(ProxyError):
    logged = True

    def __init__(self, exc: BaseException) -> None:
        super().__init__(f"Internal server error: {exc}")


def is_client_error(exc: ProxyError) -> bool:
    return 400 <= exc.status_code < 500
