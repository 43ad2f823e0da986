from fastapi import HTTPException, status


class KnowledgeBaseUnavailableError(RuntimeError):
    """Raised when the FAQ entries or intent patterns cannot be fetched."""

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Knowledge base unavailable ({source})"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class FallbackGenerationError(RuntimeError):
    """Raised by the generative client when no usable completion came back."""


class KnowledgeBaseHTTPException(HTTPException):
    def __init__(self, detail: str = "Knowledge base is temporarily unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
        )


class AssistantHTTPException(HTTPException):
    def __init__(self, detail: str = "Error processing chat request"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
