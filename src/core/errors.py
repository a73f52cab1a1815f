"""
Error taxonomy for the request layer.

Each failure a user can see has its own exception class carrying the HTTP
status it maps to; the API turns any SanumError into {"error": message}.
"""


class SanumError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(SanumError):
    status_code = 400


class InvalidUrlError(SanumError):
    status_code = 400


class SiteUnreachableError(SanumError):
    status_code = 400


class UnsupportedMediaTypeError(SanumError):
    status_code = 400


class PdfTooLargeError(SanumError):
    status_code = 413


class TextExtractionError(SanumError):
    status_code = 422


class NoPlatformsFoundError(SanumError):
    status_code = 404


class MarkerNotFoundError(SanumError):
    status_code = 404


class LLMResponseError(SanumError):
    status_code = 502


class WebsiteFetchError(SanumError):
    status_code = 502


class LLMUnavailableError(SanumError):
    status_code = 503
