"""Exception hierarchy shared by the scan and HTTP paths."""


class FrizzError(Exception):
    """Base class for errors surfaced to the caller."""


class ScanError(FrizzError):
    """The scan could not start (e.g. the target does not resolve)."""


class RequestBuildError(FrizzError):
    """The HTTP request could not be built from the given options."""


class UploadMethodError(RequestBuildError):
    """A streaming upload was requested with a method that carries no body."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Can not upload the file with HTTP method: {method}")


class TransferError(FrizzError):
    """Connection or disk I/O failed while sending or receiving a body."""


class ResponseDecodeError(FrizzError):
    """An in-memory response body is not valid text in its declared charset."""

    def __init__(self, encoding: str, reason: str):
        self.encoding = encoding
        super().__init__(f"Response body is not valid {encoding}: {reason}")
