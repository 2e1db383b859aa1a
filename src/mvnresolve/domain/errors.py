from typing import Optional


class MavenError(Exception):
    """base class for exceptions in mvnresolve."""
    pass


class InvalidIdentifierError(MavenError, ValueError):
    """raised when an artifact identifier string cannot be used."""
    def __init__(self, value: str, message: str):
        self.value = value
        super().__init__(message)


class InvalidFormatError(InvalidIdentifierError):
    """raised when an identifier does not have exactly two colon-delimited segments."""
    def __init__(self, value: str):
        super().__init__(
            value,
            f"Invalid maven artifact specified: '{value}'. Expected format <GROUP>:<NAME>"
        )


class UnsupportedVersionedInputError(InvalidIdentifierError):
    """raised when an identifier carries a version segment."""
    def __init__(self, value: str):
        super().__init__(
            value,
            f"Parsing of artifact specification with version number is not yet supported. "
            f"Input: '{value}'. Only supported: <GROUP>:<NAME>"
        )


class ResolutionError(MavenError):
    """base class for failures while resolving an artifact against a repository."""
    pass


class MetadataDecodeError(ResolutionError):
    """raised when a metadata document does not have the expected shape."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not decode maven metadata: {reason}")


class AuthenticationError(ResolutionError):
    """raised when the repository rejects the credentials (HTTP 401)."""
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Repository rejected the credentials for {url}")


class UnexpectedStatusError(ResolutionError):
    """raised for any HTTP status the resolver does not handle."""
    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        location = f" from {url}" if url else ""
        super().__init__(f"Unexpected HTTP status {status_code}{location}")


class InvalidRequestUrlError(ResolutionError):
    """raised when the metadata url cannot be built or leaves the repository base."""
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid metadata url {url!r}: {reason}")


class TransportError(ResolutionError):
    """raised when the request or the body read fails below the HTTP layer."""
    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Error while downloading metadata from {url}: {cause}")
