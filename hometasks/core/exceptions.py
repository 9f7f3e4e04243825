class CredentialError(Exception):
    """Raised when an access token cannot be decoded into an identity."""

    def __init__(self, message: str = "Invalid credential"):
        super().__init__(message)


class InvalidCredentialError(CredentialError):
    """Signature mismatch, malformed token or missing claims."""

    def __init__(self, message: str = "Invalid credential"):
        super().__init__(message)


class ExpiredCredentialError(CredentialError):
    def __init__(self, message: str = "Credential has expired"):
        super().__init__(message)
