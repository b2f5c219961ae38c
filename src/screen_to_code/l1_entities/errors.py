"""Domain error types."""


class MissingApiKeyError(Exception):
    """Raised at startup when no provider API key is configured."""


class ProviderResponseError(Exception):
    """Raised when the completion API returns a body without a usable first choice."""


class ImageConversionError(Exception):
    """Raised when a staged image cannot be read into a data URL."""


class ProxyRequestError(Exception):
    """Raised when the proxy cannot be reached or answers with an unusable body."""
