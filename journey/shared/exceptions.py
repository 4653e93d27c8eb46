"""Shared (non-domain) exceptions."""


class ProviderError(Exception):
    """Talking to an external geodata provider failed."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"[{provider}] {message}")


class ProviderTransportError(ProviderError):
    """Network failure, timeout or non-2xx status."""


class ProviderResponseError(ProviderError):
    """The provider answered, but the payload is unusable."""


class KeyMissingError(Exception):
    """Required key is missing."""

    def __init__(self, name: str):
        self.key_name = name
        super().__init__(f"Missing required API key: {name} (configure it in .env)")
