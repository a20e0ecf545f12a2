# landingkit/errors.py

"""Exception taxonomy shared by providers and the core pipeline."""


class LandingKitError(Exception):
    """Base class for all landingkit errors."""


class ProviderError(LandingKitError):
    """A single external data source failed.

    Raised for a missing credential, a transport error, a non-2xx
    response or a payload that does not have the expected shape.
    Callers that fan out over several providers record it and move on.
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider}: {reason}")


class ParseError(LandingKitError):
    """Model output could not be turned into a JSON object."""
