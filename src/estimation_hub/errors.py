"""Domain error taxonomy.

Components translate lower-level failures (Slack API errors, Gemini errors,
HTTP failures) into these types before returning. Each error carries the HTTP
status and short summary used by the app-level exception handler.
"""


class EstimationHubError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500
    summary: str = "Internal error"

    @property
    def details(self) -> str:
        return str(self)


class ConfigurationError(EstimationHubError):
    """A required credential is missing or still set to a placeholder."""

    status_code = 500
    summary = "Service is not configured"


class AuthenticationError(EstimationHubError):
    """A signature or credential was rejected."""

    status_code = 401
    summary = "Authentication failed"


class ValidationError(EstimationHubError):
    """Caller input is malformed and must be corrected."""

    status_code = 400
    summary = "Invalid request"


class NotFoundError(EstimationHubError):
    """The requested resource does not exist."""

    status_code = 404
    summary = "Not found"


class UpstreamTransportError(EstimationHubError):
    """A network or provider failure talking to Slack, Gemini or the store."""

    status_code = 502
    summary = "Upstream service failed"


class ContractViolationError(EstimationHubError):
    """A response did not match its expected schema.

    The raw offending payload is kept for diagnosis and returned as the
    error details.
    """

    status_code = 502
    summary = "Failed to parse AI response"

    def __init__(self, message: str, payload: str = "") -> None:
        super().__init__(message)
        self.payload = payload

    @property
    def details(self) -> str:
        return self.payload or str(self)


# -- Thread fetch failures --


class ThreadFetchError(EstimationHubError):
    """Base for failures while fetching a Slack thread."""

    status_code = 400
    summary = "Failed to fetch Slack thread"


class SlackAuthError(ThreadFetchError, AuthenticationError):
    """The Slack bot token is invalid or revoked."""

    status_code = 400
    summary = ThreadFetchError.summary


class SlackPermissionError(ThreadFetchError, AuthenticationError):
    """The Slack bot token lacks a required OAuth scope."""

    status_code = 400
    summary = ThreadFetchError.summary


class ChannelNotFoundError(ThreadFetchError, NotFoundError):
    """The channel (or thread) is unknown to the bot token."""

    status_code = 400
    summary = ThreadFetchError.summary


class EmptyThreadError(ThreadFetchError, NotFoundError):
    """Slack returned no messages for the thread."""

    status_code = 400
    summary = ThreadFetchError.summary


class RecordContractError(ContractViolationError):
    """A record store response was not a valid estimations row array."""

    summary = "Unexpected record store response"


class RecordNotFoundError(NotFoundError):
    """No estimation record exists with the given id."""

    summary = "Estimation not found"
