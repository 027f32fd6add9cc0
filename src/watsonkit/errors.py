from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from watsonkit.utils import get_logger


logger = get_logger(__name__)


class ErrorKind(str, Enum):
    NOT_MODIFIED = "not_modified"
    BAD_REQUEST = "bad_request"
    UNAUTHORISED = "unauthorised"
    NOT_ACCEPTABLE = "not_acceptable"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    PARAMETER_VALIDATION_FAILED = "parameter_validation_failed"
    DESERIALIZATION_FAILED = "deserialization_failed"
    CONNECTION = "connection"
    UNEXPECTED_STATUS = "unexpected_status"


_TRANSIENT_KINDS = frozenset(
    {
        ErrorKind.CONNECTION,
        ErrorKind.INTERNAL_SERVER_ERROR,
        ErrorKind.SERVICE_UNAVAILABLE,
    }
)


@dataclass(slots=True)
class WatsonError(Exception):
    """Base class for every failure surfaced by watsonkit.

    Two errors compare (and hash) equal when they share type, kind, status and
    context; the underlying transport exception is kept for chaining only.
    """

    message: str
    kind: ErrorKind = ErrorKind.UNEXPECTED_STATUS
    status_code: int | None = None
    context: dict[str, str] = field(default_factory=dict)
    inner_error: Exception | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.args = (self.message,)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message

    def __hash__(self) -> int:
        return hash(
            (
                type(self),
                self.message,
                self.kind,
                self.status_code,
                tuple(sorted(self.context.items())),
            )
        )

    def __reduce__(self) -> tuple[object, ...]:
        return (
            type(self),
            (self.message, self.kind, self.status_code, dict(self.context), self.inner_error),
        )

    @property
    def is_transient(self) -> bool:
        """True when repeating the same call later may succeed."""
        return self.kind in _TRANSIENT_KINDS

    @property
    def recovery_suggestion(self) -> str | None:
        if self.kind is ErrorKind.CONNECTION:
            return "Check your network connection and the configured service URL."
        if self.kind is ErrorKind.PARAMETER_VALIDATION_FAILED:
            return "Verify the API key is correct and has not been revoked."
        if self.kind in {ErrorKind.BAD_REQUEST, ErrorKind.UNAUTHORISED}:
            return "Check the customisation id belongs to the credentials in use."
        if self.kind in {
            ErrorKind.NOT_ACCEPTABLE,
            ErrorKind.UNSUPPORTED_MEDIA_TYPE,
        }:
            return "Send requests with 'Accept: application/json'."
        if self.kind is ErrorKind.DESERIALIZATION_FAILED:
            return "The service returned an unexpected payload; report it if it persists."
        if self.is_transient:
            return "The service is having trouble. Try again later."
        return None


@dataclass(frozen=True, slots=True)
class StatusRule:
    """Meaning of one HTTP status code for one remote operation."""

    kind: ErrorKind
    template: str

    def render(self, context: Mapping[str, str]) -> str:
        return self.template.format_map(_MissingContext(context))


class _MissingContext(dict[str, str]):
    def __missing__(self, key: str) -> str:
        return f"<{key} not provided>"


COMMON_STATUS_RULES: Mapping[int, StatusRule] = MappingProxyType(
    {
        406: StatusRule(
            ErrorKind.NOT_ACCEPTABLE,
            "The request specified an Accept header with an incompatible content type.",
        ),
        415: StatusRule(
            ErrorKind.UNSUPPORTED_MEDIA_TYPE,
            "The request specified an unacceptable media type.",
        ),
        500: StatusRule(
            ErrorKind.INTERNAL_SERVER_ERROR,
            "The service experienced an internal error.",
        ),
        503: StatusRule(
            ErrorKind.SERVICE_UNAVAILABLE,
            "The service is currently unavailable.",
        ),
    }
)


@dataclass(frozen=True, slots=True)
class StatusClassifier:
    """Map the outcome of one remote operation to a single typed error.

    ``rules`` is the operation's closed status table. A status outside the table
    still yields an error of ``error_type`` (kind ``UNEXPECTED_STATUS``) so that
    callers always receive an exception they can handle.
    """

    operation: str
    error_type: type[WatsonError]
    rules: Mapping[int, StatusRule]

    def __post_init__(self) -> None:
        kinds = [rule.kind for rule in self.rules.values()]
        if len(kinds) != len(set(kinds)):
            raise ValueError(
                f"Status rules for {self.operation} map several statuses to one kind"
            )
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    @property
    def statuses(self) -> tuple[int, ...]:
        return tuple(sorted(self.rules))

    def extend(
        self,
        operation: str,
        error_type: type[WatsonError],
        rules: Mapping[int, StatusRule],
    ) -> StatusClassifier:
        merged = dict(self.rules)
        merged.update(rules)
        return StatusClassifier(operation=operation, error_type=error_type, rules=merged)

    def classify(self, status_code: int, **context: str) -> WatsonError:
        rule = self.rules.get(status_code)
        if rule is None:
            logger.warning(
                "Unmapped status code",
                operation=self.operation,
                status_code=status_code,
            )
            return self.error_type(
                message=f"{self.operation} returned unexpected status {status_code}",
                kind=ErrorKind.UNEXPECTED_STATUS,
                status_code=status_code,
                context=dict(context),
            )
        return self.error_type(
            message=rule.render(context),
            kind=rule.kind,
            status_code=status_code,
            context=dict(context),
        )

    def connection_error(self, error: Exception | str) -> WatsonError:
        if isinstance(error, Exception):
            description = str(error) or type(error).__name__
            inner: Exception | None = error
        else:
            description = error or "Connection failed"
            inner = None
        return self.error_type(
            message=description,
            kind=ErrorKind.CONNECTION,
            inner_error=inner,
        )

    def deserialization_error(
        self, error: Exception, status_code: int | None = None
    ) -> WatsonError:
        return self.error_type(
            message=f"Could not decode the {self.operation} response: {error}",
            kind=ErrorKind.DESERIALIZATION_FAILED,
            status_code=status_code,
            inner_error=error,
        )


BASE_CLASSIFIER = StatusClassifier(
    operation="request",
    error_type=WatsonError,
    rules=COMMON_STATUS_RULES,
)


__all__ = [
    "BASE_CLASSIFIER",
    "COMMON_STATUS_RULES",
    "ErrorKind",
    "StatusClassifier",
    "StatusRule",
    "WatsonError",
]
