# Copyright (c) Microsoft. All rights reserved.

from agent_framework.exceptions import (
    AgentFrameworkException,
    ServiceException,
    ServiceInitializationError,
    ServiceResponseException,
)
from anthropic import AnthropicError
from azure.core.exceptions import AzureError
from openai import OpenAIError

__all__ = [
    "AgentQuickstartException",
    "ConfigurationError",
    "RemoteCallError",
    "to_quickstart_error",
]


class AgentQuickstartException(AgentFrameworkException):
    """Base class of the errors raised by the agent quickstart package."""

    def __init__(self, message: str, inner_exception: BaseException | None = None) -> None:
        super().__init__(message, inner_exception)
        self.message = message
        self.inner_exception = inner_exception

    def __str__(self) -> str:
        return self.message


class ConfigurationError(AgentQuickstartException, ServiceInitializationError):
    """A required setting is missing or invalid, raised before any network call is made."""

    pass


class RemoteCallError(AgentQuickstartException, ServiceResponseException):
    """The backend failed a call, the error it reported is kept as ``inner_exception``."""

    @property
    def status_code(self) -> int | None:
        """The HTTP status code reported by the backend, when there is one."""
        inner: BaseException | None = self.inner_exception
        while inner is not None:
            status_code = getattr(inner, "status_code", None)
            if isinstance(status_code, int):
                return status_code
            inner = getattr(inner, "inner_exception", None) or inner.__cause__
        return None


# The errors of the provider SDKs, the agent framework wraps some of them in a ServiceException.
_BACKEND_ERRORS: tuple[type[Exception], ...] = (ServiceException, AzureError, OpenAIError, AnthropicError)


def _message_of(exception: BaseException) -> str:
    message = exception.args[0] if exception.args else None
    return str(message) if message else type(exception).__name__


def to_quickstart_error(exception: Exception) -> Exception:
    """Map an error raised while running an agent to the error surfaced to callers.

    Missing or invalid settings become a ``ConfigurationError`` and whatever a backend reports,
    authentication failures included, becomes a ``RemoteCallError``. Any other error, a failing
    local tool for instance, is returned unchanged.

    Args:
        exception: The error that was raised.

    Returns:
        The error to raise, chained to the original one by the caller.
    """
    if isinstance(exception, (ConfigurationError, RemoteCallError)):
        return exception
    if isinstance(exception, ServiceInitializationError):
        return ConfigurationError(_message_of(exception), exception)
    if isinstance(exception, _BACKEND_ERRORS):
        return RemoteCallError(f"The remote call failed: {_message_of(exception)}", exception)
    return exception
