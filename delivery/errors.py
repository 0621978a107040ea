"""Domain error types raised by the delivery service."""

from __future__ import annotations

from typing import Any


def _sanitize(value: Any) -> str:
    return str(value).replace("\n", " ")


class DomainError(Exception):
    """Base class for domain errors; ``message`` names the kind of failure."""

    message = "domain error"

    def _attach_cause(self, cause: BaseException | None) -> None:
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def _with_cause(self, text: str) -> str:
        if self.cause is not None:
            return f"{text} (cause: {self.cause})"
        return text


class ObjectNotFoundError(DomainError):
    """A requested object does not exist."""

    message = "object not found"

    def __init__(
        self, param_name: str, id: Any, cause: BaseException | None = None
    ) -> None:
        super().__init__(param_name, id)
        self.param_name = param_name
        self.id = id
        self._attach_cause(cause)

    def __str__(self) -> str:
        if self.cause is not None:
            return self._with_cause(
                f"{self.message}: param is: {self.param_name}, ID is: {self.id}"
            )
        return f"{self.message}: {self.id}"


class ValueIsInvalidError(DomainError):
    """A value does not satisfy the rules for its parameter."""

    message = "value is invalid"

    def __init__(self, param_name: str, cause: BaseException | None = None) -> None:
        super().__init__(param_name)
        self.param_name = param_name
        self._attach_cause(cause)

    def __str__(self) -> str:
        return self._with_cause(f"{self.message}: {self.param_name}")


class ValueIsOutOfRangeError(DomainError):
    """A value lies outside its permitted bounds."""

    message = "value is out of range"

    def __init__(
        self,
        param_name: str,
        value: Any,
        min: Any,
        max: Any,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(param_name, value, min, max)
        self.param_name = param_name
        self.value = value
        self.min = min
        self.max = max
        self._attach_cause(cause)

    def __str__(self) -> str:
        # The text is worded as an invalid value, with the value ahead of its name.
        return self._with_cause(
            f"{ValueIsInvalidError.message}: {_sanitize(self.value)} is "
            f"{self.param_name}, min value is {self.min}, max value is {self.max}"
        )


class ValueIsRequiredError(DomainError):
    """A required value is missing."""

    message = "value is required"

    def __init__(self, param_name: str, cause: BaseException | None = None) -> None:
        super().__init__(param_name)
        self.param_name = param_name
        self._attach_cause(cause)

    def __str__(self) -> str:
        return self._with_cause(f"{self.message}: {self.param_name}")


class VersionIsInvalidError(DomainError):
    """A version does not match the expected one."""

    message = "version is invalid"

    def __init__(self, param_name: str, cause: BaseException | None = None) -> None:
        super().__init__(param_name)
        self.param_name = param_name
        self._attach_cause(cause)

    def __str__(self) -> str:
        return self._with_cause(f"{self.message}: {self.param_name}")