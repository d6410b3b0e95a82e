"""Error types shared across the httperrors package."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["ErrorList", "InvalidStatusCodeError"]


class InvalidStatusCodeError(RuntimeError):
    """Raised when a status code outside the status table is used.

    This signals a programming error in the caller. It is never raised for
    user-triggered conditions and the package never catches it.
    """

    def __init__(self, status_code: object) -> None:
        super().__init__(f"Invalid error code: {status_code!r}")
        self.status_code = status_code


class ErrorList(Exception):
    """Combine several errors into a single raisable error.

    The wrapped errors keep the order they were given in.
    """

    def __init__(self, errors: Iterable[BaseException] = ()) -> None:
        self._errors: tuple[BaseException, ...] = tuple(errors)
        super().__init__(self._errors)

    @property
    def errors(self) -> tuple[BaseException, ...]:
        return self._errors

    def error(self) -> str:
        """Return the messages of every contained error."""

        return "errors: [" + " ".join(str(err) for err in self._errors) + "]"

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._errors)!r})"

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)
