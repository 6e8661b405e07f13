"""Result type returned by string generation: Ok[T] | Err[E]."""

from __future__ import annotations

from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """A successful value.

    Examples:
        >>> Ok('qXbT').unwrap()
        'qXbT'
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """A failure carrying an error struct such as ``InvalidLength``.

    Examples:
        >>> Err(InvalidLength(0)).unwrap_or('')
        ''
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the error's exception form.

        Error structs provide it through ``to_exception()``; any other error
        value is reported in a RuntimeError.
        """
        to_exception = getattr(self.error, 'to_exception', None)
        if to_exception is not None:
            raise to_exception()
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        return default


type Result[T, E = Exception] = Ok[T] | Err[E]
