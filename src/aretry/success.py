r"""Success predicates deciding whether a settled value is final.

A policy stops retrying as soon as its success predicate accepts the
value produced by an attempt. The default predicate accepts every value,
so retries only happen on failures.
"""

from __future__ import annotations

__all__ = ["Success"]

from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def _accept(value: Any) -> bool:  # noqa: ARG001
    return True


class Success(Generic[T]):
    """Predicate deciding whether a settled value counts as done.

    Args:
        predicate: Function called with the value produced by an attempt.
            It returns ``True`` if the value is acceptable.

    Example:
        ```pycon
        >>> from aretry import Success
        >>> success = Success(lambda value: value > 10)
        >>> success.evaluate(42)
        True
        >>> success.evaluate(1)
        False
        >>> success.or_(True).evaluate(1)
        True

        ```
    """

    def __init__(self, predicate: Callable[[T], bool]) -> None:
        self.predicate = predicate

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicate={self.predicate!r})"

    def __call__(self, value: T) -> bool:
        return self.evaluate(value)

    def evaluate(self, value: T) -> bool:
        """Evaluate the predicate on a settled value.

        Args:
            value: The value produced by an attempt.

        Returns:
            ``True`` if the value is accepted, otherwise ``False``.
        """
        return bool(self.predicate(value))

    def or_(self, forced: bool) -> Success[T]:
        """Return a predicate that is also satisfied when ``forced`` is true.

        Args:
            forced: If ``True``, the returned predicate accepts every value.

        Returns:
            The combined predicate.

        Example:
            ```pycon
            >>> from aretry import Success
            >>> never = Success(lambda value: False)
            >>> never.or_(False).evaluate(1)
            False
            >>> never.or_(True).evaluate(1)
            True

            ```
        """
        if not forced:
            return self
        return Success(lambda value: forced or self.evaluate(value))

    @classmethod
    def always(cls) -> Success[Any]:
        """Return the default predicate, which accepts every value."""
        return cls(_accept)

    @classmethod
    def of(cls, success: Success[T] | Callable[[T], bool] | None) -> Success[T]:
        """Normalize a predicate argument.

        Args:
            success: A ``Success`` instance, a plain callable, or ``None``
                for the default predicate.

        Returns:
            A ``Success`` instance.
        """
        if success is None:
            return cls.always()
        if isinstance(success, Success):
            return success
        return cls(success)
