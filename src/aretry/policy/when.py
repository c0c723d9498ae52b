r"""Policy routing to another policy depending on the outcome.

Example:
    ```pycon
    >>> from aretry import Pause, When
    >>> from aretry.policy.when import on_exception
    >>> policy = When(on_exception(TimeoutError, Pause(max_attempts=3, delay=1.0)))

    ```
"""

from __future__ import annotations

__all__ = ["NO_MATCH", "Rule", "When", "on_exception", "on_value"]

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, Union

from aretry.policy.base import BasePolicy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Mapping

    from aretry.classifier import FailureClassifier
    from aretry.success import Success

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)

PolicyTarget = Union[BasePolicy, Callable[[Any], BasePolicy]]


class _NoMatch:
    """Sentinel returned when no rule matches an outcome."""

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __bool__(self) -> bool:
        return False


NO_MATCH = _NoMatch()


@dataclass(frozen=True)
class Rule:
    """Associates a matcher with the policy to delegate to.

    Attributes:
        matches: Predicate called with the outcome of an attempt, i.e.
            the settled value or the raised exception.
        policy: The policy to delegate to, or a callable building it
            from the matched outcome (e.g. from a server directive).
    """

    matches: Callable[[Any], bool]
    policy: PolicyTarget

    def resolve(self, outcome: Any) -> BasePolicy:
        if isinstance(self.policy, BasePolicy):
            return self.policy
        return self.policy(outcome)


def on_value(value: Any, policy: PolicyTarget) -> Rule:
    """Return a rule matching outcomes equal to ``value``."""
    return Rule(matches=lambda outcome: outcome == value, policy=policy)


def on_exception(
    exc_type: type[BaseException] | tuple[type[BaseException], ...], policy: PolicyTarget
) -> Rule:
    """Return a rule matching exceptions of the given type(s).

    Example:
        ```pycon
        >>> from aretry import Directly
        >>> from aretry.policy.when import on_exception
        >>> rule = on_exception((TimeoutError, ConnectionError), Directly())
        >>> rule.matches(TimeoutError())
        True
        >>> rule.matches(ValueError())
        False

        ```
    """
    return Rule(matches=lambda outcome: isinstance(outcome, exc_type), policy=policy)


def _is_exception_type(obj: Any) -> bool:
    return isinstance(obj, type) and issubclass(obj, BaseException)


class When(BasePolicy):
    """Delegate to a policy chosen from the outcome of a first attempt.

    The operation is invoked once. Then:

    - an accepted value, or a value no rule matches, is returned as is;
    - a rejected value matched by a rule delegates to the rule's policy;
    - a retryable failure matched by a rule delegates to the rule's policy;
    - a retryable failure no rule matches is re-raised.

    The delegated policy receives the same operation supplier and the
    same success predicate. Rules are evaluated in order and the first
    match wins.

    Args:
        *rules: The rules to evaluate.
        classifier: Optional failure classifier.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import Directly, When
        >>> from aretry.policy.when import on_value
        >>> results = iter(["pending", "pending", "done"])
        >>> async def poll() -> str:
        ...     return next(results)
        ...
        >>> policy = When(on_value("pending", Directly(max_attempts=5)))
        >>> asyncio.run(policy.apply(poll, success=lambda status: status == "done"))
        'done'

        ```
    """

    def __init__(self, *rules: Rule, classifier: FailureClassifier | None = None) -> None:
        super().__init__(classifier=classifier)
        self.rules = tuple(rules)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(rules={len(self.rules)})"

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[Any, PolicyTarget],
        classifier: FailureClassifier | None = None,
    ) -> When:
        """Build a policy from a mapping of outcomes to policies.

        Exception types match exceptions of that type, every other key
        matches outcomes equal to it.

        Args:
            mapping: The outcome-to-policy mapping.
            classifier: Optional failure classifier.

        Returns:
            The conditional dispatch policy.
        """
        rules = [
            on_exception(key, policy) if _is_exception_type(key) else on_value(key, policy)
            for key, policy in mapping.items()
        ]
        return cls(*rules, classifier=classifier)

    def lookup(self, outcome: Any) -> BasePolicy | _NoMatch:
        """Find the policy to delegate to for an outcome.

        Args:
            outcome: The settled value or the raised exception.

        Returns:
            The policy of the first matching rule, or ``NO_MATCH``.
        """
        for rule in self.rules:
            if rule.matches(outcome):
                return rule.resolve(outcome)
        return NO_MATCH

    async def _execute(
        self, operation: Callable[[], Awaitable[T]], success: Success[T]
    ) -> T:
        attempt = await self._attempt(operation, success)
        if attempt.accepted:
            return attempt.result()
        policy = self.lookup(attempt.outcome)
        if policy is NO_MATCH:
            logger.debug(f"No rule matches {attempt.outcome!r}, not retrying")
            return attempt.result()
        logger.debug(f"Outcome {attempt.outcome!r} delegated to {policy!r}")
        return await policy.apply(operation, success)
