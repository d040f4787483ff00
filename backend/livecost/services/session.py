"""Comparison session — holds the current input and republishes results.

Every input change produces a new ComparisonInput, recomputes the
comparison synchronously and hands the fresh result to each listener.
Nothing is memoized; the engine is cheap enough to rerun on every edit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from livecost.models.comparison import ComparisonInput

if TYPE_CHECKING:
    from livecost.engine import ComparisonEngine
    from livecost.models.comparison import ComparisonResult

logger = logging.getLogger(__name__)

ResultListener = Callable[["ComparisonResult"], None]


class ComparisonSession:
    """Input state plus the comparison result derived from it.

    Args:
        engine: The engine used to recompute results.
        initial_input: The starting input; computed immediately.

    Raises:
        UnknownCityError: If the initial input names an unknown city.
    """

    def __init__(self, engine: ComparisonEngine, initial_input: ComparisonInput) -> None:
        self._engine = engine
        self._state = initial_input
        self._result = engine.compare(initial_input)
        self._listeners: list[ResultListener] = []

    @property
    def state(self) -> ComparisonInput:
        return self._state

    @property
    def result(self) -> ComparisonResult:
        return self._result

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """Register a listener called with every new result.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: Any) -> ComparisonResult:
        """Apply field changes to the input and recompute.

        Args:
            **changes: ComparisonInput field values to replace.

        Returns:
            The new ComparisonResult.

        Raises:
            pydantic.ValidationError: If a changed value is invalid.
            UnknownCityError: If a changed city id is unknown. The previous
                state and result are kept.
        """
        merged = {**self._state.model_dump(), **changes}
        new_state = ComparisonInput.model_validate(merged)
        new_result = self._engine.compare(new_state)

        self._state = new_state
        self._result = new_result
        logger.debug("Session updated: %s", ", ".join(sorted(changes)))

        for listener in list(self._listeners):
            listener(new_result)
        return new_result
