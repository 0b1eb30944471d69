"""
narration.py
- Purpose: Narration capability injected into the upload flow.
- Design: The flow never touches a global speech engine; it is handed one of these.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional


class NarrationService(ABC):
    """Contract for a speech engine that reads a summary aloud."""

    @abstractmethod
    def start(self, text: str, on_done: Callable[[], None]) -> None:
        """Begin speaking `text`; call `on_done` when the utterance completes on its own."""

    @abstractmethod
    def pause(self) -> None: ...

    @abstractmethod
    def resume(self) -> None: ...

    @abstractmethod
    def stop(self) -> None:
        """Cancel any in-flight utterance. `on_done` must not fire afterwards."""


class NullNarrationService(NarrationService):
    """
    Headless narration: records what would be spoken.
    Completion only fires on finish(); stop() cancels without completing.
    """

    def __init__(self) -> None:
        self.spoken: list[str] = []
        self._on_done: Optional[Callable[[], None]] = None

    def start(self, text: str, on_done: Callable[[], None]) -> None:
        self.spoken.append(text)
        self._on_done = on_done

    def pause(self) -> None:
        pass

    def resume(self) -> None:
        pass

    def stop(self) -> None:
        self._on_done = None

    def finish(self) -> None:
        """Simulate the utterance ending naturally."""
        cb, self._on_done = self._on_done, None
        if cb is not None:
            cb()
