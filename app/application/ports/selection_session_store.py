from abc import ABC, abstractmethod

from app.domain.entities.category_selection import CategorySelectionState


class SelectionSessionStorePort(ABC):
    @abstractmethod
    def create(self) -> str:
        """Open a session in the unlocked state. Returns session_id."""
        raise NotImplementedError

    @abstractmethod
    def get_state(self, session_id: str) -> CategorySelectionState:
        """Raises SelectionSessionNotFoundError for unknown ids."""
        raise NotImplementedError

    @abstractmethod
    def set_state(self, session_id: str, state: CategorySelectionState) -> None:
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError
