"""Forest repository interface."""

from abc import ABC, abstractmethod

from threadtree.domain.model import Forest


class ForestRepository(ABC):
    """Persistence gateway for the comment forest.

    The whole forest is stored as one snapshot; every save replaces the
    previous one. Implementations live in the persistence layer.
    """

    @abstractmethod
    async def load(self) -> Forest:
        """Load the last saved forest.

        Returns:
            The saved forest, or an empty forest if nothing was saved or the
            snapshot cannot be read
        """
        pass

    @abstractmethod
    async def save(self, forest: Forest) -> None:
        """Replace the saved snapshot with ``forest``.

        Raises:
            PersistenceUnavailableError: If the snapshot could not be written
        """
        pass
