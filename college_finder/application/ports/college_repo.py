"""Port interface for college catalog persistence."""

from abc import ABC, abstractmethod

from college_finder.domain.entities.college import College


class CollegeRepository(ABC):
    @abstractmethod
    async def save(self, college: College) -> College:
        """Persist a new college, assigning its id and creation timestamp."""
        ...

    @abstractmethod
    async def get_by_id(self, college_id: str) -> College | None:
        ...

    @abstractmethod
    async def get_all_active(self) -> list[College]:
        ...
