from abc import ABC, abstractmethod


class Page(ABC):
    """Abstract base class for pages shown once the viewer is signed in."""

    title: str = ""

    @abstractmethod
    def render(self):
        pass
