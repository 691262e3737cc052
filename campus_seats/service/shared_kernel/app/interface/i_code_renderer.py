from abc import ABC, abstractmethod


class ICodeRenderer(ABC):
    """Turns a code payload string into a scannable image."""

    media_type: str = 'image/png'

    @abstractmethod
    def render(self, payload: str) -> bytes:
        """
        Render payload to image bytes.

        Raises:
            CodeRenderError: When the payload cannot be rendered
        """
        pass
