from typing import Optional, Protocol


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None:
        """
        Replaces the clipboard contents with the given text.
        """


class InMemoryClipboard:
    """
    Keeps the last copied text around, for hosts that have no system clipboard to hand over.
    """

    def __init__(self):
        self.text: Optional[str] = None

    async def write_text(self, text: str) -> None:
        self.text = text


__all__ = ['Clipboard', 'InMemoryClipboard']
