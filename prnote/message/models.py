"""Data models for the edit buffer."""

from pydantic import BaseModel, ConfigDict


class ParsedMessage(BaseModel):
    """Title and body recovered from an edited buffer.

    Attributes:
        title: First line of the stripped buffer (may be empty).
        body: Remaining lines with leading/trailing blank lines removed.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    body: str = ""

    @property
    def has_title(self) -> bool:
        """True when the message can be submitted."""
        return bool(self.title.strip())
