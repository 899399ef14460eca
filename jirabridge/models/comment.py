"""Display-ready comment derived from a webhook payload."""

from pydantic import BaseModel, Field


class NormalizedComment(BaseModel):
    """Comment fields ready for the chat message template."""

    id: str = Field(default="", description="Comment id as text, empty when absent")
    action: str | None = Field(default=None, description="Action label, None for unmapped event types")
    link: str = Field(default="", description="Comment permalink")
    body: str = Field(default="", description="Escaped body with <br/> line breaks, empty when restricted")
    restricted: bool = Field(default=False, description="Comment carried a visibility restriction")
