from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# --- Comment ---

class Comment(BaseModel):
    id: int
    text: str
    model_config = ConfigDict(frozen=True)


# --- Article ---

class Article(BaseModel):
    """
    An article as read from the store, with its comments in row order.

    Instances are immutable; every read builds fresh ones.
    """

    id: int
    title: str = Field(min_length=1)
    authored: datetime
    comments: tuple[Comment, ...] = ()
    model_config = ConfigDict(frozen=True)
