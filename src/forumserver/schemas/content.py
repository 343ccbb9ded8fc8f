"""Request / response shapes of the forum content operations.

Threads and messages share one output record, :class:`Content`; a thread's
title travels in its ``text`` field.
"""
from typing import Annotated, List

from pydantic import BaseModel, Field, model_validator

from forumserver.models.base import INT64_MAX

UINT64_MAX = 2**64 - 1

# ids and offsets must fit a signed 64-bit column / OFFSET
UInt63 = Annotated[int, Field(ge=0, le=INT64_MAX)]


class ThreadCreateRequest(BaseModel):
    container_id: UInt63
    user_id: UInt63
    title: str = ""
    # optional first message; empty means the thread starts without one
    text: str = ""


class MessageCreateRequest(BaseModel):
    thread_id: UInt63
    user_id: UInt63
    text: str = ""


class SearchRequest(BaseModel):
    """Filter and half-open page ``[start, end)`` of a listing call."""
    filter: str = ""
    start: UInt63 = 0
    # any uint64; the page limit is capped when the query is built
    end: Annotated[int, Field(ge=0, le=UINT64_MAX)] = 10

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.end < self.start:
            raise ValueError("end must be greater than or equal to start")
        return self


class Response(BaseModel):
    success: bool = False
    id: int | None = None


class Content(BaseModel):
    id: int
    created_at: int = Field(description="Creation time in epoch seconds")
    user_id: int
    text: str


class Contents(BaseModel):
    list: List[Content] = Field(default_factory=list)
    total: int = 0
