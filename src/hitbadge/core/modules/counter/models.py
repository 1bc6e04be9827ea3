"""Visitor counters addressed by opaque identifiers."""

from pydantic import Field

from hitbadge.core.db import MongoModel


class Counter(MongoModel):
    """One visitor counter.

    The id is generated server side when the counter is created and never
    chosen by clients. `count` starts at 0 and only ever grows by one per
    increment; records are never deleted.
    """

    count: int = Field(default=0, ge=0)
