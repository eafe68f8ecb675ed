# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""Pydantic response models for the activity endpoints."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActivityLogRow(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    admin_name: str
    action: str             # add | edit | delete | view
    entry_name: str
    details: str
    created_at: datetime


class Pagination(BaseModel):
    model_config = _CAMEL

    current_page: int
    total_pages: int
    total_logs: int
    has_next_page: bool
    has_prev_page: bool


class ActivityLogPage(BaseModel):
    logs: List[ActivityLogRow]
    pagination: Pagination


class ActionCount(BaseModel):
    action: str
    count: int


class ActivityStats(BaseModel):
    model_config = _CAMEL

    stats: List[ActionCount]
    total_activities: int
    recent_activities: List[ActivityLogRow]
