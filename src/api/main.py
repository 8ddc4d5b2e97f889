"""REST API for finding meeting times."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, status
from pydantic import BaseModel, Field

from ..scheduler.models import Event, MeetingRequest, TimeRange
from ..scheduler.query import find_meeting_times
from .settings import ApiSettings

logger = logging.getLogger(__name__)


class EventPayload(BaseModel):
    """An existing calendar event, with times in minutes since midnight."""

    name: str = ""
    start: int
    end: int
    attendees: List[str] = Field(default_factory=list)

    def build_event(self) -> Event:
        return Event(
            name=self.name,
            when=TimeRange.from_start_end(self.start, self.end),
            attendees=frozenset(self.attendees),
        )


class MeetingRequestPayload(BaseModel):
    attendees: List[str] = Field(default_factory=list)
    optional_attendees: List[str] = Field(default_factory=list)
    duration_minutes: int = Field(ge=0)

    def build_request(self) -> MeetingRequest:
        return MeetingRequest(
            attendees=frozenset(self.attendees),
            optional_attendees=frozenset(self.optional_attendees),
            duration=self.duration_minutes,
        )


class QueryRequest(BaseModel):
    events: List[EventPayload] = Field(default_factory=list)
    request: MeetingRequestPayload


class RangeResponse(BaseModel):
    start: int
    end: int
    duration_minutes: int
    end_inclusive: bool


class QueryResponse(BaseModel):
    ranges: List[RangeResponse]
    includes_optional: bool


def _serialize_range(time_range: TimeRange) -> RangeResponse:
    return RangeResponse(
        start=time_range.start,
        end=time_range.end,
        duration_minutes=time_range.duration,
        end_inclusive=time_range.end_inclusive,
    )


def create_app(settings: Optional[ApiSettings] = None) -> FastAPI:
    settings = settings or ApiSettings.from_env()
    logging.getLogger("src").setLevel(settings.log_level)

    app = FastAPI(title=settings.title)

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/meetings/query", response_model=QueryResponse)
    def query_meeting_times(payload: QueryRequest) -> QueryResponse:
        try:
            events = [event.build_event() for event in payload.events]
            request = payload.request.build_request()
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

        result = find_meeting_times(events, request)
        logger.debug(
            "Found %s meeting windows across %s events", len(result.ranges), len(events)
        )
        return QueryResponse(
            ranges=[_serialize_range(time_range) for time_range in result.ranges],
            includes_optional=result.includes_optional,
        )

    return app


app = create_app()
