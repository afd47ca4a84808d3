"""
Google Calendar operations - Stateless, read-only
"""
import logging
from datetime import datetime
from typing import Dict, Any, List, Optional, Tuple

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from app.core.datetime_utils import ensure_local, to_rfc3339_utc

logger = logging.getLogger(__name__)

PRIMARY_CALENDAR = "primary"


def event_window(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """
    Window of events to fetch, in server local time.

    Starts at midnight of the current day and ends on December 31 23:59:59
    of the current year.
    """
    # Wall-clock values first, then resolve each to its own UTC offset (DST)
    local = ensure_local(now).replace(tzinfo=None)
    start_of_day = local.replace(hour=0, minute=0, second=0, microsecond=0)
    end_of_year = local.replace(month=12, day=31, hour=23, minute=59, second=59, microsecond=0)
    return start_of_day.astimezone(), end_of_year.astimezone()


def build_calendar_service(access_token: str):
    """Calendar API client bound to a single caller's bearer token"""
    credentials = Credentials(token=access_token)
    return build("calendar", "v3", credentials=credentials, cache_discovery=False)


def list_events(access_token: str, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """
    List events on the primary calendar from today until the end of the year.

    Recurring events are expanded into single occurrences and ordered by
    start time. Events are returned exactly as the API sends them.
    """
    time_min, time_max = event_window(now)
    service = build_calendar_service(access_token)

    logger.info(
        "Fetching events from calendar '%s' (%s to %s)",
        PRIMARY_CALENDAR, time_min.isoformat(), time_max.isoformat()
    )

    response = service.events().list(
        calendarId=PRIMARY_CALENDAR,
        timeMin=to_rfc3339_utc(time_min),
        timeMax=to_rfc3339_utc(time_max),
        singleEvents=True,
        orderBy="startTime",
    ).execute()

    events = response.get("items") or []
    logger.info("Retrieved %d events", len(events))
    return events
