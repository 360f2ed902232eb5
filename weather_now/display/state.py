"""Presentation state for the weather search widget.

The widget is always in exactly one of ``Idle``, ``Loading``, ``Loaded`` or
``Failed``. ``WeatherDisplay`` drives the transitions and produces the
notification shown after each search.

Overlapping searches are reconciled by issue order: every ``begin`` hands out
a ticket, and only the result for the latest ticket is applied.
"""

from dataclasses import dataclass
from typing import Callable

from weather_now.logging_config import logger
from weather_now.models.weather import WeatherSnapshot
from weather_now.weather_service.errors import LookupFailure
from weather_now.weather_service.weather import LOOKUP_FAILED_MESSAGE, lookup_weather


@dataclass(frozen=True)
class Idle:
    """No search has run, or the display was cleared."""


@dataclass(frozen=True)
class Loading:
    """A search for ``city`` is in flight."""

    city: str


@dataclass(frozen=True)
class Loaded:
    """The latest search produced a snapshot."""

    snapshot: WeatherSnapshot


@dataclass(frozen=True)
class Failed:
    """The latest search failed."""

    failure: LookupFailure


DisplayState = Idle | Loading | Loaded | Failed


@dataclass(frozen=True)
class Notification:
    """Toast-style message raised after a search completes."""

    title: str
    description: str
    variant: str = "default"


class WeatherDisplay:
    """Search state holder sitting between an input widget and the lookup."""

    def __init__(self, lookup: Callable[[str], WeatherSnapshot] = lookup_weather):
        self._lookup = lookup
        self._latest_ticket = 0
        self._pending_city: str | None = None
        self.state: DisplayState = Idle()
        self.last_snapshot: WeatherSnapshot | None = None
        self.notification: Notification | None = None

    @property
    def is_loading(self) -> bool:
        """True while a search is in flight."""
        return isinstance(self.state, Loading)

    def begin(self, city: str) -> int:
        """Enter ``Loading`` for ``city`` and return the search ticket."""
        self._latest_ticket += 1
        self._pending_city = city
        self.state = Loading(city=city)
        return self._latest_ticket

    def complete(self, ticket: int, snapshot: WeatherSnapshot) -> bool:
        """Apply a successful result. Returns False if the ticket is stale."""
        if self._is_stale(ticket):
            return False
        self.state = Loaded(snapshot=snapshot)
        self.last_snapshot = snapshot
        self.notification = Notification(
            title="Weather Updated",
            description=f"Weather data for {self._pending_city} has been loaded successfully.",
        )
        return True

    def fail(self, ticket: int, failure: LookupFailure) -> bool:
        """Apply a failed result. Returns False if the ticket is stale."""
        if self._is_stale(ticket):
            return False
        self.state = Failed(failure=failure)
        self.notification = Notification(
            title="Error", description=LOOKUP_FAILED_MESSAGE, variant="destructive"
        )
        return True

    def search(self, raw_input: str) -> DisplayState | None:
        """Run a search for the user's input.

        Blank input is ignored and leaves the state unchanged.

        Returns:
            The resulting state, or None if the input was blank.
        """
        city = raw_input.strip()
        if not city:
            return None
        ticket = self.begin(city)
        try:
            snapshot = self._lookup(city)
        except LookupFailure as exc:
            self.fail(ticket, exc)
        except Exception as exc:
            logger.error("SEARCH_UNEXPECTED_ERROR", city=city, error=repr(exc))
            self.fail(ticket, LookupFailure(LOOKUP_FAILED_MESSAGE, cause=exc))
        else:
            self.complete(ticket, snapshot)
        return self.state

    def clear(self) -> None:
        """Return to ``Idle`` and forget the last displayed snapshot."""
        self._latest_ticket += 1
        self._pending_city = None
        self.state = Idle()
        self.last_snapshot = None
        self.notification = None

    def _is_stale(self, ticket: int) -> bool:
        """Whether a newer search or a clear has superseded ``ticket``."""
        if ticket != self._latest_ticket:
            logger.info("STALE_RESULT_DROPPED", ticket=ticket, latest=self._latest_ticket)
            return True
        return False
