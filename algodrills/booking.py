"""A calendar that accepts non-overlapping half-open bookings."""

from __future__ import annotations


class BookingCalendar:
    """Holds [start, end) bookings and refuses any that would overlap."""

    def __init__(self) -> None:
        self._bookings: list[tuple[int, int]] = []

    @property
    def bookings(self) -> tuple[tuple[int, int], ...]:
        """The accepted bookings, in the order they were made."""
        return tuple(self._bookings)

    def book(self, start: int, end: int) -> bool:
        """Add [start, end) unless it overlaps an existing booking."""
        if any(start < booked_end and end > booked_start
               for booked_start, booked_end in self._bookings):
            return False
        self._bookings.append((start, end))
        return True