"""Bookings, their text file format and the priority queue that holds them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class BookingStatus(IntEnum):
    """Life-cycle states of a booking."""

    PENDING = 0
    CONFIRMED = 1
    COMPLETED = 2
    CANCELLED = 3

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    BookingStatus.PENDING: "In attesa",
    BookingStatus.CONFIRMED: "Confermata",
    BookingStatus.COMPLETED: "Completata",
    BookingStatus.CANCELLED: "Cancellata",
}


class InvalidTimeSlotError(ValueError):
    """Raised when a booking's day or hours are out of range."""


def is_valid_slot(day: int, start_hour: int, end_hour: int) -> bool:
    """Tell whether day 0-6 and hours 0-23 form a non-empty slot."""
    return 0 <= day <= 6 and 0 <= start_hour <= 23 and 0 <= end_hour <= 23 and start_hour < end_hour


@dataclass
class Booking:
    """A booking of a vehicle by a user for some hours of one weekday."""

    booking_id: int
    user_id: int
    vehicle_id: int
    day: int
    start_hour: int
    end_hour: int
    status: BookingStatus = BookingStatus.PENDING
    priority: int = 0

    def describe(self) -> str:
        """Return a human-readable, multi-line description."""
        return "\n".join(
            [
                f"ID Prenotazione: {self.booking_id}",
                f"ID Utente: {self.user_id}",
                f"ID Veicolo: {self.vehicle_id}",
                f"Giorno della settimana: {self.day}",
                f"Ora inizio: {self.start_hour}",
                f"Ora fine: {self.end_hour}",
                f"Stato: {BookingStatus(self.status).label}",
                f"Priorità: {self.priority}",
            ]
        )

    def to_line(self) -> str:
        """Serialise to one line of the bookings file."""
        return " ".join(
            str(value)
            for value in (
                self.booking_id,
                self.user_id,
                self.vehicle_id,
                self.day,
                self.start_hour,
                self.end_hour,
                int(self.status),
                self.priority,
            )
        )

    @classmethod
    def from_line(cls, line: str) -> "Booking":
        """Parse one line of the bookings file."""
        fields = line.split()
        if len(fields) != 8:
            raise ValueError(f"malformed booking line: {line!r}")
        try:
            numbers = [int(field) for field in fields]
        except ValueError as exc:
            raise ValueError(f"malformed booking line: {line!r}") from exc
        booking_id, user_id, vehicle_id, day, start, end, status, priority = numbers
        return cls(booking_id, user_id, vehicle_id, day, start, end, BookingStatus(status), priority)


class BookingFactory:
    """Creates pending bookings with consecutive ids."""

    def __init__(self, first_id: int = 1) -> None:
        self._next_id = first_id

    def create(
        self,
        user_id: int,
        vehicle_id: int,
        day: int,
        start_hour: int,
        end_hour: int,
        priority: int,
    ) -> Booking:
        booking = Booking(
            booking_id=self._next_id,
            user_id=user_id,
            vehicle_id=vehicle_id,
            day=day,
            start_hour=start_hour,
            end_hour=end_hour,
            status=BookingStatus.PENDING,
            priority=priority,
        )
        self._next_id += 1
        return booking


class BookingQueue:
    """Min-heap of bookings: the lowest priority number comes out first."""

    def __init__(self) -> None:
        self._heap: list[Booking] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Booking]:
        """Iterate in storage (heap) order."""
        return iter(list(self._heap))

    def push(self, booking: Booking) -> None:
        """Add a booking; InvalidTimeSlotError if its slot is out of range."""
        if not is_valid_slot(booking.day, booking.start_hour, booking.end_hour):
            raise InvalidTimeSlotError(
                f"invalid slot: day {booking.day}, {booking.start_hour}-{booking.end_hour}"
            )
        self._heap.append(booking)
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Booking:
        """Remove and return the most urgent booking; IndexError if empty."""
        if not self._heap:
            raise IndexError("pop from an empty booking queue")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def find(self, booking_id: int) -> Optional[Booking]:
        """Return the booking with the given id, or None."""
        return next((b for b in self._heap if b.booking_id == booking_id), None)

    def find_at(self, day: int, hour: int) -> Optional[Booking]:
        """Return the first booking covering the given day and hour, or None."""
        return next(
            (b for b in self._heap if b.day == day and b.start_hour <= hour < b.end_hour),
            None,
        )

    def set_status(self, booking_id: int, status: Union[BookingStatus, int]) -> None:
        """Change a booking's status; KeyError if no booking has that id."""
        booking = self.find(booking_id)
        if booking is None:
            raise KeyError(booking_id)
        booking.status = BookingStatus(status)

    def clear(self) -> None:
        self._heap.clear()

    def save(self, path: PathLike) -> None:
        """Write every booking to the file in storage order."""
        with open(path, "w", encoding="utf-8") as handle:
            for booking in self._heap:
                handle.write(booking.to_line() + "\n")

    def load(self, path: PathLike) -> list[Booking]:
        """Add the bookings stored in the file.

        Bookings with an invalid slot are skipped and returned. A malformed
        line stops the reading with ValueError; earlier lines stay loaded.
        """
        rejected: list[Booking] = []
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                booking = Booking.from_line(line)
                try:
                    self.push(booking)
                except InvalidTimeSlotError:
                    rejected.append(booking)
        return rejected

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[parent].priority <= heap[index].priority:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child].priority < heap[smallest].priority:
                    smallest = child
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest