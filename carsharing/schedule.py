"""Weekly hour-by-hour occupancy of a single vehicle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from carsharing.bookings import Booking, BookingStatus, InvalidTimeSlotError, is_valid_slot

DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24

_DAY_NAMES = (
    "Lunedi",
    "Martedi",
    "Mercoledi",
    "Giovedi",
    "Venerdi",
    "Sabato",
    "Domenica",
)
_INVALID_DAY = "Giorno non valido"
_RULE = "=" * 42


def day_name(day: int) -> str:
    """Return the weekday name for 0 (Monday) to 6 (Sunday)."""
    if 0 <= day < DAYS_PER_WEEK:
        return _DAY_NAMES[day]
    return _INVALID_DAY


@dataclass
class Slot:
    """One hour of one day: whether it is taken and by which booking."""

    occupied: bool = False
    booking_id: int = 0


class VehicleSchedule:
    """A week of hourly slots for one vehicle."""

    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        self._grid: list[list[Slot]] = []
        self.reset()

    def reset(self) -> None:
        """Mark every slot as free."""
        self._grid = [[Slot() for _ in range(HOURS_PER_DAY)] for _ in range(DAYS_PER_WEEK)]

    def update(self, bookings: Iterable[Booking]) -> None:
        """Rebuild the week from the non-cancelled bookings of this vehicle."""
        self.reset()
        for booking in bookings:
            if booking.vehicle_id != self.vehicle_id or booking.status == BookingStatus.CANCELLED:
                continue
            if not is_valid_slot(booking.day, booking.start_hour, booking.end_hour):
                raise InvalidTimeSlotError(
                    f"invalid slot: day {booking.day}, {booking.start_hour}-{booking.end_hour}"
                )
            row = self._grid[booking.day]
            for hour in range(booking.start_hour, booking.end_hour):
                row[hour] = Slot(occupied=True, booking_id=booking.booking_id)

    def slot(self, day: int, hour: int) -> Slot:
        """Return the slot at the given day and hour; IndexError if out of range."""
        if not (0 <= day < DAYS_PER_WEEK and 0 <= hour < HOURS_PER_DAY):
            raise IndexError(f"no slot at day {day}, hour {hour}")
        return self._grid[day][hour]

    def is_available(self, day: int, start_hour: int, end_hour: int) -> bool:
        """Tell whether every hour of a valid slot is free."""
        if not is_valid_slot(day, start_hour, end_hour):
            return False
        return not any(slot.occupied for slot in self._grid[day][start_hour:end_hour])

    def render(self) -> str:
        """Return the week as a text table, X marking taken hours."""
        hours = "".join(
            f"{hour:02d} " if hour == 0 else f"  {hour:02d} " for hour in range(HOURS_PER_DAY + 1)
        )
        lines = [
            "",
            f"Calendario per il veicolo ID: {self.vehicle_id}",
            _RULE,
            "Giorno/Ora  " + hours,
        ]
        for day, row in enumerate(self._grid):
            cells = "".join(" X ||" if slot.occupied else "   ||" for slot in row)
            lines.append(f"{day_name(day):<10}  ||{cells}")
        lines.append(_RULE)
        lines.append("Legenda: X = Occupato, Spazio vuoto = Libero")
        return "\n".join(lines) + "\n"