import pytest

from carsharing.bookings import Booking, BookingStatus, InvalidTimeSlotError
from carsharing.schedule import Slot, VehicleSchedule, day_name


def test_day_names():
    assert day_name(0) == "Lunedi"
    assert day_name(6) == "Domenica"
    assert day_name(7) == "Giorno non valido"
    assert day_name(-1) == "Giorno non valido"


def test_new_schedule_is_free():
    schedule = VehicleSchedule(3)
    assert schedule.vehicle_id == 3
    assert schedule.slot(0, 0) == Slot()
    assert schedule.is_available(6, 0, 23)


def test_update_marks_booked_hours():
    schedule = VehicleSchedule(3)
    schedule.update([Booking(5, 1, 3, 2, 8, 11)])
    assert schedule.slot(2, 8) == Slot(True, 5)
    assert schedule.slot(2, 10) == Slot(True, 5)
    assert schedule.slot(2, 11) == Slot()
    assert schedule.slot(2, 7) == Slot()


def test_update_ignores_other_vehicles_and_cancelled():
    schedule = VehicleSchedule(3)
    schedule.update(
        [
            Booking(1, 1, 4, 2, 8, 11),
            Booking(2, 1, 3, 2, 8, 11, BookingStatus.CANCELLED),
        ]
    )
    assert schedule.is_available(2, 8, 11)


def test_update_resets_previous_state():
    schedule = VehicleSchedule(3)
    schedule.update([Booking(1, 1, 3, 0, 1, 2)])
    assert not schedule.is_available(0, 1, 2)
    schedule.update([])
    assert schedule.is_available(0, 1, 2)


def test_update_rejects_invalid_slot():
    schedule = VehicleSchedule(3)
    with pytest.raises(InvalidTimeSlotError):
        schedule.update([Booking(1, 1, 3, 9, 1, 2)])


def test_reset_frees_everything():
    schedule = VehicleSchedule(3)
    schedule.update([Booking(1, 1, 3, 4, 0, 23)])
    schedule.reset()
    assert schedule.is_available(4, 0, 23)


@pytest.mark.parametrize(
    "day, start, end",
    [(-1, 1, 2), (7, 1, 2), (0, -1, 2), (0, 1, 24), (0, 5, 5), (0, 6, 5)],
)
def test_is_available_rejects_invalid_ranges(day, start, end):
    assert VehicleSchedule(1).is_available(day, start, end) is False


def test_is_available_detects_overlap():
    schedule = VehicleSchedule(1)
    schedule.update([Booking(1, 1, 1, 3, 10, 12)])
    assert not schedule.is_available(3, 11, 13)
    assert schedule.is_available(3, 12, 14)
    assert schedule.is_available(3, 8, 10)


def test_slot_out_of_range():
    with pytest.raises(IndexError):
        VehicleSchedule(1).slot(0, 24)
    with pytest.raises(IndexError):
        VehicleSchedule(1).slot(-1, 0)


def test_render_layout():
    schedule = VehicleSchedule(3)
    schedule.update([Booking(1, 1, 3, 1, 8, 10)])
    text = schedule.render()
    lines = text.splitlines()
    assert "Calendario per il veicolo ID: 3" in lines
    assert lines[-1] == "Legenda: X = Occupato, Spazio vuoto = Libero"
    assert lines[3].startswith("Giorno/Ora  00 ")
    rows = [line for line in lines if "||" in line]
    assert len(rows) == 7
    assert rows[0].startswith("Lunedi")
    assert rows[1].startswith("Martedi")
    assert text.count(" X ||") == 2
    assert rows[1].count(" X ||") == 2
    assert all(row.count("||") == 25 for row in rows)