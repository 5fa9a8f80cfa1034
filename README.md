# carsharing

A small car-sharing manager that runs in the terminal. It keeps a fleet of
vehicles, takes bookings into a priority queue and shows a vehicle's weekly
calendar of booked hours.

## Installation

```
pip install .
```

## Running

```
carsharing
carsharing --data-dir /path/to/data
```

`--data-dir` names the directory that holds the data files. It defaults to
the current directory. The program reads `veicoli.txt` at start-up. It then
opens a menu in Italian:

1. **Prenota un'auto**: the booking menu:
   - *Nuova prenotazione*: lists the vehicles, asks for user, vehicle, day,
     start and end hour and priority, and adds a pending booking. A day or
     hour outside the allowed range is refused.
   - *Visualizza prenotazioni attive*: empties the in-memory queue, reloads it
     from `prenotazioni.txt` and prints the bookings in priority order.
     Bookings that were not saved first are lost.
   - *Cancella prenotazione*: marks a booking as cancelled.
   - *Modifica stato prenotazione*: sets a booking's status
     (0 = In attesa, 1 = Confermata, 2 = Completata, 3 = Cancellata).
   - *Salva prenotazioni su file*: writes the queue to `prenotazioni.txt`.
2. **Visualizza prenotazioni**: only prints a notice that the feature is in
   development.
3. **Restituisci auto**: only prints a notice that the feature is in
   development.
4. **Gestione Veicoli**: add, remove, list, save and load vehicles. The
   vehicles file is saved after every addition or removal.
5. **Visualizza disponibilita**: asks for a vehicle id and prints its
   7 × 24 calendar built from `prenotazioni.txt`. `X` marks a booked hour.
   Cancelled bookings do not count.
0. **Esci**: saves the vehicles and quits. The program does the same when
   input ends.

Colours and screen clearing are used only when the output is a terminal.

## Data files

- `veicoli.txt`: one vehicle per line, fields separated by spaces:
  `id category model plate position available`. Fields are single words,
  so a model name that contains spaces is written out but cannot be read
  back.
- `prenotazioni.txt`: one booking per line:
  `id user vehicle day start end status priority`

Days run from 0 (Monday) to 6 (Sunday). Hours run from 0 to 23. A booking
covers the hours from `start` up to, but not including, `end`. A lower
priority number is served first. New vehicles take the next id after the
highest one in the vehicles file. Booking ids start at 1 each time the
program runs.

## Using it as a library

```python
from carsharing.vehicles import Category, VehicleRegistry
from carsharing.bookings import BookingFactory, BookingQueue
from carsharing.schedule import VehicleSchedule

fleet = VehicleRegistry("veicoli.txt")
car = fleet.add(Category.SUV, "Crossover", "DEMO001")

factory = BookingFactory(1)
queue = BookingQueue()
queue.push(factory.create(user_id=7, vehicle_id=car.id, day=0,
                          start_hour=9, end_hour=12, priority=1))

schedule = VehicleSchedule(car.id)
schedule.update(queue)
print(schedule.is_available(0, 10, 11))   # False
print(schedule.render())
```

- `carsharing.vehicles`: `Vehicle`, `Category`, `VehicleRegistry`
  (`add`, `remove`, `get`, `save`, `load`, `clear`), and `read_vehicles`,
  `write_vehicles`, `max_vehicle_id`.
- `carsharing.bookings`: `Booking`, `BookingStatus`, `BookingFactory`,
  `BookingQueue` (`push`, `pop`, `find`, `find_at`, `set_status`, `clear`,
  `save`, `load`), `is_valid_slot` and `InvalidTimeSlotError`.
- `carsharing.schedule`: `VehicleSchedule` (`reset`, `update`, `slot`,
  `is_available`, `render`), `Slot` and `day_name`.
- `carsharing.cli`: `CarSharingApp` and `main`.

`BookingQueue.push` raises `InvalidTimeSlotError` when the day or the hours
are out of range. `BookingQueue.pop` raises `IndexError` on an empty queue.
`VehicleRegistry.remove` and `BookingQueue.set_status` raise `KeyError` for
an unknown id.

## What it does not do

The booking list in the main menu and returning a car are not implemented.
Nothing checks that a new booking overlaps another one or names a vehicle
that exists. Vehicle availability and position are stored but never changed
by bookings.