"""Vehicle records, their text file format and the in-memory fleet registry."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

MODEL_MAX_LEN = 29
PLATE_MAX_LEN = 7
DEFAULT_POSITION = "Deposito"

PathLike = Union[str, "os.PathLike[str]"]


class Category(Enum):
    """Vehicle categories offered by the service, in menu order."""

    UTILITARIA = "Utilitaria"
    SUV = "SUV"
    SPORTIVA = "Sportiva"
    ELETTRICO = "Elettrico"
    MOTO = "Moto"


@dataclass
class Vehicle:
    """A single vehicle of the fleet."""

    id: int
    category: str
    model: str
    plate: str
    position: str = DEFAULT_POSITION
    available: bool = True

    def describe(self) -> str:
        """Return a human-readable, multi-line description."""
        return "\n".join(
            [
                f"ID: {self.id}",
                f"Categoria: {self.category}",
                f"Modello: {self.model} ",
                f"Targa: {self.plate}",
                f"Posizione: {self.position}",
                f"Disponibile: {'Si' if self.available else 'No'}",
            ]
        )

    def to_line(self) -> str:
        """Serialise to one line of the vehicles file."""
        return (
            f"{self.id} {self.category} {self.model} {self.plate} "
            f"{self.position} {1 if self.available else 0}"
        )

    @classmethod
    def from_line(cls, line: str) -> "Vehicle":
        """Parse one line of the vehicles file."""
        fields = line.split()
        if len(fields) != 6:
            raise ValueError(f"malformed vehicle line: {line!r}")
        raw_id, category, model, plate, position, raw_available = fields
        try:
            vehicle_id = int(raw_id)
            available = int(raw_available)
        except ValueError as exc:
            raise ValueError(f"malformed vehicle line: {line!r}") from exc
        return cls(vehicle_id, category, model, plate, position, available == 1)


def read_vehicles(path: PathLike) -> list[Vehicle]:
    """Read every vehicle stored in the file, in file order."""
    with open(path, encoding="utf-8") as handle:
        return [Vehicle.from_line(line) for line in handle if line.strip()]


def write_vehicles(path: PathLike, vehicles: Iterable[Vehicle]) -> None:
    """Write the vehicles to the file, replacing its contents."""
    with open(path, "w", encoding="utf-8") as handle:
        for vehicle in vehicles:
            handle.write(vehicle.to_line() + "\n")


def max_vehicle_id(path: PathLike) -> int:
    """Return the highest vehicle id stored in the file, or 0 if there is none."""
    try:
        vehicles = read_vehicles(path)
    except FileNotFoundError:
        return 0
    return max((vehicle.id for vehicle in vehicles), default=0)


class VehicleRegistry:
    """The fleet, newest vehicle first, backed by a text file."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        self._vehicles: list[Vehicle] = []
        self._last_id = 0

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(list(self._vehicles))

    def __len__(self) -> int:
        return len(self._vehicles)

    def add(self, category: Union[Category, str], model: str, plate: str) -> Vehicle:
        """Create a vehicle with the next free id and put it at the front."""
        label = Category(category).value
        if self._last_id == 0:
            self._last_id = max_vehicle_id(self.path)
        self._last_id += 1
        vehicle = Vehicle(
            id=self._last_id,
            category=label,
            model=model[:MODEL_MAX_LEN],
            plate=plate[:PLATE_MAX_LEN],
        )
        self._vehicles.insert(0, vehicle)
        return vehicle

    def remove(self, vehicle_id: int) -> Vehicle:
        """Remove the vehicle with the given id; KeyError if it is absent."""
        for position, vehicle in enumerate(self._vehicles):
            if vehicle.id == vehicle_id:
                return self._vehicles.pop(position)
        raise KeyError(vehicle_id)

    def get(self, vehicle_id: int) -> Optional[Vehicle]:
        """Return the vehicle with the given id, or None."""
        return next((v for v in self._vehicles if v.id == vehicle_id), None)

    def save(self) -> None:
        """Write the fleet to the backing file."""
        write_vehicles(self.path, self._vehicles)

    def load(self) -> None:
        """Read the backing file, putting each stored vehicle at the front."""
        stored = read_vehicles(self.path)
        self._vehicles[:0] = reversed(stored)

    def clear(self) -> None:
        """Forget every vehicle held in memory."""
        self._vehicles.clear()