"""Interactive text menu of the car sharing service."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from carsharing.bookings import (
    BookingFactory,
    BookingQueue,
    BookingStatus,
    InvalidTimeSlotError,
)
from carsharing.schedule import VehicleSchedule
from carsharing.vehicles import Category, VehicleRegistry

VEHICLES_FILE = "veicoli.txt"
BOOKINGS_FILE = "prenotazioni.txt"

_RESET = "\033[0m"
_GREEN = "\033[0;32m"
_CYAN = "\033[0;36m"
_RED = "\033[0;31m"
_MAGENTA = "\033[0;35m"
_YELLOW = "\033[0;33m"

_BANNER_RULE = "=" * 37
_MENU_RULE = "-" * 37
_ITEM_RULE = "-" * 19
_PRESS_ENTER = "Premi INVIO per continuare..."
_PRESS_ENTER_MENU = "Premi INVIO per tornare al menu..."
_INVALID_CHOICE = "\nScelta non valida. Premi INVIO per riprovare..."


def _parse_int(text: str) -> Optional[int]:
    tokens = text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


class CarSharingApp:
    """Menu-driven front end over the fleet and the booking queue."""

    def __init__(
        self,
        data_dir: Union[str, "os.PathLike[str]"] = ".",
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.vehicles = VehicleRegistry(self.data_dir / VEHICLES_FILE)
        self.bookings = BookingQueue()
        self._factory = BookingFactory()
        isatty = getattr(self.stdout, "isatty", None)
        self._ansi = bool(isatty and isatty())

    @property
    def bookings_path(self) -> Path:
        return self.data_dir / BOOKINGS_FILE

    # -- terminal helpers -------------------------------------------------

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _say(self, text: str = "") -> None:
        self._write(text + "\n")

    def _color(self, code: str) -> None:
        if self._ansi:
            self._write(code)

    def _colored(self, code: str, text: str) -> None:
        self._color(code)
        self._say(text)
        self._color(_RESET)

    def _clear(self) -> None:
        if self._ansi:
            self._write("\033[2J\033[H")

    def _banner(self, title: str, code: str) -> None:
        self._color(code)
        self._say(_BANNER_RULE)
        self._say(f"       {title}")
        self._say(_BANNER_RULE)
        self._color(_RESET)

    def _readline(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input closed")
        return line.rstrip("\r\n")

    def _wait(self, message: str = _PRESS_ENTER) -> None:
        self._write(message)
        self._readline()

    def _read_choice(self) -> Optional[int]:
        self._write("Scelta: ")
        return _parse_int(self._readline())

    def _ask_int(self, prompt: str) -> int:
        while True:
            self._write(prompt)
            value = _parse_int(self._readline())
            if value is not None:
                return value

    def _read_token(self) -> str:
        while True:
            tokens = self._readline().split()
            if tokens:
                return tokens[0]

    def _invalid_choice(self) -> None:
        self._color(_RED)
        self._write(_INVALID_CHOICE)
        self._color(_RESET)
        self._readline()

    def _menu(self, lines: list[str], actions: dict[int, Callable[[], None]], title: str, code: str) -> None:
        while True:
            self._clear()
            self._banner(title, code)
            for line in lines:
                self._say(line)
            self._say(_MENU_RULE)
            choice = self._read_choice()
            if choice == 0:
                return
            action = actions.get(choice) if choice is not None else None
            if action is None:
                self._invalid_choice()
            else:
                action()

    # -- persistence ------------------------------------------------------

    def _save_vehicles(self) -> None:
        try:
            self.vehicles.save()
        except OSError:
            self._say("Impossibile aprire il file.")
            return
        self._say(f"Veicoli salvati nel file {VEHICLES_FILE}")

    def _load_vehicles(self) -> None:
        try:
            self.vehicles.load()
        except OSError:
            self._say("Impossibile aprire il file.")
        except ValueError:
            self._say("Errore nella lettura dei veicoli dal file!")

    def _load_bookings(self, queue: BookingQueue) -> None:
        try:
            rejected = queue.load(self.bookings_path)
        except OSError:
            self._say("Errore nell'apertura del file per la lettura!")
            return
        except ValueError:
            self._say("Errore nella lettura di una prenotazione dal file!")
            return
        for booking in rejected:
            self._say(f"Errore nell'aggiunta della prenotazione {booking.booking_id}!")

    def _show_vehicles(self) -> None:
        for vehicle in self.vehicles:
            self._say(vehicle.describe())
            self._say(_ITEM_RULE)

    # -- main menu --------------------------------------------------------

    def run(self) -> int:
        """Run the main menu until the user quits or input ends; return 0."""
        self._load_vehicles()
        actions: dict[int, Callable[[], None]] = {
            1: self.book_car,
            2: self._show_bookings_notice,
            3: self._return_car_notice,
            4: self.manage_vehicles,
            5: self.show_availability,
        }
        try:
            while True:
                self._clear()
                self._banner("SISTEMA DI CAR SHARING", _MAGENTA)
                self._say("1. Prenota un'auto")
                self._say("2. Visualizza prenotazioni")
                self._say("3. Restituisci auto")
                self._say("4. Gestione Veicoli")
                self._say("5. Visualizza disponibilita")
                self._say("0. Esci")
                self._say(_MENU_RULE)
                choice = self._read_choice()
                if choice == 0:
                    break
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._invalid_choice()
                    continue
                self._clear()
                action()
        except EOFError:
            pass
        self._color(_RED)
        self._say("\nSalvataggio dei dati e chiusura del programma...")
        self._save_vehicles()
        self.vehicles.clear()
        self._color(_RESET)
        return 0

    def _unavailable_feature(self, title: str, code: str) -> None:
        self._banner(title, code)
        self._say("Funzionalità in sviluppo...")
        self._wait(_PRESS_ENTER_MENU)

    def _show_bookings_notice(self) -> None:
        self._unavailable_feature("Visualizza Prenotazioni", _CYAN)

    def _return_car_notice(self) -> None:
        self._unavailable_feature("Restituisci Auto", _YELLOW)

    # -- vehicles ---------------------------------------------------------

    def manage_vehicles(self) -> None:
        """Run the fleet management menu."""
        self._menu(
            [
                "1. Aggiungi veicolo",
                "2. Rimuovi veicolo",
                "3. Visualizza tutti i veicoli",
                "4. Salva veicoli su file",
                "5. Carica veicoli da file",
                "0. Torna al menu principale",
            ],
            {
                1: self._add_vehicle,
                2: self._remove_vehicle,
                3: self._list_vehicles,
                4: self._save_vehicles_and_wait,
                5: self._load_vehicles_and_wait,
            },
            "GESTIONE VEICOLI",
            _YELLOW,
        )

    def _add_vehicle(self) -> None:
        categories = list(Category)
        while True:
            self._write(
                "Inserisci categoria del veicolo: \n"
                " (0 = Utilitaria | 1 = SUV | 2 = Sportiva | 3 = Elettrico | 4 = Moto) "
            )
            index = _parse_int(self._readline())
            if index is not None and 0 <= index < len(categories):
                break
            self._say("Categoria non valida.")
        self._write("Inserisci modello del veicolo: ")
        model = self._readline().strip() or "Sconosciuto"
        self._write("Inserisci targa del veicolo: ")
        plate = self._read_token()
        self.vehicles.add(categories[index], model, plate)
        self._save_vehicles()

    def _remove_vehicle(self) -> None:
        if len(self.vehicles) == 0:
            self._say("La lista dei veicoli è vuota.")
        else:
            vehicle_id = self._ask_int("Inserisci l'id del veicolo da eliminare: ")
            try:
                self.vehicles.remove(vehicle_id)
            except KeyError:
                self._say(f"ERRORE: Veicolo con ID {vehicle_id} non trovato nella lista.")
            else:
                self._say(f"Veicolo con ID {vehicle_id} rimosso con successo.")
        self._save_vehicles()

    def _list_vehicles(self) -> None:
        self._show_vehicles()
        self._wait()

    def _save_vehicles_and_wait(self) -> None:
        self._save_vehicles()
        self._wait()

    def _load_vehicles_and_wait(self) -> None:
        self._load_vehicles()
        self._wait()

    # -- bookings ---------------------------------------------------------

    def book_car(self) -> None:
        """Run the booking menu."""
        self._menu(
            [
                "1. Nuova prenotazione",
                "2. Visualizza prenotazioni attive",
                "3. Cancella prenotazione",
                "4. Modifica stato prenotazione",
                "5. Salva prenotazioni su file",
                "0. Torna al menu principale",
            ],
            {
                1: self._new_booking,
                2: self._list_bookings,
                3: self._cancel_booking,
                4: self._change_status,
                5: self._save_bookings,
            },
            "PRENOTAZIONE AUTO",
            _GREEN,
        )

    def _new_booking(self) -> None:
        self._say("\nVeicoli disponibili:")
        self._show_vehicles()
        self._say("\nInserisci i dati della prenotazione:")
        user_id = self._ask_int("ID Utente: ")
        vehicle_id = self._ask_int("ID Veicolo: ")
        day = self._ask_int("Giorno (0-6, Lun-Dom): ")
        start_hour = self._ask_int("Ora inizio (0-23): ")
        end_hour = self._ask_int("Ora fine (0-23): ")
        priority = self._ask_int("Priorità (più bassa = più prioritaria): ")
        booking = self._factory.create(user_id, vehicle_id, day, start_hour, end_hour, priority)
        try:
            self.bookings.push(booking)
        except InvalidTimeSlotError:
            self._colored(_RED, "\nErrore: Fascia oraria non valida!")
        else:
            self._colored(_GREEN, "\nPrenotazione aggiunta con successo!")
        self._wait()

    def _list_bookings(self) -> None:
        self._say("\nPrenotazioni attive:")
        self._say(_ITEM_RULE)
        self.bookings.clear()
        self._load_bookings(self.bookings)
        drained = [self.bookings.pop() for _ in range(len(self.bookings))]
        for booking in drained:
            self._say(booking.describe())
            self._say(_ITEM_RULE)
        for booking in drained:
            self.bookings.push(booking)
        self._wait()

    def _cancel_booking(self) -> None:
        booking_id = self._ask_int("\nInserisci l'ID della prenotazione da cancellare: ")
        booking = self.bookings.find(booking_id)
        if booking is None:
            self._colored(_RED, "Prenotazione non trovata!")
        else:
            booking.status = BookingStatus.CANCELLED
            self._colored(_GREEN, "Prenotazione cancellata con successo!")
        self._wait()

    def _change_status(self) -> None:
        booking_id = self._ask_int("\nInserisci l'ID della prenotazione: ")
        status = self._ask_int(
            "Nuovo stato (0=In attesa, 1=Confermata, 2=Completata, 3=Cancellata): "
        )
        try:
            self.bookings.set_status(booking_id, status)
        except (KeyError, ValueError):
            self._colored(_RED, "Errore nella modifica dello stato!")
        else:
            self._colored(_GREEN, "Stato modificato con successo!")
        self._wait()

    def _save_bookings(self) -> None:
        try:
            self.bookings.save(self.bookings_path)
        except OSError:
            self._say("Errore nell'apertura del file per la scrittura!")
        self._say("Prenotazioni salvate su file.")
        self._wait()

    # -- availability -----------------------------------------------------

    def show_availability(self) -> None:
        """Ask for a vehicle and show its weekly calendar from the bookings file."""
        self._clear()
        self._banner("VISUALIZZA DISPONIBILITA", _CYAN)
        self._say("\nVeicoli disponibili:")
        self._show_vehicles()
        vehicle_id = self._ask_int(
            "\nInserisci l'ID del veicolo per visualizzare la disponibilita: "
        )
        queue = BookingQueue()
        self._load_bookings(queue)
        schedule = VehicleSchedule(vehicle_id)
        schedule.update(queue)
        self._write(schedule.render())
        self._wait("\n" + _PRESS_ENTER_MENU)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive car sharing menu."""
    parser = argparse.ArgumentParser(prog="carsharing", description="Car sharing management.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the vehicles and bookings files",
    )
    args = parser.parse_args(argv)
    return CarSharingApp(args.data_dir, sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())