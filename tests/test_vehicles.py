import pytest

from carsharing.vehicles import (
    Category,
    Vehicle,
    VehicleRegistry,
    max_vehicle_id,
    read_vehicles,
    write_vehicles,
)


def _sample(vehicle_id=1, available=True):
    return Vehicle(vehicle_id, "SUV", "Panda", "TEST001", "Deposito", available)


def test_to_line_format():
    assert _sample(3).to_line() == "3 SUV Panda TEST001 Deposito 1"


def test_to_line_unavailable_flag():
    assert _sample(3, available=False).to_line().endswith(" 0")


def test_line_round_trip():
    vehicle = _sample(5, available=False)
    assert Vehicle.from_line(vehicle.to_line()) == vehicle


@pytest.mark.parametrize("line", ["", "1 SUV Panda", "x SUV Panda TEST001 Deposito 1"])
def test_from_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        Vehicle.from_line(line)


def test_describe_availability():
    assert "Disponibile: Si" in _sample().describe()
    assert "Disponibile: No" in _sample(available=False).describe()
    assert "Targa: TEST001" in _sample().describe()


def test_read_write_round_trip(tmp_path):
    path = tmp_path / "veicoli.txt"
    vehicles = [_sample(1), _sample(2, available=False)]
    write_vehicles(path, vehicles)
    assert read_vehicles(path) == vehicles


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_vehicles(tmp_path / "missing.txt")


def test_max_vehicle_id_missing_file(tmp_path):
    assert max_vehicle_id(tmp_path / "missing.txt") == 0


def test_max_vehicle_id_from_file(tmp_path):
    path = tmp_path / "veicoli.txt"
    write_vehicles(path, [_sample(4), _sample(9), _sample(2)])
    assert max_vehicle_id(path) == 9


def test_add_continues_from_stored_ids(tmp_path):
    path = tmp_path / "veicoli.txt"
    write_vehicles(path, [_sample(9)])
    registry = VehicleRegistry(path)
    first = registry.add(Category.SUV, "Panda", "TEST002")
    second = registry.add("Moto", "Vespa", "TEST003")
    assert first.id == 10
    assert second.id == first.id + 1
    assert second.category == "Moto"
    assert first.position == "Deposito"
    assert first.available is True


def test_add_puts_newest_first(tmp_path):
    registry = VehicleRegistry(tmp_path / "veicoli.txt")
    old = registry.add(Category.UTILITARIA, "Panda", "TEST001")
    new = registry.add(Category.ELETTRICO, "Zoe", "TEST002")
    assert list(registry) == [new, old]
    assert old.category == "Utilitaria"


def test_add_truncates_plate_and_model(tmp_path):
    registry = VehicleRegistry(tmp_path / "veicoli.txt")
    vehicle = registry.add(Category.SPORTIVA, "M" * 40, "ABCDEFGHIJ")
    assert vehicle.plate == "ABCDEFG"
    assert len(vehicle.model) < 30


def test_add_rejects_unknown_category(tmp_path):
    registry = VehicleRegistry(tmp_path / "veicoli.txt")
    with pytest.raises(ValueError):
        registry.add("Camion", "Daily", "TEST001")


def test_remove_and_get(tmp_path):
    registry = VehicleRegistry(tmp_path / "veicoli.txt")
    kept = registry.add(Category.SUV, "Panda", "TEST001")
    gone = registry.add(Category.SUV, "Tipo", "TEST002")
    assert registry.remove(gone.id) == gone
    assert len(registry) == 1
    assert registry.get(gone.id) is None
    assert registry.get(kept.id) == kept


def test_remove_missing_raises(tmp_path):
    registry = VehicleRegistry(tmp_path / "veicoli.txt")
    with pytest.raises(KeyError):
        registry.remove(1)


def test_save_then_load_reverses_order(tmp_path):
    path = tmp_path / "veicoli.txt"
    registry = VehicleRegistry(path)
    registry.add(Category.SUV, "Panda", "TEST001")
    registry.add(Category.MOTO, "Vespa", "TEST002")
    registry.save()
    saved = list(registry)

    other = VehicleRegistry(path)
    other.load()
    assert list(other) == list(reversed(saved))


def test_load_prepends_to_existing(tmp_path):
    path = tmp_path / "veicoli.txt"
    write_vehicles(path, [_sample(1)])
    registry = VehicleRegistry(path)
    registry.load()
    registry.load()
    assert [v.id for v in registry] == [1, 1]


def test_clear(tmp_path):
    registry = VehicleRegistry(tmp_path / "veicoli.txt")
    registry.add(Category.SUV, "Panda", "TEST001")
    registry.clear()
    assert len(registry) == 0
    assert list(registry) == []