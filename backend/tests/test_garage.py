"""Tests for the locally persisted garage of saved configurations."""

import json

import pytest

from car_configurator.client.garage import DuplicateConfigurationError, Garage
from car_configurator.utils.pricing import calculate_total_price


@pytest.fixture
def garage_path(tmp_path):
    return tmp_path / "garage" / "saved_cars.json"


@pytest.fixture
def garage(garage_path):
    return Garage(garage_path)


def configure(car, selected):
    return {
        "base_car": car,
        "selected_options": selected,
        "total_price": calculate_total_price(float(car["base_price"]), selected),
    }


class TestGarage:
    def test_starts_empty_without_file(self, garage):
        assert garage.saved_cars == []

    def test_add_assigns_id_and_persists(self, garage, garage_path, car, option):
        saved = garage.add(configure(car, [option(1), option(5)]))

        assert isinstance(saved["garage_id"], int)
        on_disk = json.loads(garage_path.read_text())
        assert len(on_disk) == 1
        assert on_disk[0]["garage_id"] == saved["garage_id"]
        assert [o["id"] for o in on_disk[0]["selected_options"]] == [1, 5]

    def test_reload_from_disk(self, garage, garage_path, car, option):
        garage.add(configure(car, [option(2)]))
        assert Garage(garage_path).saved_cars == garage.saved_cars

    def test_duplicate_rejected_regardless_of_order(self, garage, car, option):
        garage.add(configure(car, [option(1), option(5), option(9)]))
        with pytest.raises(DuplicateConfigurationError):
            garage.add(configure(car, [option(9), option(1), option(5)]))
        assert len(garage.saved_cars) == 1

    def test_same_options_on_other_model_is_not_duplicate(self, garage, car, option):
        other_car = dict(car, id=2, name="Ferrari F8 Tributo", base_price="280000.00")
        garage.add(configure(car, [option(1)]))
        garage.add(configure(other_car, [option(1)]))
        assert len(garage.saved_cars) == 2

    def test_different_option_set_is_not_duplicate(self, garage, car, option):
        garage.add(configure(car, [option(1)]))
        garage.add(configure(car, [option(1), option(6)]))
        garage.add(configure(car, []))
        assert len(garage.saved_cars) == 3

    def test_garage_ids_are_unique(self, garage, car, option):
        ids = {garage.add(configure(car, [option(i)]))["garage_id"] for i in range(1, 5)}
        assert len(ids) == 4

    def test_delete(self, garage, car, option):
        first = garage.add(configure(car, [option(1)]))
        second = garage.add(configure(car, [option(2)]))

        garage.delete(first["garage_id"])

        assert [c["garage_id"] for c in garage.saved_cars] == [second["garage_id"]]

    def test_delete_unknown_id_is_noop(self, garage, car, option):
        garage.add(configure(car, [option(1)]))
        garage.delete(-1)
        assert len(garage.saved_cars) == 1

    def test_delete_option_reprices(self, garage, car, option):
        saved = garage.add(configure(car, [option(1), option(7), option(9)]))

        garage.delete_option(saved["garage_id"], 7)

        entry = garage.saved_cars[0]
        assert [o["id"] for o in entry["selected_options"]] == [1, 9]
        assert entry["total_price"] == pytest.approx(
            calculate_total_price(float(car["base_price"]), entry["selected_options"])
        )
        assert entry["total_price"] == pytest.approx(322986.0 + 5000.0 + 5900.0)

    def test_delete_option_only_touches_target(self, garage, car, option):
        first = garage.add(configure(car, [option(1), option(2)]))
        second = garage.add(configure(car, [option(1), option(3)]))

        garage.delete_option(first["garage_id"], 1)

        by_id = {c["garage_id"]: c for c in garage.saved_cars}
        assert [o["id"] for o in by_id[first["garage_id"]]["selected_options"]] == [2]
        assert [o["id"] for o in by_id[second["garage_id"]]["selected_options"]] == [1, 3]

    def test_reset(self, garage, garage_path, car, option):
        garage.add(configure(car, [option(1)]))
        garage.reset()
        assert garage.saved_cars == []
        assert json.loads(garage_path.read_text()) == []

    def test_corrupt_file_starts_empty(self, garage_path):
        garage_path.parent.mkdir(parents=True)
        garage_path.write_text("{not json")
        assert Garage(garage_path).saved_cars == []

    def test_malformed_entries_are_dropped_on_load(self, garage_path, car, option):
        good = Garage(garage_path).add(configure(car, [option(1)]))
        entries = json.loads(garage_path.read_text())
        entries += [
            {"base_car": car, "selected_options": []},
            {"garage_id": 5, "selected_options": []},
            {"garage_id": 6, "base_car": car, "selected_options": [{"option_name": "no id"}]},
            "junk",
        ]
        garage_path.write_text(json.dumps(entries))

        garage = Garage(garage_path)

        assert [c["garage_id"] for c in garage.saved_cars] == [good["garage_id"]]
        garage.add(configure(car, [option(2)]))
        assert len(garage.saved_cars) == 2

    def test_saved_cars_is_a_copy(self, garage, car, option):
        garage.add(configure(car, [option(1)]))
        garage.saved_cars[0]["selected_options"].clear()
        assert len(garage.saved_cars[0]["selected_options"]) == 1
