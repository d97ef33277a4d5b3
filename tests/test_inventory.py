from __future__ import annotations

import textwrap

import pytest

from hotel_reservations.config.inventory import Inventory
from hotel_reservations.config.settings import Settings
from hotel_reservations.core.errors import InvalidEmailError, InventoryError
from hotel_reservations.rooms import RoomType
from hotel_reservations.services import build_services


def _write(tmp_path, body: str):
    path = tmp_path / "inventory.toml"
    path.write_text(textwrap.dedent(body))
    return path


def test_inventory_loads_rooms_and_customers(tmp_path):
    path = _write(
        tmp_path,
        """
        title = "Seaside"

        [[rooms]]
        number = 101
        price = 100.0
        type = "SINGLE"

        [[rooms]]
        number = "102"
        type = "2"

        [[customers]]
        email = "alice@x.com"
        first_name = "Alice"
        last_name = "Doe"
        """,
    )

    inventory = Inventory.load(path)

    assert inventory.title == "Seaside"
    assert [entry.number for entry in inventory.rooms] == ["101", "102"]
    assert inventory.rooms[1].type is RoomType.DOUBLE
    assert inventory.rooms[1].to_room().is_free


def test_inventory_apply_to_seeds_services(tmp_path):
    path = _write(
        tmp_path,
        """
        [[rooms]]
        number = "101"
        price = 80
        type = "1"

        [[customers]]
        email = "alice@x.com"
        """,
    )
    services = build_services(Settings(_env_file=None))

    counts = Inventory.load(path).apply_to(services)

    assert (counts.rooms, counts.customers) == (1, 1)
    assert services.rooms.get_room("101").price == 80
    assert services.customers.get_customer("alice@x.com") is not None


def test_inventory_missing_file(tmp_path):
    with pytest.raises(InventoryError, match="not found"):
        Inventory.load(tmp_path / "missing.toml")


def test_inventory_invalid_toml(tmp_path):
    path = _write(tmp_path, "rooms = [")
    with pytest.raises(InventoryError, match="not valid TOML"):
        Inventory.load(path)


def test_inventory_directory_path_is_reported(tmp_path):
    with pytest.raises(InventoryError, match="could not be read"):
        Inventory.load(tmp_path)


def test_inventory_non_utf8_file_is_reported(tmp_path):
    path = tmp_path / "inventory.toml"
    path.write_bytes(b"title = \"\xff\xfe\"\n")
    with pytest.raises(InventoryError, match="could not be read"):
        Inventory.load(path)


@pytest.mark.parametrize(
    "room",
    [
        'number = "1A"\ntype = "1"',
        'number = "101"\nprice = -3\ntype = "1"',
        'number = "101"\nprice = inf\ntype = "1"',
        'number = "101"\ntype = "suite"',
    ],
)
def test_inventory_rejects_invalid_rooms(tmp_path, room):
    path = _write(tmp_path, f"[[rooms]]\n{room}\n")
    with pytest.raises(InventoryError, match="failed validation"):
        Inventory.load(path)


def test_inventory_bad_customer_email_raises_on_apply(tmp_path):
    path = _write(tmp_path, '[[customers]]\nemail = "nobody"\n')
    inventory = Inventory.load(path)
    with pytest.raises(InvalidEmailError):
        inventory.apply_to(build_services(Settings(_env_file=None)))
