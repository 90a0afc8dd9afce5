import json
from unittest import mock

import pytest

from tacoshop.api import INVALID_JSON, NOT_FOUND
from tacoshop.app import DEFAULT_PORT, create_app, load_catalog, main, save_catalog
from tacoshop.models import Catalog, Meat, Sauce, Soda, Tacos

COLA = {"isZeroCalorie": False, "type": "Cola", "id": "1", "size": "Large"}
BEEF = {
    "id": "m1",
    "name": "Beef",
    "calories": 250,
    "quantity": 1,
    "meatType": "Beef",
    "isPork": False,
}
SALSA = {
    "id": "s1",
    "name": "Salsa",
    "calories": 20,
    "quantity": 1,
    "sauceType": "Red",
    "isSpicy": True,
}


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def client(catalog):
    return create_app(catalog).test_client()


def test_post_and_get_soda(client, catalog):
    created = client.post("/api/sodas", data=json.dumps(COLA))
    assert created.status_code == 201
    assert created.get_json() == COLA
    assert catalog.sodas["1"].type == "Cola"

    fetched = client.get("/api/sodas/1")
    assert fetched.status_code == 200
    assert fetched.get_json() == COLA
    assert client.get("/api/sodas").get_json() == [COLA]


def test_get_missing_returns_404(client):
    response = client.get("/api/meats/none")
    assert response.status_code == 404
    assert response.get_data(as_text=True) == NOT_FOUND


def test_post_invalid_json_returns_400(client, catalog):
    response = client.post("/api/sauces", data="{")
    assert response.status_code == 400
    assert response.get_data(as_text=True) == INVALID_JSON
    assert catalog.sauces == {}


def test_put_and_delete(client, catalog):
    client.post("/api/sodas", data=json.dumps(COLA))
    changed = dict(COLA, size="Small")
    updated = client.put("/api/sodas/1", data=json.dumps(changed))
    assert updated.status_code == 200
    assert updated.headers["Content-Type"].startswith("application/json")
    assert catalog.sodas["1"].size == "Small"

    deleted = client.delete("/api/sodas/1")
    assert deleted.status_code == 204
    assert catalog.sodas == {}
    assert client.delete("/api/sodas/1").status_code == 404


def test_taco_refers_to_posted_meat_and_sauce(client, catalog):
    client.post("/api/meats", data=json.dumps(BEEF))
    client.post("/api/sauces", data=json.dumps(SALSA))
    taco = {"id": "t1", "meats": [{"id": "m1"}], "sauces": [{"id": "s1"}]}
    response = client.post("/api/tacos", data=json.dumps(taco))
    assert response.status_code == 201
    assert response.get_json() == taco
    assert catalog.tacos["t1"].meats[0].name == "Beef"


def test_unknown_reference_is_server_error(client, catalog):
    response = client.post("/api/tacos", data='{"id":"t","meats":[{"id":"x"}]}')
    assert response.status_code == 500
    assert catalog.tacos == {}


def test_catalog_round_trip(tmp_path):
    catalog = Catalog()
    catalog.sodas["1"] = Soda.from_json(COLA)
    catalog.meats["m1"] = Meat.from_json(BEEF)
    catalog.sauces["s1"] = Sauce.from_json(SALSA)
    catalog.tacos["t1"] = Tacos.from_json(
        {"id": "t1", "meats": [{"id": "m1"}], "sauces": [{"id": "s1"}]}, catalog
    )
    save_catalog(catalog, tmp_path)

    loaded = load_catalog(tmp_path)
    assert loaded.sodas["1"].to_json() == COLA
    assert loaded.meats["m1"].to_json() == BEEF
    assert loaded.tacos["t1"].sauces[0].is_spicy is True
    assert loaded.orders == {}


def test_load_catalog_from_empty_directory(tmp_path):
    loaded = load_catalog(tmp_path)
    assert loaded == Catalog()


def test_main_serves_then_saves(tmp_path):
    (tmp_path / "sodas.json").write_text(json.dumps([COLA]), encoding="utf-8")
    with mock.patch("flask.Flask.run") as run:
        status = main(["--data-dir", str(tmp_path)])
    assert status == 0
    assert run.call_args.kwargs["port"] == DEFAULT_PORT
    assert json.loads((tmp_path / "sodas.json").read_text()) == [COLA]
    assert json.loads((tmp_path / "orders.json").read_text()) == []


def test_main_saves_after_interrupt(tmp_path):
    with mock.patch("flask.Flask.run", side_effect=KeyboardInterrupt):
        status = main(["--data-dir", str(tmp_path), "--port", "8080"])
    assert status == 0
    assert json.loads((tmp_path / "meats.json").read_text()) == []