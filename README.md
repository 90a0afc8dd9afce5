# tacoshop

A small JSON REST service for a taco shop. It keeps five kinds of resource:
meats, sauces, sodas, tacos and orders. Each kind can be created, listed,
read, updated and deleted over HTTP. The service reads its data from JSON
files when it starts and writes the data back when it stops.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the service

```
tacoshop
```

The command accepts these options:

- `--host`: address to listen on (default `0.0.0.0`)
- `--port`: port to listen on (default `18888`)
- `--data-dir`: directory that holds the JSON data files (default `.`)

When it starts, the command loads `sodas.json`, `meats.json`, `sauces.json`,
`tacos.json` and `orders.json` from the data directory, in that order, so
tacos can refer to meats and sauces that are already loaded, and orders can
refer to tacos and sodas. A file that does not exist leaves that collection
empty. When the server stops, for example with Ctrl-C, each collection is
written back to its file as a compact JSON array ordered by id.

The server is Flask's built-in server, started with `Flask.run`.

## Endpoints

Each collection (`sodas`, `tacos`, `meats`, `sauces`, `orders`) has these
routes:

| Method | Path                 | Result                                              |
|--------|----------------------|-----------------------------------------------------|
| POST   | `/api/<kind>`        | 201 and the created resource; 400 on bad JSON       |
| GET    | `/api/<kind>`        | 200 and a JSON array of every resource, by id       |
| GET    | `/api/<kind>/<id>`   | 200 and the resource; 404 if it is missing          |
| PUT    | `/api/<kind>/<id>`   | 200 and the updated resource; 404 if missing, 400 on bad JSON |
| DELETE | `/api/<kind>/<id>`   | 204 with an empty body; 404 if it is missing        |

Successful answers that carry a resource are sent as `application/json`.
The error answers are plain text: `Invalid JSON` with status 400 and
`Resource Not Found` with status 404. A PUT to an unknown id answers 404
before its body is looked at. A body that is valid JSON but lacks a field,
has a field of the wrong type, or refers to an id that does not exist is
not turned into a 400: the model raises `ValueError` or `KeyError` and Flask
answers with a server error.

Sample bodies for each kind:

```json
{"id": "1", "size": "Large", "type": "Cola", "isZeroCalorie": false}
{"id": "m1", "name": "Carnitas", "calories": 250, "quantity": 2, "meatType": "Pork", "isPork": true}
{"id": "s1", "name": "Salsa Verde", "calories": 15, "quantity": 1, "sauceType": "Salsa", "isSpicy": true}
{"id": "t1", "meats": [{"id": "m1"}], "sauces": [{"id": "s1"}]}
{"id": "o1", "cost": 9.5, "tacos": [{"id": "t1"}], "sodas": [{"id": "1"}]}
```

A taco refers to its meats and sauces by id. An order refers to its tacos
and sodas by id. Every id that is referred to must already exist. The
`meats`, `sauces`, `tacos` and `sodas` lists may be left out of a body, and
then they are empty. When such a list is empty, it is also left out of the
JSON that the service returns.

## Using it from Python

The service is built from a few parts that can also be used directly:

- `tacoshop.models`: the `Ingredient`, `Meat`, `Sauce`, `Soda`, `Tacos` and
  `Order` dataclasses, and the `Catalog` that holds every collection as a
  dict keyed by id. Each resource has `from_json(data, catalog)`,
  `to_json()` and `update_from_json(data, catalog)`. Tacos and orders look up
  their references in the catalog.
- `tacoshop.storage`: `save_to_file(resources, path)` and
  `load_from_file(resource_type, path, catalog)` for JSON array files.
  `load_from_file` returns `{}` for a missing file and raises `ValueError`
  when the file does not hold a JSON array.
- `tacoshop.api`: `ResourceAPI`, which runs create/read/update/delete on
  one collection and returns a `Response` with `status`, `body` and
  `content_type`.
- `tacoshop.app`: `load_catalog(directory)`, `save_catalog(catalog,
  directory)`, `create_app(catalog)`, which builds a Flask application, and
  `main(argv)`.

```python
from tacoshop.app import create_app, load_catalog

catalog = load_catalog("data")
app = create_app(catalog)
client = app.test_client()
print(client.get("/api/sodas").get_json())
```

## What it does not do

The data files are written only when the server stops. A change made while
it runs is lost if the process is killed before it can shut down. The
service has no authentication, and it does not check references when a
resource is deleted, so a taco may still name a meat that has been removed.