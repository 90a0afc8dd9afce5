"""The taco shop web service: routes, and loading and saving its data files."""

from __future__ import annotations

import argparse
from os import PathLike
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import flask

from tacoshop.api import ResourceAPI, Response
from tacoshop.models import Catalog, Meat, Order, Sauce, Soda, Tacos
from tacoshop.storage import load_from_file, save_to_file

DEFAULT_PORT = 18888
DEFAULT_HOST = "0.0.0.0"

PathType = Union[str, "PathLike[str]"]

# Resources in load order: tacos refer to meats and sauces, orders to tacos and sodas.
_RESOURCES: tuple[tuple[str, Any], ...] = (
    ("sodas", Soda),
    ("meats", Meat),
    ("sauces", Sauce),
    ("tacos", Tacos),
    ("orders", Order),
)


def load_catalog(directory: PathType = ".") -> Catalog:
    """Load every resource kind from its JSON file in a directory."""
    base = Path(directory)
    catalog = Catalog()
    for name, resource_type in _RESOURCES:
        loaded = load_from_file(resource_type, base / f"{name}.json", catalog)
        getattr(catalog, name).update(loaded)
    return catalog


def save_catalog(catalog: Catalog, directory: PathType = ".") -> None:
    """Write every resource kind to its JSON file in a directory."""
    base = Path(directory)
    for name, _ in _RESOURCES:
        save_to_file(getattr(catalog, name), base / f"{name}.json")


def _to_flask(response: Response) -> flask.Response:
    return flask.Response(
        response.body, status=response.status, content_type=response.content_type
    )


def _register(app: flask.Flask, name: str, api: ResourceAPI) -> None:
    collection = f"/api/{name}"
    member = f"/api/{name}/<resource_id>"

    def create() -> flask.Response:
        return _to_flask(api.create(flask.request.get_data()))

    def read_all() -> flask.Response:
        return _to_flask(api.read_all())

    def read(resource_id: str) -> flask.Response:
        return _to_flask(api.read(resource_id))

    def update(resource_id: str) -> flask.Response:
        return _to_flask(api.update(resource_id, flask.request.get_data()))

    def delete(resource_id: str) -> flask.Response:
        return _to_flask(api.delete(resource_id))

    app.add_url_rule(collection, f"{name}_create", create, methods=["POST"])
    app.add_url_rule(collection, f"{name}_read_all", read_all, methods=["GET"])
    app.add_url_rule(member, f"{name}_read", read, methods=["GET"])
    app.add_url_rule(member, f"{name}_update", update, methods=["PUT"])
    app.add_url_rule(member, f"{name}_delete", delete, methods=["DELETE"])


def create_app(catalog: Optional[Catalog] = None) -> flask.Flask:
    """Build the web application serving every resource kind of a catalog."""
    catalog = catalog if catalog is not None else Catalog()
    app = flask.Flask(__name__)
    for name, resource_type in _RESOURCES:
        api = ResourceAPI(resource_type, getattr(catalog, name), catalog)
        _register(app, name, api)
    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the data files, serve until stopped, then save the data files."""
    parser = argparse.ArgumentParser(prog="tacoshop", description="Taco shop web service.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding the JSON data files"
    )
    args = parser.parse_args(argv)

    catalog = load_catalog(args.data_dir)
    app = create_app(catalog)
    try:
        app.run(host=args.host, port=args.port)
    except KeyboardInterrupt:
        pass
    finally:
        save_catalog(catalog, args.data_dir)
    return 0