"""Create, read, update and delete operations over one kind of resource."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from tacoshop.models import Catalog

NOT_FOUND = "Resource Not Found"
INVALID_JSON = "Invalid JSON"

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


def _dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


@dataclass(frozen=True)
class Response:
    """The status, body and content type of an answer to a request."""

    status: int
    body: str = ""
    content_type: str = TEXT_CONTENT_TYPE

    @classmethod
    def of_json(cls, status: int, value: Any) -> Response:
        return cls(status, _dump(value), JSON_CONTENT_TYPE)


_NOT_FOUND_RESPONSE = Response(404, NOT_FOUND)
_INVALID_JSON_RESPONSE = Response(400, INVALID_JSON)


class ResourceAPI:
    """Handles requests for resources of one type kept in a dict keyed by id.

    Resources that fail to build from a well-formed JSON body raise the
    model's ValueError or KeyError; the web layer turns those into a server
    error.
    """

    def __init__(
        self,
        resource_type: Any,
        resources: Optional[dict[str, Any]] = None,
        catalog: Optional[Catalog] = None,
    ) -> None:
        self.resource_type = resource_type
        self.resources = resources if resources is not None else {}
        self.catalog = catalog

    def create(self, body: Union[str, bytes]) -> Response:
        """Build a resource from a JSON body and store it under its id."""
        try:
            data = json.loads(body)
        except ValueError:
            return _INVALID_JSON_RESPONSE
        resource = self.resource_type.from_json(data, self.catalog)
        self.resources[resource.id] = resource
        return Response.of_json(201, resource.to_json())

    def read(self, resource_id: str) -> Response:
        """Return one resource as JSON, or 404 when the id is unknown."""
        resource = self.resources.get(resource_id)
        if resource is None:
            return _NOT_FOUND_RESPONSE
        return Response.of_json(200, resource.to_json())

    def read_all(self) -> Response:
        """Return every resource as a JSON array ordered by id."""
        items = [self.resources[key].to_json() for key in sorted(self.resources)]
        return Response.of_json(200, items)

    def update(self, resource_id: str, body: Union[str, bytes]) -> Response:
        """Replace a stored resource's fields with those of a JSON body."""
        stored = self.resources.get(resource_id)
        if stored is None:
            return _NOT_FOUND_RESPONSE
        try:
            data = json.loads(body)
        except ValueError:
            return _INVALID_JSON_RESPONSE
        resource = copy.copy(stored)
        resource.update_from_json(data, self.catalog)
        self.resources[resource_id] = resource
        return Response.of_json(200, resource.to_json())

    def delete(self, resource_id: str) -> Response:
        """Remove a resource; 204 on success, 404 when the id is unknown."""
        if self.resources.pop(resource_id, None) is None:
            return _NOT_FOUND_RESPONSE
        return Response(204)