"""Menu resources: ingredients, sodas, tacos and orders, with their JSON forms."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _string(data: Any, key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _integer(data: Any, key: str) -> int:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _number(data: Any, key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


def _boolean(data: Any, key: str) -> bool:
    value = _require(data, key)
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


def _reference_ids(data: Any, key: str) -> list[str]:
    """Return the ids of a list of ``{"id": ...}`` references; absent means empty."""
    if isinstance(data, Mapping) and key not in data:
        return []
    items = _require(data, key)
    if not isinstance(items, list):
        raise ValueError(f"field {key!r} must be a list")
    return [_string(item, "id") for item in items]


def _resolve(ids: list[str], table: Mapping[str, Any], kind: str) -> list[Any]:
    resolved = []
    for resource_id in ids:
        try:
            resolved.append(table[resource_id])
        except KeyError:
            raise KeyError(f"unknown {kind} id {resource_id!r}") from None
    return resolved


def _references(resources: list[Any]) -> list[dict[str, str]]:
    return [{"id": resource.id} for resource in resources]


@dataclass
class Catalog:
    """The resources that tacos and orders refer to by id."""

    sodas: dict[str, Soda] = field(default_factory=dict)
    meats: dict[str, Meat] = field(default_factory=dict)
    sauces: dict[str, Sauce] = field(default_factory=dict)
    tacos: dict[str, Tacos] = field(default_factory=dict)
    orders: dict[str, Order] = field(default_factory=dict)


@dataclass
class Ingredient:
    """A taco ingredient with its calories and quantity."""

    id: str = ""
    name: str = ""
    calories: int = 0
    quantity: int = 0

    @classmethod
    def from_json(cls, data: Any, catalog: Optional[Catalog] = None) -> Ingredient:
        """Build an ingredient from its JSON object."""
        resource = cls()
        resource.update_from_json(data, catalog)
        return resource

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "calories": self.calories,
            "quantity": self.quantity,
        }

    def update_from_json(self, data: Any, catalog: Optional[Catalog] = None) -> None:
        """Replace the fields with those of a JSON object."""
        values = (
            _string(data, "id"),
            _string(data, "name"),
            _integer(data, "calories"),
            _integer(data, "quantity"),
        )
        self.id, self.name, self.calories, self.quantity = values


@dataclass
class Meat(Ingredient):
    """A meat ingredient."""

    meat_type: str = ""
    is_pork: bool = False

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["meatType"] = self.meat_type
        result["isPork"] = self.is_pork
        return result

    def update_from_json(self, data: Any, catalog: Optional[Catalog] = None) -> None:
        meat_type = _string(data, "meatType")
        is_pork = _boolean(data, "isPork")
        super().update_from_json(data, catalog)
        self.meat_type, self.is_pork = meat_type, is_pork


@dataclass
class Sauce(Ingredient):
    """A sauce ingredient."""

    sauce_type: str = ""
    is_spicy: bool = False

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["sauceType"] = self.sauce_type
        result["isSpicy"] = self.is_spicy
        return result

    def update_from_json(self, data: Any, catalog: Optional[Catalog] = None) -> None:
        sauce_type = _string(data, "sauceType")
        is_spicy = _boolean(data, "isSpicy")
        super().update_from_json(data, catalog)
        self.sauce_type, self.is_spicy = sauce_type, is_spicy


@dataclass
class Soda:
    """A soda: its size, type and whether it is zero-calorie."""

    id: str = ""
    size: str = ""
    type: str = ""
    is_zero_calorie: bool = False

    @classmethod
    def from_json(cls, data: Any, catalog: Optional[Catalog] = None) -> Soda:
        """Build a soda from its JSON object."""
        resource = cls()
        resource.update_from_json(data, catalog)
        return resource

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "size": self.size,
            "type": self.type,
            "isZeroCalorie": self.is_zero_calorie,
        }

    def update_from_json(self, data: Any, catalog: Optional[Catalog] = None) -> None:
        """Replace the fields with those of a JSON object."""
        values = (
            _string(data, "id"),
            _string(data, "size"),
            _string(data, "type"),
            _boolean(data, "isZeroCalorie"),
        )
        self.id, self.size, self.type, self.is_zero_calorie = values


@dataclass
class Tacos:
    """A taco made of meats and sauces taken from the catalog."""

    id: str = ""
    meats: list[Meat] = field(default_factory=list)
    sauces: list[Sauce] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any, catalog: Optional[Catalog] = None) -> Tacos:
        """Build a taco from its JSON object, resolving references in the catalog."""
        resource = cls()
        resource.update_from_json(data, catalog)
        return resource

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id}
        if self.meats:
            result["meats"] = _references(self.meats)
        if self.sauces:
            result["sauces"] = _references(self.sauces)
        return result

    def update_from_json(self, data: Any, catalog: Optional[Catalog] = None) -> None:
        """Replace the fields with those of a JSON object.

        Raises KeyError when a referenced meat or sauce is not in the catalog.
        """
        catalog = catalog if catalog is not None else Catalog()
        resource_id = _string(data, "id")
        meats = _resolve(_reference_ids(data, "meats"), catalog.meats, "meat")
        sauces = _resolve(_reference_ids(data, "sauces"), catalog.sauces, "sauce")
        self.id, self.meats, self.sauces = resource_id, meats, sauces


@dataclass
class Order:
    """An order of tacos and sodas with its total cost."""

    id: str = ""
    tacos: list[Tacos] = field(default_factory=list)
    sodas: list[Soda] = field(default_factory=list)
    cost: float = 0.0

    @classmethod
    def from_json(cls, data: Any, catalog: Optional[Catalog] = None) -> Order:
        """Build an order from its JSON object, resolving references in the catalog."""
        resource = cls()
        resource.update_from_json(data, catalog)
        return resource

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "cost": self.cost}
        if self.tacos:
            result["tacos"] = _references(self.tacos)
        if self.sodas:
            result["sodas"] = _references(self.sodas)
        return result

    def update_from_json(self, data: Any, catalog: Optional[Catalog] = None) -> None:
        """Replace the fields with those of a JSON object.

        Raises KeyError when a referenced taco or soda is not in the catalog.
        """
        catalog = catalog if catalog is not None else Catalog()
        resource_id = _string(data, "id")
        cost = _number(data, "cost")
        tacos = _resolve(_reference_ids(data, "tacos"), catalog.tacos, "taco")
        sodas = _resolve(_reference_ids(data, "sodas"), catalog.sodas, "soda")
        self.id, self.cost, self.tacos, self.sodas = resource_id, cost, tacos, sodas