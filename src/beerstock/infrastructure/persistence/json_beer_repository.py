"""JSON-file-backed implementation of BeerRepository."""

from __future__ import annotations

import json
from pathlib import Path

from beerstock.domain.model.beer import Beer
from beerstock.domain.repository.beer_repository import BeerRepository
from beerstock.infrastructure.logging import get_logger

log = get_logger(__name__)


class JsonBeerRepository(BeerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- BeerRepository interface ---------------------------------------------

    def get_by_id(self, beer_id: int) -> Beer | None:
        for raw in self._load_raw():
            if raw["id"] == beer_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Beer | None:
        for raw in self._load_raw():
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Beer]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, beer: Beer) -> Beer:
        records = self._load_raw()

        if beer.id is None:
            beer.id = self._next_id(records)

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == beer.id:
                records[i] = self._to_raw(beer)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(beer))

        self._persist_raw(records)
        return beer

    def delete_by_id(self, beer_id: int) -> None:
        records = self._load_raw()
        self._persist_raw([raw for raw in records if raw["id"] != beer_id])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _next_id(records: list[dict]) -> int:
        if not records:
            return 1
        return max(raw["id"] for raw in records) + 1

    @staticmethod
    def _to_raw(beer: Beer) -> dict:
        return {
            "id": beer.id,
            "name": beer.name,
            "brand": beer.brand,
            "type": beer.type,
            "quantity": beer.quantity,
            "max": beer.max,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Beer:
        return Beer(
            id=raw["id"],
            name=raw["name"],
            brand=raw.get("brand", ""),
            type=raw.get("type", ""),
            quantity=raw["quantity"],
            max=raw["max"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
            log.debug("Created empty beer store at %s", self._file_path)
