"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.cart_item import CartItem
from storefront.domain.model.value_objects import ProductId
from storefront.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_product_id(self, product_id: ProductId) -> CartItem | None:
        return self._load().get(product_id.value)

    def list_all(self) -> list[CartItem]:
        return list(self._load().values())

    def save(self, item: CartItem) -> None:
        items = self._load()
        items[item.product_id.value] = item
        self._persist(items)

    def delete_by_product_id(self, product_id: ProductId) -> None:
        items = self._load()
        if items.pop(product_id.value, None) is not None:
            self._persist(items)

    def _load(self) -> dict[str, CartItem]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            row["productId"]: CartItem.create(row["productId"], row["quantity"])
            for row in raw
        }

    def _persist(self, items: dict[str, CartItem]) -> None:
        raw = [
            {"productId": i.product_id.value, "quantity": i.quantity.value}
            for i in items.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
