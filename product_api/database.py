import asyncio
from typing import List, Optional

from .models import Product

# This file holds the in-memory product store. Nothing is persisted; a store
# lives as long as the app object that owns it.

SEED_PRODUCTS = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered, mutable list of products.

    The store does not enforce id uniqueness; callers pass ids they generated.
    Handlers that mutate hold ``lock`` across lookup and write.
    """

    def __init__(self, products: Optional[List[Product]] = None):
        self._products: List[Product] = list(products or [])
        self.lock = asyncio.Lock()

    @classmethod
    def seeded(cls) -> "ProductStore":
        return cls([Product.model_validate(p) for p in SEED_PRODUCTS])

    def __len__(self) -> int:
        return len(self._products)

    def list(self) -> List[Product]:
        return list(self._products)

    def get_by_id(self, product_id: str) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def append(self, product: Product) -> None:
        self._products.append(product)

    def find_index(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return -1

    def replace_at(self, index: int, product: Product) -> None:
        self._products[index] = product

    def remove_at(self, index: int) -> Product:
        return self._products.pop(index)
