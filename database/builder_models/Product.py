from dataclasses import dataclass
from typing import Optional

import models.products.product_data as product_data


@dataclass
class Product:
    id: str
    name: str
    category: str
    brand: str
    price: int
    image: str
    description: Optional[str] = None
    specs: Optional[dict] = None
    socket: Optional[str] = None
    wattage: Optional[int] = None
    in_stock: bool = True

    def __post_init__(self):
        if self.category not in product_data.CATEGORIES:
            raise ValueError(f"Unknown category: {self.category}")
        if isinstance(self.price, bool) or not isinstance(self.price, int) or self.price < 0:
            raise ValueError(f"Invalid price: {self.price}")
        if self.specs is not None:
            self.specs = dict(self.specs)

    def spec(self, key, default=None):
        return (self.specs or {}).get(key, default)

    def to_dict(self):
        return {
            product_data.PRODUCT_ID: self.id,
            product_data.NAME: self.name,
            product_data.CATEGORY: self.category,
            product_data.BRAND: self.brand,
            product_data.PRICE: self.price,
            product_data.IMAGE: self.image,
            product_data.DESCRIPTION: self.description,
            product_data.SPECS: self.specs,
            product_data.SOCKET: self.socket,
            product_data.WATTAGE: self.wattage,
            product_data.IN_STOCK: self.in_stock,
        }
