"""Cart models - records returned by the cart data endpoint"""

from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class CartItem(BaseModel):
    """A single line of a user's shopping cart"""

    item: str = Field(min_length=1)
    quantity: int = Field(ge=0)  # The endpoint sends quantities as numeric strings

    model_config = ConfigDict(frozen=True)


# Parses the raw endpoint payload: a JSON array of {"item", "quantity"} objects
CART_PAYLOAD = TypeAdapter(List[CartItem])


@dataclass(frozen=True)
class FetchRequest:
    """Identifies the cart to retrieve"""

    user_id: str

    def __post_init__(self):
        if self.user_id is None or str(self.user_id).strip() == "":
            raise ValueError("user_id is required")
        object.__setattr__(self, "user_id", str(self.user_id).strip())


@dataclass
class FetchResult:
    """Parsed cart records plus the number of attempts it took to get them"""

    request: FetchRequest
    items: List[CartItem] = field(default_factory=list)
    attempts: int = 1

    @property
    def total_quantity(self) -> int:
        """Sum of quantities across all cart lines"""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0
