"""Product aggregate, the catalogue record a cart item is priced from.

Products are owned by the catalogue team. ``reprice`` changes the list
price for lines added from now on; lines already in a cart keep the price
they were added at.
"""

from protean.fields import Float, Integer, String

from shopping.domain import shopping


@shopping.aggregate
class Product:
    """A sellable item with a single list price."""

    name: String(required=True, max_length=255)
    category: String(max_length=100)
    cost: Float(required=True, min_value=0.0)
    rating: Integer(min_value=0, max_value=5, default=0)
    image: String(max_length=1024)

    @classmethod
    def create(cls, name, cost, category=None, rating=0, image=None):
        return cls(
            name=name,
            cost=cost,
            category=category,
            rating=rating,
            image=image,
        )

    def reprice(self, new_cost):
        self.cost = new_cost
