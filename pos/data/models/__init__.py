#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from pos.data.models.product import ProductModel
from pos.data.models.customer import CustomerModel
from pos.data.models.sale import SaleModel
from pos.data.models.sale_item import SaleItemModel

__all__ = ["ProductModel", "CustomerModel", "SaleModel", "SaleItemModel"]
