"""Request and response models for the HTTP layer."""

from pydantic import AliasChoices, BaseModel, Field

from productcache.core.entities.page import Page
from productcache.core.entities.product import Product, ProductPatch

# Older clients send the price as "Price"
PRICE_ALIASES = AliasChoices("price", "Price")


class CreateProductRequest(BaseModel):
    """Body of ``POST /products``."""

    name: str = Field(min_length=1)
    price: float = Field(gt=0, allow_inf_nan=False, validation_alias=PRICE_ALIASES)


class UpdateProductRequest(BaseModel):
    """Body of ``PUT /products/{id}``.

    Every field is optional. An empty name or a zero price means
    "leave unchanged"; a negative price is rejected.
    """

    name: str | None = None
    price: float | None = Field(
        default=None, ge=0, allow_inf_nan=False, validation_alias=PRICE_ALIASES
    )

    def to_patch(self) -> ProductPatch:
        return ProductPatch(name=self.name, price=self.price)


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(id=product.id, name=product.name, price=product.price)


class PageMetadata(BaseModel):
    # Key casing matches what existing clients parse
    currentPage: int
    totalProducts: int
    limit: int
    totalpages: int


class ProductListResponse(BaseModel):
    """Body of ``GET /products``."""

    data: list[ProductResponse]
    metadata: PageMetadata

    @classmethod
    def from_page(cls, page: Page) -> "ProductListResponse":
        return cls(
            data=[ProductResponse.from_entity(p) for p in page.items],
            metadata=PageMetadata(
                currentPage=page.page,
                totalProducts=page.total,
                limit=page.limit,
                totalpages=page.total_pages,
            ),
        )
