"""Tests for domain entities."""

import pytest

from productcache import Page, PageRequest, Product, ProductPatch


class TestProduct:
    """Tests for Product."""

    def test_to_dict(self) -> None:
        product = Product(id=7, name="Widget", price=9.99)

        assert product.to_dict() == {"id": 7, "name": "Widget", "price": 9.99}

    def test_from_dict_coerces_integral_price(self) -> None:
        """An integral JSON price still yields a float."""
        product = Product.from_dict({"id": 3, "name": "A", "price": 5})

        assert product == Product(id=3, name="A", price=5.0)
        assert isinstance(product.price, float)

    @pytest.mark.parametrize(
        "data",
        [
            [1, "A", 5.0],
            {"name": "A", "price": 5.0},
            {"id": "3", "name": "A", "price": 5.0},
            {"id": True, "name": "A", "price": 5.0},
            {"id": 3, "name": "", "price": 5.0},
            {"id": 3, "name": 42, "price": 5.0},
            {"id": 3, "name": "A", "price": "5"},
            {"id": 3, "name": "A", "price": 0},
            {"id": 3, "name": "A", "price": False},
        ],
    )
    def test_from_dict_rejects_bad_shape(self, data: object) -> None:
        with pytest.raises(ValueError):
            Product.from_dict(data)

    def test_is_immutable(self) -> None:
        product = Product(id=1, name="A", price=1.0)

        with pytest.raises(AttributeError):
            product.price = 2.0  # type: ignore[misc]


class TestProductPatch:
    """Tests for ProductPatch."""

    def test_empty_patch(self) -> None:
        patch = ProductPatch()

        assert patch.assignments() == []
        assert patch.is_empty

    def test_zero_values_are_not_supplied(self) -> None:
        """Empty name and non-positive price mean "unchanged"."""
        assert ProductPatch(name="", price=0).is_empty
        assert ProductPatch(price=-3.0).is_empty

    def test_blank_name_is_not_supplied(self) -> None:
        assert ProductPatch(name="   ").is_empty
        assert ProductPatch(name=" \t", price=2.0).assignments() == [("price", 2.0)]

    def test_assignments_follow_column_order(self) -> None:
        patch = ProductPatch(price=7, name="B")

        assert patch.assignments() == [("name", "B"), ("price", 7.0)]

    def test_single_field(self) -> None:
        assert ProductPatch(price=9.99).assignments() == [("price", 9.99)]
        assert ProductPatch(name="A").assignments() == [("name", "A")]


class TestPageRequest:
    """Tests for pagination normalization."""

    def test_defaults(self) -> None:
        request = PageRequest()

        assert (request.page, request.limit, request.offset) == (1, 10, 0)

    @pytest.mark.parametrize(
        ("page", "limit", "expected"),
        [
            (1, 10, (1, 10)),
            (0, 10, (1, 10)),
            (-1, 10, (1, 10)),
            (1, 0, (1, 10)),
            (1, -5, (1, 10)),
            (1, 1, (1, 1)),
            (1, 100, (1, 100)),
            (1, 101, (1, 10)),
        ],
    )
    def test_normalize(
        self, page: int, limit: int, expected: tuple[int, int]
    ) -> None:
        request = PageRequest.normalize(page, limit)

        assert (request.page, request.limit) == expected

    def test_offset(self) -> None:
        assert PageRequest.normalize(3, 10).offset == 20


class TestPage:
    """Tests for Page."""

    @pytest.mark.parametrize(
        ("total", "limit", "pages"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)],
    )
    def test_total_pages(self, total: int, limit: int, pages: int) -> None:
        page = Page(page=1, limit=limit, total=total)

        assert page.total_pages == pages
