from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from shopping_basket.core.application.dtos.add_item_request import AddItemRequest
from shopping_basket.core.application.ports.basket_store_port import BasketStorePort
from shopping_basket.core.application.services.basket_pricing_service import BasketPricingService
from shopping_basket.core.domain.pricing import PricingTables
from shopping_basket.core.exceptions import ConfigurationError, InvalidArgumentError


def _request(product_id="p1", price="10", quantity=1, is_discounted=False):
    return AddItemRequest(
        product_id=product_id,
        price=Decimal(price),
        quantity=quantity,
        is_discounted=is_discounted,
    )


@pytest.fixture
def mock_store():
    return MagicMock(spec=BasketStorePort)


@pytest.fixture
def mocked_service(mock_store, pricing_settings):
    return BasketPricingService(store=mock_store, tables=pricing_settings.to_pricing_tables())


class TestValidation:
    @pytest.mark.parametrize("username", [None, "", "   ", "\t\n"])
    def test_blank_username_rejected_before_store_access(self, mocked_service, mock_store, username):
        calls = [
            lambda: mocked_service.add_items(username, [_request()]),
            lambda: mocked_service.remove_item(username, "p1"),
            lambda: mocked_service.apply_discount_code(username, "SUMMER10"),
            lambda: mocked_service.set_shipping_country(username, "UK"),
            lambda: mocked_service.get_total(username, True),
            lambda: mocked_service.get_basket_items(username),
        ]
        for call in calls:
            with pytest.raises(InvalidArgumentError) as exc:
                call()
            assert exc.value.argument == "username"

        assert mock_store.mock_calls == []

    @pytest.mark.parametrize("requests", [None, []])
    def test_missing_item_list_rejected(self, mocked_service, mock_store, requests):
        with pytest.raises(InvalidArgumentError) as exc:
            mocked_service.add_items("user1", requests)

        assert exc.value.argument == "requests"
        mock_store.add_item.assert_not_called()

    @pytest.mark.parametrize("product_id", ["   ", "\t"])
    def test_blank_product_id_in_items_rejects_whole_list(self, mocked_service, mock_store, product_id):
        with pytest.raises(InvalidArgumentError) as exc:
            mocked_service.add_items("user1", [_request("p1"), _request(product_id)])

        assert exc.value.argument == "product_id"
        mock_store.add_item.assert_not_called()

    def test_blank_product_id_never_reaches_basket(self, service, store):
        with pytest.raises(InvalidArgumentError):
            service.add_items("user1", [_request("   ")])

        assert not store.has_basket("user1")

    @pytest.mark.parametrize("product_id", [None, "", "  "])
    def test_blank_product_id_rejected(self, mocked_service, mock_store, product_id):
        with pytest.raises(InvalidArgumentError) as exc:
            mocked_service.remove_item("user1", product_id)

        assert exc.value.argument == "product_id"
        mock_store.remove_item.assert_not_called()

    @pytest.mark.parametrize("code", [None, "", "  "])
    def test_blank_discount_code_rejected(self, mocked_service, mock_store, code):
        with pytest.raises(InvalidArgumentError) as exc:
            mocked_service.apply_discount_code("user1", code)

        assert exc.value.argument == "code"
        assert mock_store.mock_calls == []

    @pytest.mark.parametrize("country", [None, "", "  "])
    def test_blank_country_rejected(self, mocked_service, mock_store, country):
        with pytest.raises(InvalidArgumentError) as exc:
            mocked_service.set_shipping_country("user1", country)

        assert exc.value.argument == "country"
        assert mock_store.mock_calls == []

    def test_empty_username_creates_no_basket(self, service, store):
        with pytest.raises(InvalidArgumentError):
            service.get_total("", True)

        assert not store.has_basket("")

    def test_requires_store_and_tables(self, pricing_settings):
        with pytest.raises(ConfigurationError):
            BasketPricingService(store=None, tables=pricing_settings.to_pricing_tables())
        with pytest.raises(ConfigurationError):
            BasketPricingService(store=MagicMock(spec=BasketStorePort), tables=None)


class TestItems:
    def test_add_items_stamps_username_in_list_order(self, mocked_service, mock_store):
        mocked_service.add_items("user1", [_request("p1"), _request("p2", is_discounted=True)])

        added = [call.args[0] for call in mock_store.add_item.call_args_list]
        assert [item.product_id for item in added] == ["p1", "p2"]
        assert all(item.username == "user1" for item in added)
        assert added[1].is_discounted is True

    def test_add_same_product_twice_sums_quantity_and_keeps_first_price(self, service):
        service.add_items("user1", [_request(price="10", quantity=1)])
        service.add_items("user1", [_request(price="20", quantity=2, is_discounted=True)])

        (item,) = service.get_basket_items("user1")
        assert item.quantity == 3
        assert item.price == Decimal("10")
        assert item.is_discounted is False

    def test_remove_item_passes_store_result_through(self, mocked_service, mock_store):
        mock_store.remove_item.return_value = False
        assert mocked_service.remove_item("user1", "p1") is False

        mock_store.remove_item.return_value = True
        assert mocked_service.remove_item("user1", "p1") is True
        mock_store.remove_item.assert_called_with("user1", "p1")

    def test_remove_unknown_item_leaves_state_unchanged(self, service, store):
        assert service.remove_item("ghost", "p1") is False
        assert not store.has_basket("ghost")

        service.add_items("user1", [_request("p1")])
        assert service.remove_item("user1", "p2") is False
        assert [item.product_id for item in service.get_basket_items("user1")] == ["p1"]

    def test_get_basket_items_returns_snapshot(self, service):
        service.add_items("user1", [_request("p1")])

        snapshot = service.get_basket_items("user1")
        service.add_items("user1", [_request("p2")])

        assert [item.product_id for item in snapshot] == ["p1"]
        assert len(service.get_basket_items("user1")) == 2

    def test_snapshot_items_do_not_track_later_quantity_changes(self, service):
        service.add_items("user1", [_request("p1", quantity=1)])

        (snapshot_item,) = service.get_basket_items("user1")
        service.add_items("user1", [_request("p1", quantity=2)])

        assert snapshot_item.quantity == 1
        (current,) = service.get_basket_items("user1")
        assert current.quantity == 3

    def test_get_basket_items_empty_for_new_user(self, service):
        assert service.get_basket_items("user1") == []


class TestDiscountCodes:
    def test_unknown_code_returns_false_without_store_access(self, mocked_service, mock_store):
        assert mocked_service.apply_discount_code("user1", "BOGUS") is False
        assert mock_store.mock_calls == []

    def test_unknown_code_creates_no_basket(self, service, store):
        assert service.apply_discount_code("newcomer", "BOGUS") is False
        assert not store.has_basket("newcomer")

    def test_same_code_twice_returns_true_then_false(self, service, store):
        assert service.apply_discount_code("user1", "SUMMER10") is True
        assert service.apply_discount_code("user1", "SUMMER10") is False
        assert store.get_basket("user1").applied_discount_codes == ("SUMMER10",)

    def test_table_lookup_is_case_sensitive(self, service, store):
        assert service.apply_discount_code("user1", "summer10") is False
        assert not store.has_basket("user1")

    def test_applied_set_is_case_insensitive(self, store):
        tables = PricingTables(discounts={"SUMMER10": Decimal("0.10"), "summer10": Decimal("0.50")})
        service = BasketPricingService(store=store, tables=tables)

        assert service.apply_discount_code("user1", "SUMMER10") is True
        assert service.apply_discount_code("user1", "summer10") is False
        assert store.get_basket("user1").applied_discount_codes == ("SUMMER10",)


class TestShipping:
    def test_unknown_country_returns_false_without_store_access(self, mocked_service, mock_store):
        assert mocked_service.set_shipping_country("user1", "FR") is False
        assert mock_store.mock_calls == []

    def test_last_country_wins(self, service, store):
        assert service.set_shipping_country("user1", "UK") is True
        assert service.set_shipping_country("user1", "US") is True
        assert store.get_basket("user1").shipping_region == "US"


class TestTotals:
    def test_summer_sale_scenario_with_and_without_vat(self, service):
        service.add_items("user1", [_request(price="100")])
        service.apply_discount_code("user1", "SUMMER10")
        service.set_shipping_country("user1", "UK")

        assert service.get_total("user1", True) == Decimal("114")
        assert service.get_total("user1", False) == Decimal("105")

    def test_discounted_items_skip_codes(self, store):
        tables = PricingTables(
            discounts={"SUMMER10": Decimal("0.10")},
            shipping={"UK": Decimal("5")},
            vat_rate=Decimal("0"),
        )
        service = BasketPricingService(store=store, tables=tables)
        service.add_items(
            "user1",
            [
                _request("p1", price="5", quantity=2, is_discounted=True),
                _request("p2", price="10", quantity=2),
            ],
        )
        service.apply_discount_code("user1", "SUMMER10")
        service.set_shipping_country("user1", "UK")

        assert service.get_total("user1", True) == Decimal("33")

    def test_codes_compound_multiplicatively(self, service):
        service.add_items("user1", [_request(price="100")])
        service.apply_discount_code("user1", "SUMMER10")
        service.apply_discount_code("user1", "WINTER20")

        # 100 -> 90 -> 72
        assert service.get_total("user1", False) == Decimal("72")

    def test_empty_basket_total_is_shipping_plus_vat(self, service):
        assert service.get_total("user1", True) == Decimal("0")

        service.set_shipping_country("user1", "US")
        assert service.get_total("user1", False) == Decimal("12.50")
        assert service.get_total("user1", True) == Decimal("15.00")

    def test_total_is_not_rounded(self, service):
        service.add_items("user1", [_request(price="0.99", quantity=3)])
        service.apply_discount_code("user1", "SUMMER10")

        assert service.get_total("user1", True) == Decimal("3.2076")

    def test_repeated_totals_are_identical(self, service):
        service.add_items("user1", [_request(price="19.99", quantity=2)])
        service.apply_discount_code("user1", "SUMMER10")
        service.set_shipping_country("user1", "UK")

        totals = {service.get_total("user1", True) for _ in range(5)}
        assert len(totals) == 1

    def test_total_fetches_basket_lazily(self, service, store):
        service.get_total("user1", False)

        assert store.has_basket("user1")
