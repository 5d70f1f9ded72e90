"""Tests for magento_onx.core.translators (orders, customers, catalog, shipments, stock).

Uses in-memory sample payloads shaped like Magento 2 REST responses.
"""

import pytest

from magento_onx.core.records import ProductRecord
from magento_onx.core.translators import (
    CustomerTranslator,
    FulfillmentTranslator,
    InventoryTranslator,
    OrderTranslator,
    ProductTranslator,
    VariantTranslator,
)
from magento_onx.core.translators.base import address_to_canonical, merge_address_update

NS = "m2"


# ---------------------------------------------------------------------------
# Shared sample data
# ---------------------------------------------------------------------------


def sample_order():
    return {
        "entity_id": 100,
        "increment_id": "000000100",
        "state": "processing",
        "status": "processing",
        "store_id": 1,
        "customer_email": "jane@example.com",
        "customer_firstname": "Jane",
        "customer_lastname": "Doe",
        "order_currency_code": "USD",
        "subtotal": 50.0,
        "grand_total": 42.5,
        "tax_amount": 5.0,
        "discount_amount": -12.5,
        "shipping_amount": 0,
        "shipping_description": "Flat Rate - Fixed",
        "shipping_method": "flatrate_flatrate",
        "payment": {"method": "checkmo"},
        "billing_address": {
            "firstname": "Jane",
            "lastname": "Doe",
            "street": ["1 Main St", "Apt 2"],
            "city": "Austin",
            "region_code": "TX",
            "postcode": "78701",
            "country_id": "US",
            "telephone": "5125550100",
            "email": "jane@example.com",
        },
        "items": [
            {"item_id": 1, "sku": "TEE-RED-M", "name": "Tee", "qty_ordered": 2,
             "price": 25.0, "row_total": 50.0, "product_type": "configurable"},
            {"item_id": 2, "sku": "TEE-RED-M", "name": "Tee Red M", "qty_ordered": 2,
             "price": 0, "row_total": 0, "product_type": "simple", "discount_amount": 3.0},
        ],
        "extension_attributes": {
            "shipping_assignments": [
                {"shipping": {"address": {"firstname": "John", "lastname": "Roe",
                                          "street": ["9 Elm St"], "city": "Dallas",
                                          "region": "Texas", "postcode": "75001",
                                          "country_id": "US"}}}
            ]
        },
        "created_at": "2024-05-01 10:00:00",
        "updated_at": "2024-05-02 10:00:00",
    }


def sample_product(**overrides):
    data = {
        "id": 10,
        "sku": "TEE",
        "name": "Tee",
        "status": 1,
        "price": 25.0,
        "type_id": "configurable",
        "attribute_set_id": 4,
        "created_at": "2024-01-01 00:00:00",
        "updated_at": "2024-01-02 00:00:00",
        "custom_attributes": [
            {"attribute_code": "description", "value": "<p>Soft tee</p>"},
            {"attribute_code": "url_key", "value": "tee"},
        ],
        "media_gallery_entries": [{"file": "/t/e/tee.jpg"}],
        "extension_attributes": {
            "category_links": [{"category_id": "3"}],
            "configurable_product_options": [
                {"attribute_id": 93, "label": "Color", "values": [{"value_index": 42}, {"value_index": 43}]},
            ],
        },
    }
    data.update(overrides)
    return data


def sample_child(**overrides):
    data = {
        "id": 11,
        "sku": "TEE-RED-M",
        "name": "Tee Red M",
        "status": 1,
        "price": 25.0,
        "weight": 0.5,
        "type_id": "simple",
        "attribute_set_id": 4,
        "custom_attributes": [
            {"attribute_code": "color", "value": "42"},
            {"attribute_code": "special_price", "value": "19.99"},
            {"attribute_code": "cost", "value": "8"},
            {"attribute_code": "gtin", "value": "0123456789012"},
            {"attribute_code": "ts_dimensions_length", "value": "10"},
        ],
    }
    data.update(overrides)
    return data


def custom_fields(entity):
    return {f["name"]: f["value"] for f in entity["customFields"]}


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------

class TestOrderTranslator:
    @pytest.fixture
    def order(self):
        return OrderTranslator(NS).to_canonical(sample_order())

    def test_configurable_parent_line_excluded(self, order):
        assert len(order["lineItems"]) == 1
        assert order["lineItems"][0]["id"] == "2"
        assert order["lineItems"][0]["customFields"] == [{"name": "m2:product_type", "value": "simple"}]

    def test_order_discount_is_magnitude(self, order):
        assert order["orderDiscount"] == 12.5

    def test_line_discount_non_negative(self, order):
        assert order["lineItems"][0]["unitDiscount"] == 3.0

    def test_identity_fields(self, order):
        assert order["id"] == "100"
        assert order["name"] == "000000100"
        assert order["status"] == "processing"
        assert "externalId" not in order

    def test_custom_fields_preserve_native_state(self, order):
        fields = custom_fields(order)
        assert fields["m2:state"] == "processing"
        assert fields["m2:status"] == "processing"
        assert fields["m2:store_id"] == "1"

    def test_billing_address(self, order):
        addr = order["billingAddress"]
        assert addr["address1"] == "1 Main St"
        assert addr["address2"] == "Apt 2"
        assert addr["stateOrProvince"] == "TX"
        assert addr["zipCodeOrPostalCode"] == "78701"

    def test_shipping_address_from_assignment(self, order):
        addr = order["shippingAddress"]
        assert addr["firstName"] == "John"
        assert addr["stateOrProvince"] == "Texas"
        assert addr["address2"] == ""
        assert "email" not in addr

    def test_missing_shipping_assignment_omits_field(self):
        m2 = sample_order()
        del m2["extension_attributes"]
        del m2["billing_address"]
        order = OrderTranslator(NS).to_canonical(m2)
        assert "shippingAddress" not in order
        assert "billingAddress" not in order

    def test_exclude_line_items(self):
        order = OrderTranslator(NS).to_canonical(sample_order(), include_line_items=False)
        assert "lineItems" not in order

    def test_payments(self, order):
        assert order["payments"] == [{"method": "checkmo"}]


class TestOrderToNative:
    def test_totals_computed_from_items(self):
        entity = OrderTranslator(NS).to_native({
            "lineItems": [{"sku": "A", "quantity": 2, "unitPrice": 10.0}],
            "orderDiscount": 5,
            "orderTax": 1,
            "shippingPrice": 4,
        })
        assert entity["subtotal"] == 20.0
        assert entity["grand_total"] == 20.0
        assert entity["discount_amount"] == -5
        assert entity["items"][0]["row_total"] == 20.0
        assert entity["customer_email"] == "guest@example.com"

    def test_shipping_method_and_addresses(self):
        entity = OrderTranslator(NS).to_native({
            "lineItems": [{"sku": "A", "quantity": 1, "unitPrice": 10.0}],
            "customer": {"email": "a@b.com"},
            "billingAddress": {"firstName": "Ann", "address1": "1 Road", "country": "CA"},
            "shippingCode": "ups",
            "shippingClass": "ground",
            "externalId": "EXT-1",
            "currency": "CAD",
        })
        assert entity["shipping_method"] == "ups_ground"
        assert entity["billing_address"]["firstname"] == "Ann"
        assert entity["billing_address"]["lastname"] == "Customer"
        assert entity["billing_address"]["street"] == ["1 Road"]
        assert entity["billing_address"]["email"] == "a@b.com"
        shipping = entity["extension_attributes"]["shipping_assignments"][0]["shipping"]
        assert shipping["address"]["country_id"] == "CA"
        assert entity["ext_order_id"] == "EXT-1"
        assert entity["order_currency_code"] == "CAD"

    def test_no_discount_is_zero(self):
        entity = OrderTranslator(NS).to_native({"lineItems": []})
        assert entity["discount_amount"] == 0


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------

def test_nested_region_object():
    addr = address_to_canonical({"region": {"region_code": "CA", "region": "California"}})
    assert addr["stateOrProvince"] == "CA"


def test_merge_address_update_keeps_unset_fields():
    merged = merge_address_update(
        {"firstname": "Old", "city": "Austin", "street": ["1 Main"]},
        {"firstName": "New", "address1": "2 Side"},
    )
    assert merged == {"firstname": "New", "city": "Austin", "street": ["2 Side", ""]}


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------

class TestCustomerTranslator:
    def test_customer_fields(self):
        customer = CustomerTranslator(NS).to_canonical({
            "id": 7,
            "email": "c@example.com",
            "firstname": "Cal",
            "lastname": "Lee",
            "group_id": 1,
            "gender": 2,
            "created_at": "2024-01-01",
            "updated_at": "2024-01-02",
            "addresses": [
                {"default_billing": True, "firstname": "Cal", "city": "Reno",
                 "region": {"region_code": "NV"}},
                {"city": "Elko"},
            ],
        })
        assert customer["id"] == "7"
        assert [a["name"] for a in customer["addresses"]] == ["billing", "other"]
        assert customer["addresses"][0]["address"]["stateOrProvince"] == "NV"
        fields = custom_fields(customer)
        assert fields["m2:group_id"] == "1"
        assert fields["m2:gender"] == "female"

    def test_unknown_gender_is_empty(self):
        customer = CustomerTranslator("acme").to_canonical({"id": 1, "group_id": 1})
        assert custom_fields(customer)["acme:gender"] == ""


# ---------------------------------------------------------------------------
# Products and variants
# ---------------------------------------------------------------------------

class TestProductTranslator:
    def test_options_from_configurable_metadata(self):
        product = ProductTranslator(NS).to_canonical(ProductRecord.from_dict(sample_product()))
        assert product["options"] == [{"name": "Color", "values": ["42", "43"]}]
        assert product["status"] == "active"
        assert product["description"] == "<p>Soft tee</p>"
        assert product["handle"] == "tee"
        assert product["categories"] == ["3"]
        assert product["imageURLs"] == ["/t/e/tee.jpg"]

    def test_default_option_when_none(self):
        product = ProductTranslator(NS).to_canonical(
            ProductRecord.from_dict(sample_product(extension_attributes={}, type_id="simple"))
        )
        assert product["options"] == [{"name": "Default", "values": []}]

    def test_default_option_not_shared_between_products(self):
        translator = ProductTranslator(NS)
        plain = sample_product(extension_attributes={}, type_id="simple")
        first = translator.to_canonical(ProductRecord.from_dict(plain))
        first["options"][0]["values"].append("changed")

        second = translator.to_canonical(ProductRecord.from_dict(plain))
        assert second["options"] == [{"name": "Default", "values": []}]

    def test_custom_fields(self):
        product = ProductTranslator(NS).to_canonical(ProductRecord.from_dict(sample_product()))
        fields = custom_fields(product)
        assert fields["m2:type_id"] == "configurable"
        assert fields["m2:attribute_set_id"] == "4"


class TestVariantTranslator:
    def test_with_parent(self):
        variant = VariantTranslator(NS, "EUR").to_canonical(
            ProductRecord.from_dict(sample_child()),
            parent_id="10",
            selected_options=[{"name": "Color", "value": "42"}],
        )
        assert variant["productId"] == "10"
        assert "externalProductId" not in variant
        assert variant["currency"] == "EUR"
        assert variant["selectedOptions"] == [{"name": "Color", "value": "42"}]

    def test_without_parent_uses_sku(self):
        variant = VariantTranslator(NS, "USD").to_canonical(ProductRecord.from_dict(sample_child()))
        assert "productId" not in variant
        assert variant["externalProductId"] == "TEE-RED-M"
        assert variant["selectedOptions"] == []

    def test_pricing_and_attributes(self):
        variant = VariantTranslator(NS, "USD").to_canonical(ProductRecord.from_dict(sample_child()))
        assert variant["compareAtPrice"] == 19.99
        assert variant["cost"] == 8.0
        assert variant["costCurrency"] == "USD"
        assert variant["barcode"] == "0123456789012"
        assert "upc" not in variant
        assert variant["weight"] == {"value": 0.5, "unit": "lb"}
        assert variant["dimensions"] == {"length": 10.0, "width": 0, "height": 0, "unit": "in"}

    def test_absent_optional_fields_omitted(self):
        child = sample_child(custom_attributes=[], weight=None)
        variant = VariantTranslator(NS, "USD").to_canonical(ProductRecord.from_dict(child))
        for key in ("compareAtPrice", "cost", "costCurrency", "weight", "dimensions", "barcode"):
            assert key not in variant

    def test_non_numeric_prices_omitted(self):
        child = sample_child(custom_attributes=[
            {"attribute_code": "special_price", "value": "n/a"},
            {"attribute_code": "cost", "value": "tbd"},
        ])
        variant = VariantTranslator(NS, "USD").to_canonical(ProductRecord.from_dict(child))
        for key in ("compareAtPrice", "cost", "costCurrency"):
            assert key not in variant
        assert variant["sku"] == "TEE-RED-M"


# ---------------------------------------------------------------------------
# Fulfillments
# ---------------------------------------------------------------------------

class TestFulfillmentTranslator:
    def test_shipment_to_fulfillment(self):
        fulfillment = FulfillmentTranslator(NS).to_canonical({
            "entity_id": 9,
            "order_id": 100,
            "increment_id": "000000009",
            "items": [{"entity_id": 3, "sku": "A", "qty": 1, "name": "Thing"}],
            "tracks": [{"track_number": "1Z1", "title": "UPS", "carrier_code": "ups"},
                       {"track_number": "1Z2", "title": "UPS", "carrier_code": "ups"}],
            "extension_attributes": {"source_code": "warehouse_1"},
            "created_at": "2024-05-03",
            "updated_at": "2024-05-03",
        })
        assert fulfillment["id"] == "9"
        assert fulfillment["orderId"] == "100"
        assert fulfillment["trackingNumbers"] == ["1Z1", "1Z2"]
        assert fulfillment["shippingCarrier"] == "UPS"
        assert fulfillment["shippingCode"] == "ups"
        assert fulfillment["locationId"] == "warehouse_1"
        assert "shippingAddress" not in fulfillment
        fields = custom_fields(fulfillment)
        assert fields["m2:shipment_id"] == "9"
        assert fields["m2:increment_id"] == "000000009"

    def test_ship_payload(self):
        payload = FulfillmentTranslator.to_native({
            "orderId": "100",
            "trackingNumbers": ["1Z1"],
            "shippingCarrier": "UPS",
            "shippingNote": "Leave at door",
            "locationId": "warehouse_1",
        })
        assert payload["notify"] is True
        assert payload["tracks"] == [{"carrier_code": "UPS", "title": "UPS", "track_number": "1Z1"}]
        assert payload["comment"]["comment"] == "Leave at door"
        assert payload["arguments"]["extension_attributes"]["source_code"] == "warehouse_1"

    def test_ship_payload_without_tracking(self):
        payload = FulfillmentTranslator.to_native({"orderId": "1", "trackingNumbers": []})
        assert payload == {"notify": True}


# ---------------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------------

def test_source_item_record():
    record = InventoryTranslator(NS).from_source_item({"sku": "A", "source_code": "wh1", "quantity": 7})
    assert record == {"sku": "A", "locationId": "wh1", "available": 7, "onHand": 7,
                      "unavailable": 0, "tenantId": "m2"}


def test_stock_item_record():
    record = InventoryTranslator(NS).from_stock_item("A", {"qty": 3})
    assert record["locationId"] == "default"
    assert record["available"] == 3
