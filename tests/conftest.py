"""Pytest fixtures: a recording fake of WebDistributionClient and sample API payloads."""

import copy

import pytest


class FakeClient:
    """Returns queued responses in order and records every call."""

    def __init__(self, responses=None):
        self.calls = []
        self.responses = list(responses or [])
        self.closed = False

    def queue(self, *responses):
        self.responses.extend(responses)

    def _next(self, method, path, payload):
        self.calls.append((method, path, copy.deepcopy(payload)))
        if not self.responses:
            raise AssertionError(f"Unexpected request {method} {path}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get_json(self, path, query=None):
        return self._next("GET", path, query)

    def put_json(self, path, body):
        return self._next("PUT", path, body)

    def post(self, path, body=None):
        return self._next("POST", path, body)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def product_payload():
    def build(**overrides):
        payload = {
            "id": 101,
            "item_number": "1234-01",
            "style_id": 55,
            "color_name": "Ivory",
            "warehouse_location": "A-12",
            "sample_warehouse_location": "S-3",
            "deleted_at": None,
            "style": {
                "id": 55,
                "name": "Belgravia",
                "content": "100% Linen",
                "width": 54,
                "repeat": "None",
                "product_category_code": {"id": 3, "name": "Drapery"},
                "primary_price": {"wholesale_price": 42.5},
                "selling_unit": {"name": "Yard"},
                "mill_unit": {"name": "Meter"},
            },
            "company": {"id": 1, "name": "Acme Textiles", "code": "ACME"},
            "line": {"id": 7, "name": "Spring", "company_id": 1},
            "primary_book": {"name": "Linens Vol. 2"},
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def transaction_payload():
    return {
        "id": 9001,
        "transaction_number": "S-100234",
        "company_id": 1,
        "status": "open",
        "po_number": "PO-77",
        "customer": {
            "id": 300,
            "customer_number": "C300",
            "name": "Hotel Lumiere",
            "country": {"id": 1, "name": "United States", "code": "US"},
            "primary_address": {
                "address_1": "1 Main St",
                "city": "Charlotte",
                "postal_code": "28202",
                "country": {"code": "US"},
                "state": {"name": "North Carolina", "code": "NC"},
            },
            "tier": "gold",
        },
        "specifier": None,
        "rep1": {"id": 12, "name": "Dana Rep"},
        "ship_to_name": "Hotel Lumiere Receiving",
        "ship_to_country": {"code": "US"},
        "ship_to_state": {"code": "NC"},
        "holds": [{"id": 1, "hold": {"name": "Credit", "code": "CR"}}],
        "items": [
            {
                "id": 501,
                "item_id": 101,
                "quantity_ordered": 12.5,
                "item": {"item_number": "1234-01", "color_name": "Ivory", "style": {"name": "Belgravia"}},
                "allocated_pieces": [
                    {
                        "piece_id": 77,
                        "quantity": 10,
                        "piece": {"lot": "L9", "piece": "P1", "warehouse": {"id": 2, "name": "Main"}},
                    },
                    {"piece_id": 78, "quantity": 2.5},
                ],
            }
        ],
    }
