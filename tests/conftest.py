import json
from typing import Any

import pytest


def _sample_payload() -> dict[str, Any]:
    return {
        "page": {"data": {"title": "Walnut side table", "listing_id": 90210}},
        "social_sharing_data": {
            "data_fields": {
                "description": "A hand-finished walnut side table.",
                "tags": ["walnut", "table", "handmade"],
            }
        },
        "xo_metadata": {
            "entities": [
                {
                    "terms": {
                        "designer": {
                            "id": "d-001",
                            "name": "Ada Joinery",
                            "url": "https://example.com/designers/d-001",
                        },
                        "dimensions": {"width": 18.5, "height": 24, "unit": "in"},
                    },
                    "ratings": [4, 5, 5],
                },
                {
                    "terms": {"designer": {"id": "d-002", "name": "Oak & Co"}},
                    "ratings": [],
                },
            ],
            "matrix": [[1, 2], [3, 4], [5, 6]],
        },
        "flags": {"in_stock": True, "discount": None},
    }


@pytest.fixture(scope="function")
def sample_payload() -> dict[str, Any]:
    return _sample_payload()


@pytest.fixture(scope="function")
def sample_json(sample_payload: dict[str, Any]) -> bytes:
    return json.dumps(sample_payload).encode("utf-8")


@pytest.fixture(scope="function")
def mixed_json() -> bytes:
    return b'{"a": [{"b": "x"}, {"b": "y"}]}'
