import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def product_data() -> str:
    """Sample product document as returned by the v2 products endpoint."""
    return (FIXTURES / "product.json").read_text(encoding="utf-8")


@pytest.fixture
def product_document(product_data) -> dict:
    return json.loads(product_data)
