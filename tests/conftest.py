import pytest
from fastapi.testclient import TestClient

from receipt_points.config import Settings
from receipt_points.main import create_app
from receipt_points.schemas import Receipt
from receipt_points.store import ReceiptStore

# scores 0 under every rule
ZERO_RECEIPT = {
	"retailer": "&",
	"purchaseDate": "2022-01-02",
	"purchaseTime": "10:00",
	"items": [],
	"total": "0.01",
}

TARGET_RECEIPT = {
	"retailer": "Target",
	"purchaseDate": "2022-01-01",
	"purchaseTime": "13:01",
	"items": [
		{"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
		{"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
		{"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
		{"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
		{"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
	],
	"total": "35.35",
}

CORNER_MARKET_RECEIPT = {
	"retailer": "M&M Corner Market",
	"purchaseDate": "2022-03-20",
	"purchaseTime": "14:33",
	"items": [
		{"shortDescription": "Gatorade", "price": "2.25"},
		{"shortDescription": "Gatorade", "price": "2.25"},
		{"shortDescription": "Gatorade", "price": "2.25"},
		{"shortDescription": "Gatorade", "price": "2.25"},
	],
	"total": "9.00",
}


@pytest.fixture
def make_receipt():
	def _make(**overrides) -> Receipt:
		return Receipt.model_validate({**ZERO_RECEIPT, **overrides})

	return _make


@pytest.fixture
def store():
	return ReceiptStore()


@pytest.fixture
def client(store):
	app = create_app(Settings(otlp_endpoint=None, json_logs=False), store=store)
	with TestClient(app) as c:
		yield c
