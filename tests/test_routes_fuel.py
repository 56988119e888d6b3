"""
Tests for fuel entry routes.
"""

from unittest.mock import patch

import pytest
from freezegun import freeze_time

from fueltracker.config import Config


def post_entry(client, **data):
    payload = {
        "date": "2024-01-05T08:00:00",
        "fuel_type": "Benzin-95",
        "liters": 40.0,
        "price_per_liter": 2.0,
        "odometer": 10000.0,
        "station": "Shell",
    }
    payload.update(data)
    return client.post("/api/fuel/entries", json=payload)


@pytest.fixture
def seeded(client):
    """Three entries over two months, posted out of date order."""
    post_entry(client, date="2024-01-05T08:00:00", odometer=10000.0, station="Shell")
    post_entry(client, date="2024-02-10T08:00:00", odometer=10950.0, fuel_type="Dizel",
               station="Opet", notes="Long weekend")
    post_entry(client, date="2024-01-25T08:00:00", odometer=10500.0, station="BP")
    return client


class TestAddEntry:
    """Tests for POST /api/fuel/entries."""

    def test_add_entry(self, client):
        response = post_entry(client)

        assert response.status_code == 201
        data = response.get_json()
        assert data["id"] is not None
        assert data["total_amount"] == 80.0
        assert data["distance"] is None
        assert data["date"] == "2024-01-05T08:00:00"

    def test_second_entry_gets_distance(self, client):
        post_entry(client)
        response = post_entry(client, date="2024-01-20T08:00:00", odometer=10450.0)

        assert response.get_json()["distance"] == 450.0

    def test_no_data(self, client):
        response = client.post("/api/fuel/entries", data="", content_type="application/json")
        assert response.status_code == 400

    def test_invalid_number(self, client):
        response = post_entry(client, liters="forty")

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Validation failed"
        assert data["details"]["field"] == "liters"

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
    def test_non_finite_number(self, client, raw):
        response = post_entry(client, liters=raw)

        assert response.status_code == 400
        assert response.get_json()["details"]["field"] == "liters"
        assert client.get("/api/fuel/entries").get_json()["count"] == 0

    def test_same_date_entry_links_to_earlier_insert(self, client):
        post_entry(client, date="2024-01-01", odometer=1000.0)
        post_entry(client, date="2024-01-15", odometer=1500.0)

        response = post_entry(client, date="2024-01-15", odometer=1900.0)

        assert response.get_json()["distance"] == 400.0


class TestListEntries:
    """Tests for GET /api/fuel/entries."""

    def test_empty(self, client):
        response = client.get("/api/fuel/entries")

        assert response.status_code == 200
        assert response.get_json() == {"entries": [], "count": 0, "total": 0}

    def test_newest_first(self, seeded):
        data = seeded.get("/api/fuel/entries").get_json()

        assert data["count"] == 3
        assert [e["station"] for e in data["entries"]] == ["Opet", "BP", "Shell"]

    def test_filter_by_fuel_type(self, seeded):
        data = seeded.get("/api/fuel/entries?fuel_type=Dizel").get_json()
        assert [e["station"] for e in data["entries"]] == ["Opet"]

    def test_search(self, seeded):
        data = seeded.get("/api/fuel/entries?q=weekend").get_json()
        assert [e["station"] for e in data["entries"]] == ["Opet"]

    def test_cap_applies_after_filtering(self, seeded):
        with patch.object(Config, "API_MAX_ENTRIES", 1):
            data = seeded.get("/api/fuel/entries?q=shell").get_json()

        assert [e["station"] for e in data["entries"]] == ["Shell"]
        assert data["total"] == 1

    def test_cap_limits_page(self, seeded):
        with patch.object(Config, "API_MAX_ENTRIES", 2):
            data = seeded.get("/api/fuel/entries").get_json()

        assert [e["station"] for e in data["entries"]] == ["Opet", "BP"]
        assert data["count"] == 2
        assert data["total"] == 3

    def test_distances_follow_date_order(self, seeded):
        entries = seeded.get("/api/fuel/entries").get_json()["entries"]
        distances = {e["station"]: e["distance"] for e in entries}

        assert distances == {"Shell": None, "BP": 500.0, "Opet": 450.0}


class TestSingleEntry:
    """Tests for GET/DELETE /api/fuel/entries/<id>."""

    def test_get_entry(self, client):
        entry_id = post_entry(client).get_json()["id"]

        response = client.get(f"/api/fuel/entries/{entry_id}")

        assert response.status_code == 200
        assert response.get_json()["station"] == "Shell"

    def test_get_missing_entry(self, client):
        assert client.get("/api/fuel/entries/999").status_code == 404

    def test_delete_entry(self, client):
        entry_id = post_entry(client).get_json()["id"]

        response = client.delete(f"/api/fuel/entries/{entry_id}")

        assert response.status_code == 200
        assert client.get(f"/api/fuel/entries/{entry_id}").status_code == 404

    def test_delete_missing_entry(self, client):
        assert client.delete("/api/fuel/entries/999").status_code == 404


class TestFuelTypes:
    """Tests for GET /api/fuel/types."""

    def test_types(self, seeded):
        data = seeded.get("/api/fuel/types").get_json()

        assert data["available"] == ["Benzin-95", "Benzin-97", "Dizel", "Euro-Dizel", "LPG", "Other"]
        assert data["in_use"] == ["Benzin-95", "Dizel"]


class TestFuelPrices:
    """Tests for GET /api/fuel/prices."""

    @freeze_time("2024-05-01 09:30:00")
    def test_default_region(self, client):
        response = client.get("/api/fuel/prices")

        assert response.status_code == 200
        data = response.get_json()
        assert data["region"] == "Istanbul"
        assert data["regions"] == ["Istanbul", "Ankara", "Izmir", "Antalya", "Bursa"]
        assert data["prices"][0] == {
            "date": "2024-05-01T09:30:00",
            "fuel_type": "Benzin-95",
            "price": 38.76,
            "region": "Istanbul",
            "formatted_price": "38.76 ₺/L",
        }

    def test_region_is_case_insensitive(self, client):
        data = client.get("/api/fuel/prices?region=izmir").get_json()

        assert data["region"] == "Izmir"
        assert {p["region"] for p in data["prices"]} == {"Izmir"}

    def test_turkish_formatting(self, client):
        data = client.get("/api/fuel/prices?region=Ankara&locale=tr").get_json()
        assert data["prices"][-1]["formatted_price"] == "16,28 ₺/L"

    def test_unknown_region(self, client):
        response = client.get("/api/fuel/prices?region=Paris")

        assert response.status_code == 400
        assert "Istanbul" in response.get_json()["regions"]
