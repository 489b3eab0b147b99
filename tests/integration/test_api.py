"""End-to-end tests for the landscape endpoints through the FastAPI app."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.routers.responses import CACHE_CONTROL
from app.services.timeline_service import get_timeline_service


pytestmark = pytest.mark.integration

DOMAIN_PATHS = ["/api/v1/geographic", "/api/v1/entity", "/api/v1/classification", "/api/v1/timeline"]


class TestGeographicEndpoint:
    def test_summary(self, client):
        response = client.get("/api/v1/geographic")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]

        assert [(c["countryCode"], c["total"]) for c in data["familyData"]["list"]] == [
            ("US", 120),
            ("SE", 30),
            ("NO", 12),
            ("XX", 3),
        ]
        assert data["familyData"]["list"][3]["iso3"] is None
        assert [(r["code"], r["total"]) for r in data["familySpecialRegions"]] == [("WO", 7), ("EP", 5)]
        assert [(c["countryCode"], c["total"]) for c in data["familyNordic"]] == [
            ("SE", 30),
            ("NO", 12),
            ("FI", 0),
            ("DK", 0),
            ("IS", 0),
        ]
        assert [(c["countryCode"], c["total"]) for c in data["priorityData"]["list"]] == [("NO", 40), ("US", 25)]
        assert data["filingTrends"][0] == {"Year": "2019", "Count": "10"}

    def test_cache_header(self, client):
        response = client.get("/api/v1/geographic")
        assert response.headers["cache-control"] == CACHE_CONTROL
        assert "s-maxage=3600" in CACHE_CONTROL
        assert "stale-while-revalidate=86400" in CACHE_CONTROL

    def test_sources_report_resolved_files(self, client):
        sources = {s["dataset"]: s for s in client.get("/api/v1/geographic").json()["data"]["sources"]}
        assert sources["family_country"]["found"] is True
        assert sources["family_country"]["records"] == 6
        assert sources["priority_country"]["filename"] == "Priority_Country_Map.csv"

    def test_priority_only_still_succeeds(self, empty_client, write_csv):
        write_csv("Priority_Country_Map.csv", "Priority Country,Total\nNO,40\n")

        response = empty_client.get("/api/v1/geographic")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["familyData"] == {"map": [], "list": []}
        assert data["priorityData"]["list"][0]["countryName"] == "Norway"


class TestEntityEndpoint:
    def test_rankings(self, client):
        data = client.get("/api/v1/entity").json()["data"]

        assert [(a["assignee"], a["count"]) for a in data["assigneeCount"]] == [
            ("Equinor ASA", 40),
            ("Aker BP", 12),
        ]
        assert [(a["assignee"], a["country"], a["count"]) for a in data["assignees"]] == [
            ("Schlumberger", "US", 55),
            ("Equinor ASA", "NO", 40),
        ]
        assert [(i["inventor"], i["count"]) for i in data["inventors"]] == [
            ("Ola Nordmann", 2),
            ("Kari Nordmann", 1),
        ]
        assert data["inventorCount"][0]["inventor"] == "Ola Nordmann"
        assert data["inventorCount"][0]["count"] == 5

    def test_single_file_is_enough(self, empty_client, write_csv):
        write_csv("Inventor_Country.csv", "Inventor,Country\nOla Nordmann,NO\n")

        response = empty_client.get("/api/v1/entity")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["assignees"] == []
        assert data["inventors"][0]["inventor"] == "Ola Nordmann"


class TestClassificationEndpoint:
    def test_owner_pivot(self, client):
        data = client.get("/api/v1/classification").json()["data"]

        assert data["ipcOwnerColumns"] == ["E21B", "G01V", "F16L", "B63B", "H02J"]
        assert [(r["currentOwner"], r["total"]) for r in data["ipcByOwner"]] == [
            ("Equinor ASA", 30),
            ("Aker BP", 10),
        ]
        assert data["ipcByOwner"][0]["E21B"] == 20

    def test_full_and_year(self, client):
        data = client.get("/api/v1/classification").json()["data"]

        assert data["ipcFull"] == [
            {"classification": "E21B", "total": 50},
            {"classification": "G01V", "total": 20},
        ]
        assert [row["year"] for row in data["ipcByYear"]] == [2018, 2019]
        assert data["cpcFull"] == []
        assert data["cpcByOwner"] == []
        assert data["cpcByYear"] == []

    def test_missing_files_reported_in_sources(self, client):
        sources = {s["dataset"]: s for s in client.get("/api/v1/classification").json()["data"]["sources"]}
        assert sources["cpc_full"]["found"] is False
        assert sources["cpc_full"]["error"].startswith("File not found")


class TestTimelineEndpoint:
    def test_timeline(self, client):
        data = client.get("/api/v1/timeline").json()["data"]

        assert data["ownerKey"] == "Current Owner"
        assert data["years"] == [2018, 2019, 2020]
        assert [(p["owner"], p["year"], p["count"]) for p in data["points"]] == [
            ("Equinor ASA", 2018, 2),
            ("Equinor ASA", 2019, 5),
            ("Aker BP", 2018, 1),
            ("Aker BP", 2020, 3),
        ]
        assert data["yearTotals"] == [
            {"year": 2018, "count": 3},
            {"year": 2019, "count": 5},
            {"year": 2020, "count": 3},
        ]
        assert data["heatmap"]["matrix"] == [[2, 5, 0], [1, 0, 3]]
        assert data["summary"] == {
            "totalFilings": 11,
            "ownerCount": 2,
            "firstYear": 2018,
            "lastYear": 2020,
            "peakYear": 2019,
            "peakYearCount": 5,
        }

    def test_bom_header(self, empty_client, write_csv):
        write_csv("Timeline_Current_Owner_Count.csv", "Current Owner,2019\nEquinor ASA,4\n", bom=True)

        data = empty_client.get("/api/v1/timeline").json()["data"]

        assert data["ownerKey"] == "Current Owner"
        assert data["points"] == [{"owner": "Equinor ASA", "year": 2019, "count": 4}]

    def test_blank_owner_header(self, empty_client, write_csv):
        write_csv("Timeline_Current_Owner_Count.csv", ",2018,2019\nEquinor ASA,2,3\n")

        data = empty_client.get("/api/v1/timeline").json()["data"]

        assert data["ownerKey"] == ""
        assert data["years"] == [2018, 2019]
        assert [(p["owner"], p["year"], p["count"]) for p in data["points"]] == [
            ("Equinor ASA", 2018, 2),
            ("Equinor ASA", 2019, 3),
        ]

    def test_header_only_file_is_an_error(self, empty_client, write_csv):
        write_csv("Timeline_Current_Owner_Count.csv", "Current Owner,2019\n")

        response = empty_client.get("/api/v1/timeline")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "No data found in Timeline_Current_Owner_Count.csv",
        }


class TestEmptyData:
    @pytest.mark.parametrize("path", DOMAIN_PATHS)
    def test_domain_without_any_file_fails(self, empty_client, path):
        response = empty_client.get(path)

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"]
        assert "data" not in body

    def test_timeline_missing_file_message(self, empty_client):
        body = empty_client.get("/api/v1/timeline").json()
        assert body["error"] == "File not found: Timeline_Current_Owner_Count.csv"


class TestServiceEndpoints:
    def test_root(self, client):
        body = client.get("/").json()
        assert body["version"] == "1.0.0"
        assert len(body["endpoints"]) == 4

    def test_health(self, client, sample_data_dir):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["dataDir"] == str(sample_data_dir)
        assert body["rawDirExists"] is True
        assert body["processedDirExists"] is True


class FailingTimelineService:
    def get_timeline_data(self):
        raise ValueError("boom")


@pytest.fixture
def failing_client():
    app.dependency_overrides[get_timeline_service] = lambda: FailingTimelineService()
    # Starlette re-raises after the 500 handler runs; keep the response instead
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


class TestUnexpectedErrors:
    def test_unexpected_exception_uses_envelope(self, failing_client):
        response = failing_client.get("/api/v1/timeline")

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"success": False, "error": "boom"}

    def test_other_domains_unaffected(self, failing_client):
        assert failing_client.get("/").status_code == 200
