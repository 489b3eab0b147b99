# patent-landscape-api/tests/conftest.py
#
# Core fixtures:
# - write_csv: writes a CSV fixture into <tmp>/data/{raw,processed}
# - data_dir / repository: an empty data directory and a CsvRepository over it
# - sample_data_dir: a data directory holding one export per dataset
# - client / empty_client: TestClient with the services pointed at a data directory
#
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.repositories.csv_repository import CsvRepository, get_csv_repository
from app.services.classification_service import ClassificationService, get_classification_service
from app.services.entity_service import EntityService, get_entity_service
from app.services.geographic_service import GeographicService, get_geographic_service
from app.services.timeline_service import TimelineService, get_timeline_service


SAMPLE_FILES = {
    ("raw", "All_Family_Country_Map.csv"): (
        "All Family Country,Total\n"
        "US,120\n"
        "NO,12\n"
        "EP,5\n"
        "SE,30\n"
        "XX,3\n"
        "WO,7\n"
    ),
    ("raw", "Priority_Country_Map.csv"): (
        "Priority Country,Total\n"
        "NO,40\n"
        "US,25\n"
    ),
    ("raw", "Patenting_Trends.csv"): (
        "Year,Count\n"
        "2019,10\n"
        "2020,14\n"
    ),
    ("raw", "Assignee_Count.csv"): (
        "Assignee,Count\n"
        "Aker BP,12\n"
        "Equinor ASA,40\n"
    ),
    ("raw", "Assignee_Country.csv"): (
        "Assignee,Country\n"
        "Equinor ASA,NO\n"
    ),
    ("raw", "Inventor_Count.csv"): (
        "Inventor,Count\n"
        "Ola Nordmann,5\n"
    ),
    ("raw", "Inventor_Country.csv"): (
        "Inventor,Country\n"
        "Ola Nordmann,NO\n"
        "Kari Nordmann,NO\n"
        "Ola Nordmann,NO\n"
    ),
    ("processed", "Assignee_Country_Count_Updated.csv"): (
        "Country,Assignee,Count\n"
        "NO,Equinor ASA,40\n"
        "US,Schlumberger,55\n"
        "NO,Tiny AS,0\n"
    ),
    ("raw", "IPC_Full.csv"): (
        "IPC,Total\n"
        '"E21B: Earth drilling",50\n'
        "G01V: Geophysics,20\n"
    ),
    ("raw", "Current-Owner_IPC-Full.csv"): (
        "Current Owner,Total,E21B: Earth drilling,G01V: Geophysics,F16L: Pipes,"
        "B63B: Ships,H02J: Power,G06F: Computing\n"
        "Aker BP,10,6,2,0,1,0,1\n"
        "Equinor ASA,30,20,5,3,1,1,0\n"
    ),
    ("processed", "IPC_Classifications_vs_Year.csv"): (
        "Application Year,E21B: Earth drilling,G01V: Geophysics\n"
        "2019,5,2\n"
        "1999,1,1\n"
        "2018,3,0\n"
    ),
    ("raw", "Timeline_Current_Owner_Count.csv"): (
        "Current Owner,2018,2019,2020\n"
        "Equinor ASA,2,5,0\n"
        "Aker BP,1,,3\n"
        "None,4,4,4\n"
    ),
}


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    root = tmp_path / "data"
    (root / "raw").mkdir(parents=True)
    (root / "processed").mkdir(parents=True)
    return root


@pytest.fixture
def write_csv(data_dir: Path) -> Callable[..., Path]:
    """Write `content` to data/<directory>/<name>; `bom=True` prefixes a UTF-8 BOM."""

    def _write(name: str, content: str, directory: str = "raw", bom: bool = False) -> Path:
        path = data_dir / directory / name
        path.write_text(("\ufeff" if bom else "") + content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def repository(data_dir: Path) -> CsvRepository:
    return CsvRepository(data_dir)


@pytest.fixture
def sample_data_dir(data_dir: Path, write_csv) -> Path:
    for (directory, name), content in SAMPLE_FILES.items():
        write_csv(name, content, directory=directory)
    return data_dir


def _client_for(data_dir: Path) -> TestClient:
    repo = CsvRepository(data_dir)
    app.dependency_overrides[get_csv_repository] = lambda: repo
    app.dependency_overrides[get_geographic_service] = lambda: GeographicService(repo)
    app.dependency_overrides[get_entity_service] = lambda: EntityService(repo)
    app.dependency_overrides[get_classification_service] = lambda: ClassificationService(repo)
    app.dependency_overrides[get_timeline_service] = lambda: TimelineService(repo)
    return TestClient(app)


@pytest.fixture
def client(sample_data_dir: Path):
    yield _client_for(sample_data_dir)
    app.dependency_overrides.clear()


@pytest.fixture
def empty_client(data_dir: Path):
    yield _client_for(data_dir)
    app.dependency_overrides.clear()
