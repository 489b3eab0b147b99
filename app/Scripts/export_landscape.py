#!/usr/bin/env python
"""
Export landscape summaries to JSON files.

Runs the same services the API uses and writes one <domain>.json per
analysis domain, in the same {success, data | error} envelope.

Usage:
    python -m app.Scripts.export_landscape --domains all
    python -m app.Scripts.export_landscape --domains geographic,timeline --output-dir data/exports
    python -m app.Scripts.export_landscape --data-dir /mnt/exports/2024-q4
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel

from app.repositories.csv_repository import CsvRepository
from app.services.classification_service import ClassificationService
from app.services.entity_service import EntityService
from app.services.errors import NoLandscapeDataError
from app.services.geographic_service import GeographicService
from app.services.timeline_service import TimelineService

logger = structlog.get_logger()

DOMAINS: Dict[str, Callable[[CsvRepository], BaseModel]] = {
    "geographic": lambda repo: GeographicService(repo).get_geographic_data(),
    "entity": lambda repo: EntityService(repo).get_entity_data(),
    "classification": lambda repo: ClassificationService(repo).get_classification_data(),
    "timeline": lambda repo: TimelineService(repo).get_timeline_data(),
}


def export_domain(domain: str, repository: CsvRepository, output_dir: Path) -> bool:
    """Write <domain>.json; returns False when the domain had no data."""
    try:
        data = DOMAINS[domain](repository)
        payload = {"success": True, "data": data.model_dump(mode="json", by_alias=True)}
        ok = True
    except NoLandscapeDataError as e:
        logger.warning("No data for domain", domain=domain, error=e.message)
        payload = {"success": False, "error": e.message}
        ok = False

    path = output_dir / f"{domain}.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False, default=str)

    logger.info("Exported domain", domain=domain, path=str(path), success=ok)
    return ok


def main(domains: List[str], output_dir: str, data_dir: Optional[str] = None) -> dict:
    """Main export routine."""
    repository = CsvRepository(data_dir)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    stats = {
        "domains": 0,
        "exported": 0,
        "empty": 0,
    }

    for domain in domains:
        if domain not in DOMAINS:
            logger.warning("Unknown domain", domain=domain)
            continue

        stats["domains"] += 1
        if export_domain(domain, repository, out):
            stats["exported"] += 1
        else:
            stats["empty"] += 1

    logger.info("Export complete", data_dir=str(repository.data_dir), **stats)
    return stats


def parse_domains(value: str) -> List[str]:
    if value == "all":
        return list(DOMAINS.keys())
    return [d.strip().lower() for d in value.split(",") if d.strip()]


def cli(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Export patent landscape summaries to JSON"
    )
    parser.add_argument(
        "--domains",
        default="all",
        help="Comma-separated domains (geographic, entity, classification, timeline) or 'all'"
    )
    parser.add_argument(
        "--output-dir",
        default="data/exports",
        help="Directory to write <domain>.json files into"
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Root holding raw/ and processed/ (defaults to $PATENT_DATA_DIR or ./data)"
    )
    args = parser.parse_args(argv)

    stats = main(parse_domains(args.domains), args.output_dir, args.data_dir)
    return 1 if stats["empty"] else 0


if __name__ == "__main__":
    sys.exit(cli())
