"""
CSV Repository
app/repositories/csv_repository.py

Locates exported CSV files under the data directory and parses them into
ordered lists of {header: value} string mappings.

Storage structure:
    $PATENT_DATA_DIR/raw/*.csv
    $PATENT_DATA_DIR/processed/*.csv
"""

from __future__ import annotations

import io
import logging
import os
import re
import warnings
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd

from app.models.common import DataSource
from app.repositories.datasets import CsvDataset, DataDirectory

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "data"

BOM = "\ufeff"

CsvRecord = Dict[str, str]


class CsvFileNotFoundError(FileNotFoundError):
    """No file matched a dataset's canonical or alternate names."""

    def __init__(self, dataset: CsvDataset, directory: Path):
        self.dataset = dataset
        self.directory = directory
        super().__init__(f"File not found: {dataset.filename} in {directory}")


class CsvParseError(ValueError):
    """A CSV file exists but could not be read or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse {path.name}: {reason}")


def normalize_filename(name: str) -> str:
    """Case- and separator-insensitive key: 'Current-Owner _IPC-Full.CSV' -> 'current_owner_ipc_full.csv'."""
    return re.sub(r"[\s\-_]+", "_", name.strip().lower())


class CsvRepository:
    """Repository for exported CSV files on the local filesystem."""

    def __init__(self, data_dir: Union[str, Path, None] = None):
        if data_dir is None:
            data_dir = os.getenv("PATENT_DATA_DIR", DEFAULT_DATA_DIR)
        self.data_dir = Path(data_dir)

    def directory(self, kind: Union[DataDirectory, str]) -> Path:
        return self.data_dir / DataDirectory(kind).value

    # =========================================================================
    # FILE RESOLUTION
    # =========================================================================

    def find_csv(
        self,
        filename: str,
        directory: Union[DataDirectory, str] = DataDirectory.raw,
        alternates: Optional[List[str]] = None,
    ) -> Optional[Path]:
        """
        Return the first existing path for a file, or None.

        Order: canonical name, each alternate in order, then any file in the
        directory whose normalized name matches one of those.
        """
        base_dir = self.directory(directory)
        if not base_dir.is_dir():
            logger.warning(f"Directory does not exist: {base_dir}")
            return None

        candidates = [filename, *(alternates or [])]
        for name in candidates:
            path = base_dir / name
            if path.is_file():
                if name != filename:
                    logger.info(f"Found alternate file: {path}")
                return path

        wanted = {normalize_filename(name) for name in candidates}
        for path in sorted(base_dir.iterdir()):
            if path.is_file() and normalize_filename(path.name) in wanted:
                logger.info(f"Found variant file: {path}")
                return path

        logger.warning(f"File not found: {filename} (tried {len(candidates) - 1} alternates)")
        return None

    def require_csv(self, dataset: CsvDataset) -> Path:
        path = self.find_csv(dataset.filename, dataset.directory, dataset.alternates)
        if path is None:
            raise CsvFileNotFoundError(dataset, self.directory(dataset.directory))
        return path

    # =========================================================================
    # PARSING
    # =========================================================================

    def load_csv(self, path: Union[str, Path]) -> List[CsvRecord]:
        """
        Parse a CSV file using its first row as headers.

        Headers are kept exactly as written (trimmed), blank ones included.
        All values stay strings, trimmed. Blank lines are skipped, short
        rows are padded with "" and over-long rows lose their extra cells.
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CsvParseError(path, str(e)) from e

        if content.startswith(BOM):
            content = content[1:]
        if not content.strip():
            raise CsvParseError(path, "file is empty")

        overlong: List[int] = []

        def keep_leading_cells(line: List[str]) -> List[str]:
            # pandas trims the returned row to the header width
            overlong.append(len(line))
            return line

        try:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", pd.errors.ParserWarning)
                df = pd.read_csv(
                    io.StringIO(content),
                    header=None,
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=True,
                    skipinitialspace=True,
                    engine="python",
                    on_bad_lines=keep_leading_cells,
                )
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise CsvParseError(path, str(e)) from e

        if overlong:
            logger.warning(
                f"  ⚠️ {path.name}: dropped extra cells from {len(overlong)} over-long rows "
                f"(header has {df.shape[1]} columns)"
            )

        df = df.fillna("")
        for col in df.columns:
            df[col] = df[col].astype(str).str.strip()

        headers = list(df.iloc[0])
        records = [dict(zip(headers, row)) for row in df.iloc[1:].itertuples(index=False, name=None)]
        logger.info(f"✓ Loaded {len(records)} records from {path.name}")
        return records

    def load_dataset(self, dataset: CsvDataset) -> Tuple[List[CsvRecord], DataSource]:
        """
        Resolve and parse a dataset, degrading to an empty list.

        A missing file is logged as a warning and a parse failure as an
        error; neither is raised.
        """
        source = DataSource(dataset=dataset.key, directory=dataset.directory.value)

        try:
            path = self.require_csv(dataset)
        except CsvFileNotFoundError as e:
            logger.warning(f"  ⚠️ {e} - '{dataset.key}' section will be empty")
            source.error = str(e)
            return [], source

        source.filename = path.name
        source.found = True

        try:
            records = self.load_csv(path)
        except CsvParseError as e:
            logger.error(f"  ❌ {e} - '{dataset.key}' section will be empty")
            source.error = str(e)
            return [], source

        source.records = len(records)
        return records, source


# Singleton
_repo: Optional[CsvRepository] = None

def get_csv_repository() -> CsvRepository:
    global _repo
    if _repo is None:
        _repo = CsvRepository()
    return _repo
