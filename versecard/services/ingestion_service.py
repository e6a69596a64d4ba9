# versecard/services/ingestion_service.py
"""
Service for loading verse records from JSON, CSV or Excel files.
"""
import json
from io import BytesIO
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

import pandas as pd

from ..config import AppConfig
from ..domain.verse import VerseRecord
from ..logging_config import get_logger
from ..utils.csv_utils import clean_header, detect_delimiter, detect_encoding
from ..utils.timing import timed

logger = get_logger('ingestion_service')


class VerseIngestionService:
    """
    Loads the verse store.

    Supported formats:
    - JSON: a list of {"content", "reference"} objects, or {"verses": [...]}
    - CSV: content/reference columns (encoding and delimiter detected)
    - Excel: same columns as CSV
    """

    def __init__(self, config: AppConfig):
        """
        Initialize the ingestion service.

        Args:
            config: Application configuration
        """
        self.config = config

    @timed("load verse file")
    def load_verses(self, path: Union[str, Path]) -> List[VerseRecord]:
        """
        Load verses from a file on disk.

        Args:
            path: Path to a .json, .csv, .xlsx or .xls file

        Returns:
            Verse records in file order

        Raises:
            ValueError: If the format is unsupported or no content column exists
        """
        path = Path(path)
        return self.load_verse_bytes(path.read_bytes(), path.name)

    def load_verse_bytes(self, file_bytes: bytes, filename: str) -> List[VerseRecord]:
        """
        Load verses from raw bytes.

        Args:
            file_bytes: Raw file content
            filename: Original filename (used for format detection)

        Returns:
            Verse records in file order
        """
        logger.info(f"Loading verse file: {filename}")
        filename_lower = filename.lower()

        if filename_lower.endswith('.json'):
            verses = self._load_json(file_bytes)
        elif filename_lower.endswith('.csv'):
            verses = self._records_from_frame(self._load_csv(file_bytes))
        elif filename_lower.endswith(('.xlsx', '.xls')):
            verses = self._records_from_frame(pd.read_excel(BytesIO(file_bytes)))
        else:
            raise ValueError(f"Unsupported file format: {filename}")

        logger.info(f"✅ Loaded {len(verses)} verses from {filename}")
        return verses

    def _load_json(self, file_bytes: bytes) -> List[VerseRecord]:
        data = json.loads(file_bytes.decode('utf-8-sig'))
        if isinstance(data, Mapping):
            data = data.get('verses', [])
        if not isinstance(data, list):
            raise ValueError("Verse JSON must be a list or an object with a 'verses' list")
        return self._records_from_rows(data)

    def _load_csv(self, file_bytes: bytes) -> pd.DataFrame:
        """
        Load CSV file with encoding and delimiter detection.

        Args:
            file_bytes: Raw bytes of the CSV file

        Returns:
            DataFrame with CSV data
        """
        encoding = detect_encoding(file_bytes, fallback=self.config.ingestion.fallback_encoding)
        sample = file_bytes[:4096].decode(encoding, errors='ignore')
        delimiter = detect_delimiter(sample, self.config.ingestion.csv_delimiters)
        logger.debug(f"Detected encoding: {encoding}, delimiter: {repr(delimiter)}")

        df = pd.read_csv(
            BytesIO(file_bytes),
            delimiter=delimiter,
            encoding=encoding,
            dtype=str,
            keep_default_na=False,
            on_bad_lines='skip'
        )
        logger.info(f"Loaded CSV with {len(df)} rows, {len(df.columns)} columns")
        return df

    def _find_column(self, columns: Iterable[Any], candidates: List[str]) -> Optional[Any]:
        """Return the original column whose cleaned name is one of ``candidates``."""
        cleaned = {clean_header(col): col for col in columns}
        for candidate in candidates:
            if candidate.lower() in cleaned:
                return cleaned[candidate.lower()]
        return None

    def _records_from_frame(self, df: pd.DataFrame) -> List[VerseRecord]:
        content_col = self._find_column(df.columns, self.config.ingestion.content_columns)
        if content_col is None:
            raise ValueError(f"No verse content column found in {list(df.columns)}")
        reference_col = self._find_column(df.columns, self.config.ingestion.reference_columns)

        df = df.fillna('')
        rows = []
        for _, row in df.iterrows():
            rows.append({
                'content': str(row[content_col]),
                'reference': str(row[reference_col]) if reference_col is not None else '',
            })
        return self._records_from_rows(rows)

    def _records_from_rows(self, rows: Iterable[Any]) -> List[VerseRecord]:
        verses: List[VerseRecord] = []
        skipped = 0
        for row in rows:
            if not isinstance(row, Mapping):
                skipped += 1
                continue
            content_key = self._find_column(row.keys(), self.config.ingestion.content_columns)
            reference_key = self._find_column(row.keys(), self.config.ingestion.reference_columns)
            content = row.get(content_key) if content_key is not None else None
            if not isinstance(content, str) or not content.strip():
                skipped += 1
                continue
            reference = row.get(reference_key) if reference_key is not None else None
            if not isinstance(reference, str):
                reference = ''
            verses.append(VerseRecord(content=content.strip(), reference=reference.strip()))

        if skipped:
            logger.warning(f"Skipped {skipped} rows without verse content")
        return verses
