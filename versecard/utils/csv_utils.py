# versecard/utils/csv_utils.py
"""
CSV reading helpers for verse files.
"""
import csv
from typing import List, Optional

# Korean spreadsheets are often exported as cp949/euc-kr
CANDIDATE_ENCODINGS = ('utf-8-sig', 'utf-8', 'cp949', 'euc-kr')


def detect_encoding(file_bytes: bytes, fallback: str = 'utf-8') -> str:
    """
    Detect the encoding of a byte string.

    Args:
        file_bytes: Raw bytes to analyze
        fallback: Encoding returned when no candidate decodes cleanly

    Returns:
        Detected or fallback encoding string
    """
    for encoding in CANDIDATE_ENCODINGS:
        try:
            file_bytes.decode(encoding)
            return encoding
        except (UnicodeDecodeError, LookupError):
            continue
    return fallback


def detect_delimiter(text_sample: str, candidates: Optional[List[str]] = None) -> str:
    """
    Detect the CSV delimiter from a text sample.

    Args:
        text_sample: Sample of CSV text (first few KB)
        candidates: List of candidate delimiters to try

    Returns:
        Detected delimiter character
    """
    if candidates is None:
        candidates = [',', ';', '\t', '|']

    try:
        dialect = csv.Sniffer().sniff(text_sample, delimiters=''.join(candidates))
        return dialect.delimiter
    except csv.Error:
        pass

    # Fallback: most frequent candidate in the header line
    header = text_sample.splitlines()[0] if text_sample else ''
    best_delimiter = candidates[0]
    max_count = 0
    for delim in candidates:
        count = header.count(delim)
        if count > max_count:
            max_count = count
            best_delimiter = delim
    return best_delimiter


def clean_header(name: object) -> str:
    """Strip BOM and whitespace from a column header and lowercase it."""
    return str(name).replace('\ufeff', '').strip().lower()
