"""
License plate text helpers.

The camera, vehicle detector and OCR engine run outside this service; all
that arrives here is the text the OCR engine produced.  A plate is three
letters, an optional hyphen and four digits.
"""
import re
from typing import Optional

from washbay.exceptions import ValidationError

PLATE_PATTERN = re.compile(r"[A-Z]{3}-?\d{4}", re.IGNORECASE)


def normalize_plate(plate: Optional[str]) -> str:
    """Strip and uppercase a typed plate.  Hyphens are kept as typed."""
    plate = (plate or "").strip()
    if not plate:
        raise ValidationError("License plate is required")
    return plate.upper()


def extract_plate(text: Optional[str]) -> Optional[str]:
    """Return the first plate-shaped token in OCR output, uppercased."""
    if not text:
        return None
    match = PLATE_PATTERN.search(text)
    if match is None:
        return None
    return match.group(0).upper()
