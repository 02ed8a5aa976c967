"""
Pydantic schemas for plate recognition.
"""
from pydantic import BaseModel
from typing import Optional


class PlateText(BaseModel):
    """Raw text returned by the OCR engine."""
    text: str


class PlateRecognition(BaseModel):
    plate: Optional[str] = None
    recognized: bool = False
