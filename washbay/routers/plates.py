"""
Plate recognition routes.
"""
from fastapi import APIRouter, Depends

from washbay.models.profile import Profile
from washbay.schemas.plate import PlateText, PlateRecognition
from washbay.auth import get_current_profile
from washbay.plates import extract_plate

router = APIRouter(prefix="/plates", tags=["plates"])


@router.post("/recognize", response_model=PlateRecognition)
async def recognize_plate(
    payload: PlateText,
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Pick a plate out of OCR text.
    """
    plate = extract_plate(payload.text)
    return PlateRecognition(plate=plate, recognized=plate is not None)
