"""Geocoding endpoint: address text to coordinates."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from college_finder.application.use_cases.geocode_address import GeocodeAddressUseCase
from college_finder.infrastructure.api.dependencies import get_geocode_address_uc
from college_finder.infrastructure.api.schemas import Coordinates, GeocodeRequest, GeocodeResponse

router = APIRouter(tags=["geocode"])


@router.post("/geocode", response_model=GeocodeResponse)
async def geocode(
    body: GeocodeRequest,
    uc: GeocodeAddressUseCase = Depends(get_geocode_address_uc),
):
    """Resolve an address or city name to coordinates."""
    point = await uc.execute(body.address)
    if point is None:
        raise HTTPException(status_code=404, detail="Address could not be geocoded")

    return GeocodeResponse(
        address=body.address,
        coordinates=Coordinates(lat=point.latitude, lng=point.longitude),
        formatted_address=body.address.strip(),
    )
