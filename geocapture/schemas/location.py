from typing import Annotated, Literal, Optional

from pydantic import AllowInfNan, BaseModel, Strict

# JSON numbers only: ints and floats pass, numeric strings and booleans do not.
Number = Annotated[float, Strict(), AllowInfNan(False)]


class LocationCreateRequest(BaseModel):
    lat: Number
    lng: Number
    accuracy: Optional[Number] = None


class LocationCreateResponse(BaseModel):
    success: Literal[True] = True
    id: int


class ErrorResponse(BaseModel):
    error: str
