"""Request schemas for the travel planner API."""

from __future__ import annotations

from typing import Annotated, Any, Dict, Iterable, List, Mapping, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from travel_planner.core.errors import ValidationError
from travel_planner.core.models import (
    ActivityTag,
    ClimateTag,
    StayStyle,
    TravelDates,
    TravelerProfile,
    TravelPace,
)

MISSING_FIELDS_MESSAGE = "Missing required fields. Please complete every step before submitting."
MAX_TRAVELERS = 50
MAX_BUDGET_PER_PERSON = 1_000_000

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TravelDatesPayload(BaseModel):
    start: RequiredText
    end: RequiredText


class TravelerProfilePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: RequiredText = Field(..., alias="fullName")
    email: RequiredText
    phone: RequiredText
    departure_city: RequiredText = Field(..., alias="departureCity")
    travel_dates: TravelDatesPayload = Field(..., alias="travelDates")
    traveler_count: int = Field(..., alias="travelerCount", ge=1, le=MAX_TRAVELERS, strict=True)
    budget_per_person: float = Field(
        ..., alias="budgetPerPerson", gt=0, le=MAX_BUDGET_PER_PERSON, strict=True, allow_inf_nan=False
    )
    travel_style: TravelPace = Field(..., alias="travelStyle")
    climate_preference: List[ClimateTag] = Field(..., alias="climatePreference")
    activity_preferences: List[ActivityTag] = Field(..., alias="activityPreferences")
    accommodation_style: List[StayStyle] = Field(..., alias="accommodationStyle")
    special_notes: Optional[str] = Field(None, alias="specialNotes")

    def to_profile(self) -> TravelerProfile:
        return TravelerProfile(
            full_name=self.full_name,
            email=self.email,
            phone=self.phone,
            departure_city=self.departure_city,
            travel_dates=TravelDates(start=self.travel_dates.start, end=self.travel_dates.end),
            traveler_count=self.traveler_count,
            budget_per_person=self.budget_per_person,
            travel_pace=self.travel_style,
            climate_preferences=tuple(self.climate_preference),
            activity_preferences=tuple(self.activity_preferences),
            accommodation_styles=tuple(self.accommodation_style),
            special_notes=self.special_notes or None,
        )


def describe_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    fields: List[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        name = ".".join(loc)
        if name and name not in fields:
            fields.append(name)
    if not fields:
        return MISSING_FIELDS_MESSAGE
    return f"{MISSING_FIELDS_MESSAGE} Invalid fields: {', '.join(fields)}."


def parse_profile(payload: Any) -> TravelerProfile:
    if not isinstance(payload, Mapping):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    try:
        model = TravelerProfilePayload.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        raise ValidationError(describe_errors(exc.errors())) from exc
    return model.to_profile()


OPTION_LABELS: Dict[str, List[Dict[str, str]]] = {
    "climatePreference": [
        {"label": "Tropical & Humid", "value": ClimateTag.TROPICAL.value},
        {"label": "Mild & Temperate", "value": ClimateTag.TEMPERATE.value},
        {"label": "Cool & Wintry", "value": ClimateTag.COLD.value},
        {"label": "Dry & Arid", "value": ClimateTag.DRY.value},
    ],
    "activityPreferences": [
        {"label": "Culture & History", "value": ActivityTag.CULTURE.value},
        {"label": "Culinary Experiences", "value": ActivityTag.FOOD.value},
        {"label": "Adventure & Thrills", "value": ActivityTag.ADVENTURE.value},
        {"label": "Relaxation & Wellness", "value": ActivityTag.RELAXATION.value},
        {"label": "Nature & Wildlife", "value": ActivityTag.NATURE.value},
        {"label": "Nightlife & Entertainment", "value": ActivityTag.NIGHTLIFE.value},
    ],
    "accommodationStyle": [
        {"label": "Boutique Hotels", "value": StayStyle.BOUTIQUE.value},
        {"label": "Luxury Resorts", "value": StayStyle.RESORT.value},
        {"label": "Eco Lodges", "value": StayStyle.ECO.value},
        {"label": "Design Hotels", "value": StayStyle.HOTEL.value},
        {"label": "Private Villas", "value": StayStyle.VILLA.value},
    ],
    "travelStyle": [{"label": pace.value.replace("-", " ").capitalize(), "value": pace.value} for pace in TravelPace],
}
