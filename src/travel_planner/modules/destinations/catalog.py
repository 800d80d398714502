"""Static destination catalog."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import pycountry

from travel_planner.core.errors import CatalogError, DestinationNotFoundError
from travel_planner.core.models import (
    AccommodationOption,
    ActivityTag,
    BudgetTier,
    ClimateTag,
    Destination,
    DurationRange,
    ExperienceOption,
    StayStyle,
)

DESTINATION_RECORDS: List[Dict[str, Any]] = [
    {
        "id": "bali",
        "name": "Bali",
        "country": "Indonesia",
        "description": "A tropical escape blending lush rice terraces, serene temples, and surf-ready beaches.",
        "ideal_seasons": ["April", "May", "June", "September"],
        "climate": ["tropical"],
        "activity_highlights": ["relaxation", "adventure", "culture", "food"],
        "budget_tier": "moderate",
        "duration": {"min_days": 6, "max_days": 12},
        "accommodations": [
            {
                "name": "Ayana Resort & Spa",
                "style": "resort",
                "nightly_rate": 320,
                "description": "Cliff-top ocean views, full-service spa, and private beach club.",
            },
            {
                "name": "Desa Seni Village Resort",
                "style": "eco",
                "nightly_rate": 210,
                "description": "Restored Javanese homes, yoga shala, and organic farm-to-table dining.",
            },
        ],
        "experiences": [
            {
                "name": "Sunrise Trek up Mount Batur",
                "category": "adventure",
                "description": "Guided volcano hike with breakfast overlooking volcanic caldera.",
            },
            {
                "name": "Private Balinese Cooking Workshop",
                "category": "food",
                "description": "Explore local markets and cook traditional dishes with a local chef.",
            },
            {
                "name": "Ubud Temple and Waterfall Circuit",
                "category": "culture",
                "description": "Day tour to Tirta Empul temple, Tegallalang terraces, and hidden waterfalls.",
            },
        ],
        "travel_tips": [
            "Arrange for a private driver to navigate the island efficiently.",
            "Plan spa treatments and surf lessons in advance during peak season.",
        ],
    },
    {
        "id": "lisbon",
        "name": "Lisbon",
        "country": "Portugal",
        "description": "Sun-soaked coastal capital with historic neighborhoods, vibrant food, and easy day trips.",
        "ideal_seasons": ["March", "April", "May", "September", "October"],
        "climate": ["temperate"],
        "activity_highlights": ["culture", "food", "nightlife"],
        "budget_tier": "moderate",
        "duration": {"min_days": 4, "max_days": 8},
        "accommodations": [
            {
                "name": "The Lumiares Hotel & Spa",
                "style": "boutique",
                "nightly_rate": 260,
                "description": "Design-forward suites in Bairro Alto with rooftop views over the Tagus.",
            },
            {
                "name": "LX Boutique Hotel",
                "style": "hotel",
                "nightly_rate": 180,
                "description": "Eclectic hotel footsteps from Time Out Market and the riverfront promenade.",
            },
        ],
        "experiences": [
            {
                "name": "Pastéis de Nata Baking Class",
                "category": "food",
                "description": "Hands-on class mastering Lisbon's iconic custard tarts.",
            },
            {
                "name": "Sintra Palaces & Coast Tour",
                "category": "culture",
                "description": "Private guide to Pena Palace, Quinta da Regaleira, and sunset at Cabo da Roca.",
            },
            {
                "name": "Fado Night in Alfama",
                "category": "nightlife",
                "description": "Dinner and live traditional Fado performance in a historic tavern.",
            },
        ],
        "travel_tips": [
            "Purchase a Viva Viagem card for trams, ferries, and metro rides.",
            "Schedule Sintra excursion on a weekday to avoid crowds.",
        ],
    },
    {
        "id": "banff",
        "name": "Banff National Park",
        "country": "Canada",
        "description": "Dramatic alpine landscapes, glacier-fed lakes, and year-round outdoor adventures.",
        "ideal_seasons": ["June", "July", "August", "September", "February"],
        "climate": ["temperate", "cold"],
        "activity_highlights": ["adventure", "nature"],
        "budget_tier": "moderate",
        "duration": {"min_days": 5, "max_days": 9},
        "accommodations": [
            {
                "name": "Fairmont Banff Springs",
                "style": "hotel",
                "nightly_rate": 390,
                "description": "Iconic castle hotel with mountain views and on-site spa and dining.",
            },
            {
                "name": "Moose Hotel & Suites",
                "style": "hotel",
                "nightly_rate": 240,
                "description": "Cozy suites with rooftop hot pools just steps from downtown Banff.",
            },
        ],
        "experiences": [
            {
                "name": "Sunrise Canoe on Moraine Lake",
                "category": "nature",
                "description": "Private canoe rental to beat the crowds on the turquoise lake.",
            },
            {
                "name": "Icefields Parkway Scenic Transfer",
                "category": "adventure",
                "description": "Full-day guided drive with glacier walks and wildlife spotting.",
            },
            {
                "name": "Snowshoe Under the Stars",
                "category": "adventure",
                "description": "Nighttime snowshoe excursion with a naturalist guide and campfire.",
            },
        ],
        "travel_tips": [
            "Book Parks Canada shuttle for Lake Louise access during summer months.",
            "Pack layers; temperatures swing drastically between day and night.",
        ],
    },
    {
        "id": "kyoto",
        "name": "Kyoto",
        "country": "Japan",
        "description": "Historic temples, tranquil gardens, and culinary craftsmanship in Japan's cultural capital.",
        "ideal_seasons": ["March", "April", "October", "November"],
        "climate": ["temperate"],
        "activity_highlights": ["culture", "food", "relaxation"],
        "budget_tier": "luxury",
        "duration": {"min_days": 5, "max_days": 10},
        "accommodations": [
            {
                "name": "Hoshinoya Kyoto",
                "style": "boutique",
                "nightly_rate": 620,
                "description": "Riverside ryokan accessible by boat with kaiseki dining and tea ceremony.",
            },
            {
                "name": "Hotel The Celestine Kyoto Gion",
                "style": "hotel",
                "nightly_rate": 280,
                "description": "Elegant property steps from Yasaka Shrine with onsen-style baths.",
            },
        ],
        "experiences": [
            {
                "name": "Private Tea Ceremony in Gion",
                "category": "culture",
                "description": "Intimate encounter with a tea master explaining ritual and history.",
            },
            {
                "name": "Kaiseki Tasting with Chef's Counter",
                "category": "food",
                "description": "Seasonal multi-course dinner showcasing Kyoto's delicate cuisine.",
            },
            {
                "name": "Arashiyama Bamboo Grove Sunrise Walk",
                "category": "relaxation",
                "description": "Beat the crowds with a dawn stroll capped with riverside breakfast.",
            },
        ],
        "travel_tips": [
            "Reserve limited-entry temple visits such as Saiho-ji moss garden weeks in advance.",
            "Rent pocket Wi-Fi for easy navigation and translation.",
        ],
    },
    {
        "id": "costa-rica",
        "name": "Osa Peninsula",
        "country": "Costa Rica",
        "description": "Remote rainforests teeming with wildlife, pristine beaches, and eco-forward lodges.",
        "ideal_seasons": ["January", "February", "March", "April"],
        "climate": ["tropical", "dry"],
        "activity_highlights": ["nature", "adventure", "relaxation"],
        "budget_tier": "luxury",
        "duration": {"min_days": 6, "max_days": 10},
        "accommodations": [
            {
                "name": "Lapa Rios Lodge",
                "style": "eco",
                "nightly_rate": 540,
                "description": "Sustainably built rainforest bungalows with guided wildlife safaris.",
            },
            {
                "name": "El Remanso Rainforest Wildness Lodge",
                "style": "eco",
                "nightly_rate": 410,
                "description": "Waterfall rappelling, canopy bridges, and Pacific-view infinity pool.",
            },
        ],
        "experiences": [
            {
                "name": "Golfo Dulce Mangrove Kayaking",
                "category": "nature",
                "description": "Spot dolphins and scarlet macaws in secluded mangrove channels.",
            },
            {
                "name": "Corcovado National Park Expedition",
                "category": "adventure",
                "description": "Full-day ranger-led trek through one of the planet's most biodiverse parks.",
            },
            {
                "name": "Sunset Bio Bay Cruise",
                "category": "relaxation",
                "description": "Bioluminescent waters and stargazing aboard a private catamaran.",
            },
        ],
        "travel_tips": [
            "Fly into Puerto Jiménez to avoid lengthy overland transfers.",
            "Pack reef-safe sunscreen and lightweight rain gear.",
        ],
    },
    {
        "id": "iceland",
        "name": "South Coast Iceland",
        "country": "Iceland",
        "description": (
            "Waterfalls, glaciers, black-sand beaches, and geothermal lagoons "
            "under midnight sun or aurora skies."
        ),
        "ideal_seasons": ["February", "March", "September", "October"],
        "climate": ["cold", "temperate"],
        "activity_highlights": ["adventure", "nature"],
        "budget_tier": "luxury",
        "duration": {"min_days": 4, "max_days": 7},
        "accommodations": [
            {
                "name": "Hotel Rangá",
                "style": "boutique",
                "nightly_rate": 480,
                "description": "Aurora wake-up calls, observatory, and themed suites along the Rangá River.",
            },
            {
                "name": "ION Adventure Hotel",
                "style": "eco",
                "nightly_rate": 520,
                "description": "Minimalist design perched near Thingvellir with spa and lava views.",
            },
        ],
        "experiences": [
            {
                "name": "Glacier Hike & Ice Cave Exploration",
                "category": "adventure",
                "description": "Certified guide leads onto Sólheimajökull with all gear included.",
            },
            {
                "name": "Super Jeep Northern Lights Hunt",
                "category": "nature",
                "description": "Evening chase with expert photographer to capture aurora away from light pollution.",
            },
            {
                "name": "Blue Lagoon Retreat Spa",
                "category": "relaxation",
                "description": "Exclusive access to the Retreat Lagoon, subterranean spa, and gourmet dining.",
            },
        ],
        "travel_tips": [
            "Pre-book guided glacier activities; permits and weather windows are limited.",
            "Rent a 4x4 vehicle in winter for safer driving on icy roads.",
        ],
    },
]


def _country_code(country: str) -> Optional[str]:
    try:
        return pycountry.countries.lookup(country).alpha_2
    except LookupError:
        return None


def build_destination(record: Mapping[str, Any]) -> Destination:
    """Convert a raw catalog record into a validated :class:`Destination`."""
    try:
        destination_id = record["id"]
        duration = record["duration"]
        stays = [
            AccommodationOption(
                name=stay["name"],
                style=StayStyle(stay["style"]),
                nightly_rate=stay["nightly_rate"],
                description=stay.get("description", ""),
            )
            for stay in record.get("accommodations", [])
        ]
        experiences = [
            ExperienceOption(
                name=experience["name"],
                category=ActivityTag(experience["category"]),
                description=experience.get("description", ""),
            )
            for experience in record.get("experiences", [])
        ]
        return Destination(
            id=destination_id,
            name=record["name"],
            country=record["country"],
            description=record.get("description", ""),
            ideal_seasons=tuple(record.get("ideal_seasons", [])),
            climate=tuple(ClimateTag(tag) for tag in record.get("climate", [])),
            activity_highlights=tuple(ActivityTag(tag) for tag in record.get("activity_highlights", [])),
            budget_tier=BudgetTier(record["budget_tier"]),
            duration=DurationRange(min_days=duration["min_days"], max_days=duration["max_days"]),
            accommodations=tuple(stays),
            experiences=tuple(experiences),
            travel_tips=tuple(record.get("travel_tips", [])),
            country_code=record.get("country_code") or _country_code(record["country"]),
        )
    except KeyError as exc:
        raise CatalogError(f"catalog record is missing field {exc}") from exc
    except ValueError as exc:
        raise CatalogError(f"catalog record {record.get('id')!r} is invalid: {exc}") from exc


class DestinationCatalog:
    """Ordered, read-only collection of destinations."""

    def __init__(self, destinations: Iterable[Destination]) -> None:
        self._destinations: Tuple[Destination, ...] = tuple(destinations)
        self._by_id: Dict[str, Destination] = {}
        for destination in self._destinations:
            if destination.id in self._by_id:
                raise CatalogError(f"duplicate destination id {destination.id!r}")
            self._by_id[destination.id] = destination

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "DestinationCatalog":
        return cls(build_destination(record) for record in records)

    def __iter__(self) -> Iterator[Destination]:
        return iter(self._destinations)

    def __len__(self) -> int:
        return len(self._destinations)

    def get(self, destination_id: str) -> Destination:
        try:
            return self._by_id[destination_id]
        except KeyError:
            raise DestinationNotFoundError(f"unknown destination {destination_id!r}") from None

    def head(self, count: int) -> List[Destination]:
        return list(self._destinations[: max(count, 0)])


_DEFAULT_CATALOG: Optional[DestinationCatalog] = None


def default_catalog() -> DestinationCatalog:
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = DestinationCatalog.from_records(DESTINATION_RECORDS)
    return _DEFAULT_CATALOG
