"""Location resolver: turns free-text places and airport codes into coordinates.

Lookup order, first hit wins: airport code, exact city, country alias, fuzzy
match. A location that cannot be matched resolves to the (0, 0) sentinel and
is logged; nothing here raises for bad input.
"""

import logging
import re

from stipend.config import settings
from stipend.data.aliases import country_code_for
from stipend.schemas.location import SENTINEL, Airport, Coordinates, LocationMatch
from stipend.services.distance import haversine
from stipend.services.reference_store import ReferenceStore

logger = logging.getLogger(__name__)

AIRPORT_CODE_RE = re.compile(r"^[A-Z]{3}$")

CITY_WEIGHT = 0.7
COUNTRY_WEIGHT = 0.3


def levenshtein(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def string_similarity(a: str, b: str) -> float:
    """1 - normalized edit distance on lower-cased, trimmed strings."""
    a = a.strip().lower()
    b = b.strip().lower()
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest


def split_location(text: str) -> tuple[str, str | None]:
    """'Seoul, KR' -> ('Seoul', 'KR'); 'Seoul' -> ('Seoul', None)."""
    if "," not in text:
        return text.strip(), None
    city, country = text.rsplit(",", 1)
    return city.strip(), country.strip() or None


def _normalize(text: str) -> str:
    city, country = split_location(text)
    city = " ".join(city.lower().split())
    return f"{city}, {country.lower()}" if country else city


class LocationResolver:
    def __init__(
        self,
        store: ReferenceStore,
        threshold: float | None = None,
        airport_radius_km: float | None = None,
    ):
        self.store = store
        self.threshold = settings.fuzzy_match_threshold if threshold is None else threshold
        self.airport_radius_km = (
            settings.nearby_airport_radius_km if airport_radius_km is None else airport_radius_km
        )
        self._cities: list[tuple[str, Coordinates]] = []
        self._by_name: dict[str, Coordinates] = {}
        self._by_normalized: dict[str, tuple[str, Coordinates]] = {}
        self._airports: dict[str, Airport] = {}
        self._country_by_city: dict[str, str] = {}
        self._loaded = False

    async def init(self) -> None:
        """Load the city and airport tables, keeping table order."""
        self._cities = await self.store.all_cities()
        self._by_name = {}
        self._by_normalized = {}
        for name, coords in self._cities:
            self._by_name.setdefault(name, coords)
            self._by_normalized.setdefault(_normalize(name), (name, coords))
        self._airports = {a.code: a for a in await self.store.airports()}
        self._country_by_city = {}
        for name, _ in self._cities:
            city, country = split_location(name)
            if country:
                self._country_by_city.setdefault(city.lower(), country)
        for airport in self._airports.values():
            self._country_by_city.setdefault(airport.city.lower(), airport.country)
        self._loaded = True
        logger.info(f"Location resolver loaded {len(self._cities)} cities, {len(self._airports)} airports")

    async def close(self) -> None:
        self._loaded = False

    async def resolve(self, text: str) -> Coordinates:
        found = await self.match(text)
        return found.coordinates if found else SENTINEL

    async def match(self, text: str) -> LocationMatch | None:
        if not self._loaded:
            await self.init()
        query = (text or "").strip()
        if not query:
            logger.warning("Empty location, using sentinel coordinates")
            return None

        # 1. Airport fast path
        if AIRPORT_CODE_RE.match(query) and query in self._airports:
            airport = self._airports[query]
            return LocationMatch(
                name=f"{airport.city}, {airport.country}",
                coordinates=airport.coordinates,
                similarity=1.0,
                method="exact",
            )

        # 2. Exact city, case-sensitive then normalized
        if query in self._by_name:
            return LocationMatch(name=query, coordinates=self._by_name[query], similarity=1.0, method="exact")
        normalized = self._by_normalized.get(_normalize(query))
        if normalized:
            return LocationMatch(name=normalized[0], coordinates=normalized[1], similarity=1.0, method="exact")

        # 3. Country / state aliases
        aliased = self._match_alias(query)
        if aliased:
            return aliased

        # 4. Fuzzy
        best_name, best_coords, best_score = self._best_fuzzy(query)
        if best_name is not None and best_score >= self.threshold:
            return LocationMatch(
                name=best_name, coordinates=best_coords, similarity=round(best_score, 6), method="fuzzy"
            )

        logger.warning(
            f"No coordinates for {query!r}; best candidate {best_name!r} scored {best_score:.2f}"
        )
        return None

    def qualified_name(self, name: str) -> str:
        """'London' -> 'London, GB' when the city or airport tables know the country."""
        city, country = split_location(name)
        if country:
            return name
        code = self._country_by_city.get(city.lower())
        return f"{city}, {code}" if code else name

    def _match_alias(self, query: str) -> LocationMatch | None:
        city, country = split_location(query)
        if country:
            code = country_code_for(country)
            if not code:
                return None
            hit = self._by_normalized.get(_normalize(f"{city}, {code}"))
            if hit:
                return LocationMatch(name=hit[0], coordinates=hit[1], similarity=1.0, method="alias")
            return None

        # A bare country alias resolves to the first city listed for that country
        code = country_code_for(city)
        if not code:
            return None
        for name, coords in self._cities:
            _, candidate_country = split_location(name)
            if candidate_country == code:
                return LocationMatch(name=name, coordinates=coords, similarity=1.0, method="alias")
        return None

    def _best_fuzzy(self, query: str) -> tuple[str | None, Coordinates, float]:
        city, country = split_location(query)
        if country:
            country = country_code_for(country) or country

        best_name: str | None = None
        best_coords = SENTINEL
        best_score = 0.0
        for name, coords in self._cities:
            cand_city, cand_country = split_location(name)
            city_score = string_similarity(city, cand_city)
            if country and cand_country:
                score = CITY_WEIGHT * city_score + COUNTRY_WEIGHT * string_similarity(country, cand_country)
            else:
                score = city_score
            # strictly greater: the first maximum in table order wins
            if score > best_score:
                best_name, best_coords, best_score = name, coords, score
        return best_name, best_coords, best_score

    async def airport_code(self, text: str) -> str | None:
        """IATA code for a location: known code, city lookup, then nearest airport in range."""
        if not self._loaded:
            await self.init()
        query = (text or "").strip()
        if AIRPORT_CODE_RE.match(query) and query in self._airports:
            return query

        found = await self.match(query)
        names = [split_location(query)[0]]
        if found:
            names.append(split_location(found.name)[0])
        for name in names:
            codes = await self.store.airport_codes(name)
            if codes:
                return codes[0]

        if not found:
            return None
        nearest: Airport | None = None
        nearest_km = self.airport_radius_km
        for airport in self._airports.values():
            km = haversine(found.coordinates, airport.coordinates)
            if km <= nearest_km:
                nearest, nearest_km = airport, km
        if nearest:
            logger.info(f"Using {nearest.code} ({nearest_km:.0f} km) for {query!r}")
            return nearest.code
        logger.warning(f"No airport within {self.airport_radius_km:.0f} km of {query!r}")
        return None
