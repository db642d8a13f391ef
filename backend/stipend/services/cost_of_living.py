import logging
import re

from stipend.data.rates import TRAVEL_STIPEND
from stipend.services.reference_store import ReferenceStore

logger = logging.getLogger(__name__)

# "Seoul KR" -> "Seoul, KR"
_MISSING_COMMA_RE = re.compile(r" ([A-Z]+)$")
# "Seoul, KR" -> "Seoul KR"
_COMMA_RE = re.compile(r", ([A-Z]+)$")


class CostOfLivingAdjuster:
    """Multiplier for city-dependent costs: the city's index over the base index."""

    def __init__(self, store: ReferenceStore, base_index: float = TRAVEL_STIPEND.rules.cost_of_living_index):
        self.store = store
        self.base_index = base_index

    async def factor(self, city: str) -> float:
        for candidate in self._candidates(city):
            index = await self.store.cost_of_living(candidate)
            if index is not None:
                return index / self.base_index
        logger.info(f"No cost of living data for {city!r}, using factor 1.0")
        return 1.0

    @staticmethod
    def _candidates(city: str) -> list[str]:
        candidates = [city]
        with_comma = _MISSING_COMMA_RE.sub(r", \1", city)
        if "," not in city and with_comma != city:
            candidates.append(with_comma)
        without_comma = _COMMA_RE.sub(r" \1", city)
        if without_comma != city:
            candidates.append(without_comma)
        return candidates
