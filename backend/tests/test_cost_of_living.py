"""CostOfLivingAdjuster and the local transport estimate."""

import asyncio

import pytest

from stipend.services.cost_of_living import CostOfLivingAdjuster
from stipend.services.local_transport import LocalTransportEstimator
from stipend.services.reference_store import InMemoryReferenceStore


def _factor(store, city):
    return asyncio.run(CostOfLivingAdjuster(store).factor(city))


def test_factor_is_index_over_base(store):
    assert _factor(store, "Singapore, SG") == 1.2
    assert _factor(store, "Bangkok, TH") == 0.65


def test_factor_retries_with_and_without_comma():
    store = InMemoryReferenceStore(cost_of_living={"Seoul, KR": 110.0, "Osaka JP": 90.0})
    assert _factor(store, "Seoul KR") == pytest.approx(1.1)
    assert _factor(store, "Osaka, JP") == pytest.approx(0.9)


def test_unknown_city_defaults_to_one(store):
    assert _factor(store, "Denver, US") == 1.0
    assert _factor(store, "Zzzzqx") == 1.0


def test_taxi_estimate_uses_city_fares(store):
    # (3.5 + 0.9 * 10) * 2 trips * 3 days
    cost = asyncio.run(LocalTransportEstimator(store).estimate("Seoul, KR", 3, 1.0))
    assert cost == pytest.approx(75.0)


def test_taxi_estimate_without_data_uses_flat_rate(store):
    cost = asyncio.run(LocalTransportEstimator(store).estimate("Denver, US", 4, 1.5))
    assert cost == pytest.approx(35 * 4 * 1.5)
