from stipend.models.reference import AirportCode, CityCoordinate, Conference, CostOfLiving, TaxiFare

__all__ = ["AirportCode", "CityCoordinate", "Conference", "CostOfLiving", "TaxiFare"]
