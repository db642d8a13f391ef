"""Seed reference data for the in-memory store and for an empty database.

City keys follow the "City, CC" convention, with a bare "City" row for
well-known cities. Order matters: fuzzy matching breaks ties by first
occurrence.
"""

SEED_CITIES: list[tuple[str, float, float]] = [
    ("Seoul, KR", 37.5665, 126.9780),
    ("Dubai, AE", 25.2048, 55.2708),
    ("Singapore, SG", 1.3521, 103.8198),
    ("Tokyo, JP", 35.6762, 139.6503),
    ("Osaka, JP", 34.6937, 135.5023),
    ("London, GB", 51.5074, -0.1278),
    ("New York, US", 40.7128, -74.0060),
    ("San Francisco, US", 37.7749, -122.4194),
    ("Austin, US", 30.2672, -97.7431),
    ("Denver, US", 39.7392, -104.9903),
    ("Berlin, DE", 52.5200, 13.4050),
    ("Munich, DE", 48.1351, 11.5820),
    ("Paris, FR", 48.8566, 2.3522),
    ("Hong Kong, HK", 22.3193, 114.1694),
    ("Bangkok, TH", 13.7563, 100.5018),
    ("Sydney, AU", -33.8688, 151.2093),
    ("Amsterdam, NL", 52.3676, 4.9041),
    ("Barcelona, ES", 41.3851, 2.1734),
    ("Madrid, ES", 40.4168, -3.7038),
    ("Lisbon, PT", 38.7223, -9.1393),
    ("Rome, IT", 41.9028, 12.4964),
    ("Vienna, AT", 48.2082, 16.3738),
    ("Istanbul, TR", 41.0082, 28.9784),
    ("Mumbai, IN", 19.0760, 72.8777),
    ("Shanghai, CN", 31.2304, 121.4737),
    ("Beijing, CN", 39.9042, 116.4074),
    ("Taipei, TW", 25.0330, 121.5654),
    ("Helsinki, FI", 60.1699, 24.9384),
    ("Toronto, CA", 43.6532, -79.3832),
    ("Seoul", 37.5665, 126.9780),
    ("Dubai", 25.2048, 55.2708),
    ("Singapore", 1.3521, 103.8198),
    ("Tokyo", 35.6762, 139.6503),
    ("London", 51.5074, -0.1278),
    ("New York", 40.7128, -74.0060),
    ("San Francisco", 37.7749, -122.4194),
    ("Berlin", 52.5200, 13.4050),
    ("Paris", 48.8566, 2.3522),
    ("Hong Kong", 22.3193, 114.1694),
    ("Bangkok", 13.7563, 100.5018),
    ("Sydney", -33.8688, 151.2093),
    ("Barcelona", 41.3851, 2.1734),
    ("Taipei", 25.0330, 121.5654),
]

# (iata_code, city, country, lat, lng)
SEED_AIRPORTS: list[tuple[str, str, str, float, float]] = [
    ("ICN", "Seoul", "KR", 37.4602, 126.4407),
    ("GMP", "Seoul", "KR", 37.5583, 126.7906),
    ("DXB", "Dubai", "AE", 25.2532, 55.3657),
    ("SIN", "Singapore", "SG", 1.3644, 103.9915),
    ("HND", "Tokyo", "JP", 35.5494, 139.7798),
    ("NRT", "Tokyo", "JP", 35.7720, 140.3929),
    ("KIX", "Osaka", "JP", 34.4320, 135.2304),
    ("LHR", "London", "GB", 51.4700, -0.4543),
    ("JFK", "New York", "US", 40.6413, -73.7781),
    ("SFO", "San Francisco", "US", 37.6213, -122.3790),
    ("AUS", "Austin", "US", 30.1975, -97.6664),
    ("DEN", "Denver", "US", 39.8561, -104.6737),
    ("BER", "Berlin", "DE", 52.3667, 13.5033),
    ("MUC", "Munich", "DE", 48.3538, 11.7861),
    ("CDG", "Paris", "FR", 49.0097, 2.5479),
    ("HKG", "Hong Kong", "HK", 22.3080, 113.9185),
    ("BKK", "Bangkok", "TH", 13.6900, 100.7501),
    ("SYD", "Sydney", "AU", -33.9399, 151.1753),
    ("AMS", "Amsterdam", "NL", 52.3105, 4.7683),
    ("BCN", "Barcelona", "ES", 41.2974, 2.0833),
    ("MAD", "Madrid", "ES", 40.4983, -3.5676),
    ("LIS", "Lisbon", "PT", 38.7742, -9.1342),
    ("FCO", "Rome", "IT", 41.8003, 12.2389),
    ("VIE", "Vienna", "AT", 48.1103, 16.5697),
    ("IST", "Istanbul", "TR", 41.2753, 28.7519),
    ("BOM", "Mumbai", "IN", 19.0896, 72.8656),
    ("PVG", "Shanghai", "CN", 31.1443, 121.8083),
    ("PEK", "Beijing", "CN", 40.0799, 116.6031),
    ("TPE", "Taipei", "TW", 25.0797, 121.2342),
    ("HEL", "Helsinki", "FI", 60.3172, 24.9633),
    ("YYZ", "Toronto", "CA", 43.6777, -79.6248),
]

# Cost-of-living index relative to a base of 100
SEED_COST_OF_LIVING: dict[str, float] = {
    "Seoul, KR": 100.0,
    "Dubai, AE": 105.0,
    "Singapore, SG": 120.0,
    "Tokyo, JP": 110.0,
    "London, GB": 125.0,
    "New York, US": 135.0,
    "San Francisco, US": 140.0,
    "Berlin, DE": 95.0,
    "Paris, FR": 115.0,
    "Hong Kong, HK": 118.0,
    "Bangkok, TH": 65.0,
    "Sydney, AU": 112.0,
    "Amsterdam, NL": 108.0,
    "Barcelona, ES": 90.0,
    "Madrid, ES": 88.0,
    "Lisbon, PT": 80.0,
    "Istanbul, TR": 60.0,
    "Mumbai, IN": 45.0,
    "Taipei, TW": 85.0,
    "Helsinki, FI": 100.0,
}

# city → (base_fare, per_km_rate, typical_trip_km), USD
SEED_TAXI_RATES: dict[str, tuple[float, float, float]] = {
    "Seoul, KR": (3.5, 0.9, 10.0),
    "Singapore, SG": (3.0, 0.6, 10.0),
    "Tokyo, JP": (3.4, 2.5, 10.0),
    "London, GB": (4.0, 2.4, 10.0),
    "New York, US": (3.0, 1.75, 10.0),
    "Berlin, DE": (4.3, 2.2, 10.0),
    "Bangkok, TH": (1.0, 0.2, 10.0),
    "Barcelona, ES": (2.5, 1.3, 10.0),
}

# (conference, location, start_date, end_date, ticket_price)
SEED_CONFERENCES: list[tuple[str, str, str, str | None, str | None]] = [
    ("Token2049 Singapore", "Singapore, SG", "18 September", "19 September", "$900"),
    ("ETHDenver", "Denver, US", "27 February", "2 March", "$0"),
    ("Devcon", "Bangkok, TH", "12 November", "15 November", "$599"),
    ("Korea Blockchain Week", "Seoul, KR", "1 September", "7 September", None),
    ("EthCC", "Barcelona, ES", "30 June", "3 July", "$750"),
]
