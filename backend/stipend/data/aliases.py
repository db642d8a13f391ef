"""Country-name aliases → ISO 3166-1 alpha-2 codes.

Free-text destinations name countries in many ways ("UK", "Korea",
"Deutschland") and sometimes give a U.S. state where a country belongs.
"""

COUNTRY_ALIASES: dict[str, str] = {
    # Middle East
    "UAE": "AE",
    "United Arab Emirates": "AE",
    "Qatar": "QA",
    "Turkey": "TR",
    "Türkiye": "TR",
    # North America
    "USA": "US",
    "United States": "US",
    "United States of America": "US",
    "America": "US",
    "U.S.": "US",
    "U.S.A.": "US",
    "Canada": "CA",
    "Mexico": "MX",
    # Europe
    "UK": "GB",
    "United Kingdom": "GB",
    "Britain": "GB",
    "Great Britain": "GB",
    "England": "GB",
    "Scotland": "GB",
    "Czechia": "CZ",
    "Czech Republic": "CZ",
    "Germany": "DE",
    "Deutschland": "DE",
    "France": "FR",
    "Francaise": "FR",
    "Netherlands": "NL",
    "Holland": "NL",
    "The Netherlands": "NL",
    "Finland": "FI",
    "Suomi": "FI",
    "Switzerland": "CH",
    "Schweiz": "CH",
    "Suisse": "CH",
    "Svizzera": "CH",
    "Spain": "ES",
    "España": "ES",
    "Italy": "IT",
    "Italia": "IT",
    "Austria": "AT",
    "Portugal": "PT",
    "Ireland": "IE",
    "Belgium": "BE",
    "Denmark": "DK",
    "Sweden": "SE",
    "Norway": "NO",
    "Poland": "PL",
    # Asia-Pacific
    "Korea": "KR",
    "South Korea": "KR",
    "Republic of Korea": "KR",
    "ROK": "KR",
    "Vietnam": "VN",
    "Viet Nam": "VN",
    "Japan": "JP",
    "Nippon": "JP",
    "Taiwan": "TW",
    "Republic of China": "TW",
    "China": "CN",
    "Hong Kong": "HK",
    "Singapore": "SG",
    "Thailand": "TH",
    "Indonesia": "ID",
    "Malaysia": "MY",
    "Philippines": "PH",
    "India": "IN",
    "Australia": "AU",
    "New Zealand": "NZ",
    "Russia": "RU",
    "Russian Federation": "RU",
}

# U.S. states show up in the country slot ("Austin, Texas", "Austin, TX").
US_STATE_ALIASES: dict[str, str] = {
    "Texas": "US", "TX": "US",
    "California": "US", "CA": "US",
    "Florida": "US", "FL": "US",
    "New York": "US", "NY": "US",
    "Virginia": "US", "VA": "US",
    "Washington": "US", "WA": "US",
    "Massachusetts": "US", "MA": "US",
    "Illinois": "US", "IL": "US",
    "Colorado": "US", "CO": "US",
    "Georgia": "US", "GA": "US",
    "Nevada": "US", "NV": "US",
}

_LOWER_ALIASES: dict[str, str] = {
    **{k.lower(): v for k, v in COUNTRY_ALIASES.items()},
    **{k.lower(): v for k, v in US_STATE_ALIASES.items() if len(k) > 2},
}


def country_code_for(name: str) -> str | None:
    """Resolve a country (or U.S. state) name to its ISO code.

    Two-letter state abbreviations only match when written in upper case.
    """
    cleaned = name.strip()
    if not cleaned:
        return None
    if cleaned in US_STATE_ALIASES:
        return US_STATE_ALIASES[cleaned]
    if cleaned in COUNTRY_ALIASES:
        return COUNTRY_ALIASES[cleaned]
    return _LOWER_ALIASES.get(cleaned.lower())
