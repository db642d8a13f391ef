"""Static airline alliance membership.

Used by the Amadeus strategy to keep fares on major (alliance) carriers
unless budget carriers were requested.
"""

STAR_ALLIANCE = "star_alliance"
ONEWORLD = "oneworld"
SKYTEAM = "skyteam"

AIRLINE_ALLIANCES: dict[str, frozenset[str]] = {
    STAR_ALLIANCE: frozenset({
        "AC",  # Air Canada
        "NH",  # ANA
        "OZ",  # Asiana Airlines
        "OS",  # Austrian Airlines
        "AV",  # Avianca
        "BR",  # EVA Air
        "CA",  # Air China
        "CM",  # Copa Airlines
        "MS",  # Egyptair
        "ET",  # Ethiopian Airlines
        "LH",  # Lufthansa
        "SK",  # SAS
        "SQ",  # Singapore Airlines
        "SA",  # South African Airways
        "LX",  # Swiss
        "TP",  # TAP Air Portugal
        "TG",  # Thai Airways
        "TK",  # Turkish Airlines
        "UA",  # United Airlines
        "ZH",  # Shenzhen Airlines
    }),
    ONEWORLD: frozenset({
        "AA",  # American Airlines
        "BA",  # British Airways
        "CX",  # Cathay Pacific
        "AY",  # Finnair
        "IB",  # Iberia
        "JL",  # Japan Airlines
        "LA",  # LATAM Airlines
        "MH",  # Malaysia Airlines
        "QF",  # Qantas
        "QR",  # Qatar Airways
        "RJ",  # Royal Jordanian
        "UL",  # SriLankan Airlines
        "S7",  # S7 Airlines
    }),
    SKYTEAM: frozenset({
        "SU",  # Aeroflot
        "AR",  # Aerolineas Argentinas
        "AM",  # Aeromexico
        "AF",  # Air France
        "AZ",  # ITA Airways
        "CI",  # China Airlines
        "MU",  # China Eastern
        "CZ",  # China Southern
        "OK",  # Czech Airlines
        "DL",  # Delta Air Lines
        "KE",  # Korean Air
        "KL",  # KLM
        "ME",  # Middle East Airlines
        "SV",  # Saudia
        "RO",  # TAROM
        "VN",  # Vietnam Airlines
        "MF",  # Xiamen Airlines
    }),
}

ALLIANCE_LABELS: dict[str, str] = {
    STAR_ALLIANCE: "Star Alliance",
    ONEWORLD: "oneworld",
    SKYTEAM: "SkyTeam",
}


def get_alliance(airline_code: str) -> str | None:
    """Get airline alliance by IATA code. Returns None for non-alliance airlines."""
    for alliance, members in AIRLINE_ALLIANCES.items():
        if airline_code in members:
            return alliance
    return None


def is_major_carrier(airline_code: str) -> bool:
    return get_alliance(airline_code) is not None


def get_alliance_label(airline_code: str) -> str:
    alliance = get_alliance(airline_code)
    return ALLIANCE_LABELS[alliance] if alliance else "Independent"
