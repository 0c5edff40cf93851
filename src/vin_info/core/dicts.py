"""
VIN Character Dictionaries
Static lookup tables for transliteration, checksum weights, regions,
countries and manufacturers (ISO 3779 / 49 CFR 565).
"""
from typing import Dict, FrozenSet, List, Tuple

UNKNOWN = "Unknown"

VIN_LENGTH = 17
CHECK_DIGIT_INDEX = 8
YEAR_INDEX = 9

# --- Alphabet ---

DIGITS = "0123456789"
LETTERS = "ABCDEFGHJKLMNPRSTUVWXYZ"  # I, O, Q are never used

ALLOWED_CHARS: FrozenSet[str] = frozenset(DIGITS + LETTERS)

# --- Checksum ---

VALUE_MAP: Dict[str, int] = {
    'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8,
    'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5, 'P': 7, 'R': 9,
    'S': 2, 'T': 3, 'U': 4, 'V': 5, 'W': 6, 'X': 7, 'Y': 8, 'Z': 9,
    **{d: int(d) for d in DIGITS},
}

# Position 9 holds the check digit itself, so it weighs nothing
WEIGHTS: Tuple[int, ...] = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)

# --- Model year ---

YEAR_CHARS = "ABCDEFGHJKLMNPRSTVWXY123456789"
BASE_YEAR = 1979  # 'A' is the first year after this

# --- Regions (1st character) ---

REGIONS: Dict[str, str] = {
    **{c: "Africa" for c in "ABCDEFGH"},
    **{c: "Asia" for c in "JKLMNPR"},
    **{c: "Europe" for c in "STUVWXYZ"},
    **{c: "North America" for c in "12345"},
    **{c: "Oceania" for c in "67"},
    **{c: "South America" for c in "890"},
}

# --- Countries (1st + 2nd character) ---

# Order in which ISO 3779 ranges run over the 2nd character
RANGE_ORDER = LETTERS + "1234567890"

# (1st char, first 2nd char, last 2nd char, country)
COUNTRY_RANGES: List[Tuple[str, str, str, str]] = [
    # Africa
    ("A", "A", "H", "South Africa"),
    ("A", "J", "N", "Ivory Coast"),
    ("B", "A", "E", "Angola"),
    ("B", "F", "K", "Kenya"),
    ("B", "L", "R", "Tanzania"),
    ("C", "A", "E", "Benin"),
    ("C", "F", "K", "Madagascar"),
    ("C", "L", "R", "Tunisia"),
    ("D", "A", "E", "Egypt"),
    ("D", "F", "K", "Morocco"),
    ("D", "L", "R", "Zambia"),
    ("E", "A", "E", "Ethiopia"),
    ("E", "F", "K", "Mozambique"),
    ("F", "A", "E", "Ghana"),
    ("F", "F", "K", "Nigeria"),

    # Asia
    ("J", "A", "0", "Japan"),
    ("K", "A", "E", "Sri Lanka"),
    ("K", "F", "K", "Israel"),
    ("K", "L", "R", "Korea (South)"),
    ("K", "S", "0", "Kazakhstan"),
    ("L", "A", "0", "China"),
    ("M", "A", "E", "India"),
    ("M", "F", "K", "Indonesia"),
    ("M", "L", "R", "Thailand"),
    ("M", "S", "0", "Myanmar"),
    ("N", "A", "E", "Iran"),
    ("N", "F", "K", "Pakistan"),
    ("N", "L", "R", "Turkey"),
    ("P", "A", "E", "Philippines"),
    ("P", "F", "K", "Singapore"),
    ("P", "L", "R", "Malaysia"),
    ("R", "A", "E", "United Arab Emirates"),
    ("R", "F", "K", "Taiwan"),
    ("R", "L", "R", "Vietnam"),
    ("R", "S", "0", "Saudi Arabia"),

    # Europe
    ("S", "A", "M", "United Kingdom"),
    ("S", "N", "T", "East Germany"),
    ("S", "U", "Z", "Poland"),
    ("S", "1", "4", "Latvia"),
    ("T", "A", "H", "Switzerland"),
    ("T", "J", "P", "Czech Republic"),
    ("T", "R", "V", "Hungary"),
    ("T", "W", "1", "Portugal"),
    ("U", "H", "M", "Denmark"),
    ("U", "N", "T", "Ireland"),
    ("U", "U", "Z", "Romania"),
    ("U", "5", "7", "Slovakia"),
    ("V", "A", "E", "Austria"),
    ("V", "F", "R", "France"),
    ("V", "S", "W", "Spain"),
    ("V", "X", "2", "Serbia"),
    ("V", "3", "5", "Croatia"),
    ("V", "6", "0", "Estonia"),
    ("W", "A", "0", "Germany/West Germany"),
    ("X", "A", "E", "Bulgaria"),
    ("X", "F", "K", "Greece"),
    ("X", "L", "R", "Netherlands"),
    ("X", "S", "W", "Russia/USSR"),
    ("X", "X", "2", "Luxembourg"),
    ("X", "3", "0", "Russia"),
    ("Y", "A", "E", "Belgium"),
    ("Y", "F", "K", "Finland"),
    ("Y", "L", "R", "Malta"),
    ("Y", "S", "W", "Sweden"),
    ("Y", "X", "2", "Norway"),
    ("Y", "3", "5", "Belarus"),
    ("Y", "6", "0", "Ukraine"),
    ("Z", "A", "R", "Italy"),
    ("Z", "X", "2", "Slovenia"),
    ("Z", "3", "5", "Lithuania"),

    # North America
    ("1", "A", "0", "United States"),
    ("2", "A", "0", "Canada"),
    ("3", "A", "W", "Mexico"),
    ("3", "X", "7", "Costa Rica"),
    ("3", "8", "0", "Cayman Islands"),
    ("4", "A", "0", "United States"),
    ("5", "A", "0", "United States"),

    # Oceania
    ("6", "A", "W", "Australia"),
    ("7", "A", "E", "New Zealand"),

    # South America
    ("8", "A", "E", "Argentina"),
    ("8", "F", "K", "Chile"),
    ("8", "L", "R", "Ecuador"),
    ("8", "S", "W", "Peru"),
    ("8", "X", "2", "Venezuela"),
    ("9", "A", "E", "Brazil"),
    ("9", "F", "K", "Colombia"),
    ("9", "L", "R", "Paraguay"),
    ("9", "S", "W", "Uruguay"),
    ("9", "X", "2", "Trinidad & Tobago"),
    ("9", "3", "9", "Brazil"),
]


def _expand_country_ranges(rows: List[Tuple[str, str, str, str]]) -> Dict[str, str]:
    """Expand ISO 3779 range rows into a flat 2-character lookup table."""
    table: Dict[str, str] = {}
    for first, start, end, country in rows:
        lo = RANGE_ORDER.index(start)
        hi = RANGE_ORDER.index(end)
        for second in RANGE_ORDER[lo:hi + 1]:
            table[first + second] = country
    return table


COUNTRIES: Dict[str, str] = _expand_country_ranges(COUNTRY_RANGES)

# --- Manufacturers (WMI, 1st-3rd character) ---

MANUFACTURERS: Dict[str, str] = {
    # Africa
    "AAV": "Volkswagen South Africa",
    "AC5": "Hyundai South Africa",
    "ADD": "Hyundai South Africa",
    "AFA": "Ford South Africa",
    "AHT": "Toyota South Africa",

    # Japan
    "JA3": "Mitsubishi",
    "JA4": "Mitsubishi",
    "JF1": "Subaru",
    "JF2": "Subaru",
    "JHM": "Honda",
    "JHL": "Honda",
    "JHA": "Hino",
    "JMB": "Mitsubishi Motors",
    "JMY": "Mitsubishi Motors",
    "JMZ": "Mazda",
    "JN1": "Nissan",
    "JN8": "Nissan",
    "JS1": "Suzuki",
    "JT2": "Toyota",
    "JT3": "Toyota",
    "JT6": "Lexus",
    "JTD": "Toyota",
    "JTH": "Lexus",
    "JYA": "Yamaha",
    "JY4": "Yamaha",

    # Korea, China, India
    "KL1": "GM Daewoo",
    "KM8": "Hyundai",
    "KMH": "Hyundai",
    "KNA": "Kia",
    "KNB": "Kia",
    "KNC": "Kia",
    "KNM": "Renault Samsung",
    "KPT": "SsangYong",
    "LBV": "BMW Brilliance",
    "LDC": "Dong Feng Peugeot Citroen",
    "LFV": "FAW-Volkswagen",
    "LSG": "Shanghai General Motors",
    "LSV": "Shanghai Volkswagen",
    "LVS": "Ford Chang An",
    "LRW": "Tesla China",
    "MA1": "Mahindra",
    "MA3": "Maruti Suzuki",
    "MAK": "Honda Cars India",
    "MAL": "Hyundai India",
    "MAT": "Tata Motors",
    "MBH": "Suzuki India",
    "MHR": "Honda Indonesia",
    "MNB": "Ford Thailand",
    "MNT": "Nissan Thailand",
    "MR0": "Toyota Thailand",
    "NLE": "Mercedes-Benz Turk truck",
    "NM0": "Ford Turkey",
    "NM4": "Tofas Turk",
    "NMT": "Toyota Turkey",
    "PE1": "Ford Philippines",
    "PL1": "Proton",

    # United Kingdom, Central Europe
    "SAJ": "Jaguar",
    "SAL": "Land Rover",
    "SAR": "Rover",
    "SB1": "Toyota UK",
    "SCA": "Rolls Royce",
    "SCB": "Bentley",
    "SCC": "Lotus Cars",
    "SCE": "DeLorean Motor Cars N. Ireland (UK)",
    "SCF": "Aston Martin",
    "SDB": "Peugeot UK (formerly Talbot)",
    "SFD": "Alexander Dennis UK",
    "SHH": "Honda UK",
    "SHS": "Honda UK",
    "SJN": "Nissan UK",
    "SU9": "Solaris Bus & Coach (Poland)",
    "TK9": "SOR (Czech Republic)",
    "TDM": "QUANTYA Swiss Electric Movement (Switzerland)",
    "TMB": "Skoda (Czech Republic)",
    "TMK": "Karosa (Czech Republic)",
    "TMP": "Skoda trolleybuses (Czech Republic)",
    "TMT": "Tatra (Czech Republic)",
    "TRA": "Ikarus Bus",
    "TRU": "Audi Hungary",
    "TSE": "Ikarus Egyedi Autobuszgyar, (Hungary)",
    "TSM": "Suzuki Hungary",
    "UU1": "Renault Dacia, (Romania)",

    # Austria, France, Spain
    "VA0": "OAF Austria",
    "VF1": "Renault",
    "VF3": "Peugeot",
    "VF4": "Talbot",
    "VF6": "Renault (Trucks & Buses)",
    "VF7": "Citroen",
    "VF8": "Matra",
    "VF9": "Bugatti",
    "VG5": "MBK (motorcycles)",
    "VLU": "Scania France",
    "VN1": "SOVAB (France)",
    "VNE": "Irisbus (France)",
    "VNK": "Toyota France",
    "VNV": "Renault-Nissan",
    "VR1": "DS Automobiles",
    "VS5": "Renault Spain",
    "VS6": "Ford Spain",
    "VS7": "Citroen Spain",
    "VS9": "Carrocerias Ayats (Spain)",
    "VSE": "Suzuki Spain (Santana Motors)",
    "VSK": "Nissan Spain",
    "VSS": "SEAT",
    "VV9": "TAURO Sport Auto Spain",
    "VWV": "Volkswagen Spain",
    "VX1": "Zastava / Yugo Serbia",

    # Germany
    "WAG": "Neoplan",
    "WAU": "Audi",
    "WA1": "Audi SUV",
    "WBA": "BMW",
    "WBS": "BMW M",
    "WBX": "BMW SUV",
    "WDB": "Mercedes-Benz",
    "WDC": "DaimlerChrysler",
    "WDD": "Mercedes-Benz",
    "WEB": "Evobus GmbH (Mercedes-Bus)",
    "WF0": "Ford Germany",
    "WJM": "Iveco Magirus",
    "WKK": "Karl Kassbohrer Fahrzeugwerke (Setra)",
    "WMA": "MAN Germany",
    "WME": "smart",
    "WMW": "MINI",
    "WMX": "Mercedes-AMG",
    "WP0": "Porsche car",
    "WP1": "Porsche SUV",
    "WUA": "Quattro GmbH",
    "WVG": "Volkswagen MPV/SUV",
    "WVW": "Volkswagen",
    "W0L": "Opel",
    "W09": "Ruf Automobile",

    # Northern and Eastern Europe, Italy
    "X4X": "BMW Russia",
    "XL9": "Spyker",
    "XLR": "DAF (trucks)",
    "XMC": "NedCar Mitsubishi",
    "XTA": "Lada/AutoVaz (Russia)",
    "YK1": "Saab",
    "YS2": "Scania AB",
    "YS3": "Saab",
    "YS4": "Scania Bus",
    "YTN": "Saab NEVS",
    "YV1": "Volvo Cars",
    "YV2": "Volvo Trucks",
    "YV3": "Volvo Buses",
    "ZA9": "Lamborghini",
    "ZAM": "Maserati",
    "ZAR": "Alfa Romeo",
    "ZCF": "Iveco",
    "ZDF": "Ferrari Dino",
    "ZD4": "Aprilia",
    "ZFA": "Fiat",
    "ZFF": "Ferrari",
    "ZGU": "Moto Guzzi",
    "ZHW": "Lamborghini",
    "ZLA": "Lancia",

    # North America
    "1B3": "Dodge",
    "1C3": "Chrysler",
    "1C4": "Chrysler",
    "1C6": "Chrysler",
    "1D3": "Dodge",
    "1FA": "Ford Motor Company",
    "1FB": "Ford Motor Company",
    "1FC": "Ford Motor Company",
    "1FD": "Ford Motor Company",
    "1FM": "Ford Motor Company",
    "1FT": "Ford Motor Company",
    "1FU": "Freightliner",
    "1FV": "Freightliner",
    "1F9": "FWD Corp.",
    "1G1": "Chevrolet USA",
    "1G3": "Oldsmobile",
    "1G6": "Cadillac",
    "1G9": "Google",
    "1GC": "Chevrolet Truck USA",
    "1GM": "Pontiac",
    "1GT": "GMC Truck USA",
    "1GY": "Cadillac",
    "1HD": "Harley-Davidson",
    "1HG": "Honda USA-Ohio",
    "1J4": "Jeep",
    "1J8": "Jeep",
    "1L1": "Lincoln",
    "1LN": "Lincoln",
    "1M1": "Mack Truck USA",
    "1M2": "Mack Truck USA",
    "1M8": "Motor Coach Industries",
    "1N4": "Nissan USA",
    "1NX": "NUMMI",
    "1VW": "Volkswagen USA",
    "1XK": "Kenworth USA",
    "1XP": "Peterbilt USA",
    "1YV": "Mazda USA (AutoAlliance International)",
    "1ZV": "Ford (AutoAlliance International)",
    "2A4": "Chrysler Canada",
    "2BP": "Bombardier Recreational Products",
    "2B3": "Dodge Canada",
    "2C3": "Chrysler Canada",
    "2CN": "CAMI",
    "2D3": "Dodge Canada",
    "2FA": "Ford Motor Company Canada",
    "2FT": "Ford Motor Company Canada",
    "2G1": "Chevrolet Canada",
    "2G2": "Pontiac Canada",
    "2HG": "Honda Canada",
    "2HK": "Honda Canada",
    "2HM": "Hyundai Canada",
    "2M8": "Motor Coach Industries",
    "2T1": "Toyota Canada",
    "2T2": "Lexus Canada",
    "2WK": "Western Star",
    "3FA": "Ford Motor Company Mexico",
    "3G1": "Chevrolet Mexico",
    "3H1": "Honda Mexico",
    "3HG": "Honda Mexico",
    "3MZ": "Mazda Mexico",
    "3N1": "Nissan Mexico",
    "3VW": "Volkswagen Mexico",
    "4F2": "Mazda USA",
    "4JG": "Mercedes-Benz USA",
    "4M1": "Mercury",
    "4S3": "Subaru USA",
    "4S4": "Subaru USA",
    "4T1": "Toyota USA",
    "4T3": "Toyota USA",
    "4US": "BMW USA",
    "4UZ": "Frt-Thomas Bus",
    "4V1": "Volvo",
    "4V4": "Volvo Trucks North America",
    "5FN": "Honda USA-Alabama",
    "5J6": "Honda USA-Ohio",
    "5L1": "Lincoln",
    "5NP": "Hyundai USA",
    "5TD": "Toyota USA - trucks",
    "5UX": "BMW USA",
    "5YJ": "Tesla",

    # Oceania, South America
    "6AB": "MAN Australia",
    "6F4": "Nissan Motor Company Australia",
    "6F5": "Kenworth Australia",
    "6FP": "Ford Motor Company Australia",
    "6G1": "General Motors-Holden",
    "6G2": "Pontiac Australia",
    "6H8": "General Motors-Holden",
    "6MM": "Mitsubishi Motors Australia",
    "6T1": "Toyota Motor Corporation Australia",
    "6U9": "Privately Imported car in Australia",
    "7A1": "Mitsubishi New Zealand",
    "8AF": "Ford Argentina",
    "8AG": "Chevrolet Argentina",
    "8AJ": "Toyota Argentina",
    "8AP": "Fiat Argentina",
    "8AW": "Volkswagen Argentina",
    "8A1": "Renault Argentina",
    "8GG": "Chevrolet Chile",
    "935": "Citroen Brazil",
    "936": "Peugeot Brazil",
    "93H": "Honda Brazil",
    "93R": "Toyota Brazil",
    "93U": "Audi Brazil",
    "93V": "Audi Brazil",
    "93X": "Mitsubishi Motors Brazil",
    "93Y": "Renault Brazil",
    "94D": "Nissan Brazil",
    "9BD": "Fiat Brazil",
    "9BF": "Ford Brazil",
    "9BG": "Chevrolet Brazil",
    "9BM": "Mercedes-Benz Brazil",
    "9BR": "Toyota Brazil",
    "9BS": "Scania Brazil",
    "9BW": "Volkswagen Brazil",
    "9FB": "Renault Colombia",
}


def get_region(code: str, fallback: str = UNKNOWN) -> str:
    """Return the region name for a 1-character region code."""
    return REGIONS.get(code.upper(), fallback)


def get_country(code: str, fallback: str = UNKNOWN) -> str:
    """Return the country name for a 2-character country code."""
    return COUNTRIES.get(code.upper(), fallback)


def get_manufacturer(code: str, fallback: str = UNKNOWN) -> str:
    """Return the manufacturer name for a 3-character WMI."""
    return MANUFACTURERS.get(code.upper(), fallback)


def get_country_codes(country: str) -> List[str]:
    """Return all 2-character codes assigned to a country, sorted."""
    return sorted(code for code, name in COUNTRIES.items() if name == country)
