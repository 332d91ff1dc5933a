"""Internal constants shared across the library."""

DEFAULT_PORT = 20777
DEFAULT_QUEUE_SIZE = 256

# Header value meaning "player slot not observed yet".
PLAYER_INDEX_UNKNOWN = 255

# ------------------------------------------------------------------
# F1 2020 id → display name tables
# ------------------------------------------------------------------

TEAM_NAMES: dict[int, str] = {
    0: "Mercedes",
    1: "Ferrari",
    2: "Red Bull Racing",
    3: "Williams",
    4: "Racing Point",
    5: "Renault",
    6: "AlphaTauri",
    7: "Haas",
    8: "McLaren",
    9: "Alfa Romeo",
    255: "My Team",
}

DRIVER_NAMES: dict[int, str] = {
    0: "Carlos Sainz",
    1: "Daniil Kvyat",
    2: "Daniel Ricciardo",
    6: "Kimi Räikkönen",
    7: "Lewis Hamilton",
    9: "Max Verstappen",
    10: "Nico Hulkenberg",
    11: "Kevin Magnussen",
    12: "Romain Grosjean",
    13: "Sebastian Vettel",
    14: "Sergio Perez",
    15: "Valtteri Bottas",
    17: "Esteban Ocon",
    19: "Lance Stroll",
    50: "George Russell",
    54: "Lando Norris",
    58: "Charles Leclerc",
    59: "Pierre Gasly",
    62: "Alexander Albon",
    63: "Nicholas Latifi",
    74: "Antonio Giovinazzi",
}

NATIONALITIES: dict[int, str] = {
    0: "Unknown",
    1: "American",
    3: "Australian",
    4: "Austrian",
    10: "British",
    13: "Canadian",
    22: "Danish",
    23: "Dutch",
    27: "Finnish",
    28: "French",
    29: "German",
    41: "Italian",
    42: "Japanese",
    52: "Monegasque",
    53: "New Zealander",
    58: "Polish",
    59: "Portuguese",
    61: "Romanian",
    62: "Russian",
    68: "South African",
    70: "Spanish",
    77: "Thai",
}

# Visual compound ids (what the tyre looks like on screen).
VISUAL_TYRE_COMPOUNDS: dict[int, str] = {
    7: "Inter",
    8: "Wet",
    15: "Wet",
    16: "Soft",
    17: "Medium",
    18: "Hard",
    19: "Super Soft",
    20: "Soft",
    21: "Medium",
    22: "Hard",
}

FUEL_MIXES: dict[int, str] = {0: "Lean", 1: "Standard", 2: "Rich", 3: "Max"}

ERS_DEPLOY_MODES: dict[int, str] = {0: "None", 1: "Medium", 2: "Overtake", 3: "Hotlap"}


def lookup_name(table: dict[int, str], key: int, fallback: str = "Unknown") -> str:
    """Return ``table[key]`` or a readable placeholder for unmapped ids."""
    name = table.get(key)
    if name is None:
        return f"{fallback} {key}"
    return name
