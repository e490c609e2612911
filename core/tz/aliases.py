"""Hand-curated nicknames and abbreviations mapped to canonical city names."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

_ALIASES: Dict[str, str] = {
    # United States
    "nyc": "new york",
    "ny": "new york",
    "big apple": "new york",
    "la": "los angeles",
    "sf": "san francisco",
    "chi": "chicago",
    "philly": "philadelphia",
    "dc": "washington",
    "atl": "atlanta",
    "hotlanta": "atlanta",
    "bos": "boston",
    "vegas": "las vegas",
    "phx": "phoenix",
    "pdx": "portland",
    "sea": "seattle",
    "det": "detroit",
    "mia": "miami",
    "dal": "dallas",
    "hou": "houston",
    "nola": "new orleans",
    "the bay": "san francisco",
    "silicon valley": "san jose",
    # Canada
    "to": "toronto",
    "the 6": "toronto",
    "yvr": "vancouver",
    "mtl": "montreal",
    # United Kingdom
    "ldn": "london",
    "the city": "london",
    # Europe
    "paname": "paris",
    "barca": "barcelona",
    "bcn": "barcelona",
    "mad": "madrid",
    # Asia
    "hk": "hong kong",
    "sg": "singapore",
    "bkk": "bangkok",
    "del": "delhi",
    "bom": "mumbai",
    "blr": "bangalore",
    # Australia
    "syd": "sydney",
    "mel": "melbourne",
    "bris": "brisbane",
    # Middle East
    "dxb": "dubai",
    # Africa
    "jnb": "johannesburg",
    "jo'burg": "johannesburg",
    "joburg": "johannesburg",
    "cpt": "cape town",
    "nbo": "nairobi",
    # Zone abbreviations, pinned to the zone's reference city
    "pst": "los angeles",
    "pdt": "los angeles",
    "mst": "denver",
    "mdt": "denver",
    "cst": "chicago",
    "cdt": "chicago",
    "est": "new york",
    "edt": "new york",
    "bst": "london",
    "jst": "tokyo",
    "aest": "sydney",
}

ALIASES: Mapping[str, str] = MappingProxyType(_ALIASES)
