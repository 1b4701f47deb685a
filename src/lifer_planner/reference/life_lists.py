"""Preset life lists and a catalog of common regional birds.

The catalog backs species search when building a life list by hand; the
presets bulk-replace a life list in one step.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogBird:
    """A species code with its common name."""

    code: str
    name: str


# Most commonly reported birds in the Chicago area, most common first
_CHICAGO_BIRDS: list[tuple[str, str]] = [
    ("amerob", "American Robin"),
    ("norcad", "Northern Cardinal"),
    ("bkcchi", "Black-capped Chickadee"),
    ("amecro", "American Crow"),
    ("blujay", "Blue Jay"),
    ("mourdo", "Mourning Dove"),
    ("amegfi", "American Goldfinch"),
    ("rebwoo", "Red-bellied Woodpecker"),
    ("dowwoo", "Downy Woodpecker"),
    ("eucspa", "European Starling"),
    ("houspa", "House Sparrow"),
    ("houfin", "House Finch"),
    ("carwre", "Carolina Wren"),
    ("norfli", "Northern Flicker"),
    ("whbnut", "White-breasted Nuthatch"),
    ("haiwoo", "Hairy Woodpecker"),
    ("rocpig", "Rock Pigeon"),
    ("redhea", "Red-headed Woodpecker"),
    ("cedwax", "Cedar Waxwing"),
    ("grbher3", "Great Blue Heron"),
    ("mallard", "Mallard"),
    ("rethaw", "Red-tailed Hawk"),
    ("compoo", "Common Poorwill"),
    ("killde", "Killdeer"),
    ("turvul", "Turkey Vulture"),
    ("grajay", "Gray Jay"),
    ("rewbla", "Red-winged Blackbird"),
    ("comgra", "Common Grackle"),
    ("brnowl", "Barred Owl"),
    ("amekes", "American Kestrel"),
    ("kinrai", "King Rail"),
    ("rebnut", "Red-breasted Nuthatch"),
    ("woothr", "Wood Thrush"),
    ("easblu", "Eastern Bluebird"),
    ("banswa", "Bank Swallow"),
    ("chispa", "Chipping Sparrow"),
    ("sonspa", "Song Sparrow"),
    ("daejun", "Dark-eyed Junco"),
    ("wbwwre1", "White-breasted Wood-Wren"),
    ("bawwar", "Bay-breasted Warbler"),
    ("yelwar", "Yellow Warbler"),
    ("comyel", "Common Yellowthroat"),
    ("carchi", "Carolina Chickadee"),
    ("tuftit", "Tufted Titmouse"),
    ("brncre", "Brown Creeper"),
    ("whttre", "White-throated Sparrow"),
    ("foxspa", "Fox Sparrow"),
    ("swaspa", "Swamp Sparrow"),
    ("easmea", "Eastern Meadowlark"),
    ("brohea", "Brown-headed Cowbird"),
    ("orcori", "Orchard Oriole"),
    ("balori", "Baltimore Oriole"),
    ("scatan", "Scarlet Tanager"),
    ("norcar", "Northern Parula"),
    ("canvas", "Canvasback"),
    ("rinduc", "Ring-necked Duck"),
    ("lesyel", "Lesser Yellowlegs"),
    ("solsan", "Solitary Sandpiper"),
    ("sposan", "Spotted Sandpiper"),
    ("ribgul", "Ring-billed Gull"),
    ("hergul", "Herring Gull"),
    ("cacgoo1", "Canada Goose"),
    ("gnwtea", "Green-winged Teal"),
    ("buwtea", "Blue-winged Teal"),
    ("norsho", "Northern Shoveler"),
    ("gadwal", "Gadwall"),
    ("amewig", "American Wigeon"),
    ("lessca", "Lesser Scaup"),
    ("buffle", "Bufflehead"),
    ("comgol", "Common Goldeneye"),
    ("hoomer", "Hooded Merganser"),
    ("commer", "Common Merganser"),
    ("piebie1", "Pied-billed Grebe"),
    ("doccor", "Double-crested Cormorant"),
    ("grnher", "Green Heron"),
    ("bcnher", "Black-crowned Night-Heron"),
    ("coohaw", "Cooper's Hawk"),
    ("shshaw", "Sharp-shinned Hawk"),
    ("baleag", "Bald Eagle"),
    ("osprey", "Osprey"),
    ("merlin", "Merlin"),
    ("pefal", "Peregrine Falcon"),
    ("amecoo", "American Coot"),
    ("sancra", "Sandhill Crane"),
    ("chimni", "Chimney Swift"),
    ("rethum", "Ruby-throated Hummingbird"),
    ("belkin1", "Belted Kingfisher"),
    ("yebsap", "Yellow-bellied Sapsucker"),
    ("pilwoo", "Pileated Woodpecker"),
    ("easpho", "Eastern Phoebe"),
    ("grcfly", "Great Crested Flycatcher"),
    ("easkin", "Eastern Kingbird"),
    ("whevir", "White-eyed Vireo"),
    ("belvir", "Bell's Vireo"),
    ("yetgvi", "Yellow-throated Vireo"),
    ("warvir", "Warbling Vireo"),
    ("reevir1", "Red-eyed Vireo"),
]

COMMON_CHICAGO_BIRDS: tuple[CatalogBird, ...] = tuple(
    CatalogBird(code=code, name=name) for code, name in _CHICAGO_BIRDS
)

# 15 backyard birds almost every beginner has already seen
DEMO_LIFE_LIST: frozenset[str] = frozenset(
    {
        "norcad", "amerob", "bkcchi", "carwre", "dowwoo",
        "haiwoo", "rebwoo", "amecro", "amegfi", "blujay",
        "mourdo", "eucspa", "norfli", "whbnut", "rebnut",
    }
)  # fmt: skip

PRESETS: dict[str, frozenset[str]] = {
    "demo": DEMO_LIFE_LIST,
    "chicago-common": frozenset(bird.code for bird in COMMON_CHICAGO_BIRDS),
}


def search_catalog(
    term: str, catalog: tuple[CatalogBird, ...] = COMMON_CHICAGO_BIRDS
) -> list[CatalogBird]:
    """Case-insensitive substring match on common name or species code."""
    needle = term.strip().lower()
    if not needle:
        return list(catalog)
    return [bird for bird in catalog if needle in bird.name.lower() or needle in bird.code.lower()]
