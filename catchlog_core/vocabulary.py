from __future__ import annotations

OTHER_CODE = "other"

SPECIES_LABELS: dict[str, str] = {
    "common-carp": "Common Carp",
    "mirror-carp": "Mirror Carp",
    "leather-carp": "Leather Carp",
    "ghost-carp": "Ghost Carp",
    "grass-carp": "Grass Carp",
    "crucian-carp": "Crucian Carp",
    "tench": "Tench",
    "bream": "Bream",
    "silver-bream": "Silver Bream",
    "roach": "Roach",
    "rudd": "Rudd",
    "pike": "Northern Pike",
    "perch": "Perch",
    "zander": "Zander (Pike-Perch)",
    "barbel": "Barbel",
    "chub": "Chub",
    "dace": "Dace",
    "eel": "Eel",
    "wels-catfish": "Wels Catfish",
    "grayling": "Grayling",
    "bleak": "Bleak",
    "bullhead": "Bullhead",
    "gudgeon": "Gudgeon",
    "ide": "Ide",
    "orfe": "Golden Orfe",
}

TECHNIQUE_LABELS: dict[str, str] = {
    "float-fishing": "Float Fishing",
    "pole-fishing": "Pole Fishing",
    "feeder-fishing": "Feeder Fishing",
    "method-feeder": "Method Feeder",
    "cage-feeder": "Cage Feeder",
    "swimfeeder": "Swimfeeder",
    "hair-rig": "Hair Rig",
    "bolt-rig": "Bolt Rig",
    "lure-fishing": "Lure Fishing",
    "soft-plastic": "Soft Plastic Lures",
    "spinners": "Spinners & Spoons",
    "deadbait": "Deadbait Fishing",
    "livebait": "Livebait Fishing",
    "legering": "Legering",
    "match-fishing": "Match Fishing",
    "fly-fishing": "Fly Fishing",
}

KG_PER_LB = 0.453592
LB_PER_KG = 2.20462

# lb_oz is stored as a single decimal pound figure; no ounces component exists.
WEIGHT_UNIT_FACTORS: dict[str, float] = {
    "kg": 1.0,
    "kgs": 1.0,
    "kilogram": 1.0,
    "kilograms": 1.0,
    "lb": KG_PER_LB,
    "lbs": KG_PER_LB,
    "pound": KG_PER_LB,
    "pounds": KG_PER_LB,
    "lb_oz": KG_PER_LB,
    "pounds_ounces": KG_PER_LB,
    "pounds-and-ounces": KG_PER_LB,
}

UNIT_DISPLAY: dict[str, str] = {
    "kg": "kg",
    "kgs": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    "lb_oz": "lb",
    "pounds_ounces": "lb",
    "pounds-and-ounces": "lb",
}


def get_species_label(code: str) -> str | None:
    return SPECIES_LABELS.get(code.strip().lower())


def get_technique_label(code: str) -> str | None:
    return TECHNIQUE_LABELS.get(code.strip().lower())


def is_known_unit(unit: str | None) -> bool:
    return bool(unit) and unit.strip().lower() in WEIGHT_UNIT_FACTORS
