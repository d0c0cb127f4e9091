DIVISIONS = [
    "Xposition",
    "Noos",
    "Blaide Research",
    "Blaide Labs",
    "Blaide Foundry",
]

GENERAL_DIVISION = "General"


def normalize_division(value):
    """Map an empty label to General; return None for unknown labels"""
    label = value.strip() if isinstance(value, str) else ""
    if not label or label.lower() == GENERAL_DIVISION.lower():
        return GENERAL_DIVISION
    for division in DIVISIONS:
        if division.lower() == label.lower():
            return division
    return None
