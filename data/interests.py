"""
Interest areas offered in sector 5 of the quiz.

Users pick up to MAX_INTEREST_SELECTIONS areas in order of preference; the
position of a pick decides its percentage.
"""

INTEREST_OPTIONS = {
    1: "Emergency Services / First Responder",
    2: "Military",
    3: "Skilled Trades",
    4: "Building / Construction",
    5: "Vehicles / Aviation",
    6: "Real Estate / Brokerage",
    7: "Sports / Fitness",
    8: "Arts / Performance",
    9: "Animals / Nature",
    10: "Health / Wellness",
    11: "Gaming / Interactive Media",
    12: "Teaching / Coaching",
    13: "Software Development",
    14: "Hardware Technology",
    15: "Content Creation",
    16: "Finance / Data",
    17: "Writing / Communication",
    18: "Architectural Design / City Planning",
    19: "Engineering",
    20: "Renewable Energy / Science",
    21: "Information / Cyber Security",
    22: "Attorney / Law",
}

MAX_INTEREST_SELECTIONS = 5

# First choice highest
INTEREST_RANK_PERCENTAGES = (100, 90, 80, 70, 60)

MAX_INTEREST_TOTAL = sum(INTEREST_RANK_PERCENTAGES)

TRADE_INTEREST_IDS = frozenset({3, 4, 5})
