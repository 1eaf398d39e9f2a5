"""
Hand-authored quiz answers for a few student archetypes.
Used by tests and scripts/rank_all_careers.py; not part of the catalog.
"""

TRADES = {
    "sector1": {
        "s1_q1": "hands-on", "s1_q2": "structured", "s1_q3": "structured", "s1_q4": "structured",
        "s1_q5": "independent", "s1_q6": "structured", "s1_q7": "hands-on", "s1_q8": "analytical",
        "s1_q9": "hands-on", "s1_q10": "structured", "s1_q11": "independent", "s1_q12": "structured",
        "s1_q13": "hands-on", "s1_q14": "structured", "s1_q15": "independent",
    },
    "sector2": {f"s2_q{i}": "skills" for i in range(1, 11)},
    # Quiet and careful
    "sector3": {
        "s3_q1": False, "s3_q2": True, "s3_q3": True, "s3_q4": False, "s3_q5": True,
        "s3_q6": False, "s3_q7": True, "s3_q8": False, "s3_q9": True, "s3_q10": False,
        "s3_q11": False, "s3_q12": True, "s3_q13": False, "s3_q14": True, "s3_q15": False,
    },
    "sector4": {
        "s4_q1": "challenges", "s4_q2": "solving", "s4_q3": "rewards", "s4_q4": "independent",
        "s4_q5": "stability", "s4_q6": "problem_solving", "s4_q7": "financial",
        "s4_q8": "challenging_projects", "s4_q9": "plan", "s4_q10": "security",
    },
    "sector5": "3,4,19,14,20",
}

TECH = {
    "sector1": {
        "s1_q1": "analytical", "s1_q2": "flexible", "s1_q3": "flexible", "s1_q4": "flexible",
        "s1_q5": "independent", "s1_q6": "flexible", "s1_q7": "analytical", "s1_q8": "analytical",
        "s1_q9": "analytical", "s1_q10": "flexible", "s1_q11": "independent", "s1_q12": "flexible",
        "s1_q13": "analytical", "s1_q14": "structured", "s1_q15": "independent",
    },
    "sector2": {f"s2_q{i}": ("knowledge" if i % 3 else "skills") for i in range(1, 11)},
    "sector3": {
        "s3_q1": False, "s3_q2": True, "s3_q3": True, "s3_q4": False, "s3_q5": True,
        "s3_q6": False, "s3_q7": True, "s3_q8": False, "s3_q9": True, "s3_q10": False,
        "s3_q11": False, "s3_q12": False, "s3_q13": False, "s3_q14": True, "s3_q15": True,
    },
    "sector4": {
        "s4_q1": "challenges", "s4_q2": "solving", "s4_q3": "growth", "s4_q4": "independent",
        "s4_q5": "learning", "s4_q6": "problem_solving", "s4_q7": "growth",
        "s4_q8": "exploring", "s4_q9": "feedback", "s4_q10": "learning",
    },
    "sector5": "13,11,16,21,14",
    "miniGameMetrics": {"patternRecognition": 82, "memoryCapacity": 74, "processingSpeed": 70},
}

BUSINESS = {
    "sector1": {
        "s1_q1": "flexible", "s1_q2": "team_collaborative", "s1_q3": "team_network", "s1_q4": "team_rally",
        "s1_q5": "team_competition", "s1_q6": "flexible", "s1_q7": "team_connection", "s1_q8": "flexible",
        "s1_q9": "team_mentor", "s1_q10": "structured", "s1_q11": "team_collaboration",
        "s1_q12": "flexible", "s1_q13": "team_inspire", "s1_q14": "structured", "s1_q15": "team_together",
    },
    "sector2": {f"s2_q{i}": ("experience" if i % 2 else "knowledge") for i in range(1, 11)},
    # Outgoing, leading, willing to take risks
    "sector3": {
        "s3_q1": True, "s3_q2": False, "s3_q3": False, "s3_q4": True, "s3_q5": False,
        "s3_q6": True, "s3_q7": False, "s3_q8": True, "s3_q9": False, "s3_q10": True,
        "s3_q11": True, "s3_q12": False, "s3_q13": True, "s3_q14": False, "s3_q15": True,
    },
    "sector4": {
        "s4_q1": "recognition", "s4_q2": "rewards", "s4_q3": "growth", "s4_q4": "dynamic",
        "s4_q5": "innovation", "s4_q6": "financial", "s4_q7": "financial",
        "s4_q8": "challenging_projects", "s4_q9": "gain", "s4_q10": "salary",
    },
    "sector5": "16,6,15,17",
}

# Spread evenly so no category label stands out
FLAT = {
    "sector1": {
        "s1_q1": "hands-on", "s1_q2": "structured", "s1_q3": "flexible", "s1_q4": "team_rally",
        "s1_q5": "independent", "s1_q6": "structured", "s1_q7": "analytical", "s1_q8": "flexible",
        "s1_q9": "hands-on", "s1_q10": "team_synergy", "s1_q11": "independent", "s1_q12": "structured",
        "s1_q13": "analytical", "s1_q14": "flexible", "s1_q15": "team_together",
    },
    "sector2": {f"s2_q{i}": ("learned", "skills", "experience", "knowledge")[i % 4] for i in range(1, 11)},
    "sector3": {f"s3_q{i}": bool(i % 2) for i in range(1, 16)},
    "sector4": {
        "s4_q1": "personal_goals", "s4_q2": "learning", "s4_q3": "accomplishment", "s4_q4": "mixed",
        "s4_q5": "stability", "s4_q6": "creativity", "s4_q7": "impact", "s4_q8": "exploring",
        "s4_q9": "plan", "s4_q10": "security",
    },
    "sector5": "10,12,8",
}

EMPTY = {}

ARCHETYPES = {
    "trades": TRADES,
    "tech": TECH,
    "business": BUSINESS,
    "flat": FLAT,
    "empty": EMPTY,
}
