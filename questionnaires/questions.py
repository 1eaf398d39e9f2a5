"""
Quiz question bank.

Declares, per sector, which question ids exist and which trait labels their
options produce. Question wording lives in the frontend; only the scoring
vocabulary is needed here.
"""

SECTOR_CATEGORIES = {
    "sector1": "work_style",
    "sector2": "cognitive_strength",
    "sector3": "social_approach",
    "sector4": "motivation",
}

INTEREST_SECTOR = "sector5"


class Question:
    def __init__(self, question: dict):
        self.q_id = question["id"]
        self.sector = question["sector"]
        self.options = tuple(question["options"])


# Sector 1: work style. Team-oriented options carry a `team_` label so the
# specific flavour survives alongside the umbrella count.
_WORK_STYLE_OPTIONS = {
    "s1_q1": ["hands-on", "analytical", "flexible"],
    "s1_q2": ["structured", "flexible", "team_collaborative"],
    "s1_q3": ["structured", "flexible", "team_network"],
    "s1_q4": ["structured", "flexible", "team_rally"],
    "s1_q5": ["independent", "flexible", "team_competition"],
    "s1_q6": ["structured", "flexible", "team_brainstorm"],
    "s1_q7": ["hands-on", "analytical", "team_connection"],
    "s1_q8": ["analytical", "flexible", "team_wisdom"],
    "s1_q9": ["hands-on", "analytical", "team_mentor"],
    "s1_q10": ["structured", "flexible", "team_synergy"],
    "s1_q11": ["independent", "flexible", "team_collaboration"],
    "s1_q12": ["structured", "flexible", "team_adaptable"],
    "s1_q13": ["hands-on", "analytical", "team_inspire"],
    "s1_q14": ["structured", "flexible", "team_anthem"],
    "s1_q15": ["independent", "flexible", "team_together"],
}

# Sector 2: cognitive strengths. Every question offers the same four labels.
_COGNITIVE_OPTIONS = {
    f"s2_q{i}": ["learned", "skills", "experience", "knowledge"]
    for i in range(1, 11)
}

# Sector 4: motivation.
_MOTIVATION_OPTIONS = {
    "s4_q1": ["personal_goals", "helping_others", "recognition", "challenges"],
    "s4_q2": ["learning", "solving", "helping", "rewards"],
    "s4_q3": ["accomplishment", "helping", "growth", "rewards"],
    "s4_q4": ["collaborative", "independent", "mixed", "dynamic"],
    "s4_q5": ["stability", "innovation", "impact", "learning"],
    "s4_q6": ["problem_solving", "helping", "creativity", "financial"],
    "s4_q7": ["growth", "helping", "financial", "impact"],
    "s4_q8": ["exploring", "challenging_projects", "volunteering", "relaxing"],
    "s4_q9": ["plan", "feedback", "difference", "gain"],
    "s4_q10": ["impact", "learning", "security", "salary"],
}

# Sector 3: yes/no statements. Each question feeds one or more trait pairs as
# (label when answered yes, label when answered no).
EXTROVERSION = ("extrovert", "introvert")
INTROVERSION = ("introvert", "extrovert")
LEADERSHIP = ("leader", "supporter")
FOLLOWERSHIP = ("supporter", "leader")
RISK_TAKING = ("risk-taker", "cautious")
RISK_AVERSION = ("cautious", "risk-taker")

BOOLEAN_QUESTION_MAP = {
    "s3_q1": [EXTROVERSION],
    "s3_q2": [INTROVERSION],
    "s3_q3": [INTROVERSION],
    "s3_q4": [EXTROVERSION],
    "s3_q5": [INTROVERSION],
    "s3_q6": [EXTROVERSION, LEADERSHIP],
    "s3_q7": [FOLLOWERSHIP],
    "s3_q8": [LEADERSHIP],
    "s3_q9": [FOLLOWERSHIP],
    "s3_q10": [EXTROVERSION, LEADERSHIP],
    "s3_q11": [EXTROVERSION, RISK_TAKING],
    "s3_q12": [RISK_AVERSION],
    "s3_q13": [EXTROVERSION, RISK_TAKING],
    "s3_q14": [RISK_AVERSION],
    "s3_q15": [EXTROVERSION, RISK_TAKING],
}

QUESTIONS = (
    [Question({"id": q, "sector": "sector1", "options": o}) for q, o in _WORK_STYLE_OPTIONS.items()]
    + [Question({"id": q, "sector": "sector2", "options": o}) for q, o in _COGNITIVE_OPTIONS.items()]
    + [Question({"id": q, "sector": "sector3", "options": [True, False]}) for q in BOOLEAN_QUESTION_MAP]
    + [Question({"id": q, "sector": "sector4", "options": o}) for q, o in _MOTIVATION_OPTIONS.items()]
)

QUESTIONS_BY_ID = {question.q_id: question for question in QUESTIONS}


def questions_for(sector: str) -> list[Question]:
    return [q for q in QUESTIONS if q.sector == sector]


def option_labels(sector: str) -> set[str]:
    """Every label an option in the sector can produce."""
    labels: set[str] = set()
    for question in questions_for(sector):
        labels.update(opt for opt in question.options if isinstance(opt, str))
    return labels


def max_tally(category: str) -> int:
    """
    Largest possible sum of tallies for a category when every question is
    answered. String sectors add one count per question; boolean questions add
    one count per trait pair they feed.
    """
    if category == SECTOR_CATEGORIES["sector3"]:
        return sum(len(pairs) for pairs in BOOLEAN_QUESTION_MAP.values())

    for sector, sector_category in SECTOR_CATEGORIES.items():
        if sector_category == category:
            return len(questions_for(sector))
    raise ValueError(f"Unknown category: {category}")
