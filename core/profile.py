from dataclasses import dataclass

from core.career_components import WorkStyle, CognitiveStrength, SocialApproach, Motivation


@dataclass(frozen=True)
class InterestEntry:
    interest_id: int
    interest: str
    percentage: float

    def to_dict(self):
        return {"interest_id": self.interest_id, "interest": self.interest, "percentage": self.percentage}


class QuizProfile:
    """
    Everything the quiz learned about a user in one session: one tally per
    trait category, the ranked interests and any mini-game metrics.
    """

    def __init__(self, work_style=None, cognitive_strength=None, social_approach=None, motivation=None,
                 interests=None, mini_game_metrics=None):
        self.work_style = work_style or WorkStyle()
        self.cognitive_strength = cognitive_strength or CognitiveStrength()
        self.social_approach = social_approach or SocialApproach()
        self.motivation = motivation or Motivation()

        self.interests: list[InterestEntry] = sorted(
            interests or [], key=lambda entry: entry.percentage, reverse=True
        )
        self.mini_game_metrics: dict[str, float] = dict(mini_game_metrics or {})

    @property
    def tallies(self):
        return {
            "work_style": self.work_style,
            "cognitive_strength": self.cognitive_strength,
            "social_approach": self.social_approach,
            "motivation": self.motivation,
        }

    def interest_weights(self) -> dict[int, float]:
        return {entry.interest_id: entry.percentage for entry in self.interests}

    def is_empty(self) -> bool:
        return (
            all(tally.total == 0 for tally in self.tallies.values())
            and not self.interests
            and not self.mini_game_metrics
        )

    def to_dict(self):
        return {
            "work_style": dict(self.work_style.scores),
            "cognitive_strength": dict(self.cognitive_strength.scores),
            "social_approach": dict(self.social_approach.scores),
            "motivation": dict(self.motivation.scores),
            "team_value_types": dict(self.work_style.sub_labels),
            "interests": [entry.to_dict() for entry in self.interests],
            "mini_game_metrics": dict(self.mini_game_metrics),
        }
