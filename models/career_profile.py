from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoringProfile:
    """
    What a career looks for in a quiz profile.
    Labels come from the category vocabularies in core.career_components.
    """

    related_interests: tuple[int, ...] = ()
    work_styles: tuple[str, ...] = ()
    cognitive_strengths: tuple[str, ...] = ()
    social_traits: tuple[str, ...] = ()
    motivations: tuple[str, ...] = ()
    mini_game_metrics: tuple[str, ...] = ()
    is_trade: bool = False

    # Category -> multiplier on the base category weight
    emphasis: dict[str, float] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class CareerRecord:
    """
    A single catalog entry.
    No logic. No scoring.
    """

    id: str
    title: str
    description: str
    skills: tuple[str, ...]
    salary: str
    outlook: str
    category: str
    scoring_profile: ScoringProfile
