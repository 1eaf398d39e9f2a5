from dataclasses import dataclass, field


@dataclass(frozen=True)
class OverlapOption:
    text: str
    # career title -> points
    deltas: dict[str, int] = field(default_factory=dict, hash=False)

    def to_dict(self):
        return {"text": self.text, "deltas": dict(self.deltas)}


@dataclass(frozen=True)
class OverlapQuestion:
    id: str
    text: str
    options: tuple[OverlapOption, ...]

    def to_dict(self):
        return {"id": self.id, "text": self.text, "options": [o.to_dict() for o in self.options]}


@dataclass(frozen=True)
class OverlapCluster:
    """
    A group of careers that tend to score alike, plus the questions that
    tell them apart.
    """

    category: str
    member_titles: tuple[str, ...]
    questions: tuple[OverlapQuestion, ...]
