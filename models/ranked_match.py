from dataclasses import dataclass, field, replace

from models.career_profile import CareerRecord


@dataclass(frozen=True)
class RankedMatch:
    career_id: str
    title: str
    match_percentage: float
    description: str = ""
    skills: tuple[str, ...] = ()
    salary: str = ""
    outlook: str = ""
    category: str = ""

    @classmethod
    def from_career(cls, career: CareerRecord, match_percentage: float) -> "RankedMatch":
        return cls(
            career_id=career.id,
            title=career.title,
            match_percentage=match_percentage,
            description=career.description,
            skills=career.skills,
            salary=career.salary,
            outlook=career.outlook,
            category=career.category,
        )

    def with_percentage(self, match_percentage: float) -> "RankedMatch":
        return replace(self, match_percentage=match_percentage)

    def to_dict(self):
        return {
            "id": self.career_id,
            "title": self.title,
            "description": self.description,
            "skills": list(self.skills),
            "salary": self.salary,
            "outlook": self.outlook,
            "category": self.category,
            "match": self.match_percentage,
        }


@dataclass(frozen=True)
class RankingResult:
    """
    Ranked matches plus a flag telling the caller the profile carried no
    answers, so the ordering reflects the catalog rather than the user.
    """

    matches: list[RankedMatch] = field(default_factory=list)
    insufficient_data: bool = False
