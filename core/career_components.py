import logging

from questionnaires.questions import option_labels

logger = logging.getLogger(__name__)


class TraitTally:
    """
    Running counts for one quiz category.

    LABELS is the closed vocabulary of the category. UMBRELLAS maps a label
    prefix to the umbrella counter that every `<prefix>_<suffix>` answer feeds;
    the full label is kept in `sub_labels` so the specific choice is not lost.
    """

    CATEGORY = ""
    LABELS: tuple[str, ...] = ()
    UMBRELLAS: dict[str, str] = {}

    def __init__(self, scores=None):
        self.scores = {label: 0 for label in self.LABELS}
        self.sub_labels: dict[str, int] = {}

        if scores:
            for label, value in scores.items():
                if label not in self.scores:
                    raise ValueError(f"Invalid {self.CATEGORY} label: {label}")
                self.scores[label] = int(value)

    def _umbrella_for(self, label: str) -> str | None:
        if label in self.UMBRELLAS:
            return self.UMBRELLAS[label]
        prefix, sep, suffix = label.partition("_")
        if sep and suffix and prefix in self.UMBRELLAS:
            return self.UMBRELLAS[prefix]
        return None

    def record(self, label) -> bool:
        """Count one answer. Returns False when the label is not part of the vocabulary."""
        if not isinstance(label, str):
            return False

        umbrella = self._umbrella_for(label)
        if umbrella is not None:
            self.scores[umbrella] += 1
            if label != umbrella:
                self.sub_labels[label] = self.sub_labels.get(label, 0) + 1
            return True

        if label in self.scores:
            self.scores[label] += 1
            return True

        logger.debug("Ignoring unknown %s label %r", self.CATEGORY, label)
        return False

    @property
    def total(self) -> int:
        return sum(self.scores.values())


# How the user likes to work (sector 1)
class WorkStyle(TraitTally):
    CATEGORY = "work_style"
    LABELS = (
        "structured",
        "flexible",
        "team",
        "independent",
        "hands-on",
        "analytical",
    )
    UMBRELLAS = {"team": "team"}


# How the user solves problems and learns (sector 2)
class CognitiveStrength(TraitTally):
    CATEGORY = "cognitive_strength"
    LABELS = (
        "learned",
        "skills",
        "experience",
        "knowledge",
    )


# How the user relates to other people (sector 3)
class SocialApproach(TraitTally):
    CATEGORY = "social_approach"
    LABELS = (
        "extrovert",
        "introvert",
        "leader",
        "supporter",
        "risk-taker",
        "cautious",
    )


# What drives the user (sector 4)
class Motivation(TraitTally):
    CATEGORY = "motivation"
    LABELS = tuple(sorted(option_labels("sector4")))

