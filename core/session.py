import logging
from typing import Any, Protocol

from core.profile import QuizProfile
from inference.answer_converter import aggregate, clean_mini_game_metrics, parse_interest_ids
from matching.ranking import build_ranking
from models.ranked_match import RankingResult
from questionnaires.questions import INTEREST_SECTOR, SECTOR_CATEGORIES

logger = logging.getLogger(__name__)

SECTORS = tuple(SECTOR_CATEGORIES) + (INTEREST_SECTOR,)

MINI_GAMES_KEY = "mini_game_metrics"
RESULTS_KEY = "results"


class SectorLockedError(RuntimeError):
    """A sector's answers are immutable once submitted; retake() starts over."""


class SessionStore(Protocol):
    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def clear(self, key: str) -> None: ...


class InMemoryStore:
    def __init__(self):
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def clear(self, key: str) -> None:
        self._data.pop(key, None)


class QuizSession:
    """
    One user's pass through the quiz.

    Answers are written through `store` under keys prefixed with the session id,
    so a shared store can hold many sessions. Ranked results are cached until
    the answers change.
    """

    def __init__(self, session_id: str, store: SessionStore | None = None):
        self.session_id = session_id
        self.store = store if store is not None else InMemoryStore()

    def _key(self, name: str) -> str:
        return f"{self.session_id}:{name}"

    def _lock(self, sector: str, value) -> None:
        if self.store.get(self._key(sector)) is not None:
            raise SectorLockedError(f"{sector} was already submitted for session {self.session_id}")
        self.store.set(self._key(sector), value)
        self.store.clear(self._key(RESULTS_KEY))

    def submit_sector(self, sector: str, answers: dict) -> None:
        if sector not in SECTOR_CATEGORIES:
            raise ValueError(f"Unknown sector: {sector}")
        if not isinstance(answers, dict):
            raise ValueError(f"{sector} answers must be a mapping of question id to answer")

        self._lock(sector, dict(answers))
        logger.debug("Session %s submitted %s (%d answers)", self.session_id, sector, len(answers))

    def submit_interests(self, interest_ids) -> list[int]:
        ids = parse_interest_ids(interest_ids)
        self._lock(INTEREST_SECTOR, ids)
        return ids

    def record_mini_game_metrics(self, metrics: dict) -> dict[str, float]:
        """Merge new metrics over earlier ones. Games can be replayed, so this never locks."""
        merged = dict(self.store.get(self._key(MINI_GAMES_KEY)) or {})
        merged.update(clean_mini_game_metrics(metrics))
        self.store.set(self._key(MINI_GAMES_KEY), merged)
        self.store.clear(self._key(RESULTS_KEY))
        return merged

    def responses(self) -> dict:
        submitted = {}
        for sector in SECTORS:
            value = self.store.get(self._key(sector))
            if value is not None:
                submitted[sector] = value
        return submitted

    def completed_sectors(self) -> list[str]:
        return [sector for sector in SECTORS if self.store.get(self._key(sector)) is not None]

    def profile(self) -> QuizProfile:
        return aggregate(
            self.responses(),
            mini_game_metrics=self.store.get(self._key(MINI_GAMES_KEY)) or {},
        )

    def results(self, catalog, top_n: int | None = None) -> RankingResult:
        catalog = list(catalog)
        # a different catalog or top_n needs a fresh ranking
        cache_key = (top_n, tuple(career.id for career in catalog))
        cached = self.store.get(self._key(RESULTS_KEY))
        if cached is not None and cached[0] == cache_key:
            return cached[1]

        result = build_ranking(self.profile(), catalog, top_n)
        self.store.set(self._key(RESULTS_KEY), (cache_key, result))
        return result

    def retake(self) -> None:
        for name in SECTORS + (MINI_GAMES_KEY, RESULTS_KEY):
            self.store.clear(self._key(name))
        logger.info("Session %s cleared for retake", self.session_id)
