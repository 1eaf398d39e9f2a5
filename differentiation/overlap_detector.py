"""
Rule-based detection of career clusters crowding the top of a ranking.
No scoring here: it only reads titles and reports which clusters collide.
"""
import logging
import re
from typing import List

from data.overlap_clusters import OVERLAP_CLUSTERS
from models.overlap_cluster import OverlapQuestion

logger = logging.getLogger(__name__)

TOP_MATCHES_CHECKED = 5

MIN_MEMBERS_FOR_OVERLAP = 2


def _contains_phrase(text: str, phrase: str) -> bool:
    pattern = r"(?<!\w)" + re.escape(phrase.strip()) + r"(?!\w)"
    return re.search(pattern, text, flags=re.IGNORECASE) is not None


def titles_match(career_title: str, cluster_title: str) -> bool:
    """
    Whole-word, case-insensitive containment in either direction:
    "Nurse" matches "Registered Nurse", "IT Manager" does not match "Digital Content Creator".
    """
    if not career_title.strip() or not cluster_title.strip():
        return False
    return _contains_phrase(career_title, cluster_title) or _contains_phrase(cluster_title, career_title)


def _title_of(match) -> str:
    if isinstance(match, dict):
        return str(match.get("title", ""))
    return str(getattr(match, "title", ""))


def detect_overlaps(matches, clusters=OVERLAP_CLUSTERS) -> List[str]:
    """
    Categories of the clusters with at least two members among the top five
    matches, in cluster declaration order.
    """
    top_titles = [_title_of(match) for match in list(matches)[:TOP_MATCHES_CHECKED]]

    flagged: List[str] = []
    for cluster in clusters:
        members = [
            member for member in cluster.member_titles
            if any(titles_match(title, member) for title in top_titles)
        ]
        if len(members) >= MIN_MEMBERS_FOR_OVERLAP and cluster.category not in flagged:
            logger.debug("Overlap in %s: %s", cluster.category, members)
            flagged.append(cluster.category)

    return flagged


def get_overlap_questions(categories, clusters=OVERLAP_CLUSTERS) -> List[OverlapQuestion]:
    wanted = set(categories)
    questions: List[OverlapQuestion] = []
    seen = set()

    for cluster in clusters:
        if cluster.category not in wanted:
            continue
        for question in cluster.questions:
            if question.id not in seen:
                seen.add(question.id)
                questions.append(question)

    return questions


def find_question(question_id: str, clusters=OVERLAP_CLUSTERS) -> OverlapQuestion | None:
    for cluster in clusters:
        for question in cluster.questions:
            if question.id == question_id:
                return question
    return None
