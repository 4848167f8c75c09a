"""Score aggregation for a scorecard document"""

from typing import Dict, List, Optional

from scorecard_server.core.catalog import get_category, skills_for_category
from scorecard_server.models.interview import InterviewDocument

def calculate_average(scores: List[Optional[int]]) -> Optional[float]:
    """
    Mean of the non-null scores, rounded to 2 decimals.
    Returns None when nothing was scored (not applicable).
    """
    valid = [score for score in scores if score is not None]
    if not valid:
        return None
    return round(sum(valid) / len(valid), 2)

def category_averages(document: InterviewDocument) -> List[Dict]:
    """
    Per-category averages for each interviewer, in comment-slot order.

    Example item:
        {"categoryId": "problem-solving", "name": "Problem Solving",
         "interviewer1Average": 2.5, "interviewer2Average": None}
    """
    skill_slots = {s.skill_id: s for s in document.skills}

    summary = []
    for slot in document.comments:
        category = get_category(slot.category_id)
        scored = [
            skill_slots[skill.id]
            for skill in skills_for_category(slot.category_id)
            if skill.id in skill_slots
        ]
        summary.append({
            "categoryId": slot.category_id,
            "name": category.name if category else slot.category_id,
            "interviewer1Average": calculate_average([s.interviewer1_score for s in scored]),
            "interviewer2Average": calculate_average([s.interviewer2_score for s in scored]),
        })
    return summary
