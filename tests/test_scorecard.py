from scorecard_server.models.interview import Specialization
from scorecard_server.services.interview_service import InterviewService
from scorecard_server.services.scorecard import calculate_average, category_averages


def test_average_skips_unscored():
    assert calculate_average([3, None, 1]) == 2.0


def test_average_of_nothing_is_not_applicable():
    assert calculate_average([None, None]) is None
    assert calculate_average([]) is None


def test_average_rounds_to_two_decimals():
    assert calculate_average([1, 2, 2]) == 1.67


def test_category_averages_per_interviewer():
    document = InterviewService.create_interview("s1", "Ana", "Bo", "Cy")
    document = InterviewService.change_specialization(document, Specialization.MANUAL)
    document = InterviewService.set_skill_score(document, "debugging-skills", "interviewer1", 3)
    document = InterviewService.set_skill_score(document, "analytical-thinking", "interviewer1", 2)
    document = InterviewService.set_skill_score(document, "analytical-thinking", "interviewer2", 4)

    by_id = {item["categoryId"]: item for item in category_averages(document)}

    assert list(by_id) == [c.category_id for c in document.comments]
    assert by_id["problem-solving"]["name"] == "Problem Solving"
    assert by_id["problem-solving"]["interviewer1Average"] == 2.5
    assert by_id["problem-solving"]["interviewer2Average"] == 4.0
    assert by_id["manual-testing"]["interviewer1Average"] is None


def test_category_averages_ignore_skills_outside_the_catalog():
    document = InterviewService.create_interview("s1", "Ana", "Bo", "Cy")
    document = InterviewService.change_specialization(document, Specialization.MANUAL)
    document = InterviewService.set_skill_score(document, "debugging-skills", "interviewer1", 1)
    extra = document.skills[0].model_copy(update={"skill_id": "custom-skill", "interviewer1_score": 4})
    document = document.model_copy(update={"skills": document.skills + [extra]})

    by_id = {item["categoryId"]: item for item in category_averages(document)}

    assert by_id["problem-solving"]["interviewer1Average"] == 1.0
