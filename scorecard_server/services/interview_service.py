from typing import List, Optional, Tuple
from scorecard_server.core.catalog import applicable_categories, applicable_skills
from scorecard_server.models.interview import (
    AutomationTool,
    CategoryComment,
    InterviewDocument,
    Interviewer,
    SkillScore,
    Specialization,
)
import logging

logger = logging.getLogger(__name__)

def derive_slots(
    specialization: Optional[Specialization],
    automation_tools: List[AutomationTool]
) -> Tuple[List[SkillScore], List[CategoryComment]]:
    """
    Build fresh score and comment slots for a specialization/tool selection.

    Manual picks everything applicable to "manual". Automation picks
    everything applicable to at least one selected tool, so an empty tool
    selection yields no slots. Slots always start blank.

    Args:
        specialization: "manual", "automation" or None
        automation_tools: Selected tools (ignored unless automation)

    Returns:
        (skill slots, comment slots) in catalog order
    """
    tools = [AutomationTool(tool).value for tool in automation_tools]
    track = Specialization(specialization).value if specialization is not None else None

    skills = [SkillScore(skill_id=skill.id) for skill in applicable_skills(track, tools)]
    comments = [
        CategoryComment(category_id=category.id)
        for category in applicable_categories(track, tools)
    ]
    return skills, comments

class InterviewService:
    """
    Document transformations behind each scorecard event.
    Every method returns a new document and never touches the store.
    """

    @staticmethod
    def create_interview(
        interview_id: str,
        candidate_name: str = "",
        interviewer1: str = "",
        interviewer2: str = ""
    ) -> InterviewDocument:
        """
        Create an empty scorecard: no specialization, no slots.

        Args:
            interview_id: Session id supplied by the client
            candidate_name: Candidate display name
            interviewer1: First interviewer display name
            interviewer2: Second interviewer display name

        Returns:
            New InterviewDocument
        """
        document = InterviewDocument(
            id=interview_id,
            candidate_name=candidate_name,
            interviewer1=interviewer1,
            interviewer2=interviewer2,
        )
        logger.info(f"Interview created: {interview_id} for candidate {candidate_name!r}")
        return document

    @staticmethod
    def change_specialization(
        document: InterviewDocument,
        specialization: Optional[Specialization]
    ) -> InterviewDocument:
        """
        Switch the interview track and rebuild all slots.

        Tool selections only survive when the new specialization is
        automation; prior scores and comments are always discarded.
        """
        if specialization is not None:
            specialization = Specialization(specialization)
        tools = list(document.automation_tools) if specialization == Specialization.AUTOMATION else []
        skills, comments = derive_slots(specialization, tools)

        return document.model_copy(update={
            "specialization": specialization,
            "automation_tools": tools,
            "skills": skills,
            "comments": comments,
        })

    @staticmethod
    def change_automation_tools(
        document: InterviewDocument,
        automation_tools: List[AutomationTool]
    ) -> Optional[InterviewDocument]:
        """
        Replace the tool selection and rebuild all slots.

        Returns:
            Updated document, or None when the interview is not on the
            automation track (tool changes are ignored then)
        """
        if document.specialization != Specialization.AUTOMATION:
            return None

        tools = list(dict.fromkeys(AutomationTool(tool) for tool in automation_tools))
        skills, comments = derive_slots(document.specialization, tools)

        return document.model_copy(update={
            "automation_tools": tools,
            "skills": skills,
            "comments": comments,
        })

    @staticmethod
    def set_skill_score(
        document: InterviewDocument,
        skill_id: str,
        interviewer: Interviewer,
        score: Optional[int]
    ) -> InterviewDocument:
        """
        Overwrite one interviewer's score on one skill slot.
        Other slots and the other interviewer's score are left alone.
        """
        field = f"{Interviewer(interviewer).value}_score"
        skills = [
            slot.model_copy(update={field: score}) if slot.skill_id == skill_id else slot
            for slot in document.skills
        ]
        if not any(slot.skill_id == skill_id for slot in document.skills):
            logger.debug(f"No slot for skill {skill_id} in interview {document.id}")

        return document.model_copy(update={"skills": skills})

    @staticmethod
    def set_comment(
        document: InterviewDocument,
        category_id: str,
        interviewer: Interviewer,
        comment: str
    ) -> InterviewDocument:
        """Overwrite one interviewer's comment on one category slot."""
        field = f"{Interviewer(interviewer).value}_comment"
        comments = [
            slot.model_copy(update={field: comment}) if slot.category_id == category_id else slot
            for slot in document.comments
        ]
        if not any(slot.category_id == category_id for slot in document.comments):
            logger.debug(f"No slot for category {category_id} in interview {document.id}")

        return document.model_copy(update={"comments": comments})
