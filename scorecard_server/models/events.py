"""Inbound WebSocket event payloads"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from scorecard_server.models.interview import AutomationTool, InterviewDocument, Interviewer, Specialization

class _Event(BaseModel):
    # The "type" key and any unknown keys travel alongside the payload
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

class JoinEvent(_Event):
    """
    Join a session group.
    Names are only used when the session does not exist yet.
    """
    id: str = Field(min_length=1)
    candidate_name: str = Field(default="", alias="candidateName")
    interviewer1: str = ""
    interviewer2: str = ""

    @property
    def session_id(self) -> str:
        return self.id

class _SessionEvent(_Event):
    interview_id: str = Field(min_length=1, alias="interviewId")

    @property
    def session_id(self) -> str:
        return self.interview_id

class UpdateInterviewEvent(_SessionEvent):
    interview_data: InterviewDocument = Field(alias="interviewData")

class UpdateSpecializationEvent(_SessionEvent):
    specialization: Optional[Specialization]

class UpdateAutomationToolsEvent(_SessionEvent):
    automation_tools: List[AutomationTool] = Field(alias="automationTools")

    @field_validator("automation_tools")
    @classmethod
    def _dedupe(cls, tools: List[AutomationTool]) -> List[AutomationTool]:
        # Set semantics, first occurrence wins
        return list(dict.fromkeys(tools))

class UpdateSkillScoreEvent(_SessionEvent):
    skill_id: str = Field(alias="skillId")
    interviewer: Interviewer
    score: Optional[int] = Field(ge=0, le=4)

class UpdateCommentEvent(_SessionEvent):
    category_id: str = Field(alias="categoryId")
    interviewer: Interviewer
    comment: str
