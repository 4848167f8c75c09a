from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
import enum

class Specialization(str, enum.Enum):
    """Top-level interview track"""
    MANUAL = "manual"
    AUTOMATION = "automation"

class AutomationTool(str, enum.Enum):
    """Automation frameworks a candidate can be assessed on"""
    SELENIUM = "selenium"
    CYPRESS = "cypress"
    PLAYWRIGHT = "playwright"

class Interviewer(str, enum.Enum):
    """Which of the two interviewers owns a score or comment"""
    INTERVIEWER_1 = "interviewer1"
    INTERVIEWER_2 = "interviewer2"

class SkillScore(BaseModel):
    """
    Per-skill slot holding both interviewers' scores.
    A score of None means "not applicable / not scored yet".
    """
    model_config = ConfigDict(populate_by_name=True)

    skill_id: str = Field(alias="skillId")
    interviewer1_score: Optional[int] = Field(default=None, ge=0, le=4, alias="interviewer1Score")
    interviewer2_score: Optional[int] = Field(default=None, ge=0, le=4, alias="interviewer2Score")

class CategoryComment(BaseModel):
    """Per-category slot holding both interviewers' free-text comments"""
    model_config = ConfigDict(populate_by_name=True)

    category_id: str = Field(alias="categoryId")
    interviewer1_comment: str = Field(default="", alias="interviewer1Comment")
    interviewer2_comment: str = Field(default="", alias="interviewer2Comment")

class InterviewDocument(BaseModel):
    """
    Full shared state of one scorecard session.

    Serialized with camelCase keys (by_alias=True), which is the shape the
    frontend sends and receives:
    {
        "id": "...",
        "candidateName": "...",
        "interviewer1": "...",
        "interviewer2": "...",
        "specialization": "manual" | "automation" | null,
        "automationTools": ["cypress", ...],
        "skills": [{"skillId", "interviewer1Score", "interviewer2Score"}, ...],
        "comments": [{"categoryId", "interviewer1Comment", "interviewer2Comment"}, ...]
    }
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    candidate_name: str = Field(default="", alias="candidateName")
    interviewer1: str = ""
    interviewer2: str = ""
    specialization: Optional[Specialization] = None
    automation_tools: List[AutomationTool] = Field(default_factory=list, alias="automationTools")
    skills: List[SkillScore] = Field(default_factory=list)
    comments: List[CategoryComment] = Field(default_factory=list)

    def to_wire(self) -> dict:
        """JSON-ready dict with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)

    def to_summary(self) -> dict:
        """Redacted projection for the admin dashboard (no scores or comments)"""
        return SessionSummary(
            id=self.id,
            candidate_name=self.candidate_name,
            interviewer1=self.interviewer1,
            interviewer2=self.interviewer2,
            specialization=self.specialization,
            automation_tools=list(self.automation_tools),
        ).model_dump(mode="json", by_alias=True)

class SessionSummary(BaseModel):
    """Admin listing entry"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    candidate_name: str = Field(alias="candidateName")
    interviewer1: str
    interviewer2: str
    specialization: Optional[Specialization] = None
    automation_tools: List[AutomationTool] = Field(default_factory=list, alias="automationTools")