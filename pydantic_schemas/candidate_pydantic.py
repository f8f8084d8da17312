from pydantic import BaseModel
from typing import Optional, List, Dict, Any


class EducationSchema(BaseModel):
    id: Optional[int] = None
    institution: Optional[str] = None
    title: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    candidateId: Optional[int] = None


class WorkExperienceSchema(BaseModel):
    id: Optional[int] = None
    company: Optional[str] = None
    position: Optional[str] = None
    description: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    candidateId: Optional[int] = None


class ResumeSchema(BaseModel):
    id: Optional[int] = None
    filePath: Optional[str] = None
    fileType: Optional[str] = None
    uploadDate: Optional[str] = None
    candidateId: Optional[int] = None


class CandidateSchema(BaseModel):
    id: Optional[int] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    educations: List[EducationSchema] = []
    workExperiences: List[WorkExperienceSchema] = []
    resumes: List[ResumeSchema] = []


class CreateCandidateRequest(BaseModel):
    """A new candidate; the payload has passed every field check."""
    payload: Dict[str, Any]


class UpdateCandidateRequest(BaseModel):
    """An edit of an existing candidate; the payload is trusted as sent."""
    candidate_id: Any
    payload: Dict[str, Any]
