import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from db.candidate_store import CandidateStore, CANDIDATE, EDUCATION, WORK_EXPERIENCE, RESUME
from pydantic_schemas.candidate_pydantic import CandidateSchema, UpdateCandidateRequest
from services.candidate_assembler import assemble_from_request, candidate_row
from services.candidate_validator import parse_candidate_request
from services.persistence_mapper import SaveMode, persist, resolve_read_outcome

logger = logging.getLogger(__name__)


async def _save_children(store: CandidateStore, kind: str, items: List[BaseModel], candidate_id: int, **extra: Any) -> List[Dict[str, Any]]:
    saved = []
    # one at a time, in payload order
    for item in items:
        data = item.model_dump(exclude={"id", "candidateId"}, exclude_none=True)
        data.update(extra)
        data["candidateId"] = candidate_id
        saved.append(await persist(store, kind, data, item.id))
    return saved


async def save_candidate(payload: Any, store: CandidateStore) -> CandidateSchema:
    """
    Validates, assembles and persists a candidate payload together with its
    educations, work experiences and CV.

    Payloads with an id update the existing candidate and skip field validation.
    Writes are sequential and not transactional: if a nested item fails, the rows
    written before it stay in place and that item's error is raised.

    :param payload: the raw request body
    :param store: storage collaborator
    :return: the persisted candidate, including its generated id
    """
    request = parse_candidate_request(payload)
    candidate = assemble_from_request(request)

    if isinstance(request, UpdateCandidateRequest):
        saved_candidate = await persist(store, CANDIDATE, candidate_row(candidate), request.candidate_id, SaveMode.UPDATE)
    else:
        saved_candidate = await persist(store, CANDIDATE, candidate_row(candidate), mode=SaveMode.CREATE)
    candidate_id = saved_candidate["id"]

    educations = await _save_children(store, EDUCATION, candidate.educations, candidate_id)
    work_experiences = await _save_children(store, WORK_EXPERIENCE, candidate.workExperiences, candidate_id)
    resumes = await _save_children(
        store, RESUME, candidate.resumes, candidate_id,
        uploadDate=datetime.today().isoformat(),
    )

    logger.info(
        "Saved candidate %s (%d educations, %d work experiences, %d resumes)",
        candidate_id, len(educations), len(work_experiences), len(resumes),
    )

    return CandidateSchema.model_validate({
        **saved_candidate,
        "educations": educations,
        "workExperiences": work_experiences,
        "resumes": resumes,
    })


async def get_candidate(candidate_id: int, store: CandidateStore) -> Optional[CandidateSchema]:
    record = resolve_read_outcome(await store.find_candidate(candidate_id))

    if record is None:
        return None

    return CandidateSchema.model_validate(record)
