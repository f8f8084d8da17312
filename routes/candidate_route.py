import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse
from starlette import status

from db.candidate_store import CandidateStore
from dependency.store_dependency import get_candidate_store
from pydantic_schemas.response_pydantic import ResponseSchema
from services.candidate_service import save_candidate, get_candidate
from utils.exceptions import CandidateValidationError, PersistenceError, StorageError

logger = logging.getLogger(__name__)

candidate_router = APIRouter(
    prefix="/candidates",
    tags=["Candidates"]
)

@candidate_router.post("")
async def add_candidate(payload: Any = Body(None), store: CandidateStore = Depends(get_candidate_store)):
    """
    Endpoint to create a candidate, or update it when the payload carries an id.
    """
    try:
        candidate = await save_candidate(payload=payload, store=store)

    except (CandidateValidationError, PersistenceError, StorageError) as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ResponseSchema(
                success=False,
                status_code=400,
                message="Error adding candidate",
                error=str(e)
            ).model_dump()
        )

    except Exception:
        logger.exception("Unexpected error while adding candidate")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ResponseSchema(
                success=False,
                status_code=500,
                message="An unexpected error occurred"
            ).model_dump()
        )

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=ResponseSchema(
            success=True,
            status_code=201,
            message="Candidate added successfully",
            data=candidate.model_dump()
        ).model_dump()
    )

@candidate_router.get("/{candidate_id}")
async def get_candidate_by_id(candidate_id: int, store: CandidateStore = Depends(get_candidate_store)):
    """
    Endpoint to get a candidate with its educations, work experiences and resumes.
    """
    try:
        candidate = await get_candidate(candidate_id=candidate_id, store=store)
    except (PersistenceError, StorageError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if candidate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Candidate not found")

    return ResponseSchema(
        success=True,
        status_code=200,
        message="Candidate retrieved successfully.",
        data=candidate.model_dump()
    )
