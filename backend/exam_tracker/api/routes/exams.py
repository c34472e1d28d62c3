"""Exam Routes — list, create, update and delete the caller's exams.

Invariants:
    - Every route passes through require_principal (401 before anything else)
    - POST returns 201 with an empty body; DELETE returns 204 with no body
    - Storage failures surface as 503 via the DatabaseError handler
"""

from fastapi import APIRouter, Depends, Response, status

from exam_tracker.api.dependencies import get_exam_service, require_principal
from exam_tracker.core.domain_types import Principal
from exam_tracker.schemas.exam import ExamInput, ExamResponse, ExamUpdateResponse
from exam_tracker.services.exam_service import ExamService

router = APIRouter(prefix="/api/exams", tags=["exams"])


@router.get("", response_model=list[ExamResponse])
async def list_exams(
    principal: Principal | None = Depends(require_principal),
    service: ExamService = Depends(get_exam_service),
):
    return await service.list_exams(principal)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_exam(
    body: ExamInput,
    principal: Principal | None = Depends(require_principal),
    service: ExamService = Depends(get_exam_service),
):
    await service.create_exam(body.to_draft(), principal)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("", response_model=ExamUpdateResponse)
async def update_exam(
    body: ExamInput,
    principal: Principal | None = Depends(require_principal),
    service: ExamService = Depends(get_exam_service),
):
    exam_id = await service.update_exam(body.to_draft(), principal)
    return ExamUpdateResponse(id=exam_id, message=f"Exam {body.code} updated.")


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exam(
    code: str,
    principal: Principal | None = Depends(require_principal),
    service: ExamService = Depends(get_exam_service),
):
    await service.delete_exam(code, principal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
