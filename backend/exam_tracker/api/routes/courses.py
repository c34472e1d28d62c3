"""Course Routes — public, read-only access to the course catalogue.

Invariants:
    - Never require authentication
    - GET /{code}: 422 on a malformed code (storage untouched), 404 when absent
"""

from fastapi import APIRouter, Depends

from exam_tracker.api.dependencies import get_exam_service
from exam_tracker.schemas.course import CourseResponse
from exam_tracker.services.exam_service import ExamService

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
async def list_courses(service: ExamService = Depends(get_exam_service)):
    return await service.list_courses()


@router.get("/{code}", response_model=CourseResponse)
async def get_course(code: str, service: ExamService = Depends(get_exam_service)):
    return await service.get_course(code)
