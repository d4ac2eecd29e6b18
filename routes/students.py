# routes/students.py
from fastapi import APIRouter, HTTPException, Depends, Request, Response, status
from pydantic import ValidationError
from typing import List
import logging

from models.student import Student, StudentCreate, EnrollmentResponse
from store import StudentStore, StudentNotFound

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/student/v1/students", tags=["students"])


def get_store(request: Request) -> StudentStore:
    return request.app.state.store


async def decode_student(request: Request) -> StudentCreate:
    # The body is JSON whatever the Content-Type header says.
    body = await request.body()
    try:
        return StudentCreate.model_validate_json(body)
    except ValidationError as e:
        logger.error(f"Failed to decode request body: {e.errors()}")
        raise HTTPException(status_code=400, detail="Invalid request payload")


@router.post("", response_model=EnrollmentResponse)
async def create_student(
    student: StudentCreate = Depends(decode_student),
    store: StudentStore = Depends(get_store),
):
    enrollment_number = store.insert(student)
    logger.info(f"Created student {enrollment_number}: {student.model_dump(by_alias=True)}")
    return {"enrollment_number": enrollment_number}


@router.get("", response_model=List[Student])
async def get_students(store: StudentStore = Depends(get_store)):
    students = store.list_active()
    logger.info(f"Retrieved all students ({len(students)} active)")
    return students


@router.get("/{id}", response_model=Student)
async def get_student(id: str, store: StudentStore = Depends(get_store)):
    try:
        student = store.get(id)
    except StudentNotFound:
        logger.warning(f"Student not found: {id}")
        raise HTTPException(status_code=404, detail="Student not found")
    logger.info(f"Retrieved student: {student.model_dump(by_alias=True)}")
    return student


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(id: str, store: StudentStore = Depends(get_store)):
    try:
        store.soft_delete(id)
    except StudentNotFound:
        logger.warning(f"Student not found for delete: {id}")
        raise HTTPException(status_code=404, detail="Student not found")
    logger.info(f"Deleted student {id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
