# store.py
import threading
import uuid
from typing import Dict, List

from models.student import Student, StudentCreate


class StudentNotFound(KeyError):
    """Raised when an enrollment number is unknown or soft-deleted."""

    def __init__(self, enrollment_number: str) -> None:
        super().__init__(enrollment_number)
        self.enrollment_number = enrollment_number


class StudentStore:
    """In-memory student records keyed by enrollment number.

    Every access goes through a single lock held only for the map operation.

    Deletion is soft: the record keeps its slot with ``deleted`` set and is
    hidden from ``get`` and ``list_active``. Deleted records are retained for
    the lifetime of the process; nothing ever reaps them.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._students: Dict[str, Student] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)

    def insert(self, payload: StudentCreate) -> str:
        enrollment_number = str(uuid.uuid4())
        student = Student(
            enrollment_number=enrollment_number,
            **payload.model_dump(by_alias=True),
        )
        with self._lock:
            self._students[enrollment_number] = student
        return enrollment_number

    def get(self, enrollment_number: str) -> Student:
        with self._lock:
            student = self._students.get(enrollment_number)
            if student is None or student.deleted:
                raise StudentNotFound(enrollment_number)
            return student.model_copy()

    def list_active(self) -> List[Student]:
        with self._lock:
            return [s.model_copy() for s in self._students.values() if not s.deleted]

    def soft_delete(self, enrollment_number: str) -> None:
        with self._lock:
            student = self._students.get(enrollment_number)
            if student is None:
                raise StudentNotFound(enrollment_number)
            student.deleted = True
