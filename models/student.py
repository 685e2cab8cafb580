# models/student.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class StudentCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    course: Optional[str] = None  # free-form course name, not a reference
    enrollmentDate: Optional[datetime] = None
    status: str = "active"

class StudentUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    course: Optional[str] = None
    enrollmentDate: Optional[datetime] = None
    status: Optional[str] = None

class StudentResponse(StudentUpdate):
    id: str
    createdAt: datetime
    updatedAt: datetime
