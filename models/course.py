# models/course.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional, Union

Number = Union[int, float]

class CourseCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[Number] = None
    status: str = "active"

class CourseUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[Number] = None
    status: Optional[str] = None

class CourseResponse(CourseUpdate):
    id: str
    createdAt: datetime
    updatedAt: datetime
