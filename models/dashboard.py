# models/dashboard.py
from pydantic import BaseModel

class DashboardStats(BaseModel):
    totalStudents: int
    activeStudents: int
    totalCourses: int
