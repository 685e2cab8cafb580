# routes/dashboard.py
from fastapi import APIRouter, Depends
import asyncio
from models.dashboard import DashboardStats
from database import Database, get_database

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(database: Database = Depends(get_database)):
    # collect every count before failing so no task is left unobserved
    results = await asyncio.gather(
        database.students.count_documents({}),
        database.students.count_documents({"status": "active"}),
        database.courses.count_documents({}),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    total_students, active_students, total_courses = results
    return {
        "totalStudents": total_students,
        "activeStudents": active_students,
        "totalCourses": total_courses,
    }
