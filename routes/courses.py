# routes/courses.py
from fastapi import APIRouter, Depends
from pymongo import ASCENDING, ReturnDocument
from datetime import datetime, timezone
from typing import List, Optional
import logging
from models.course import CourseCreate, CourseUpdate, CourseResponse
from database import Database, get_database, parse_object_id, serialize
from errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/courses", tags=["courses"])

@router.get("", response_model=List[CourseResponse])
async def get_courses(database: Database = Depends(get_database)):
    courses = await database.courses.find({}, sort=[("name", ASCENDING)]).to_list(None)
    return [serialize(c) for c in courses]

@router.post("", response_model=CourseResponse, status_code=201)
async def create_course(course: CourseCreate, database: Database = Depends(get_database)):
    now = datetime.now(timezone.utc)
    course_dict = course.model_dump(exclude_none=True)
    course_dict["createdAt"] = now
    course_dict["updatedAt"] = now
    result = await database.courses.insert_one(course_dict)
    course_dict["_id"] = result.inserted_id
    logger.info(f"Created course {result.inserted_id} ({course.name})")
    return serialize(course_dict)

@router.get("/{id}", response_model=CourseResponse)
async def get_course(id: str, database: Database = Depends(get_database)):
    course_id = parse_object_id(id)
    course = await database.courses.find_one({"_id": course_id}) if course_id else None
    if not course:
        raise NotFoundError("Course")
    return serialize(course)

@router.put("/{id}", response_model=CourseResponse)
async def update_course(id: str, course: Optional[CourseUpdate] = None, database: Database = Depends(get_database)):
    course_id = parse_object_id(id)
    if not course_id:
        raise NotFoundError("Course")
    changes = course.model_dump(exclude_unset=True) if course is not None else {}
    changes["updatedAt"] = datetime.now(timezone.utc)
    updated = await database.courses.find_one_and_update(
        {"_id": course_id},
        {"$set": changes},
        return_document=ReturnDocument.AFTER,
    )
    if not updated:
        raise NotFoundError("Course")
    logger.info(f"Updated course {id}: {sorted(changes)}")
    return serialize(updated)

@router.delete("/{id}")
async def delete_course(id: str, database: Database = Depends(get_database)):
    course_id = parse_object_id(id)
    if course_id:
        result = await database.courses.delete_one({"_id": course_id})
        logger.info(f"Deleted course {id} (matched={result.deleted_count})")
    return {"message": "Course deleted"}
