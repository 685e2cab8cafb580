# routes/students.py
from fastapi import APIRouter, Depends
from pymongo import DESCENDING, ReturnDocument
from datetime import datetime, timezone
from typing import List, Optional
import logging
from models.student import StudentCreate, StudentUpdate, StudentResponse
from database import Database, get_database, parse_object_id, serialize
from errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/students", tags=["students"])

@router.get("", response_model=List[StudentResponse])
async def get_students(database: Database = Depends(get_database)):
    # newest first; _id breaks ties between same-millisecond creates
    students = await database.students.find(
        {}, sort=[("createdAt", DESCENDING), ("_id", DESCENDING)]
    ).to_list(None)
    return [serialize(s) for s in students]

@router.post("", response_model=StudentResponse, status_code=201)
async def create_student(student: StudentCreate, database: Database = Depends(get_database)):
    now = datetime.now(timezone.utc)
    student_dict = student.model_dump(exclude_none=True)
    student_dict["createdAt"] = now
    student_dict["updatedAt"] = now
    result = await database.students.insert_one(student_dict)
    student_dict["_id"] = result.inserted_id
    logger.info(f"Created student {result.inserted_id}")
    return serialize(student_dict)

@router.get("/{id}", response_model=StudentResponse)
async def get_student(id: str, database: Database = Depends(get_database)):
    student_id = parse_object_id(id)
    student = await database.students.find_one({"_id": student_id}) if student_id else None
    if not student:
        raise NotFoundError("Student")
    return serialize(student)

@router.put("/{id}", response_model=StudentResponse)
async def update_student(id: str, student: Optional[StudentUpdate] = None, database: Database = Depends(get_database)):
    student_id = parse_object_id(id)
    if not student_id:
        raise NotFoundError("Student")
    changes = student.model_dump(exclude_unset=True) if student is not None else {}
    changes["updatedAt"] = datetime.now(timezone.utc)
    updated = await database.students.find_one_and_update(
        {"_id": student_id},
        {"$set": changes},
        return_document=ReturnDocument.AFTER,
    )
    if not updated:
        raise NotFoundError("Student")
    logger.info(f"Updated student {id}: {sorted(changes)}")
    return serialize(updated)

@router.delete("/{id}")
async def delete_student(id: str, database: Database = Depends(get_database)):
    student_id = parse_object_id(id)
    if student_id:
        result = await database.students.delete_one({"_id": student_id})
        logger.info(f"Deleted student {id} (matched={result.deleted_count})")
    return {"message": "Student deleted"}
