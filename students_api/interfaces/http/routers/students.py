from typing import Any

from fastapi import APIRouter, Body, Depends, status

from ....application.validation import parse_student_id, validate_full, validate_partial
from ....domain.entities import Identity
from ....infrastructure.store import JsonStudentStore, get_store
from ..authz import require_cookie_login, require_jwt
from ..schemas import StudentListResp, StudentOut, StudentResp, UserResp

router = APIRouter(prefix="/students", tags=["students"])

# --- Тестовые защищенные маршруты (до /{student_id})

@router.get("/protected/cookie-only", response_model=UserResp)
def cookie_only(user: Identity = Depends(require_cookie_login)):
    return {"message": "This students route is protected by cookie-based auth.", "user": user.to_dict()}

@router.get("/protected/jwt-only", response_model=UserResp)
def jwt_only(user: Identity = Depends(require_jwt)):
    return {"message": "This students route is protected by JWT.", "user": user.to_dict()}

# --- Публичные

@router.get("", response_model=StudentListResp)
@router.get("/", response_model=StudentListResp, include_in_schema=False)
def list_students(store: JsonStudentStore = Depends(get_store)):
    students = store.all()
    return {"count": len(students), "data": [s.to_dict() for s in students]}

@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: str, store: JsonStudentStore = Depends(get_store)):
    return store.get(parse_student_id(student_id)).to_dict()

# --- CRUD под JWT

@router.post("", response_model=StudentResp, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_jwt)])
@router.post("/", response_model=StudentResp, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_jwt)], include_in_schema=False)
def create_student(payload: Any = Body(default=None), store: JsonStudentStore = Depends(get_store)):
    fields = validate_full(payload)
    student = store.create(fields)
    return {"message": "Student created", "student": student.to_dict()}

@router.put("/{student_id}", response_model=StudentResp, dependencies=[Depends(require_jwt)])
def replace_student(student_id: str, payload: Any = Body(default=None),
                    store: JsonStudentStore = Depends(get_store)):
    sid = parse_student_id(student_id)
    store.get(sid)  # сначала 404, потом 400
    fields = validate_full(payload)
    student = store.replace(sid, fields)
    return {"message": "Student updated", "student": student.to_dict()}

@router.patch("/{student_id}", response_model=StudentResp, dependencies=[Depends(require_jwt)])
def patch_student(student_id: str, payload: Any = Body(default=None),
                  store: JsonStudentStore = Depends(get_store)):
    sid = parse_student_id(student_id)
    store.get(sid)
    changes = validate_partial(payload)
    student = store.patch(sid, changes)
    return {"message": "Student partially updated", "student": student.to_dict()}

@router.delete("/{student_id}", response_model=StudentResp, dependencies=[Depends(require_jwt)])
def delete_student(student_id: str, store: JsonStudentStore = Depends(get_store)):
    student = store.delete(parse_student_id(student_id))
    return {"message": "Student deleted", "student": student.to_dict()}
