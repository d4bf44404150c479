from pydantic import BaseModel

class StudentOut(BaseModel):
    id: int
    name: str
    age: int | float
    email: str
    isActive: bool

class StudentListResp(BaseModel):
    count: int
    data: list[StudentOut]

class StudentResp(BaseModel):
    message: str
    student: StudentOut

class UserOut(BaseModel):
    username: str
    role: str

class UserResp(BaseModel):
    message: str
    user: UserOut

class TokenResp(BaseModel):
    message: str
    token: str
    howToUse: str

class MessageResp(BaseModel):
    message: str
    note: str | None = None
