from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class EmployeeFields(BaseModel):
    """Validated, trimmed business fields of an employee"""
    name: str
    location: str
    position: str
    salary: float


class EmployeeOut(BaseModel):
    # Serialized with the document-style keys clients send back on update
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    location: str
    position: str
    salary: float
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class EmployeeResponse(BaseModel):
    """Envelope used by every employee operation except List"""
    success: bool = True
    message: str | None = None
    data: EmployeeOut


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str | None = None  # raw error text, 500 responses only
