"""
Spy Cat Agency console.
Request and response models for the spy cat REST backend.
"""

from pydantic import BaseModel, field_validator
from typing import List

class SpyCat(BaseModel):
    id: int
    name: str
    years_of_experience: int
    breed: str
    salary: float

class SpyCatCreateRequest(BaseModel):
    name: str
    years_of_experience: int
    breed: str
    salary: float

    @field_validator('name')
    @classmethod
    def name_must_not_be_empty(cls, v):
        if not v.strip():
            raise ValueError('name cannot be empty')
        return v.strip()

    @field_validator('breed')
    @classmethod
    def breed_must_not_be_empty(cls, v):
        if not v.strip():
            raise ValueError('breed cannot be empty')
        return v.strip()

    @field_validator('salary')
    @classmethod
    def salary_must_be_positive(cls, v):
        if v <= 0:
            raise ValueError('salary must be greater than 0')
        return v

class SpyCatSalaryUpdateRequest(BaseModel):
    salary: float

    @field_validator('salary')
    @classmethod
    def salary_must_be_positive(cls, v):
        if v <= 0:
            raise ValueError('salary must be greater than 0')
        return v

class SpyCatListResponse(BaseModel):
    cats: List[SpyCat]
