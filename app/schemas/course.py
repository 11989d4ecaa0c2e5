from pydantic import BaseModel, Field


# Length limits are checked by the registry, so every surface rejects the same input
class CourseCreate(BaseModel):
    code: str = Field(min_length=1)
    title: str = Field(min_length=1)
    credit_weight: int = Field(strict=True, gt=0)


class CourseRead(BaseModel):
    id: str
    code: str
    title: str
    credit_weight: int

    class Config:
        from_attributes = True
