from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional

class GptBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    image: int = Field(1, ge=0, le=21)
    description: str = Field(..., min_length=1, max_length=500)
    goal: str = Field(..., min_length=1, max_length=200)
    temperature: float = Field(0.5, ge=0, le=1)
    capabilities: List[str] = Field(..., min_length=1, max_length=10)
    limitations: List[str] = Field(..., min_length=1, max_length=10)
    is_public: bool = True

class GptCreate(GptBase):
    pass

class GptUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    image: Optional[int] = Field(None, ge=0, le=21)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    goal: Optional[str] = Field(None, min_length=1, max_length=200)
    temperature: Optional[float] = Field(None, ge=0, le=1)
    capabilities: Optional[List[str]] = Field(None, min_length=1, max_length=10)
    limitations: Optional[List[str]] = Field(None, min_length=1, max_length=10)
    is_public: Optional[bool] = None

class Gpt(GptBase):
    id: str
    user_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
