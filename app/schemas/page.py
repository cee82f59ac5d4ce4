from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class PageBase(BaseModel):
    title: str
    url_segment: str
    page_type: Optional[str] = "Page"
    redirect_url: Optional[str] = None
    can_view_type: Optional[str] = "Anyone"
    show_in_search: Optional[bool] = True
    priority: Optional[float] = Field(default=None, ge=0.0, le=1.0)  # 0 hides the page
    sort_order: Optional[int] = 0
    content: Optional[str] = None


class PageCreate(PageBase):
    pass


class PageUpdate(BaseModel):
    title: Optional[str] = None
    url_segment: Optional[str] = None
    page_type: Optional[str] = None
    redirect_url: Optional[str] = None
    can_view_type: Optional[str] = None
    show_in_search: Optional[bool] = None
    priority: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    sort_order: Optional[int] = None
    content: Optional[str] = None

    @field_validator("title", "url_segment")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("may not be null")
        return v


class Page(PageBase):
    id: int
    published: bool
    version: int
    created_at: Optional[datetime] = None
    last_edited: Optional[datetime] = None

    class Config:
        from_attributes = True
