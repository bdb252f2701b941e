from typing import List, Optional

from pydantic import BaseModel

from portfolio.models.document import PostSummary
from portfolio.models.viewport import BreakpointClass, ViewportConfig


class PostListResponse(BaseModel):
    total: int
    posts: List[PostSummary]


class PostDetailResponse(BaseModel):
    post: PostSummary
    published: bool
    body_html: str
    reading_time: int
    """Estimated minutes to read the post."""


class BreakpointResponse(BaseModel):
    width: int
    breakpoint: BreakpointClass
    viewport: Optional[ViewportConfig] = None
