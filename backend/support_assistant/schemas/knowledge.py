from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class FaqEntry(BaseModel):
    """Read-only view of an active FAQ item as seen by the matcher."""

    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    answer: str
    keywords: List[str] = Field(default_factory=list)
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    view_count: int = 0
    is_active: bool = True


class IntentPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    pattern: str
    intent: str
    confidence_threshold: float = 0.7
