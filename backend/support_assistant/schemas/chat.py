from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional, List


ResponseSource = Literal["qa_database", "ai"]


class AssistantRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., description="Free-text user question; may be empty")
    session_id: str = Field(..., alias="sessionId", description="Chat session the reply belongs to")
    user_id: Optional[str] = Field(None, alias="userId")
    has_files: bool = Field(False, alias="hasFiles")
    file_types: List[str] = Field(default_factory=list, alias="fileTypes", description="Declared MIME types of attachments")


class AssistantResponse(BaseModel):
    """Full outcome of one assistant turn, including provenance fields kept out of the wire reply."""

    response: str
    confidence: float
    response_source: ResponseSource
    matched_intent: str = ""
    related_items: List[str] = []
    suggested_questions: List[str] = []
    qa_item_id: Optional[str] = None
    message_id: Optional[str] = None

    def to_reply(self) -> "AssistantReply":
        return AssistantReply(
            response=self.response,
            confidence=self.confidence,
            suggested_questions=self.suggested_questions,
            related_items=self.related_items,
            message_id=self.message_id,
        )


class AssistantReply(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response: str
    confidence: float
    suggested_questions: List[str] = Field(default_factory=list, alias="suggestedQuestions")
    related_items: List[str] = Field(default_factory=list, alias="relatedItems")
    message_id: Optional[str] = Field(None, alias="messageId")
