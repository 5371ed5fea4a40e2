# File: api/models/supplementation_models.py
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class TranscriptionRequest(BaseModel):
    value: str
    note: Optional[str] = None


class InterpretationRequest(BaseModel):
    value: str


class TranslationRequest(BaseModel):
    value: str
    note: Optional[str] = None


class ExampleRequest(BaseModel):
    origin: str
    translate: Optional[str] = None
    note: Optional[str] = None


class WordSupplementRequest(BaseModel):
    word_id: Optional[str] = Field(None, description="Id of the word; required for example translations")
    user_id: Optional[str] = None
    value: str = Field(..., description="The English word")
    note: Optional[str] = None
    transcriptions: List[TranscriptionRequest] = Field(default_factory=list)
    interpretations: List[InterpretationRequest] = Field(default_factory=list)
    translations: List[TranslationRequest] = Field(default_factory=list)
    examples: List[ExampleRequest] = Field(default_factory=list)


class OuterSourceResponse(BaseModel):
    source_name: str
    url: Optional[str] = None
    recent_update_date: date


class ExampleOuterSourceResponse(OuterSourceResponse):
    translate: Optional[str] = None


class SupplementedTranscriptionResponse(BaseModel):
    value: str
    note: Optional[str] = None
    outer_source: List[OuterSourceResponse] = Field(default_factory=list)


class SupplementedInterpretationResponse(BaseModel):
    value: str
    outer_source: List[OuterSourceResponse] = Field(default_factory=list)


class SupplementedTranslationResponse(BaseModel):
    value: str
    note: Optional[str] = None
    outer_source: List[OuterSourceResponse] = Field(default_factory=list)


class SupplementedExampleResponse(BaseModel):
    origin: str
    translate: Optional[str] = None
    note: Optional[str] = None
    outer_source: List[ExampleOuterSourceResponse] = Field(default_factory=list)


class SupplementedWordResponse(BaseModel):
    word_id: Optional[str] = None
    user_id: Optional[str] = None
    value: str
    note: Optional[str] = None
    transcriptions: List[SupplementedTranscriptionResponse] = Field(default_factory=list)
    interpretations: List[SupplementedInterpretationResponse] = Field(default_factory=list)
    translations: List[SupplementedTranslationResponse] = Field(default_factory=list)
    examples: List[SupplementedExampleResponse] = Field(default_factory=list)


class CleanupResponse(BaseModel):
    status: str
    deleted_rows: int
