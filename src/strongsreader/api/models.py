"""Pydantic models for API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TokenModel(APIModel):
    """A word or punctuation token."""

    text: str = Field(..., description="Surface text")
    reference_codes: List[str] = Field(
        default_factory=list, description="Strong's numbers attached to this token"
    )
    original: Optional[str] = Field(None, description="Original-language text")


class TokenizeRequest(APIModel):
    """Request to tokenize tagged text."""

    text: str = Field(..., description="Text with inline tags, e.g. 'love[G25]'")


class TokenizeResponse(APIModel):
    """Tokenization result."""

    tokens: List[TokenModel]
    token_count: int


class DefinitionModel(APIModel):
    """Normalized Strong's definition."""

    number: str = Field(..., description="Reference code, uppercased")
    lemma: Optional[str] = None
    transliteration: Optional[str] = None
    pronunciation: Optional[str] = None
    part_of_speech: Optional[str] = None
    definition: Optional[str] = None
    usage: Optional[str] = None
    derivation: Optional[str] = None


class ResolvableRequest(APIModel):
    """Candidate codes to check."""

    codes: List[str] = Field(..., description="Candidate Strong's numbers")


class ResolvableResponse(APIModel):
    """Codes that have a definition, in request order."""

    codes: List[str]


class SelectRequest(APIModel):
    """Pick one code among those attached to a token."""

    codes: List[str] = Field(..., description="All codes on the token, in order")
    requested: str = Field(..., description="Code the reader selected")


class SelectionModel(APIModel):
    """Which definition is shown for a selection."""

    requested: str
    outcome: str = Field(..., description="exact | substituted | unavailable")
    shown_code: Optional[str] = None
    definition: Optional[DefinitionModel] = None


class HealthModel(APIModel):
    """Health check response."""

    status: str
    version: str
    greek_loaded: bool
    hebrew_loaded: bool
