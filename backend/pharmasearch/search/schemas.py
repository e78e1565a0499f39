from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Any


class SearchFilters(BaseModel):
    query: str
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    publication_type: Optional[str] = None

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("query must not be blank")
        return v

    @field_validator("publication_type")
    @classmethod
    def blank_publication_type_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class Author(BaseModel):
    model_config = ConfigDict(extra="allow")

    authorId: Optional[str] = None
    name: str


class Journal(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    volume: Optional[str] = None
    pages: Optional[str] = None


class PaperRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    paperId: str
    title: str
    abstract: Optional[str] = None
    year: Optional[int] = None
    authors: List[Author] = []
    venue: Optional[str] = None
    url: Optional[str] = None
    publicationTypes: Optional[List[str]] = None
    journal: Optional[Journal] = None


class SearchResponse(BaseModel):
    # Provider records are relayed unmodified
    papers: List[Dict[str, Any]]
    total: int


class ErrorResponse(BaseModel):
    error: str


class PublicationTypeOption(BaseModel):
    value: str
    label: str


class SearchOptions(BaseModel):
    publication_types: List[PublicationTypeOption]
    min_year: int
    max_year: int
    messages: Dict[str, str] = Field(default_factory=dict)


class PaperCard(BaseModel):
    paperId: str
    title: str
    authors: Optional[str] = None
    abstract: Optional[str] = None
    badges: List[str] = []
    source: Optional[str] = None
    url: Optional[str] = None


class CardsResponse(BaseModel):
    cards: List[PaperCard]
    total: int
    summary: str
