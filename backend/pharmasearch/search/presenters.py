"""Display helpers for paper records (result cards and summaries)."""

from typing import Any, Dict, List, Optional

from pharmasearch.search.schemas import CardsResponse, PaperCard, PaperRecord, SearchResponse

ABSTRACT_LIMIT = 640
MAX_TYPE_BADGES = 2


def author_line(paper: PaperRecord) -> Optional[str]:
    names = [a.name for a in paper.authors]
    return ", ".join(names) if names else None


def truncate_abstract(text: Optional[str], limit: int = ABSTRACT_LIMIT) -> Optional[str]:
    if not text:
        return None
    if len(text) > limit:
        return f"{text[:limit]}…"
    return text


def display_badges(paper: PaperRecord) -> List[str]:
    """Year, venue, then the first two publication types."""
    badges = []
    if paper.year:
        badges.append(str(paper.year))
    if paper.venue:
        badges.append(paper.venue)
    badges.extend((paper.publicationTypes or [])[:MAX_TYPE_BADGES])
    return badges


def source_label(paper: PaperRecord) -> Optional[str]:
    if paper.journal and paper.journal.name:
        return paper.journal.name
    return paper.venue


def result_summary(shown: int, total: int, query: str) -> str:
    return f"Showing {shown} of {total:,} results for “{query}”."


def paper_card(record: Dict[str, Any]) -> PaperCard:
    """Display fields for one provider record."""
    paper = PaperRecord.model_validate(record)
    return PaperCard(
        paperId=paper.paperId,
        title=paper.title,
        authors=author_line(paper),
        abstract=truncate_abstract(paper.abstract),
        badges=display_badges(paper),
        source=source_label(paper),
        url=paper.url,
    )


def card_view(result: SearchResponse, query: str) -> CardsResponse:
    cards = [paper_card(p) for p in result.papers]
    return CardsResponse(
        cards=cards,
        total=result.total,
        summary=result_summary(len(cards), result.total, query),
    )
