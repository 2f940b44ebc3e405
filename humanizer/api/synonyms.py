from typing import Literal, Optional

from fastapi import APIRouter, Path, Query

from humanizer.schemas.tools import SynonymResponse
from humanizer.services.synonym_service import lookup_synonyms

router = APIRouter(tags=["Synonyms"])


@router.get("/api/synonyms/{word}", response_model=SynonymResponse)
def synonyms(
    word: str = Path(..., min_length=1, max_length=64),
    formality: Optional[Literal["casual", "neutral", "formal"]] = Query(None),
):
    return lookup_synonyms(word, formality)
