"""API route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from strongsreader import __version__
from strongsreader.api.models import (
    DefinitionModel,
    HealthModel,
    ResolvableRequest,
    ResolvableResponse,
    SelectionModel,
    SelectRequest,
    TokenizeRequest,
    TokenizeResponse,
    TokenModel,
)
from strongsreader.config import GREEK_PREFIX, HEBREW_PREFIX
from strongsreader.lexicon import DefinitionSelection, LexiconResolver, NormalizedDefinition
from strongsreader.parsing import tokenize

router = APIRouter()


def get_resolver(request: Request) -> LexiconResolver:
    """Resolver attached to the application at startup."""
    return request.app.state.resolver


def _definition_model(definition: NormalizedDefinition) -> DefinitionModel:
    return DefinitionModel(
        number=definition.number,
        lemma=definition.lemma,
        transliteration=definition.transliteration,
        pronunciation=definition.pronunciation,
        part_of_speech=definition.part_of_speech,
        definition=definition.definition,
        usage=definition.usage,
        derivation=definition.derivation,
    )


def _selection_model(selection: DefinitionSelection) -> SelectionModel:
    return SelectionModel(
        requested=selection.requested,
        outcome=selection.outcome.value,
        shown_code=selection.shown_code,
        definition=(
            _definition_model(selection.definition) if selection.definition else None
        ),
    )


@router.get("/health", response_model=HealthModel)
def health_check(resolver: LexiconResolver = Depends(get_resolver)):
    """Health check endpoint (does not trigger lexicon loading)."""
    store = resolver.store
    return HealthModel(
        status="ok",
        version=__version__,
        greek_loaded=store.is_loaded(GREEK_PREFIX),
        hebrew_loaded=store.is_loaded(HEBREW_PREFIX),
    )


@router.post("/tokenize", response_model=TokenizeResponse)
def tokenize_text(body: TokenizeRequest):
    """Tokenize tagged text into words and punctuation."""
    tokens = tokenize(body.text)
    return TokenizeResponse(
        tokens=[
            TokenModel(
                text=t.text,
                reference_codes=list(t.reference_codes),
                original=t.original,
            )
            for t in tokens
        ],
        token_count=len(tokens),
    )


@router.get("/strongs/{code}", response_model=DefinitionModel)
def get_definition(code: str, resolver: LexiconResolver = Depends(get_resolver)):
    """Resolve a single Strong's number."""
    definition = resolver.resolve(code)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"No definition for {code}")
    return _definition_model(definition)


@router.post("/strongs/resolvable", response_model=ResolvableResponse)
def resolvable_codes(
    body: ResolvableRequest, resolver: LexiconResolver = Depends(get_resolver)
):
    """Filter candidate codes down to those with a definition."""
    return ResolvableResponse(codes=resolver.filter_resolvable(body.codes))


@router.post("/strongs/select", response_model=SelectionModel)
def select_definition(
    body: SelectRequest, resolver: LexiconResolver = Depends(get_resolver)
):
    """Pick the definition to show for a token, with sibling fallback."""
    return _selection_model(resolver.select(body.codes, body.requested))
