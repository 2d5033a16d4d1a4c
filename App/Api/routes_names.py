"""Routes for listing and registering names."""
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from App.Core.registry import Created, InsertOutcome, NameRegistry
from App.Models.names import NameIn, NameOut
from App.Services.utility import logging_function

router = APIRouter()


def get_registry(request: Request) -> NameRegistry:
    """Return the registry owned by the running application."""
    return request.app.state.registry


def outcome_response(outcome: InsertOutcome) -> PlainTextResponse:
    """Translate a registry outcome into the HTTP reply.

    Duplicates are answered with 400, not 409.
    """
    if isinstance(outcome, Created):
        logging_function(f"Registered name {outcome.name!r}", level="info")
        return PlainTextResponse(f"Name {outcome.name} created.\n", status_code=201)
    logging_function(f"Name {outcome.name!r} already registered", level="debug")
    return PlainTextResponse(f"Name {outcome.name} already exists\n", status_code=400)


@router.get("/list", response_model=List[NameOut])
def list_names(registry: NameRegistry = Depends(get_registry)):
    """Return every registered name as a JSON array of ``{"name": ...}``."""
    return [{"name": record.name} for record in registry.snapshot()]


@router.post("/hello/{name}")
def hello(name: str, registry: NameRegistry = Depends(get_registry)):
    """Register the path segment ``name`` verbatim."""
    return outcome_response(registry.insert_if_absent(name))


@router.post("/hello")
def hello_json(req: NameIn, registry: NameRegistry = Depends(get_registry)):
    """Register ``name`` taken from a JSON body."""
    return outcome_response(registry.insert_if_absent(req.name))
