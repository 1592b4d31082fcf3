"""API routes — thin controllers that delegate to the dispatcher."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from github_helper.interface.dependencies import get_dispatcher
from github_helper.interface.schemas import (
    CommandListResponse,
    CommandRequest,
    EnvelopeResponse,
    ErrorResponse,
    envelope_to_json,
)
from github_helper.services.command_dispatcher import CommandDispatcher

router = APIRouter()


@router.post(
    "/commands",
    response_model=EnvelopeResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown resource / action"},
        422: {
            "model": ErrorResponse,
            "description": "Command line is missing the resource or action",
        },
        502: {"model": ErrorResponse, "description": "GitHub could not be reached"},
    },
)
async def run_command(
    body: CommandRequest,
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
) -> JSONResponse:
    """Run a single command line and return its result envelope."""
    envelope = await dispatcher.run(body.command)
    return JSONResponse(content=envelope_to_json(envelope))


@router.get("/commands", response_model=CommandListResponse)
async def list_commands(
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
) -> CommandListResponse:
    """List the supported command lines."""
    return CommandListResponse(commands=dispatcher.usage())
