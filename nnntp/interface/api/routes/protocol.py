"""NNNTP protocol routes.

One POST route per operation. The request body is the envelope, the
response body and status code come from the dispatcher. The dispatcher is
synchronous and runs in the threadpool, one worker per request.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from nnntp.interface.dispatcher import Dispatcher
from nnntp.protocol.envelope import RequestType

router = APIRouter(tags=["nnntp"], route_class=DishkaRoute)


async def _read_envelope(request: Request) -> Any:
    """Decode the JSON body, or None if it is not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


async def _dispatch(
    operation: RequestType, request: Request, dispatcher: Dispatcher
) -> JSONResponse:
    envelope = await _read_envelope(request)
    response = await run_in_threadpool(dispatcher.dispatch, operation, envelope)
    return JSONResponse(status_code=response.status_code, content=response.body)


@router.post("/new")
async def new_user(request: Request, dispatcher: FromDishka[Dispatcher]) -> JSONResponse:
    """Register an account."""
    return await _dispatch(RequestType.NEW, request, dispatcher)


@router.post("/post")
async def post(request: Request, dispatcher: FromDishka[Dispatcher]) -> JSONResponse:
    """Post an article to a group. Requires credentials in the envelope."""
    return await _dispatch(RequestType.POST, request, dispatcher)


@router.post("/comment")
async def comment(request: Request, dispatcher: FromDishka[Dispatcher]) -> JSONResponse:
    """Comment on a post. Requires credentials in the envelope."""
    return await _dispatch(RequestType.COMMENT, request, dispatcher)


@router.post("/list")
async def list_posts(
    request: Request, dispatcher: FromDishka[Dispatcher]
) -> JSONResponse:
    """List the posts of a group with their comments."""
    return await _dispatch(RequestType.LIST, request, dispatcher)
