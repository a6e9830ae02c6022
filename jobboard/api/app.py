"""
FastAPI application: GraphQL query endpoint and the URL-to-PDF form.
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.concurrency import run_in_threadpool

from jobboard.api.pages import GRAPHIQL_PAGE, failure_page, form_page
from jobboard.browser.manager import BrowserManager
from jobboard.query.gateway import process_query
from jobboard.render import service as render_service
from jobboard.render.pipeline import RenderError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The browser is started lazily by the first render request
    yield
    await BrowserManager.close()


app = FastAPI(title="Job Board", version="0.1.0", lifespan=lifespan)


def parse_query_body(raw: bytes) -> Dict[str, Any]:
    """
    Validate the GraphQL-over-HTTP body. Raises HTTPException(400) on bad input.
    """
    if not raw or not raw.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No query data")

    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Error parsing JSON request body",
        )

    if not isinstance(body, dict) or not isinstance(body.get("query"), str):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be an object with a 'query' string",
        )

    variables = body.get("variables")
    if variables is not None and not isinstance(variables, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="'variables' must be an object",
        )

    operation_name = body.get("operationName")
    if operation_name is not None and not isinstance(operation_name, str):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="'operationName' must be a string",
        )

    return body


@app.post("/graphql")
async def graphql_endpoint(request: Request) -> JSONResponse:
    """
    Resolve one query document. Always answers with {"data", "errors"}.
    """
    body = parse_query_body(await request.body())
    # Blocking file read and synchronous execution stay off the event loop
    result = await run_in_threadpool(
        process_query,
        body["query"],
        variables=body.get("variables"),
        operation_name=body.get("operationName"),
    )
    return JSONResponse(result)


@app.get("/graphiql", response_class=HTMLResponse)
async def graphiql() -> str:
    return GRAPHIQL_PAGE


@app.get("/", response_class=HTMLResponse)
async def index() -> str:
    return form_page()


@app.post("/", response_class=HTMLResponse)
@app.post("/process", response_class=HTMLResponse)
async def process(request: Request) -> HTMLResponse:
    """
    Render the first submitted URL to the configured output file.
    """
    form = await request.form()
    targets = [str(value).strip() for value in form.getlist("new_data")]
    if not targets or not targets[0]:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No URL submitted")

    url = targets[0]
    logger.info(f"Scraping url now... {url}")

    try:
        job = await render_service.render_to_file(url)
    except RenderError as e:
        return HTMLResponse(
            failure_page(url, str(e)), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if not job.succeeded:
        return HTMLResponse(
            failure_page(url, job.error or "render failed"),
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    return HTMLResponse(form_page())
