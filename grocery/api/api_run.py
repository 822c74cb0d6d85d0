from fastapi import FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from grocery.logic.shopping.errors import InvalidInput
from grocery.utilities.constants import ERR_INVALID_INPUT
from grocery.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from grocery.api.routes import grocerylist, recipes

# Logging
logger = logging.getLogger("grocery_app")

# Initialize FastAPI app
app = FastAPI(title="Grocery Planner API")

# Include routers
app.include_router(grocerylist.router)
app.include_router(recipes.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web notifications when the app starts."""
    start_event_observers()
    logger.info("Web observers for grocery events started")


@app.exception_handler(InvalidInput)
async def _invalid_input_handler(request: Request, exc: InvalidInput):
    logger.warning("Invalid input on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={
        'detail': {'message': str(exc), 'error': ERR_INVALID_INPUT}
    })


@app.exception_handler(RequestValidationError)
async def _request_validation_handler(request: Request, exc: RequestValidationError):
    # Raw inputs may hold NaN/Infinity, which cannot be rendered as JSON
    errors = [{k: v for k, v in err.items() if k not in ('input', 'ctx')} for err in exc.errors()]
    logger.warning("Rejected request on %s: %s", request.url.path, errors)
    return JSONResponse(status_code=422, content={'detail': jsonable_encoder(errors)})


@app.get("/health")
def health():
    return {"ok": True}


# -------------------- API: Events --------------------
@app.get('/api/events')
def api_events(since: Optional[int] = Query(default=None)):
    """Recent grocery events, newer than the 'since' cursor when given."""
    return get_web_events(since)
