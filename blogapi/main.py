import os
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import uvicorn
from .routes import router
from .core import db_startup, init_metrics, REQUESTS
from .models import engine
import logging
from pythonjsonlogger.json import JsonFormatter

# setup structured logging
logger = logging.getLogger('blogapi')
handler = logging.StreamHandler()
formatter = JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(os.getenv('LOG_LEVEL', 'INFO').upper())

app = FastAPI(title="Blog API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(router)

@app.get('/healthz')
async def healthz():
    return {'status': 'ok'}

@app.middleware('http')
async def log_requests(request: Request, call_next):
    logger.info({'msg':'request_start','method':request.method,'path':request.url.path})
    response = await call_next(request)
    logger.info({'msg':'request_end','status': response.status_code})
    route = request.scope.get('route')
    path = route.path if route is not None else 'unmatched'
    REQUESTS.labels(request.method, path, str(response.status_code)).inc()
    return response

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    for err in errors:
        loc = err.get('loc', ())
        if len(loc) == 2 and loc[0] == 'path':
            entity = str(loc[1]).removesuffix('_id')
            return JSONResponse(status_code=400, content={'detail': f'Invalid {entity} ID'})
    return JSONResponse(status_code=400, content={'detail': jsonable_encoder(errors)})

@app.exception_handler(SQLAlchemyError)
async def storage_error(request: Request, exc: SQLAlchemyError):
    logger.error({'msg': 'storage_error', 'path': request.url.path, 'error': str(exc)})
    return JSONResponse(status_code=500, content={'detail': str(exc)})

@app.on_event("startup")
async def startup():
    # storage is required: a failure here aborts startup
    await db_startup()
    init_metrics()

@app.on_event("shutdown")
async def shutdown():
    await engine.dispose()


def run():
    uvicorn.run(
        app,
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', '8080')),
    )


if __name__ == '__main__':
    run()
