"""FastAPI application entrypoint and HTTP controllers.

Controllers are intentionally thin: they accept requests, delegate to
services, and return the Full response shape of the requested entity.

Endpoints implemented:
- POST /companies, GET /companies, GET/PUT/DELETE /companies/{id}
- POST /employees, GET /employees, GET/PUT/DELETE /employees/{id}
- GET /health
"""

from fastapi import FastAPI, Depends, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
from typing import List, Optional
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import services
from .schemas import CompanyFull, CompanyRequest, EmployeeFull, EmployeeRequest
from .config import settings

app = FastAPI(title="Company Directory API")
logger = logging.getLogger("company_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Wide-open CORS keeps local HTML testers working without extra config in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "request_done %s",
        json.dumps(
            {
                "request_id": req_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
                "client": request.client.host if request.client else "unknown",
            },
            ensure_ascii=True,
        ),
    )
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 rather than FastAPI's default 422."""
    logger.info("validation_failed path=%s errors=%d", request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def _not_found(e: services.NotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(e))


def _page_limit(limit: Optional[int]) -> int:
    return settings.DEFAULT_PAGE_SIZE if limit is None else limit


@app.post('/companies', status_code=201, response_model=CompanyFull)
def create_company(payload: CompanyRequest, db: Session = Depends(get_session)):
    """Create a company. A new company has no loaded employees (`null`)."""
    return services.CompanyService(db).create(payload)


@app.get('/companies', response_model=List[CompanyFull])
def list_companies(
    limit: Optional[int] = Query(default=None, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_session),
):
    """List companies by id, each with its employees as simple entries."""
    return services.CompanyService(db).list(_page_limit(limit), offset)


@app.get('/companies/{company_id}', response_model=CompanyFull)
def get_company(company_id: int, db: Session = Depends(get_session)):
    """Return a company with its employees (without their company field)."""
    try:
        return services.CompanyService(db).get(company_id)
    except services.NotFoundError as e:
        raise _not_found(e)


@app.put('/companies/{company_id}', response_model=CompanyFull)
def update_company(company_id: int, payload: CompanyRequest, db: Session = Depends(get_session)):
    try:
        return services.CompanyService(db).update(company_id, payload)
    except services.NotFoundError as e:
        raise _not_found(e)


@app.delete('/companies/{company_id}', status_code=204)
def delete_company(company_id: int, db: Session = Depends(get_session)):
    """Delete a company and every employee it owns."""
    try:
        services.CompanyService(db).delete(company_id)
    except services.NotFoundError as e:
        raise _not_found(e)
    return Response(status_code=204)


@app.post('/employees', status_code=201, response_model=EmployeeFull)
def create_employee(payload: EmployeeRequest, db: Session = Depends(get_session)):
    """Create an employee for an existing company.

    Returns 404 when `companyId` does not name an existing company.
    """
    try:
        return services.EmployeeService(db).create(payload)
    except services.NotFoundError as e:
        raise _not_found(e)


@app.get('/employees', response_model=List[EmployeeFull])
def list_employees(
    company_id: Optional[int] = Query(default=None, alias="companyId", gt=0),
    limit: Optional[int] = Query(default=None, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_session),
):
    """List employees by id, optionally only those of `companyId`."""
    try:
        return services.EmployeeService(db).list(_page_limit(limit), offset, company_id=company_id)
    except services.NotFoundError as e:
        raise _not_found(e)


@app.get('/employees/{employee_id}', response_model=EmployeeFull)
def get_employee(employee_id: int, db: Session = Depends(get_session)):
    """Return an employee with its company (without the company's employees)."""
    try:
        return services.EmployeeService(db).get(employee_id)
    except services.NotFoundError as e:
        raise _not_found(e)


@app.put('/employees/{employee_id}', response_model=EmployeeFull)
def update_employee(employee_id: int, payload: EmployeeRequest, db: Session = Depends(get_session)):
    """Replace an employee; a different `companyId` moves them."""
    try:
        return services.EmployeeService(db).update(employee_id, payload)
    except services.NotFoundError as e:
        raise _not_found(e)


@app.delete('/employees/{employee_id}', status_code=204)
def delete_employee(employee_id: int, db: Session = Depends(get_session)):
    try:
        services.EmployeeService(db).delete(employee_id)
    except services.NotFoundError as e:
        raise _not_found(e)
    return Response(status_code=204)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
