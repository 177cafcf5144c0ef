# app/adapters/inbound/api/v1/endpoints/log_endpoint.py (async version)

"""
Endpoints de consulta da trilha de auditoria.

Somente leitura: as entradas são gravadas pelo middleware de acesso.
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Path, Query

from app.adapters.inbound.api.deps import get_audit_service
from app.application.dtos.audit_dto import LogEntryOutput
from app.application.use_cases.audit_use_cases import AsyncAuditService

router = APIRouter()


@router.get("/search", response_model=List[LogEntryOutput], summary="Search logs by keyword")
async def search_logs(
        keyword: str = Query(..., description="Substring of the URI or request summary"),
        service: AsyncAuditService = Depends(get_audit_service),
):
    return await service.search(keyword)


@router.get("/date-range", response_model=List[LogEntryOutput], summary="Get logs in a time range")
async def get_logs_by_date_range(
        start_date: datetime = Query(..., alias="startDate", description="ISO-8601, inclusive"),
        end_date: datetime = Query(..., alias="endDate", description="ISO-8601, inclusive"),
        service: AsyncAuditService = Depends(get_audit_service),
):
    return await service.find_by_date_range(start_date, end_date)


@router.get("/slow-requests", response_model=List[LogEntryOutput], summary="Get slow requests")
async def get_slow_requests(
        threshold_ms: int = Query(1000, alias="thresholdMs", ge=0, description="Minimum execution time"),
        service: AsyncAuditService = Depends(get_audit_service),
):
    return await service.find_slow_requests(threshold_ms)


@router.get("/method/{method}", response_model=List[LogEntryOutput], summary="Get logs by HTTP method")
async def get_logs_by_method(
        method: str = Path(...),
        service: AsyncAuditService = Depends(get_audit_service),
):
    return await service.find_by_method(method)


@router.get("/status/{status_code}", response_model=List[LogEntryOutput], summary="Get logs by response status")
async def get_logs_by_status(
        status_code: int = Path(...),
        service: AsyncAuditService = Depends(get_audit_service),
):
    return await service.find_by_status(status_code)
