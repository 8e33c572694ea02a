from __future__ import annotations

import io
import json
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query
from fastapi.responses import Response

from costsim.application import get_simulation_service
from costsim.exporters import build_report, export_cost_sheet_csv, export_cost_sheet_xlsx

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulate", tags=["simulation"])

EXPORT_MEDIA_TYPES = {
    "json": "application/json",
    "csv": "text/csv",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


@router.post("/contract")
async def simulate_contract(payload: Any = Body(None)) -> dict:
    result = get_simulation_service().simulate_contract(payload)
    return {"ok": True, "result": result.model_dump(mode="json", by_alias=True)}


@router.post("/job")
async def simulate_job(payload: Any = Body(None)) -> dict:
    result = get_simulation_service().simulate_job(payload)
    return {"ok": True, "result": result.model_dump(mode="json", by_alias=True)}


@router.post("/{mode}/export")
async def export_simulation(
    mode: str,
    payload: Any = Body(None),
    fmt: str = Query(default="json", alias="format"),
) -> Response:
    """Run a simulation and return the cost sheet as a downloadable file."""
    if fmt not in EXPORT_MEDIA_TYPES:
        raise HTTPException(status_code=400, detail="format must be one of json, csv, xlsx")

    service = get_simulation_service()
    try:
        inputs = service.parse(mode, payload)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="mode must be contract or job") from exc
    result = service.calculate(inputs)

    if fmt == "json":
        content: bytes = json.dumps(build_report(mode, inputs, result), indent=2).encode("utf-8")
    elif fmt == "csv":
        buffer = io.StringIO()
        export_cost_sheet_csv(buffer, result)
        content = buffer.getvalue().encode("utf-8")
    else:
        binary = io.BytesIO()
        export_cost_sheet_xlsx(binary, result)
        content = binary.getvalue()

    stamp = int(datetime.now(timezone.utc).timestamp() * 1000)
    filename = f"cost-sheet-{mode}-{stamp}.{fmt}"
    logger.info("exported %s cost sheet as %s", mode, fmt)
    return Response(
        content=content,
        media_type=EXPORT_MEDIA_TYPES[fmt],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
