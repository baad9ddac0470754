"""FastAPI endpoint for the box packer."""

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from box_packer.config import get_cors_origins, get_max_units, get_proxy_secret
from box_packer.io.schemas import PackRequestSchema, PackResponseSchema
from box_packer.metrics import run_metrics
from box_packer.packing.items import aggregate_unpacked
from box_packer.packing.multi_container import pack

logger = logging.getLogger(__name__)

# FastAPI app instance (exactly one)
app = FastAPI(
    title="Box Packer API",
    description="Packs items into the fewest boxes chosen from several box types",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["Content-Type", "X-RapidAPI-Proxy-Secret"],
)


def verify_proxy_secret(
    x_rapidapi_proxy_secret: Optional[str] = Header(default=None),
) -> None:
    """Reject requests that did not come through the API gateway. No secret configured: allow all."""
    expected = get_proxy_secret()
    if expected is None:
        return
    if x_rapidapi_proxy_secret != expected:
        raise HTTPException(status_code=401, detail="Unauthorized: Invalid or missing RapidAPI proxy secret")


def build_plan(request: PackRequestSchema) -> PackResponseSchema:
    """
    Run the packer and derive the response statistics.

    Unpacked units are regrouped per item id; total_volume and
    utilization_percent cover committed boxes only.
    """
    result = pack(request.items, request.boxes)
    total_volume, utilization = run_metrics(result.packed_boxes, request.boxes)

    return PackResponseSchema(
        packed_boxes=result.packed_boxes,
        unpacked_items=aggregate_unpacked(result.unpacked),
        total_volume=total_volume,
        utilization_percent=utilization,
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/pack", response_model=PackResponseSchema, dependencies=[Depends(verify_proxy_secret)])
def pack_endpoint(request: PackRequestSchema) -> PackResponseSchema:
    if not request.items or not request.boxes:
        raise HTTPException(status_code=400, detail="Items and Boxes are required")

    try:
        max_units = get_max_units()
        if request.unit_count > max_units:
            raise HTTPException(
                status_code=413,
                detail=f"Request expands to {request.unit_count} units; the limit is {max_units}",
            )

        started = time.perf_counter()
        plan = build_plan(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"/pack: {request.unit_count} units, {len(request.boxes)} box types -> "
            f"{len(plan.packed_boxes)} boxes, {sum(i.quantity for i in plan.unpacked_items)} unpacked "
            f"in {elapsed_ms:.1f} ms"
        )
        return plan
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
