"""FastAPI entrypoint for the travel planner wizard."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from travel_planner.adapters.io.exports import serialize_destination, serialize_recommendation
from travel_planner.api.schemas import OPTION_LABELS, TravelerProfilePayload, describe_errors
from travel_planner.core.errors import DestinationNotFoundError
from travel_planner.core.normalization import build_meta
from travel_planner.pipeline.orchestrator import Orchestrator

LOG = logging.getLogger(__name__)


def create_app(orchestrator: Optional[Orchestrator] = None) -> FastAPI:
    planner = orchestrator or Orchestrator()
    app = FastAPI(title="Travel Planner API")

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_errors(exc.errors())
        LOG.info("rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.get("/api/health")
    def health() -> Dict[str, object]:
        return {"status": "ok", "destinations": len(planner.catalog), "meta": build_meta()}

    @app.get("/api/options")
    def options() -> Dict[str, List[Dict[str, str]]]:
        return OPTION_LABELS

    @app.get("/api/destinations")
    def list_destinations() -> Dict[str, List[Dict[str, object]]]:
        return {"items": [serialize_destination(d) for d in planner.catalog]}

    @app.get("/api/destinations/{destination_id}")
    def get_destination(destination_id: str) -> Dict[str, object]:
        try:
            return serialize_destination(planner.catalog.get(destination_id))
        except DestinationNotFoundError as exc:
            raise HTTPException(status_code=404, detail="Destination not found") from exc

    @app.post("/api/plan")
    def plan(payload: TravelerProfilePayload) -> Dict[str, object]:
        result = planner.run(payload.to_profile())
        LOG.info(
            "planned %d proposals for %s (fallback=%s)",
            len(result.proposals),
            payload.departure_city,
            result.fallback,
        )
        return serialize_recommendation(result)

    return app


app = create_app()
