"""
FastAPI backend for the van heatmap.
Renders posted defect columns to markers and SVG.
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging
import time

from backend.models import DiffData, MarkerData, RenderRequest, RenderResponse
from van_heatmap import HeatmapSettings, HeatmapVisual, LoggingObserver, SvgSurface

logger = logging.getLogger("van_heatmap.backend")

app = FastAPI(
    title="Van Heatmap API",
    description="Density and category overlays for defect positions",
    version="1.0.0"
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",  # Vite default port
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "message": "Van Heatmap API",
        "status": "running",
    }


@app.post("/api/render", response_model=RenderResponse)
def render(request: RenderRequest):
    """Run the heatmap pipeline once for the posted columns"""
    start_time = time.time()

    options = request.settings.model_dump(exclude_none=True)
    settings = HeatmapSettings.from_mapping(options)

    surface = SvgSurface(glow_size=settings.glow_size)
    visual = HeatmapVisual(settings=settings, surface=surface, observer=LoggingObserver(logger))

    try:
        result = visual.update(request.columns, request.width, request.height)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid heatmap configuration: {e}")

    logger.info(
        "Rendered %d markers in %.2fms", len(result.markers), (time.time() - start_time) * 1000
    )

    return RenderResponse(
        markers=[MarkerData(**marker.as_dict()) for marker in result.markers],
        densities=result.densities,
        labels=result.labels,
        diff=DiffData(**result.diff.as_dict()),
        viewport={"width": result.viewport.width, "height": result.viewport.height},
        skipped=result.skipped,
        svg=surface.to_svg(),
    )


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting Van Heatmap API, docs at http://localhost:8000/docs")
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
