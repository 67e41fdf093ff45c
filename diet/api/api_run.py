from fastapi import (
    FastAPI,
    Request,
    Query,
    Depends,
    HTTPException,
    Response
)
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from datetime import date as _date
from typing import Any, Dict, Optional
import logging

from diet.domain.errors import DateParseError, InvalidInput
from diet.domain.PlanInput import ActivityLevel, Sex
from diet.domain.WeekRecord import FullPlan, plan_to_dicts
from diet.infra.Plan_Repository import PlanRepository
from diet.infra.pdf_utils import generate_pdf_for_plan
from diet.logic.planning.engine import generate_plan
from diet.logic.reporting.progress import build_chart_series, summarize_progress, PHASE_COLORS
from diet.utilities.config import TEMPLATES_DIR
from diet.utilities.constants import DATE_FORMAT
from diet.utilities.validators import collect_plan_input

# Logging
logger = logging.getLogger("diet_app")

ACTIVITY_LABELS = {
    ActivityLevel.SEDENTARY: ("Sedentary", "Little to no exercise"),
    ActivityLevel.LIGHTLY_ACTIVE: ("Lightly Active", "Light exercise/sports 1-3 days/week"),
    ActivityLevel.MODERATELY_ACTIVE: ("Moderately Active", "Moderate exercise/sports 3-5 days/week"),
    ActivityLevel.VERY_ACTIVE: ("Very Active", "Hard exercise/sports 6-7 days a week"),
    ActivityLevel.EXTRA_ACTIVE: ("Extra Active", "Very hard exercise/sports & physical job"),
}

# Initialize FastAPI app
app = FastAPI(title="Reverse Diet Planner API")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_repository = PlanRepository()


def get_repository() -> PlanRepository:
    return _repository


# -------------------- Helpers --------------------
def _load_plan_or_404(repo: PlanRepository, plan_id: str) -> FullPlan:
    plan = repo.get(plan_id)
    if plan is None:
        logger.info("Plan %s not found", plan_id)
        raise HTTPException(status_code=404, detail="Plan not found")
    return plan


def _progress_json(summary: Dict[str, Any]) -> Dict[str, Any]:
    """Make a progress summary JSON-friendly (dates as ISO strings, weeks as dicts)."""
    out = {}
    for key, value in summary.items():
        if isinstance(value, _date):
            out[key] = value.strftime(DATE_FORMAT)
        elif hasattr(value, "to_dict"):
            out[key] = value.to_dict()
        else:
            out[key] = value
    return out


# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "sex_options": list(Sex),
            "activity_levels": [(level.value, *ACTIVITY_LABELS[level]) for level in ActivityLevel],
            "default_start_date": _date.today().strftime(DATE_FORMAT),
        }
    )


@app.get("/plan/{plan_id}", response_class=HTMLResponse)
def plan_page(request: Request, plan_id: str, today: Optional[_date] = Query(default=None),
              repo: PlanRepository = Depends(get_repository)):
    plan = _load_plan_or_404(repo, plan_id)
    today = today or _date.today()
    summary = summarize_progress(plan, today)
    current = summary["current_week"]
    return templates.TemplateResponse(
        request,
        "plan.html",
        {
            "plan_id": plan_id,
            "plan": plan,
            "summary": summary,
            "chart": build_chart_series(plan, current.week_number if current else None),
            "phase_colors": {phase.value: color for phase, color in PHASE_COLORS.items()},
        }
    )


# -------------------- API --------------------
@app.post("/api/create-plan", status_code=201)
async def create_plan(request: Request, repo: PlanRepository = Depends(get_repository)):
    logger.info("Create plan request received")
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Create plan request body is not valid JSON")
        return JSONResponse(status_code=400, content={"error": "Invalid input data", "details": [
            {"field": "", "message": "Request body must be valid JSON"}
        ]})

    try:
        plan_input = collect_plan_input(payload)
        plan = generate_plan(plan_input)
    except InvalidInput as e:
        logger.warning("Input validation failed: %s", e.errors)
        return JSONResponse(status_code=400, content={"error": "Invalid input data", "details": e.errors})
    except DateParseError as e:
        logger.warning("Start date rejected: %s", e)
        return JSONResponse(status_code=400, content={"error": "Invalid input data", "details": [
            {"field": "startDate", "message": str(e)}
        ]})
    except Exception:
        logger.exception("Plan generation failed")
        return JSONResponse(status_code=500, content={"error": "Failed to create plan."})

    if not plan:
        logger.error("Plan generation returned an empty plan")
        return JSONResponse(status_code=500, content={"error": "Failed to create plan."})

    try:
        plan_id = repo.create(plan)
    except Exception:
        logger.exception("Storing generated plan failed")
        return JSONResponse(status_code=500, content={"error": "Failed to create plan."})

    logger.info("Created plan %s with %s weeks", plan_id, len(plan))
    return {"plan_id": plan_id}


@app.get("/api/plan/{plan_id}")
def get_plan(plan_id: str, today: Optional[_date] = Query(default=None),
             repo: PlanRepository = Depends(get_repository)):
    plan = _load_plan_or_404(repo, plan_id)
    summary = summarize_progress(plan, today or _date.today())
    current = summary["current_week"]
    return {
        "plan_id": plan_id,
        "weeks": plan_to_dicts(plan),
        "progress": _progress_json(summary),
        "chart": build_chart_series(plan, current.week_number if current else None),
    }


@app.get("/plan/{plan_id}/pdf")
def export_pdf(plan_id: str, today: Optional[_date] = Query(default=None),
               repo: PlanRepository = Depends(get_repository)):
    plan = _load_plan_or_404(repo, plan_id)
    summary = summarize_progress(plan, today or _date.today())
    pdf_bytes = generate_pdf_for_plan(plan, summary)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=reverse_diet_plan_{plan_id}.pdf"
        },
    )
