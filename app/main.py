import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1.onboarding import router as onboarding_router
from app.application.exceptions import (
    InvalidSelectionStateError,
    InvalidSubcategoryError,
    RegistrationNotFoundError,
    SelectionSessionNotFoundError,
)
from app.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("registration_id", "category", "previous_category", "subcategory", "subcategories", "discarded", "count", "path", "reason", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Supplier Onboarding", version="1.0.0")

app.include_router(onboarding_router, prefix="/api/v1", tags=["onboarding"])


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


@app.exception_handler(SelectionSessionNotFoundError)
def selection_not_found(request: Request, exc: SelectionSessionNotFoundError) -> JSONResponse:
    return _error(404, "Selection session not found")


@app.exception_handler(RegistrationNotFoundError)
def registration_not_found(request: Request, exc: RegistrationNotFoundError) -> JSONResponse:
    return _error(404, "Registration not found")


@app.exception_handler(InvalidSelectionStateError)
def invalid_selection_state(request: Request, exc: InvalidSelectionStateError) -> JSONResponse:
    return _error(409, str(exc))


@app.exception_handler(InvalidSubcategoryError)
def invalid_subcategory(request: Request, exc: InvalidSubcategoryError) -> JSONResponse:
    logging.getLogger(__name__).info(
        "Rejected subcategory",
        extra={"subcategory": exc.label, "category": exc.category_id},
    )
    return _error(422, str(exc))


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
