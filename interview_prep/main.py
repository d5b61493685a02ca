from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from interview_prep.config import settings
from interview_prep.utils.logging import configure_logging
from interview_prep.routers.questions import router as questions_router
from interview_prep.routers.answers import router as answers_router
from interview_prep.utils.audit import auditor
from interview_prep.services.question_bank import question_bank


configure_logging()
auditor.configure(settings.analytics_path)
app = FastAPI(title="Interview Prep Question Service", version="0.1.0")

# CORS
app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.cors_allow_origins,
	# Wildcard origins require credentials to be False per CORS spec
	allow_credentials=False if settings.cors_allow_origins == ["*"] else True,
	allow_methods=["*"],
	allow_headers=["*"],
	max_age=3600,
)


@app.get("/health")
async def health() -> JSONResponse:
	return JSONResponse({
		"status": "ok",
		"version": app.version,
		"catalog": {"domains": len(question_bank.domains()), "audit": auditor.enabled},
	})


# Routers
app.include_router(questions_router, prefix="/api", tags=["questions"])
app.include_router(answers_router, prefix="/api", tags=["answers"])
