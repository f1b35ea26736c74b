from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from copyspark import config
from copyspark.api.routes import router
from copyspark.errors import FieldIssue
from copyspark.logging_utils import configure_logging
from copyspark.schemas import FORM_MESSAGE_KINDS, FORM_MESSAGES

configure_logging(config.LOG_LEVEL)

app = FastAPI(
    title="CopySpark",
    version="0.1.0",
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _form_issue(err: dict) -> FieldIssue:
    # drop the leading "body" segment FastAPI adds
    path = ".".join(str(p) for p in err.get("loc", ())[1:])
    kind = err.get("type", "value_error")
    message = err.get("msg", "invalid value")
    if kind in FORM_MESSAGE_KINDS:
        message = FORM_MESSAGES.get(path, message)
    return FieldIssue(path=path, message=message, kind=kind)


@app.exception_handler(RequestValidationError)
async def form_validation_handler(request: Request, exc: RequestValidationError):
    issues = [_form_issue(err) for err in exc.errors()]
    return JSONResponse(
        status_code=422,
        content={
            "status": "error",
            "code": "INVALID_INPUT",
            "message": f"{len(issues)} invalid field(s)",
            "details": {"errors": [i.to_dict() for i in issues]},
        },
    )


# Routes AFTER middleware
app.include_router(router)
