import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from copyspark.api.serializers import serialize_error, serialize_result
from copyspark.errors import (
    CopySparkError,
    InvalidInput,
    InvalidModelOutput,
    InvocationError,
)
from copyspark.flows import GenerationFlow, ad_copy_flow, seo_flow, social_post_flow
from copyspark.inference import ModelInvoker, get_model_invoker
from copyspark.logging_utils import get_logger, log_event
from copyspark.schemas import AdCopyForm, FormOptions, SeoForm, SocialPostForm

router = APIRouter(
    prefix="",
    tags=["generator"],
)

_log = get_logger("api")

STATUS_BY_ERROR = {
    InvalidInput: 422,
    InvocationError: 502,
    InvalidModelOutput: 502,
}


def _status_for(error: CopySparkError) -> int:
    if isinstance(error, InvocationError) and error.timeout:
        return 504
    for cls, status in STATUS_BY_ERROR.items():
        if isinstance(error, cls):
            return status
    return 500


async def _run_flow(flow: GenerationFlow, payload: dict):
    try:
        result = await flow.run(payload)
    except CopySparkError as e:
        log_event(logging.WARNING, "flow failed", _log, flow=flow.name, code=e.code)
        return JSONResponse(status_code=_status_for(e), content=serialize_error(e))
    except Exception:
        _log.exception("unexpected error in %s", flow.name)
        return JSONResponse(
            status_code=500,
            content={
                "status": "error",
                "code": "INTERNAL_ERROR",
                "message": "Generation failed. Please try again.",
                "details": {"flow": flow.name},
            },
        )
    return serialize_result(result)


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/options", response_model=FormOptions)
def form_options():
    return FormOptions()


@router.post("/ad-copy")
async def generate_ad_copy(
    form: AdCopyForm,
    invoker: ModelInvoker = Depends(get_model_invoker),
):
    return await _run_flow(ad_copy_flow(invoker), form.to_payload())


@router.post("/social-media")
async def generate_social_media(
    form: SocialPostForm,
    invoker: ModelInvoker = Depends(get_model_invoker),
):
    return await _run_flow(social_post_flow(invoker), form.to_payload())


@router.post("/seo")
async def optimize_seo(
    form: SeoForm,
    invoker: ModelInvoker = Depends(get_model_invoker),
):
    return await _run_flow(seo_flow(invoker), form.to_payload())
