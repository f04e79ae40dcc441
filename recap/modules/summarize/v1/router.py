from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from recap.constants import ErrorMessage
from recap.env import get_openai_api_key
from recap.logs import get_logger
from recap.modules.monitoring import SUMMARY_ERROR_COUNTER

from ..processor import EmptyCompletionError, summarize
from ..providers import UpstreamError
from .models import ErrorResponse, SummaryPayload, SummaryResult

log = get_logger(__name__)

router = APIRouter()


def error_response(message: ErrorMessage, status_code: int) -> JSONResponse:
    SUMMARY_ERROR_COUNTER.labels(reason=message.name.lower()).inc()

    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message.value).model_dump())


def get_text(body) -> str | None:
    text = body.get('text') if isinstance(body, dict) else None

    return text if text and isinstance(text, str) else None


@router.post(
    '/summarize',
    response_model=SummaryResult,
    responses={400: {'model': ErrorResponse}, 500: {'model': ErrorResponse}},
    openapi_extra={
        'requestBody': {
            'required': True,
            'content': {'application/json': {'schema': SummaryPayload.model_json_schema()}},
        }
    },
)
async def create_summary(request: Request) -> JSONResponse:
    """
    Summarizes the transcript in the request body and extracts its key points.
    """

    try:
        text = get_text(await request.json())
        if text is None:
            return error_response(ErrorMessage.TEXT_REQUIRED, 400)

        api_key = get_openai_api_key()
        if not api_key:
            return error_response(ErrorMessage.API_KEY_NOT_CONFIGURED, 500)

        try:
            result = await summarize(text, api_key)
        except UpstreamError:
            return error_response(ErrorMessage.UPSTREAM_FAILURE, 500)
        except EmptyCompletionError:
            return error_response(ErrorMessage.NO_CONTENT, 500)

        return JSONResponse(content=result)
    except Exception as e:
        log.error(f'Summary generation error: {e}')

        return error_response(ErrorMessage.INTERNAL, 500)
