import json
import logging
import re
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from app.core.auth import get_current_user_id
from app.exceptions import InvalidQuizConfigError, MissingRequiredFieldsError
from app.schemas import quiz as quiz_schema
from app.services import quiz_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["quiz"])

# config[questionCount]=10, config[questionTypes][]=multiple-choice
_CONFIG_FORM_KEY = re.compile(r"^config\[(\w+)\](\[\d*\])?$")


def _form_to_dict(form: FormData) -> dict[str, Any]:
    """폼 바디를 JSON 바디와 같은 형태로 변환"""
    data: dict[str, Any] = {}
    config: dict[str, Any] = {}

    for key, value in form.multi_items():
        if not isinstance(value, str):
            continue
        match = _CONFIG_FORM_KEY.match(key)
        if match:
            name, is_list = match.groups()
            if is_list:
                config.setdefault(name, []).append(value)
            else:
                config[name] = value
        elif key == "config":
            # config를 JSON 문자열로 보낸 경우
            try:
                data["config"] = json.loads(value)
            except ValueError:
                data["config"] = value
        else:
            data[key] = value

    if config and "config" not in data:
        data["config"] = config
    return data


async def read_request_body(request: Request) -> dict[str, Any]:
    """JSON / urlencoded / multipart 바디 읽기 (읽을 수 없으면 빈 바디로 취급)"""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            logger.debug("JSON 바디 파싱 실패, 빈 바디로 처리")
            return {}
        return data if isinstance(data, dict) else {}

    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        try:
            form = await request.form()
        except (HTTPException, MultiPartException):
            logger.debug("폼 바디 파싱 실패, 빈 바디로 처리")
            return {}
        return _form_to_dict(form)

    return {}


def _is_missing(value: Any) -> bool:
    # 빈 객체/배열은 값이 있는 것으로 취급
    if isinstance(value, (dict, list)):
        return False
    return not value


def parse_quiz_request(body: dict[str, Any]) -> quiz_schema.QuizGenerationRequest:
    """요청 바디 검증 (필드 누락: Missing required fields, config 오류: Invalid quiz configuration)"""
    if _is_missing(body.get("pdfUrl")) or _is_missing(body.get("config")):
        raise MissingRequiredFieldsError()

    try:
        return quiz_schema.QuizGenerationRequest.model_validate(
            {"pdfUrl": body["pdfUrl"], "config": body["config"]}
        )
    except ValidationError as e:
        logger.warning(f"요청 검증 오류: {e.errors()}")
        if any(error["loc"] and error["loc"][0] == "config" for error in e.errors()):
            raise InvalidQuizConfigError()
        raise MissingRequiredFieldsError()


@router.post(
    "/generate-quiz",
    response_model=quiz_schema.QuizGenerationResponse,
    responses={
        400: {"model": quiz_schema.MessageResponse},
        401: {"model": quiz_schema.MessageResponse},
        500: {"model": quiz_schema.ErrorResponse},
    },
)
async def generate_quiz(
    request: Request,
    user_id: str = Depends(get_current_user_id),
):
    """PDF 기반 퀴즈 생성 API"""
    body = await read_request_body(request)
    quiz_request = parse_quiz_request(body)
    return await quiz_service.generate_quiz(quiz_request, user_id)
