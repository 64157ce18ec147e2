import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.api.v1 import quiz
from app.core.config import settings
from app.core.logging import setup_logging
from app.exceptions import BaseAppError

# 로깅 설정
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PDF Quiz Generator API",
    description="PDF 학습 자료로 객관식 퀴즈를 생성하는 백엔드 API",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials="*" not in settings.allowed_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz.router, prefix="/api")

if settings.auth_verification == "passthrough":
    logger.warning("AUTH_VERIFICATION=passthrough: Authorization 토큰을 검증하지 않습니다")
elif not settings.supabase_url or not settings.supabase_anon_key:
    logger.warning("SUPABASE_URL / SUPABASE_ANON_KEY 미설정: 인증이 필요한 요청은 실패합니다")


def create_cors_response(
    status_code: int,
    content: dict,
    request: Request,
) -> JSONResponse:
    """CORS 헤더를 포함한 JSONResponse 생성"""
    response = JSONResponse(
        status_code=status_code,
        content=content,
    )
    # 예외 핸들러 응답은 CORS 미들웨어를 거치지 않을 수 있음
    origin = request.headers.get("origin")
    allowed = settings.allowed_origins_list
    if origin and ("*" in allowed or origin in allowed):
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Methods"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "*"
        if "*" not in allowed:
            response.headers["Access-Control-Allow-Credentials"] = "true"
    return response


@app.exception_handler(BaseAppError)
async def app_exception_handler(request: Request, exc: BaseAppError):
    """애플리케이션 커스텀 예외 핸들러"""
    logger.warning(
        f"Application error: {exc.__class__.__name__} - {exc.message}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
        }
    )
    return create_cors_response(
        status_code=exc.status_code,
        content={"message": exc.message},
        request=request,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """전역 예외 핸들러 - 모든 미처리 예외를 로깅"""
    logger.error(
        f"Unhandled exception: {exc.__class__.__name__}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        }
    )

    # 프로덕션 환경에서는 상세 에러 메시지 숨김
    error = exc.__class__.__name__ if settings.environment == "production" else str(exc)
    return create_cors_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error", "error": error},
        request=request,
    )


@app.get("/", response_class=PlainTextResponse)
async def root():
    """루트 엔드포인트"""
    return "PDF Quiz Generator API is running"


@app.get("/health")
async def health_check():
    """헬스 체크 엔드포인트"""
    return {"status": "healthy"}


def run():
    """uvicorn으로 서버 실행"""
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
