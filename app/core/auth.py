import logging

import httpx
from fastapi import Header

from app.core.config import settings
from app.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def extract_token(authorization: str | None) -> str:
    """'<scheme> <token>' 형식의 헤더에서 토큰 추출"""
    if not authorization or not authorization.strip():
        raise UnauthorizedError()

    # 공백 하나 기준으로 분리 (연속 공백이면 토큰이 빈 문자열이 되어 401)
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        raise UnauthorizedError()
    return parts[1]


async def verify_supabase_token(token: str, client: httpx.AsyncClient | None = None) -> str:
    """Supabase Auth에 토큰을 검증하고 사용자 ID 반환"""
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise ValueError("SUPABASE_URL / SUPABASE_ANON_KEY가 설정되지 않았습니다")

    url = f"{settings.supabase_url.rstrip('/')}/auth/v1/user"
    headers = {
        "apikey": settings.supabase_anon_key,
        "Authorization": f"Bearer {token}",
    }

    if client is None:
        async with httpx.AsyncClient(timeout=10.0) as own_client:
            response = await own_client.get(url, headers=headers)
    else:
        response = await client.get(url, headers=headers)

    if response.status_code != 200:
        logger.warning(f"토큰 검증 실패: status_code={response.status_code}")
        raise UnauthorizedError()

    user_id = response.json().get("id")
    if not user_id:
        logger.warning("토큰 검증 응답에 사용자 ID 없음")
        raise UnauthorizedError()
    return user_id


async def get_current_user_id(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> str:
    """요청 사용자 ID (인증 의존성)

    passthrough 모드는 토큰을 검증하지 않고 사용자 ID로 그대로 사용한다.
    대시보드가 'Bearer <user id>'를 보내기 때문에 남겨둔 호환 모드이며 실제 인증이 아니다.
    """
    token = extract_token(authorization)

    if settings.auth_verification == "supabase":
        return await verify_supabase_token(token)

    logger.warning("검증되지 않은 토큰을 사용자 ID로 사용 (AUTH_VERIFICATION=passthrough)")
    return token
