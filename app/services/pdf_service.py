import logging

import httpx

from app.core.config import settings
from app.exceptions import PDFDownloadError

logger = logging.getLogger(__name__)


async def download_pdf(url: str, client: httpx.AsyncClient | None = None) -> bytes:
    """URL에서 PDF를 내려받아 바이트로 반환 (재시도 없음, 크기 제한 적용)

    주입된 client는 닫지 않는다.
    """
    if client is None:
        async with httpx.AsyncClient(
            timeout=settings.pdf_download_timeout,
            follow_redirects=True,
        ) as own_client:
            return await _fetch(own_client, url)
    return await _fetch(client, url)


async def _fetch(client: httpx.AsyncClient, url: str) -> bytes:
    max_bytes = settings.pdf_max_bytes

    async with client.stream("GET", url) as response:
        if not response.is_success:
            logger.warning(f"PDF 다운로드 실패: status_code={response.status_code}, url={url}")
            raise PDFDownloadError()

        content_length = response.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > max_bytes:
            logger.warning(f"PDF 크기 제한 초과: content_length={content_length}, max_bytes={max_bytes}")
            raise PDFDownloadError()

        buffer = bytearray()
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) > max_bytes:
                logger.warning(f"PDF 크기 제한 초과: max_bytes={max_bytes}, url={url}")
                raise PDFDownloadError()

    logger.debug(f"PDF 다운로드 완료: {len(buffer)} bytes")
    return bytes(buffer)
