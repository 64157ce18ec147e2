"""Quiz Service 테스트"""
import json
from unittest.mock import AsyncMock, patch

import pytest

from app.exceptions import PDFDownloadError, PDFTextExtractionError, QuestionGenerationError
from app.schemas import quiz as quiz_schema
from app.services import quiz_service
from tests.conftest import make_questions


@pytest.fixture
def quiz_request():
    return quiz_schema.QuizGenerationRequest(
        pdf_url="https://x/test.pdf",
        config=quiz_schema.GenerationConfig(question_count=2, difficulty_level="medium"),
    )


@pytest.mark.asyncio
async def test_generate_quiz_runs_stages_in_order(quiz_request):
    """다운로드 → 추출 → 생성 순서로 실행"""
    calls = []

    async def fake_download(url):
        calls.append("download")
        return b"%PDF"

    async def fake_extract(pdf_bytes):
        calls.append("extract")
        return "본문"

    async def fake_generate(text, config):
        calls.append("generate")
        return json.dumps({"questions": make_questions(2)})

    with patch("app.services.pdf_service.download_pdf", side_effect=fake_download):
        with patch("app.services.ai_service.extract_text", side_effect=fake_extract):
            with patch("app.services.ai_service.generate_questions", side_effect=fake_generate):
                response = await quiz_service.generate_quiz(quiz_request, "user-1")

    assert calls == ["download", "extract", "generate"]
    assert len(response.questions) == 2


@pytest.mark.asyncio
async def test_generate_quiz_download_error_stops_pipeline(quiz_request):
    with patch("app.services.pdf_service.download_pdf", new_callable=AsyncMock, side_effect=PDFDownloadError()):
        with patch("app.services.ai_service.extract_text", new_callable=AsyncMock) as mock_extract:
            with pytest.raises(PDFDownloadError):
                await quiz_service.generate_quiz(quiz_request, "user-1")

    mock_extract.assert_not_called()


@pytest.mark.asyncio
async def test_generate_quiz_extraction_none(quiz_request):
    """추출 결과가 None이면 PDFTextExtractionError"""
    with patch("app.services.pdf_service.download_pdf", new_callable=AsyncMock, return_value=b"%PDF"):
        with patch("app.services.ai_service.extract_text", new_callable=AsyncMock, return_value=None):
            with patch("app.services.ai_service.generate_questions", new_callable=AsyncMock) as mock_generate:
                with pytest.raises(PDFTextExtractionError):
                    await quiz_service.generate_quiz(quiz_request, "user-1")

    mock_generate.assert_not_called()


@pytest.mark.asyncio
async def test_generate_quiz_generation_empty(quiz_request):
    with patch("app.services.pdf_service.download_pdf", new_callable=AsyncMock, return_value=b"%PDF"):
        with patch("app.services.ai_service.extract_text", new_callable=AsyncMock, return_value="본문"):
            with patch("app.services.ai_service.generate_questions", new_callable=AsyncMock, return_value=""):
                with pytest.raises(QuestionGenerationError):
                    await quiz_service.generate_quiz(quiz_request, "user-1")


@pytest.mark.asyncio
async def test_generate_quiz_keeps_malformed_questions(quiz_request):
    """형식이 어긋난 문제도 걸러내지 않고 그대로 반환"""
    malformed = [{"id": "q-1", "text": "선택지 부족", "options": [], "explanation": ""}]
    with patch("app.services.pdf_service.download_pdf", new_callable=AsyncMock, return_value=b"%PDF"):
        with patch("app.services.ai_service.extract_text", new_callable=AsyncMock, return_value="본문"):
            with patch(
                "app.services.ai_service.generate_questions",
                new_callable=AsyncMock,
                return_value=json.dumps({"questions": malformed}),
            ):
                response = await quiz_service.generate_quiz(quiz_request, "user-1")

    assert response.questions == malformed
