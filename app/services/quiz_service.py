import logging

from app.exceptions import PDFTextExtractionError, QuestionGenerationError
from app.schemas.quiz import QuizGenerationRequest, QuizGenerationResponse
from app.services import ai_service, pdf_service

logger = logging.getLogger(__name__)


async def generate_quiz(request: QuizGenerationRequest, user_id: str) -> QuizGenerationResponse:
    """PDF 다운로드 → 텍스트 추출 → 문제 생성 → 파싱 (순차 실행, 재시도 없음)"""
    logger.info(f"퀴즈 생성 시작: user_id={user_id}, pdf_url={request.pdf_url}")

    pdf_bytes = await pdf_service.download_pdf(request.pdf_url)

    extracted_text = await ai_service.extract_text(pdf_bytes)
    if not extracted_text:
        raise PDFTextExtractionError()
    logger.info(f"텍스트 추출 완료: {len(extracted_text)}자")

    generated = await ai_service.generate_questions(extracted_text, request.config)
    if not generated:
        raise QuestionGenerationError()

    questions = ai_service.parse_questions(generated)
    malformed = ai_service.check_question_shape(questions)
    count = len(questions) if isinstance(questions, list) else type(questions).__name__

    logger.info(
        f"퀴즈 생성 완료: user_id={user_id}, questions={count}, "
        f"requested={request.config.question_count}, malformed={malformed}"
    )
    return QuizGenerationResponse(questions=questions)
