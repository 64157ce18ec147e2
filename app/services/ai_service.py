import asyncio
import json
import logging
import os
from typing import Any

from google import genai
from google.genai import types

from app.core.config import settings
from app.schemas.quiz import GenerationConfig, QuizQuestion

logger = logging.getLogger(__name__)

_gemini_client: genai.Client | None = None

EXTRACTION_INSTRUCTION = "Extract the text content from this PDF document."

SYSTEM_INSTRUCTION = "You are an AI assistant that generates quiz questions based on educational content."


def get_gemini_client() -> genai.Client:
    """Gemini 클라이언트 싱글톤"""
    global _gemini_client
    if _gemini_client is None:
        api_key = settings.gemini_api_key or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ValueError("GEMINI_API_KEY가 설정되지 않았습니다")
        _gemini_client = genai.Client(api_key=api_key)
    return _gemini_client


async def _generate_content(model: str, contents: Any, config: types.GenerateContentConfig):
    # Gemini 클라이언트는 동기 API이므로 executor에서 실행
    client = get_gemini_client()
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        lambda: client.models.generate_content(
            model=model,
            contents=contents,
            config=config,
        ),
    )


async def extract_text(pdf_bytes: bytes) -> str | None:
    """PDF 전체를 한 번에 Gemini에 보내 텍스트 추출 (분할 없음, 재시도 없음)"""
    logger.info(f"PDF 텍스트 추출 요청: {len(pdf_bytes)} bytes")
    response = await _generate_content(
        model=settings.gemini_extraction_model,
        contents=[
            EXTRACTION_INSTRUCTION,
            types.Part.from_bytes(data=pdf_bytes, mime_type="application/pdf"),
        ],
        config=types.GenerateContentConfig(
            max_output_tokens=settings.extraction_max_output_tokens,
        ),
    )
    return response.text


def build_question_prompt(text: str, config: GenerationConfig) -> str:
    """문제 생성 프롬프트 (난이도 라벨은 검증 없이 그대로 삽입)"""
    return f"""You are a professional educator creating a quiz for students. Generate {config.question_count} high-quality
{config.difficulty_level} difficulty quiz questions based on the following text content.

For each question:
1. Create a clear, concise question
2. Provide 4 answer options (A, B, C, D) with one correct answer
3. Include a brief explanation of the correct answer

The quiz should focus on key concepts and important details from the text.

Text content:
{text}

Format your response as a valid JSON object with a single "questions" field holding an array of objects, each with:
- id: a unique string identifier (q-1, q-2, etc.)
- text: the question text
- options: an array of objects with id (q-1-a, q-1-b, q-1-c, q-1-d), text (the option text), and isCorrect (boolean)
- explanation: brief explanation of the correct answer

Example:
{{
  "questions": [
    {{
      "id": "q-1",
      "text": "What is the main concept described in paragraph 2?",
      "options": [
        {{ "id": "q-1-a", "text": "Option A", "isCorrect": false }},
        {{ "id": "q-1-b", "text": "Option B", "isCorrect": true }},
        {{ "id": "q-1-c", "text": "Option C", "isCorrect": false }},
        {{ "id": "q-1-d", "text": "Option D", "isCorrect": false }}
      ],
      "explanation": "Option B is correct because..."
    }}
  ]
}}

Return only the JSON object and nothing else."""


async def generate_questions(text: str, config: GenerationConfig) -> str | None:
    """추출된 텍스트로 문제 생성 (JSON 응답 모드, 응답 원문 반환)"""
    logger.info(
        f"문제 생성 요청: question_count={config.question_count}, "
        f"difficulty_level={config.difficulty_level}, text_length={len(text)}"
    )
    response = await _generate_content(
        model=settings.gemini_generation_model,
        contents=build_question_prompt(text, config),
        config=types.GenerateContentConfig(
            system_instruction=SYSTEM_INSTRUCTION,
            temperature=settings.generation_temperature,
            response_mime_type="application/json",
        ),
    )
    return response.text


def parse_questions(raw: str) -> Any:
    """모델 응답에서 questions 값 추출

    JSON 파싱 실패는 그대로 전파한다. 객체에 questions가 없으면 빈 목록, 최상위가 배열이면
    빈 목록을 반환한다. null이나 숫자/문자열 같은 최상위 값은 ValueError로 실패시킨다.
    questions 값은 배열이 아니어도 그대로 반환한다.
    """
    data = json.loads(raw)

    if isinstance(data, list):
        logger.warning("문제 생성 응답이 배열임 (questions 객체 아님), 빈 목록 반환")
        return []
    if not isinstance(data, dict):
        raise ValueError(f"문제 생성 응답이 JSON 객체가 아닙니다: {raw[:100]}")

    questions = data.get("questions") or []
    if not questions:
        logger.warning("문제 생성 응답에 questions가 없음, 빈 목록 반환")
    elif not isinstance(questions, list):
        logger.warning(f"questions 필드가 배열이 아님: type={type(questions).__name__}")
    return questions


def check_question_shape(questions: Any) -> int:
    """문제 형식 점검 (로그만 남기고 응답은 그대로 유지). 형식이 어긋난 문제 수를 반환"""
    if not isinstance(questions, list):
        return 1

    malformed = 0
    for position, question in enumerate(questions, start=1):
        try:
            parsed = QuizQuestion.model_validate(question)
        except ValueError as e:
            malformed += 1
            logger.warning(f"문제 형식 불일치: position={position}, error={str(e)[:200]}")
            continue
        if parsed.correct_option_count != 1:
            malformed += 1
            logger.warning(
                f"정답 개수 불일치: id={parsed.id}, correct_options={parsed.correct_option_count}"
            )
    return malformed
