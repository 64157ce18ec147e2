from app.services.ai_service import (
    build_question_prompt,
    extract_text,
    generate_questions,
    parse_questions,
)
from app.services.pdf_service import download_pdf
from app.services.quiz_service import generate_quiz

__all__ = [
    "build_question_prompt",
    "download_pdf",
    "extract_text",
    "generate_questions",
    "generate_quiz",
    "parse_questions",
]
