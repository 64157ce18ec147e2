from app.schemas.quiz import (
    ErrorResponse,
    GenerationConfig,
    MessageResponse,
    QuizGenerationRequest,
    QuizGenerationResponse,
    QuizOption,
    QuizQuestion,
)

__all__ = [
    "GenerationConfig",
    "QuizGenerationRequest",
    "QuizGenerationResponse",
    "QuizOption",
    "QuizQuestion",
    "MessageResponse",
    "ErrorResponse",
]
