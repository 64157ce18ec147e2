from typing import Any

from pydantic import BaseModel, Field, field_validator


class GenerationConfig(BaseModel):
    """문제 생성 설정 (대시보드 QuizConfig 호환: camelCase 필드명)"""
    question_count: int = Field(10, alias="questionCount", ge=1, description="생성할 문제 수")
    # 난이도는 검증하지 않고 프롬프트에 그대로 전달 (easy / medium / hard / mixed 등)
    difficulty_level: str = Field("medium", alias="difficultyLevel", description="난이도 라벨")

    # 대시보드가 함께 보내는 필드 (생성에는 사용하지 않음)
    title: str | None = Field(None, description="퀴즈 제목")
    course_id: str | None = Field(None, alias="courseId", description="과목 ID")
    question_types: list[str] | None = Field(None, alias="questionTypes", description="문제 유형")

    model_config = {"populate_by_name": True}

    @field_validator("course_id", mode="before")
    @classmethod
    def stringify_course_id(cls, v: Any) -> Any:
        """숫자형 과목 ID도 문자열로 허용"""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class QuizGenerationRequest(BaseModel):
    """POST /api/generate-quiz 요청 바디"""
    pdf_url: str = Field(..., alias="pdfUrl", min_length=1, description="PDF 다운로드 URL")
    config: GenerationConfig

    model_config = {"populate_by_name": True}


class QuizOption(BaseModel):
    """선택지 (id 규칙: q-<n>-<a|b|c|d>)"""
    id: str
    text: str
    is_correct: bool = Field(..., alias="isCorrect")

    model_config = {"populate_by_name": True}


class QuizQuestion(BaseModel):
    """생성된 문제 (id 규칙: q-<n>)"""
    id: str
    text: str
    options: list[QuizOption] = Field(..., min_length=4, max_length=4, description="선택지 (4개)")
    explanation: str

    @property
    def correct_option_count(self) -> int:
        return sum(1 for option in self.options if option.is_correct)


class QuizGenerationResponse(BaseModel):
    """문제 생성 응답

    모델 출력은 형식을 강제하지 않고 그대로 전달한다.
    """
    questions: Any = Field(default_factory=list)


class MessageResponse(BaseModel):
    """에러 응답"""
    message: str


class ErrorResponse(MessageResponse):
    """처리되지 않은 예외 응답"""
    error: str
