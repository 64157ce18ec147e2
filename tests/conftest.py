"""공통 테스트 픽스처"""
import json

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app


def make_questions(count: int) -> list[dict]:
    """4지선다 + 정답 1개 형식의 샘플 문제"""
    questions = []
    for n in range(1, count + 1):
        questions.append({
            "id": f"q-{n}",
            "text": f"샘플 문제 {n}",
            "options": [
                {"id": f"q-{n}-{letter}", "text": f"선택지 {letter}", "isCorrect": letter == "b"}
                for letter in "abcd"
            ],
            "explanation": "b가 정답인 이유",
        })
    return questions


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """테스트마다 인증/환경 설정 초기화 (API 테스트는 passthrough 모드를 명시적으로 사용)"""
    monkeypatch.setattr(settings, "environment", "development")
    monkeypatch.setattr(settings, "auth_verification", "passthrough")
    monkeypatch.setattr(settings, "pdf_max_bytes", 20 * 1024 * 1024)


@pytest.fixture
def client():
    """테스트 클라이언트 (전역 예외 핸들러의 500 응답을 확인하기 위해 서버 예외를 다시 던지지 않음)"""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer user-123"}


@pytest.fixture
def quiz_payload():
    return {
        "pdfUrl": "https://x/test.pdf",
        "config": {"questionCount": 3, "difficultyLevel": "easy"},
    }


@pytest.fixture
def generated_three_questions():
    """모델이 반환하는 JSON 원문 (문제 3개)"""
    return json.dumps({"questions": make_questions(3)})
