"""커스텀 예외 클래스 정의"""


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UnauthorizedError(BaseAppError):
    """인증 정보가 없거나 검증에 실패했을 때 (401)"""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status_code=401)


class MissingRequiredFieldsError(BaseAppError):
    """pdfUrl 또는 config 누락 (400)"""

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message, status_code=400)


class InvalidQuizConfigError(BaseAppError):
    """config 형식이 잘못되었을 때 (400)"""

    def __init__(self, message: str = "Invalid quiz configuration"):
        super().__init__(message, status_code=400)


class PDFDownloadError(BaseAppError):
    """PDF 다운로드 실패 (400)"""

    def __init__(self, message: str = "Failed to download PDF"):
        super().__init__(message, status_code=400)


class PDFTextExtractionError(BaseAppError):
    """PDF 텍스트 추출 결과가 비어있을 때 (400)"""

    def __init__(self, message: str = "Failed to extract text from PDF"):
        super().__init__(message, status_code=400)


class QuestionGenerationError(BaseAppError):
    """문제 생성 응답이 비어있을 때 (500)"""

    def __init__(self, message: str = "Failed to generate questions"):
        super().__init__(message, status_code=500)
