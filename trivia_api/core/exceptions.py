class TriviaError(Exception):
    """Base class for errors that map onto a stable client-facing code."""

    status_code = 500
    message = "Something went wrong!"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    @property
    def code(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class InvalidRequest(TriviaError):
    status_code = 400
    message = "Missing required fields"


class QuestionNotFound(TriviaError):
    status_code = 404
    message = "Question not found"


class PersonNotFound(TriviaError):
    status_code = 404
    message = "Person not found"


class NoQuestionsAvailable(TriviaError):
    status_code = 404
    message = "No questions found"


class StoreUnavailable(TriviaError):
    """Transient database failure; nothing was written, safe to retry."""

    status_code = 503
    message = "Database is unavailable, try again later"


class ExchangeRateUnavailable(TriviaError):
    status_code = 502
    message = "Failed to fetch exchange rate data"


class ExchangeRateNotConfigured(TriviaError):
    status_code = 503
    message = "Exchange rate API is not configured"
