from typing import Optional


class PredictionError(Exception):
    """
    Base class for every failure of a single prediction request.
    Each subclass knows the HTTP status it maps to.
    """

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def to_body(self) -> dict:
        body = {"message": self.message}
        if self.detail:
            body["error"] = self.detail
        return body


# client-supplied data malformed
class InvalidInput(PredictionError):
    status_code = 400
    default_message = "Missing or invalid parameters. Please ensure all fields are filled correctly."


# upstream answered with an explicit error string
class UpstreamRejected(PredictionError):
    status_code = 400
    default_message = "Prediction service rejected the request."


class ParseFailure(PredictionError):
    status_code = 500
    default_message = "Could not parse yield from server response."


class InvalidNumber(PredictionError):
    status_code = 500
    default_message = "Prediction returned an invalid number."


class UpstreamTimeout(PredictionError):
    status_code = 504
    default_message = "Prediction service timed out."


class TransportFailure(PredictionError):
    status_code = 500
    default_message = "Internal Server Error"
