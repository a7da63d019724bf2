class ApiError(Exception):
    """Base for errors that end a request with a plain-text status response."""
    status_code = 500
    message = "erro interno"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DecodeError(ApiError):
    status_code = 400
    message = "json inválido"


class InvalidIdentifier(ApiError):
    status_code = 400
    message = "id inválido"


class MethodNotAllowed(ApiError):
    status_code = 405
    message = "método não permitido"


class NotFound(ApiError):
    status_code = 404
    message = "torneio não encontrado"

    def __init__(self, tournament_id: int = None, message: str = None):
        self.tournament_id = tournament_id
        super().__init__(message)
