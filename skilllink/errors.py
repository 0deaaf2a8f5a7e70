"""
Domain errors raised by the crud layer.

Each error carries the HTTP status it maps to; ``skilllink.main`` registers a
handler that renders them as ``{"message": ...}`` bodies.
"""


class SkillLinkError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(SkillLinkError):
    status_code = 400


class InvalidTransitionError(BadRequestError):
    pass


class ForbiddenError(SkillLinkError):
    status_code = 403


class NotFoundError(SkillLinkError):
    status_code = 404


class ConflictError(SkillLinkError):
    status_code = 409


class AlreadyAcceptedError(ConflictError):
    def __init__(self, request_id: int, acceptor_id: int):
        super().__init__("Request already accepted")
        self.request_id = request_id
        self.acceptor_id = acceptor_id
