"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Auth
  2xxx: Cash card
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        self.headers = headers
        super().__init__(message)


# --- 1xxx: Auth ---

class AuthenticationFailedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            1001,
            "Invalid username or password",
            401,
            headers={"WWW-Authenticate": "Basic"},
        )


class CardOwnerRoleRequiredError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "CARD-OWNER role required", 403)


# --- 2xxx: Cash card ---

class CashCardNotFoundError(AppError):
    """Raised for absent ids and for ids owned by someone else alike."""

    def __init__(self, cash_card_id: int) -> None:
        super().__init__(2001, f"Cash card not found: {cash_card_id}", 404)


class InvalidSortError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2002, f"Invalid sort parameter: {detail}", 400)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
