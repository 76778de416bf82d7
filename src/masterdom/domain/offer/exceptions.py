"""Offer domain exceptions."""

from masterdom.domain.shared.exceptions import (
    AuthorizationError,
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)


class OfferNotFoundError(NotFoundError):
    """Offer not found."""

    def __init__(self, offer_id: int) -> None:
        self.offer_id = offer_id
        super().__init__(
            "Offer not found",
            code=ErrorCode.OFFER_NOT_FOUND,
            details={"offer_id": offer_id},
        )


class DuplicateResponseError(ConflictError):
    """Applicant has already responded to this offer."""

    def __init__(self, offer_id: int, applicant_id: str) -> None:
        super().__init__(
            "You have already responded to this offer",
            code=ErrorCode.DUPLICATE_RESPONSE,
            details={"offer_id": offer_id, "applicant_id": applicant_id},
        )


class NotOfferAuthorError(AuthorizationError):
    """Only the offer's author may view its applications."""

    def __init__(self, offer_id: int) -> None:
        super().__init__(
            "Only the author of this offer can view its applications",
            code=ErrorCode.NOT_OFFER_AUTHOR,
            details={"offer_id": offer_id},
        )


class InvalidOfferError(ValidationError):
    """Offer data failed validation."""
