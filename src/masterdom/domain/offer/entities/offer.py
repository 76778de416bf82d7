"""Offer entity."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from masterdom.domain.offer.entities.offer_type import OfferType
from masterdom.domain.offer.exceptions import InvalidOfferError
from masterdom.domain.shared.time import utc_now


class Offer:
    """
    A posting in the marketplace catalog.

    Offers are created active. Only admins toggle ``is_active``; inactive
    offers disappear from the public listing but stay visible in the
    admin back-office. ``id`` is assigned by the store on insert.
    """

    def __init__(  # NOQA: PLR0913
        self,
        author_id: UUID,
        offer_type: Union[str, OfferType],
        title: str,
        description: str = "",
        category_id: Optional[int] = None,
        is_active: bool = True,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        title = (title or "").strip()
        if not title:
            msg = "Offer title cannot be empty"
            raise InvalidOfferError(msg)

        self._id = id
        self._author_id = author_id
        self._offer_type = (
            offer_type if isinstance(offer_type, OfferType) else OfferType(offer_type)
        )
        self._title = title
        self._description = description or ""
        self._category_id = category_id
        self._is_active = is_active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def author_id(self) -> UUID:
        return self._author_id

    @property
    def offer_type(self) -> OfferType:
        return self._offer_type

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def category_id(self) -> Optional[int]:
        return self._category_id

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_authored_by(self, user_id: UUID) -> bool:
        return self._author_id == user_id

    def set_active(self, flag: bool) -> None:
        self._is_active = flag
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Offer):
            return NotImplemented
        return self._id is not None and self._id == other._id

    def __hash__(self) -> int:
        return hash((Offer, self._id))

    def __repr__(self) -> str:
        return f"Offer(id={self._id}, title={self._title!r}, type={self._offer_type.value})"
