"""Application layer ports (read side)."""

from masterdom.application.ports.chat_read_port import ChatReadPort
from masterdom.application.ports.offer_read_port import OfferReadPort

__all__ = ["ChatReadPort", "OfferReadPort"]
