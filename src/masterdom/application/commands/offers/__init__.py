"""Offer catalog and response ledger commands."""

from masterdom.application.commands.offers.create_offer_command import (
    CreateOfferCommand,
)
from masterdom.application.commands.offers.delete_offer_command import (
    DeleteOfferCommand,
)
from masterdom.application.commands.offers.respond_to_offer_command import (
    RespondToOfferCommand,
)
from masterdom.application.commands.offers.set_offer_active_command import (
    SetOfferActiveCommand,
)

__all__ = [
    "CreateOfferCommand",
    "DeleteOfferCommand",
    "RespondToOfferCommand",
    "SetOfferActiveCommand",
]
