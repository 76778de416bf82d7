from enum import Enum


class OfferType(str, Enum):
    """Kind of posting.

    SERVICE_OFFER is a master advertising availability; REQUEST_FOR_SERVICE
    is a client looking for someone to do a job.
    """

    SERVICE_OFFER = "service_offer"
    REQUEST_FOR_SERVICE = "request_for_service"
