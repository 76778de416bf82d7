"""DTOs for the admin back-office."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminStatsDTO:
    """Platform-wide counters."""

    total_users: int
    total_offers: int
    total_service_requests: int
    total_service_offers: int
