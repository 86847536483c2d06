"""Domain services."""

from .base import Service
from .community_stats_service import CommunityStatsService
from .engagement import EngagementScorer
from .item_service import ItemService
from .jwt_service import JWTService
from .trending_service import TrendingService
from .voting_service import VotingService

__all__ = [
    "CommunityStatsService",
    "EngagementScorer",
    "ItemService",
    "JWTService",
    "Service",
    "TrendingService",
    "VotingService",
]
