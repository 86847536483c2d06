"""Application layer DI providers."""

from dishka import Scope, provide

from promptu.application.usecase.item import RecordEngagementUseCase
from promptu.application.usecase.stats import (
    GetActivityUseCase,
    GetCommunityStatsUseCase,
)
from promptu.application.usecase.trending import GetHotItemsUseCase, GetTrendingUseCase
from promptu.application.usecase.vote import GetVoteStatusUseCase, ToggleVoteUseCase
from promptu.config import TrendingSettings
from promptu.domain.repository import UnitOfWork
from promptu.domain.service import (
    CommunityStatsService,
    ItemService,
    TrendingService,
    VotingService,
)
from promptu.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(
        self, voting_service: VotingService, unit_of_work: UnitOfWork
    ) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(
            voting_service=voting_service, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_status_use_case(
        self, voting_service: VotingService
    ) -> GetVoteStatusUseCase:
        """Provide get vote status use case."""
        return GetVoteStatusUseCase(voting_service=voting_service)

    # Trending use cases
    @provide(scope=Scope.REQUEST)
    def get_trending_use_case(
        self,
        trending_service: TrendingService,
        voting_service: VotingService,
        settings: TrendingSettings,
    ) -> GetTrendingUseCase:
        """Provide get trending use case."""
        return GetTrendingUseCase(
            trending_service=trending_service,
            voting_service=voting_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_hot_items_use_case(
        self, trending_service: TrendingService, settings: TrendingSettings
    ) -> GetHotItemsUseCase:
        """Provide get hot items use case."""
        return GetHotItemsUseCase(trending_service=trending_service, settings=settings)

    # Stats use cases
    @provide(scope=Scope.REQUEST)
    def get_community_stats_use_case(
        self, community_stats_service: CommunityStatsService
    ) -> GetCommunityStatsUseCase:
        """Provide get community stats use case."""
        return GetCommunityStatsUseCase(community_stats_service=community_stats_service)

    @provide(scope=Scope.REQUEST)
    def get_activity_use_case(
        self, community_stats_service: CommunityStatsService
    ) -> GetActivityUseCase:
        """Provide get activity use case."""
        return GetActivityUseCase(community_stats_service=community_stats_service)

    # Item use cases
    @provide(scope=Scope.REQUEST)
    def get_record_engagement_use_case(
        self, item_service: ItemService, unit_of_work: UnitOfWork
    ) -> RecordEngagementUseCase:
        """Provide record engagement use case."""
        return RecordEngagementUseCase(
            item_service=item_service, unit_of_work=unit_of_work
        )
