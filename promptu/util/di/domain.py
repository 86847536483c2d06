"""Domain layer DI providers."""

from dishka import Scope, provide

from promptu.config import AuthSettings, TrendingSettings
from promptu.domain.repository import (
    ItemRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from promptu.domain.service import (
    CommunityStatsService,
    EngagementScorer,
    ItemService,
    JWTService,
    TrendingService,
    VotingService,
)
from promptu.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_engagement_scorer(self, settings: TrendingSettings) -> EngagementScorer:
        """Provide engagement scorer (stateless)."""
        return EngagementScorer(settings=settings)

    @provide
    def get_item_service(self, item_repository: ItemRepository) -> ItemService:
        """Provide item domain service."""
        return ItemService(item_repository=item_repository)

    @provide
    def get_voting_service(
        self,
        vote_repository: VoteRepository,
        item_repository: ItemRepository,
        item_service: ItemService,
        unit_of_work: UnitOfWork,
    ) -> VotingService:
        """Provide voting domain service."""
        return VotingService(
            vote_repository=vote_repository,
            item_repository=item_repository,
            item_service=item_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_trending_service(
        self,
        item_repository: ItemRepository,
        scorer: EngagementScorer,
        settings: TrendingSettings,
    ) -> TrendingService:
        """Provide trending domain service."""
        return TrendingService(
            item_repository=item_repository, scorer=scorer, settings=settings
        )

    @provide
    def get_community_stats_service(
        self, item_repository: ItemRepository, user_repository: UserRepository
    ) -> CommunityStatsService:
        """Provide community stats domain service."""
        return CommunityStatsService(
            item_repository=item_repository, user_repository=user_repository
        )
