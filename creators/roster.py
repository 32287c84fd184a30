"""Roster search and engagement maths for the creator dashboard."""

from dataclasses import dataclass, field


@dataclass
class CreatorStats:
    id: str
    name: str
    views: int
    engagement: int  # likes + comments + shares
    engagement_rate: float  # percent of views, 2 dp


@dataclass
class RosterSummary:
    creators: int = 0
    total_views: int = 0
    total_likes: int = 0
    total_comments: int = 0
    total_shares: int = 0
    engagement_rate: float = 0.0
    ranking: list[CreatorStats] = field(default_factory=list)


def engagement_rate(engagement: int, views: int) -> float:
    """Engagement as a percentage of views, rounded to 2 dp. 0 when there are no views."""
    if not views:
        return 0.0
    return round(engagement / views * 100, 2)


def matches_creator(creator, term: str | None) -> bool:
    needle = (term or "").strip().lower()
    if not needle:
        return True
    haystacks = (creator.name, creator.niche, creator.username)
    return any(needle in (value or "").lower() for value in haystacks)


def filter_creators(creators: list, term: str | None = None, category: str | None = None) -> list:
    """Search by name, niche or handle, optionally narrowed to one product category."""
    return [
        c for c in creators
        if matches_creator(c, term) and (not category or c.product_category == category)
    ]


def creator_stats(creator) -> CreatorStats:
    views = creator.avg_views or 0
    engagement = (creator.avg_likes or 0) + (creator.avg_comments or 0) + (creator.avg_shares or 0)
    return CreatorStats(
        id=str(creator.id),
        name=creator.name,
        views=views,
        engagement=engagement,
        engagement_rate=engagement_rate(engagement, views),
    )


def summarize_roster(creators: list) -> RosterSummary:
    """Totals across the roster plus creators ranked by engagement rate, best first."""
    summary = RosterSummary(creators=len(creators))
    for c in creators:
        summary.total_views += c.avg_views or 0
        summary.total_likes += c.avg_likes or 0
        summary.total_comments += c.avg_comments or 0
        summary.total_shares += c.avg_shares or 0

    engagement = summary.total_likes + summary.total_comments + summary.total_shares
    summary.engagement_rate = engagement_rate(engagement, summary.total_views)
    summary.ranking = sorted(
        (creator_stats(c) for c in creators),
        key=lambda s: (-s.engagement_rate, -s.views, s.name),
    )
    return summary
