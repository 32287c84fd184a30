"""Creator roster: profiles, search and engagement stats."""

from creators.roster import CreatorStats, RosterSummary, creator_stats, engagement_rate, filter_creators, summarize_roster

__all__ = ["CreatorStats", "RosterSummary", "creator_stats", "engagement_rate", "filter_creators", "summarize_roster"]
