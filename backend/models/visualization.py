"""Pydantic schemas for the visualization page aggregates."""
from pydantic import BaseModel


class DecadeCountryShare(BaseModel):
    decade: str
    shares: dict[str, float]        # country → % of the decade's articles


class DecadeAuthorCount(BaseModel):
    decade: str
    count: int


class VisualizationData(BaseModel):
    country_share_by_decade: list[DecadeCountryShare]
    unique_authors_by_decade: list[DecadeAuthorCount]
    country_contributions: dict[str, int]
    language_distribution: dict[str, int]
