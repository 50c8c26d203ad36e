"""Pydantic schemas for raw input records."""

from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator

from app.models.voting import VoteOutcome


class RosterRecordSchema(BaseModel):
    """One roster entry. The name comes from the roster key."""

    name: str = Field(min_length=1)
    affiliation: str = Field(alias="party", min_length=1)
    constituency: str = Field(min_length=1)
    holdings: StrictInt = Field(alias="property_count", default=0, ge=0)
    holds_executive_office: StrictBool = Field(alias="minister", default=False)

    class Config:
        populate_by_name = True

    @field_validator("name", "affiliation", "constituency")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class SourcedVoteSchema(BaseModel):
    """One real recorded vote."""

    event_id: str = Field(alias="vote_id", min_length=1)
    outcome: VoteOutcome = Field(alias="vote_cast")

    class Config:
        populate_by_name = True

    @field_validator("outcome", mode="before")
    @classmethod
    def _parse_outcome(cls, value):
        if isinstance(value, VoteOutcome):
            return value
        return VoteOutcome.parse(value)


class ElectoralRecordSchema(BaseModel):
    """Last-election context for a constituency."""

    margin_percentage: float | None = Field(default=None, ge=0)
    votes_to_flip: int | None = Field(alias="votes_needed", default=None, ge=0)

    class Config:
        populate_by_name = True
