from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Tuple

Vote = Literal["aye", "nay", "abstain"]


class SimConfig(BaseModel):
    num_seats: int = Field(20, ge=1, le=500)
    num_parties: int = Field(3, ge=1, le=50)
    # None means "run until the operator quits".
    sessions: Optional[int] = Field(None, ge=1, le=10000)
    seed: Optional[int] = None
    exclude_advocate: bool = Field(False, description="Leave the advocate out of the per-legislator tally pass")
    pause: bool = True
    adjectives_path: Optional[str] = None
    nouns_path: Optional[str] = None


class VoteTally(BaseModel):
    aye: int = 0
    nay: int = 0
    abstain: int = 0

    def record(self, vote: Vote) -> None:
        setattr(self, vote, getattr(self, vote) + 1)


class LegislatureStats(BaseModel):
    proposed: int
    passed: int
    failed: int
    # None until the first session completes.
    pass_percentage: Optional[float] = None


class SessionResult(BaseModel):
    session_index: int
    bill_name: str = Field(..., examples=["Renewable Housing Bill"])
    bill_position: Tuple[float, float]
    advocate: str
    votes: List[Vote]
    tally: VoteTally
    passed: bool
    stats: LegislatureStats


class PartySummary(BaseModel):
    name: str
    # Independents have no shared center.
    position: Optional[Tuple[float, float]] = None
    members: int
