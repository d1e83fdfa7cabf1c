"""
Match information data contracts for Riot API Match-V5.
Only the fields the impact summary reads are declared.
"""

from pydantic import Field

from .common import BaseContract


class Team(BaseContract):
    """Team information in a match."""

    team_id: int = Field(..., description="100 (blue) or 200 (red)")
    win: bool = Field(False, description="Whether this team won")


class Participant(BaseContract):
    """Participant (player) information in a match."""

    # Identity
    puuid: str = Field(..., description="Player's PUUID")
    summoner_name: str = Field("", description="Summoner name")
    participant_id: int = Field(..., ge=1)
    team_id: int = Field(..., description="100 (blue) or 200 (red)")

    # Champion and role
    champion_name: str = Field("", description="Champion name")
    team_position: str = Field("", description="Assigned position")

    # Per-match totals
    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    vision_score: int = Field(0, ge=0)
    total_damage_dealt_to_champions: int = Field(0, ge=0)

    @property
    def kda_text(self) -> str:
        """Kills/deaths/assists as displayed, e.g. "7/2/11"."""
        return f"{self.kills}/{self.deaths}/{self.assists}"


class MatchInfo(BaseContract):
    """Match information block (`info` in Match-V5)."""

    game_duration: int = Field(..., ge=0, description="Game duration in seconds")
    participants: list[Participant] = Field(default_factory=list)
    teams: list[Team] = Field(default_factory=list)

    def get_participant_by_puuid(self, puuid: str) -> Participant | None:
        """Get participant by PUUID."""
        for participant in self.participants:
            if participant.puuid == puuid:
                return participant
        return None

    def get_team(self, team_id: int) -> Team | None:
        for team in self.teams:
            if team.team_id == team_id:
                return team
        return None


class MatchMetadata(BaseContract):
    """Match metadata."""

    data_version: str = Field("", description="Data version")
    match_id: str = Field(..., description="Match ID")
    participants: list[str] = Field(default_factory=list, description="Participant PUUIDs")


class Match(BaseContract):
    """Complete match record from Riot API."""

    metadata: MatchMetadata | None = None
    info: MatchInfo
