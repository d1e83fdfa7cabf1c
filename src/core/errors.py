"""Exceptions raised by the impact analysis pipeline."""


class ImpactAnalysisError(Exception):
    """Base exception for impact analysis failures."""

    pass


class ReferenceParticipantNotFound(ImpactAnalysisError):
    """Raised when the player key matches no participant in the match roster."""

    def __init__(self, match_id: str, puuid: str) -> None:
        self.match_id = match_id
        self.puuid = puuid
        super().__init__(f"User not found in match {match_id}")


class InvalidMatchDataError(ImpactAnalysisError):
    """Raised when a raw match or timeline payload fails contract validation."""

    def __init__(self, record: str, detail: str) -> None:
        self.record = record
        super().__init__(f"Invalid {record} payload: {detail}")
