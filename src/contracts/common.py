"""
Common data types and base models for the impact scorer.
All models use Pydantic V2; Riot payload keys arrive in camelCase.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseContract(BaseModel):
    """Base model for all data contracts with common configuration."""

    model_config = ConfigDict(
        # Accept camelCase Riot keys and snake_case Python names alike
        alias_generator=to_camel,
        populate_by_name=True,
        # Use enum values in JSON
        use_enum_values=True,
        # Records are snapshots of a finished match
        frozen=True,
        # Match-V5 payloads carry far more fields than scoring reads
        extra="ignore",
    )
