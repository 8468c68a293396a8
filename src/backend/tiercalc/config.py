"""TierCalcSettings -- tier calculator configuration.

All environment variables are read via pydantic-settings. Nothing is required;
the defaults describe the provider's "db-custom" tier family.

Provider constraints (vCPU range, memory granularity, GB/vCPU band) are not
configurable and live in tiercalc.services.constraints.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class TierCalcSettings(BaseSettings):
    """Tier calculator settings, loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Literal prefix of the tier identifier: <prefix>-<vcpu>-<memory_mb>
    TIER_PREFIX: str = "db-custom"

    # Memory per vCPU used for default recommendations
    TARGET_GB_PER_VCPU: float = 1.5

    # Logging (CLI)
    LOG_LEVEL: str = "WARNING"

    # HTTP API
    API_TITLE: str = "Tier Calculator"


settings = TierCalcSettings()
