"""Runtime configuration for the NMEA simulator."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="NMEA_SIMULATOR_", env_file=".env", extra="ignore")

    app_name: str = "nmea-simulator"
    log_level: str = "INFO"
    can_interface: str = Field(default="can0", description="CAN interface connected to the NMEA 2000 network.")
    serial_baud: int = 4800
    transport_backend: str = Field(
        default="module",
        description="'module' to transmit through transport_module, 'echo' for a dry run.",
    )
    transport_module: str = Field(
        default="nmea2000",
        description="Importable module exposing connect(interface) for the NMEA 2000 network.",
    )
    unique_number: int = Field(default=120, ge=0, lt=1 << 21)


settings = Settings()
