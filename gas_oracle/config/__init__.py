from pydantic_settings import SettingsConfigDict

from gas_oracle.config.logger import LoggerConfig
from gas_oracle.config.oracles import OraclesConfig


class Config(LoggerConfig, OraclesConfig):
    VERSION: str = '0.1.0'

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')


config = Config()
