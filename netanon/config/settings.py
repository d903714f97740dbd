from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HASH_SALT = "aws-network-flow-visualizer-salt"


class Settings(BaseSettings):
    """Engine defaults loaded from environment variables (or a .env file)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    anonymize_preserve_structure: bool = True
    anonymize_hash_salt: str = DEFAULT_HASH_SALT

    anonymize_ips: bool = True
    anonymize_account_ids: bool = True
    anonymize_instance_ids: bool = True
    anonymize_vpc_ids: bool = True
    anonymize_subnet_ids: bool = True
    anonymize_security_group_ids: bool = True
    anonymize_transit_gateway_ids: bool = True
    anonymize_route_table_ids: bool = False
    anonymize_internet_gateway_ids: bool = False
    anonymize_nat_gateway_ids: bool = False
    anonymize_vpn_connection_ids: bool = False
    anonymize_vpn_gateway_ids: bool = False
    anonymize_usernames: bool = False
    anonymize_role_names: bool = False
    anonymize_emails: bool = False
    anonymize_domains: bool = False
