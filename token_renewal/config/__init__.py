from token_renewal.config.settings import RenewalConfig, RenewalSettings

__all__ = ["RenewalConfig", "RenewalSettings"]
