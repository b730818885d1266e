from devlife.core.api.base import APIError, BaseAPIClient
from devlife.core.api.developerslife import DevelopersLifeClient

__all__ = [
    "APIError",
    "BaseAPIClient",
    "DevelopersLifeClient",
]
