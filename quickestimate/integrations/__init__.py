"""Quick Estimate integration clients (photo storage, e-mail)."""

from quickestimate.integrations.base import BaseIntegration
from quickestimate.integrations.sendgrid import EmailClient
from quickestimate.integrations.storage import StorageClient

__all__ = [
    "BaseIntegration",
    "EmailClient",
    "StorageClient",
]
