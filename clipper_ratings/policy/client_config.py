"""
Client configuration resolver.

Builds per-client setting names and looks them up in the settings provider.
"""

import logging
from typing import Optional
from urllib.parse import urlencode

from clipper_ratings.models.client import ClientConfig, ClientType
from clipper_ratings.models.session import RatingsSession
from clipper_ratings.protocols import SettingsProvider
import config.settings as settings

logger = logging.getLogger(__name__)


def client_type_name(client_type: ClientType) -> str:
    """Member name of a ClientType; any other identity is used as its string form."""
    return getattr(client_type, "name", str(client_type))


def config_key(client_type: ClientType, suffix: str) -> str:
    """Setting name for a client: the ClientType member name plus suffix."""
    return client_type_name(client_type) + suffix


class ClientConfigResolver:
    """
    Resolves ratings settings for a client identity.

    A client with no matching settings is simply not configured:
    ratings disabled and no URLs.
    """

    def __init__(
        self,
        settings_provider: SettingsProvider,
        feedback_base_url: str = settings.FEEDBACK_BASE_URL
    ):
        self.settings_provider = settings_provider
        self.feedback_base_url = feedback_base_url

    def ratings_prompt_enabled_for_client(self, client_type: ClientType) -> bool:
        setting_name = config_key(client_type, settings.RATINGS_ENABLED_SETTING_SUFFIX)
        enabled = self.settings_provider.get_setting(setting_name)
        return enabled is not None and str(enabled).lower() == "true"

    def get_rate_url_if_exists(self, client_type: ClientType) -> Optional[str]:
        setting_name = config_key(client_type, settings.RATE_URL_SETTING_SUFFIX)
        return self.settings_provider.get_setting(setting_name)

    def get_feedback_log_category(self) -> Optional[str]:
        category = self.settings_provider.get_setting(settings.RATINGS_PROMPT_LOG_CATEGORY_SETTING)
        if category:
            return category
        return None

    def get_feedback_url_if_exists(self, session: RatingsSession) -> Optional[str]:
        """
        Feedback page URL tagged with the ratings prompt log category.

        Returns:
            URL string, or None if no log category is configured
        """
        category = self.get_feedback_log_category()
        if category is None:
            logger.debug("No ratings prompt log category configured, no feedback URL")
            return None

        query = urlencode({
            "LogCategory": category,
            "usid": session.session_id,
            "type": client_type_name(session.client_type),
            "version": session.client_version
        })
        return f"{self.feedback_base_url}?{query}"

    def resolve(self, client_type: ClientType) -> ClientConfig:
        return ClientConfig(
            client_type=client_type,
            ratings_prompt_enabled=self.ratings_prompt_enabled_for_client(client_type),
            rate_url=self.get_rate_url_if_exists(client_type),
            feedback_log_category=self.get_feedback_log_category()
        )
