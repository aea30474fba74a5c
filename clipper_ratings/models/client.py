"""
Client data models.

Client identities and the per-client ratings configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ClientType(Enum):
    """Kinds of clipper clients. Setting names are built from the member name."""
    Bookmarklet = 0
    ChromeExtension = 1
    EdgeExtension = 2
    FirefoxExtension = 3
    SafariExtension = 4


@dataclass
class ClientConfig:
    """
    Ratings configuration resolved for one client identity.
    """
    client_type: ClientType
    ratings_prompt_enabled: bool = False
    rate_url: Optional[str] = None  # Store page to send happy users to
    feedback_log_category: Optional[str] = None  # Log category for the feedback page
