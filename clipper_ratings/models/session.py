"""
Session data model.

Holds the ratings prompt decision for one run of the client.
"""

from dataclasses import dataclass, field
from typing import Optional
import uuid

from clipper_ratings.models.client import ClientType


@dataclass
class RatingsSession:
    """
    Session-scoped ratings prompt state.

    show_ratings_prompt is tri-state: None until the engine decides,
    then True or False for the rest of the session.
    """
    client_type: ClientType
    client_version: str  # "X.Y.Z" of the running client
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    show_ratings_prompt: Optional[bool] = None

    def has_decision(self) -> bool:
        return self.show_ratings_prompt is not None

    def cache_decision(self, decision: bool) -> None:
        """
        Store the decision for this session.

        Raises:
            ValueError: If a decision was already cached
        """
        if self.show_ratings_prompt is not None:
            raise ValueError(
                f"Ratings prompt decision already cached for session {self.session_id}"
            )
        self.show_ratings_prompt = bool(decision)
