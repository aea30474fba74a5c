"""
Stored rating record model.

Key names and string encodings of the persisted ratings state, and the
conversion to native types right after the storage boundary.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from clipper_ratings.utils.parsing import parse_bool_flag, parse_int


class StorageKeys:
    """Persisted key names. These must not change: existing stores use them."""
    DO_NOT_PROMPT_RATINGS = "doNotPromptRatings"
    LAST_BAD_RATING_DATE = "lastBadRatingDate"
    LAST_BAD_RATING_VERSION = "lastBadRatingVersion"
    LAST_SEEN_VERSION = "lastSeenVersion"
    NUM_SUCCESSFUL_CLIPS = "numSuccessfulClips"

    @classmethod
    def ratings_prompt_keys(cls) -> List[str]:
        return [
            cls.DO_NOT_PROMPT_RATINGS,
            cls.LAST_BAD_RATING_DATE,
            cls.LAST_BAD_RATING_VERSION,
            cls.LAST_SEEN_VERSION,
            cls.NUM_SUCCESSFUL_CLIPS,
        ]


@dataclass
class StoredRatingRecord:
    """
    Ratings state read from storage, converted to native types.

    None means "never recorded". A date or clip count that does not parse
    as an integer is also None.
    """
    do_not_prompt_ratings: bool = False
    last_bad_rating_date: Optional[int] = None  # epoch milliseconds
    last_bad_rating_version: Optional[str] = None  # "X.Y.Z", validated by the policies
    last_seen_version: Optional[str] = None  # "X.Y.Z", validated by the policies
    num_successful_clips: Optional[int] = None

    @classmethod
    def from_storage(cls, raw: Dict[str, Optional[str]]) -> "StoredRatingRecord":
        """Create StoredRatingRecord from raw stored strings keyed by StorageKeys."""
        return cls(
            do_not_prompt_ratings=parse_bool_flag(raw.get(StorageKeys.DO_NOT_PROMPT_RATINGS)),
            last_bad_rating_date=parse_int(raw.get(StorageKeys.LAST_BAD_RATING_DATE)),
            last_bad_rating_version=raw.get(StorageKeys.LAST_BAD_RATING_VERSION),
            last_seen_version=raw.get(StorageKeys.LAST_SEEN_VERSION),
            num_successful_clips=parse_int(raw.get(StorageKeys.NUM_SUCCESSFUL_CLIPS))
        )
