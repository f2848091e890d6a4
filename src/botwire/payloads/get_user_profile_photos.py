from __future__ import annotations

from pydantic import Field

from botwire.payloads.base import JsonPayload
from botwire.types import UserProfilePhotos


class GetUserProfilePhotos(JsonPayload):
    """Get a list of profile pictures for a user."""

    NAME = "getUserProfilePhotos"
    Output = UserProfilePhotos

    #: Unique identifier of the target user.
    user_id: int
    #: Sequential number of the first photo to be returned. All photos by default.
    offset: int | None = Field(default=None, ge=0)
    #: Number of photos to retrieve, 1-100. Defaults to 100 server-side.
    limit: int | None = Field(default=None, ge=1, le=100)
