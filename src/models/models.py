from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from utils.constants import MOOD_EMOJIS, STATUS_MAX_LENGTH, StoreColumns


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    def as_pair(self) -> List[float]:
        return [self.lat, self.lng]


class HostUser(BaseModel):
    """User context handed over by the social client host."""

    id: int
    username: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None


class ViewerIdentity(BaseModel):
    user_id: int
    display_name: str


class MoodRecord(BaseModel):
    id: str
    user_id: int
    display_name: str
    emoji: str
    status: Optional[str] = None
    coordinates: Coordinates
    location_label: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "MoodRecord":
        return cls(
            id=str(row[StoreColumns.ID.value]),
            user_id=row[StoreColumns.USER_ID.value],
            display_name=row.get(StoreColumns.USER_NAME.value) or "",
            emoji=row[StoreColumns.EMOJI.value],
            status=row.get(StoreColumns.STATUS.value) or None,
            coordinates=Coordinates(
                lat=row[StoreColumns.LAT.value], lng=row[StoreColumns.LNG.value]
            ),
            location_label=row.get(StoreColumns.LOCATION.value) or None,
            created_at=row.get(StoreColumns.CREATED_AT.value),
        )


class MoodSubmission(BaseModel):
    user_id: int
    display_name: str
    emoji: str
    status: Optional[str] = None
    coordinates: Coordinates
    location_label: Optional[str] = None

    @field_validator("emoji")
    @classmethod
    def _known_emoji(cls, value: str) -> str:
        if value not in MOOD_EMOJIS:
            raise ValueError(f"{value!r} is not an allowed mood emoji")
        return value

    @field_validator("status")
    @classmethod
    def _truncate_status(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value[:STATUS_MAX_LENGTH]
        return value if value.strip() else None

    @field_validator("location_label")
    @classmethod
    def _blank_label_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value

    def to_row(self) -> Dict[str, Any]:
        return {
            StoreColumns.USER_ID.value: self.user_id,
            StoreColumns.USER_NAME.value: self.display_name,
            StoreColumns.EMOJI.value: self.emoji,
            StoreColumns.STATUS.value: self.status,
            StoreColumns.LAT.value: self.coordinates.lat,
            StoreColumns.LNG.value: self.coordinates.lng,
            StoreColumns.LOCATION.value: self.location_label,
        }


class MoodGroup(BaseModel):
    location_label: str
    members: List[MoodRecord]
    representative_emoji: str
    position: Optional[Coordinates] = None
    viewer_record: Optional[MoodRecord] = None

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def is_cluster(self) -> bool:
        return self.count > 1

    @property
    def detail_members(self) -> List[MoodRecord]:
        """Members in popup order: the viewer's own record leads."""
        if self.viewer_record is None:
            return list(self.members)
        rest = [m for m in self.members if m.id != self.viewer_record.id]
        return [self.viewer_record, *rest]


class MapState(BaseModel):
    viewer_id: Optional[int] = None
    records: List[MoodRecord] = Field(default_factory=list)
    positions: Dict[str, Optional[Coordinates]] = Field(default_factory=dict)
    groups: List[MoodGroup] = Field(default_factory=list)
