from typing import Dict, Iterable, List, Mapping, Optional
from models.models import Coordinates, MoodGroup, MoodRecord


def group_moods(
    records: Iterable[MoodRecord],
    positions: Mapping[str, Optional[Coordinates]],
    viewer_id: Optional[int] = None,
) -> List[MoodGroup]:
    """Bucket records by exact location label, in first-seen order.

    Records without a label are left out. A group's position is the resolved
    coordinates of its label, or None while the label is unresolved.
    """
    buckets: Dict[str, List[MoodRecord]] = {}
    for record in records:
        if not record.location_label or not record.location_label.strip():
            continue
        buckets.setdefault(record.location_label, []).append(record)

    groups = []
    for label, members in buckets.items():
        viewer_record = None
        if viewer_id is not None:
            viewer_record = next(
                (m for m in members if m.user_id == viewer_id), None
            )
        representative = viewer_record or members[0]
        groups.append(
            MoodGroup(
                location_label=label,
                members=members,
                representative_emoji=representative.emoji,
                position=positions.get(label),
                viewer_record=viewer_record,
            )
        )
    return groups


def renderable_groups(groups: Iterable[MoodGroup]) -> List[MoodGroup]:
    return [g for g in groups if g.position is not None]


def find_viewer_group(groups: Iterable[MoodGroup]) -> Optional[MoodGroup]:
    return next((g for g in groups if g.viewer_record is not None), None)
