from html import escape
from models.models import MoodGroup

EMOJI_ICON_HTML = (
    '<div style="font-size: 40px; line-height: 40px; '
    'filter: drop-shadow(0 0 12px black);">{emoji}</div>'
)
COUNT_ICON_HTML = (
    '<div style="background:#a855f7; color:white; font-weight:bold; '
    "font-size:20px; width:40px; height:40px; border-radius:50%; display:flex; "
    "align-items:center; justify-content:center; border:4px solid black; "
    'box-shadow: 0 0 20px #a855f7;">{count}</div>'
)


def marker_html(group: MoodGroup) -> str:
    if group.is_cluster:
        return COUNT_ICON_HTML.format(count=group.count)
    return EMOJI_ICON_HTML.format(emoji=group.representative_emoji)


def popup_html(group: MoodGroup) -> str:
    header = ""
    if group.is_cluster:
        header = (
            '<div style="text-align:center; color:#c084fc; font-weight:bold; '
            f'margin-bottom:8px;">{group.count} moods here</div>'
        )
    cells = []
    for member in group.detail_members:
        status = ""
        if member.status:
            status = (
                '<div style="font-size:11px; color:#9ca3af; font-style:italic;">'
                f"&quot;{escape(member.status)}&quot;</div>"
            )
        cells.append(
            '<div style="text-align:center; padding:4px;">'
            f'<div style="font-size:36px;">{member.emoji}</div>'
            f'<div style="font-size:12px;">{escape(member.display_name)}</div>'
            f"{status}</div>"
        )
    return (
        '<div style="min-width:180px;">'
        f"{header}"
        f'<div style="font-size:12px; color:#6b7280; text-align:center;">{escape(group.location_label)}</div>'
        '<div style="display:grid; grid-template-columns:repeat(3, 1fr); gap:6px;">'
        f"{''.join(cells)}</div></div>"
    )
