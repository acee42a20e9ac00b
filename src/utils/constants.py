from enum import Enum

STATUS_MAX_LENGTH = 24
UNKNOWN_USER_NAME = "Anonymous"

MOOD_EMOJIS = [
    "🤩", "😍", "🥰", "😘", "😊", "🙂", "🤗", "🤔", "😐", "😑", "🙄", "😏", "😣", "😥", "😮", "🤐", "😯", "😪", "😫", "🥱",
    "😴", "😌", "😛", "😜", "😝", "🤤", "😒", "😓", "😔", "😕", "🙃", "🤑", "😲", "☹️", "🙁", "😖", "😞", "😟", "😤", "😢",
    "😭", "😦", "😧", "😨", "😩", "🤯", "😬", "😰", "😱", "🥵", "🥶", "😳", "🤪", "😵", "🥴", "😠", "😡", "🤬", "😷", "🤒",
    "🤕", "🤢", "🤮", "🤧", "😇", "🥺", "🤠", "🥳", "😎", "🤓", "🧐", "😋", "😚", "😙", "🥲", "😈", "👿", "💀", "☠️", "👻",
    "👽", "🤖", "💩", "😺", "😸", "😹", "😻", "😼", "😽", "🙀", "😿", "😾", "🙈", "🙉", "🙊", "❤️", "💔", "💕", "💞", "💓", "💗", "💖",
]

STATE_KEYS = [
    "phase",
    "moods",
    "groups",
    "overlay_open",
    "location",
    "location_denied",
    "map_focus",
    "submission_in_progress",
    "initial_load_pending",
]


class Phase(Enum):
    AWAITING_ENVIRONMENT = "awaiting-environment"
    AWAITING_IDENTITY = "awaiting-identity"
    READY = "ready"


class Label(Enum):
    OVERLAY_TITLE = "How is your mood today?"
    STATUS = "Short status (optional)"
    SUBMIT_BUTTON = "Add to Map 🚀"
    CANCEL_BUTTON = "Cancel"
    REFRESH_BUTTON = "Refresh"
    UPDATE_BUTTON = "Update Status"
    FOCUS_BUTTON = "Find me"
    SHARE_BUTTON = "Share my mood"
    LOGIN_BUTTON = "Sign in with Farcaster"
    LOCATION_NEEDED = "Please allow location access!"


class Keys(Enum):
    STATUS = "status"
    EMOJI = "emoji"
    MAP = "mood_map"


class StoreColumns(Enum):
    ID = "id"
    USER_ID = "fid"
    USER_NAME = "user_name"
    EMOJI = "emoji"
    STATUS = "status"
    LAT = "lat"
    LNG = "lng"
    LOCATION = "location"
    CREATED_AT = "created_at"


class LabelComponents(Enum):
    LOCALITY = ["city", "town", "village"]
    REGION = ["state", "province"]
    COUNTRY = ["country"]


class MapDefaults(Enum):
    CENTER = [20, 0]
    ZOOM = 2
    FOCUS_ZOOM = 9
    HEIGHT = 560


class Pages(Enum):
    MAP = {
        "key": "map",
        "title": ":material/public: Mood Map",
    }
    FEED = {
        "key": "feed",
        "title": ":material/dynamic_feed: Recent Moods",
    }
