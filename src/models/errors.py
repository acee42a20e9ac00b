class MoodMapError(Exception):
    """Base class for errors raised by the mood map."""


class HostEnvironmentUnavailable(MoodMapError):
    """The app is not running inside its social client host."""


class IdentityUnavailable(MoodMapError):
    """The viewer is not signed in or has no social user ID."""


class GeocoderNotConfigured(MoodMapError):
    """No geocoding API key is configured."""


class MoodStoreError(MoodMapError):
    """Reading from or writing to the moods table failed."""


class InvalidMoodSubmission(MoodMapError):
    """A mood submission is missing required data or uses an unknown emoji."""
