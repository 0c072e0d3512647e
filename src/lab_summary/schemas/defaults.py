"""Fallback values shared by every language variant."""

DEFAULT_ICON = "🧪"
DEFAULT_STATUS = "normal"

STATUS_LOW = "low"
STATUS_NORMAL = "normal"
STATUS_HIGH = "high"

# English placeholders; other variants carry their own in their vocabulary
NO_READING = "no reading available"
UNSPECIFIED_RESULT = "Not specified"
