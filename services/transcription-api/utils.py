import uuid
from pathlib import PurePath

MAX_SUFFIX_LENGTH = 10


def temporary_object_name(original_name: str, prefix: str = "") -> str:
    """
    Derives a collision-free storage name for an uploaded file.

    Only the extension of the client filename survives, and only when it is
    a short alphanumeric one; the rest is a random UUID so client input
    never becomes a path component.
    """
    suffix = PurePath(original_name.replace("\\", "/")).suffix.lower()
    if len(suffix) > MAX_SUFFIX_LENGTH or not suffix[1:].isalnum():
        suffix = ""
    return f"{prefix}{uuid.uuid4().hex}{suffix}"
