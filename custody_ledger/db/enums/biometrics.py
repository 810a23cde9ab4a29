"""Biometric enums (photos and fingerprints)."""

from enum import Enum


class SubjectType(str, Enum):
    """Owner of a biometric record."""

    INMATE = "inmate"
    OFFICER = "officer"


class PhotoType(str, Enum):
    MUGSHOT_FRONT = "mugshot_front"
    MUGSHOT_SIDE = "mugshot_side"
    MUGSHOT_3QUARTER = "mugshot_3quarter"
    DOCUMENT = "document"
    PROFILE = "profile"  # officers


class PhotoProvider(str, Enum):
    """Where the photo bytes live."""

    INTERNAL = "internal"  # built-in camera capture, stored in blob storage
    EXTERNAL_URL = "external_url"  # hosted elsewhere
    UPLOAD = "upload"  # uploaded file (storage key) or inline preview


class Finger(str, Enum):
    RIGHT_THUMB = "right_thumb"
    RIGHT_INDEX = "right_index"
    RIGHT_MIDDLE = "right_middle"
    RIGHT_RING = "right_ring"
    RIGHT_LITTLE = "right_little"
    LEFT_THUMB = "left_thumb"
    LEFT_INDEX = "left_index"
    LEFT_MIDDLE = "left_middle"
    LEFT_RING = "left_ring"
    LEFT_LITTLE = "left_little"


class FingerprintProvider(str, Enum):
    INTERNAL = "internal"  # built-in scanner, stored in blob storage
    EXTERNAL = "external"  # third-party scanner, template or provider reference
    UPLOAD = "upload"  # template file uploaded
