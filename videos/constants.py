"""
Video Module Constants

Video endpoints and type definitions for settable video properties.
Each enum value is the literal string the API expects on the wire.
"""

from enum import Enum

# =============================================================================
# ENDPOINTS
# =============================================================================

# Videos of the authenticated user: listing, single fetch, upload sessions
MY_VIDEOS_PATH = "/me/videos"

# Any video by id: property PATCH target
VIDEOS_PATH = "/videos"

# =============================================================================
# EMBED PLAYER
# =============================================================================


class EmbedTitleDisplay(Enum):
    """Show, hide, or let the user decide (embed.title.name/owner/portrait)"""

    USER = "user"
    SHOW = "show"
    HIDE = "hide"


# =============================================================================
# LICENSING
# =============================================================================


class VideoLicense(Enum):
    """Creative Commons license"""

    BY = "by"
    BY_SA = "by-sa"
    BY_ND = "by-nd"
    BY_NC = "by-nc"
    BY_NC_SA = "by-nc-sa"
    BY_NC_ND = "by-nc-nd"
    CC0 = "cc0"


# =============================================================================
# PRIVACY
# =============================================================================


class PrivacyComments(Enum):
    """Who can comment on the video"""

    ANYBODY = "anybody"
    NOBODY = "nobody"
    CONTACTS = "contacts"


class PrivacyEmbed(Enum):
    """Where the video can be embedded"""

    PUBLIC = "public"
    PRIVATE = "private"
    WHITELIST = "whitelist"


class PrivacyView(Enum):
    """Who can view the video (PASSWORD requires the password property)"""

    ANYBODY = "anybody"
    NOBODY = "nobody"
    CONTACTS = "contacts"
    PASSWORD = "password"
    USERS = "users"
    UNLISTED = "unlisted"
    DISABLE = "disable"


# =============================================================================
# RATINGS
# =============================================================================


class MpaaRating(Enum):
    G = "g"
    PG = "pg"
    PG13 = "pg13"
    R = "r"
    NC17 = "nc17"
    X = "x"


class MpaaReason(Enum):
    AT = "at"
    N = "n"
    BN = "bn"
    SS = "ss"
    SL = "sl"
    V = "v"


class TvRating(Enum):
    Y = "tv-y"
    Y7 = "tv-y7"
    Y7_FV = "tv-y7-fv"
    G = "tv-g"
    PG = "tv-pg"
    T14 = "tv-14"
    MA = "tv-ma"


class TvReason(Enum):
    D = "d"
    FV = "fv"
    L = "l"
    SS = "ss"
    V = "v"


# =============================================================================
# 360 VIDEO
# =============================================================================


class SpatialProjection(Enum):
    DOME = "dome"
    CUBICAL = "cubical"
    CYLINDRICAL = "cylindrical"
    EQUIRECTANGULAR = "equirectangular"
    PYRAMID = "pyramid"


class SpatialStereoFormat(Enum):
    LEFT_RIGHT = "left-right"
    MONO = "mono"
    TOP_BOTTOM = "top-bottom"
