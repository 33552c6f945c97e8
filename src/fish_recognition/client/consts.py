"""Constants shared across the fish recognition client."""

# Upload size limits, checked before any decode work
MIN_IMAGE_BYTES = 1024
MAX_IMAGE_BYTES = 4 * 1024 * 1024

# The classifier rejects request bodies whose image field exceeds 4 MiB
TRANSPORT_CEILING_BYTES = 4 * 1024 * 1024
TARGET_IMAGE_BYTES = int(3.5 * 1024 * 1024)

# JPEG quality bounds, and the quality used when normalizing to JPEG
MIN_QUALITY = 1
MAX_QUALITY = 100
NORMALIZE_QUALITY = 95

# Descending quality search used when compressing to budget
START_QUALITY = 90
FLOOR_QUALITY = 50
QUALITY_STEP = 5

# Remote provider
TOKEN_URL = "https://aip.baidubce.com/oauth/2.0/token"
CLASSIFY_URL = "https://aip.baidubce.com/rest/2.0/image-classify/v1/animal"
TOKEN_TIMEOUT = 5.0
CLASSIFY_TIMEOUT = 15.0
TOP_NUM = 6
BAIKE_NUM = 1

API_KEY_ENV = "BAIDU_AI_API_KEY"
SECRET_KEY_ENV = "BAIDU_AI_SECRET_KEY"  # noqa: S105 - env var name
