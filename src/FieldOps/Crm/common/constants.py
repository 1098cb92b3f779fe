# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Constants for the FieldOps CRM Web API.

These constants define API version segments, authentication header names and
wire-level formats shared by the request builders.
"""

# API version path segments
API_VERSION_V1 = "v1"
"""Version segment used by every endpoint except attachment reads."""

API_VERSION_V2 = "v2"
"""Version segment used only when fetching record attachments."""

# Authentication headers sent with every request
HEADER_API_KEY = "key"
HEADER_API_SECRET = "secret"

# Status-update timestamps are rendered in this zone when the caller gives no instant
DEFAULT_TIMEZONE = "Asia/Kuala_Lumpur"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Multipart flag values for the attachment ``replace`` part
REPLACE_FLAG_TRUE = "1"
REPLACE_FLAG_FALSE = "0"

# Webhook callback status codes
CALLBACK_STATUS_SUCCESS = 2
CALLBACK_STATUS_FAILED = -1
