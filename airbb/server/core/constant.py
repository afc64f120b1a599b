"""
Server-wide constants.
"""

PROJECT_NAME = "AirBB"
API_V1_STR = "/api/v1"
ADMIN_PREFIX = f"{API_V1_STR}/admin"
